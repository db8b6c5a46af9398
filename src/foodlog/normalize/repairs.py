"""Ordered text repairs for quantity glitches the model is known to emit.

Each rule rewrites an ``<amount> <stray number> <unit>`` shape into a plain
``<amount> <unit>``. Rules run in order and every matching rule is applied, so a
new glitch pattern is handled by appending a rule to ``QUANTITY_REPAIRS``.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Iterable

logger = logging.getLogger(__name__)

# A unit phrase starts with something that cannot continue a number.
_UNIT = r"(?P<unit>[^\d\s/.,-].*)"


@dataclass(frozen=True)
class RepairRule:
    name: str
    pattern: re.Pattern[str]
    replacement: str

    def apply(self, text: str) -> str:
        return self.pattern.sub(self.replacement, text)


QUANTITY_REPAIRS: tuple[RepairRule, ...] = (
    # "1 2 serving" is a half whose slash got lost.
    RepairRule(
        name="lost-fraction-slash",
        pattern=re.compile(rf"^1 (?P<den>[234]) {_UNIT}$"),
        replacement=r"1/\g<den> \g<unit>",
    ),
    # "2 2 each" repeats the amount.
    RepairRule(
        name="repeated-amount",
        pattern=re.compile(rf"^(?P<amount>\d+(?:\.\d+)?) (?P=amount) {_UNIT}$"),
        replacement=r"\g<amount> \g<unit>",
    ),
    # "0.5 5 serving" echoes the decimal digits as an integer.
    RepairRule(
        name="decimal-echo",
        pattern=re.compile(rf"^(?P<amount>\d*\.\d+) \d+ {_UNIT}$"),
        replacement=r"\g<amount> \g<unit>",
    ),
)


def collapse_whitespace(text: str) -> str:
    return re.sub(r"\s+", " ", text).strip()


def repair_quantity(text: str, rules: Iterable[RepairRule] = QUANTITY_REPAIRS) -> str:
    """Apply ``rules`` left to right to a whitespace-collapsed quantity phrase."""

    repaired = collapse_whitespace(text)
    for rule in rules:
        updated = rule.apply(repaired)
        if updated != repaired:
            logger.debug("Quantity repair %s: %r -> %r", rule.name, repaired, updated)
            repaired = updated
    return repaired


__all__ = ["RepairRule", "QUANTITY_REPAIRS", "collapse_whitespace", "repair_quantity"]
