"""Split a model response into item blocks and blocks into labelled fields."""

from __future__ import annotations

import re
from typing import Dict, List, Optional

from foodlog.normalize.errors import StructuralError, item_suffix
from foodlog.normalize.vocab import KNOWN_FIELDS

_FIELD_LINE = re.compile(r"^([^:]+):\s*(.*)$")


def split_items(raw_text: str) -> List[str]:
    """Return the non-empty blocks of ``raw_text`` separated by blank lines."""

    normalized = raw_text.replace("\r\n", "\n").replace("\r", "\n").strip()
    if not normalized:
        return []
    blocks = (block.strip() for block in re.split(r"\n\s*\n", normalized))
    return [block for block in blocks if block]


def parse_block(block: str, item_index: Optional[int] = None) -> Dict[str, str]:
    """Parse ``Key: value`` lines into a mapping, rejecting unknown keys."""

    fields: Dict[str, str] = {}
    for raw_line in block.split("\n"):
        line = raw_line.strip()
        if not line:
            continue
        match = _FIELD_LINE.match(line)
        if not match:
            raise StructuralError(
                f'Invalid line format{item_suffix(item_index)}: "{line}"',
                item_index=item_index,
                raw_value=line,
            )
        key = match.group(1).strip()
        if key not in KNOWN_FIELDS:
            raise StructuralError(
                f'Unexpected field "{key}"{item_suffix(item_index)}.',
                item_index=item_index,
                field=key,
                raw_value=line,
            )
        fields[key] = match.group(2).strip()
    return fields


__all__ = ["split_items", "parse_block"]
