"""Strict normalization entry points: raw model text in, canonical diary text out."""

from __future__ import annotations

import logging
from typing import List

from foodlog.models.food import FoodItemRecord
from foodlog.normalize.blocks import parse_block, split_items
from foodlog.normalize.errors import NormalizationError, StructuralError
from foodlog.normalize.normalizer import normalize_fields
from foodlog.normalize.serializer import serialize_items

logger = logging.getLogger(__name__)


def normalize_items(raw_text: str) -> List[FoodItemRecord]:
    """Parse and validate every item in ``raw_text``.

    Items are processed in textual order and the first failure aborts the whole
    batch; no records are returned for a batch with any invalid item.
    """

    blocks = split_items(raw_text)
    if not blocks:
        raise StructuralError("No items found.")

    records: List[FoodItemRecord] = []
    for item_index, block in enumerate(blocks, start=1):
        try:
            fields = parse_block(block, item_index)
            records.append(normalize_fields(fields, item_index))
        except NormalizationError as exc:
            logger.info(
                "Rejected batch at item %s of %s: %s",
                item_index,
                len(blocks),
                exc,
                extra={"item_index": item_index, "field": exc.field, "error_kind": exc.kind},
            )
            raise

    logger.info("Normalized %s food item(s)", len(records))
    return records


def normalize_response(raw_text: str) -> str:
    """Return the canonical diary text for ``raw_text`` or raise ``NormalizationError``."""

    return serialize_items(normalize_items(raw_text))


__all__ = ["normalize_items", "normalize_response"]
