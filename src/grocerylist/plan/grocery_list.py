"""Merge pooled ingredient lines into grocery-list entries."""

import math
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any, NamedTuple

from grocerylist.logging_config import get_logger
from grocerylist.normalize.categories import Category, categorize
from grocerylist.normalize.names import normalize_name
from grocerylist.normalize.parsing import parse_ingredient
from grocerylist.normalize.scaling import display_unit, format_quantity
from grocerylist.normalize.units import canonical_unit

logger = get_logger(__name__)


class AggregationKey(NamedTuple):
    """Merge bucket: normalized name plus the (singular) unit token."""

    name: str
    unit: str


@dataclass(frozen=True)
class MergedEntry:
    """One consolidated grocery-list line."""

    key: AggregationKey
    total_quantity: float
    display_name: str
    category: Category

    @property
    def quantity(self) -> str:
        """Human-readable quantity, e.g. "3 cups" or "6"."""
        qty = format_quantity(self.total_quantity, self.key.unit)
        if self.key.unit:
            return f"{qty} {display_unit(self.key.unit, qty)}"
        return qty

    def as_record(self) -> dict[str, Any]:
        """Shape handed to the grocery list: name, category and quantity."""
        return {
            "name": self.display_name,
            "category": self.category.value,
            "quantity": self.quantity,
        }


def _capitalize(name: str) -> str:
    return name[:1].upper() + name[1:]


def aggregate_lines(lines: Iterable[str] | None) -> list[MergedEntry]:
    """
    Aggregate ingredient lines from every recipe in the basket.

    Lines are merged when both their normalized name and unit match; the same
    ingredient in two different units stays as two entries. The result is
    rebuilt from scratch on every call and does not depend on line order.

    Args:
        lines: Raw ingredient lines, already scaled to the chosen servings.

    Returns:
        Merged entries in the order their keys were first seen.
    """
    buckets: dict[AggregationKey, list[float]] = {}

    for line in lines or ():
        if not line or not line.strip():
            continue

        parsed = parse_ingredient(line)
        key = AggregationKey(normalize_name(parsed.name), canonical_unit(parsed.unit))
        buckets.setdefault(key, []).append(parsed.quantity)

    entries = []
    for key, quantities in buckets.items():
        display_name = _capitalize(key.name)
        entries.append(
            MergedEntry(
                key=key,
                # exact sum, independent of line order
                total_quantity=math.fsum(quantities),
                display_name=display_name,
                category=categorize(display_name),
            )
        )

    logger.debug(f"Aggregated {sum(len(q) for q in buckets.values())} lines into {len(entries)} entries")
    return entries
