"""Metric/imperial conversion of parsed ingredients for display."""

from collections.abc import Iterable

from grocerylist.logging_config import get_logger
from grocerylist.normalize.parsing import ParsedIngredient, parse_ingredient
from grocerylist.normalize.scaling import display_unit, format_ingredient, format_quantity
from grocerylist.normalize.units import (
    CUP_ML,
    KG_G,
    LB_G,
    LITRE_ML,
    OZ_G,
    TBSP_ML,
    TSP_ML,
    UnitSystem,
    identify_unit_type,
    unit_system,
)

logger = get_logger(__name__)


def _select_display_unit(
    base_value: float,
    unit_type: str,
    target: UnitSystem,
) -> tuple[float, str]:
    """Pick the display unit for a quantity in ml or g."""
    if unit_type == "volume":
        if target is UnitSystem.METRIC:
            if base_value < LITRE_ML:
                return base_value, "ml"
            return base_value / LITRE_ML, "l"
        if base_value < TBSP_ML:
            return base_value / TSP_ML, "tsp"
        if base_value < CUP_ML:
            return base_value / TBSP_ML, "tbsp"
        return base_value / CUP_ML, "cup"

    if target is UnitSystem.METRIC:
        if base_value < KG_G:
            return base_value, "g"
        return base_value / KG_G, "kg"
    if base_value < LB_G:
        return base_value / OZ_G, "oz"
    return base_value / LB_G, "lb"


def convert_ingredient(parsed: ParsedIngredient, target: UnitSystem | str) -> str:
    """
    Convert a parsed ingredient to the target unit system and format it.

    Unknown units, and units already in the target system, are returned as
    format_ingredient(parsed) without conversion.

    Examples:
        (2, "cup", "flour") -> "473.2 ml flour" (metric)
        (200, "g", "beef") -> "7.1 oz beef" (imperial)
    """
    target = UnitSystem(target)
    unit_type, factor = identify_unit_type(parsed.unit)

    if unit_type == "unknown":
        logger.debug(f"Unit {parsed.unit!r} is not convertible, passing through")
        return format_ingredient(parsed)

    if unit_system(parsed.unit) is target:
        return format_ingredient(parsed)

    quantity, unit = _select_display_unit(parsed.quantity * factor, unit_type, target)
    display_quantity = format_quantity(quantity, unit)
    label = display_unit(unit, display_quantity)

    return " ".join(part for part in (display_quantity, label, parsed.name) if part)


def convert_line(line: str, target: UnitSystem | str) -> str:
    """Convert a raw ingredient line; lines without a quantity come back unchanged."""
    target = UnitSystem(target)
    parsed = parse_ingredient(line)
    if parsed.is_bare_count:
        return line
    return convert_ingredient(parsed, target)


def convert_ingredients(lines: Iterable[str], target: UnitSystem | str) -> list[str]:
    """Convert every line of a recipe to the target unit system."""
    return [convert_line(line, target) for line in lines]
