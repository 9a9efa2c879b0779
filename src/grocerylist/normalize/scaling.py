"""Serving-size scaling and quantity formatting."""

from dataclasses import replace
from decimal import ROUND_HALF_UP, Decimal

from grocerylist.normalize.parsing import ParsedIngredient, parse_ingredient
from grocerylist.normalize.units import is_imperial

# Kitchen fractions imperial measures are snapped to
COMMON_FRACTIONS: tuple[tuple[float, str], ...] = (
    (1 / 4, "1/4"),
    (1 / 3, "1/3"),
    (1 / 2, "1/2"),
    (2 / 3, "2/3"),
    (3 / 4, "3/4"),
)
FRACTION_TOLERANCE = 0.05

# Units whose label changes with the quantity
_PLURAL_LABELS = {"cup": "cups", "lb": "lbs"}
_SINGULAR_LABELS = {plural: singular for singular, plural in _PLURAL_LABELS.items()}
_DISPLAY_LABELS = {"l": "L"}

_INTEGRAL_EPSILON = 1e-9
_ONE_DECIMAL = Decimal("0.1")


def _is_integral(value: float) -> bool:
    return abs(value - round(value)) < _INTEGRAL_EPSILON


def _snap_fraction(value: float) -> str | None:
    whole = int(value)
    remainder = value - whole
    fraction, label = min(COMMON_FRACTIONS, key=lambda item: abs(remainder - item[0]))
    if abs(remainder - fraction) > FRACTION_TOLERANCE:
        return None
    return f"{whole} {label}" if whole else label


def format_quantity(value: float, unit: str = "") -> str:
    """
    Format a quantity for display.

    Integral values print without a decimal. Imperial units snap the
    remainder to a common kitchen fraction ("1 1/2"); everything else gets
    one decimal place.
    """
    if _is_integral(value):
        return str(int(round(value)))

    if is_imperial(unit):
        snapped = _snap_fraction(value)
        if snapped is not None:
            return snapped

    # Halves round up, away from zero
    return str(Decimal(value).quantize(_ONE_DECIMAL, rounding=ROUND_HALF_UP))


def display_unit(unit: str, display_quantity: str) -> str:
    """
    Label for a unit next to an already formatted quantity.

    "cup"/"cups" and "lb"/"lbs" follow the displayed quantity; litres are
    shown as "L".
    """
    base = _SINGULAR_LABELS.get(unit, unit)
    if base in _PLURAL_LABELS:
        is_one = display_quantity in ("1", "1.0")
        return base if is_one else _PLURAL_LABELS[base]
    return _DISPLAY_LABELS.get(unit, unit)


def format_ingredient(parsed: ParsedIngredient) -> str:
    """Render a parsed ingredient back to "<quantity> <unit> <name>"."""
    quantity = format_quantity(parsed.quantity, parsed.unit)
    parts = (quantity, display_unit(parsed.unit, quantity), parsed.name)
    return " ".join(part for part in parts if part)


def scale_ingredient(parsed: ParsedIngredient, multiplier: float) -> ParsedIngredient:
    """Multiply the quantity of a parsed ingredient, keeping unit and name."""
    if multiplier <= 0:
        raise ValueError(f"multiplier must be positive, got {multiplier}")
    return replace(parsed, quantity=parsed.quantity * multiplier)


def scale_for_servings(
    parsed: ParsedIngredient,
    recipe_servings: int,
    target_servings: int,
) -> ParsedIngredient:
    """Scale an ingredient written for recipe_servings to target_servings."""
    if recipe_servings < 1 or target_servings < 1:
        raise ValueError(
            f"servings must be at least 1, got {recipe_servings} -> {target_servings}"
        )
    return scale_ingredient(parsed, target_servings / recipe_servings)


def scale_line(line: str, multiplier: float) -> str:
    """
    Scale a raw ingredient line and format it back to text.

    Lines without a leading quantity ("Salt to taste") are returned as-is.
    """
    parsed = parse_ingredient(line)
    if parsed.is_bare_count:
        if multiplier <= 0:
            raise ValueError(f"multiplier must be positive, got {multiplier}")
        return line
    return format_ingredient(scale_ingredient(parsed, multiplier))
