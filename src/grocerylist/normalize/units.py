"""Unit vocabulary and conversion tables."""

from enum import Enum


class UnitSystem(str, Enum):
    """Display convention selected by the user."""

    METRIC = "metric"
    IMPERIAL = "imperial"


# =============================================================================
# Unit Conversion Tables
# =============================================================================

# Volume conversions (base unit: ml)
VOLUME_UNITS: dict[str, float] = {
    # Metric
    "ml": 1.0,
    "l": 1000.0,
    # US customary
    "cup": 236.588,
    "cups": 236.588,
    "tbsp": 14.787,
    "tsp": 4.929,
    "fl oz": 29.574,
}

# Weight conversions (base unit: g)
WEIGHT_UNITS: dict[str, float] = {
    # Metric
    "g": 1.0,
    "kg": 1000.0,
    # Imperial
    "oz": 28.3495,
    "lb": 453.592,
    "lbs": 453.592,
}

METRIC_UNITS = frozenset({"ml", "l", "g", "kg"})
IMPERIAL_UNITS = frozenset({"cup", "cups", "tbsp", "tsp", "fl oz", "oz", "lb", "lbs"})

# Every token the parser recognizes, longest first so "fl oz" wins over "oz"
UNIT_TOKENS: tuple[str, ...] = tuple(
    sorted({*VOLUME_UNITS, *WEIGHT_UNITS}, key=lambda token: (-len(token), token))
)

# Plural spellings folded onto one aggregation bucket
PLURAL_UNITS: dict[str, str] = {
    "cups": "cup",
    "lbs": "lb",
}

# Thresholds used when picking a display unit
CUP_ML = VOLUME_UNITS["cup"]
TBSP_ML = VOLUME_UNITS["tbsp"]
TSP_ML = VOLUME_UNITS["tsp"]
LB_G = WEIGHT_UNITS["lb"]
OZ_G = WEIGHT_UNITS["oz"]
LITRE_ML = VOLUME_UNITS["l"]
KG_G = WEIGHT_UNITS["kg"]


def identify_unit_type(unit: str | None) -> tuple[str, float]:
    """
    Identify the unit type and conversion factor.

    Returns:
        Tuple of (unit_type, conversion_factor) where unit_type is
        "volume", "weight" or "unknown".
    """
    unit_lower = " ".join((unit or "").lower().split())

    if unit_lower in VOLUME_UNITS:
        return "volume", VOLUME_UNITS[unit_lower]

    if unit_lower in WEIGHT_UNITS:
        return "weight", WEIGHT_UNITS[unit_lower]

    return "unknown", 1.0


def unit_system(unit: str | None) -> UnitSystem | None:
    """Return the unit system a token belongs to, or None for unknown units."""
    unit_lower = " ".join((unit or "").lower().split())
    if unit_lower in METRIC_UNITS:
        return UnitSystem.METRIC
    if unit_lower in IMPERIAL_UNITS:
        return UnitSystem.IMPERIAL
    return None


def is_imperial(unit: str | None) -> bool:
    return unit_system(unit) is UnitSystem.IMPERIAL


def to_base_quantity(quantity: float, unit: str | None) -> float | None:
    """Convert a quantity to ml or g, or None when the unit is not convertible."""
    unit_type, factor = identify_unit_type(unit)
    if unit_type == "unknown":
        return None
    return quantity * factor


def canonical_unit(unit: str | None) -> str:
    """
    Fold a unit token onto its aggregation spelling.

    "cups" and "cup" share one bucket, as do "lbs" and "lb". Any other token
    is only lowercased.
    """
    unit_lower = " ".join((unit or "").lower().split())
    return PLURAL_UNITS.get(unit_lower, unit_lower)
