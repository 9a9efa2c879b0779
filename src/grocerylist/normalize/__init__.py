"""Parse, scale, convert and canonicalize ingredient lines."""

from grocerylist.normalize.categories import (
    CATEGORY_RULES,
    Category,
    CategoryRule,
    categorize,
)
from grocerylist.normalize.conversion import (
    convert_ingredient,
    convert_ingredients,
    convert_line,
)
from grocerylist.normalize.names import (
    SYNONYM_GROUPS,
    SynonymGroup,
    normalize_name,
)
from grocerylist.normalize.parsing import (
    ParsedIngredient,
    parse_ingredient,
    parse_quantity_string,
)
from grocerylist.normalize.scaling import (
    format_ingredient,
    format_quantity,
    scale_for_servings,
    scale_ingredient,
    scale_line,
)
from grocerylist.normalize.units import (
    UnitSystem,
    canonical_unit,
    identify_unit_type,
)

__all__ = [
    "CATEGORY_RULES",
    "Category",
    "CategoryRule",
    "ParsedIngredient",
    "SYNONYM_GROUPS",
    "SynonymGroup",
    "UnitSystem",
    "canonical_unit",
    "categorize",
    "convert_ingredient",
    "convert_ingredients",
    "convert_line",
    "format_ingredient",
    "format_quantity",
    "identify_unit_type",
    "normalize_name",
    "parse_ingredient",
    "parse_quantity_string",
    "scale_for_servings",
    "scale_ingredient",
    "scale_line",
]
