"""Keyword-based grocery categories."""

from collections.abc import Sequence
from enum import Enum
from typing import NamedTuple


class Category(str, Enum):
    """Aisle an item is shopped from."""

    FRUIT = "Fruit"
    VEGETABLE = "Vegetable"
    MEAT = "Meat"
    SEAFOOD = "Seafood"
    DAIRY = "Dairy"
    GRAIN = "Grain"
    PROCESSED = "Processed"


class CategoryRule(NamedTuple):
    category: Category
    keywords: tuple[str, ...]


# Checked in order; the first rule with a keyword found in the name wins.
# Substring matching means "eggplant" lands in Dairy via "egg".
CATEGORY_RULES: tuple[CategoryRule, ...] = (
    CategoryRule(
        Category.MEAT,
        ("chicken", "pork", "beef", "sausage", "hotdog", "tocino", "longganisa", "tapa",
         "bacon", "turkey", "lamb"),
    ),
    CategoryRule(
        Category.SEAFOOD,
        ("fish", "sardines", "tuna", "salmon", "shrimp", "prawn", "squid", "crab", "tilapia"),
    ),
    CategoryRule(
        Category.DAIRY,
        ("milk", "cheese", "egg", "butter", "cream", "yogurt"),
    ),
    CategoryRule(
        Category.GRAIN,
        ("rice", "bread", "flour", "oat", "pasta", "noodle"),
    ),
    CategoryRule(
        Category.FRUIT,
        ("banana", "apple", "orange", "lemon", "mango", "calamansi", "grape"),
    ),
    CategoryRule(
        Category.VEGETABLE,
        ("beans", "vegetable", "pechay", "spinach", "eggplant", "tomato", "onion", "garlic",
         "pepper", "carrot", "potato", "lettuce", "papaya", "cabbage", "ginger"),
    ),
    CategoryRule(
        Category.PROCESSED,
        ("sauce", "oil", "vinegar", "soy", "ketchup", "sugar", "salt"),
    ),
)

DEFAULT_CATEGORY = Category.PROCESSED


def categorize(name: str, rules: Sequence[CategoryRule] = CATEGORY_RULES) -> Category:
    """Return the category of the first rule matching name, or Processed."""
    lower_name = (name or "").lower()
    for rule in rules:
        if any(keyword in lower_name for keyword in rule.keywords):
            return rule.category
    return DEFAULT_CATEGORY
