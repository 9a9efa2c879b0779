"""Unit tests for grocery categorization."""

import pytest

from grocerylist.normalize.categories import (
    CATEGORY_RULES,
    Category,
    CategoryRule,
    categorize,
)


class TestCategorize:
    """Tests for categorize function."""

    @pytest.mark.parametrize(
        "name,expected",
        [
            ("Chicken Breast", Category.MEAT),
            ("Longganisa", Category.MEAT),
            ("Canned Tuna", Category.SEAFOOD),
            ("Eggs", Category.DAIRY),
            ("Milk", Category.DAIRY),
            ("Rice", Category.GRAIN),
            ("Rolled oats", Category.GRAIN),
            ("Banana", Category.FRUIT),
            ("Spinach", Category.VEGETABLE),
            ("Garlic", Category.VEGETABLE),
            ("Soy sauce", Category.PROCESSED),
        ],
    )
    def test_known_items(self, name, expected):
        """Test representative items of each category."""
        assert categorize(name) == expected

    def test_default_is_processed(self):
        """Test that unmatched names fall into Processed."""
        assert categorize("Mystery Snack") == Category.PROCESSED
        assert categorize("") == Category.PROCESSED

    def test_case_insensitive(self):
        """Test case-insensitive keyword search."""
        assert categorize("CHICKEN") == categorize("chicken") == Category.MEAT

    def test_declared_order_wins(self):
        """Test that the earlier rule wins when several match."""
        # "chicken" (Meat) is checked before "sauce" (Processed)
        assert categorize("Chicken sauce") == Category.MEAT
        # "egg" (Dairy) is checked before "eggplant" (Vegetable)
        assert categorize("Eggplant") == Category.DAIRY

    def test_custom_rules(self):
        """Test passing a custom ordered table."""
        rules = (
            CategoryRule(Category.VEGETABLE, ("eggplant",)),
            CategoryRule(Category.DAIRY, ("egg",)),
        )
        assert categorize("Eggplant", rules) == Category.VEGETABLE
        assert categorize("Eggs", rules) == Category.DAIRY
        assert categorize("Bread", rules) == Category.PROCESSED

    def test_category_values(self):
        """Test the display values of the category enum."""
        assert Category.MEAT.value == "Meat"
        assert {c.value for c in Category} == {
            "Fruit", "Vegetable", "Meat", "Seafood", "Dairy", "Grain", "Processed",
        }

    def test_rule_order(self):
        """Test the declared precedence of the default table."""
        assert [rule.category for rule in CATEGORY_RULES] == [
            Category.MEAT,
            Category.SEAFOOD,
            Category.DAIRY,
            Category.GRAIN,
            Category.FRUIT,
            Category.VEGETABLE,
            Category.PROCESSED,
        ]
