"""Unit tests for serving scaling and quantity formatting."""

import pytest

from grocerylist.normalize.parsing import ParsedIngredient, parse_ingredient
from grocerylist.normalize.scaling import (
    display_unit,
    format_ingredient,
    format_quantity,
    scale_for_servings,
    scale_ingredient,
    scale_line,
)


class TestFormatQuantity:
    """Tests for format_quantity function."""

    def test_integral_values(self):
        """Test that whole numbers print without a decimal."""
        assert format_quantity(2.0) == "2"
        assert format_quantity(473.0, "ml") == "473"
        assert format_quantity(3.0, "cups") == "3"

    def test_float_noise_counts_as_integral(self):
        """Test that accumulated float error does not produce '3.0'."""
        assert format_quantity(0.1 * 3 * 10) == "3"

    def test_metric_one_decimal(self):
        """Test one-decimal formatting for metric and unitless values."""
        assert format_quantity(473.176, "ml") == "473.2"
        assert format_quantity(1.5, "kg") == "1.5"
        assert format_quantity(0.5) == "0.5"

    @pytest.mark.parametrize(
        "value,expected",
        [(0.25, "0.3"), (1.25, "1.3"), (2.25, "2.3"), (0.35, "0.3"), (0.15, "0.1")],
    )
    def test_one_decimal_rounds_half_up(self, value, expected):
        """Test that exactly representable halves round up, not to even."""
        assert format_quantity(value, "kg") == expected

    def test_imperial_fraction_snap(self):
        """Test that imperial quantities snap to kitchen fractions."""
        assert format_quantity(0.5, "cup") == "1/2"
        assert format_quantity(1.5, "cups") == "1 1/2"
        assert format_quantity(0.25, "tsp") == "1/4"
        assert format_quantity(2.75, "lbs") == "2 3/4"

    def test_imperial_snap_tolerance(self):
        """Test the 0.05 snapping tolerance."""
        assert format_quantity(0.34, "cup") == "1/3"
        assert format_quantity(1.68, "tbsp") == "1 2/3"
        assert format_quantity(0.54, "cup") == "1/2"

    def test_imperial_without_close_fraction(self):
        """Test fallback to one decimal when no fraction is close."""
        assert format_quantity(0.1, "cup") == "0.1"
        assert format_quantity(2.9, "oz") == "2.9"


class TestDisplayUnit:
    """Tests for display_unit function."""

    def test_plural_labels(self):
        """Test that cup and lb follow the displayed quantity."""
        assert display_unit("cup", "1") == "cup"
        assert display_unit("cup", "2") == "cups"
        assert display_unit("cups", "1") == "cup"
        assert display_unit("lb", "1 1/2") == "lbs"
        assert display_unit("lb", "1.0") == "lb"

    def test_other_labels(self):
        """Test that other units keep their label, litres show as L."""
        assert display_unit("tbsp", "2") == "tbsp"
        assert display_unit("l", "1.5") == "L"
        assert display_unit("", "3") == ""


class TestScaleIngredient:
    """Tests for scale_ingredient and scale_for_servings."""

    def test_scale_keeps_unit_and_name(self):
        """Test that only the quantity changes."""
        parsed = parse_ingredient("2 cups flour")
        scaled = scale_ingredient(parsed, 1.5)
        assert scaled.quantity == 3.0
        assert scaled.unit == "cups"
        assert scaled.name == "flour"
        assert scaled.raw == parsed.raw

    def test_scale_rejects_non_positive(self):
        """Test that a zero or negative multiplier is refused."""
        parsed = parse_ingredient("2 cups flour")
        with pytest.raises(ValueError):
            scale_ingredient(parsed, 0)
        with pytest.raises(ValueError):
            scale_ingredient(parsed, -1)

    @pytest.mark.parametrize(
        "a,b",
        [(2, 3), (0.5, 0.5), (1 / 3, 3), (1.25, 0.8), (7, 1 / 7)],
    )
    def test_scaling_is_linear(self, a, b):
        """Test that scaling twice equals scaling once by the product."""
        parsed = ParsedIngredient(quantity=1.5, unit="cup", name="milk")
        twice = scale_ingredient(scale_ingredient(parsed, a), b)
        once = scale_ingredient(parsed, a * b)
        assert twice.quantity == pytest.approx(once.quantity, abs=0.05)

    def test_scale_for_servings(self):
        """Test scaling a recipe for 4 down to 2 servings."""
        parsed = parse_ingredient("1 kg chicken")
        scaled = scale_for_servings(parsed, recipe_servings=4, target_servings=2)
        assert scaled.quantity == 0.5

    def test_scale_for_servings_rejects_zero(self):
        """Test that zero servings are refused."""
        with pytest.raises(ValueError):
            scale_for_servings(parse_ingredient("1 egg"), 0, 2)


class TestFormatIngredient:
    """Tests for format_ingredient and scale_line."""

    def test_format_ingredient(self):
        """Test rendering a parsed ingredient back to text."""
        assert format_ingredient(ParsedIngredient(3, "cups", "flour")) == "3 cups flour"
        assert format_ingredient(ParsedIngredient(0.5, "cup", "sugar")) == "1/2 cups sugar"
        assert format_ingredient(ParsedIngredient(6, "", "eggs")) == "6 eggs"
        assert format_ingredient(ParsedIngredient(1.3, "kg", "rice")) == "1.3 kg rice"

    def test_scale_line(self):
        """Test scaling a raw line."""
        assert scale_line("2 cups flour", 2) == "4 cups flour"
        assert scale_line("1 cup sugar", 1.5) == "1 1/2 cups sugar"
        assert scale_line("300g beef sirloin", 0.5) == "150 g beef sirloin"
        assert scale_line("1/4 kg beef", 1) == "0.3 kg beef"

    def test_unit_label_follows_scaled_quantity(self):
        """Test that cup/cups, lb/lbs and L are relabelled after scaling."""
        assert scale_line("2 cups flour", 0.5) == "1 cup flour"
        assert scale_line("1 cup flour", 2) == "2 cups flour"
        assert scale_line("2 lbs pork", 0.5) == "1 lb pork"
        assert scale_line("1 l stock", 1.5) == "1.5 L stock"

    def test_scale_line_without_quantity(self):
        """Test that lines without a quantity are not rewritten."""
        assert scale_line("Salt to taste", 3) == "Salt to taste"
