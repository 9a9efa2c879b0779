"""Unit tests for ingredient name normalization."""

from grocerylist.normalize.names import (
    MODIFIERS,
    SYNONYM_GROUPS,
    SynonymGroup,
    match_synonym_group,
    normalize_name,
    singularize,
)


class TestSynonymGroups:
    """Tests for synonym-group lookup."""

    def test_egg_variants(self):
        """Test that egg spellings share one identity."""
        assert normalize_name("egg") == "eggs"
        assert normalize_name("eggs") == "eggs"
        assert normalize_name("boiled eggs") == "eggs"
        assert normalize_name("Scrambled Egg") == "eggs"

    def test_fragment_contains_variant(self):
        """Test that a longer fragment containing a variant matches."""
        assert normalize_name("chicken breast fillets") == "chicken"
        assert normalize_name("extra virgin olive oil") == "oil"
        assert normalize_name("jasmine rice, rinsed") == "rice"

    def test_variant_contains_fragment(self):
        """Test that a fragment inside a variant matches."""
        assert normalize_name("russet") == "potato"
        assert normalize_name("cheddar") == "cheese"

    def test_matches_inside_longer_words(self):
        """Test that containment is by substring, not by whole word."""
        assert normalize_name("buttermilk") == "milk"
        assert normalize_name("breadcrumbs") == "bread"
        assert normalize_name("eggnog") == "eggs"
        assert normalize_name("saltines") == "salt"
        assert normalize_name("chick") == "chicken"

    def test_substring_overlaps_follow_table_order(self):
        """Test that group order decides fragments hidden inside other variants."""
        eggs = SynonymGroup("eggs", ("egg", "boiled egg"))
        oil = SynonymGroup("oil", ("oil", "cooking oil"))
        eggplant = SynonymGroup("eggplant", ("eggplant", "talong"))

        # "oil" is inside "boiled egg"
        assert normalize_name("oil", (eggs, oil)) == "eggs"
        assert normalize_name("oil", (oil, eggs)) == "oil"
        # "egg" is inside "eggplant"
        assert normalize_name("eggplant", (eggs, eggplant)) == "eggs"
        assert normalize_name("eggplant", (eggplant, eggs)) == "eggplant"

    def test_first_group_wins(self):
        """Test that declared order breaks ties."""
        # shares "fried" with the "fried egg" variant without being one
        assert normalize_name("fried rice") == "rice"
        groups = (
            SynonymGroup("first", ("milk",)),
            SynonymGroup("second", ("milk", "oat milk")),
        )
        assert normalize_name("oat milk", groups) == "first"
        assert match_synonym_group("oat milk", tuple(reversed(groups))).canonical == "second"

    def test_custom_groups(self):
        """Test passing a custom table."""
        groups = (SynonymGroup("scallion", ("scallion", "spring onion", "green onion")),)
        assert normalize_name("Green Onion", groups) == "scallion"

    def test_empty_fragment_matches_nothing(self):
        """Test that an empty fragment is never treated as a variant."""
        assert match_synonym_group("") is None

    def test_table_is_ordered(self):
        """Test the declared order of the default table."""
        assert SYNONYM_GROUPS[0].canonical == "eggs"
        assert [g.canonical for g in SYNONYM_GROUPS].count("eggs") == 1


class TestFallbackNormalization:
    """Tests for names without a synonym group."""

    def test_lowercase_and_trim(self):
        """Test lowercase conversion and trimming."""
        assert normalize_name("  Mystery Snack  ") == "mystery snack"

    def test_strip_modifiers(self):
        """Test removal of descriptive modifiers."""
        assert normalize_name("fresh organic spinach") == "spinach"
        assert normalize_name("large diced mango") == "mango"
        assert "fresh" in MODIFIERS

    def test_singularize(self):
        """Test naive singularization."""
        assert normalize_name("bananas") == "banana"
        assert normalize_name("sliced mushrooms") == "mushroom"
        assert singularize("grass") == "grass"
        assert singularize("bus") == "bus"

    def test_notes_and_prices_removed(self):
        """Test that parentheticals, prep notes and prices are dropped."""
        assert normalize_name("beef sirloin, thinly sliced") == "beef sirloin"
        assert normalize_name("pechay (bok choy)") == "pechay"
        assert normalize_name("calamansi ₱25") == "calamansi"
        assert normalize_name("bay leaf - $1.50") == "bay leaf"

    def test_never_empty(self):
        """Test that a name made only of modifiers falls back to the input."""
        assert normalize_name("Large") == "large"
        assert normalize_name("(optional)") == "(optional)"
        assert normalize_name("...") == "..."

    def test_deterministic(self):
        """Test that normalizing twice gives the same key."""
        assert normalize_name("Boiled Eggs") == normalize_name("Boiled Eggs")
