"""Unit tests for ingredient line parsing."""

import dataclasses

import pytest

from hearth.normalize.ingredients import (
    ParsedIngredient,
    extract_notes,
    format_ingredient,
    parse_ingredient,
    scale_ingredient,
)


class TestBasicParsing:
    """Tests for quantity, unit and name extraction."""

    def test_cups(self):
        """Test parsing a volume measure."""
        assert parse_ingredient("2 cups all-purpose flour") == ParsedIngredient(
            quantity=2, unit="cups", name="all-purpose flour", notes=None
        )

    def test_tablespoons(self):
        """Test that spelled-out units are normalized."""
        result = parse_ingredient("3 tablespoons olive oil")
        assert result.quantity == 3
        assert result.unit == "tbsp"
        assert result.name == "olive oil"

    def test_weights(self):
        """Test parsing weight units."""
        assert parse_ingredient("2 pounds chicken breast").unit == "lb"
        assert parse_ingredient("8 ounces cream cheese").unit == "oz"
        assert parse_ingredient("200 grams sugar").unit == "g"

    def test_no_unit(self):
        """Test a counted ingredient without unit."""
        result = parse_ingredient("4 carrots")
        assert result.quantity == 4
        assert result.unit is None
        assert result.name == "carrots"

    def test_unit_with_trailing_punctuation(self):
        """Test that 'tbsp.' is still recognized as a unit."""
        result = parse_ingredient("1 Tbsp. honey")
        assert result.unit == "tbsp"
        assert result.name == "honey"


class TestQuantityForms:
    """Tests for fractional and range quantities."""

    def test_simple_fraction(self):
        """Test parsing '1/2 cup butter'."""
        result = parse_ingredient("1/2 cup butter")
        assert result.quantity == pytest.approx(0.5)
        assert result.unit == "cups"
        assert result.name == "butter"

    def test_mixed_fraction_spans_two_tokens(self):
        """Test parsing '1 1/2 cups milk'."""
        result = parse_ingredient("1 1/2 cups milk")
        assert result.quantity == pytest.approx(1.5)
        assert result.unit == "cups"
        assert result.name == "milk"

    def test_unicode_fraction(self):
        """Test parsing unicode fractions."""
        assert parse_ingredient("½ cup sugar").quantity == pytest.approx(0.5)
        assert parse_ingredient("¼ teaspoon pepper").unit == "tsp"

    def test_whole_and_unicode_fraction(self):
        """Test parsing '1½ cups flour'."""
        result = parse_ingredient("1½ cups flour")
        assert result.quantity == pytest.approx(1.5)
        assert result.name == "flour"

    def test_decimal(self):
        """Test that decimals are not treated as fractions."""
        result = parse_ingredient("1.5 cups water")
        assert result.quantity == 1.5
        assert result.unit == "cups"
        assert result.name == "water"

    def test_range(self):
        """Test that a range keeps its first bound."""
        result = parse_ingredient("2-3 cloves garlic")
        assert result.quantity == 2
        assert result.unit == "cloves"
        assert result.name == "garlic"

    def test_separate_numbers_are_not_combined(self):
        """Test that '2 3' does not merge into one quantity."""
        result = parse_ingredient("2 3-inch cinnamon sticks")
        assert result.quantity == 2
        assert result.name == "3-inch cinnamon sticks"


class TestSizeUnits:
    """Tests for size words acting as units."""

    def test_large(self):
        """Test 'large' as a unit."""
        assert parse_ingredient("3 large eggs") == ParsedIngredient(
            quantity=3, unit="large", name="eggs", notes=None
        )

    def test_medium(self):
        """Test 'medium' as a unit."""
        assert parse_ingredient("2 medium onions") == ParsedIngredient(
            quantity=2, unit="medium", name="onions", notes=None
        )


class TestNotesExtraction:
    """Tests for parenthetical and trailing descriptor notes."""

    def test_comma_descriptor(self):
        """Test the canonical example '1/2 cup butter, melted'."""
        result = parse_ingredient("1/2 cup butter, melted")
        assert result.quantity == 0.5
        assert result.unit == "cups"
        assert result.name == "butter"
        assert result.notes == "melted"

    def test_parenthetical(self):
        """Test extracting '(low sodium)'."""
        result = parse_ingredient("1 cup chicken broth (low sodium)")
        assert result.quantity == 1
        assert result.unit == "cups"
        assert result.name == "chicken broth"
        assert result.notes == "low sodium"

    def test_to_taste(self):
        """Test 'Salt, to taste'."""
        result = parse_ingredient("Salt, to taste")
        assert result.quantity is None
        assert result.name == "Salt"
        assert result.notes == "to taste"

    def test_for_garnish(self):
        """Test 'Fresh parsley, for garnish'."""
        result = parse_ingredient("Fresh parsley, for garnish")
        assert result.name == "Fresh parsley"
        assert result.notes == "for garnish"

    def test_intensity_adverb(self):
        """Test that an adverb stays with its descriptor."""
        result = parse_ingredient("1 onion, finely chopped")
        assert result.name == "onion"
        assert result.notes == "finely chopped"

    def test_multiple_notes_joined(self):
        """Test that parenthetical notes come before descriptors."""
        result = parse_ingredient("2 cups spinach (about 2 oz), roughly chopped")
        assert result.name == "spinach"
        assert result.notes == "about 2 oz, roughly chopped"

    def test_descriptor_inside_parentheses_captured_once(self):
        """Test that '(, chopped)' is not matched a second time as a descriptor."""
        clean, notes = extract_notes("1 cup basil (loosely packed, chopped)")
        assert clean == "1 cup basil"
        assert notes == "loosely packed, chopped"

    def test_descriptor_without_comma_stays_in_name(self):
        """Test that descriptors only count after a comma."""
        result = parse_ingredient("1/4 cup chopped walnuts")
        assert result.name == "chopped walnuts"
        assert result.notes is None


class TestEdgeCases:
    """Tests for lines the parser can only partially read."""

    def test_bare_word(self):
        """Test a line with no quantity."""
        assert parse_ingredient("Salt") == ParsedIngredient(
            quantity=None, unit=None, name="Salt", notes=None
        )

    def test_of_elision(self):
        """Test '2 cups of flour'."""
        result = parse_ingredient("2 cups of flour")
        assert result.quantity == 2
        assert result.unit == "cups"
        assert result.name == "flour"

    def test_count_unit(self):
        """Test '3 cloves garlic'."""
        assert parse_ingredient("3 cloves garlic") == ParsedIngredient(
            quantity=3, unit="cloves", name="garlic", notes=None
        )

    def test_name_falls_back_to_line(self):
        """Test that a line that is only a quantity and unit keeps a name."""
        assert parse_ingredient("2 cups").name == "2 cups"
        assert parse_ingredient("(optional)").name == "(optional)"

    @pytest.mark.parametrize(
        "line",
        [
            "1" * 5000 + "/2 cups flour",
            "1" + "0" * 400 + "/1 cups flour",
            "1" * 5000 + "½ sugar",
            "1" * 400 + " cups flour",
        ],
    )
    def test_oversized_quantity_stays_in_name(self, line):
        """Test that numbers too large to read never raise."""
        result = parse_ingredient(line)
        assert result.quantity is None
        assert result.unit is None
        assert result.name == line

    def test_blank_line_gives_empty_name(self):
        """Test that a whitespace-only line parses to an empty name."""
        assert parse_ingredient("   ") == ParsedIngredient(
            quantity=None, unit=None, name="", notes=None
        )

    def test_result_is_immutable(self):
        """Test that parsed ingredients cannot be modified."""
        result = parse_ingredient("1 egg")
        with pytest.raises(dataclasses.FrozenInstanceError):
            result.quantity = 2


class TestScaleAndFormat:
    """Tests for scale_ingredient and format_ingredient."""

    def test_scale(self):
        """Test scaling a quantity."""
        scaled = scale_ingredient(ParsedIngredient(2, "cups", "flour"), 2)
        assert scaled.quantity == 4
        assert scaled.unit == "cups"
        assert scaled.name == "flour"

    def test_scale_missing_quantity(self):
        """Test that a missing quantity is kept missing."""
        scaled = scale_ingredient(ParsedIngredient(None, None, "Salt", "to taste"), 3)
        assert scaled.quantity is None
        assert scaled.notes == "to taste"

    def test_format(self):
        """Test formatting back to text."""
        assert format_ingredient(ParsedIngredient(2, "cups", "flour")) == "2 cups flour"
        assert format_ingredient(ParsedIngredient(0.5, "cups", "butter")) == "1/2 cups butter"
        assert (
            format_ingredient(ParsedIngredient(1, "cups", "butter", "melted"))
            == "1 cups butter (melted)"
        )
        assert format_ingredient(ParsedIngredient(None, None, "Salt")) == "Salt"
