"""Tests for model <-> command converters."""

from decimal import Decimal

from recipe_ingredients.models import Ingredient, Recipe, UnitOfMeasure
from recipe_ingredients.services.commands import IngredientCommand, UnitOfMeasureCommand
from recipe_ingredients.services.converters import (
    command_to_ingredient,
    command_to_unit_of_measure,
    ingredient_to_command,
    normalize_amount,
    unit_of_measure_to_command,
)


def _salt():
    recipe = Recipe(id=1, description="Salted water")
    ingredient = Ingredient(
        id=5,
        description="Salt",
        amount=Decimal("1.0"),
        uom=UnitOfMeasure(id=7, description="Pint"),
    )
    recipe.add_ingredient(ingredient)
    return ingredient


class TestIngredientToCommand:
    """Tests for ingredient_to_command()."""

    def test_none_returns_none(self):
        assert ingredient_to_command(None) is None

    def test_copies_fields(self):
        """All fields are copied and the recipe ID is denormalized."""
        command = ingredient_to_command(_salt())

        assert command == IngredientCommand(
            id=5,
            recipe_id=1,
            description="Salt",
            amount=Decimal("1.0"),
            uom=UnitOfMeasureCommand(id=7, description="Pint"),
        )

    def test_without_recipe(self):
        """An unattached ingredient has no recipe ID."""
        command = ingredient_to_command(Ingredient(id=3, description="Pepper"))

        assert command.recipe_id is None
        assert command.uom is None

    def test_uom_id_only(self):
        """An unloaded uom relationship falls back to the uom_id column."""
        command = ingredient_to_command(Ingredient(id=3, description="Pepper", uom_id=4))

        assert command.uom == UnitOfMeasureCommand(id=4)
        assert command.uom_id == 4

    def test_float_amount_becomes_decimal(self):
        """Float amounts are normalized to Decimal."""
        command = ingredient_to_command(Ingredient(id=3, amount=0.1))

        assert command.amount == Decimal("0.1")

    def test_does_not_mutate_source(self):
        """Conversion leaves the ingredient untouched."""
        ingredient = _salt()
        ingredient_to_command(ingredient)

        assert ingredient.description == "Salt"
        assert ingredient.recipe.id == 1


class TestCommandToIngredient:
    """Tests for command_to_ingredient()."""

    def test_none_returns_none(self):
        assert command_to_ingredient(None) is None

    def test_copies_fields_without_recipe(self):
        """Fields are copied; the recipe back-reference stays unset."""
        ingredient = command_to_ingredient(
            IngredientCommand(
                id=9,
                recipe_id=1,
                description="Cumin",
                amount=Decimal("0.5"),
                uom=UnitOfMeasureCommand(id=1, description="Teaspoon"),
            )
        )

        assert ingredient.id == 9
        assert ingredient.description == "Cumin"
        assert ingredient.amount == Decimal("0.5")
        assert ingredient.uom_id == 1
        assert ingredient.recipe is None
        assert ingredient.recipe_id is None

    def test_without_uom(self):
        ingredient = command_to_ingredient(IngredientCommand(description="Water"))

        assert ingredient.uom_id is None
        assert ingredient.id is None

    def test_round_trip(self):
        """Ingredient -> command -> ingredient preserves description, amount and uom ID."""
        original = _salt()

        copy = command_to_ingredient(ingredient_to_command(original))

        assert copy.id == original.id
        assert copy.description == original.description
        assert copy.amount == original.amount
        assert copy.uom_id == original.uom.id
        assert copy.recipe is None


class TestUnitOfMeasureConverters:
    """Tests for the unit of measure converters."""

    def test_none_returns_none(self):
        assert unit_of_measure_to_command(None) is None
        assert command_to_unit_of_measure(None) is None

    def test_to_command(self):
        command = unit_of_measure_to_command(UnitOfMeasure(id=3, description="Cup"))

        assert command == UnitOfMeasureCommand(id=3, description="Cup")

    def test_from_command(self):
        uom = command_to_unit_of_measure(UnitOfMeasureCommand(id=3, description="Cup"))

        assert isinstance(uom, UnitOfMeasure)
        assert uom.id == 3
        assert uom.description == "Cup"


class TestNormalizeAmount:
    """Tests for normalize_amount()."""

    def test_none_returns_none(self):
        assert normalize_amount(None) is None

    def test_rounds_half_up_to_two_places(self):
        assert normalize_amount(Decimal("0.125")) == Decimal("0.13")
        assert normalize_amount(Decimal("0.124")) == Decimal("0.12")

    def test_float_and_int_become_decimal(self):
        """Non-Decimal inputs compare equal to the Decimal they denote."""
        assert normalize_amount(0.1) == Decimal("0.1")
        assert normalize_amount(2) == Decimal("2")
        assert isinstance(normalize_amount(0.1), Decimal)

    def test_keeps_stored_scale(self):
        assert str(normalize_amount(Decimal("1"))) == "1.00"

    def test_command_to_ingredient_rounds_amount(self):
        ingredient = command_to_ingredient(IngredientCommand(amount=Decimal("2.005")))

        assert ingredient.amount == Decimal("2.01")
