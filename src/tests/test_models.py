"""
Tests for database models.

Tests cover:
- Recipe / Ingredient / UnitOfMeasure persistence
- add_ingredient() / remove_ingredient() back-reference invariant
- Delete-orphan cascade
- to_dict() serialization
"""

from decimal import Decimal

import pytest
from sqlalchemy.exc import IntegrityError

from recipe_ingredients.models import Difficulty, Ingredient, Recipe, UnitOfMeasure


@pytest.fixture(scope="function")
def db_session(test_db):
    """Session bound to the seeded in-memory test database."""
    return test_db()


class TestRecipeModel:
    """Tests for Recipe model."""

    def test_create_recipe(self, db_session):
        recipe = Recipe(
            description="Perfect Guacamole",
            prep_time=10,
            servings=4,
            url="https://www.simplyrecipes.com/recipes/perfect_guacamole/",
            difficulty=Difficulty.EASY,
        )
        db_session.add(recipe)
        db_session.commit()

        assert recipe.id is not None
        assert recipe.created_at is not None
        assert recipe.difficulty == Difficulty.EASY
        assert recipe.ingredients == []

    def test_repr(self):
        assert repr(Recipe(id=3, description="Tacos")) == "Recipe(id=3, description='Tacos')"


class TestIngredientCollection:
    """Tests for the recipe/ingredient back-reference invariant."""

    def test_add_ingredient_sets_back_reference(self):
        recipe = Recipe(description="Tacos")
        ingredient = Ingredient(description="Oregano", amount=Decimal("1"))

        result = recipe.add_ingredient(ingredient)

        assert result is recipe
        assert ingredient.recipe is recipe
        assert recipe.ingredients == [ingredient]

    def test_add_ingredient_twice_does_not_duplicate(self):
        recipe = Recipe(description="Tacos")
        ingredient = Ingredient(description="Oregano")

        recipe.add_ingredient(ingredient)
        recipe.add_ingredient(ingredient)

        assert recipe.ingredients == [ingredient]

    def test_remove_ingredient_clears_back_reference(self):
        recipe = Recipe(description="Tacos")
        keep = Ingredient(description="Cumin")
        drop = Ingredient(description="Oregano")
        recipe.add_ingredient(keep)
        recipe.add_ingredient(drop)

        recipe.remove_ingredient(drop)

        assert drop.recipe is None
        assert recipe.ingredients == [keep]
        assert keep.recipe is recipe

    def test_removed_ingredient_is_deleted(self, db_session, uoms):
        """Removing an ingredient from its recipe deletes the row."""
        recipe = Recipe(description="Tacos")
        ingredient = Ingredient(description="Oregano", amount=Decimal("1"), uom=uoms["Teaspoon"])
        recipe.add_ingredient(ingredient)
        db_session.add(recipe)
        db_session.commit()
        ingredient_id = ingredient.id

        recipe.remove_ingredient(ingredient)
        db_session.commit()

        assert db_session.get(Ingredient, ingredient_id) is None

    def test_deleting_recipe_deletes_ingredients(self, db_session, uoms):
        recipe = Recipe(description="Tacos")
        recipe.add_ingredient(Ingredient(description="Cumin", uom=uoms["Teaspoon"]))
        db_session.add(recipe)
        db_session.commit()

        db_session.delete(recipe)
        db_session.commit()

        assert db_session.query(Ingredient).count() == 0
        # Units of measure are reference data and survive
        assert db_session.query(UnitOfMeasure).count() == 8


class TestIngredientModel:
    """Tests for Ingredient model."""

    def test_amount_is_decimal(self, db_session, uoms):
        recipe = Recipe(description="Tacos")
        recipe.add_ingredient(Ingredient(description="Cumin", amount=Decimal("0.5"), uom=uoms["Teaspoon"]))
        db_session.add(recipe)
        db_session.commit()
        db_session.expire_all()

        stored = db_session.query(Ingredient).one()

        assert isinstance(stored.amount, Decimal)
        assert stored.amount == Decimal("0.50")
        assert stored.uom.description == "Teaspoon"
        assert stored.recipe.description == "Tacos"

    def test_unknown_uom_violates_foreign_key(self, db_session):
        recipe = Recipe(description="Tacos")
        recipe.add_ingredient(Ingredient(description="Cumin", uom_id=9999))
        db_session.add(recipe)

        with pytest.raises(IntegrityError):
            db_session.commit()
        db_session.rollback()


class TestUnitOfMeasureModel:
    """Tests for UnitOfMeasure model."""

    def test_description_is_unique(self, db_session):
        db_session.add(UnitOfMeasure(description="Cup"))

        with pytest.raises(IntegrityError):
            db_session.commit()
        db_session.rollback()

    def test_repr(self):
        assert repr(UnitOfMeasure(id=3, description="Cup")) == "UnitOfMeasure(id=3, description='Cup')"


class TestToDict:
    """Tests for BaseModel.to_dict()."""

    def test_recipe_to_dict(self, sample_recipe):
        data = sample_recipe.to_dict()

        assert data["id"] == sample_recipe.id
        assert data["description"] == "Perfect Guacamole"
        assert data["difficulty"] == "easy"
        assert isinstance(data["created_at"], str)
        assert "ingredients" not in data

    def test_recipe_to_dict_with_relationships(self, sample_recipe):
        data = sample_recipe.to_dict(include_relationships=True)

        assert [i["description"] for i in data["ingredients"]] == [
            "Kosher salt",
            "Fresh lime juice",
            "Ripe avocados",
        ]
        assert data["ingredients"][0]["amount"] == "0.25"
        assert data["ingredients"][0]["recipe_id"] == sample_recipe.id

    def test_ingredient_to_dict_with_relationships(self, sample_recipe):
        ingredient = sample_recipe.ingredients[0]

        data = ingredient.to_dict(include_relationships=True)

        assert data["recipe"] == sample_recipe.id
        assert data["uom"] == ingredient.uom_id
