"""Pytest configuration and fixtures for service layer tests."""

from decimal import Decimal

import pytest
from sqlalchemy.orm import sessionmaker, scoped_session

from recipe_ingredients.models import Difficulty, Ingredient, Recipe, UnitOfMeasure
from recipe_ingredients.models.base import Base
from recipe_ingredients.services.database import create_database_engine, seed_units_of_measure


@pytest.fixture(scope="function")
def test_db():
    """Provide a clean test database for each test function.

    This fixture:
    1. Creates an in-memory SQLite database
    2. Creates all tables and seeds the units of measure
    3. Patches the global session factory so session_scope() uses it
    4. Drops all tables after the test completes
    """
    engine = create_database_engine("sqlite:///:memory:")
    Base.metadata.create_all(engine)

    session_factory = sessionmaker(bind=engine, expire_on_commit=False)
    Session = scoped_session(session_factory)

    # Monkey-patch the global session factory for tests
    import recipe_ingredients.services.database as db_module

    original_get_session_factory = db_module.get_session_factory
    db_module.get_session_factory = lambda: Session

    session = Session()
    seed_units_of_measure(session=session)
    session.commit()

    yield Session

    Session.remove()
    Base.metadata.drop_all(engine)
    engine.dispose()

    db_module.get_session_factory = original_get_session_factory


@pytest.fixture(scope="function")
def uoms(test_db):
    """Seeded units of measure keyed by description."""
    session = test_db()
    return {uom.description: uom for uom in session.query(UnitOfMeasure).all()}


@pytest.fixture(scope="function")
def sample_recipe(test_db, uoms):
    """Provide a recipe with three ingredients.

    - Kosher salt: 0.25 Teaspoon
    - Fresh lime juice: 1 Tablespoon
    - Ripe avocados: 2 Each
    """
    session = test_db()

    recipe = Recipe(
        description="Perfect Guacamole",
        prep_time=10,
        cook_time=0,
        servings=4,
        source="Simply Recipes",
        directions="Cut the avocados, mash, season.",
        difficulty=Difficulty.EASY,
    )
    recipe.add_ingredient(
        Ingredient(description="Kosher salt", amount=Decimal("0.25"), uom=uoms["Teaspoon"])
    )
    recipe.add_ingredient(
        Ingredient(description="Fresh lime juice", amount=Decimal("1"), uom=uoms["Tablespoon"])
    )
    recipe.add_ingredient(
        Ingredient(description="Ripe avocados", amount=Decimal("2"), uom=uoms["Each"])
    )
    session.add(recipe)
    session.commit()

    return recipe


@pytest.fixture(scope="function")
def ingredient_ids(test_db):
    """Return a function listing a recipe's ingredient IDs, read fresh from the database."""

    def _ingredient_ids(recipe_id):
        session = test_db()
        return [
            ingredient_id
            for (ingredient_id,) in session.query(Ingredient.id)
            .filter(Ingredient.recipe_id == recipe_id)
            .order_by(Ingredient.id)
        ]

    return _ingredient_ids
