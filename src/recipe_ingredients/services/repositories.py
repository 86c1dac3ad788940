"""
Repositories - the entity store used by the service layer.

Repositories wrap a single SQLAlchemy session and are handed to services at
construction, so a service never reaches for a global session and tests can
substitute fakes.

Lookups return Optional values; turning "absent" into a NotFound error is the
caller's job.
"""

import logging
from contextlib import AbstractContextManager
from typing import List, Optional

from sqlalchemy.orm import Session

from ..models import Recipe, UnitOfMeasure
from .database import transaction_scope

logger = logging.getLogger(__name__)


class RecipeRepository:
    """Load and persist Recipe aggregates (with their ingredients)."""

    def __init__(self, session: Session):
        self._session = session

    def transaction(self) -> AbstractContextManager:
        """
        Open, or join, a transaction on this repository's session.

        Every save() inside the block becomes part of one unit of work that
        commits when the block exits cleanly.
        """
        return transaction_scope(self._session)

    def find_by_id(self, recipe_id: int) -> Optional[Recipe]:
        """
        Find a recipe by ID.

        Args:
            recipe_id: Recipe ID

        Returns:
            Recipe with its ingredients loaded, or None if it doesn't exist
        """
        if recipe_id is None:
            return None
        return self._session.get(Recipe, recipe_id)

    def find_all(self) -> List[Recipe]:
        """Return all recipes ordered by ID."""
        return self._session.query(Recipe).order_by(Recipe.id).all()

    def save(self, recipe: Recipe) -> Recipe:
        """
        Persist a recipe and its whole ingredient collection.

        Atomic on its own: commits unless called inside transaction(), in
        which case it only flushes so new rows get their IDs.

        Args:
            recipe: Recipe to persist

        Returns:
            The saved recipe
        """
        with transaction_scope(self._session):
            self._session.add(recipe)
            self._session.flush()
            logger.debug(f"Saved recipe {recipe.id} with {len(recipe.ingredients)} ingredients")
        return recipe


class UnitOfMeasureRepository:
    """Read-only access to the unit of measure reference table."""

    def __init__(self, session: Session):
        self._session = session

    def find_by_id(self, uom_id: int) -> Optional[UnitOfMeasure]:
        """Find a unit of measure by ID, or None if it doesn't exist."""
        if uom_id is None:
            return None
        return self._session.get(UnitOfMeasure, uom_id)

    def find_by_description(self, description: str) -> Optional[UnitOfMeasure]:
        """Find a unit of measure by its exact description."""
        return (
            self._session.query(UnitOfMeasure)
            .filter(UnitOfMeasure.description == description)
            .first()
        )

    def find_all(self) -> List[UnitOfMeasure]:
        """Return all units of measure ordered by description."""
        return self._session.query(UnitOfMeasure).order_by(UnitOfMeasure.description).all()
