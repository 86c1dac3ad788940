"""
Ingredient Service - fetch, upsert and delete ingredients inside a recipe.

Ingredients are only reachable through their Recipe aggregate: every
operation loads the recipe, works on its ingredient collection in memory,
and (for writes) saves the whole recipe back.

- find_by_recipe_id_and_ingredient_id(): read one ingredient as a command
- save_ingredient_command(): update in place or attach a new ingredient,
  inside a single transaction
- delete_by_id(): detach and remove an ingredient
- list_ingredients(): all ingredients of a recipe

The IngredientService class takes its repositories at construction. The
module-level functions at the bottom open a session_scope() and build a
service for callers that don't manage sessions themselves.
"""

import logging
from typing import Callable, List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ..models import Ingredient, Recipe
from .commands import IngredientCommand
from .converters import command_to_ingredient, ingredient_to_command, normalize_amount
from .database import session_scope
from .exceptions import (
    DatabaseError,
    IngredientNotFound,
    RecipeNotFound,
    ServiceError,
    UnrecoverableServiceError,
)
from .logging_utils import get_service_logger, log_operation
from .repositories import RecipeRepository, UnitOfMeasureRepository

logger = get_service_logger(__name__)


class IngredientService:
    """
    Service for ingredients nested in recipes.

    Args:
        recipe_repository: Store for Recipe aggregates (find_by_id, save, transaction)
        unit_of_measure_repository: Lookup for units of measure (find_by_id)
        to_command: Ingredient -> IngredientCommand converter
        to_ingredient: IngredientCommand -> Ingredient converter
    """

    def __init__(
        self,
        recipe_repository: RecipeRepository,
        unit_of_measure_repository: UnitOfMeasureRepository,
        to_command: Callable[[Ingredient], IngredientCommand] = ingredient_to_command,
        to_ingredient: Callable[[IngredientCommand], Ingredient] = command_to_ingredient,
    ):
        self._recipe_repository = recipe_repository
        self._unit_of_measure_repository = unit_of_measure_repository
        self._to_command = to_command
        self._to_ingredient = to_ingredient

    def find_by_recipe_id_and_ingredient_id(
        self, recipe_id: int, ingredient_id: int
    ) -> IngredientCommand:
        """
        Get one ingredient of a recipe.

        Args:
            recipe_id: Recipe ID
            ingredient_id: Ingredient ID within that recipe

        Returns:
            IngredientCommand for the matching ingredient

        Raises:
            RecipeNotFound: If the recipe doesn't exist
            IngredientNotFound: If the recipe has no ingredient with that ID
            DatabaseError: If database operation fails
        """
        try:
            recipe = self._get_recipe(recipe_id, "find_by_recipe_id_and_ingredient_id")
            ingredient = _find_ingredient(recipe, ingredient_id)
            if ingredient is None:
                log_operation(
                    logger,
                    operation="find_by_recipe_id_and_ingredient_id",
                    outcome="ingredient_not_found",
                    level=logging.WARNING,
                    recipe_id=recipe_id,
                    ingredient_id=ingredient_id,
                )
                raise IngredientNotFound(ingredient_id, recipe_id=recipe_id)

            return self._to_command(ingredient)

        except ServiceError:
            raise
        except SQLAlchemyError as e:
            raise DatabaseError(f"Failed to retrieve ingredient {ingredient_id}", e)

    def list_ingredients(self, recipe_id: int) -> List[IngredientCommand]:
        """
        Get all ingredients of a recipe, in ID order.

        Raises:
            RecipeNotFound: If the recipe doesn't exist
            DatabaseError: If database operation fails
        """
        try:
            recipe = self._get_recipe(recipe_id, "list_ingredients")
            return [self._to_command(ingredient) for ingredient in recipe.ingredients]

        except ServiceError:
            raise
        except SQLAlchemyError as e:
            raise DatabaseError(f"Failed to list ingredients of recipe {recipe_id}", e)

    def save_ingredient_command(self, command: IngredientCommand) -> IngredientCommand:
        """
        Create or update an ingredient of a recipe.

        If the recipe already has an ingredient with command.id, its
        description, amount and unit of measure are updated in place (the
        unit is looked up again by ID). Otherwise the command becomes a new
        ingredient attached to the recipe. The recipe is then saved as a
        whole and the saved ingredient is located again: by ID first, then
        by the first ingredient with the same description, amount and unit
        of measure ID. That fallback is how a newly created ingredient is
        found, and it cannot tell identical ingredients apart.

        Runs as one transaction: any error rolls back the whole change.

        Args:
            command: Ingredient data, including recipe_id

        Returns:
            IngredientCommand for the saved ingredient

        Raises:
            RecipeNotFound: If the recipe doesn't exist
            UnrecoverableServiceError: If the unit of measure for an update
                doesn't exist, or the saved ingredient cannot be located
            DatabaseError: If database operation fails
        """
        try:
            with self._recipe_repository.transaction():
                recipe = self._get_recipe(command.recipe_id, "save_ingredient_command")

                existing = _find_ingredient(recipe, command.id)
                if existing is not None:
                    existing.description = command.description
                    existing.amount = normalize_amount(command.amount)
                    uom = self._unit_of_measure_repository.find_by_id(command.uom_id)
                    if uom is None:
                        log_operation(
                            logger,
                            operation="save_ingredient_command",
                            outcome="uom_not_found",
                            level=logging.ERROR,
                            recipe_id=command.recipe_id,
                            ingredient_id=command.id,
                            uom_id=command.uom_id,
                        )
                        raise UnrecoverableServiceError(
                            f"Unit of measure with ID {command.uom_id} not found"
                        )
                    existing.uom = uom
                    outcome = "updated"
                else:
                    recipe.add_ingredient(self._to_ingredient(command))
                    outcome = "created"

                saved_recipe = self._recipe_repository.save(recipe)

                saved = _find_ingredient(saved_recipe, command.id)
                if saved is None:
                    saved = _find_matching_ingredient(saved_recipe, command)
                if saved is None:
                    log_operation(
                        logger,
                        operation="save_ingredient_command",
                        outcome="saved_ingredient_not_located",
                        level=logging.ERROR,
                        recipe_id=command.recipe_id,
                        ingredient_id=command.id,
                    )
                    raise UnrecoverableServiceError(
                        f"Saved ingredient could not be located in recipe {command.recipe_id}"
                    )

                result = self._to_command(saved)

            log_operation(
                logger,
                operation="save_ingredient_command",
                outcome=outcome,
                recipe_id=result.recipe_id,
                ingredient_id=result.id,
            )
            return result

        except ServiceError:
            raise
        except SQLAlchemyError as e:
            raise DatabaseError(
                f"Failed to save ingredient for recipe {command.recipe_id}", e
            )

    def delete_by_id(self, recipe_id: int, ingredient_id: int) -> None:
        """
        Remove an ingredient from a recipe.

        The ingredient's back-reference is cleared, it is dropped from the
        recipe's collection and the recipe is saved (which deletes the row).

        Raises:
            RecipeNotFound: If the recipe doesn't exist
            IngredientNotFound: If the recipe has no ingredient with that ID
            DatabaseError: If database operation fails
        """
        logger.debug(f"Deleting ingredient: {recipe_id}:{ingredient_id}")

        try:
            recipe = self._get_recipe(recipe_id, "delete_by_id")
            ingredient = _find_ingredient(recipe, ingredient_id)
            if ingredient is None:
                log_operation(
                    logger,
                    operation="delete_by_id",
                    outcome="ingredient_not_found",
                    level=logging.WARNING,
                    recipe_id=recipe_id,
                    ingredient_id=ingredient_id,
                )
                raise IngredientNotFound(ingredient_id, recipe_id=recipe_id)

            recipe.remove_ingredient(ingredient)
            self._recipe_repository.save(recipe)

            log_operation(
                logger,
                operation="delete_by_id",
                outcome="deleted",
                recipe_id=recipe_id,
                ingredient_id=ingredient_id,
            )

        except ServiceError:
            raise
        except SQLAlchemyError as e:
            raise DatabaseError(f"Failed to delete ingredient {ingredient_id}", e)

    def _get_recipe(self, recipe_id: int, operation: str) -> Recipe:
        """Load a recipe or raise RecipeNotFound."""
        recipe = self._recipe_repository.find_by_id(recipe_id)
        if recipe is None:
            log_operation(
                logger,
                operation=operation,
                outcome="recipe_not_found",
                level=logging.WARNING,
                recipe_id=recipe_id,
            )
            raise RecipeNotFound(recipe_id)
        return recipe


def _find_ingredient(recipe: Recipe, ingredient_id: Optional[int]) -> Optional[Ingredient]:
    """First ingredient of the recipe whose ID equals ingredient_id."""
    if ingredient_id is None:
        return None
    return next((i for i in recipe.ingredients if i.id == ingredient_id), None)


def _find_matching_ingredient(
    recipe: Recipe, command: IngredientCommand
) -> Optional[Ingredient]:
    """First ingredient with the command's description, amount and unit of measure ID."""
    amount = normalize_amount(command.amount)
    return next(
        (
            i
            for i in recipe.ingredients
            if i.description == command.description
            and i.amount == amount
            and i.uom_id == command.uom_id
        ),
        None,
    )


def build_ingredient_service(session: Session) -> IngredientService:
    """
    Build an IngredientService backed by SQLAlchemy repositories on a session.

    Args:
        session: Session shared by both repositories

    Returns:
        IngredientService using the default converters
    """
    return IngredientService(RecipeRepository(session), UnitOfMeasureRepository(session))


# ============================================================================
# Session-managing convenience functions
# ============================================================================


def get_ingredient(
    recipe_id: int, ingredient_id: int, session: Optional[Session] = None
) -> IngredientCommand:
    """
    Get one ingredient of a recipe.

    Args:
        recipe_id: Recipe ID
        ingredient_id: Ingredient ID
        session: Optional database session. If None, creates a new session.

    Raises:
        RecipeNotFound, IngredientNotFound, DatabaseError
    """

    def _impl(sess: Session) -> IngredientCommand:
        return build_ingredient_service(sess).find_by_recipe_id_and_ingredient_id(
            recipe_id, ingredient_id
        )

    if session is not None:
        return _impl(session)
    with session_scope() as sess:
        return _impl(sess)


def list_ingredients(recipe_id: int, session: Optional[Session] = None) -> List[IngredientCommand]:
    """Get all ingredients of a recipe. Raises RecipeNotFound if it doesn't exist."""

    def _impl(sess: Session) -> List[IngredientCommand]:
        return build_ingredient_service(sess).list_ingredients(recipe_id)

    if session is not None:
        return _impl(session)
    with session_scope() as sess:
        return _impl(sess)


def save_ingredient(
    command: IngredientCommand, session: Optional[Session] = None
) -> IngredientCommand:
    """
    Create or update an ingredient from a command.

    Raises:
        RecipeNotFound, UnrecoverableServiceError, DatabaseError
    """

    def _impl(sess: Session) -> IngredientCommand:
        return build_ingredient_service(sess).save_ingredient_command(command)

    if session is not None:
        return _impl(session)
    with session_scope() as sess:
        return _impl(sess)


def delete_ingredient(
    recipe_id: int, ingredient_id: int, session: Optional[Session] = None
) -> None:
    """
    Delete an ingredient from a recipe.

    Raises:
        RecipeNotFound, IngredientNotFound, DatabaseError
    """

    def _impl(sess: Session) -> None:
        build_ingredient_service(sess).delete_by_id(recipe_id, ingredient_id)

    if session is not None:
        return _impl(session)
    with session_scope() as sess:
        return _impl(sess)
