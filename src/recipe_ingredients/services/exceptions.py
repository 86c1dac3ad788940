"""Service layer exception classes for the recipe-ingredients service.

Exception Hierarchy:
    ServiceError (base)
    ├── NotFoundError
    │   ├── RecipeNotFound
    │   ├── IngredientNotFound
    │   └── UnitOfMeasureNotFound
    ├── UnrecoverableServiceError
    └── DatabaseError
"""

from typing import Optional


class ServiceError(Exception):
    """Base exception for all service layer errors.

    All service-specific exceptions should inherit from this class.
    """

    pass


class NotFoundError(ServiceError):
    """Raised when a requested entity does not exist.

    Surfaced directly to the caller; never retried.
    """

    pass


class RecipeNotFound(NotFoundError):
    """Raised when a recipe cannot be found by ID.

    Example:
        >>> raise RecipeNotFound(1)
        RecipeNotFound: Recipe with ID 1 not found
    """

    def __init__(self, recipe_id: int):
        self.recipe_id = recipe_id
        super().__init__(f"Recipe with ID {recipe_id} not found")


class IngredientNotFound(NotFoundError):
    """Raised when an ingredient cannot be found within a recipe.

    Args:
        ingredient_id: The ingredient ID that was not found
        recipe_id: The recipe that was searched, if known

    Example:
        >>> raise IngredientNotFound(5, recipe_id=1)
        IngredientNotFound: Ingredient with ID 5 not found in recipe 1
    """

    def __init__(self, ingredient_id: int, recipe_id: Optional[int] = None):
        self.ingredient_id = ingredient_id
        self.recipe_id = recipe_id
        message = f"Ingredient with ID {ingredient_id} not found"
        if recipe_id is not None:
            message += f" in recipe {recipe_id}"
        super().__init__(message)


class UnitOfMeasureNotFound(NotFoundError):
    """Raised when a unit of measure cannot be found by ID."""

    def __init__(self, uom_id: int):
        self.uom_id = uom_id
        super().__init__(f"Unit of measure with ID {uom_id} not found")


class UnrecoverableServiceError(ServiceError):
    """Raised when an operation reaches a state it has no way to recover from.

    Used when a unit of measure referenced by an ingredient update is missing,
    and when a just-saved ingredient cannot be located in its recipe.
    """

    pass


class DatabaseError(ServiceError):
    """Raised when a database operation fails."""

    def __init__(self, message: str, original_error: Exception = None):
        self.original_error = original_error
        super().__init__(f"Database error: {message}")
