"""Services package - Business logic layer for recipe ingredients.

Architecture:
- Services: IngredientService (constructed with its repositories) plus
  session-managing module functions
- Transactions: session_scope() per call, transaction_scope() for a
  unit of work on an existing session
- Exceptions: ServiceError hierarchy (NotFoundError, UnrecoverableServiceError,
  DatabaseError)
- Commands: dataclasses exchanged at the service boundary

Service Modules:
- ingredient_service: fetch / upsert / delete ingredients of a recipe
- unit_of_measure_service: unit of measure lookups

Infrastructure:
- database: Session management and database utilities
- repositories: Recipe and UnitOfMeasure stores
- converters: Model <-> command mapping
- exceptions: Custom exception classes for service layer errors
- logging_utils: Structured operation logging
"""

from . import database, ingredient_service, unit_of_measure_service
from .commands import IngredientCommand, UnitOfMeasureCommand
from .exceptions import (
    DatabaseError,
    IngredientNotFound,
    NotFoundError,
    RecipeNotFound,
    ServiceError,
    UnitOfMeasureNotFound,
    UnrecoverableServiceError,
)
from .ingredient_service import IngredientService, build_ingredient_service
from .repositories import RecipeRepository, UnitOfMeasureRepository

__all__ = [
    "database",
    "ingredient_service",
    "unit_of_measure_service",
    "IngredientCommand",
    "UnitOfMeasureCommand",
    "IngredientService",
    "build_ingredient_service",
    "RecipeRepository",
    "UnitOfMeasureRepository",
    "ServiceError",
    "NotFoundError",
    "RecipeNotFound",
    "IngredientNotFound",
    "UnitOfMeasureNotFound",
    "UnrecoverableServiceError",
    "DatabaseError",
]
