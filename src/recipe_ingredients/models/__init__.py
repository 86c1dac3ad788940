"""
Database models package.

This package contains all SQLAlchemy ORM models for the service.
"""

from .base import Base, BaseModel
from .enums import Difficulty
from .unit_of_measure import UnitOfMeasure
from .recipe import Recipe
from .ingredient import Ingredient

__all__ = [
    "Base",
    "BaseModel",
    "Difficulty",
    "UnitOfMeasure",
    "Recipe",
    "Ingredient",
]
