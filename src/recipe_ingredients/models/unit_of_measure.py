"""
Unit of measure reference model.

Units are seeded on database initialization and are only ever looked up by
identifier from the service layer; they are never created or modified there.
"""

from sqlalchemy import Column, String

from .base import BaseModel


class UnitOfMeasure(BaseModel):
    """
    Reference table for measurement units used by ingredients.

    Attributes:
        description: Unique unit name (e.g., "Teaspoon", "Cup")
    """

    __tablename__ = "unit_of_measure"

    description = Column(String(50), unique=True, nullable=False, index=True)

    def __repr__(self) -> str:
        """Return string representation of UnitOfMeasure."""
        return f"UnitOfMeasure(id={self.id}, description='{self.description}')"
