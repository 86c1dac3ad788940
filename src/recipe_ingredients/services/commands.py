"""Command objects exchanged at the service boundary.

Commands are plain dataclasses mirroring the persisted models. They have no
lifecycle of their own: services build them on read and consume them on
write, so callers never hold on to session-bound entities.
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional


@dataclass
class UnitOfMeasureCommand:
    """Transfer shape of a UnitOfMeasure.

    Attributes:
        id: Unit of measure ID
        description: Unit name (e.g., "Cup")
    """

    id: Optional[int] = None
    description: Optional[str] = None


@dataclass
class IngredientCommand:
    """Transfer shape of an Ingredient, plus its owning recipe's ID.

    An id of None (or one not present in the recipe) asks the service to
    create a new ingredient.

    Attributes:
        id: Ingredient ID, None for a new ingredient
        recipe_id: ID of the owning recipe
        description: What the ingredient is
        amount: Decimal quantity
        uom: Unit of measure reference
    """

    id: Optional[int] = None
    recipe_id: Optional[int] = None
    description: Optional[str] = None
    amount: Optional[Decimal] = None
    uom: Optional[UnitOfMeasureCommand] = None

    @property
    def uom_id(self) -> Optional[int]:
        """ID of the referenced unit of measure, or None when unset."""
        return self.uom.id if self.uom is not None else None
