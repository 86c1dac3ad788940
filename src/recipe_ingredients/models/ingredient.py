"""
Ingredient model - a quantity of something used by exactly one recipe.

An Ingredient belongs to the Recipe aggregate: it is loaded and persisted
through its recipe, and deleted when removed from the recipe's collection.
"""

from sqlalchemy import Column, ForeignKey, Index, Integer, Numeric, String
from sqlalchemy.orm import relationship

from .base import BaseModel
from ..utils.constants import AMOUNT_PRECISION, AMOUNT_SCALE


class Ingredient(BaseModel):
    """
    Ingredient line of a recipe.

    Attributes:
        description: What the ingredient is (e.g., "Sea Salt")
        amount: Decimal quantity, expressed in uom
        uom_id: Foreign key to UnitOfMeasure
        recipe_id: Foreign key to the owning Recipe
        uom: Unit of measure (lookup value, never owned)
        recipe: Back-reference to the owning Recipe (navigation only)
    """

    __tablename__ = "ingredient"

    description = Column(String(255), nullable=True)
    amount = Column(Numeric(AMOUNT_PRECISION, AMOUNT_SCALE, asdecimal=True), nullable=True)

    uom_id = Column(Integer, ForeignKey("unit_of_measure.id", ondelete="RESTRICT"), nullable=True)
    recipe_id = Column(Integer, ForeignKey("recipe.id", ondelete="CASCADE"), nullable=True)

    uom = relationship("UnitOfMeasure", lazy="joined")
    recipe = relationship("Recipe", back_populates="ingredients")

    __table_args__ = (
        Index("idx_ingredient_recipe", "recipe_id"),
        Index("idx_ingredient_uom", "uom_id"),
    )

    def __repr__(self) -> str:
        """String representation of ingredient."""
        return (
            f"Ingredient(id={self.id}, recipe_id={self.recipe_id}, "
            f"description='{self.description}', amount={self.amount}, uom_id={self.uom_id})"
        )
