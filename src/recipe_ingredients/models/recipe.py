"""
Recipe model - the aggregate root owning its ingredients.

Ingredients are attached and detached only through the recipe:
- add_ingredient(): set the back-reference and append
- remove_ingredient(): clear the back-reference and remove (row is deleted on flush)
"""

from sqlalchemy import Column, Enum, Integer, String, Text
from sqlalchemy.orm import relationship

from .base import BaseModel
from .enums import Difficulty


class Recipe(BaseModel):
    """
    Recipe model.

    Attributes:
        description: Recipe title / short description
        prep_time: Preparation time in minutes
        cook_time: Cooking time in minutes
        servings: Number of servings produced
        source: Where the recipe came from
        url: Source URL
        directions: Preparation steps
        difficulty: Difficulty enum
        ingredients: Owned Ingredient entities
    """

    __tablename__ = "recipe"

    description = Column(String(255), nullable=True, index=True)
    prep_time = Column(Integer, nullable=True)
    cook_time = Column(Integer, nullable=True)
    servings = Column(Integer, nullable=True)
    source = Column(String(255), nullable=True)
    url = Column(String(500), nullable=True)
    directions = Column(Text, nullable=True)
    difficulty = Column(Enum(Difficulty), nullable=True)

    ingredients = relationship(
        "Ingredient",
        back_populates="recipe",
        cascade="all, delete-orphan",
        order_by="Ingredient.id",
        lazy="joined",
    )

    def add_ingredient(self, ingredient) -> "Recipe":
        """
        Attach an ingredient to this recipe.

        Appending through the collection also sets ingredient.recipe.

        Returns:
            self, for chaining
        """
        if ingredient not in self.ingredients:
            self.ingredients.append(ingredient)
        ingredient.recipe = self
        return self

    def remove_ingredient(self, ingredient) -> None:
        """Detach an ingredient: clear its back-reference and drop it from the collection."""
        ingredient.recipe = None
        if ingredient in self.ingredients:
            self.ingredients.remove(ingredient)

    def __repr__(self) -> str:
        """String representation of recipe."""
        return f"Recipe(id={self.id}, description='{self.description}')"
