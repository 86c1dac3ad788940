"""Converters between persisted models and command objects.

All converters are pure: no session access, no lookups, and None in gives
None out. Amounts are normalized to the stored scale in both directions.
Converting an Ingredient to a command and back preserves
description, amount and unit of measure ID; the recipe back-reference is
never set here and must be attached by the caller.
"""

from decimal import ROUND_HALF_UP, Decimal
from typing import Optional

from ..models import Ingredient, UnitOfMeasure
from ..utils.constants import AMOUNT_SCALE
from .commands import IngredientCommand, UnitOfMeasureCommand

_AMOUNT_QUANTUM = Decimal(1).scaleb(-AMOUNT_SCALE)


def unit_of_measure_to_command(uom: Optional[UnitOfMeasure]) -> Optional[UnitOfMeasureCommand]:
    """Convert a UnitOfMeasure to its command shape."""
    if uom is None:
        return None
    return UnitOfMeasureCommand(id=uom.id, description=uom.description)


def command_to_unit_of_measure(command: Optional[UnitOfMeasureCommand]) -> Optional[UnitOfMeasure]:
    """Convert a UnitOfMeasureCommand to a (transient) UnitOfMeasure."""
    if command is None:
        return None
    return UnitOfMeasure(id=command.id, description=command.description)


def ingredient_to_command(ingredient: Optional[Ingredient]) -> Optional[IngredientCommand]:
    """
    Convert an Ingredient to an IngredientCommand.

    The owning recipe's ID is denormalized into recipe_id. When the uom
    relationship is not populated, only the uom_id is carried over.

    Args:
        ingredient: Ingredient to convert

    Returns:
        IngredientCommand, or None if ingredient is None
    """
    if ingredient is None:
        return None

    if ingredient.recipe is not None:
        recipe_id = ingredient.recipe.id
    else:
        recipe_id = ingredient.recipe_id

    if ingredient.uom is not None:
        uom = unit_of_measure_to_command(ingredient.uom)
    elif ingredient.uom_id is not None:
        uom = UnitOfMeasureCommand(id=ingredient.uom_id)
    else:
        uom = None

    return IngredientCommand(
        id=ingredient.id,
        recipe_id=recipe_id,
        description=ingredient.description,
        amount=normalize_amount(ingredient.amount),
        uom=uom,
    )


def command_to_ingredient(command: Optional[IngredientCommand]) -> Optional[Ingredient]:
    """
    Convert an IngredientCommand to a new, unattached Ingredient.

    The unit of measure is referenced by ID only, so no lookup happens and
    no UnitOfMeasure row is ever created from a command.

    Args:
        command: Command to convert

    Returns:
        Transient Ingredient, or None if command is None
    """
    if command is None:
        return None

    return Ingredient(
        id=command.id,
        description=command.description,
        amount=normalize_amount(command.amount),
        uom_id=command.uom_id,
    )


def normalize_amount(value) -> Optional[Decimal]:
    """
    Normalize an amount to the Decimal the amount column stores.

    Floats go through str to avoid binary noise, and the result is rounded
    half-up to AMOUNT_SCALE places, so a value compares equal before and
    after it is persisted.

    Args:
        value: Decimal, int, float, numeric string or None

    Returns:
        Decimal with AMOUNT_SCALE places, or None if value is None
    """
    if value is None:
        return None
    if not isinstance(value, Decimal):
        value = Decimal(str(value))
    return value.quantize(_AMOUNT_QUANTUM, rounding=ROUND_HALF_UP)
