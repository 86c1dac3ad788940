"""Service layer logging utilities.

Provides structured logging functions for service operations, enabling
consistent log format and context across ingredient and unit-of-measure
operations.

Usage:
    from recipe_ingredients.services.logging_utils import get_service_logger, log_operation

    logger = get_service_logger(__name__)

    log_operation(
        logger,
        operation="save_ingredient_command",
        outcome="created",
        recipe_id=1,
        ingredient_id=12,
    )
"""

import logging
from typing import Any

LOGGER_PREFIX = "recipe_ingredients.services"


def get_service_logger(name: str) -> logging.Logger:
    """
    Get a logger configured for service operations.

    Args:
        name: Logger name (typically __name__ of the calling module)

    Returns:
        Logger named 'recipe_ingredients.services.<module>'.

    Example:
        >>> get_service_logger("recipe_ingredients.services.ingredient_service").name
        'recipe_ingredients.services.ingredient_service'
    """
    if "." in name:
        name = name.split(".")[-1]
    return logging.getLogger(f"{LOGGER_PREFIX}.{name}")


def log_operation(
    logger: logging.Logger,
    operation: str,
    outcome: str,
    level: int = logging.INFO,
    **context: Any,
) -> None:
    """
    Log a service operation with structured context.

    The message is "<operation>: <outcome>"; the context is passed via the
    'extra' parameter so handlers can pick fields off the record.

    Args:
        logger: Logger instance to use
        operation: Operation name (e.g., "delete_by_id")
        outcome: Outcome description (e.g., "deleted", "recipe_not_found")
        level: Log level (default: INFO). Use DEBUG for verbose/frequent logs.
        **context: Additional context fields. Common fields:
            - recipe_id: Recipe being processed
            - ingredient_id: Ingredient being processed
            - uom_id: Unit of measure referenced
            - error: Error message if outcome is "error"
    """
    extra = {
        "operation": operation,
        "outcome": outcome,
        **context,
    }
    logger.log(level, f"{operation}: {outcome}", extra=extra)
