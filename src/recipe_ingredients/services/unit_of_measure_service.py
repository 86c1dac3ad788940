"""Unit of Measure Service - Query functions for the unit of measure reference table.

All functions accept an optional session parameter to support being called
from other service functions that need to share a transaction.

Example Usage:
    >>> from recipe_ingredients.services.unit_of_measure_service import list_all_uoms
    >>> [uom.description for uom in list_all_uoms()][:3]
    ['Cup', 'Dash', 'Each']
"""

import logging
from typing import List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from .commands import UnitOfMeasureCommand
from .converters import unit_of_measure_to_command
from .database import session_scope
from .exceptions import DatabaseError, UnitOfMeasureNotFound
from .logging_utils import get_service_logger, log_operation
from .repositories import UnitOfMeasureRepository

logger = get_service_logger(__name__)


def list_all_uoms(session: Optional[Session] = None) -> List[UnitOfMeasureCommand]:
    """Get all units of measure ordered by description.

    Args:
        session: Optional database session. If None, creates a new session.

    Returns:
        List of UnitOfMeasureCommand objects.

    Raises:
        DatabaseError: If database operation fails
    """

    def _impl(sess: Session) -> List[UnitOfMeasureCommand]:
        uoms = UnitOfMeasureRepository(sess).find_all()
        log_operation(logger, "list_all_uoms", "success", level=logging.DEBUG, count=len(uoms))
        return [unit_of_measure_to_command(uom) for uom in uoms]

    try:
        if session is not None:
            return _impl(session)
        with session_scope() as sess:
            return _impl(sess)
    except SQLAlchemyError as e:
        raise DatabaseError("Failed to list units of measure", e)


def get_unit_of_measure(uom_id: int, session: Optional[Session] = None) -> UnitOfMeasureCommand:
    """Get a unit of measure by ID.

    Args:
        uom_id: Unit of measure ID
        session: Optional database session. If None, creates a new session.

    Raises:
        UnitOfMeasureNotFound: If no unit has that ID
        DatabaseError: If database operation fails
    """

    def _impl(sess: Session) -> UnitOfMeasureCommand:
        uom = UnitOfMeasureRepository(sess).find_by_id(uom_id)
        if uom is None:
            log_operation(
                logger,
                "get_unit_of_measure",
                "not_found",
                level=logging.WARNING,
                uom_id=uom_id,
            )
            raise UnitOfMeasureNotFound(uom_id)
        return unit_of_measure_to_command(uom)

    try:
        if session is not None:
            return _impl(session)
        with session_scope() as sess:
            return _impl(sess)
    except SQLAlchemyError as e:
        raise DatabaseError(f"Failed to retrieve unit of measure {uom_id}", e)
