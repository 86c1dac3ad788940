"""
Database connection and session management for the recipe-ingredients service.

This module provides:
- Database engine creation and configuration
- Session factory for database operations
- Transaction scopes (per-session and re-entrant)
- Database initialization (create tables, seed units of measure)
- Foreign key enforcement and WAL mode for SQLite
"""

from contextlib import contextmanager
from typing import Iterator, Optional
import logging

from sqlalchemy import create_engine, event, inspect
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, close_all_sessions, sessionmaker
from sqlalchemy.pool import StaticPool

from ..models.base import Base
from ..utils.config import get_config
from ..utils.constants import DEFAULT_UNITS_OF_MEASURE

logger = logging.getLogger(__name__)

# Global engine and session factory
_engine: Optional[Engine] = None
_SessionFactory: Optional[sessionmaker] = None

# Key in Session.info tracking how many transaction_scope() blocks are open
_TRANSACTION_DEPTH_KEY = "recipe_ingredients.transaction_depth"


@event.listens_for(Engine, "connect")
def _set_sqlite_pragma(dbapi_connection, connection_record):
    """
    Set SQLite pragmas on connection.

    Enables foreign key constraints and WAL mode. Other backends are left alone.
    """
    if type(dbapi_connection).__module__.split(".")[0] not in ("sqlite3", "pysqlite2"):
        return

    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.execute("PRAGMA journal_mode=WAL")
    cursor.execute("PRAGMA synchronous=NORMAL")
    cursor.close()


def create_database_engine(database_url: Optional[str] = None, echo: bool = False) -> Engine:
    """
    Create and configure the database engine.

    Args:
        database_url: Optional database URL. If None, uses config default.
        echo: If True, log all SQL statements (useful for debugging)

    Returns:
        Configured SQLAlchemy Engine
    """
    if database_url is None:
        config = get_config()
        config.ensure_directories()
        database_url = config.database_url

    logger.info(f"Creating database engine: {database_url}")

    if ":memory:" in database_url or "mode=memory" in database_url:
        # In-memory databases (testing) must share one connection
        return create_engine(
            database_url,
            echo=echo,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )

    if database_url.startswith("sqlite"):
        return create_engine(
            database_url,
            echo=echo,
            connect_args={"check_same_thread": False, "timeout": 30},
        )

    return create_engine(database_url, echo=echo)


def init_database(engine: Optional[Engine] = None) -> None:
    """
    Initialize the database by creating all tables.

    Safe to call multiple times - existing tables won't be recreated.

    Args:
        engine: Optional engine to use. If None, uses global engine.
    """
    if engine is None:
        engine = get_engine()

    logger.info("Initializing database tables")

    # Register all models with Base before create_all
    from ..models import ingredient, recipe, unit_of_measure  # noqa: F401

    Base.metadata.create_all(engine)

    logger.info("Database tables initialized successfully")


def get_engine(force_recreate: bool = False) -> Engine:
    """
    Get the global database engine.

    Args:
        force_recreate: If True, recreate the engine even if one exists

    Returns:
        Database engine
    """
    global _engine

    if _engine is None or force_recreate:
        _engine = create_database_engine()

    return _engine


def get_session_factory() -> sessionmaker:
    """
    Get the global session factory.

    Returns:
        Session factory (sessionmaker)
    """
    global _SessionFactory

    if _SessionFactory is None:
        engine = get_engine()
        _SessionFactory = sessionmaker(bind=engine, expire_on_commit=False)

    return _SessionFactory


def get_session() -> Session:
    """
    Create a new database session.

    The caller owns the session and must close it.
    """
    session_factory = get_session_factory()
    return session_factory()


@contextmanager
def session_scope() -> Iterator[Session]:
    """
    Provide a transactional scope for database operations.

    - Creates a new session
    - Commits on success
    - Rolls back on exception
    - Always closes the session

    Example:
        with session_scope() as session:
            recipe = session.get(Recipe, 1)
    """
    session = get_session()
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()


@contextmanager
def transaction_scope(session: Session) -> Iterator[Session]:
    """
    Open, or join, a transaction on an existing session.

    Scopes nest: only the outermost scope commits on success or rolls back
    on exception. Inner scopes join the enclosing unit of work, so a call
    that is atomic on its own becomes part of a larger transaction when the
    caller has already opened one.

    Args:
        session: Session the transaction belongs to

    Yields:
        The same session
    """
    depth = session.info.get(_TRANSACTION_DEPTH_KEY, 0)
    session.info[_TRANSACTION_DEPTH_KEY] = depth + 1
    try:
        yield session
        if depth == 0:
            session.commit()
    except Exception:
        if depth == 0:
            session.rollback()
        raise
    finally:
        session.info[_TRANSACTION_DEPTH_KEY] = depth


def seed_units_of_measure(session: Optional[Session] = None) -> int:
    """
    Insert the default units of measure that are not yet present.

    Idempotent: existing descriptions are left untouched.

    Args:
        session: Optional database session. If None, creates a new session.

    Returns:
        Number of units inserted
    """
    from ..models.unit_of_measure import UnitOfMeasure

    def _impl(sess: Session) -> int:
        existing = {description for (description,) in sess.query(UnitOfMeasure.description)}
        missing = [d for d in DEFAULT_UNITS_OF_MEASURE if d not in existing]
        for description in missing:
            sess.add(UnitOfMeasure(description=description))
        sess.flush()
        if missing:
            logger.info(f"Seeded {len(missing)} units of measure")
        return len(missing)

    if session is not None:
        return _impl(session)
    with session_scope() as sess:
        return _impl(sess)


def verify_database() -> bool:
    """
    Verify that the database is accessible and has tables.

    Returns:
        True if database is valid, False otherwise
    """
    try:
        engine = get_engine()
        tables = inspect(engine).get_table_names()
        expected_tables = ["recipe", "ingredient", "unit_of_measure"]
        return all(table in tables for table in expected_tables)
    except Exception as e:
        logger.error(f"Database verification failed: {e}")
        return False


def reset_database(confirm: bool = False) -> None:
    """
    Drop all tables and recreate the database.

    WARNING: This will delete all data!

    Args:
        confirm: Must be True to actually reset. Safety check.

    Raises:
        ValueError: If confirm is not True
    """
    if not confirm:
        raise ValueError("Must pass confirm=True to reset database. This will delete all data!")

    logger.warning("RESETTING DATABASE - ALL DATA WILL BE LOST")

    engine = get_engine()

    from ..models import ingredient, recipe, unit_of_measure  # noqa: F401

    Base.metadata.drop_all(engine)
    logger.info("All tables dropped")

    Base.metadata.create_all(engine)
    logger.info("Tables recreated")


def close_connections() -> None:
    """
    Close all database connections.

    Useful for cleanup or before process exit.
    """
    global _engine, _SessionFactory

    if _SessionFactory is not None:
        close_all_sessions()
        _SessionFactory = None

    if _engine is not None:
        _engine.dispose()
        _engine = None

    logger.info("Database connections closed")


def initialize_app_database() -> int:
    """
    Initialize the application database.

    Creates the database and tables if they don't exist and seeds the
    units of measure.

    Returns:
        Number of units of measure in the database after seeding
    """
    from ..models.unit_of_measure import UnitOfMeasure

    config = get_config()

    if not config.database_exists():
        logger.info(f"Creating new database at: {config.database_url}")
    else:
        logger.info(f"Using existing database at: {config.database_url}")

    engine = get_engine()
    init_database(engine)

    with session_scope() as session:
        seed_units_of_measure(session=session)
        unit_count = session.query(UnitOfMeasure).count()

    if verify_database():
        logger.info("Database initialized and verified successfully")
    else:
        logger.warning("Database verification failed - tables may not exist")

    return unit_count
