"""
Entry point for initializing the recipe-ingredients database.

Creates the tables if needed and seeds the units of measure, so the
service layer can be used against the configured database.
"""

import logging
import sys
import traceback

from .services.database import close_connections, initialize_app_database
from .utils.config import get_config


def configure_logging(level: int = logging.INFO) -> None:
    """Configure root logging for command-line use."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def initialize_application() -> bool:
    """
    Initialize the database.

    Returns:
        True if initialization successful, False otherwise
    """
    try:
        unit_count = initialize_app_database()
        print(f"Database ready with {unit_count} units of measure")
        return True

    except Exception as e:
        print(f"ERROR: Failed to initialize database: {e}")
        traceback.print_exc()
        return False

    finally:
        close_connections()


def main() -> int:
    """
    Command-line entry point.

    Returns:
        Process exit code (0 on success, 1 on failure)
    """
    configure_logging()

    config = get_config()
    print(f"{config.app_name} v{config.app_version}")
    print(f"Environment: {config.environment}")
    print(f"Database: {config.database_url}")

    if not initialize_application():
        print("Initialization failed. Exiting.")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
