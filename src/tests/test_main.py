"""Tests for the database initialization entry point."""

import pytest
from sqlalchemy import create_engine, inspect, text

from recipe_ingredients import main as main_module
from recipe_ingredients.services import database
from recipe_ingredients.utils.config import reset_config
from recipe_ingredients.utils.constants import DEFAULT_UNITS_OF_MEASURE


@pytest.fixture
def file_database(tmp_path, monkeypatch):
    """Point the configuration at a temporary SQLite file."""
    db_path = tmp_path / "ingredients.db"
    monkeypatch.setenv("RECIPE_INGREDIENTS_DATABASE_URL", f"sqlite:///{db_path}")
    reset_config()
    database.close_connections()

    yield db_path

    database.close_connections()
    reset_config()


class TestMain:
    """Tests for main()."""

    def test_creates_and_seeds_database(self, file_database, capsys):
        assert main_module.main() == 0

        engine = create_engine(f"sqlite:///{file_database}")
        try:
            assert {"recipe", "ingredient", "unit_of_measure"} <= set(
                inspect(engine).get_table_names()
            )
            with engine.connect() as conn:
                count = conn.execute(text("SELECT COUNT(*) FROM unit_of_measure")).scalar()
            assert count == len(DEFAULT_UNITS_OF_MEASURE)
        finally:
            engine.dispose()

        out = capsys.readouterr().out
        assert f"Database ready with {len(DEFAULT_UNITS_OF_MEASURE)} units of measure" in out

    def test_is_idempotent(self, file_database):
        assert main_module.main() == 0
        assert main_module.main() == 0

    def test_failure_returns_one(self, file_database, monkeypatch, capsys):
        def _fail():
            raise RuntimeError("disk full")

        monkeypatch.setattr(main_module, "initialize_app_database", _fail)

        assert main_module.main() == 1
        assert "disk full" in capsys.readouterr().out
