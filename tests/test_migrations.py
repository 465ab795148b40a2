# tests/test_migrations.py
"""Run the Alembic history against a scratch SQLite file."""

import logging.config

from sqlalchemy import create_engine, inspect

from devconnector.core.settings import settings
from devconnector.db.session import Base
from devconnector.scripts.migrate import run_upgrade_head


def test_upgrade_head_creates_model_tables(tmp_path, monkeypatch) -> None:
    url = f"sqlite:///{tmp_path / 'migrated.db'}"
    monkeypatch.setattr(settings, "database_url", url)
    monkeypatch.setattr(settings, "use_testing_database", False)
    # Keep pytest's logging setup intact.
    monkeypatch.setattr(logging.config, "fileConfig", lambda *args, **kwargs: None)

    run_upgrade_head()

    engine = create_engine(url)
    try:
        inspector = inspect(engine)
        tables = set(inspector.get_table_names())
        assert set(Base.metadata.tables) <= tables
        assert "alembic_version" in tables
        post_columns = {column["name"] for column in inspector.get_columns("post")}
        assert {"version", "user_id", "text", "date"} <= post_columns
    finally:
        engine.dispose()
