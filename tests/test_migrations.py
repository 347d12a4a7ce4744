from pathlib import Path

from alembic import command
from alembic.autogenerate import compare_metadata
from alembic.config import Config
from alembic.migration import MigrationContext
from sqlalchemy import create_engine

from database import Base

_MIGRATIONS_DIR = Path(__file__).resolve().parent.parent / "backend" / "migrations"

_INDEX_OPS = {"add_index", "remove_index", "add_constraint", "remove_constraint"}


def _upgraded_engine(tmp_path):
    url = f"sqlite:///{tmp_path / 'migrations.db'}"
    cfg = Config()
    cfg.set_main_option("script_location", str(_MIGRATIONS_DIR))
    cfg.set_main_option("sqlalchemy.url", url)
    command.upgrade(cfg, "head")
    return create_engine(url)


def test_migrations_create_every_table(tmp_path):
    engine = _upgraded_engine(tmp_path)
    with engine.connect() as conn:
        tables = set(conn.dialect.get_table_names(conn))
    engine.dispose()

    assert {"users", "ghost_nets", "audit_logs"} <= tables


def test_model_indexes_match_migrations(tmp_path):
    engine = _upgraded_engine(tmp_path)
    with engine.connect() as conn:
        diff = compare_metadata(MigrationContext.configure(conn), Base.metadata)
    engine.dispose()

    index_drift = [d for d in diff if isinstance(d, tuple) and d[0] in _INDEX_OPS]
    assert index_drift == []
