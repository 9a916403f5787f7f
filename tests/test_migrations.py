"""Alembic schema tests."""

import importlib.util
from pathlib import Path

from alembic.migration import MigrationContext
from alembic.operations import Operations
from sqlalchemy import create_engine, inspect

import marketplace.models  # noqa: F401
from marketplace.database import Base

VERSIONS = Path(__file__).resolve().parent.parent / "alembic" / "versions"


def load_revision(filename: str):
    spec = importlib.util.spec_from_file_location(filename.removesuffix(".py"), VERSIONS / filename)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def test_initial_revision_matches_models(tmp_path):
    revision = load_revision("001_initial_schema.py")
    engine = create_engine(f"sqlite:///{tmp_path / 'migrated.db'}")

    with engine.begin() as conn:
        with Operations.context(MigrationContext.configure(conn)):
            revision.upgrade()

    inspector = inspect(engine)
    assert set(inspector.get_table_names()) == set(Base.metadata.tables)
    for table in Base.metadata.sorted_tables:
        migrated = {column["name"]: column["nullable"] for column in inspector.get_columns(table.name)}
        assert migrated == {column.name: column.nullable for column in table.columns}, table.name
    engine.dispose()
