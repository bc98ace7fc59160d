from __future__ import annotations

import logging
import os
from pathlib import Path

import pytest
import structlog
from sqlalchemy.engine import Engine

from db.engine import create_engine
from db.migrate import upgrade


@pytest.fixture()
def engine(tmp_path: Path) -> Engine:
    # File-backed so every connection (alembic, seeders, assertions) sees the same database.
    eng = create_engine(f"sqlite:///{tmp_path / 'runclub.db'}")
    yield eng
    eng.dispose()


@pytest.fixture()
def migrated_engine(engine: Engine) -> Engine:
    upgrade(engine, "head")
    return engine


@pytest.fixture(scope="session")
def postgres_url() -> str:
    if os.getenv("RUNCLUB_PG_TESTS") != "1":
        pytest.skip("set RUNCLUB_PG_TESTS=1 to run against a PostgreSQL container")
    from testcontainers.postgres import PostgresContainer

    with PostgresContainer("postgres:16") as pg:
        yield pg.get_connection_url()


@pytest.fixture(autouse=True)
def _reset_logging():
    # The seed CLI configures structlog globally; keep each test starting from defaults.
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    structlog.reset_defaults()
    root.handlers[:] = handlers
    root.setLevel(level)
