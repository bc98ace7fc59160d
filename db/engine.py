from __future__ import annotations

from typing import Any

import sqlalchemy as sa
from sqlalchemy.engine import Engine
from sqlalchemy.pool import NullPool


def normalize_url(url: str) -> str:
    # Migrations and seeders use a sync driver. Normalize common runtime URLs to psycopg3.
    url = url.replace("postgresql+asyncpg://", "postgresql+psycopg://")
    url = url.replace("postgresql+psycopg2://", "postgresql+psycopg://")
    if url.startswith("postgresql://"):
        url = url.replace("postgresql://", "postgresql+psycopg://", 1)
    return url


def _enable_sqlite_foreign_keys(dbapi_connection: Any, connection_record: Any) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys = ON")
    cursor.close()


def enable_foreign_keys(engine: Engine) -> Engine:
    # SQLite ships with foreign key enforcement off per connection.
    if engine.dialect.name == "sqlite":
        sa.event.listen(engine, "connect", _enable_sqlite_foreign_keys)
    return engine


def create_engine(database_url: str) -> Engine:
    # One unit at a time owns the connection; pooling buys nothing for a CLI run.
    engine = sa.create_engine(normalize_url(database_url), poolclass=NullPool)
    return enable_foreign_keys(engine)
