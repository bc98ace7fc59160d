from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from types import ModuleType
from typing import TextIO

from alembic import command
from alembic.config import Config
from alembic.script import ScriptDirectory
from sqlalchemy.engine import Engine

ALEMBIC_INI = Path(__file__).resolve().parent / "migrations" / "alembic.ini"


def alembic_config(*, configure_logger: bool = True, output_buffer: TextIO | None = None) -> Config:
    # output_buffer receives the rendered SQL of offline (--sql) runs.
    cfg = Config(str(ALEMBIC_INI), output_buffer=output_buffer)
    cfg.attributes["configure_logger"] = configure_logger
    return cfg


def _run(engine: Engine, fn: Callable[[Config, str], None], target: str, cfg: Config | None) -> None:
    cfg = cfg or alembic_config(configure_logger=False)
    # Hand the open connection to env.py; the surrounding begin() commits on success.
    with engine.begin() as connection:
        cfg.attributes["connection"] = connection
        try:
            fn(cfg, target)
        finally:
            cfg.attributes.pop("connection", None)


def upgrade(engine: Engine, target: str = "head", *, cfg: Config | None = None) -> None:
    _run(engine, command.upgrade, target, cfg)


def downgrade(engine: Engine, target: str, *, cfg: Config | None = None) -> None:
    _run(engine, command.downgrade, target, cfg)


def revision_ids(cfg: Config | None = None) -> list[str]:
    """Revision ids from base to head."""
    script = ScriptDirectory.from_config(cfg or alembic_config(configure_logger=False))
    return [rev.revision for rev in reversed(list(script.walk_revisions()))]


def revision_module(revision: str, cfg: Config | None = None) -> ModuleType:
    script = ScriptDirectory.from_config(cfg or alembic_config(configure_logger=False))
    return script.get_revision(revision).module
