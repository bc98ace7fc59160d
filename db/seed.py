from __future__ import annotations

import argparse
import importlib
import json
import pkgutil
import sys
import time
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from types import ModuleType
from typing import Literal

from sqlalchemy.engine import Engine

from db import seeders as seeders_pkg
from db.engine import create_engine
from db.handle import DataHandle, SqlDataHandle
from db.logging import configure_logging, get_logger
from db.settings import SETTINGS

Direction = Literal["up", "down"]


@dataclass(frozen=True)
class Seeder:
    seed_id: str
    up: Callable[[DataHandle], int]
    down: Callable[[DataHandle], int]
    table: str | None = None

    @classmethod
    def from_module(cls, module: ModuleType) -> Seeder:
        name = module.__name__.rsplit(".", 1)[-1]
        for attr in ("up", "down"):
            if not callable(getattr(module, attr, None)):
                raise TypeError(f"seeder {module.__name__} is missing {attr}()")
        return cls(seed_id=name.removeprefix("s"), up=module.up, down=module.down, table=getattr(module, "TABLE", None))


def discover_seeders(package: ModuleType = seeders_pkg) -> list[Seeder]:
    """Import every `s<timestamp>_*` module of `package`, ordered by timestamp."""
    names = sorted(m.name for m in pkgutil.iter_modules(package.__path__) if m.name.startswith("s") and not m.ispkg)
    return [Seeder.from_module(importlib.import_module(f"{package.__name__}.{name}")) for name in names]


def select_seeders(seeders: Sequence[Seeder], only: Sequence[str] | None) -> list[Seeder]:
    if not only:
        return list(seeders)
    by_id = {s.seed_id: s for s in seeders}
    unknown = [seed_id for seed_id in only if seed_id not in by_id]
    if unknown:
        raise LookupError(f"unknown seeder(s): {', '.join(unknown)}")
    wanted = set(only)
    # Keep timestamp order regardless of the order ids were given in.
    return [s for s in seeders if s.seed_id in wanted]


def run_seeders(engine: Engine, seeders: Sequence[Seeder], direction: Direction) -> dict[str, int]:
    """Apply `direction` for each seeder, one transaction per seeder.

    `up` runs in timestamp order and `down` in reverse. The first failure is logged with the
    failing seeder id and re-raised unchanged; later seeders are not run.
    """
    ordered = list(seeders) if direction == "up" else list(reversed(seeders))
    counts: dict[str, int] = {}
    for seeder in ordered:
        unit_log = get_logger(component="seed", seed=seeder.seed_id, table=seeder.table, direction=direction)
        unit_log.info("seed_started")
        start = time.perf_counter()
        try:
            with engine.begin() as conn:
                rows = getattr(seeder, direction)(SqlDataHandle(conn))
        except Exception as exc:
            unit_log.error("seed_failed", error=type(exc).__name__, detail=str(exc).split("\n", 1)[0])
            raise
        elapsed_ms = round((time.perf_counter() - start) * 1000, 2)
        unit_log.info("seed_finished", rows=rows, elapsed_ms=elapsed_ms)
        counts[seeder.seed_id] = rows
    return counts


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="runclub-seed", description="Apply or revert reference-data seeders.")
    parser.add_argument("--database-url", default=SETTINGS.database_url)
    parser.add_argument("--log-level", default=SETTINGS.log_level)
    parser.add_argument("--console-logs", action="store_true", help="Human-readable logs instead of JSON.")
    sub = parser.add_subparsers(dest="command", required=True)
    for command, help_text in (
        ("up", "Run seeders in timestamp order."),
        ("down", "Revert seeders in reverse timestamp order."),
    ):
        p = sub.add_parser(command, help=help_text)
        p.add_argument("--only", action="append", metavar="SEED_ID", help="Restrict to this seeder id (repeatable).")
    sub.add_parser("list", help="Print discovered seeders in run order.")
    args = parser.parse_args(argv)

    configure_logging(args.log_level, json_output=not args.console_logs)

    seeders = discover_seeders()
    if args.command == "list":
        for seeder in seeders:
            print(f"{seeder.seed_id}\t{seeder.table or '-'}")
        return 0

    try:
        selected = select_seeders(seeders, args.only)
    except LookupError as exc:
        parser.error(str(exc))

    engine = create_engine(args.database_url)
    try:
        counts = run_seeders(engine, selected, args.command)
    except Exception:
        return 1
    finally:
        engine.dispose()

    print(json.dumps({"direction": args.command, "counts": counts}, indent=2, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
