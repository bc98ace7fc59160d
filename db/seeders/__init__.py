"""
Reference-data seeders.

Each module is named `s<timestamp>_<name>` and exposes `up(handle)` / `down(handle)`.
The runner in `db.seed` discovers them and applies them in module-name (timestamp) order.
"""

from __future__ import annotations

from datetime import UTC, datetime


def now() -> datetime:
    return datetime.now(tz=UTC)
