from __future__ import annotations

from db.handle import DataHandle
from db.seeders import now

TABLE = "ArticleCategories"


def up(handle: DataHandle) -> int:
    ts = now()
    return handle.bulk_insert(
        TABLE,
        [dict(name="Quảng Cáo", avatarUrl="", code="QC", objectStatus="active", createdAt=ts, updatedAt=ts)],
    )


def down(handle: DataHandle) -> int:
    return handle.bulk_delete(TABLE)
