from __future__ import annotations

from db.handle import DataHandle
from db.seeders import now

TABLE = "ProductMainCategories"


def up(handle: DataHandle) -> int:
    ts = now()
    return handle.bulk_insert(
        TABLE,
        [
            dict(name="Thể thao", avatarUrl="", code="0001", objectStatus="active", createdAt=ts, updatedAt=ts),
            dict(name="Thiết bị điện tử", avatarUrl="", code="0002", objectStatus="active", createdAt=ts, updatedAt=ts),
        ],
    )


def down(handle: DataHandle) -> int:
    return handle.bulk_delete(TABLE)
