from __future__ import annotations

from db.handle import DataHandle
from db.seeders import now

TABLE = "Articles"


def up(handle: DataHandle) -> int:
    ts = now()
    rows = [
        dict(
            title="Lorem Ipsum is simply dummy text",
            code=code,
            categoryId=1,
            description="Lorem Ipsum is simply dummy text......",
            banner="",
            objectStatus="active",
            createdAt=ts,
            updatedAt=ts,
        )
        for code in ("BV01", "BV02", "BV03", "BV04")
    ]
    return handle.bulk_insert(TABLE, rows)


def down(handle: DataHandle) -> int:
    return handle.bulk_delete(TABLE)
