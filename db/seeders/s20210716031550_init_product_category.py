from __future__ import annotations

from db.handle import DataHandle
from db.seeders import now

TABLE = "ProductCategories"

# (name, code, mainCategoryId); ids 1 and 2 are the "0001" and "0002" main categories.
CATEGORIES = [
    ("Giày thể thao", "U0001", 1),
    ("Áo thun", "U0002", 1),
    ("Dụng cụ", "U0003", 1),
    ("Điện thoại", "U0004", 2),
    ("Máy tính bản", "U0005", 2),
]


def up(handle: DataHandle) -> int:
    ts = now()
    rows = [
        dict(
            name=name,
            avatarUrl="",
            code=code,
            mainCategoryId=main_category_id,
            objectStatus="active",
            createdAt=ts,
            updatedAt=ts,
        )
        for name, code, main_category_id in CATEGORIES
    ]
    return handle.bulk_insert(TABLE, rows)


def down(handle: DataHandle) -> int:
    return handle.bulk_delete(TABLE)
