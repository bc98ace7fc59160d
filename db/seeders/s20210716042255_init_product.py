from __future__ import annotations

from db.handle import DataHandle
from db.seeders import now

TABLE = "Products"

THUMB = "files/575739f2-43f8-4dd3-9af3-3cb4661c8fc4.png"


def _product(name: str, code: str, cash_price: int, points_price: int, description: str, **extra: object) -> dict:
    ts = now()
    row = dict(
        name=name,
        code=code,
        categoryId=1,
        cashPrice=cash_price,
        pointsPrice=points_price,
        description=description,
        saleOff=0,
        size="L",
        quantity=100,
        objectStatus="active",
        createdAt=ts,
        updatedAt=ts,
        thumb=THUMB,
    )
    row.update(extra)
    return row


def up(handle: DataHandle) -> int:
    return handle.bulk_insert(
        TABLE,
        [
            _product("Giày Nike Air Jordan 1 Low Black Toe 553558-116", "1221", 8200000, 500, "Lorem Ipsum is simply 1", content=""),
            _product(
                "Giày Nike Air Jordan 1 Zoom Air Paris Saint-Germain DB3610-105",
                "1222",
                9900000,
                1000,
                "Lorem Ipsum is simply 2",
                content="",
            ),
            _product("Giày Nike Air Force 1 07 3 'White Black' AO2423-101", "1222", 4500000, 1000, "Lorem Ipsum is simply 2", content=""),
            _product("Giày Adidas Ultraboost 21 Primeblue", "1222", 4000000, 1000, "Lorem Ipsum is simply 2", content=""),
            # No content for this one; it lands as NULL.
            _product("Giày Adidas UltraBoost 20", "1222", 2000000, 1000, "Lorem Ipsum is simply 2"),
            _product("Adidas Giày Superstar", "1222", 2300000, 1000, "Lorem Ipsum is simply 2", content=""),
            _product("Giày Thể Thao Unisex Puma X-Ray 2 Square BlkYELLOW", "1222", 1680000, 1000, "Lorem Ipsum is simply 2", content=""),
            _product("PUMA - Giày sneaker Ralph Sampson Lo Sportstyle", "1222", 1299000, 1000, "Lorem Ipsum is simply 2", content=""),
        ],
    )


def down(handle: DataHandle) -> int:
    return handle.bulk_delete(TABLE)
