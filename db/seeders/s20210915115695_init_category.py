from __future__ import annotations

from db.handle import DataHandle
from db.seeders import now

TABLE = "Categories"

# Report categories: level 1 roots, level 2 channels under "truycap" (id 1),
# level 3 metrics under "facebook" (id 4) split into two groups.
CATEGORIES = [
    dict(name="Truy cập", code="truycap", level=1),
    dict(name="Doanh thu", code="doanhthu", level=1),
    dict(name="Marketing", code="marketing", level=1),
    dict(name="Facebook", code="facebook", level=2, parentId=1),
    dict(name="Google", code="google", level=2, parentId=1),
    dict(name="Zalo", code="zalo", level=2, parentId=1),
    dict(name="Lượt xem", code="luotxem", level=3, parentId=4, groupId=1),
    dict(name="Số lượt xem trung bình", code="soluotxemtrungbinh", level=3, parentId=4, groupId=1),
    dict(name="Thời gian xem trung bình", code="thoigianxemtrungbinh", level=3, parentId=4, groupId=1),
    dict(name="Tỉ lệ thoát trang", code="tilethoattrang", level=3, parentId=4, groupId=1),
    dict(name="Lượt truy cập", code="luottruycap", level=3, parentId=4, groupId=2),
    dict(name="Số khách truy cập mới", code="sokhachtruycapmoi", level=3, parentId=4, groupId=2),
    dict(name="Số khách truy cập hiện tại", code="sokhachtruycaphientai", level=3, parentId=4, groupId=2),
    dict(name="Người theo dõi mới", code="nguoitheodoimoi", level=3, parentId=4, groupId=2),
]


def up(handle: DataHandle) -> int:
    ts = now()
    rows = [
        {**category, "level": str(category["level"]), "objectStatus": "active", "createdAt": ts, "updatedAt": ts}
        for category in CATEGORIES
    ]
    return handle.bulk_insert(TABLE, rows)


def down(handle: DataHandle) -> int:
    return handle.bulk_delete(TABLE)
