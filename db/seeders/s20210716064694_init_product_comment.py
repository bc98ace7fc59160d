from __future__ import annotations

from datetime import UTC, datetime

from db.handle import DataHandle

TABLE = "ProductComments"


def _comment(title: str, comment: str, star: float, author: str, email: str, posted: datetime) -> dict:
    # Review dates are part of the fixture, not the insertion time.
    return dict(
        title=title,
        comment=comment,
        userId=1,
        star=star,
        nameUserComment=author,
        email=email,
        productId=1,
        objectStatus="active",
        createdAt=posted,
        updatedAt=posted,
    )


def up(handle: DataHandle) -> int:
    return handle.bulk_insert(
        TABLE,
        [
            _comment(
                "Ngàn yêu thương",
                "Tư vấn nhiệt tình,làm việc chu đáo,nắm bắt tâm lý kh tuyệt vời, giày đẹp, nc duyên dáng luôn🥰,"
                "ncl tuyệt vời, đề nghị các tín đồ quan tâm thật sâu sắc tới shop nhé,"
                "chuc shop buôn may bán đắt quanh năm ngày tháng lun❤️❤️",
                4.6,
                "Hải vũ",
                "haivu@gmail.com",
                datetime(2021, 6, 1, tzinfo=UTC),
            ),
            _comment(
                "Chất lượng tuyệt vời",
                "1 đôi giày basic không thể thiếu trong tủ giày, tks shop vì trải nghiệm tuyệt vời",
                4.2,
                "Nhung",
                "thuynhung@gmail.com",
                datetime(2021, 5, 23, tzinfo=UTC),
            ),
            _comment(
                "giày tốt",
                "giày đẹp chất lượng",
                4.2,
                "hoang",
                "tanhoang@gmail.com",
                datetime(2021, 5, 21, tzinfo=UTC),
            ),
        ],
    )


def down(handle: DataHandle) -> int:
    return handle.bulk_delete(TABLE)
