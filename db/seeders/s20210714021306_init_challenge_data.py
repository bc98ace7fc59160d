from __future__ import annotations

from db.handle import DataHandle
from db.seeders import now

TABLE = "Challenges"


def up(handle: DataHandle) -> int:
    ts = now()
    return handle.bulk_insert(
        TABLE,
        [
            dict(
                totalDate=7,
                price=50000,
                name="7 ngày - 5km",
                avatarUrl="",
                totalRun=5,
                minUserRun=0,
                isGroupChallenges=False,
                giftReceivingMilestone="1,3",
                type="StepRun",
                objectStatus="active",
                submittedBeforeDay=1,
                createdAt=ts,
                updatedAt=ts,
            ),
            dict(
                totalDate=14,
                price=96000,
                name="14 ngày - 10km",
                avatarUrl="",
                totalRun=10,
                minUserRun=0,
                isGroupChallenges=False,
                giftReceivingMilestone="1,3,5,7",
                type="StepRun",
                objectStatus="active",
                submittedBeforeDay=1,
                createdAt=ts,
                updatedAt=ts,
            ),
        ],
    )


def down(handle: DataHandle) -> int:
    return handle.bulk_delete(TABLE)
