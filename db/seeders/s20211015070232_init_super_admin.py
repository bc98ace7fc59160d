from __future__ import annotations

import bcrypt

from db.handle import DataHandle
from db.seeders import now
from db.settings import SETTINGS

TABLE = "Accounts"


def hash_password(password: str) -> str:
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt(rounds=10)).decode("utf-8")


def up(handle: DataHandle) -> int:
    ts = now()
    return handle.bulk_insert(
        TABLE,
        [
            dict(
                username="superadmin",
                token=None,
                password=hash_password(SETTINGS.seed_superadmin_password),
                hasExpired=True,
                role="SuperAdmin",
                objectStatus="active",
                createdAt=ts,
                updatedAt=ts,
            ),
        ],
    )


def down(handle: DataHandle) -> int:
    # Clears every account, not only the seeded one.
    return handle.bulk_delete(TABLE)
