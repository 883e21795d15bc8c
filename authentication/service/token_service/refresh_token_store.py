from datetime import datetime
from typing import Optional
from bson import ObjectId
from motor.motor_asyncio import AsyncIOMotorDatabase
from ...config.settings import REFRESH_TOKEN_COLLECTION
from ..member_service import members


async def save(db: AsyncIOMotorDatabase, token: str, member_id: ObjectId, member_email: str, expires: datetime):
    """Persist a freshly issued refresh token. Every issuance is a new document."""
    await db[REFRESH_TOKEN_COLLECTION].insert_one({
        "token": token,
        "member_id": member_id,
        "member_email": member_email,
        "expires": expires,
    })


async def redeem(db: AsyncIOMotorDatabase, email: str, token: str) -> Optional[dict]:
    """
    Consume ``token`` for ``email`` and return the owning member.

    The match and the delete are a single findAndModify, so two concurrent
    redemptions of one token cannot both succeed. Expiry is checked against
    the database clock ($$NOW). Returns None when the token is absent, bound
    to another email, expired, or its member no longer exists.
    """
    consumed = await db[REFRESH_TOKEN_COLLECTION].find_one_and_delete({
        "token": token,
        "member_email": email,
        "$expr": {"$gt": ["$expires", "$$NOW"]},
    })
    if not consumed:
        return None
    return await members.find_by_id(db, consumed["member_id"])
