from datetime import datetime, timezone
from typing import Optional
from bson import ObjectId
from bson.errors import InvalidId
from motor.motor_asyncio import AsyncIOMotorDatabase
from ...config.security_config import SecurityConfig
from ...config.settings import MEMBER_COLLECTION
from ...helper.utils import normalize_email
from ...models import models


async def find_by_email(db: AsyncIOMotorDatabase, email: str) -> Optional[dict]:
    return await db[MEMBER_COLLECTION].find_one({"email": normalize_email(email)})


async def find_by_id(db: AsyncIOMotorDatabase, member_id) -> Optional[dict]:
    if not isinstance(member_id, ObjectId):
        try:
            member_id = ObjectId(member_id)
        except (InvalidId, TypeError):
            return None
    return await db[MEMBER_COLLECTION].find_one({"_id": member_id})


async def create(db: AsyncIOMotorDatabase, **fields) -> dict:
    """
    Insert a member document. The unique index on ``email`` is the only
    duplicate check, so a concurrent insert surfaces as DuplicateKeyError.
    """
    document = {
        "email": normalize_email(fields.pop("email")),
        "role": fields.pop("role", None) or SecurityConfig.DEFAULT_ROLE,
        "created_at": datetime.now(timezone.utc),
    }
    document.update({key: value for key, value in fields.items() if value is not None})
    result = await db[MEMBER_COLLECTION].insert_one(document)
    document["_id"] = result.inserted_id
    return document


def transform(member: dict) -> models.MemberOut:
    """Public view of a member. The password hash never leaves this module."""
    return models.MemberOut(
        id=str(member["_id"]),
        email=member["email"],
        name=member.get("name"),
        role=member.get("role", SecurityConfig.DEFAULT_ROLE),
        picture=member.get("picture"),
        services=member.get("services"),
        created_at=member.get("created_at"),
    )
