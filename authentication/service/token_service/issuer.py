from datetime import datetime, timedelta, timezone
from motor.motor_asyncio import AsyncIOMotorDatabase
from ...config.settings import REFRESH_TOKEN_EXPIRE_DAYS
from ...helper.auth_helper.auth_token import access_token_lifetime, create_access_token
from ...helper.utils import generate_refresh_token
from ...models import models
from . import refresh_token_store


async def issue(db: AsyncIOMotorDatabase, member: dict) -> models.TokenPair:
    """Issue an access token and a persisted refresh token for ``member``."""
    member_id = str(member["_id"])
    access_token = create_access_token(member_id, member["role"])
    refresh_token = generate_refresh_token(member_id)
    expires = datetime.now(timezone.utc) + timedelta(days=REFRESH_TOKEN_EXPIRE_DAYS)
    await refresh_token_store.save(db, refresh_token, member["_id"], member["email"], expires)
    return models.TokenPair(
        access_token=access_token,
        refresh_token=refresh_token,
        expires_in=int(access_token_lifetime().total_seconds()),
    )
