from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase
from pymongo import ASCENDING
from .settings import MONGO_DB, MEMBER_COLLECTION, REFRESH_TOKEN_COLLECTION, get_mongo_uri
from ..helper.utils import setup_logging

logger = setup_logging()

# connect to MongoDB with error handling
try:
    mongo_client = AsyncIOMotorClient(get_mongo_uri(), tz_aware=True)
except Exception as e:
    raise ConnectionError("Failed to connect to MongoDB") from e


def get_db() -> AsyncIOMotorDatabase:
    """FastAPI dependency returning the auth database."""
    return mongo_client[MONGO_DB]


async def ensure_indexes(db: AsyncIOMotorDatabase):
    """
    Create the indexes the auth core relies on.
    - members.email is unique, so duplicate registrations fail at the database.
    - refresh_tokens.expires is a TTL index, expired tokens are collected by the server.
    """
    await db[MEMBER_COLLECTION].create_index([("email", ASCENDING)], unique=True)
    await db[REFRESH_TOKEN_COLLECTION].create_index([("token", ASCENDING)], unique=True)
    await db[REFRESH_TOKEN_COLLECTION].create_index([("token", ASCENDING), ("member_email", ASCENDING)])
    await db[REFRESH_TOKEN_COLLECTION].create_index([("expires", ASCENDING)], expireAfterSeconds=0)
    logger.info("mongo indexes ensured")
