from motor.motor_asyncio import AsyncIOMotorDatabase
from ...helper.exceptions import MemberNotFound, PasswordMismatch
from ...helper.hashing import Hash
from ..member_service import members


async def verify(db: AsyncIOMotorDatabase, email: str, plain_password: str) -> dict:
    """
    Return the member owning ``email`` when ``plain_password`` matches its hash.
    Raises MemberNotFound or PasswordMismatch; callers must not tell them apart in responses.
    """
    member = await members.find_by_email(db, email)
    if not member:
        raise MemberNotFound(email)
    # OAuth-only members have no password hash and never match
    if not await Hash.verify(member.get("password"), plain_password):
        raise PasswordMismatch(email)
    return member
