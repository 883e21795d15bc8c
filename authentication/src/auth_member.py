from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo.errors import DuplicateKeyError
from ..helper.exceptions import Conflict, CredentialsError, InvalidCredentials, InvalidRefreshToken
from ..helper.hashing import Hash
from ..helper.utils import setup_logging
from ..models import models
from ..service.credential_service import verifier
from ..service.member_service import members
from ..service.token_service import issuer, refresh_token_store
from . import oauth_member

logger = setup_logging() # initialize logger


async def _token_response(db: AsyncIOMotorDatabase, member: dict) -> models.AuthResponse:
    token = await issuer.issue(db, member)
    return models.AuthResponse(token=token, member=members.transform(member))


async def register(db: AsyncIOMotorDatabase, data: models.register) -> models.AuthResponse:
    """
    Create a member from the registration body and sign it in.
    The role is never taken from the request; new members get the default role.
    Raises Conflict when the email is already registered.
    """
    try:
        member = await members.create(
            db,
            email=data.email,
            password=Hash.generate_hash(data.password),
            name=data.name,
        )
    except DuplicateKeyError:
        logger.warning(f"Signup attempt with existing email: {data.email}")
        raise Conflict.duplicate("email")
    logger.info(f"member {member['_id']} registered")
    return await _token_response(db, member)


async def login(db: AsyncIOMotorDatabase, data: models.login) -> models.AuthResponse:
    try:
        member = await verifier.verify(db, data.email, data.password)
    except CredentialsError:
        # unknown email and wrong password get the same answer
        logger.warning(f"login attempt with invalid credentials: {data.email}")
        raise InvalidCredentials()
    logger.info(f"member {member['_id']} logged in")
    return await _token_response(db, member)


async def oauth_login(db: AsyncIOMotorDatabase, provider: str, data: models.oauth_login) -> models.AuthResponse:
    member = await oauth_member.resolve(db, provider, data.access_token)
    return await _token_response(db, member)


async def refresh(db: AsyncIOMotorDatabase, data: models.refresh_token) -> models.TokenPair:
    member = await refresh_token_store.redeem(db, data.email, data.refresh_token)
    if not member:
        logger.warning(f"refresh attempt with invalid token for: {data.email}")
        raise InvalidRefreshToken()
    logger.info(f"refresh token exchanged for member {member['_id']}")
    return await issuer.issue(db, member)
