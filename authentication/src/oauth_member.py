from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo.errors import DuplicateKeyError
from ..helper.exceptions import ProviderError
from ..helper.utils import normalize_email, setup_logging
from ..service.member_service import members
from ..service.oauth_service import providers

logger = setup_logging() # initialize logger

SUPPORTED_PROVIDERS = ("facebook", "google")


async def resolve(db: AsyncIOMotorDatabase, provider: str, access_token: str) -> dict:
    """
    Map a provider access token onto a local member.

    Steps performed:
    - Fetch the provider profile (provider failures propagate as ProviderError).
    - Return the member owning the profile email unchanged, when there is one.
    - Otherwise create a password-less member with the default role, linked to
      the provider id. A concurrent creation of the same email re-reads the
      winner, so one email never yields two members.
    """
    if provider not in SUPPORTED_PROVIDERS:
        raise ProviderError(f"Unsupported OAuth provider: {provider}")
    fetch_profile = getattr(providers, provider)
    profile = await fetch_profile(access_token)
    if not profile.email:
        logger.warning(f"{provider} profile {profile.id} has no email")
        raise ProviderError(f"{provider} did not return an email address")

    email = normalize_email(profile.email)
    member = await members.find_by_email(db, email)
    if member:
        logger.info(f"{provider} login for existing member {member['_id']}")
        return member

    try:
        member = await members.create(
            db,
            email=email,
            name=profile.name,
            picture=profile.picture,
            services={profile.service: profile.id},
        )
    except DuplicateKeyError:
        member = await members.find_by_email(db, email)
        if member is None:
            raise
        return member
    logger.info(f"created member {member['_id']} from {provider} profile")
    return member
