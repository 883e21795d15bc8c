"""
OAuth provider clients.

Each provider is an async function taking the access token a client obtained
from the provider and returning a ``ProviderProfile``. The resolver looks them
up by service name on this module, so ``facebook`` and ``google`` can be
patched in tests.
"""
from typing import Optional
from authlib.integrations.httpx_client import AsyncOAuth2Client
from authlib.common.errors import AuthlibBaseError
import httpx
from ...config.settings import OAUTH_PROVIDER_TIMEOUT
from ...helper.exceptions import ProviderError
from ...helper.utils import setup_logging
from ...models import models

logger = setup_logging()

FACEBOOK_PROFILE_URL = "https://graph.facebook.com/me"
FACEBOOK_PROFILE_FIELDS = "id,name,email,picture"
GOOGLE_PROFILE_URL = "https://www.googleapis.com/oauth2/v3/userinfo"


async def _fetch_profile(service: str, access_token: str, url: str, params: dict = None) -> dict:
    token = {"access_token": access_token, "token_type": "Bearer"}
    try:
        async with AsyncOAuth2Client(token=token, timeout=OAUTH_PROVIDER_TIMEOUT) as client:
            response = await client.get(url, params=params)
            response.raise_for_status()
            data = response.json()
    except httpx.HTTPStatusError as e:
        logger.error(f"{service} profile request failed with status {e.response.status_code}")
        raise ProviderError(f"{service} rejected the access token") from e
    except (httpx.RequestError, AuthlibBaseError) as e:
        logger.error(f"{service} profile request failed: {e}")
        raise ProviderError(f"Failed to connect to {service}") from e
    except ValueError as e:
        logger.error(f"{service} returned a malformed profile: {e}")
        raise ProviderError(f"{service} returned a malformed profile") from e
    if not isinstance(data, dict):
        logger.error(f"{service} returned a {type(data).__name__} instead of a profile object")
        raise ProviderError(f"{service} returned a malformed profile")
    return data


def _text(data: dict, key: str) -> Optional[str]:
    value = data.get(key)
    if isinstance(value, (str, int)) and not isinstance(value, bool) and str(value):
        return str(value)
    return None


def _profile(service: str, data: dict, id_key: str, picture: Optional[str]) -> models.ProviderProfile:
    external_id = _text(data, id_key)
    if external_id is None:
        logger.error(f"{service} profile has no {id_key}")
        raise ProviderError(f"{service} did not return an account id")
    return models.ProviderProfile(
        service=service,
        id=external_id,
        name=_text(data, "name"),
        email=_text(data, "email"),
        picture=picture,
    )


async def facebook(access_token: str) -> models.ProviderProfile:
    data = await _fetch_profile("facebook", access_token, FACEBOOK_PROFILE_URL, {"fields": FACEBOOK_PROFILE_FIELDS})
    # Graph nests the url as picture.data.url; any level may be missing or null
    picture = data.get("picture")
    picture_data = picture.get("data") if isinstance(picture, dict) else None
    picture_url = _text(picture_data, "url") if isinstance(picture_data, dict) else None
    return _profile("facebook", data, "id", picture_url)


async def google(access_token: str) -> models.ProviderProfile:
    data = await _fetch_profile("google", access_token, GOOGLE_PROFILE_URL)
    return _profile("google", data, "sub", _text(data, "picture"))
