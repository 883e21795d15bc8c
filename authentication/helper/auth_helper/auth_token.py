from datetime import datetime, timedelta, timezone
from jose import JWTError, jwt
from ...models import models
from ...config.settings import SECRET_KEY, ALGORITHM, ACCESS_TOKEN_EXPIRE_MINUTES
from ..exceptions import InvalidAccessToken


def access_token_lifetime() -> timedelta:
    return timedelta(minutes=ACCESS_TOKEN_EXPIRE_MINUTES)


def create_access_token(member_id: str, role: str) -> str:
    if not SECRET_KEY:
        raise RuntimeError("SECRET_KEY is not configured")
    now = datetime.now(timezone.utc)
    to_encode = {
        "sub": member_id,
        "role": role,
        "iat": now,
        "exp": now + access_token_lifetime(),
    }
    return jwt.encode(to_encode, SECRET_KEY, algorithm=ALGORITHM)


def decode_access_token(token: str) -> models.TokenData:
    try:
        if not token or not SECRET_KEY:
            raise InvalidAccessToken()
        payload = jwt.decode(token, SECRET_KEY, algorithms=[ALGORITHM])
        member_id = payload.get("sub")
        if member_id is None:
            raise InvalidAccessToken()
        return models.TokenData(member_id=member_id, role=payload.get("role"))
    except (JWTError, ValueError, TypeError):
        raise InvalidAccessToken()
