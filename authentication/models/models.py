from datetime import datetime
from typing import Dict, Optional
from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator
from pydantic.alias_generators import to_camel
from ..config.security_config import SecurityConfig
from ..helper.utils import normalize_email


class _normalized_email(BaseModel):
    @field_validator("email", mode="after", check_fields=False)
    @classmethod
    def lower_email(cls, value: str) -> str:
        return normalize_email(value)


# ---- request bodies ----

class register(_normalized_email):
    email: EmailStr = Field(..., title="Email Address")
    password: str = Field(
        ...,
        min_length=SecurityConfig.MIN_PASSWORD_LENGTH,
        max_length=SecurityConfig.MAX_PASSWORD_LENGTH,
        title="Password",
    )
    name: Optional[str] = Field(None, max_length=SecurityConfig.MAX_NAME_LENGTH, title="Display Name")


class login(_normalized_email):
    email: EmailStr = Field(..., title="Email Address")
    password: str = Field(..., min_length=1, max_length=SecurityConfig.MAX_PASSWORD_LENGTH, title="Password")


class oauth_login(BaseModel):
    access_token: str = Field(..., min_length=1, title="Provider Access Token")


class refresh_token(_normalized_email):
    email: EmailStr = Field(..., title="Email Address")
    refresh_token: str = Field(..., alias="refreshToken", min_length=1, title="Refresh Token")


# ---- responses ----

class _camel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class TokenPair(_camel):
    token_type: str = "Bearer"
    access_token: str
    refresh_token: str
    expires_in: int


class MemberOut(_camel):
    id: str
    email: str
    name: Optional[str] = None
    role: str
    picture: Optional[str] = None
    services: Optional[Dict[str, str]] = None
    created_at: Optional[datetime] = None


class AuthResponse(BaseModel):
    token: TokenPair
    member: MemberOut


class TokenData(BaseModel):
    member_id: str
    role: Optional[str] = None


class ProviderProfile(BaseModel):
    service: str
    id: str
    name: Optional[str] = None
    email: Optional[str] = None
    picture: Optional[str] = None
