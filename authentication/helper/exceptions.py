"""
Exceptions surfaced by the authentication API.

Every error the core raises derives from ``APIError`` and is rendered by the
app-level handler as ``{"code": ..., "message": ..., "errors": [...]}``.
"""
from typing import List, Optional
from fastapi import status


class APIError(Exception):
    """Base error carrying the HTTP status and the client-facing message."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    message = "Internal Server Error"

    def __init__(self, message: Optional[str] = None, errors: Optional[List[dict]] = None):
        self.message = message or self.message
        self.errors = errors
        super().__init__(self.message)

    def to_dict(self) -> dict:
        body = {"code": self.status_code, "message": self.message}
        if self.errors:
            body["errors"] = self.errors
        return body


class ValidationFailed(APIError):
    status_code = status.HTTP_400_BAD_REQUEST
    message = "Validation Error"


class Conflict(APIError):
    status_code = status.HTTP_409_CONFLICT
    message = "Validation Error"

    @classmethod
    def duplicate(cls, field: str) -> "Conflict":
        return cls(errors=[{
            "field": field,
            "location": "body",
            "messages": [f'"{field}" already exists'],
        }])


class InvalidCredentials(APIError):
    status_code = status.HTTP_401_UNAUTHORIZED
    message = "Incorrect email or password"


class InvalidRefreshToken(APIError):
    status_code = status.HTTP_401_UNAUTHORIZED
    message = "Incorrect email or refreshToken"


class InvalidAccessToken(APIError):
    status_code = status.HTTP_401_UNAUTHORIZED
    message = "Could not validate credentials"


class ProviderError(APIError):
    """Raised when an OAuth provider call fails. Never mapped to a credential error."""

    status_code = status.HTTP_502_BAD_GATEWAY
    message = "OAuth provider request failed"


class CredentialsError(Exception):
    """Internal credential check failure, collapsed into InvalidCredentials by the caller."""


class MemberNotFound(CredentialsError):
    pass


class PasswordMismatch(CredentialsError):
    pass
