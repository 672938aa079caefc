"""Authentication Pydantic schemas for API validation."""

from datetime import datetime

from pydantic import BaseModel, Field, field_serializer

from ..utils import isodatetime


class Credentials(BaseModel):
    """Sign-up and sign-in request body.

    No format or emptiness rules: a missing field is an empty string.
    """

    username: str = ""
    password: str = Field(default="", repr=False)


class SignUpResponse(BaseModel):
    message: str
    username: str


class TokenClaims(BaseModel):
    """Verified claims carried by a session token."""

    username: str
    expires_at: datetime


class TokenResponse(BaseModel):
    """Sign-in response body; the same token is also set as a cookie."""

    access_token: str
    token_type: str = "bearer"
    expires_at: datetime

    @field_serializer("expires_at")
    def _serialize_expires_at(self, value: datetime) -> str:
        return isodatetime.to_timestamp(value)


class SessionResponse(BaseModel):
    """Identity resolved from the current session token."""

    username: str
