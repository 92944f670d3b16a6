"""Auth request and response schemas."""

from __future__ import annotations

from uuid import UUID

from pydantic import BaseModel, Field, field_validator

from findw.core.security import TOKEN_TYPE_LABEL

MAX_EMAIL_LEN = 320
MAX_PASSWORD_LEN = 1024


def _strip(value):  # noqa: ANN001, ANN202
    return value.strip() if isinstance(value, str) else value


class Credentials(BaseModel):
    email: str = Field(max_length=MAX_EMAIL_LEN)
    password: str = Field(max_length=MAX_PASSWORD_LEN)

    @field_validator("email", mode="before")
    @classmethod
    def normalize_email(cls, value: str) -> str:
        # Trim only; inner characters are part of the identity.
        return _strip(value)


class RegisterRequest(Credentials):
    pass


class LoginRequest(Credentials):
    pass


class RegisterResponse(BaseModel):
    id: UUID
    email: str

    class Config:
        from_attributes = True


class TokenResponse(BaseModel):
    access_token: str
    refresh_token: str
    token_type: str = TOKEN_TYPE_LABEL


class RefreshTokenRequest(BaseModel):
    # No length cap here: malformed tokens are rejected by the rotation service, not by validation.
    refresh_token: str

    @field_validator("refresh_token", mode="before")
    @classmethod
    def normalize_refresh_token(cls, value: str) -> str:
        return _strip(value)
