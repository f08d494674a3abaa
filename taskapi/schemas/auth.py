"""Request/response schemas for auth endpoints."""

from pydantic import BaseModel, Field

from taskapi.core.security import EMAIL_MAX_LEN, PASSWORD_MAX_LEN, PASSWORD_MIN_LEN


class Credentials(BaseModel):
    """Email and password, used by both signup and login."""

    email: str = Field(..., min_length=1, max_length=EMAIL_MAX_LEN, description="Email")
    password: str = Field(
        ...,
        min_length=PASSWORD_MIN_LEN,
        max_length=PASSWORD_MAX_LEN,
        description="Password",
    )


class TokenResponse(BaseModel):
    """Bearer token returned after signup or login."""

    token: str = Field(..., description="JWT access token; send as Authorization: Bearer <token>")
