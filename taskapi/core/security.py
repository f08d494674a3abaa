"""Password hashing and JWT creation/verification for authentication."""

from datetime import UTC, datetime, timedelta
from typing import Any

import bcrypt
import jwt

from taskapi.core.errors import InvalidTokenError

# Bcrypt cost (rounds).
BCRYPT_ROUNDS = 10

# Token signing is fixed: HS256, valid for one hour after issuance.
JWT_ALGORITHM = "HS256"
ACCESS_TOKEN_TTL = timedelta(hours=1)

# Length bounds shared by request schemas and the create_user script.
EMAIL_MAX_LEN = 255
PASSWORD_MIN_LEN = 1
PASSWORD_MAX_LEN = 128


def hash_password(plain_password: str) -> str:
    """Hash a plain-text password for storage. Do not store plain passwords."""
    # bcrypt has a 72-byte limit; truncate to avoid errors.
    pw_bytes = plain_password.encode("utf-8")[:72]
    return bcrypt.hashpw(pw_bytes, bcrypt.gensalt(rounds=BCRYPT_ROUNDS)).decode("utf-8")


def verify_password(plain_password: str, hashed: str) -> bool:
    """Verify a plain password against a stored hash (constant-time compare inside bcrypt)."""
    pw_bytes = plain_password.encode("utf-8")[:72]
    try:
        return bcrypt.checkpw(pw_bytes, hashed.encode("utf-8"))
    except (ValueError, TypeError):
        return False


def create_access_token(user_id: int, secret: str, now: datetime | None = None) -> str:
    """Create a signed JWT carrying the user id as sub, expiring one hour after now."""
    issued_at = now or datetime.now(UTC)
    payload: dict[str, Any] = {
        "sub": str(user_id),
        "iat": issued_at,
        "exp": issued_at + ACCESS_TOKEN_TTL,
    }
    return jwt.encode(payload, secret, algorithm=JWT_ALGORITHM)


def verify_access_token(token: str, secret: str) -> int:
    """
    Decode and validate a JWT; return the user id it was issued for.

    Raises InvalidTokenError on a bad signature, an expired token, or a
    payload without an integer sub claim.
    """
    try:
        payload = jwt.decode(
            token,
            secret,
            algorithms=[JWT_ALGORITHM],
            options={"require": ["exp", "sub"]},
        )
    except jwt.ExpiredSignatureError as e:
        raise InvalidTokenError("Token expired") from e
    except jwt.PyJWTError as e:
        raise InvalidTokenError("Invalid token") from e

    try:
        return int(payload["sub"])
    except (TypeError, ValueError) as e:
        raise InvalidTokenError("Invalid token payload") from e
