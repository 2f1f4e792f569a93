"""Password hashing and JWT session token issuance/verification."""

from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from typing import Any

import bcrypt
import jwt

from app.core.config import Settings, get_settings
from app.models.user import Role

# Session tokens are valid for a fixed 24 hours and are never revoked server-side.
TOKEN_TTL = timedelta(hours=24)

PASSWORD_MAX_LEN = 128


class TokenError(Exception):
    """Raised when a session token cannot be verified."""


class InvalidTokenError(TokenError):
    """Signature mismatch, malformed token or malformed payload."""


class ExpiredTokenError(TokenError):
    """Token was valid but its expiry has passed."""


@dataclass(frozen=True)
class TokenClaims:
    """Identity carried by a verified session token."""

    user_id: int
    email: str
    role: Role
    issued_at: datetime
    expires_at: datetime


def hash_password(plain_password: str) -> str:
    """Hash a plain-text password for storage. Do not store plain passwords."""
    # bcrypt has a 72-byte limit; truncate to avoid errors (validation already limits length).
    pw_bytes = plain_password.encode("utf-8")[:72]
    salt = bcrypt.gensalt(rounds=get_settings().BCRYPT_ROUNDS)
    return bcrypt.hashpw(pw_bytes, salt).decode("utf-8")


def verify_password(plain_password: str, hashed: str) -> bool:
    """Verify a plain password against a stored hash."""
    pw_bytes = plain_password.encode("utf-8")[:72]
    try:
        return bcrypt.checkpw(pw_bytes, hashed.encode("utf-8"))
    except (ValueError, TypeError):
        return False


def create_access_token(
    user_id: int,
    email: str,
    role: Role | str,
    *,
    now: datetime | None = None,
    settings: Settings | None = None,
) -> str:
    """Create a signed token with userId, email, role, iat and exp (iat + 24h)."""
    settings = settings or get_settings()
    issued_at = now or datetime.now(UTC)
    payload: dict[str, Any] = {
        "userId": user_id,
        "email": email,
        "role": Role(role).value,
        "iat": issued_at,
        "exp": issued_at + TOKEN_TTL,
    }
    return jwt.encode(
        payload,
        settings.jwt_signing_key(),
        algorithm=settings.JWT_ALGORITHM,
    )


def decode_access_token(token: str, *, settings: Settings | None = None) -> TokenClaims:
    """
    Verify signature and expiry; return the token's claims.
    Raises ExpiredTokenError or InvalidTokenError.
    """
    settings = settings or get_settings()
    try:
        payload = jwt.decode(
            token,
            settings.jwt_signing_key(),
            algorithms=[settings.JWT_ALGORITHM],
            options={"require": ["exp", "iat"]},
        )
    except jwt.ExpiredSignatureError as e:
        raise ExpiredTokenError("Token expired") from e
    except jwt.PyJWTError as e:
        raise InvalidTokenError("Invalid token") from e

    user_id = payload.get("userId")
    email = payload.get("email")
    # bool is an int subclass; reject it explicitly.
    if not isinstance(user_id, int) or isinstance(user_id, bool):
        raise InvalidTokenError("Invalid token payload")
    if not isinstance(email, str) or not email:
        raise InvalidTokenError("Invalid token payload")
    try:
        role = Role(payload.get("role"))
    except ValueError as e:
        raise InvalidTokenError("Invalid token payload") from e

    return TokenClaims(
        user_id=user_id,
        email=email,
        role=role,
        issued_at=datetime.fromtimestamp(payload["iat"], UTC),
        expires_at=datetime.fromtimestamp(payload["exp"], UTC),
    )
