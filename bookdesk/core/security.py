"""Security utilities: password hashing, reset tokens and session JWTs."""

import hashlib
import secrets
import uuid
from datetime import datetime, timedelta, timezone

from jose import ExpiredSignatureError, JWTError, jwt
from passlib.context import CryptContext

from bookdesk.core.config import get_settings
from bookdesk.core.errors import TokenExpiredError, TokenInvalidError

settings = get_settings()

# ── Password hashing (Argon2) ────────────────────────────────

pwd_context = CryptContext(schemes=["argon2"], deprecated="auto")


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(plain: str, hashed: str) -> bool:
    return pwd_context.verify(plain, hashed)


# ── Password reset tokens (SHA-256, deterministic for lookups) ──

def generate_reset_token() -> str:
    """Generate a cryptographically secure 256-bit reset token."""
    return secrets.token_urlsafe(32)


def hash_reset_token(raw_token: str) -> str:
    """One-way SHA-256 hash; only the hash is stored.

    The raw token is looked up by hash, so the digest must be deterministic.
    """
    return hashlib.sha256(raw_token.encode()).hexdigest()


# ── Session JWT ──────────────────────────────────────────────

def issue_token(
    business_id: uuid.UUID,
    email: str,
    expires_delta: timedelta | None = None,
) -> str:
    """Sign a session token bound to exactly one business."""
    expire = datetime.now(timezone.utc) + (
        expires_delta or timedelta(minutes=settings.jwt_expire_minutes)
    )
    payload = {
        "tid": str(business_id),
        "email": email,
        "exp": expire,
    }
    return jwt.encode(payload, settings.jwt_secret_key, algorithm=settings.jwt_algorithm)


def verify_token(token: str) -> uuid.UUID:
    """Return the business id carried by ``token``.

    Raises TokenExpiredError or TokenInvalidError.
    """
    try:
        payload = jwt.decode(token, settings.jwt_secret_key, algorithms=[settings.jwt_algorithm])
    except ExpiredSignatureError as exc:
        raise TokenExpiredError() from exc
    except JWTError as exc:
        raise TokenInvalidError() from exc

    try:
        return uuid.UUID(payload["tid"])
    except (KeyError, TypeError, ValueError) as exc:
        raise TokenInvalidError("Malformed token payload") from exc
