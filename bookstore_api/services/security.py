"""
Security Service

Handles password hashing and JWT token operations for the identity
endpoints.

Security Features:
==================
1. Password hashing with bcrypt (passlib)
2. JWT access token generation and validation (python-jose)

Usage:
    from bookstore_api.services.security import hash_password, verify_password

    hashed = hash_password("P@ssword1")
    is_valid = verify_password("P@ssword1", hashed)
"""

import logging
from datetime import datetime, timedelta, timezone

from jose import JWTError, jwt
from passlib.context import CryptContext

from bookstore_api.config import get_settings

logger = logging.getLogger(__name__)
settings = get_settings()

# "auto" upgrades hashes made with deprecated schemes on next verify
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

ALGORITHM = "HS256"


def hash_password(password: str) -> str:
    """
    Hash a plain text password using bcrypt.

    Example:
        >>> hashed = hash_password("P@ssword1")
        >>> hashed.startswith("$2b$")
        True
    """
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a plain password against a stored bcrypt hash."""
    return pwd_context.verify(plain_password, hashed_password)


def create_access_token(
    data: dict,
    expires_delta: timedelta | None = None,
) -> str:
    """
    Create a signed JWT access token.

    Args:
        data: Claims to encode (sub, email, role)
        expires_delta: Optional custom lifetime; defaults to
            ACCESS_TOKEN_EXPIRE_MINUTES from settings

    Returns:
        Encoded JWT token string
    """
    to_encode = data.copy()

    if expires_delta is None:
        expires_delta = timedelta(minutes=settings.access_token_expire_minutes)
    expire = datetime.now(timezone.utc) + expires_delta

    to_encode.update({"exp": expire, "type": "access"})

    return jwt.encode(
        to_encode,
        settings.secret_key,
        algorithm=ALGORITHM,
    )


def decode_access_token(token: str) -> dict | None:
    """
    Decode and validate an access token.

    Returns:
        Decoded claims if the signature, expiry and token type are valid,
        None otherwise
    """
    try:
        payload = jwt.decode(
            token,
            settings.secret_key,
            algorithms=[ALGORITHM],
        )
    except JWTError as e:
        logger.warning(f"JWT decode error: {e}")
        return None

    if payload.get("type") != "access":
        logger.warning("Token type mismatch: expected access")
        return None

    return payload
