"""
Security utilities for authentication and authorization.
Handles JWT tokens and password hashing.
"""
from datetime import datetime, timedelta, timezone
from typing import Any, Optional

from jose import JWTError, jwt
from passlib.context import CryptContext

from jobly.core.config import Settings


# Password hashing context
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against a hash."""
    return pwd_context.verify(plain_password, hashed_password)


def hash_password(password: str, rounds: int = 12) -> str:
    """Hash a password with the given bcrypt work factor."""
    return pwd_context.handler("bcrypt").using(rounds=rounds).hash(password)


def create_access_token(
    username: str,
    is_admin: bool,
    settings: Settings,
    expires_delta: Optional[timedelta] = None,
) -> str:
    """
    Create a signed JWT carrying the principal's claims.

    Args:
        username: Subject of the token
        is_admin: Admin flag copied into the ``isAdmin`` claim
        settings: Application settings (secret, algorithm, default lifetime)
        expires_delta: Custom expiration time

    Returns:
        Encoded JWT token string
    """
    if expires_delta is None:
        expires_delta = timedelta(minutes=settings.access_token_expire_minutes)

    to_encode: dict[str, Any] = {
        "username": username,
        "isAdmin": is_admin,
        "exp": datetime.now(timezone.utc) + expires_delta,
    }
    return jwt.encode(to_encode, settings.secret_key, algorithm=settings.algorithm)


def decode_token(token: str, settings: Settings) -> Optional[dict[str, Any]]:
    """
    Decode and validate a JWT token.

    Returns:
        Decoded payload or None if invalid
    """
    try:
        return jwt.decode(
            token,
            settings.secret_key,
            algorithms=[settings.algorithm],
        )
    except JWTError:
        return None
