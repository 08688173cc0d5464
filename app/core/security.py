# Implements security-related functionality:
# JWT token generation and verification
# Password hashing and verification using bcrypt
# Provides core security functions used by the auth module and the request gate

from datetime import datetime, timedelta, timezone
from functools import lru_cache
from typing import Any, Optional, Union
import logging

from jose import jwt, JWTError
from passlib.context import CryptContext

from app.core.config import Settings

logger = logging.getLogger("app")

@lru_cache()
def _pwd_context(rounds: int) -> CryptContext:
    return CryptContext(schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=rounds)

def create_access_token(
    subject: Union[str, Any], settings: Settings, expires_delta: Optional[timedelta] = None
) -> str:
    if expires_delta:
        expire = datetime.now(timezone.utc) + expires_delta
    else:
        expire = datetime.now(timezone.utc) + timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)

    to_encode = {"exp": expire, "sub": str(subject)}
    return jwt.encode(to_encode, settings.SECRET_KEY, algorithm=settings.ALGORITHM)

def password_is_hashable(password: str) -> bool:
    """bcrypt refuses NUL bytes"""
    return "\x00" not in password

def verify_password(plain_password: str, hashed_password: str) -> bool:
    # Cost is read from the hash
    try:
        return _pwd_context(10).verify(plain_password, hashed_password)
    except ValueError as e:
        logger.warning(f"Password could not be checked: {e}")
        return False

def get_password_hash(password: str, rounds: int = 10) -> str:
    return _pwd_context(rounds).hash(password)

def verify_access_token(token: str, settings: Settings) -> Optional[int]:
    """Return the user id carried by a valid token, or None."""
    try:
        payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
    except JWTError as e:
        logger.warning(f"JWT verification error: {e}")
        return None

    subject = payload.get("sub")
    if subject is None:
        logger.warning("Token payload missing 'sub' field")
        return None

    # jose only checks exp when present
    if payload.get("exp") is None:
        logger.warning("Token payload missing 'exp' field")
        return None

    try:
        return int(subject)
    except (TypeError, ValueError):
        logger.warning(f"Token subject is not a user id: {subject!r}")
        return None
