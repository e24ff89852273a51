# security.py
from datetime import datetime, timedelta, timezone
from typing import Optional

from jose import JWTError, jwt

from jobly.core.config import get_settings


def create_token(username: str, is_admin: bool = False, expires_delta: Optional[timedelta] = None) -> str:
    """Sign a bearer token carrying {username, isAdmin}."""
    settings = get_settings()
    to_encode = {"username": username, "isAdmin": is_admin}
    if expires_delta is None and settings.access_token_expire_minutes:
        expires_delta = timedelta(minutes=settings.access_token_expire_minutes)
    if expires_delta is not None:
        to_encode["exp"] = datetime.now(timezone.utc) + expires_delta
    return jwt.encode(to_encode, settings.secret_key, algorithm=settings.jwt_algorithm)


def decode_token(token: str) -> Optional[dict]:
    """Return the verified payload, or None for a bad, expired or foreign token."""
    settings = get_settings()
    try:
        return jwt.decode(token, settings.secret_key, algorithms=[settings.jwt_algorithm])
    except JWTError:
        return None
