"""
FastAPI dependency injection module for the Jobly backend.

This module provides reusable FastAPI dependencies for database sessions,
configuration access, and authentication, so endpoint handlers stay free of
infrastructure code and tests can swap any of them through
app.dependency_overrides.

Key Dependencies Provided:
- get_db_session: Async generator yielding database connections from the pool
- get_settings_dependency: Returns the cached Settings singleton
- get_current_user_optional: Identity from the bearer token, or None
- require_logged_in / require_admin / require_self_or_admin: gates that raise
  UnauthorizedError for missing or insufficient identity

Usage Examples:
    @router.post("/", status_code=201)
    async def create(data: JobNew, db: DBSessionDep, _: AdminUserDep) -> dict:
        ...

    @router.get("/users/{username}")
    async def show(username: str, user: SelfOrAdminDep) -> dict:
        ...
"""

import logging
from typing import Annotated, AsyncGenerator, Optional

from asyncpg import Connection
from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from jobly.core.config import Settings, get_settings
from jobly.core.database import get_db_pool
from jobly.core.errors import UnauthorizedError
from jobly.core.security import decode_token
from jobly.models.schemas import UserIdentity


logger = logging.getLogger(__name__)


# =============================================================================
# Database Session Dependency
# =============================================================================

async def get_db_session() -> AsyncGenerator[Connection, None]:
    """
    Yield an async database connection from the pool.

    The connection is released back to the pool when the endpoint completes,
    whether it succeeded or raised.

    Yields:
        asyncpg.Connection: An active database connection from the pool.

    Raises:
        asyncpg.PostgresError: If connection acquisition fails.
    """
    pool = await get_db_pool()
    async with pool.acquire() as connection:
        yield connection


# =============================================================================
# Settings Dependency
# =============================================================================

def get_settings_dependency() -> Settings:
    """
    Return the Settings singleton instance.

    Thin wrapper around get_settings() so tests can override it:
        app.dependency_overrides[get_settings_dependency] = lambda: mock_settings
    """
    return get_settings()


# =============================================================================
# Type Aliases for Dependency Injection
# =============================================================================

SettingsDep = Annotated[Settings, Depends(get_settings_dependency)]

DBSessionDep = Annotated[Connection, Depends(get_db_session)]


# =============================================================================
# Authentication Dependencies
# =============================================================================

# auto_error=False: anonymous requests reach the gates below instead of failing early
bearer_scheme = HTTPBearer(auto_error=False)


async def get_current_user_optional(
    credentials: Annotated[Optional[HTTPAuthorizationCredentials], Depends(bearer_scheme)],
) -> Optional[UserIdentity]:
    """
    Resolve the request identity from an Authorization: Bearer header.

    A missing header, a token with a bad signature, an expired token or a
    payload without a username all yield None; only the gates decide whether
    an anonymous caller is acceptable.

    Returns:
        UserIdentity for a valid token, otherwise None.
    """
    if credentials is None:
        return None

    payload = decode_token(credentials.credentials)
    if not payload or not payload.get("username"):
        logger.debug("Ignoring invalid bearer token")
        return None

    return UserIdentity(username=payload["username"], isAdmin=bool(payload.get("isAdmin", False)))


CurrentUserOptionalDep = Annotated[Optional[UserIdentity], Depends(get_current_user_optional)]


async def require_logged_in(user: CurrentUserOptionalDep) -> UserIdentity:
    """Reject anonymous callers."""
    if user is None:
        raise UnauthorizedError()
    return user


async def require_admin(user: CurrentUserOptionalDep) -> UserIdentity:
    """Reject callers that are anonymous or not admins."""
    if user is None or not user.isAdmin:
        raise UnauthorizedError()
    return user


async def require_self_or_admin(username: str, user: CurrentUserOptionalDep) -> UserIdentity:
    """
    Allow the caller named by the `username` path parameter, or any admin.

    Routes using this gate must declare a `username` path parameter.
    """
    if user is None or not (user.isAdmin or user.username == username):
        raise UnauthorizedError()
    return user


LoggedInUserDep = Annotated[UserIdentity, Depends(require_logged_in)]
AdminUserDep = Annotated[UserIdentity, Depends(require_admin)]
SelfOrAdminDep = Annotated[UserIdentity, Depends(require_self_or_admin)]
