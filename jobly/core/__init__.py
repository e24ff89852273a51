"""
Core infrastructure package for the Jobly FastAPI backend.

Provides:
- Configuration management via pydantic-settings
- Async PostgreSQL connectivity via asyncpg
- Error taxonomy and HTTP error envelope
- Bearer-token authentication and FastAPI dependency injection utilities

Re-exports key components so other modules can write:

    from jobly.core import get_settings, DBSessionDep, NotFoundError

instead of importing from each submodule.
"""

# =============================================================================
# Re-exports from jobly.core.config
# =============================================================================
from jobly.core.config import Settings, get_settings

# =============================================================================
# Re-exports from jobly.core.database
# =============================================================================
from jobly.core.database import init_db, close_db, get_db_pool

# =============================================================================
# Re-exports from jobly.core.errors
# =============================================================================
from jobly.core.errors import (
    JoblyError,
    BadRequestError,
    UnauthorizedError,
    NotFoundError,
    register_exception_handlers,
)

# =============================================================================
# Re-exports from jobly.core.dependencies
# =============================================================================
from jobly.core.dependencies import (
    get_db_session,
    get_settings_dependency,
    get_current_user_optional,
    require_logged_in,
    require_admin,
    require_self_or_admin,
    SettingsDep,
    DBSessionDep,
    CurrentUserOptionalDep,
    LoggedInUserDep,
    AdminUserDep,
    SelfOrAdminDep,
)

__all__ = [
    # Configuration management (from config.py)
    'Settings',
    'get_settings',
    # Database pool lifecycle (from database.py)
    'init_db',
    'close_db',
    'get_db_pool',
    # Error taxonomy (from errors.py)
    'JoblyError',
    'BadRequestError',
    'UnauthorizedError',
    'NotFoundError',
    'register_exception_handlers',
    # FastAPI dependency injection (from dependencies.py)
    'get_db_session',
    'get_settings_dependency',
    'get_current_user_optional',
    'require_logged_in',
    'require_admin',
    'require_self_or_admin',
    'SettingsDep',
    'DBSessionDep',
    'CurrentUserOptionalDep',
    'LoggedInUserDep',
    'AdminUserDep',
    'SelfOrAdminDep',
]
