"""
API package.
"""
from jobly.api.routes import api_router
from jobly.api.deps import (
    authenticate,
    require_user,
    require_admin,
    require_admin_or_self,
)

__all__ = [
    "api_router",
    "authenticate",
    "require_user",
    "require_admin",
    "require_admin_or_self",
]
