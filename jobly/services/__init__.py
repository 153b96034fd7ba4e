"""
Service layer - business logic and orchestration.

RULE: Routes call services or repositories. Never the reverse.
"""
from jobly.services.auth_service import AuthService

__all__ = [
    "AuthService",
]
