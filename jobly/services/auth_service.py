"""
Authentication service - handles registration, login, and token issuance.
"""
from typing import Any, Dict

from sqlalchemy.ext.asyncio import AsyncSession

from jobly.core.config import Settings
from jobly.core.security import create_access_token
from jobly.repositories.user_repository import UserRepository
from jobly.schemas.auth import TokenResponse


class AuthService:
    """Handles all authentication business logic."""

    def __init__(self, settings: Settings):
        self.settings = settings
        self.user_repo = UserRepository()

    async def register(
        self,
        db: AsyncSession,
        *,
        username: str,
        password: str,
        first_name: str,
        last_name: str,
        email: str,
        is_admin: bool = False,
    ) -> Dict[str, Any]:
        """
        Register a new user and commit.

        Raises:
            DuplicateUsernameException: If the username is already taken.
        """
        user = await self.user_repo.register(
            db,
            username=username,
            password=password,
            first_name=first_name,
            last_name=last_name,
            email=email,
            is_admin=is_admin,
            rounds=self.settings.bcrypt_rounds,
        )
        await db.commit()
        return user

    async def login(
        self,
        db: AsyncSession,
        *,
        username: str,
        password: str,
    ) -> TokenResponse:
        """
        Authenticate user and return a token.

        Raises:
            InvalidCredentialsException: If username/password is wrong.
        """
        user = await self.user_repo.authenticate(db, username, password)
        return self.token_for(user)

    def token_for(self, user: Dict[str, Any]) -> TokenResponse:
        """Issue a token carrying the user's username and admin flag."""
        return TokenResponse(
            token=create_access_token(
                user["username"],
                bool(user["is_admin"]),
                self.settings,
            )
        )
