"""
Authentication routes.
"""
from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from jobly.api.deps import get_settings, require_user
from jobly.core.config import Settings
from jobly.core.database import get_db
from jobly.core.logging import get_logger
from jobly.schemas.auth import LoginRequest, Principal, TokenResponse
from jobly.schemas.user import RegisterRequest
from jobly.services.auth_service import AuthService

router = APIRouter(prefix="/auth", tags=["auth"])

logger = get_logger(__name__)


@router.post("/token", response_model=TokenResponse)
async def login(
    request: LoginRequest,
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    """Exchange username and password for a token."""
    return await AuthService(settings).login(
        db,
        username=request.username,
        password=request.password,
    )


@router.post("/register", response_model=TokenResponse, status_code=status.HTTP_201_CREATED)
async def register(
    request: RegisterRequest,
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    """
    Register a new (non-admin) user.

    Returns a token for the new account.
    """
    service = AuthService(settings)
    user = await service.register(db, **request.model_dump())
    logger.info("user_registered", username=request.username)
    return service.token_for(user)


@router.get("/me", response_model=Principal)
async def me(principal: Principal = Depends(require_user)):
    """The identity carried by the presented token."""
    return principal
