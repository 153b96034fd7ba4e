"""
User routes.

Admins manage every account; regular users may read, change and delete only
their own, and apply to jobs as themselves.
"""
from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from jobly.api.deps import get_settings, require_admin, require_admin_or_self
from jobly.core.config import Settings
from jobly.core.database import get_db
from jobly.core.logging import get_logger
from jobly.repositories.user_repository import UserRepository
from jobly.schemas.base import DeletedResponse
from jobly.schemas.user import (
    AppliedResponse,
    UserCreate,
    UserCreatedResponse,
    UserDetail,
    UserResponse,
    UserUpdate,
)
from jobly.services.auth_service import AuthService

router = APIRouter(prefix="/users", tags=["users"])

logger = get_logger(__name__)

user_repo = UserRepository()


@router.post(
    "/",
    response_model=UserCreatedResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_admin)],
)
async def create_user(
    data: UserCreate,
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    """Create a user, possibly an admin. Admin only."""
    service = AuthService(settings)
    user = await service.register(db, **data.model_dump())
    logger.info("user_created", username=data.username, is_admin=data.is_admin)
    return UserCreatedResponse(user=user, token=service.token_for(user).token)


@router.get(
    "/",
    response_model=List[UserResponse],
    dependencies=[Depends(require_admin)],
)
async def list_users(db: AsyncSession = Depends(get_db)):
    """List all users. Admin only."""
    return await user_repo.find_all(db)


@router.get(
    "/{username}",
    response_model=UserDetail,
    dependencies=[Depends(require_admin_or_self)],
)
async def get_user(
    username: str,
    db: AsyncSession = Depends(get_db),
):
    """Get a user with the ids of jobs applied to."""
    return await user_repo.get(db, username)


@router.patch(
    "/{username}",
    response_model=UserResponse,
    dependencies=[Depends(require_admin_or_self)],
)
async def update_user(
    username: str,
    data: UserUpdate,
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    """Update any of firstName, lastName, email, password."""
    user = await user_repo.update(
        db,
        username,
        data.model_dump(by_alias=True, exclude_unset=True),
        rounds=settings.bcrypt_rounds,
    )
    await db.commit()
    logger.info("user_updated", username=username)
    return user


@router.delete(
    "/{username}",
    response_model=DeletedResponse,
    dependencies=[Depends(require_admin_or_self)],
)
async def delete_user(
    username: str,
    db: AsyncSession = Depends(get_db),
):
    await user_repo.remove(db, username)
    await db.commit()
    logger.info("user_deleted", username=username)
    return DeletedResponse(deleted=username)


@router.post(
    "/{username}/jobs/{job_id}",
    response_model=AppliedResponse,
    dependencies=[Depends(require_admin_or_self)],
)
async def apply_to_job(
    username: str,
    job_id: int,
    db: AsyncSession = Depends(get_db),
):
    """Apply ``username`` to a job."""
    await user_repo.apply_to_job(db, username, job_id)
    await db.commit()
    logger.info("job_applied", username=username, job_id=job_id)
    return AppliedResponse(applied=job_id)
