"""
Job routes.

Records are returned bare (no ``{"job": ...}`` or ``{"jobs": [...]}``
envelope); deletes return ``{"deleted": id}``.
"""
from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from jobly.api.deps import job_filters, require_admin
from jobly.core.database import get_db
from jobly.core.logging import get_logger
from jobly.repositories.job_repository import JobRepository
from jobly.schemas.base import DeletedResponse
from jobly.schemas.job import (
    JobCreate,
    JobDetail,
    JobFilter,
    JobResponse,
    JobUpdate,
)

router = APIRouter(prefix="/jobs", tags=["jobs"])

logger = get_logger(__name__)

job_repo = JobRepository()


@router.post(
    "/",
    response_model=JobResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_admin)],
)
async def create_job(
    data: JobCreate,
    db: AsyncSession = Depends(get_db),
):
    """Create a job for an existing company. Admin only."""
    job = await job_repo.create(db, **data.model_dump())
    await db.commit()
    logger.info("job_created", job_id=job["id"], company=data.company_handle)
    return job


@router.get("/", response_model=List[JobResponse])
async def list_jobs(
    filters: JobFilter = Depends(job_filters),
    db: AsyncSession = Depends(get_db),
):
    """
    List jobs ordered by title.

    Filters: ``title`` (case-insensitive substring), ``minSalary``,
    ``hasEquity`` (only jobs with equity > 0 when true).
    """
    return await job_repo.find_all(db, filters)


@router.get("/{job_id}", response_model=JobDetail)
async def get_job(
    job_id: int,
    db: AsyncSession = Depends(get_db),
):
    """Get a job with its company."""
    return await job_repo.get(db, job_id)


@router.patch(
    "/{job_id}",
    response_model=JobResponse,
    dependencies=[Depends(require_admin)],
)
async def update_job(
    job_id: int,
    data: JobUpdate,
    db: AsyncSession = Depends(get_db),
):
    """Update any of title, salary, equity. Admin only."""
    job = await job_repo.update(
        db,
        job_id,
        data.model_dump(by_alias=True, exclude_unset=True),
    )
    await db.commit()
    logger.info("job_updated", job_id=job_id)
    return job


@router.delete(
    "/{job_id}",
    response_model=DeletedResponse,
    dependencies=[Depends(require_admin)],
)
async def delete_job(
    job_id: int,
    db: AsyncSession = Depends(get_db),
):
    """Delete a job. Admin only."""
    await job_repo.remove(db, job_id)
    await db.commit()
    logger.info("job_deleted", job_id=job_id)
    return DeletedResponse(deleted=job_id)
