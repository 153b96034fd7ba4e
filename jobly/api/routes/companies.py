"""
Company routes.

Thin controllers - CompanyRepository owns the SQL; routes validate, commit
and shape the response.

Records are returned bare (no ``{"company": ...}`` envelope); deletes return
``{"deleted": handle}``.
"""
from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from jobly.api.deps import company_filters, require_admin
from jobly.core.database import get_db
from jobly.core.logging import get_logger
from jobly.repositories.company_repository import CompanyRepository
from jobly.schemas.base import DeletedResponse
from jobly.schemas.company import (
    CompanyCreate,
    CompanyDetail,
    CompanyFilter,
    CompanyResponse,
    CompanyUpdate,
)

router = APIRouter(prefix="/companies", tags=["companies"])

logger = get_logger(__name__)

company_repo = CompanyRepository()


@router.post(
    "/",
    response_model=CompanyResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_admin)],
)
async def create_company(
    data: CompanyCreate,
    db: AsyncSession = Depends(get_db),
):
    """Create a company. Admin only."""
    company = await company_repo.create(db, **data.model_dump())
    await db.commit()
    logger.info("company_created", handle=data.handle)
    return company


@router.get("/", response_model=List[CompanyResponse])
async def list_companies(
    filters: CompanyFilter = Depends(company_filters),
    db: AsyncSession = Depends(get_db),
):
    """
    List companies ordered by name.

    Filters: ``nameLike`` (case-insensitive substring), ``minEmployees``,
    ``maxEmployees``.
    """
    return await company_repo.find_all(db, filters)


@router.get("/{handle}", response_model=CompanyDetail)
async def get_company(
    handle: str,
    db: AsyncSession = Depends(get_db),
):
    """Get a company with its jobs."""
    return await company_repo.get(db, handle)


@router.patch(
    "/{handle}",
    response_model=CompanyResponse,
    dependencies=[Depends(require_admin)],
)
async def update_company(
    handle: str,
    data: CompanyUpdate,
    db: AsyncSession = Depends(get_db),
):
    """Update any of name, description, numEmployees, logoUrl. Admin only."""
    company = await company_repo.update(
        db,
        handle,
        data.model_dump(by_alias=True, exclude_unset=True),
    )
    await db.commit()
    logger.info("company_updated", handle=handle)
    return company


@router.delete(
    "/{handle}",
    response_model=DeletedResponse,
    dependencies=[Depends(require_admin)],
)
async def delete_company(
    handle: str,
    db: AsyncSession = Depends(get_db),
):
    """Delete a company and its jobs. Admin only."""
    await company_repo.remove(db, handle)
    await db.commit()
    logger.info("company_deleted", handle=handle)
    return DeletedResponse(deleted=handle)
