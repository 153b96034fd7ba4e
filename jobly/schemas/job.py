"""
Job schemas.
"""
from decimal import Decimal
from typing import Optional

from pydantic import Field, model_validator

from jobly.schemas.base import BaseSchema, EquityStr, RequestSchema
from jobly.schemas.company import CompanyResponse


class JobCreate(RequestSchema):
    """Job creation schema."""

    title: str = Field(..., min_length=1)
    salary: Optional[int] = Field(None, ge=0)
    equity: Optional[Decimal] = Field(None, ge=0, le=1)
    company_handle: str = Field(..., min_length=1, max_length=25)


class JobUpdate(RequestSchema):
    """Partial job update; id and company are immutable."""

    title: Optional[str] = Field(None, min_length=1)
    salary: Optional[int] = Field(None, ge=0)
    equity: Optional[Decimal] = Field(None, ge=0, le=1)

    @model_validator(mode="after")
    def _title_not_null(self) -> "JobUpdate":
        if "title" in self.model_fields_set and self.title is None:
            raise ValueError("title may not be null")
        return self


class JobFilter(RequestSchema):
    """Search filters accepted by ``GET /jobs``."""

    title: Optional[str] = None
    min_salary: Optional[int] = Field(None, ge=0)
    has_equity: Optional[bool] = None


class JobResponse(BaseSchema):
    """Job as returned by create, list and update."""

    id: int
    title: str
    salary: Optional[int] = None
    equity: EquityStr = None
    company_handle: str


class JobDetail(JobResponse):
    """Single job with its owning company expanded."""

    company: Optional[CompanyResponse] = None
