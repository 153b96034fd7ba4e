"""
Company schemas.
"""
from typing import List, Optional

from pydantic import Field, model_validator

from jobly.schemas.base import BaseSchema, EquityStr, RequestSchema


class CompanyCreate(RequestSchema):
    """Company creation schema."""

    handle: str = Field(..., min_length=1, max_length=25, pattern=r"^[a-z0-9-]+$")
    name: str = Field(..., min_length=1)
    description: Optional[str] = None
    num_employees: Optional[int] = Field(None, ge=0)
    logo_url: Optional[str] = Field(None, pattern=r"^https?://")


class CompanyUpdate(RequestSchema):
    """Partial company update; the handle cannot be changed."""

    name: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = None
    num_employees: Optional[int] = Field(None, ge=0)
    logo_url: Optional[str] = Field(None, pattern=r"^https?://")

    @model_validator(mode="after")
    def _name_not_null(self) -> "CompanyUpdate":
        if "name" in self.model_fields_set and self.name is None:
            raise ValueError("name may not be null")
        return self


class CompanyFilter(RequestSchema):
    """Search filters accepted by ``GET /companies``."""

    name_like: Optional[str] = None
    min_employees: Optional[int] = Field(None, ge=0)
    max_employees: Optional[int] = Field(None, ge=0)


class CompanyResponse(BaseSchema):
    """Company as returned by create, list and update."""

    handle: str
    name: str
    description: Optional[str] = None
    num_employees: Optional[int] = None
    logo_url: Optional[str] = None


class CompanyJob(BaseSchema):
    """Job as listed under its company."""

    id: int
    title: str
    salary: Optional[int] = None
    equity: EquityStr = None


class CompanyDetail(CompanyResponse):
    """Single company with its jobs."""

    jobs: List[CompanyJob] = []
