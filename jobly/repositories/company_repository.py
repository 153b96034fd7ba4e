"""
Company repository - data access for Company entity.
"""
from typing import Any, Dict, List, Mapping, Optional, Tuple

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from jobly.core.exceptions import (
    BadRequestException,
    CompanyNotFoundException,
    DuplicateCompanyException,
)
from jobly.repositories.base import BaseRepository
from jobly.repositories.sql import placeholder, where_clause
from jobly.schemas.company import CompanyFilter


def company_where_clause(filters: Optional[CompanyFilter]) -> Tuple[str, List[Any]]:
    """
    Build the WHERE clause for a company search.

    Returns:
        ``("WHERE lower(name) LIKE :p1 AND num_employees >= :p2", ["%net%", 10])``,
        or ``("", [])`` when no filter is set.

    Raises:
        BadRequestException: if ``max_employees < min_employees``
    """
    if filters is None:
        return "", []

    min_employees = filters.min_employees
    max_employees = filters.max_employees

    if (
        min_employees is not None
        and max_employees is not None
        and max_employees < min_employees
    ):
        raise BadRequestException(
            "Max employees must be greater than or equal to min employees"
        )

    values: List[Any] = []
    conditions: List[str] = []

    if filters.name_like is not None:
        values.append(f"%{filters.name_like.lower()}%")
        conditions.append(f"lower(name) LIKE {placeholder(len(values))}")

    if min_employees is not None:
        values.append(min_employees)
        conditions.append(f"num_employees >= {placeholder(len(values))}")

    if max_employees is not None:
        values.append(max_employees)
        conditions.append(f"num_employees <= {placeholder(len(values))}")

    return where_clause(conditions), values


class CompanyRepository(BaseRepository):
    table = "companies"
    key_column = "handle"
    columns = "handle, name, description, num_employees, logo_url"
    column_map = {
        "numEmployees": "num_employees",
        "logoUrl": "logo_url",
    }

    async def create(
        self,
        db: AsyncSession,
        *,
        handle: str,
        name: str,
        description: Optional[str] = None,
        num_employees: Optional[int] = None,
        logo_url: Optional[str] = None,
    ) -> Dict[str, Any]:
        """
        Insert a company and return it.

        Raises:
            DuplicateCompanyException: if the handle is taken.
        """
        duplicate = await self._fetch_one(
            db,
            "SELECT handle FROM companies WHERE handle = :p1",
            [handle],
        )
        if duplicate:
            raise DuplicateCompanyException(handle)

        try:
            company = await self._fetch_one(
                db,
                f"""INSERT INTO companies
                       (handle, name, description, num_employees, logo_url)
                    VALUES (:p1, :p2, :p3, :p4, :p5)
                    RETURNING {self.columns}""",
                [handle, name, description, num_employees, logo_url],
            )
        except IntegrityError:
            # Lost a race with a concurrent insert of the same handle
            raise DuplicateCompanyException(handle)

        return company

    async def find_all(
        self,
        db: AsyncSession,
        filters: Optional[CompanyFilter] = None,
    ) -> List[Dict[str, Any]]:
        """Find companies matching ``filters``, ordered by name."""
        where, values = company_where_clause(filters)

        return await self._fetch_all(
            db,
            f"""SELECT {self.columns}
                FROM companies
                {where}
                ORDER BY name""",
            values,
        )

    async def get(
        self,
        db: AsyncSession,
        handle: str,
    ) -> Dict[str, Any]:
        """
        Get a company with its jobs.

        Raises:
            CompanyNotFoundException: if no company has this handle.
        """
        company = await self._fetch_one(
            db,
            f"SELECT {self.columns} FROM companies WHERE handle = :p1",
            [handle],
        )
        if not company:
            raise CompanyNotFoundException(handle)

        company["jobs"] = await self._fetch_all(
            db,
            """SELECT id, title, salary, equity
               FROM jobs
               WHERE company_handle = :p1
               ORDER BY id""",
            [handle],
        )
        return company

    async def update(
        self,
        db: AsyncSession,
        handle: str,
        data: Mapping[str, Any],
    ) -> Dict[str, Any]:
        """
        Partially update a company. ``data`` is keyed by JSON field name
        (``numEmployees``, ``logoUrl``, ...).

        Raises:
            BadRequestException: if ``data`` is empty.
            CompanyNotFoundException: if no company has this handle.
        """
        company = await self._update_by_key(db, handle, data)
        if not company:
            raise CompanyNotFoundException(handle)
        return company

    async def remove(
        self,
        db: AsyncSession,
        handle: str,
    ) -> None:
        """Delete a company (its jobs cascade)."""
        if not await self._delete_by_key(db, handle):
            raise CompanyNotFoundException(handle)
