"""
Job repository - data access for Job entity.
"""
from decimal import Decimal
from typing import Any, Dict, List, Mapping, Optional, Tuple

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from jobly.core.exceptions import BadRequestException, JobNotFoundException
from jobly.repositories.base import BaseRepository
from jobly.repositories.sql import placeholder, where_clause
from jobly.schemas.job import JobFilter


def job_where_clause(filters: Optional[JobFilter]) -> Tuple[str, List[Any]]:
    """
    Build the WHERE clause for a job search.

    ``has_equity`` only narrows the search when true; false behaves like
    absent.

    Returns:
        ``("WHERE lower(title) LIKE :p1 AND salary >= :p2 AND equity > 0",
        ["%eng%", 50000])``, or ``("", [])`` when no filter is set.
    """
    if filters is None:
        return "", []

    values: List[Any] = []
    conditions: List[str] = []

    if filters.title is not None:
        values.append(f"%{filters.title.lower()}%")
        conditions.append(f"lower(title) LIKE {placeholder(len(values))}")

    if filters.min_salary is not None:
        values.append(filters.min_salary)
        conditions.append(f"salary >= {placeholder(len(values))}")

    if filters.has_equity is True:
        conditions.append("equity > 0")

    return where_clause(conditions), values


class JobRepository(BaseRepository):
    table = "jobs"
    key_column = "id"
    columns = "id, title, salary, equity, company_handle"

    async def create(
        self,
        db: AsyncSession,
        *,
        title: str,
        company_handle: str,
        salary: Optional[int] = None,
        equity: Optional[Decimal] = None,
    ) -> Dict[str, Any]:
        """
        Insert a job and return it with its generated id.

        Raises:
            BadRequestException: if the company does not exist.
        """
        try:
            return await self._fetch_one(
                db,
                f"""INSERT INTO jobs (title, salary, equity, company_handle)
                    VALUES (:p1, :p2, :p3, :p4)
                    RETURNING {self.columns}""",
                [title, salary, equity, company_handle],
            )
        except IntegrityError:
            raise BadRequestException(f"No company: {company_handle}")

    async def find_all(
        self,
        db: AsyncSession,
        filters: Optional[JobFilter] = None,
    ) -> List[Dict[str, Any]]:
        """Find jobs matching ``filters``, ordered by title."""
        where, values = job_where_clause(filters)

        return await self._fetch_all(
            db,
            f"""SELECT {self.columns}
                FROM jobs
                {where}
                ORDER BY title""",
            values,
        )

    async def get(
        self,
        db: AsyncSession,
        job_id: int,
    ) -> Dict[str, Any]:
        """
        Get a job with its company expanded.

        The two reads are not isolated from each other; if the company is
        deleted in between, ``company`` is None.

        Raises:
            JobNotFoundException: if no job has this id.
        """
        job = await self._fetch_one(
            db,
            f"SELECT {self.columns} FROM jobs WHERE id = :p1",
            [job_id],
        )
        if not job:
            raise JobNotFoundException(job_id)

        job["company"] = await self._fetch_one(
            db,
            """SELECT handle, name, description, num_employees, logo_url
               FROM companies
               WHERE handle = :p1""",
            [job["company_handle"]],
        )
        return job

    async def update(
        self,
        db: AsyncSession,
        job_id: int,
        data: Mapping[str, Any],
    ) -> Dict[str, Any]:
        """
        Partially update a job (``title``, ``salary``, ``equity``).

        Raises:
            BadRequestException: if ``data`` is empty.
            JobNotFoundException: if no job has this id.
        """
        job = await self._update_by_key(db, job_id, data)
        if not job:
            raise JobNotFoundException(job_id)
        return job

    async def remove(
        self,
        db: AsyncSession,
        job_id: int,
    ) -> None:
        if not await self._delete_by_key(db, job_id):
            raise JobNotFoundException(job_id)
