"""
Repository layer - data access abstraction.

Repositories handle all database queries, keeping SQL out of the service
and route layers.
"""
from jobly.repositories.base import BaseRepository
from jobly.repositories.company_repository import CompanyRepository, company_where_clause
from jobly.repositories.job_repository import JobRepository, job_where_clause
from jobly.repositories.user_repository import UserRepository
from jobly.repositories.sql import sql_for_partial_update

__all__ = [
    "BaseRepository",
    "CompanyRepository",
    "JobRepository",
    "UserRepository",
    "company_where_clause",
    "job_where_clause",
    "sql_for_partial_update",
]
