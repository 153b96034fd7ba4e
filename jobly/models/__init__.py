"""
Database models for Jobly.

These define the schema (``init_db`` and Alembic); repositories query the
tables with literal SQL.
"""
from jobly.models.company import Company
from jobly.models.job import Job
from jobly.models.user import Application, User

__all__ = [
    "Company",
    "Job",
    "User",
    "Application",
]
