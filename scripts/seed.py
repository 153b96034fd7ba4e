"""
Seed script - populates the database with sample data for development.

Usage:
    python -m scripts.seed

This script is IDEMPOTENT - running it twice won't create duplicates.
It checks for existing rows before inserting.
"""
import asyncio
from decimal import Decimal

from jobly.core.config import get_settings
from jobly.core.database import create_engine, create_session_maker, init_db
from jobly.core.exceptions import DuplicateCompanyException, DuplicateUsernameException
from jobly.repositories import CompanyRepository, JobRepository, UserRepository
from jobly.schemas.job import JobFilter


# ─── Users ─────────────────────────────────────────────────────

USERS = [
    {
        "username": "testuser",
        "password": "password1",
        "first_name": "Test",
        "last_name": "User",
        "email": "test@jobly.dev",
        "is_admin": False,
    },
    {
        "username": "testadmin",
        "password": "password1",
        "first_name": "Test",
        "last_name": "Admin",
        "email": "admin@jobly.dev",
        "is_admin": True,
    },
]


# ─── Companies ─────────────────────────────────────────────────

COMPANIES = [
    {
        "handle": "anderson-arias-morrow",
        "name": "Anderson, Arias and Morrow",
        "description": "Somebody program how I. Face give away discussion view act inside.",
        "num_employees": 245,
        "logo_url": "https://logo.example.com/anderson-arias-morrow.png",
    },
    {
        "handle": "bauer-gallagher",
        "name": "Bauer-Gallagher",
        "description": "Difficult ready trip question produce produce someone.",
        "num_employees": 862,
        "logo_url": None,
    },
    {
        "handle": "watson-davis",
        "name": "Watson-Davis",
        "description": "Year join loss.",
        "num_employees": 819,
        "logo_url": "https://logo.example.com/watson-davis.png",
    },
]


# ─── Jobs ──────────────────────────────────────────────────────

JOBS = [
    {
        "title": "Conservator, furniture",
        "salary": 110000,
        "equity": Decimal("0"),
        "company_handle": "watson-davis",
    },
    {
        "title": "Information officer",
        "salary": 200000,
        "equity": None,
        "company_handle": "bauer-gallagher",
    },
    {
        "title": "Consulting civil engineer",
        "salary": 60000,
        "equity": Decimal("0.05"),
        "company_handle": "anderson-arias-morrow",
    },
]


async def seed():
    """Run the seed process."""
    settings = get_settings()
    engine = create_engine(settings)
    session_maker = create_session_maker(engine)

    print("Seeding database...")

    await init_db(engine)
    print("  Tables created")

    user_repo = UserRepository()
    company_repo = CompanyRepository()
    job_repo = JobRepository()

    async with session_maker() as db:

        # ── Users ──────────────────────────────────────────
        for user in USERS:
            try:
                await user_repo.register(db, rounds=settings.bcrypt_rounds, **user)
                print(f"  Created user: {user['username']}")
            except DuplicateUsernameException:
                print(f"  User {user['username']} already exists, skipping...")

        # ── Companies ──────────────────────────────────────
        for company in COMPANIES:
            try:
                await company_repo.create(db, **company)
                print(f"  Created company: {company['handle']}")
            except DuplicateCompanyException:
                print(f"  Company {company['handle']} already exists, skipping...")

        # ── Jobs ───────────────────────────────────────────
        for job in JOBS:
            existing = await job_repo.find_all(db, JobFilter(title=job["title"]))
            if any(j["company_handle"] == job["company_handle"] for j in existing):
                print(f"  Job {job['title']!r} already exists, skipping...")
                continue
            await job_repo.create(db, **job)
            print(f"  Created job: {job['title']}")

        await db.commit()

    await engine.dispose()
    print("Done.")


if __name__ == "__main__":
    asyncio.run(seed())
