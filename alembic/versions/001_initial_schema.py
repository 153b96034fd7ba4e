"""initial schema: companies, jobs, users, applications

Revision ID: 001_initial_schema
Revises:
Create Date: 2026-10-19

Creates:
  • companies (handle PK)
  • jobs (serial id, FK company_handle → companies ON DELETE CASCADE)
  • users (username PK, bcrypt password hash, is_admin flag)
  • applications (username, job_id) composite PK, both FKs cascading
"""
from alembic import op
import sqlalchemy as sa


# revision identifiers
revision = "001_initial_schema"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "companies",
        sa.Column("handle", sa.String(length=25), primary_key=True),
        sa.Column("name", sa.Text(), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("num_employees", sa.Integer(), nullable=True),
        sa.Column("logo_url", sa.Text(), nullable=True),
        sa.CheckConstraint("num_employees >= 0", name="ck_companies_num_employees"),
    )
    op.create_index("ix_companies_name", "companies", ["name"])

    op.create_table(
        "jobs",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("title", sa.Text(), nullable=False),
        sa.Column("salary", sa.Integer(), nullable=True),
        sa.Column("equity", sa.Numeric(), nullable=True),
        sa.Column(
            "company_handle",
            sa.String(length=25),
            sa.ForeignKey("companies.handle", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.CheckConstraint("salary >= 0", name="ck_jobs_salary"),
        sa.CheckConstraint("equity >= 0 AND equity <= 1.0", name="ck_jobs_equity"),
    )
    op.create_index("ix_jobs_title", "jobs", ["title"])
    op.create_index("ix_jobs_company_handle", "jobs", ["company_handle"])

    op.create_table(
        "users",
        sa.Column("username", sa.String(length=25), primary_key=True),
        sa.Column("password", sa.Text(), nullable=False),
        sa.Column("first_name", sa.Text(), nullable=False),
        sa.Column("last_name", sa.Text(), nullable=False),
        sa.Column("email", sa.Text(), nullable=False),
        sa.Column("is_admin", sa.Boolean(), nullable=False, server_default=sa.false()),
    )

    op.create_table(
        "applications",
        sa.Column(
            "username",
            sa.String(length=25),
            sa.ForeignKey("users.username", ondelete="CASCADE"),
            primary_key=True,
        ),
        sa.Column(
            "job_id",
            sa.Integer(),
            sa.ForeignKey("jobs.id", ondelete="CASCADE"),
            primary_key=True,
        ),
    )


def downgrade() -> None:
    op.drop_table("applications")
    op.drop_table("users")
    op.drop_index("ix_jobs_company_handle", table_name="jobs")
    op.drop_index("ix_jobs_title", table_name="jobs")
    op.drop_table("jobs")
    op.drop_index("ix_companies_name", table_name="companies")
    op.drop_table("companies")
