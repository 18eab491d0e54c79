"""
repositories/job_repo.py
------------------------
Data access layer for job openings.
All SQL queries related to the `jobs` table live here.
"""

from typing import Any, Mapping, Optional

from psycopg2 import errors as pg_errors

from db.connection import query
from errors import NotFoundError, ValidationError
from models.job import Job
from utils.logger import get_logger
from utils.sql import WhereClause, int_filter, sql_for_partial_update

logger = get_logger(__name__)

# id and companyHandle are fixed at creation.
UPDATABLE_FIELDS = {
    "title": "title",
    "salary": "salary",
    "equity": "equity",
}

_COLUMNS = "id, title, salary, equity, company_handle"


class JobRepository:
    """Repository for CRUD operations on the jobs table."""

    # ── CREATE ────────────────────────────────────────────

    def create(self, job: Job) -> Job:
        """
        Insert a new job.

        Args:
            job: The Job to persist (id is ignored).

        Returns:
            The stored job, with its generated `id`.

        Raises:
            NotFoundError: If `company_handle` names no company.
        """
        sql = f"""
            INSERT INTO jobs (title, salary, equity, company_handle)
            VALUES ($1, $2, $3, $4)
            RETURNING {_COLUMNS};
        """
        try:
            rows = query(sql, [job.title, job.salary, job.equity, job.company_handle])
        except pg_errors.ForeignKeyViolation:
            raise NotFoundError(f"No company: {job.company_handle}")

        created = self._row_to_job(rows[0])
        logger.info(f"Created job #{created.id} for company '{created.company_handle}'")
        return created

    # ── READ ──────────────────────────────────────────────

    def find_all(self, filters: Optional[Mapping[str, Any]] = None) -> list[Job]:
        """
        Find jobs, optionally filtered.

        Filters (all optional; unknown keys are ignored):
            title: Case-insensitive substring of the job title.
            minSalary: Salary of at least this much.
            hasEquity: When True, only jobs with equity > 0. False means
                no equity filtering at all.

        Returns:
            Matching jobs ordered by title.

        Raises:
            ValidationError: If minSalary is not an integer.
        """
        filters = filters or {}
        title = filters.get("title")
        min_salary = int_filter(filters, "minSalary")

        where = WhereClause()
        if title:
            where.add("title ILIKE {}", f"%{title}%")
        if min_salary is not None:
            where.add("salary >= {}", min_salary)
        if filters.get("hasEquity") is True:
            where.add_literal("equity > 0")

        sql = f"SELECT {_COLUMNS} FROM jobs{where.sql()} ORDER BY title;"
        return [self._row_to_job(r) for r in query(sql, where.values)]

    def get(self, job_id: int) -> Job:
        """
        Fetch a single job by id.

        Raises:
            NotFoundError: If no job has this id.
        """
        rows = query(f"SELECT {_COLUMNS} FROM jobs WHERE id = $1;", [job_id])
        if not rows:
            raise NotFoundError(f"No job: {job_id}")
        return self._row_to_job(rows[0])

    # ── UPDATE ────────────────────────────────────────────

    def update(self, job_id: int, data: Mapping[str, Any]) -> Job:
        """
        Partially update a job.

        Args:
            job_id: Job to update.
            data: Any subset of {title, salary, equity}.

        Raises:
            ValidationError: If data is empty or names any other field
                (including id and companyHandle).
            NotFoundError: If no job has this id.
        """
        unknown = [key for key in data if key not in UPDATABLE_FIELDS]
        if unknown:
            raise ValidationError(f"Cannot update job fields: {', '.join(unknown)}")

        update = sql_for_partial_update(data, UPDATABLE_FIELDS)
        sql = f"""
            UPDATE jobs
            SET {update.set_cols}
            WHERE id = ${update.next_index}
            RETURNING {_COLUMNS};
        """
        rows = query(sql, [*update.values, job_id])
        if not rows:
            raise NotFoundError(f"No job: {job_id}")

        logger.info(f"Updated job #{job_id}: {', '.join(data)}")
        return self._row_to_job(rows[0])

    # ── DELETE ────────────────────────────────────────────

    def remove(self, job_id: int) -> None:
        """
        Delete a job by id.

        Raises:
            NotFoundError: If no job has this id.
        """
        rows = query("DELETE FROM jobs WHERE id = $1 RETURNING id;", [job_id])
        if not rows:
            raise NotFoundError(f"No job: {job_id}")
        logger.info(f"Deleted job #{job_id}")

    # ── HELPERS ───────────────────────────────────────────

    @staticmethod
    def _row_to_job(row: dict) -> Job:
        """Convert a database row to a Job domain object."""
        equity = row["equity"]
        return Job(
            id=row["id"],
            title=row["title"],
            salary=row["salary"],
            # NUMERIC arrives as Decimal; the API carries it as a string.
            equity=None if equity is None else str(equity),
            company_handle=row["company_handle"],
        )
