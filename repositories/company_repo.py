"""
repositories/company_repo.py
----------------------------
Data access layer for companies.
All SQL queries related to the `companies` table live here.
"""

from typing import Any, Mapping, Optional

from psycopg2 import errors as pg_errors

from db.connection import query
from errors import DuplicateError, NotFoundError, ValidationError
from models.company import Company
from models.job import Job
from utils.logger import get_logger
from utils.sql import WhereClause, int_filter, sql_for_partial_update

logger = get_logger(__name__)

# Fields a partial update may touch, mapped to their column names.
UPDATABLE_FIELDS = {
    "name": "name",
    "description": "description",
    "numEmployees": "num_employees",
    "logoUrl": "logo_url",
}

_COLUMNS = "handle, name, description, num_employees, logo_url"


class CompanyRepository:
    """Repository for CRUD operations on the companies table."""

    # ── CREATE ────────────────────────────────────────────

    def create(self, company: Company) -> Company:
        """
        Insert a new company.

        The insert is a single statement that yields no row when the handle
        is already taken, so two concurrent creates cannot both succeed.

        Returns:
            The company as stored.

        Raises:
            DuplicateError: If the handle (or name) is already in use.
        """
        sql = f"""
            INSERT INTO companies ({_COLUMNS})
            VALUES ($1, $2, $3, $4, $5)
            ON CONFLICT (handle) DO NOTHING
            RETURNING {_COLUMNS};
        """
        try:
            rows = query(sql, [
                company.handle, company.name, company.description,
                company.num_employees, company.logo_url,
            ])
        except pg_errors.UniqueViolation:
            raise DuplicateError(f"Duplicate company name: {company.name}")

        if not rows:
            raise DuplicateError(f"Duplicate company: {company.handle}")

        logger.info(f"Created company '{company.handle}'")
        return self._row_to_company(rows[0])

    # ── READ ──────────────────────────────────────────────

    def find_all(self, filters: Optional[Mapping[str, Any]] = None) -> list[Company]:
        """
        Find companies, optionally filtered.

        Filters (all optional; unknown keys are ignored):
            name: Case-insensitive substring of the company name.
            minEmployees: At least this many employees.
            maxEmployees: At most this many employees.

        Returns:
            Matching companies ordered by name.

        Raises:
            ValidationError: If a bound is not an integer, or
                minEmployees > maxEmployees.
        """
        filters = filters or {}
        name = filters.get("name")
        min_employees = int_filter(filters, "minEmployees")
        max_employees = int_filter(filters, "maxEmployees")

        if (
            min_employees is not None
            and max_employees is not None
            and min_employees > max_employees
        ):
            raise ValidationError("minEmployees cannot be greater than maxEmployees")

        where = WhereClause()
        if name:
            where.add("name ILIKE {}", f"%{name}%")
        if min_employees is not None:
            where.add("num_employees >= {}", min_employees)
        if max_employees is not None:
            where.add("num_employees <= {}", max_employees)

        sql = f"SELECT {_COLUMNS} FROM companies{where.sql()} ORDER BY name;"
        return [self._row_to_company(r) for r in query(sql, where.values)]

    def get(self, handle: str) -> Company:
        """
        Fetch a company with its jobs attached.

        Raises:
            NotFoundError: If no company has this handle.
        """
        rows = query(f"SELECT {_COLUMNS} FROM companies WHERE handle = $1;", [handle])
        if not rows:
            raise NotFoundError(f"No company: {handle}")

        company = self._row_to_company(rows[0])
        job_rows = query(
            """
            SELECT id, title, salary, equity
            FROM jobs
            WHERE company_handle = $1
            ORDER BY id;
            """,
            [handle],
        )
        company.jobs = [
            Job(
                id=r["id"],
                title=r["title"],
                salary=r["salary"],
                equity=None if r["equity"] is None else str(r["equity"]),
            )
            for r in job_rows
        ]
        return company

    # ── UPDATE ────────────────────────────────────────────

    def update(self, handle: str, data: Mapping[str, Any]) -> Company:
        """
        Partially update a company.

        Args:
            handle: Company to update.
            data: Any subset of {name, description, numEmployees, logoUrl}.

        Raises:
            ValidationError: If data is empty or names a field that cannot
                be updated (handle included).
            NotFoundError: If no company has this handle.
        """
        unknown = [key for key in data if key not in UPDATABLE_FIELDS]
        if unknown:
            raise ValidationError(f"Cannot update company fields: {', '.join(unknown)}")

        update = sql_for_partial_update(data, UPDATABLE_FIELDS)
        sql = f"""
            UPDATE companies
            SET {update.set_cols}
            WHERE handle = ${update.next_index}
            RETURNING {_COLUMNS};
        """
        rows = query(sql, [*update.values, handle])
        if not rows:
            raise NotFoundError(f"No company: {handle}")

        logger.info(f"Updated company '{handle}': {', '.join(data)}")
        return self._row_to_company(rows[0])

    # ── DELETE ────────────────────────────────────────────

    def remove(self, handle: str) -> None:
        """
        Delete a company (its jobs go with it).

        Raises:
            NotFoundError: If no company has this handle.
        """
        rows = query("DELETE FROM companies WHERE handle = $1 RETURNING handle;", [handle])
        if not rows:
            raise NotFoundError(f"No company: {handle}")
        logger.info(f"Deleted company '{handle}'")

    # ── HELPERS ───────────────────────────────────────────

    @staticmethod
    def _row_to_company(row: dict) -> Company:
        """Convert a database row to a Company domain object."""
        return Company(
            handle=row["handle"],
            name=row["name"],
            description=row["description"],
            num_employees=row["num_employees"],
            logo_url=row["logo_url"],
        )
