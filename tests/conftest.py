"""
Pytest configuration and shared fixtures.
"""

import os
from decimal import Decimal
from typing import Any, Dict, List

import pytest

from models.company import Company
from models.job import Job


class FakeQuery:
    """
    Stand-in for `db.connection.query`.

    Records every (sql, values) call and answers with queued row lists,
    one per call; with nothing queued it answers an empty result.
    """

    def __init__(self) -> None:
        self.calls: List[tuple] = []
        self._responses: List[Any] = []

    def returns(self, *responses: Any) -> "FakeQuery":
        self._responses.extend(responses)
        return self

    def __call__(self, sql: str, values=()) -> List[Dict[str, Any]]:
        self.calls.append((" ".join(sql.split()), list(values)))
        if not self._responses:
            return []
        response = self._responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response

    @property
    def last_sql(self) -> str:
        return self.calls[-1][0]

    @property
    def last_values(self) -> list:
        return self.calls[-1][1]


@pytest.fixture
def fake_query(monkeypatch) -> FakeQuery:
    """Route both repositories' queries to a FakeQuery."""
    fake = FakeQuery()
    monkeypatch.setattr("repositories.company_repo.query", fake)
    monkeypatch.setattr("repositories.job_repo.query", fake)
    return fake


@pytest.fixture
def company_row() -> Dict[str, Any]:
    """A companies row as the database returns it."""
    return {
        "handle": "c1",
        "name": "C1",
        "description": "Desc1",
        "num_employees": 1,
        "logo_url": "http://c1.img",
    }


@pytest.fixture
def job_row() -> Dict[str, Any]:
    """A jobs row as the database returns it."""
    return {
        "id": 7,
        "title": "Botanist",
        "salary": 100000,
        "equity": Decimal("0.5"),
        "company_handle": "c1",
    }


# ── Integration fixtures (real PostgreSQL) ────────────────

TEST_DATABASE_URL = os.getenv("TEST_DATABASE_URL")


@pytest.fixture
def database():
    """
    Connect to TEST_DATABASE_URL with a fresh, empty schema.

    Skips the test when no test database is configured.
    """
    if not TEST_DATABASE_URL:
        pytest.skip("TEST_DATABASE_URL not set")

    from db.connection import close_pool, init_pool
    from db.init_db import create_tables, reset_tables

    init_pool(dsn=TEST_DATABASE_URL)
    create_tables()
    reset_tables()
    yield
    reset_tables()
    close_pool()


@pytest.fixture
def seeded(database) -> Dict[str, Any]:
    """Insert three companies and two jobs; return what was created."""
    from repositories.company_repo import CompanyRepository
    from repositories.job_repo import JobRepository

    companies = CompanyRepository()
    jobs = JobRepository()

    created = [
        companies.create(
            Company(
                handle=f"c{n}",
                name=f"C{n}",
                description=f"Desc{n}",
                num_employees=n,
                logo_url=f"http://c{n}.img",
            )
        )
        for n in (1, 2, 3)
    ]
    botanist = jobs.create(
        Job(title="Botanist", salary=100000, equity="0.5", company_handle="c1")
    )
    engineer = jobs.create(
        Job(title="Software Engineer", salary=120000, equity="0", company_handle="c2")
    )
    return {"companies": created, "jobs": [botanist, engineer]}
