"""
models/job.py
-------------
Domain model for job openings.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class Job:
    """
    Represents a single job opening.

    Attributes:
        id: Database primary key (None for new records).
        title: Job title.
        salary: Yearly salary, if disclosed.
        equity: Equity fraction as a decimal string in [0, 1], if any.
        company_handle: Handle of the owning company. Never changes after
            the job is created.
    """
    title: str
    company_handle: Optional[str] = None
    salary: Optional[int] = None
    equity: Optional[str] = None
    id: Optional[int] = None

    def to_dict(self, include_company: bool = True) -> dict:
        """
        Serialize to the API's field names.

        Args:
            include_company: Set False when the job is nested under its
                company and the handle would be redundant.
        """
        data = {
            "id": self.id,
            "title": self.title,
            "salary": self.salary,
            "equity": self.equity,
        }
        if include_company:
            data["companyHandle"] = self.company_handle
        return data

    def __str__(self) -> str:
        return f"#{self.id} {self.title} @ {self.company_handle}"
