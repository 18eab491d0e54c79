"""
models/company.py
-----------------
Domain model for companies.
"""

from dataclasses import dataclass
from typing import Optional

from models.job import Job


@dataclass
class Company:
    """
    Represents an employer.

    Attributes:
        handle: Unique short key (lower-case), e.g. 'anderson-arias'.
        name: Display name.
        description: Free-form description.
        num_employees: Head count, if known.
        logo_url: Link to the company logo, if any.
        jobs: The company's openings. Only loaded by a single-company
            lookup; None when not loaded.
    """
    handle: str
    name: str
    description: str
    num_employees: Optional[int] = None
    logo_url: Optional[str] = None
    jobs: Optional[list[Job]] = None

    def to_dict(self) -> dict:
        """Serialize to the API's field names."""
        data = {
            "handle": self.handle,
            "name": self.name,
            "description": self.description,
            "numEmployees": self.num_employees,
            "logoUrl": self.logo_url,
        }
        if self.jobs is not None:
            data["jobs"] = [job.to_dict(include_company=False) for job in self.jobs]
        return data

    def __str__(self) -> str:
        return f"{self.name} ({self.handle})"
