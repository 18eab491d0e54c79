"""
errors.py
---------
Application error taxonomy.
Each error carries an HTTP status code so the web layer can map it
directly to a response without inspecting the message.
"""


class JoblyError(Exception):
    """Base class for errors raised by the data layer."""

    status_code: int = 500

    def __init__(self, message: str = "Internal error") -> None:
        super().__init__(message)
        self.message = message


class ValidationError(JoblyError):
    """Malformed or empty input, or contradictory filter bounds."""

    status_code = 400


class DuplicateError(JoblyError):
    """A create collided with an existing unique key."""

    status_code = 400


class NotFoundError(JoblyError):
    """The requested key does not exist."""

    status_code = 404
