# ---------------------------------------------------------------------------
# Author  : Kyle <kyle@hacking-linux.com>
# Version : 20260206v1
# ---------------------------------------------------------------------------
"""
Domain error taxonomy.

The services raise these; ``main.py`` maps each class to an HTTP status.

    ValidationError   400  malformed, missing or out-of-range input
    ConflictError     409  uniqueness clash at write time
    NotFoundError     404  referenced id does not exist

Anything else (SQLAlchemy operational errors, driver faults …) is left to
propagate and surfaces as a 500.
"""


class GhostNetError(Exception):
    """Base class for every caller-recoverable domain error."""

    status_code = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(GhostNetError):
    status_code = 400


class ConflictError(GhostNetError):
    status_code = 409


class NotFoundError(GhostNetError):
    status_code = 404


class ConstraintViolationError(Exception):
    """
    Raised by a repository when the store rejects a write because of a
    UNIQUE / NOT NULL / CHECK constraint.  Not a ``GhostNetError``: the
    services decide which domain error it becomes.
    """
