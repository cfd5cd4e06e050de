"""
userflow.domain.errors

Error taxonomy raised across the pipeline.

Responsibilities:
- Signal missing request fields (`ValidationError`).
- Signal lookups that matched nothing (`NotFoundError`).
- Reserve `ConflictError` for storage gateways that enforce unique identifiers.
"""

from __future__ import annotations


class UserflowError(Exception):
    """
    Base class; entry points catch this to report rejected requests.
    """


class ValidationError(UserflowError, ValueError):
    def __init__(self, field: str) -> None:
        super().__init__(f"{field} is required")
        self.field = field


class NotFoundError(UserflowError, LookupError):
    def __init__(self, identifier: str) -> None:
        super().__init__("item not found")
        self.identifier = identifier


class ConflictError(UserflowError):
    def __init__(self, identifier: str) -> None:
        super().__init__("item already exists")
        self.identifier = identifier


# --- Module Notes -----------------------------------------------------------
# The reference in-memory store never raises ConflictError; duplicate identifiers are
# appended and resolved first-match on read (see `userflow.db.store`).
