from __future__ import annotations

from typing import Any, Optional, Sequence


class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules.

    ``errors`` carries every collected message so callers can show them all.
    """

    def __init__(self, message: str, errors: Optional[Sequence[str]] = None):
        super().__init__(message)
        self.errors = list(errors) if errors else [message]


class ShiftConflictError(DomainError):
    """Raised when a shift overlaps existing shifts of the same employee."""

    def __init__(self, conflicts: Sequence[Any]):
        super().__init__(f"Shift conflicts with {len(conflicts)} existing shift(s)")
        self.conflicts = list(conflicts)


class NotFoundError(DomainError):
    """Raised when a referenced entity does not exist."""
