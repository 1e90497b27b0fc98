from __future__ import annotations

from enum import Enum


class ShiftStatus(str, Enum):
    """Lifecycle of a shift (draft until published to employees)."""

    DRAFT = "DRAFT"
    PUBLISHED = "PUBLISHED"
    COMPLETED = "COMPLETED"
