from __future__ import annotations

import re
from typing import Optional

from ..core.exceptions import ValidationError

_EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


def require_min_length(value: Optional[str], field_name: str, min_len: int) -> str:
    v = str(value).strip() if value is not None else ""
    if len(v) < min_len:
        raise ValidationError(f"{field_name} must be at least {min_len} characters")
    return v


def require_email(value: Optional[str], field_name: str = "Email") -> str:
    v = str(value).strip() if value is not None else ""
    if not _EMAIL_RE.match(v):
        raise ValidationError(f"Invalid {field_name.lower()} address")
    return v.lower()


def require_int_range(value: object, field_name: str, min_value: int, max_value: int) -> int:
    try:
        number = int(str(value).strip())
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} must be a whole number")
    if number < min_value:
        raise ValidationError(f"{field_name} must be at least {min_value}")
    if number > max_value:
        raise ValidationError(f"{field_name} cannot exceed {max_value}")
    return number
