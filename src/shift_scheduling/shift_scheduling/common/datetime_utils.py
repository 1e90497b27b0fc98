from __future__ import annotations

from datetime import datetime
from typing import Union

from ..core.exceptions import ValidationError


def parse_iso_datetime(value: Union[str, datetime], field_name: str) -> datetime:
    """Parse a ``datetime-local`` style value (YYYY-MM-DDTHH:MM[:SS]).

    Values that are already datetimes skip parsing. All times are
    naive local times; values carrying a UTC offset are rejected so they never
    get compared against naive ones.
    """
    if isinstance(value, datetime):
        parsed = value
    else:
        v = str(value).strip() if value is not None else ""
        if not v:
            raise ValidationError(f"{field_name} is required")
        try:
            parsed = datetime.fromisoformat(v)
        except ValueError:
            raise ValidationError(f"{field_name} is not a valid date/time (YYYY-MM-DDTHH:MM)")

    if parsed.tzinfo is not None:
        raise ValidationError(f"{field_name} must not include a timezone offset")
    return parsed
