from __future__ import annotations

from datetime import date, datetime, timedelta

from ..core.constants import ISO_DATE_FORMAT
from ..core.exceptions import ValidationError


def parse_iso_date(value: str, field_name: str = "date") -> date:
    """Parse YYYY-MM-DD string into date."""
    try:
        return datetime.strptime(value.strip(), ISO_DATE_FORMAT).date()
    except (AttributeError, ValueError):
        raise ValidationError(f"{field_name} must be a date in YYYY-MM-DD format", field=field_name)


def parse_iso_datetime(value: str, field_name: str = "date") -> datetime:
    """Parse an ISO 8601 date or timestamp (``2025-01-01``, ``2025-01-01T08:00:00Z``)."""
    try:
        return datetime.fromisoformat(value.strip())
    except (AttributeError, ValueError):
        raise ValidationError(f"{field_name} must be an ISO 8601 date or timestamp", field=field_name)


def format_iso_date(value: date) -> str:
    return value.strftime(ISO_DATE_FORMAT)


def start_of_week(day: date) -> date:
    """Most recent Sunday on or before ``day``."""
    # Monday=0 ... Sunday=6
    return day - timedelta(days=(day.weekday() + 1) % 7)


def now_local() -> datetime:
    """Server clock; services take it as an injectable `clock`."""
    return datetime.now()
