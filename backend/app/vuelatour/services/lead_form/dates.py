"""
Calendar-date helpers for lead dates.

Travel dates are calendar days, not instants. They are written with a fixed
midday time and an explicit zero UTC offset, and read back by keeping only the
date component, so the day never shifts whatever the reader's timezone.
"""

from __future__ import annotations

from datetime import date, datetime, timezone
from typing import Optional, Union

STORAGE_TIME_SUFFIX = "T12:00:00+00:00"

MONTHS_ES = (
    "enero", "febrero", "marzo", "abril", "mayo", "junio",
    "julio", "agosto", "septiembre", "octubre", "noviembre", "diciembre",
)
MONTHS_EN = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)
WEEKDAYS_ES = ("lunes", "martes", "miércoles", "jueves", "viernes", "sábado", "domingo")


def parse_calendar_date(value: Union[str, date, datetime, None]) -> Optional[date]:
    """Return the calendar day in `value`, using only a `YYYY-MM-DD` prefix for strings."""
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return date.fromisoformat(str(value).strip().split("T")[0][:10])


def to_storage_date(value: Union[str, date, None]) -> Optional[str]:
    """Format a calendar day for a timezone-aware timestamp column."""
    day = parse_calendar_date(value)
    if day is None:
        return None
    return f"{day.isoformat()}{STORAGE_TIME_SUFFIX}"


def read_stored_date(value: Union[str, date, datetime, None]) -> Optional[date]:
    """Read back the calendar day written by `to_storage_date`."""
    if isinstance(value, datetime) and value.tzinfo is not None:
        # Drivers may hand the value back converted to the session timezone.
        return value.astimezone(timezone.utc).date()
    return parse_calendar_date(value)


def format_long_date(value: Union[str, date, datetime, None], locale: str = "es") -> Optional[str]:
    """Render `10 de marzo de 2025` (es) or `March 10, 2025` (en)."""
    day = read_stored_date(value)
    if day is None:
        return None
    if locale == "en":
        return f"{MONTHS_EN[day.month - 1]} {day.day}, {day.year}"
    return f"{day.day} de {MONTHS_ES[day.month - 1]} de {day.year}"


def format_long_date_with_weekday(value: Union[str, date, datetime, None]) -> Optional[str]:
    """Render `lunes, 10 de marzo de 2025`."""
    day = read_stored_date(value)
    if day is None:
        return None
    return f"{WEEKDAYS_ES[day.weekday()]}, {format_long_date(day, 'es')}"


def to_storage_datetime(value: Union[str, date, None]) -> Optional[datetime]:
    """Same instant as `to_storage_date`, as an aware datetime for ORM writes."""
    stored = to_storage_date(value)
    if stored is None:
        return None
    return datetime.fromisoformat(stored)
