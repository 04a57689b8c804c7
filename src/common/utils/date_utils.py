"""Utility functions for date manipulation."""

from datetime import date, datetime, timedelta

import pytz

from src.common.config.settings import settings


def today() -> date:
    """Returns the current calendar date in the pharmacy's timezone."""
    tz = pytz.timezone(settings.PHARMACY_TIMEZONE)
    return datetime.now(tz).date()


def parse_iso_date(value: str | date) -> date:
    """Parses a `yyyy-MM-dd` string. Dates pass through unchanged."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        return date.fromisoformat(value.strip())
    except (ValueError, TypeError, AttributeError) as e:
        raise ValueError(f"Invalid ISO date: {value!r}") from e


def format_iso_date(value: date) -> str:
    return value.strftime("%Y-%m-%d")


def format_compact_date(value: date) -> str:
    """Formats a date as `YYYYMMDD`, as used in invoice numbers."""
    return value.strftime("%Y%m%d")


def add_days(value: date, days: int) -> date:
    return value + timedelta(days=days)


def days_between(start: date, end: date) -> int:
    """Whole calendar days from start to end (negative if end is earlier)."""
    return (end - start).days
