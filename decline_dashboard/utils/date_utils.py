"""Date manipulation utilities"""

from datetime import date, datetime, time, timedelta, timezone
from typing import List


def generate_date_range(start: date, end: date) -> List[date]:
    """Generate list of dates from start to end (inclusive)"""
    days = (end - start).days + 1
    return [start + timedelta(days=i) for i in range(days)]


def ensure_utc(moment: datetime) -> datetime:
    """Treat naive datetimes as UTC, convert aware ones to UTC"""
    if moment.tzinfo is None:
        return moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(timezone.utc)


def utc_date(moment: datetime) -> date:
    """Calendar day of an instant in UTC"""
    return ensure_utc(moment).date()


def start_of_day(day: date) -> datetime:
    """00:00:00.000 UTC of the given day"""
    return datetime.combine(day, time.min, tzinfo=timezone.utc)


def end_of_day(day: date) -> datetime:
    """23:59:59.999 UTC of the given day (millisecond precision)"""
    return datetime.combine(day, time(23, 59, 59, 999000), tzinfo=timezone.utc)
