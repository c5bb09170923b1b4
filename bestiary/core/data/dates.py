"""Calendar helpers for creature birth dates and ages."""

from datetime import date, datetime
from typing import Optional, Union

DateLike = Union[date, datetime]

MIN_AGE_YEARS = 0


def to_date(value: DateLike) -> date:
    """Normalize a date or datetime to a plain date.

    Args:
        value: Date or datetime to normalize

    Returns:
        The calendar date part of the value

    Raises:
        TypeError: If value is not a date or datetime
    """
    # datetime is a subclass of date, so check it first
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    raise TypeError(f"Expected a date, got {type(value).__name__}")


def is_in_future(value: DateLike, now: Optional[datetime] = None) -> bool:
    """Check whether a date or datetime lies after the current moment.

    Plain dates are compared against today's date so that a creature born
    today is always valid.
    """
    now = now or datetime.now()
    if isinstance(value, datetime):
        if value.tzinfo is not None and now.tzinfo is None:
            now = now.astimezone()
        return value > now
    return value > now.date()


def calculate_age_years(birth: date, today: date) -> int:
    """Calculate whole years between a birth date and today.

    One year is subtracted when today's day-of-year precedes the birth
    day-of-year (birthday not reached yet this year).

    Args:
        birth: Birth date
        today: Reference date

    Returns:
        Age in years, never below MIN_AGE_YEARS
    """
    years = today.year - birth.year

    if today.timetuple().tm_yday < birth.timetuple().tm_yday:
        years -= 1

    return max(MIN_AGE_YEARS, years)
