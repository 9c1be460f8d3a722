"""Calendar helpers shared by the filter and timeline logic.

Pure functions over `datetime.date`.
"""

import calendar
from datetime import date, datetime


def as_date(value: date | datetime) -> date:
    """Drop the time part of a datetime; dates pass through."""
    if isinstance(value, datetime):
        return value.date()
    return value


def add_months(day: date, months: int) -> date:
    """Move `day` by a number of calendar months.

    The month field is incremented and the day is clamped to the last
    day of the target month, so Jan 31 + 1 month is Feb 28 (Feb 29 in
    a leap year) rather than spilling into March.

    Args:
        day: Starting date
        months: Months to add (negative moves backwards)

    Returns:
        The shifted date
    """
    month_index = day.month - 1 + months
    year = day.year + month_index // 12
    month = month_index % 12 + 1
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, min(day.day, last_day))


def month_start(day: date) -> date:
    return day.replace(day=1)
