"""Julian day arithmetic for date keys."""

from datetime import date, timedelta
from typing import Optional

# date.toordinal() + JULIAN_OFFSET gives the julian day number used as date_sk
JULIAN_OFFSET = 1721425

DATE_MINIMUM = date(1998, 1, 1)
DATE_MAXIMUM = date(2002, 12, 31)
DATA_START_DATE = date(1998, 1, 1)
DATA_END_DATE = date(2003, 12, 31)
CURRENT_DATE = date(2003, 1, 8)
DATE_DIM_FIRST_DATE = date(1900, 1, 2)


def to_julian_days(value: date) -> int:
    return value.toordinal() + JULIAN_OFFSET


def from_julian_days(julian_days: int) -> date:
    return date.fromordinal(julian_days - JULIAN_OFFSET)


def format_julian_days(julian_days: int) -> Optional[str]:
    """ISO date for a julian day, ``None`` for the ``-1`` no-date sentinel."""
    if julian_days < 0:
        return None
    return from_julian_days(julian_days).isoformat()


def days_in_month(year: int, month: int) -> int:
    if month == 12:
        return 31
    return (date(year, month + 1, 1) - timedelta(days=1)).day


def shift_months(value: date, months: int) -> date:
    """Same day ``months`` later (or earlier), clamped to the month's end."""
    month_index = value.year * 12 + value.month - 1 + months
    year, month = divmod(month_index, 12)
    month += 1
    return date(year, month, min(value.day, days_in_month(year, month)))


JULIAN_DATE_MINIMUM = to_julian_days(DATE_MINIMUM)
JULIAN_DATE_MAXIMUM = to_julian_days(DATE_MAXIMUM)
JULIAN_DATA_START_DATE = to_julian_days(DATA_START_DATE)
JULIAN_DATA_END_DATE = to_julian_days(DATA_END_DATE)
JULIAN_CURRENT_DATE = to_julian_days(CURRENT_DATE)
JULIAN_DATE_DIM_FIRST_DATE = to_julian_days(DATE_DIM_FIRST_DATE)
