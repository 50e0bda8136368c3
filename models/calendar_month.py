"""
Calendar model - month catalogue and day ranges (no leap years)
"""
from typing import List

MONTH_NAMES = [
    "January", "February", "March", "April",
    "May", "June", "July", "August",
    "September", "October", "November", "December",
]

THIRTY_DAY_MONTHS = (3, 5, 8, 10)  # April, June, September, November


class InvalidDateError(ValueError):
    """Raised when a month name or day number does not exist in the calendar"""


def days_in_month(month_index: int) -> int:
    """
    Number of days in a month, January = 0.
    February is always 28 days.
    """
    if month_index == 1:
        return 28
    if month_index in THIRTY_DAY_MONTHS:
        return 30
    return 31


def month_index(month: str) -> int:
    """Get the 0-based index of a month name (case-insensitive)"""
    if not isinstance(month, str):
        raise InvalidDateError(f"Month must be a name, got {month!r}")
    for i, name in enumerate(MONTH_NAMES):
        if name.lower() == month.strip().lower():
            return i
    raise InvalidDateError(f"Unknown month: {month!r}")


def month_name(index: int) -> str:
    """Get the canonical month name for a 0-based index"""
    if not 0 <= index < len(MONTH_NAMES):
        raise InvalidDateError(f"Month index out of range: {index}")
    return MONTH_NAMES[index]


def days_of(month: str) -> List[int]:
    """Day numbers shown for a month, starting at 1"""
    return list(range(1, days_in_month(month_index(month)) + 1))


def validate_date(month: str, day: int) -> str:
    """
    Check a (month, day) pair coming from outside the store.

    Returns:
        str: the canonical month name
    """
    index = month_index(month)
    last_day = days_in_month(index)
    if not 1 <= day <= last_day:
        raise InvalidDateError(f"{MONTH_NAMES[index]} has no day {day} (1-{last_day})")
    return MONTH_NAMES[index]
