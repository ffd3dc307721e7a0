"""
Gregorian — Proleptic Gregorian Day Arithmetic

Conversion between calendar fields and a linear count of milliseconds since
1970-01-01T00:00:00.000 in some local frame.

Calendar fields are never validated: a field outside its usual range
overflows onto the larger units (day 32 of March is April 1, month 13 is
January of the next year, hour -1 is 23:00 of the previous day). Python
integers are unbounded, so any year can be represented.

INVARIANTS:
1. decompose(compose(*fields)) == fields for in-range fields
2. compose is linear in every field except months (months overflow by whole years)
3. months are 1-based (1 = January)
"""

from typing import Final, Tuple

# =============================================================================
# UNIT CONSTANTS
# =============================================================================

MS_PER_SECOND: Final[int] = 1000
MS_PER_MINUTE: Final[int] = 60 * MS_PER_SECOND
MS_PER_HOUR: Final[int] = 60 * MS_PER_MINUTE
MS_PER_DAY: Final[int] = 24 * MS_PER_HOUR

MONTHS_IN_YEAR: Final[int] = 12

# Days in a 400-year Gregorian cycle
DAYS_IN_CYCLE: Final[int] = 146097

# Day number of 1970-01-01 counted from 0000-03-01
_EPOCH_SHIFT: Final[int] = 719468

CALENDAR_YEAR: Final[Tuple[int, ...]] = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


# =============================================================================
# CALENDAR PREDICATES
# =============================================================================


def year_is_leap(year: int) -> bool:
    """Whether the given Gregorian year has a February 29."""
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(year: int, month: int) -> int:
    """
    Number of days in the month.

    Args:
        year: Gregorian year
        month: 1-based month (1..12)

    Returns:
        28..31
    """
    if month == 2 and year_is_leap(year):
        return 29
    return CALENDAR_YEAR[month - 1]


# =============================================================================
# DAY NUMBERS
# =============================================================================


def days_from_date(year: int, month: int, day: int) -> int:
    """
    Days since 1970-01-01 for a Gregorian date.

    The year is shifted to start in March so that the leap day falls at the
    end of the computational year.

    Args:
        year: Gregorian year (any integer)
        month: 1-based month, must be 1..12
        day: day of month; values outside the month overflow linearly

    Returns:
        Signed number of days relative to the Unix epoch
    """
    if month <= 2:
        year -= 1
    era = year // 400
    year_of_era = year - era * 400
    shifted_month = month - 3 if month > 2 else month + 9
    day_of_year = (153 * shifted_month + 2) // 5 + day - 1
    day_of_era = (
        year_of_era * 365 + year_of_era // 4 - year_of_era // 100 + day_of_year
    )
    return era * DAYS_IN_CYCLE + day_of_era - _EPOCH_SHIFT


def date_from_days(days: int) -> Tuple[int, int, int]:
    """
    Gregorian date for a day count relative to 1970-01-01.

    Args:
        days: Signed number of days since the Unix epoch

    Returns:
        (year, month, day) with a 1-based month
    """
    days += _EPOCH_SHIFT
    era = days // DAYS_IN_CYCLE
    day_of_era = days - era * DAYS_IN_CYCLE
    year_of_era = (
        day_of_era - day_of_era // 1460 + day_of_era // 36524 - day_of_era // 146096
    ) // 365
    day_of_year = day_of_era - (365 * year_of_era + year_of_era // 4 - year_of_era // 100)
    shifted_month = (5 * day_of_year + 2) // 153
    day = day_of_year - (153 * shifted_month + 2) // 5 + 1
    month = shifted_month + 3 if shifted_month < 10 else shifted_month - 9
    year = year_of_era + era * 400
    if month <= 2:
        year += 1
    return year, month, day


# =============================================================================
# FIELD COMPOSITION
# =============================================================================


def compose(
    years: int,
    months: int,
    days: int,
    hours: int,
    minutes: int,
    seconds: int,
    milliseconds: int,
) -> int:
    """
    Milliseconds since the epoch for a set of (possibly overflowing) fields.

    Examples:
        >>> compose(1970, 1, 1, 0, 0, 0, 0)
        0
        >>> compose(2024, 3, 32, 0, 0, 0, 0) == compose(2024, 4, 1, 0, 0, 0, 0)
        True
        >>> compose(2024, 13, 1, 0, 0, 0, 0) == compose(2025, 1, 1, 0, 0, 0, 0)
        True
    """
    year, month_index = divmod(years * MONTHS_IN_YEAR + (months - 1), MONTHS_IN_YEAR)
    day_number = days_from_date(year, month_index + 1, 1) + (days - 1)
    return (
        day_number * MS_PER_DAY
        + hours * MS_PER_HOUR
        + minutes * MS_PER_MINUTE
        + seconds * MS_PER_SECOND
        + milliseconds
    )


def decompose(timestamp_ms: int) -> Tuple[int, int, int, int, int, int, int]:
    """
    Calendar fields of an epoch-millisecond count.

    Returns:
        (years, months, days, hours, minutes, seconds, milliseconds)
    """
    day_number, rest = divmod(timestamp_ms, MS_PER_DAY)
    hours, rest = divmod(rest, MS_PER_HOUR)
    minutes, rest = divmod(rest, MS_PER_MINUTE)
    seconds, milliseconds = divmod(rest, MS_PER_SECOND)
    year, month, day = date_from_days(day_number)
    return year, month, day, hours, minutes, seconds, milliseconds
