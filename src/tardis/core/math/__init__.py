"""
Core math modules: Gregorian day arithmetic and field value safeguards.
"""

from tardis.core.math.gregorian import (
    MS_PER_DAY,
    MS_PER_HOUR,
    MS_PER_MINUTE,
    MS_PER_SECOND,
    compose,
    date_from_days,
    days_from_date,
    days_in_month,
    decompose,
    year_is_leap,
)
from tardis.core.math.numerical_safeguards import (
    delta_or_zero,
    field_value_or_none,
    is_finite_number,
    truncate_field,
)

__all__ = [
    # Gregorian constants
    "MS_PER_DAY",
    "MS_PER_HOUR",
    "MS_PER_MINUTE",
    "MS_PER_SECOND",
    # Gregorian functions
    "compose",
    "date_from_days",
    "days_from_date",
    "days_in_month",
    "decompose",
    "year_is_leap",
    # Numerical Safeguards
    "delta_or_zero",
    "field_value_or_none",
    "is_finite_number",
    "truncate_field",
]
