"""
Numerical Safeguards — Field Value Predicates

A calendar field is only ever touched by a finite real number. Everything
else (None, strings, booleans, NaN, ±Inf) is treated as "not provided":

- placement (set_fields) leaves the field at its current value
- movement (move_fields) contributes 0 to the field

CRITICAL INVARIANTS:
1. These helpers never raise: unusable values are filtered, not rejected
2. Finite non-integral values are truncated toward zero
"""

import math
import numbers
from typing import Any, Optional


def is_finite_number(value: Any) -> bool:
    """
    Whether a value may be used as a calendar field.

    Booleans are excluded even though bool is an int subclass.

    Examples:
        >>> is_finite_number(3)
        True
        >>> is_finite_number(-2.5)
        True
        >>> is_finite_number(float('nan'))
        False
        >>> is_finite_number(None)
        False
        >>> is_finite_number("5")
        False
        >>> is_finite_number(True)
        False
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        return False
    return math.isfinite(value)


def truncate_field(value: numbers.Real) -> int:
    """
    Integral field value, truncated toward zero.

    Examples:
        >>> truncate_field(1.9)
        1
        >>> truncate_field(-1.9)
        -1
    """
    return math.trunc(value)


def field_value_or_none(value: Any) -> Optional[int]:
    """Truncated field value, or None when the value must be ignored."""
    if not is_finite_number(value):
        return None
    return truncate_field(value)


def delta_or_zero(value: Any) -> numbers.Real:
    """
    Movement delta for a field: the value itself when finite, else 0.

    Non-integral deltas are kept as is; truncation happens once the moved
    field is placed.
    """
    if not is_finite_number(value):
        return 0
    return value
