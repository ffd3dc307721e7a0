"""
Domain models and value objects.

Contains the calendar units, the field record and the calendar point.
"""

from tardis.core.domain.calendar_point import CalendarPoint
from tardis.core.domain.field_record import FieldRecord
from tardis.core.domain.units import (
    FIELD_KEYS,
    Direction,
    Origin,
    TimeUnit,
)

__all__ = [
    # Units module
    "FIELD_KEYS",
    "TimeUnit",
    "Direction",
    "Origin",
    # Field record
    "FieldRecord",
    # Calendar point
    "CalendarPoint",
]
