"""
Units — Time units, directions and origins

The seven calendar units share one naming scheme everywhere in the package:

- TimeUnit value: singular name ("day")
- field key: plural name ("days"), used by field records and movement
- builder methods: both forms ("day()" and "days()")

Month values are 1-based (1 = January) as in the standard library.
"""

from enum import Enum
from typing import Dict, Final, Mapping, Optional, Tuple, Union


# =============================================================================
# ENUMS
# =============================================================================


class TimeUnit(str, Enum):
    """Calendar unit, ordered from the largest to the smallest."""

    YEAR = "year"
    MONTH = "month"
    DAY = "day"
    HOUR = "hour"
    MINUTE = "minute"
    SECOND = "second"
    MILLISECOND = "millisecond"

    @property
    def plural(self) -> str:
        return self.value + "s"

    @property
    def field_key(self) -> str:
        """Key of this unit in a field record."""
        return self.plural

    @classmethod
    def parse(cls, name: Union["TimeUnit", str]) -> "TimeUnit":
        """
        Unit for a singular or plural name (case-insensitive).

        Raises:
            ValueError: If the name is not a known unit
        """
        if isinstance(name, cls):
            return name
        unit = _UNIT_BY_NAME.get(str(name).strip().lower())
        if unit is None:
            raise ValueError(
                f"Unknown time unit {name!r}; expected one of "
                f"{', '.join(u.value + '(s)' for u in cls)}"
            )
        return unit


class Direction(str, Enum):
    """Whether an offset moves into the past or the future."""

    BEFORE = "before"
    AFTER = "after"

    @property
    def sign(self) -> int:
        return -1 if self is Direction.BEFORE else 1


class Origin(str, Enum):
    """Named reference point a relative offset is resolved against."""

    NOW = "now"
    TODAY = "today"
    YESTERDAY = "yesterday"
    TOMORROW = "tomorrow"
    NOON = "noon"
    MIDNIGHT = "midnight"

    @classmethod
    def parse(cls, name: Union["Origin", str]) -> "Origin":
        """
        Origin for a name (case-insensitive).

        Raises:
            ValueError: If the name is not a known origin
        """
        if isinstance(name, cls):
            return name
        try:
            return cls(str(name).strip().lower())
        except ValueError:
            raise ValueError(
                f"Unknown origin {name!r}; expected one of "
                f"{', '.join(o.value for o in cls)}"
            ) from None


# =============================================================================
# FIELD KEYS
# =============================================================================

_UNIT_BY_NAME: Final[Dict[str, TimeUnit]] = {
    **{unit.value: unit for unit in TimeUnit},
    **{unit.plural: unit for unit in TimeUnit},
}

# Field record keys in placement order (largest unit first)
FIELD_KEYS: Final[Tuple[str, ...]] = tuple(unit.field_key for unit in TimeUnit)

# Singular spelling accepted in field records, mapped to the canonical key
FIELD_KEY_ALIASES: Final[Dict[str, str]] = {unit.field_key: unit.value for unit in TimeUnit}

TIME_OF_DAY_KEYS: Final[Tuple[str, ...]] = FIELD_KEYS[3:]


def lookup_field(record: Mapping, key: str) -> Optional[object]:
    """
    Value of a field in a record, by plural key or its singular alias.

    The plural key wins when both spellings are present.
    """
    if key in record:
        return record[key]
    return record.get(FIELD_KEY_ALIASES[key])
