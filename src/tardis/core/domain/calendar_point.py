"""
CalendarPoint — Absolute instant with a calendar field view

A point is an integer count of milliseconds since the Unix epoch together with
a fixed UTC offset that defines its local frame. The seven calendar fields
(years .. milliseconds) are always derived from the instant; none of them is
stored on its own.

Placement and movement:

    set_fields({"minutes": 0})          # jump to the top of the hour
    move_fields({"days": -1})           # same time yesterday

Both mutate the point in place and return it. Every derived point
(start_of_day, noon, tomorrow, ...) is a new object.

CRITICAL INVARIANTS:
1. Placing fields re-derives the instant immediately, with overflow rolling
   into the neighbouring units (day 32 of March is April 1st)
2. Keys that are absent or not finite numbers never touch a field
3. clone() shares no state with its source
"""

from __future__ import annotations

import functools
import json
from datetime import datetime, timedelta, timezone
from typing import Any, Mapping, Optional, Union

from jsonschema import ValidationError

from tardis.config import resolve_utc_offset
from tardis.core.clock import SYSTEM_CLOCK, Clock, datetime_to_ms, offset_to_ms
from tardis.core.contracts.validators import validate_calendar_point
from tardis.core.domain.field_record import FieldRecord
from tardis.core.domain.units import FIELD_KEYS, lookup_field
from tardis.core.math.gregorian import compose, decompose
from tardis.core.math.numerical_safeguards import delta_or_zero, field_value_or_none
from tardis.errors import ContractViolation

FieldInput = Union[Mapping[str, Any], FieldRecord]

# Defaults of a point built from scratch (from_fields)
_FIELD_DEFAULTS = {
    "years": 1970,
    "months": 1,
    "days": 1,
    "hours": 0,
    "minutes": 0,
    "seconds": 0,
    "milliseconds": 0,
}


def _as_mapping(partial: Optional[FieldInput]) -> Mapping[str, Any]:
    if partial is None:
        return {}
    if isinstance(partial, FieldRecord):
        return partial.to_dict()
    return partial


@functools.total_ordering
class CalendarPoint:
    """Mutable calendar point; ordering and equality follow the instant."""

    __slots__ = ("_timestamp_ms", "_utc_offset_minutes")

    def __init__(self, timestamp_ms: int, utc_offset_minutes: int = 0):
        """
        Args:
            timestamp_ms: Milliseconds since 1970-01-01T00:00:00Z
            utc_offset_minutes: Offset of the local frame (e.g. 120 for UTC+2)
        """
        self._timestamp_ms = int(timestamp_ms)
        self._utc_offset_minutes = int(utc_offset_minutes)

    # =========================================================================
    # CONSTRUCTORS
    # =========================================================================

    @classmethod
    def now(
        cls,
        clock: Optional[Clock] = None,
        utc_offset_minutes: Optional[int] = None,
    ) -> "CalendarPoint":
        """The present instant in the configured (or given) local frame."""
        clock = clock or SYSTEM_CLOCK
        return cls(clock.now_ms(), resolve_utc_offset(utc_offset_minutes))

    @classmethod
    def create(
        cls,
        record: Optional[FieldInput] = None,
        clock: Optional[Clock] = None,
        utc_offset_minutes: Optional[int] = None,
    ) -> "CalendarPoint":
        """
        Point placed at a partial field record.

        Fields missing from the record keep the value of the present instant,
        so create({"hours": 9}) is 09:xx today.
        """
        return cls.now(clock, utc_offset_minutes).set_fields(record)

    @classmethod
    def from_fields(
        cls,
        record: FieldInput,
        utc_offset_minutes: int = 0,
    ) -> "CalendarPoint":
        """
        Point composed directly from a field record.

        Missing fields take their smallest value (January 1st, 1970, 00:00),
        so the result does not depend on the present instant.
        """
        mapping = _as_mapping(record)
        fields = []
        for key in FIELD_KEYS:
            value = field_value_or_none(lookup_field(mapping, key))
            fields.append(_FIELD_DEFAULTS[key] if value is None else value)
        local_ms = compose(*fields)
        return cls(local_ms - offset_to_ms(utc_offset_minutes), utc_offset_minutes)

    @classmethod
    def from_datetime(cls, value: datetime) -> "CalendarPoint":
        """
        Point for a datetime, truncated to milliseconds.

        An aware datetime keeps its offset; a naive one is read as UTC.
        """
        offset = value.utcoffset()
        minutes = 0 if offset is None else offset // timedelta(minutes=1)
        return cls(datetime_to_ms(value), minutes)

    @classmethod
    def from_json(cls, text: str) -> "CalendarPoint":
        """
        Point from a document written by to_json().

        Raises:
            ContractViolation: If the document does not match calendar_point.json
        """
        data = json.loads(text)
        try:
            validate_calendar_point(data)
        except ValidationError as e:
            raise ContractViolation(f"Invalid calendar point document: {e.message}") from e
        return cls.from_fields(data["fields"], data["utc_offset_minutes"])

    # =========================================================================
    # READ
    # =========================================================================

    @property
    def timestamp_ms(self) -> int:
        return self._timestamp_ms

    @property
    def utc_offset_minutes(self) -> int:
        return self._utc_offset_minutes

    def _local_ms(self) -> int:
        return self._timestamp_ms + offset_to_ms(self._utc_offset_minutes)

    def _local_fields(self) -> tuple:
        return decompose(self._local_ms())

    def to_field_record(self) -> FieldRecord:
        """All seven fields in the local frame."""
        return FieldRecord(**dict(zip(FIELD_KEYS, self._local_fields())))

    def to_utc_field_record(self) -> FieldRecord:
        """All seven fields in UTC."""
        return FieldRecord(**dict(zip(FIELD_KEYS, decompose(self._timestamp_ms))))

    def to_datetime(self) -> datetime:
        """Aware datetime with this point's fixed offset."""
        tz = timezone(timedelta(minutes=self._utc_offset_minutes))
        epoch = datetime(1970, 1, 1, tzinfo=timezone.utc)
        return (epoch + timedelta(milliseconds=self._timestamp_ms)).astimezone(tz)

    def to_json(self) -> str:
        return json.dumps(
            {
                "fields": self.to_field_record().to_dict(),
                "utc_offset_minutes": self._utc_offset_minutes,
            }
        )

    def isoformat(self) -> str:
        years, months, days, hours, minutes, seconds, milliseconds = self._local_fields()
        sign = "-" if self._utc_offset_minutes < 0 else "+"
        offset_hours, offset_minutes = divmod(abs(self._utc_offset_minutes), 60)
        return (
            f"{years:04d}-{months:02d}-{days:02d}T"
            f"{hours:02d}:{minutes:02d}:{seconds:02d}.{milliseconds:03d}"
            f"{sign}{offset_hours:02d}:{offset_minutes:02d}"
        )

    # =========================================================================
    # PLACEMENT AND MOVEMENT (destructive)
    # =========================================================================

    def set_fields(self, partial: Optional[FieldInput]) -> "CalendarPoint":
        """
        Place the point at absolute field values.

        Every usable key replaces its local field; absent or non-finite
        values leave their field at the current value. The instant is then
        re-derived once from the combined fields, so overflow in one field
        never shifts where another field of the same record lands.

        Args:
            partial: Mapping or FieldRecord with any of the seven keys

        Returns:
            self
        """
        mapping = _as_mapping(partial)
        fields = list(self._local_fields())
        placed = False
        for index, key in enumerate(FIELD_KEYS):
            value = field_value_or_none(lookup_field(mapping, key))
            if value is not None:
                fields[index] = value
                placed = True
        if placed:
            self._timestamp_ms = compose(*fields) - offset_to_ms(self._utc_offset_minutes)
        return self

    def move_fields(self, partial: Optional[FieldInput]) -> "CalendarPoint":
        """
        Move the point by relative field amounts.

        Every target is computed from the current fields before anything is
        placed; keys missing from the record add nothing.

        Returns:
            self
        """
        mapping = _as_mapping(partial)
        current = self._local_fields()
        target = {
            key: current[index] + delta_or_zero(lookup_field(mapping, key))
            for index, key in enumerate(FIELD_KEYS)
        }
        return self.set_fields(target)

    def clone(self) -> "CalendarPoint":
        return CalendarPoint(self._timestamp_ms, self._utc_offset_minutes)

    # =========================================================================
    # DERIVED POINTS (non-destructive)
    # =========================================================================

    @property
    def start_of_day(self) -> "CalendarPoint":
        return self.clone().set_fields({"hours": 0, "minutes": 0, "seconds": 0, "milliseconds": 0})

    @property
    def end_of_day(self) -> "CalendarPoint":
        """Last millisecond of the day."""
        return self.start_of_day.move_fields({"hours": 24, "milliseconds": -1})

    @property
    def noon(self) -> "CalendarPoint":
        return self.start_of_day.move_fields({"hours": 12})

    @property
    def midnight(self) -> "CalendarPoint":
        return self.end_of_day

    @property
    def yesterday(self) -> "CalendarPoint":
        return self.clone().move_fields({"days": -1})

    @property
    def tomorrow(self) -> "CalendarPoint":
        return self.clone().move_fields({"days": 1})

    @property
    def utc_view(self) -> "CalendarPoint":
        """
        Copy whose local fields read what the UTC fields of this point read.

        The offset is kept, so the instant itself shifts by the offset.
        """
        return self.clone().set_fields(self.to_utc_field_record())

    start = start_of_day
    end = end_of_day
    utc = utc_view

    # =========================================================================
    # COMPARISON
    # =========================================================================

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CalendarPoint):
            return NotImplemented
        return self._timestamp_ms == other._timestamp_ms

    def __lt__(self, other: "CalendarPoint") -> bool:
        if not isinstance(other, CalendarPoint):
            return NotImplemented
        return self._timestamp_ms < other._timestamp_ms

    def __hash__(self) -> int:
        return hash(self._timestamp_ms)

    def __repr__(self) -> str:
        return f"CalendarPoint({self.isoformat()!r})"
