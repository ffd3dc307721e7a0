"""Clock protocol and implementations used to obtain the present instant."""

from __future__ import annotations

import time
from datetime import datetime, timedelta, timezone
from typing import Protocol, Union

from tardis.core.math.gregorian import MS_PER_MINUTE

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


class Clock(Protocol):
    """Source of the present instant, in milliseconds since the Unix epoch."""

    def now_ms(self) -> int: ...


class SystemClock:
    """Wall clock of the host."""

    def now_ms(self) -> int:
        return time.time_ns() // 1_000_000


class FrozenClock:
    """Test clock pinned to a fixed instant."""

    def __init__(self, fixed: Union[datetime, int]) -> None:
        if isinstance(fixed, datetime):
            fixed = datetime_to_ms(fixed)
        self._fixed = fixed

    def now_ms(self) -> int:
        return self._fixed

    def advance(self, **kwargs: int | float) -> None:
        """Advance the frozen instant by the given ``timedelta`` kwargs."""
        self._fixed += timedelta(**kwargs) // timedelta(milliseconds=1)


def datetime_to_ms(value: datetime) -> int:
    """Epoch milliseconds of a datetime; naive values are taken as UTC."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return (value - _EPOCH) // timedelta(milliseconds=1)


def local_utc_offset_minutes() -> int:
    """Current UTC offset of the host's local time zone, in minutes."""
    offset = datetime.now().astimezone().utcoffset()
    return offset // timedelta(minutes=1)


def offset_to_ms(utc_offset_minutes: int) -> int:
    return utc_offset_minutes * MS_PER_MINUTE


SYSTEM_CLOCK = SystemClock()
