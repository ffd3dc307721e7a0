"""
OriginResolver — turns accumulated offsets into a calendar point

Resolution:
1. every spec becomes a signed field delta (BEFORE → negative)
2. all deltas are gathered into ONE move record
3. a fresh "now" point receives a single move_fields call
4. the named origin (yesterday, tomorrow, noon, midnight) is applied last

Because the move is computed from a single snapshot of "now", multi-unit
offsets never re-read fields changed by an earlier unit of the same
expression.
"""

import logging
from typing import Callable, Dict, Optional

from tardis.core.clock import SYSTEM_CLOCK, Clock
from tardis.core.domain.calendar_point import CalendarPoint
from tardis.core.domain.units import Origin
from tardis.builder.offsets import OffsetAccumulator
from tardis.errors import UnresolvableDefinition

logger = logging.getLogger(__name__)

_ORIGIN_ADJUSTMENTS: Dict[Origin, Callable[[CalendarPoint], CalendarPoint]] = {
    Origin.NOW: lambda point: point,
    Origin.TODAY: lambda point: point,
    Origin.YESTERDAY: lambda point: point.yesterday,
    Origin.TOMORROW: lambda point: point.tomorrow,
    Origin.NOON: lambda point: point.noon,
    Origin.MIDNIGHT: lambda point: point.midnight,
}


class OriginResolver:
    """
    Resolver of offset accumulators against named origins.

    Stateless apart from its clock and local frame; one instance can serve
    any number of seeds.
    """

    def __init__(
        self,
        clock: Optional[Clock] = None,
        utc_offset_minutes: Optional[int] = None,
    ):
        """
        Args:
            clock: Source of "now" (default: host wall clock)
            utc_offset_minutes: Local frame of resolved points; None defers to
                TardisSettings and then to the host's local offset
        """
        self.clock = clock or SYSTEM_CLOCK
        self.utc_offset_minutes = utc_offset_minutes

    def anchor(self) -> CalendarPoint:
        """Fresh point for the present instant."""
        return CalendarPoint.now(self.clock, self.utc_offset_minutes)

    def resolve(
        self,
        accumulator: Optional[OffsetAccumulator],
        origin: Origin = Origin.NOW,
    ) -> CalendarPoint:
        """
        Resolve accumulated offsets against an origin.

        Args:
            accumulator: Offsets recorded by a seed; None if no unit was used
            origin: Named reference point

        Returns:
            New CalendarPoint

        Raises:
            UnresolvableDefinition: If no offset was ever recorded
        """
        if accumulator is None:
            raise UnresolvableDefinition(origin.value)

        move = accumulator.to_move_record()
        point = self.anchor().move_fields(move)
        result = _ORIGIN_ADJUSTMENTS[origin](point)
        logger.debug("resolved %s against %s -> %s", move, origin.value, result.isoformat())
        return result


_DEFAULT_RESOLVER: Optional[OriginResolver] = None


def default_resolver() -> OriginResolver:
    """Shared resolver on the host clock; its frame follows TardisSettings."""
    global _DEFAULT_RESOLVER
    if _DEFAULT_RESOLVER is None:
        _DEFAULT_RESOLVER = OriginResolver()
    return _DEFAULT_RESOLVER
