"""
Seed — fluent relative-offset builder around a plain number

    seed(1).year().ago()
    seed(5).minutes().and_(30).seconds().from_().now()
    seed(1).year().before().and_(1).day().after().now()
    seed(3).hours().before().midnight()

States of a seed:

    UNSET --unit--> UNIT_PENDING --direction--> DIRECTED
      UNIT_PENDING/DIRECTED --and_--> CHAINED --unit--> UNIT_PENDING ...

Any origin method ends the expression and returns a CalendarPoint. Direction,
chain and origin methods on an UNSET seed raise MissingBuilderState.

`and` and `from` are Python keywords, hence `and_()` and `from_()`.
"""

import logging
import numbers
from enum import Enum
from typing import Optional, Union

from tardis.core.domain.calendar_point import CalendarPoint
from tardis.core.domain.units import Direction, Origin, TimeUnit
from tardis.builder.offsets import OffsetAccumulator
from tardis.builder.resolver import OriginResolver, default_resolver
from tardis.errors import DirectionWithoutUnit, UnresolvableDefinition

logger = logging.getLogger(__name__)


class BuilderState(str, Enum):
    """Position of a seed in the builder grammar."""

    UNSET = "UNSET"
    UNIT_PENDING = "UNIT_PENDING"
    DIRECTED = "DIRECTED"
    CHAINED = "CHAINED"


def _as_magnitude(value: numbers.Real) -> Union[int, float]:
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise TypeError(f"Offset magnitude must be a real number, got {value!r}")
    if isinstance(value, (int, float)):
        return value
    return float(value)


class Seed:
    """
    Numeric seed owning one OffsetAccumulator.

    Every builder method returns the same seed, except origin methods which
    return the resolved CalendarPoint.
    """

    def __init__(self, value: numbers.Real, resolver: Optional[OriginResolver] = None):
        """
        Args:
            value: Magnitude used by the first unit method
            resolver: Resolver for origin methods (default: shared host resolver)
        """
        self._value = _as_magnitude(value)
        self._resolver = resolver
        self._accumulator: Optional[OffsetAccumulator] = None
        self._state = BuilderState.UNSET

    @property
    def value(self) -> Union[int, float]:
        return self._value

    @property
    def accumulator(self) -> Optional[OffsetAccumulator]:
        return self._accumulator

    @property
    def state(self) -> BuilderState:
        return self._state

    @property
    def resolver(self) -> OriginResolver:
        return self._resolver or default_resolver()

    # =========================================================================
    # UNITS
    # =========================================================================

    def offset(
        self,
        unit: Union[TimeUnit, str],
        magnitude: Optional[numbers.Real] = None,
        direction: Optional[Union[Direction, str]] = None,
    ) -> "Seed":
        """
        Record an offset explicitly.

        Args:
            unit: TimeUnit or its singular/plural name
            magnitude: Replaces the next magnitude before recording (like and_)
            direction: Applied after recording, like a direction method

        Raises:
            ValueError: If unit or direction names are unknown
        """
        unit = TimeUnit.parse(unit)
        if magnitude is not None:
            if self._accumulator is None:
                self._accumulator = OffsetAccumulator(_as_magnitude(magnitude))
            else:
                self._accumulator.chain(_as_magnitude(magnitude))
        self._record(unit)
        if direction is not None:
            direction = Direction(direction)
            self._direct(direction, direction.value)
        return self

    def _record(self, unit: TimeUnit) -> "Seed":
        if self._accumulator is None:
            self._accumulator = OffsetAccumulator(self._value)
        spec = self._accumulator.record(unit)
        self._state = BuilderState.UNIT_PENDING
        logger.debug("recorded %s %s (direction=%s)", spec.magnitude, unit.plural, spec.direction)
        return self

    def year(self) -> "Seed":
        return self._record(TimeUnit.YEAR)

    def month(self) -> "Seed":
        return self._record(TimeUnit.MONTH)

    def day(self) -> "Seed":
        return self._record(TimeUnit.DAY)

    def hour(self) -> "Seed":
        return self._record(TimeUnit.HOUR)

    def minute(self) -> "Seed":
        return self._record(TimeUnit.MINUTE)

    def second(self) -> "Seed":
        return self._record(TimeUnit.SECOND)

    def millisecond(self) -> "Seed":
        return self._record(TimeUnit.MILLISECOND)

    years = year
    months = month
    days = day
    hours = hour
    minutes = minute
    seconds = second
    milliseconds = millisecond

    # =========================================================================
    # DIRECTIONS
    # =========================================================================

    def _direct(self, direction: Direction, operation: str) -> "Seed":
        if self._accumulator is None:
            raise DirectionWithoutUnit(operation)
        directed = self._accumulator.assign_direction(direction)
        self._state = BuilderState.DIRECTED
        logger.debug("%s applied to %s", direction.value, [unit.value for unit in directed])
        return self

    def before(self) -> "Seed":
        return self._direct(Direction.BEFORE, "before")

    def after(self) -> "Seed":
        return self._direct(Direction.AFTER, "after")

    def from_(self) -> "Seed":
        """Alias of after(), for "3 minutes from now"."""
        return self._direct(Direction.AFTER, "from")

    # =========================================================================
    # CHAINING
    # =========================================================================

    def and_(self, value: numbers.Real) -> "Seed":
        """
        Continue the expression with a new magnitude.

        Units recorded so far keep their magnitude and direction; the next
        unit method records `value`.

        Raises:
            UnresolvableDefinition: If no unit has been recorded yet
        """
        if self._accumulator is None:
            raise UnresolvableDefinition("and")
        self._accumulator.chain(_as_magnitude(value))
        self._state = BuilderState.CHAINED
        logger.debug("chained next magnitude %s", value)
        return self

    # =========================================================================
    # ORIGINS
    # =========================================================================

    def resolve(self, origin: Union[Origin, str] = Origin.NOW) -> CalendarPoint:
        """
        Resolve the expression against a named origin.

        Raises:
            UnresolvableDefinition: If no unit has been recorded
            ValueError: If the origin name is unknown
        """
        return self.resolver.resolve(self._accumulator, Origin.parse(origin))

    def now(self) -> CalendarPoint:
        return self.resolve(Origin.NOW)

    def today(self) -> CalendarPoint:
        return self.resolve(Origin.TODAY)

    def ago(self) -> CalendarPoint:
        """Shorthand for before().now()."""
        return self._direct(Direction.BEFORE, "ago").now()

    def yesterday(self) -> CalendarPoint:
        return self.resolve(Origin.YESTERDAY)

    def tomorrow(self) -> CalendarPoint:
        return self.resolve(Origin.TOMORROW)

    def noon(self) -> CalendarPoint:
        return self.resolve(Origin.NOON)

    def midnight(self) -> CalendarPoint:
        return self.resolve(Origin.MIDNIGHT)

    def __repr__(self) -> str:
        specs = [] if self._accumulator is None else list(self._accumulator.specs)
        return f"Seed({self._value!r}, state={self._state.value}, specs={specs!r})"


def seed(value: numbers.Real, resolver: Optional[OriginResolver] = None) -> Seed:
    """Start a relative-offset expression: seed(2).days().ago()."""
    return Seed(value, resolver)
