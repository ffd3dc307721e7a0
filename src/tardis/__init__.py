"""
Tardis — expressive date arithmetic

Absolute placement and movement of calendar points:

    point = CalendarPoint.create({"hours": 9, "minutes": 0})
    point.move_fields({"days": -1})

Relative offsets resolved against a named origin:

    seed(5).minutes().and_(30).seconds().from_().now()
    seed(1).year().ago()
    seed(2).days().before().yesterday()
"""

from tardis.builder import (
    BuilderState,
    OffsetAccumulator,
    OffsetSpec,
    OriginResolver,
    Seed,
    seed,
)
from tardis.config import TardisSettings, configure_logging, get_settings
from tardis.core.clock import Clock, FrozenClock, SystemClock
from tardis.core.contracts import validate_field_record
from tardis.core.domain import CalendarPoint, Direction, FieldRecord, Origin, TimeUnit
from tardis.errors import (
    ContractViolation,
    DirectionWithoutUnit,
    MissingBuilderState,
    TardisError,
    UnresolvableDefinition,
)

__version__ = "0.1.0"

__all__ = [
    # Calendar points
    "CalendarPoint",
    "FieldRecord",
    "TimeUnit",
    "Direction",
    "Origin",
    # Builder
    "Seed",
    "seed",
    "BuilderState",
    "OffsetSpec",
    "OffsetAccumulator",
    "OriginResolver",
    # Clocks
    "Clock",
    "SystemClock",
    "FrozenClock",
    # Settings
    "TardisSettings",
    "get_settings",
    "configure_logging",
    # Contracts
    "validate_field_record",
    # Errors
    "TardisError",
    "MissingBuilderState",
    "DirectionWithoutUnit",
    "UnresolvableDefinition",
    "ContractViolation",
]
