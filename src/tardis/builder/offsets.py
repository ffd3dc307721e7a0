"""
Offsets — pending (unit, magnitude, direction) triples of a builder

OffsetSpec is an immutable record; OffsetAccumulator owns at most one spec
per unit and applies the upsert rules of the builder grammar:

- last magnitude wins: recording a unit again replaces its magnitude
- first direction wins: a direction is only given to specs that have none
- chaining replaces the magnitude read by the next unit, nothing else
"""

import numbers
from typing import Dict, Iterator, Optional, Tuple

from pydantic import BaseModel, Field

from tardis.core.domain.units import Direction, TimeUnit


# =============================================================================
# OFFSET SPEC
# =============================================================================


class OffsetSpec(BaseModel):
    """
    Pending offset of a single unit.

    direction=None means the offset has not been directed yet; it resolves
    as AFTER.
    """

    unit: TimeUnit = Field(..., description="Calendar unit moved by this offset")
    magnitude: int | float = Field(..., description="Unsigned amount of units")
    direction: Optional[Direction] = Field(None, description="before/after; None until assigned")

    model_config = {"frozen": True}

    @property
    def is_directed(self) -> bool:
        return self.direction is not None

    @property
    def signed_magnitude(self) -> int | float:
        """Magnitude as a field delta: negative for BEFORE."""
        if self.direction is Direction.BEFORE:
            return -self.magnitude
        return self.magnitude

    def with_magnitude(self, magnitude: numbers.Real) -> "OffsetSpec":
        return self.model_copy(update={"magnitude": magnitude})

    def with_direction(self, direction: Direction) -> "OffsetSpec":
        """Copy directed as requested, unless a direction is already set."""
        if self.is_directed:
            return self
        return self.model_copy(update={"direction": direction})


# =============================================================================
# OFFSET ACCUMULATOR
# =============================================================================


class OffsetAccumulator:
    """
    Mutable unit → OffsetSpec mapping owned by one seed.

    Attributes:
        next_magnitude: Magnitude recorded by the next unit; starts as the
            seed's own value and is replaced by chain()
    """

    def __init__(self, next_magnitude: numbers.Real):
        self.next_magnitude = next_magnitude
        self._specs: Dict[TimeUnit, OffsetSpec] = {}

    def record(self, unit: TimeUnit) -> OffsetSpec:
        """
        Upsert the spec of a unit with the current next_magnitude.

        A new unit starts undirected; an existing one keeps its direction.
        """
        existing = self._specs.get(unit)
        if existing is None:
            spec = OffsetSpec(unit=unit, magnitude=self.next_magnitude)
        else:
            spec = existing.with_magnitude(self.next_magnitude)
        self._specs[unit] = spec
        return spec

    def assign_direction(self, direction: Direction) -> Tuple[TimeUnit, ...]:
        """
        Direct every spec that has no direction yet.

        Returns:
            Units that received the direction
        """
        directed = []
        for unit, spec in self._specs.items():
            if not spec.is_directed:
                self._specs[unit] = spec.with_direction(direction)
                directed.append(unit)
        return tuple(directed)

    def chain(self, magnitude: numbers.Real) -> None:
        """Make the next recorded unit use a new magnitude."""
        self.next_magnitude = magnitude

    def get(self, unit: TimeUnit) -> Optional[OffsetSpec]:
        return self._specs.get(unit)

    @property
    def specs(self) -> Tuple[OffsetSpec, ...]:
        """Recorded specs in first-recorded order."""
        return tuple(self._specs.values())

    def to_move_record(self) -> Dict[str, int | float]:
        """Signed magnitudes keyed by field key, for a single move_fields call."""
        return {spec.unit.field_key: spec.signed_magnitude for spec in self._specs.values()}

    def __contains__(self, unit: object) -> bool:
        return unit in self._specs

    def __iter__(self) -> Iterator[OffsetSpec]:
        return iter(self.specs)

    def __len__(self) -> int:
        return len(self._specs)

    def __repr__(self) -> str:
        return f"OffsetAccumulator(next_magnitude={self.next_magnitude!r}, specs={list(self.specs)!r})"
