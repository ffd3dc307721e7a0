"""Relative-offset builder: seeds, offset accumulation and origin resolution.

- Seed: fluent wrapper around a number (unit → direction → and_ → origin)
- OffsetSpec / OffsetAccumulator: pending offsets with upsert rules
- OriginResolver: single combined move from "now", then the named origin
"""

from .offsets import OffsetAccumulator, OffsetSpec
from .resolver import OriginResolver, default_resolver
from .seed import BuilderState, Seed, seed

__all__ = [
    "BuilderState",
    "OffsetAccumulator",
    "OffsetSpec",
    "OriginResolver",
    "Seed",
    "default_resolver",
    "seed",
]
