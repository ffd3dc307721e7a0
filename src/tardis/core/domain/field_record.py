"""
FieldRecord — Calendar field view of a point

Immutable Pydantic model with the seven optional calendar fields. A missing
field means "not specified": placement keeps the current value for it and
movement adds nothing to it.
"""

from typing import Any, Dict, Mapping, Optional

from pydantic import BaseModel, Field

from tardis.core.domain.units import FIELD_KEYS, lookup_field
from tardis.core.math.numerical_safeguards import field_value_or_none


class FieldRecord(BaseModel):
    """
    Seven-key calendar field record.

    Months are 1-based. Values are not range-checked: out-of-range values
    overflow onto the neighbouring unit when placed on a point.
    """

    years: Optional[int] = Field(None, description="Gregorian year")
    months: Optional[int] = Field(None, description="Month of year (1 = January)")
    days: Optional[int] = Field(None, description="Day of month")
    hours: Optional[int] = Field(None, description="Hour of day")
    minutes: Optional[int] = Field(None, description="Minute of hour")
    seconds: Optional[int] = Field(None, description="Second of minute")
    milliseconds: Optional[int] = Field(None, description="Millisecond of second")

    model_config = {"frozen": True}

    @classmethod
    def from_mapping(cls, record: Mapping[str, Any]) -> "FieldRecord":
        """
        Lenient constructor: keeps only keys holding a finite number.

        Singular key spellings ("day") are accepted; fractional values are
        truncated toward zero.
        """
        values = {key: field_value_or_none(lookup_field(record, key)) for key in FIELD_KEYS}
        return cls(**{key: value for key, value in values.items() if value is not None})

    def to_dict(self) -> Dict[str, int]:
        """Specified fields only, in unit order."""
        return self.model_dump(exclude_none=True)

    def is_complete(self) -> bool:
        return all(getattr(self, key) is not None for key in FIELD_KEYS)

    def as_tuple(self) -> tuple:
        return tuple(getattr(self, key) for key in FIELD_KEYS)
