"""
Contract Validation Module

Validation of serialized tardis documents against bundled JSON Schemas.
"""

from .validators import (
    CalendarPointValidator,
    ContractValidator,
    FieldRecordValidator,
    SchemaLoader,
    validate_calendar_point,
    validate_field_record,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "FieldRecordValidator",
    "CalendarPointValidator",
    # Functions
    "validate_field_record",
    "validate_calendar_point",
]
