"""
Tests for JSON Schema Contract Validators

Checks:
- The bundled schemas are valid JSON Schemas
- Valid documents pass
- Type, range and extra-key violations are detected
- Documents written by CalendarPoint.to_json() satisfy their contract
"""

import json

import pytest
from jsonschema import ValidationError

from tardis.core.contracts import (
    CalendarPointValidator,
    FieldRecordValidator,
    SchemaLoader,
    validate_calendar_point,
    validate_field_record,
)
from tardis.core.domain.calendar_point import CalendarPoint


# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def valid_point_document():
    """Serialized 2024-03-15T12:00:00.000+02:00."""
    return {
        "fields": {
            "years": 2024,
            "months": 3,
            "days": 15,
            "hours": 12,
            "minutes": 0,
            "seconds": 0,
            "milliseconds": 0,
        },
        "utc_offset_minutes": 120,
    }


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class TestSchemaLoader:
    """Tests for SchemaLoader"""

    @pytest.mark.parametrize("name", ["field_record", "calendar_point"])
    def test_bundled_schemas_load(self, name: str) -> None:
        schema = SchemaLoader().load_schema(name)
        assert schema["title"] == name

    def test_schema_cached(self) -> None:
        loader = SchemaLoader()
        assert loader.load_schema("field_record") is loader.load_schema("field_record")

    def test_missing_schema(self) -> None:
        with pytest.raises(FileNotFoundError):
            SchemaLoader().load_schema("market_state")


# =============================================================================
# FIELD RECORD CONTRACT
# =============================================================================


class TestFieldRecordContract:
    """Tests for field_record.json"""

    def test_partial_record_valid(self) -> None:
        validate_field_record({"days": 32, "hours": -1})

    def test_empty_record_valid(self) -> None:
        assert FieldRecordValidator().is_valid({})

    def test_string_value_invalid(self) -> None:
        with pytest.raises(ValidationError):
            validate_field_record({"days": "3"})

    def test_extra_key_invalid(self) -> None:
        with pytest.raises(ValidationError):
            validate_field_record({"weeks": 1})

    def test_iter_errors_reports_every_violation(self) -> None:
        errors = list(FieldRecordValidator().iter_errors({"days": "3", "hours": 1.5}))
        assert len(errors) == 2


# =============================================================================
# CALENDAR POINT CONTRACT
# =============================================================================


class TestCalendarPointContract:
    """Tests for calendar_point.json"""

    def test_valid_document(self, valid_point_document) -> None:
        validate_calendar_point(valid_point_document)

    def test_missing_field_invalid(self, valid_point_document) -> None:
        del valid_point_document["fields"]["milliseconds"]
        assert not CalendarPointValidator().is_valid(valid_point_document)

    def test_offset_out_of_range(self, valid_point_document) -> None:
        valid_point_document["utc_offset_minutes"] = 1440
        with pytest.raises(ValidationError):
            validate_calendar_point(valid_point_document)

    def test_to_json_satisfies_contract(self) -> None:
        point = CalendarPoint.from_fields({"years": 1999, "months": 12, "days": 31}, utc_offset_minutes=-300)
        validate_calendar_point(json.loads(point.to_json()))
