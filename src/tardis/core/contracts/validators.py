"""
JSON Schema Contract Validators

Validation of serialized tardis documents against their JSON Schema
contracts, using the jsonschema library.

Schemas (bundled in schema/):
- field_record.json: plain field record exchanged with other systems
- calendar_point.json: document written by CalendarPoint.to_json()

The lenient field handling of CalendarPoint.set_fields / move_fields never
goes through these validators.
"""

import json
from pathlib import Path
from typing import Any, Dict, Iterator

import jsonschema
from jsonschema import Draft202012Validator, ValidationError


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Loader of the JSON Schema files bundled with the package.
    """

    def __init__(self):
        self._schema_dir = Path(__file__).parent / "schema"
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        # Cache of loaded schemas
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Load a JSON Schema file.

        Args:
            schema_name: Schema name without extension (e.g. 'field_record')

        Returns:
            Loaded schema as dict

        Raises:
            FileNotFoundError: If the schema file does not exist
            ValueError: If the file is not a valid JSON Schema
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        # Meta-validation of the schema itself
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}")

        self._schemas[schema_name] = schema
        return schema


_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Validation of data against one JSON Schema.
    """

    def __init__(self, schema_name: str):
        self.schema_name = schema_name
        self.schema = _SCHEMA_LOADER.load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Raises:
            ValidationError: If the data does not match the schema
        """
        self.validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]) -> Iterator[ValidationError]:
        return self.validator.iter_errors(data)


class FieldRecordValidator(ContractValidator):
    def __init__(self):
        super().__init__("field_record")


class CalendarPointValidator(ContractValidator):
    def __init__(self):
        super().__init__("calendar_point")


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_field_record(data: Dict[str, Any]) -> None:
    """
    Validate a plain field record.

    Raises:
        ValidationError: If the record does not match field_record.json
    """
    FieldRecordValidator().validate(data)


def validate_calendar_point(data: Dict[str, Any]) -> None:
    """
    Validate a serialized calendar point.

    Raises:
        ValidationError: If the document does not match calendar_point.json
    """
    CalendarPointValidator().validate(data)
