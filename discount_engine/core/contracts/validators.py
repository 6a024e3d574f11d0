"""
JSON Schema Contract Validators

Pricing payloads are checked against the Draft 2020-12 schemas bundled in
schema/ next to this module:
- pricing_request.json
- pricing_result.json
"""

import json
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict

import jsonschema
from jsonschema import Draft202012Validator

SCHEMA_DIR = Path(__file__).parent / "schema"


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """Reads and meta-validates schema files, caching each one."""

    def __init__(self, schema_dir: Path | None = None):
        self._schema_dir = schema_dir or SCHEMA_DIR
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Raises:
            FileNotFoundError: no <schema_name>.json in the schema directory
            ValueError: the file is not a valid Draft 2020-12 schema
        """
        if schema_name not in self._schemas:
            self._schemas[schema_name] = self._read(schema_name)
        return self._schemas[schema_name]

    def _read(self, schema_name: str) -> Dict[str, Any]:
        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        schema = json.loads(schema_path.read_text(encoding="utf-8"))
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}")
        return schema


_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """Validator bound to one bundled schema."""

    def __init__(self, schema_name: str):
        self.schema_name = schema_name
        self.schema = _SCHEMA_LOADER.load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        self.validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]):
        return self.validator.iter_errors(data)


class PricingRequestValidator(ContractValidator):
    def __init__(self):
        super().__init__("pricing_request")


class PricingResultValidator(ContractValidator):
    def __init__(self):
        super().__init__("pricing_result")


@lru_cache(maxsize=None)
def _request_validator() -> PricingRequestValidator:
    return PricingRequestValidator()


@lru_cache(maxsize=None)
def _result_validator() -> PricingResultValidator:
    return PricingResultValidator()


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_pricing_request(data: Dict[str, Any]) -> None:
    """
    Raises:
        ValidationError: if data does not match pricing_request.json
    """
    _request_validator().validate(data)


def validate_pricing_result(data: Dict[str, Any]) -> None:
    """
    Raises:
        ValidationError: if data does not match pricing_result.json
    """
    _result_validator().validate(data)
