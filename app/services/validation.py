"""
JSON Schema validation service.

Demonstrates:
- Schema-driven data validation behind a two-string contract
- Collecting all errors rather than failing on the first one
- Turning every failure into result data instead of letting it escape
"""

from __future__ import annotations

import json
from typing import Any, Callable, Iterable

from jsonschema import Draft7Validator, Draft201909Validator, Draft202012Validator
from jsonschema import validators
from jsonschema.exceptions import SchemaError, ValidationError
from jsonschema.protocols import Validator
from referencing.exceptions import Unresolvable

from app.config import settings
from app.exceptions import (
    DataParseError,
    SchemaCompileError,
    SchemaParseError,
    ValidationFailure,
)
from app.schemas.api import ValidationOutcome

DRAFTS: dict[str, type] = {
    "draft7": Draft7Validator,
    "draft2019-09": Draft201909Validator,
    "draft2020-12": Draft202012Validator,
}


def json_pointer(path: Iterable[Any]) -> str:
    """RFC 6901 pointer for a path into the data; the root is ``/``."""
    parts = [str(part).replace("~", "~0").replace("/", "~1") for part in path]
    return "/" + "/".join(parts)


def format_violation(error: ValidationError) -> str:
    return f"{json_pointer(error.absolute_path)}: {error.message}"


class ValidationService:
    """
    Parse two JSON strings, compile the first as a schema, validate the second.

    ``parser`` must raise ``ValueError`` (``json.JSONDecodeError`` is one) or
    ``RecursionError`` on malformed text; its message is embedded verbatim in
    the error line.
    """

    def __init__(
        self,
        parser: Callable[[str], Any] = json.loads,
        default_draft: str = "draft7",
        check_formats: bool = False,
    ):
        if default_draft not in DRAFTS:
            raise ValueError(
                f"Unknown draft '{default_draft}', expected one of {sorted(DRAFTS)}"
            )
        self._parse = parser
        self.default_draft = default_draft
        self._default_cls = DRAFTS[default_draft]
        self.check_formats = check_formats

    def parse_schema(self, text: str) -> Any:
        try:
            return self._parse(text)
        except (ValueError, RecursionError) as exc:
            raise SchemaParseError(str(exc)) from exc

    def parse_data(self, text: str) -> Any:
        try:
            return self._parse(text)
        except (ValueError, RecursionError) as exc:
            raise DataParseError(str(exc)) from exc

    def compile(self, schema: Any) -> Validator:
        """Build a validator for ``schema``, honouring its ``$schema`` keyword."""
        if isinstance(schema, dict) and isinstance(schema.get("$schema"), str):
            cls = validators.validator_for(schema, default=self._default_cls)
        else:
            cls = self._default_cls
        try:
            cls.check_schema(schema)
        except SchemaError as exc:
            raise SchemaCompileError(exc.message) from exc
        except RecursionError as exc:
            raise SchemaCompileError("schema is nested too deeply") from exc
        format_checker = cls.FORMAT_CHECKER if self.check_formats else None
        return cls(schema, format_checker=format_checker)

    def run(self, validator: Validator, data: Any) -> ValidationOutcome:
        """Evaluate ``data``; errors keep the engine's emission order."""
        try:
            errors = [format_violation(error) for error in validator.iter_errors(data)]
        except Unresolvable as exc:
            raise SchemaCompileError(str(exc)) from exc
        except RecursionError as exc:
            raise SchemaCompileError("recursive reference never terminates") from exc
        if errors:
            return ValidationOutcome.failed(errors)
        return ValidationOutcome.passed()

    def validate(self, schema_text: str, data_text: str) -> ValidationOutcome:
        try:
            schema = self.parse_schema(schema_text)
            data = self.parse_data(data_text)
            return self.run(self.compile(schema), data)
        except ValidationFailure as exc:
            return ValidationOutcome.failed([str(exc)])


_service: ValidationService | None = None


def get_validation_service() -> ValidationService:
    """FastAPI dependency returning the service configured from settings."""
    global _service
    if _service is None:
        _service = ValidationService(
            default_draft=settings.DEFAULT_DRAFT,
            check_formats=settings.CHECK_FORMATS,
        )
    return _service
