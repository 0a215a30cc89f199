"""Built-in checks for JSON documents: well-formedness and schema conformance.

Schema validation uses :mod:`jsonschema`; the validator class is picked
from the schema's ``$schema`` keyword, defaulting to the latest draft.
"""

from __future__ import annotations

import json
import logging
from typing import Any

from jsonschema.exceptions import SchemaError, ValidationError
from jsonschema.validators import validator_for
from pydantic import Field

from report_card.checks.base import BaseCheck, missing_file
from report_card.checks.models import Result
from report_card.errors import CheckExecutionError

logger = logging.getLogger(__name__)

NOT_VALID_JSON = "file is not valid JSON"
SCHEMA_ERROR_SEPARATOR = " | "


class FileIsValidJSONCheck(BaseCheck):
    """Pass when ``path`` parses as a JSON object.

    Arrays and scalars are valid JSON but are reported as failures: the
    check asserts the file is a JSON *document* with top-level keys.
    """

    type_tag = "FileIsValidJSON"
    aliases = ("CheckFileIsValidJSON",)

    path: str

    def execute(self) -> Result:
        data = self.read_target(self.path)
        if data is None:
            return missing_file()
        try:
            document = json.loads(data)
        except (ValueError, RecursionError):
            return Result.failure(NOT_VALID_JSON)
        if not isinstance(document, dict):
            return Result.failure(NOT_VALID_JSON)
        return Result.success()


def _format_violation(error: ValidationError) -> str:
    location = ".".join(str(part) for part in error.absolute_path) or "(root)"
    return f"{location}: {error.message}"


class FileMatchesJSONSchemaCheck(BaseCheck):
    """Pass when the document at ``path`` validates against ``schema-path``.

    A missing document or schema is a failure.  A document or schema that
    is not JSON, or a schema that is itself invalid, aborts the run.
    """

    type_tag = "FileMatchesJSONSchema"
    aliases = ("CheckFileHasJSONSchema",)

    path: str
    schema_path: str = Field(..., alias="schema-path")

    def _parse(self, path: str, data: bytes) -> Any:
        try:
            return json.loads(data)
        except (ValueError, RecursionError) as exc:
            raise CheckExecutionError(f"{self.resolve(path)} is not valid JSON: {exc}") from exc

    def execute(self) -> Result:
        # Both files must exist before either is parsed.
        document_data = self.read_target(self.path)
        schema_data = self.read_target(self.schema_path)
        if document_data is None or schema_data is None:
            return missing_file()

        document = self._parse(self.path, document_data)
        schema = self._parse(self.schema_path, schema_data)
        if not isinstance(schema, (dict, bool)):
            raise CheckExecutionError(f"{self.resolve(self.schema_path)} is not a valid schema: expected an object")

        validator_cls = validator_for(schema)
        try:
            validator_cls.check_schema(schema)
        except SchemaError as exc:
            raise CheckExecutionError(f"{self.resolve(self.schema_path)} is not a valid schema: {exc.message}") from exc

        violations = sorted(_format_violation(e) for e in validator_cls(schema).iter_errors(document))
        if not violations:
            return Result.success()

        logger.debug("%d schema violation(s) in %s", len(violations), self.path)
        return Result.failure(SCHEMA_ERROR_SEPARATOR.join(violations))
