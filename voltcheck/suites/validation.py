"""
Schema validation for suites and assertion payloads.

This module checks raw parsed YAML/JSON against the suite schema and the
wire shapes of assertion lists and response descriptions, reporting errors
with helpful messages.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any

from ..assertions.catalog import operators_for_type
from ..assertions.models import INT32_RANGE, INT64_RANGE, AssertionOperator, AssertionType
from ..extraction.chain import ExtractionType


# ─────────────────────────────────────────────────────────────────────────────
# Validation Result Types
# ─────────────────────────────────────────────────────────────────────────────

@dataclass
class ValidationError:
    """Represents a single validation error with context."""
    path: str  # e.g., "assertions[0].operator"
    message: str
    value: Any = None
    suggestion: str | None = None

    def __str__(self) -> str:
        parts = [f"❌ {self.path}: {self.message}"]
        if self.value is not None:
            parts.append(f"   Got: {repr(self.value)}")
        if self.suggestion:
            parts.append(f"   💡 {self.suggestion}")
        return "\n".join(parts)


@dataclass
class ValidationResult:
    """Result of schema validation. Warnings never make a result invalid."""
    errors: list[ValidationError] = field(default_factory=list)
    warnings: list[ValidationError] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return len(self.errors) == 0

    def add_error(
        self,
        path: str,
        message: str,
        value: Any = None,
        suggestion: str | None = None
    ) -> None:
        self.errors.append(ValidationError(path, message, value, suggestion))

    def add_warning(
        self,
        path: str,
        message: str,
        value: Any = None,
        suggestion: str | None = None
    ) -> None:
        self.warnings.append(ValidationError(path, message, value, suggestion))

    def __str__(self) -> str:
        if self.is_valid:
            lines = ["✅ Schema validation passed"]
        else:
            lines = [f"Schema validation failed with {len(self.errors)} error(s):\n"]
            lines.extend(str(e) for e in self.errors)
        if self.warnings:
            lines.append(f"\n{len(self.warnings)} warning(s):")
            lines.extend(str(w).replace("❌", "⚠️", 1) for w in self.warnings)
        return "\n".join(lines)


def _is_int(value: Any, bounds: tuple[int, int]) -> bool:
    return (
        isinstance(value, int)
        and not isinstance(value, bool)
        and bounds[0] <= value <= bounds[1]
    )


def _is_json_value(value: Any) -> bool:
    """Whether value renders as strict JSON (no dates, NaN or cycles)."""
    try:
        json.dumps(value, allow_nan=False)
    except (TypeError, ValueError, RecursionError):
        return False
    return True


def _is_scalar(value: Any) -> bool:
    if value is not None and not isinstance(value, (str, int, float, bool)):
        return False
    return _is_json_value(value)


# ─────────────────────────────────────────────────────────────────────────────
# Suite Validator
# ─────────────────────────────────────────────────────────────────────────────

class SchemaValidator:
    """Validates raw parsed YAML against the suite schema."""

    REQUIRED_TOP_LEVEL = {"version", "name", "assertions"}
    OPTIONAL_TOP_LEVEL = {"variables", "extract"}
    VALID_EXTRACTION_TYPES = {t.value for t in ExtractionType}
    # Extraction types that read no path
    PATHLESS_EXTRACTIONS = {ExtractionType.STATUS.value, ExtractionType.BODY.value}

    def __init__(self, data: dict[str, Any]):
        self.data = data
        self.result = ValidationResult()
        self.assertion_ids: set[str] = set()

    def validate(self) -> ValidationResult:
        """Run all validation checks and return result."""
        self._validate_top_level()
        if not self.result.is_valid:
            return self.result

        self._validate_version()
        self._validate_name()
        self._validate_variables()
        self._validate_assertions()
        self._validate_extract()

        return self.result

    def _validate_top_level(self) -> None:
        """Check required and unknown top-level keys."""
        keys = set(self.data.keys())
        missing = self.REQUIRED_TOP_LEVEL - keys
        unknown = keys - self.REQUIRED_TOP_LEVEL - self.OPTIONAL_TOP_LEVEL

        for key in sorted(missing):
            self.result.add_error(
                key,
                f"Required field '{key}' is missing",
                suggestion=f"Add '{key}:' to your suite file"
            )

        for key in sorted(unknown, key=str):
            self.result.add_error(
                str(key),
                f"Unknown top-level field '{key}'",
                suggestion=f"Valid fields are: {', '.join(sorted(self.REQUIRED_TOP_LEVEL | self.OPTIONAL_TOP_LEVEL))}"
            )

    def _validate_version(self) -> None:
        version = self.data.get("version")
        if not isinstance(version, int) or isinstance(version, bool):
            self.result.add_error(
                "version",
                "Must be an integer",
                value=version,
                suggestion="Use 'version: 1'"
            )
        elif version < 1:
            self.result.add_error(
                "version",
                "Must be >= 1",
                value=version
            )

    def _validate_name(self) -> None:
        name = self.data.get("name")
        if not isinstance(name, str):
            self.result.add_error(
                "name",
                "Must be a string",
                value=name
            )
        elif not name.strip():
            self.result.add_error(
                "name",
                "Cannot be empty",
                suggestion="Provide a descriptive name for your suite"
            )

    def _validate_variables(self) -> None:
        variables = self.data.get("variables")
        if variables is None:
            return
        if not isinstance(variables, dict):
            self.result.add_error(
                "variables",
                "Must be an object (key-value pairs)",
                value=variables
            )
            return
        for key, value in variables.items():
            if not isinstance(key, str):
                self.result.add_error(
                    "variables",
                    "Variable names must be strings",
                    value=key
                )
            elif not _is_scalar(value):
                self.result.add_error(
                    f"variables.{key}",
                    "Variable values must be scalars",
                    value=value,
                    suggestion="Quote structured values as JSON text"
                )

    def _validate_assertions(self) -> None:
        assertions = self.data.get("assertions")
        if not isinstance(assertions, list):
            self.result.add_error(
                "assertions",
                "Must be a list",
                value=assertions
            )
            return

        for i, assertion in enumerate(assertions):
            self._validate_assertion(i, assertion)

    def _validate_assertion(self, index: int, assertion: Any) -> None:
        path = f"assertions[{index}]"

        if not isinstance(assertion, dict):
            self.result.add_error(
                path,
                "Assertion must be an object",
                value=assertion
            )
            return

        assertion_id = assertion.get("id")
        if not assertion_id:
            self.result.add_error(
                f"{path}.id",
                "Assertion must have an 'id' field",
                suggestion="Add a unique identifier like 'id: status_ok'"
            )
        elif not isinstance(assertion_id, str):
            self.result.add_error(
                f"{path}.id",
                "Assertion id must be a string",
                value=assertion_id
            )
        elif assertion_id in self.assertion_ids:
            self.result.add_error(
                f"{path}.id",
                "Duplicate assertion id",
                value=assertion_id,
                suggestion="Each assertion must have a unique id"
            )
        else:
            self.assertion_ids.add(assertion_id)

        for key in ("type", "operator"):
            tag = assertion.get(key)
            if not isinstance(tag, str):
                self.result.add_error(
                    f"{path}.{key}",
                    f"Assertion requires a string '{key}' field",
                    value=tag
                )

        prop = assertion.get("property")
        if prop is not None and not isinstance(prop, str):
            self.result.add_error(
                f"{path}.property",
                "Property must be a string (JSON path or header name)",
                value=prop
            )

        if "expected" in assertion and not _is_json_value(assertion["expected"]):
            self.result.add_error(
                f"{path}.expected",
                "Expected value must be text or plain JSON data",
                value=assertion["expected"],
                suggestion="Quote dates, timestamps and other special values"
            )

        enabled = assertion.get("enabled")
        if enabled is not None and not isinstance(enabled, bool):
            self.result.add_error(
                f"{path}.enabled",
                "Must be true or false",
                value=enabled
            )

        self._check_tags(path, assertion)

    def _check_tags(self, path: str, assertion: dict) -> None:
        """Unrecognised tags still evaluate (as failures), so only warn."""
        type_tag = assertion.get("type")
        operator_tag = assertion.get("operator")
        if not isinstance(type_tag, str) or not isinstance(operator_tag, str):
            return

        assertion_type = AssertionType.parse(type_tag)
        if assertion_type is AssertionType.UNKNOWN:
            self.result.add_warning(
                f"{path}.type",
                "Unknown assertion type; it will always fail",
                value=type_tag,
                suggestion=f"Valid types: {', '.join(t.value for t in AssertionType if t is not AssertionType.UNKNOWN)}"
            )
            return

        allowed = operators_for_type(assertion_type)
        if AssertionOperator.parse(operator_tag) not in allowed:
            self.result.add_warning(
                f"{path}.operator",
                f"Operator not supported by '{type_tag}'; it will always fail",
                value=operator_tag,
                suggestion=f"Valid operators: {', '.join(op.value for op in allowed)}"
            )

    def _validate_extract(self) -> None:
        rules = self.data.get("extract")
        if rules is None:
            return
        if not isinstance(rules, list):
            self.result.add_error(
                "extract",
                "Must be a list",
                value=rules
            )
            return

        for i, rule in enumerate(rules):
            path = f"extract[{i}]"
            if not isinstance(rule, dict):
                self.result.add_error(path, "Extraction rule must be an object", value=rule)
                continue

            rule_type = rule.get("type")
            known_type = isinstance(rule_type, str) and rule_type in self.VALID_EXTRACTION_TYPES
            if not known_type:
                self.result.add_error(
                    f"{path}.type",
                    "Invalid extraction type",
                    value=rule_type,
                    suggestion=f"Valid types: {', '.join(sorted(self.VALID_EXTRACTION_TYPES))}"
                )

            rule_path = rule.get("path")
            if known_type and rule_type not in self.PATHLESS_EXTRACTIONS and not rule_path:
                self.result.add_error(
                    f"{path}.path",
                    f"Extraction type '{rule_type}' requires a 'path' field"
                )
            elif rule_path is not None and not isinstance(rule_path, str):
                self.result.add_error(f"{path}.path", "Path must be a string", value=rule_path)

            variable = rule.get("variable")
            if not variable or not isinstance(variable, str):
                self.result.add_error(
                    f"{path}.variable",
                    "Extraction rule requires a 'variable' name",
                    value=variable
                )


# ─────────────────────────────────────────────────────────────────────────────
# Payload Validator
# ─────────────────────────────────────────────────────────────────────────────

class PayloadValidator:
    """
    Validates assertion lists and response descriptions at the text boundary.

    Shapes are strict: every assertion field is present with its exact JSON
    type. Unknown type/operator tags are accepted here and handled by the
    evaluator. With strict=False, response files may carry a structured
    body and scalar header values, which the parser turns into text.
    """

    ASSERTION_TEXT_FIELDS = ("id", "type", "property", "operator", "expected")

    def __init__(self, strict: bool = True):
        self.strict = strict

    def validate_assertions(self, data: Any) -> ValidationResult:
        result = ValidationResult()
        if not isinstance(data, list):
            result.add_error("assertions", "Must be a list", value=type(data).__name__)
            return result

        for i, item in enumerate(data):
            path = f"assertions[{i}]"
            if not isinstance(item, dict):
                result.add_error(path, "Assertion must be an object", value=item)
                continue
            for key in self.ASSERTION_TEXT_FIELDS:
                if not isinstance(item.get(key), str):
                    result.add_error(f"{path}.{key}", "Must be a string", value=item.get(key))
            if not isinstance(item.get("enabled"), bool):
                result.add_error(f"{path}.enabled", "Must be a boolean", value=item.get("enabled"))
        return result

    def validate_response(self, data: Any) -> ValidationResult:
        result = ValidationResult()
        if not isinstance(data, dict):
            result.add_error("response", "Must be an object", value=type(data).__name__)
            return result

        if not _is_int(data.get("statusCode"), INT32_RANGE):
            result.add_error("statusCode", "Must be an integer", value=data.get("statusCode"))
        if not _is_int(data.get("timingMs"), INT64_RANGE):
            result.add_error("timingMs", "Must be an integer (milliseconds)", value=data.get("timingMs"))

        headers = data.get("headers")
        if not isinstance(headers, dict):
            result.add_error("headers", "Must be an object", value=headers)
        else:
            for name, value in headers.items():
                valid = isinstance(value, str) if self.strict else _is_scalar(value)
                if not isinstance(name, str) or not valid:
                    result.add_error(f"headers.{name}", "Header values must be strings", value=value)

        body = data.get("body")
        if isinstance(body, str):
            pass
        elif not self.strict and "body" in data:
            if not _is_json_value(body):
                result.add_error(
                    "body",
                    "Body must be text or plain JSON data",
                    value=body,
                    suggestion="Quote dates, timestamps and other special values"
                )
        else:
            result.add_error(
                "body",
                "Must be a string",
                value=body,
                suggestion=None if self.strict else "Use a string, or a mapping/list to be sent as JSON"
            )
        return result
