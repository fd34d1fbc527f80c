"""
Typed data structures for response assertions.

This module defines the assertion definition, the response description it
is checked against, and the per-assertion verdict.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

INT32_RANGE = (-(2**31), 2**31 - 1)
INT64_RANGE = (-(2**63), 2**63 - 1)


# ─────────────────────────────────────────────────────────────────────────────
# Enums
# ─────────────────────────────────────────────────────────────────────────────

class AssertionType(str, Enum):
    """Kind of check an assertion performs."""
    STATUS = "status"
    RESPONSE_TIME = "responseTime"
    BODY_CONTAINS = "bodyContains"
    BODY_JSON = "bodyJson"
    HEADER_EXISTS = "headerExists"
    HEADER_EQUALS = "headerEquals"
    UNKNOWN = "unknown"  # Any tag not listed above

    @classmethod
    def parse(cls, tag: str) -> AssertionType:
        """Map a raw tag to a member, falling back to UNKNOWN."""
        for member in cls:
            if member is not cls.UNKNOWN and member.value == tag:
                return member
        return cls.UNKNOWN


class AssertionOperator(str, Enum):
    """Comparison operators; which ones apply depends on the assertion type."""
    EQUALS = "equals"
    NOT_EQUALS = "notEquals"
    CONTAINS = "contains"
    NOT_CONTAINS = "notContains"
    LESS_THAN = "lessThan"
    GREATER_THAN = "greaterThan"
    EXISTS = "exists"
    NOT_EXISTS = "notExists"
    MATCHES = "matches"
    UNKNOWN = "unknown"

    @classmethod
    def parse(cls, tag: str) -> AssertionOperator:
        for member in cls:
            if member is not cls.UNKNOWN and member.value == tag:
                return member
        return cls.UNKNOWN


# ─────────────────────────────────────────────────────────────────────────────
# Assertion & Response
# ─────────────────────────────────────────────────────────────────────────────

@dataclass
class Assertion:
    """
    A declarative check against a response.

    Attributes:
        id: Opaque identifier, copied into the result
        type: Parsed assertion type (UNKNOWN for unrecognised tags)
        property: JSON path or header name; unused for status/responseTime
        operator: Parsed operator (UNKNOWN for unrecognised tags)
        expected: Expected value as text, interpreted per type
        enabled: Disabled assertions are skipped and always pass
        type_tag: The type exactly as supplied
        operator_tag: The operator exactly as supplied
    """
    id: str
    type: AssertionType
    property: str = ""
    operator: AssertionOperator = AssertionOperator.EQUALS
    expected: str = ""
    enabled: bool = True
    type_tag: str | None = None
    operator_tag: str | None = None

    def __post_init__(self) -> None:
        if self.type_tag is None:
            self.type_tag = self.type.value
        if self.operator_tag is None:
            self.operator_tag = self.operator.value

    @classmethod
    def from_tags(
        cls,
        id: str,
        type: str,
        property: str = "",
        operator: str = "equals",
        expected: str = "",
        enabled: bool = True,
    ) -> Assertion:
        """Build an assertion from raw text tags, keeping them for messages."""
        return cls(
            id=id,
            type=AssertionType.parse(type),
            property=property,
            operator=AssertionOperator.parse(operator),
            expected=expected,
            enabled=enabled,
            type_tag=type,
            operator_tag=operator,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "type": self.type_tag,
            "property": self.property,
            "operator": self.operator_tag,
            "expected": self.expected,
            "enabled": self.enabled,
        }


@dataclass
class ResponseDescription:
    """What came back from a request: status, headers, body and timing."""
    status_code: int
    headers: dict[str, str] = field(default_factory=dict)
    body: str = ""
    timing_ms: int = 0

    def header(self, name: str) -> str | None:
        """Case-insensitive header lookup; first match in insertion order."""
        wanted = name.lower()
        for key, value in self.headers.items():
            if key.lower() == wanted:
                return value
        return None

    def has_header(self, name: str) -> bool:
        return self.header(name) is not None


# ─────────────────────────────────────────────────────────────────────────────
# Results
# ─────────────────────────────────────────────────────────────────────────────

@dataclass
class AssertionResult:
    """
    Verdict for one assertion.

    Attributes:
        assertion_id: Id of the assertion this result belongs to
        passed: Whether the check held
        actual: Text rendering of the observed value
        message: Human-readable explanation
    """
    assertion_id: str
    passed: bool
    actual: str = ""
    message: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "assertionId": self.assertion_id,
            "passed": self.passed,
            "actual": self.actual,
            "message": self.message,
        }

    def __str__(self) -> str:
        if self.passed:
            return f"✅ PASS [{self.assertion_id}]: {self.message}"
        return f"❌ FAIL [{self.assertion_id}]: {self.message}\n   Actual: {_format_value(self.actual)}"

    @classmethod
    def passed_result(cls, assertion_id: str, message: str, actual: str = "") -> AssertionResult:
        """Create a passing result."""
        return cls(assertion_id=assertion_id, passed=True, actual=actual, message=message)

    @classmethod
    def failed_result(cls, assertion_id: str, message: str, actual: str = "") -> AssertionResult:
        """Create a failing result."""
        return cls(assertion_id=assertion_id, passed=False, actual=actual, message=message)


@dataclass
class AssertionSummary:
    passed: int
    failed: int
    total: int

    @property
    def all_passed(self) -> bool:
        return self.failed == 0


def _format_value(value: str, max_length: int = 100) -> str:
    """Format a value for display, truncating if too long."""
    formatted = repr(value)
    if len(formatted) > max_length:
        return formatted[: max_length - 3] + "..."
    return formatted
