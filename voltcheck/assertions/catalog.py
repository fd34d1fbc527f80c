"""
Display names and operator tables for assertion editors.
"""

from __future__ import annotations

import uuid
from enum import Enum

from .models import Assertion, AssertionOperator, AssertionType

Op = AssertionOperator

TYPE_DISPLAY_NAMES: dict[AssertionType, str] = {
    AssertionType.STATUS: "Status Code",
    AssertionType.RESPONSE_TIME: "Response Time",
    AssertionType.BODY_CONTAINS: "Body Contains",
    AssertionType.BODY_JSON: "JSON Value",
    AssertionType.HEADER_EXISTS: "Header Exists",
    AssertionType.HEADER_EQUALS: "Header Value",
}

OPERATOR_DISPLAY_NAMES: dict[AssertionOperator, str] = {
    Op.EQUALS: "equals",
    Op.NOT_EQUALS: "not equals",
    Op.CONTAINS: "contains",
    Op.NOT_CONTAINS: "not contains",
    Op.LESS_THAN: "less than",
    Op.GREATER_THAN: "greater than",
    Op.EXISTS: "exists",
    Op.NOT_EXISTS: "not exists",
    Op.MATCHES: "matches regex",
}

# Operators each checker understands, in editor order
OPERATORS_BY_TYPE: dict[AssertionType, list[AssertionOperator]] = {
    AssertionType.STATUS: [Op.EQUALS, Op.NOT_EQUALS, Op.LESS_THAN, Op.GREATER_THAN],
    AssertionType.RESPONSE_TIME: [Op.LESS_THAN, Op.GREATER_THAN],
    AssertionType.BODY_CONTAINS: [Op.CONTAINS, Op.NOT_CONTAINS, Op.MATCHES],
    AssertionType.BODY_JSON: [Op.EQUALS, Op.NOT_EQUALS, Op.CONTAINS, Op.EXISTS, Op.NOT_EXISTS],
    AssertionType.HEADER_EXISTS: [Op.EXISTS, Op.NOT_EXISTS],
    AssertionType.HEADER_EQUALS: [Op.EQUALS, Op.NOT_EQUALS, Op.CONTAINS],
}


def _tag(value: Enum | str) -> str:
    return value.value if isinstance(value, Enum) else value


def type_display_name(assertion_type: AssertionType | str) -> str:
    """Label for an assertion type; unknown tags are shown as given."""
    tag = _tag(assertion_type)
    return TYPE_DISPLAY_NAMES.get(AssertionType.parse(tag), tag)


def operator_display_name(operator: AssertionOperator | str) -> str:
    tag = _tag(operator)
    return OPERATOR_DISPLAY_NAMES.get(AssertionOperator.parse(tag), tag)


def operators_for_type(assertion_type: AssertionType | str) -> list[AssertionOperator]:
    """Operators valid for a type; unknown types only offer equals."""
    parsed = AssertionType.parse(_tag(assertion_type))
    return list(OPERATORS_BY_TYPE.get(parsed, [Op.EQUALS]))


def is_supported(assertion: Assertion) -> bool:
    """Whether the assertion's operator is one its type understands."""
    return assertion.operator in OPERATORS_BY_TYPE.get(assertion.type, [])


def generate_id() -> str:
    return uuid.uuid4().hex[:9]


def create_empty_assertion() -> Assertion:
    """A fresh, enabled 'status equals 200' assertion."""
    return Assertion(
        id=generate_id(),
        type=AssertionType.STATUS,
        property="",
        operator=Op.EQUALS,
        expected="200",
        enabled=True,
    )
