"""
Assertion Engine for HTTP Response Validation

This package evaluates declarative assertions against a response
description and returns one pass/fail verdict per assertion.

Supported assertion types:
    - status: Compare the status code (equals, notEquals, lessThan, greaterThan)
    - responseTime: Compare elapsed milliseconds (lessThan, greaterThan)
    - bodyContains: Substring or regex test on the raw body
    - bodyJson: Query the JSON body by dotted path (exists, equals, contains, ...)
    - headerExists: Case-insensitive header presence
    - headerEquals: Case-insensitive header lookup, then compare its value

Usage:
    from voltcheck.assertions import Assertion, ResponseDescription, run_assertions

    response = ResponseDescription(status_code=200, headers={}, body='{"ok": true}', timing_ms=42)
    results = run_assertions(
        [Assertion.from_tags("a1", "status", operator="equals", expected="200")],
        response,
    )

    for result in results:
        print(result)
"""

# Models
from .models import (
    Assertion,
    AssertionOperator,
    AssertionResult,
    AssertionSummary,
    AssertionType,
    ResponseDescription,
)

# Engine
from .engine import (
    AssertionEvaluator,
    parse_expected_int,
    run_assertions,
    summarize,
)

# Catalogue
from .catalog import (
    OPERATORS_BY_TYPE,
    create_empty_assertion,
    is_supported,
    operator_display_name,
    operators_for_type,
    type_display_name,
)

__all__ = [
    # Models
    "Assertion",
    "AssertionOperator",
    "AssertionResult",
    "AssertionSummary",
    "AssertionType",
    "ResponseDescription",
    # Engine
    "AssertionEvaluator",
    "parse_expected_int",
    "run_assertions",
    "summarize",
    # Catalogue
    "OPERATORS_BY_TYPE",
    "create_empty_assertion",
    "is_supported",
    "operator_display_name",
    "operators_for_type",
    "type_display_name",
]
