"""
Assertion engine for evaluating checks on HTTP responses.

This module dispatches each assertion to the checker for its type and
turns every outcome, including malformed definitions, into a uniform
AssertionResult.
"""

from __future__ import annotations

import logging
import re
from typing import Any, Callable, Iterable

from ..jsonpath import (
    MISSING,
    InvalidJSONError,
    canonical_json,
    json_equal,
    parse_document,
    render,
    resolve,
)
from .models import (
    INT32_RANGE,
    INT64_RANGE,
    Assertion,
    AssertionOperator,
    AssertionResult,
    AssertionSummary,
    AssertionType,
    ResponseDescription,
)

logger = logging.getLogger(__name__)

Op = AssertionOperator

SKIPPED_MESSAGE = "Skipped (disabled)"
INVALID_JSON_ACTUAL = "Invalid JSON"
INVALID_JSON_MESSAGE = "Response body is not valid JSON"
BODY_PREVIEW_CHARS = 100

_INTEGER = re.compile(r"[+-]?[0-9]+")
# int64 values have at most 19 digits
MAX_EXPECTED_DIGITS = 19

# Body parse outcomes shared by the bodyJson checks of one evaluate() call
_NOT_JSON = object()
_UNPARSED = object()

Checker = Callable[[Assertion, ResponseDescription, Any], AssertionResult]


def parse_expected_int(text: str, bounds: tuple[int, int] = INT64_RANGE) -> int:
    """
    Parse an integer literal (optional sign, ASCII digits).

    Anything else, or a value outside bounds, is 0.
    """
    if not _INTEGER.fullmatch(text):
        return 0
    digits = text.lstrip("+-").lstrip("0")
    if len(digits) > MAX_EXPECTED_DIGITS:
        return 0
    value = int(digits or "0")
    if text.startswith("-"):
        value = -value
    if not bounds[0] <= value <= bounds[1]:
        return 0
    return value


def _unknown_operator(assertion: Assertion) -> tuple[bool, str]:
    return False, f"Unknown operator: {assertion.operator_tag}"


class AssertionEvaluator:
    """
    Evaluates assertion lists against a response description.

    The response body is parsed as JSON once per evaluate() call and the
    outcome is shared by all bodyJson assertions in that call. A body that is
    not JSON only fails the bodyJson assertions.

    Example:
        evaluator = AssertionEvaluator()
        response = ResponseDescription(status_code=200, body='{"user": {"age": 30}}')
        results = evaluator.evaluate(
            [
                Assertion.from_tags("a1", "status", operator="equals", expected="200"),
                Assertion.from_tags("a2", "bodyJson", "user.age", "equals", "30"),
            ],
            response,
        )
    """

    def __init__(self) -> None:
        self._checkers: dict[AssertionType, Checker] = {
            AssertionType.STATUS: self.check_status,
            AssertionType.RESPONSE_TIME: self.check_response_time,
            AssertionType.BODY_CONTAINS: self.check_body_contains,
            AssertionType.BODY_JSON: self.check_body_json,
            AssertionType.HEADER_EXISTS: self.check_header_exists,
            AssertionType.HEADER_EQUALS: self.check_header_equals,
        }

    def evaluate(
        self,
        assertions: Iterable[Assertion],
        response: ResponseDescription,
    ) -> list[AssertionResult]:
        """
        Run every assertion against the response.

        Args:
            assertions: Assertion definitions, evaluated in order
            response: The response to check

        Returns:
            One result per assertion, in the same order.
        """
        body_json = _parse_body(response)
        return [self.evaluate_one(a, response, body_json) for a in assertions]

    def evaluate_one(
        self,
        assertion: Assertion,
        response: ResponseDescription,
        body_json: Any = _UNPARSED,
    ) -> AssertionResult:
        if not assertion.enabled:
            return AssertionResult.passed_result(assertion.id, SKIPPED_MESSAGE)

        checker = self._checkers.get(assertion.type)
        if checker is None:
            return AssertionResult.failed_result(
                assertion.id,
                f"Unknown assertion type: {assertion.type_tag}",
            )
        return checker(assertion, response, body_json)

    # ─────────────────────────────────────────────────────────────────────
    # Checkers
    # ─────────────────────────────────────────────────────────────────────

    def check_status(
        self, assertion: Assertion, response: ResponseDescription, body_json: Any = _UNPARSED
    ) -> AssertionResult:
        expected = parse_expected_int(assertion.expected, INT32_RANGE)
        actual = response.status_code
        op = assertion.operator

        if op == Op.EQUALS:
            passed = actual == expected
            message = f"Status code is {actual}" if passed else f"Expected {expected}, got {actual}"
        elif op == Op.NOT_EQUALS:
            passed = actual != expected
            message = f"Status code is not {expected}" if passed else f"Expected not {expected}, got {actual}"
        elif op == Op.LESS_THAN:
            passed = actual < expected
            message = f"Status code {actual} < {expected}" if passed else f"Expected < {expected}, got {actual}"
        elif op == Op.GREATER_THAN:
            passed = actual > expected
            message = f"Status code {actual} > {expected}" if passed else f"Expected > {expected}, got {actual}"
        else:
            passed, message = _unknown_operator(assertion)

        return AssertionResult(assertion.id, passed, str(actual), message)

    def check_response_time(
        self, assertion: Assertion, response: ResponseDescription, body_json: Any = _UNPARSED
    ) -> AssertionResult:
        expected = parse_expected_int(assertion.expected, INT64_RANGE)
        timing = response.timing_ms
        op = assertion.operator

        if op == Op.LESS_THAN:
            passed = timing < expected
            message = (
                f"Response time {timing}ms < {expected}ms"
                if passed
                else f"Expected < {expected}ms, got {timing}ms"
            )
        elif op == Op.GREATER_THAN:
            passed = timing > expected
            message = (
                f"Response time {timing}ms > {expected}ms"
                if passed
                else f"Expected > {expected}ms, got {timing}ms"
            )
        else:
            passed, message = _unknown_operator(assertion)

        return AssertionResult(assertion.id, passed, f"{timing}ms", message)

    def check_body_contains(
        self, assertion: Assertion, response: ResponseDescription, body_json: Any = _UNPARSED
    ) -> AssertionResult:
        body = response.body
        expected = assertion.expected
        if len(body) > BODY_PREVIEW_CHARS:
            actual = body[:BODY_PREVIEW_CHARS] + "..."
        else:
            actual = body
        op = assertion.operator

        if op == Op.CONTAINS:
            passed = expected in body
            message = f'Body contains "{expected}"' if passed else f'Body does not contain "{expected}"'
        elif op == Op.NOT_CONTAINS:
            passed = expected not in body
            message = f'Body does not contain "{expected}"' if passed else f'Body contains "{expected}"'
        elif op == Op.MATCHES:
            try:
                pattern = re.compile(expected)
            except re.error as e:
                logger.debug(f"Invalid regex pattern {expected!r}: {e}")
                return AssertionResult.failed_result(
                    assertion.id, f"Invalid regex pattern: {expected}", actual
                )
            passed = pattern.search(body) is not None
            message = (
                f'Body matches pattern "{expected}"'
                if passed
                else f'Body does not match pattern "{expected}"'
            )
        else:
            passed, message = _unknown_operator(assertion)

        return AssertionResult(assertion.id, passed, actual, message)

    def check_body_json(
        self, assertion: Assertion, response: ResponseDescription, body_json: Any = _UNPARSED
    ) -> AssertionResult:
        if body_json is _UNPARSED:
            body_json = _parse_body(response)
        if body_json is _NOT_JSON:
            return AssertionResult.failed_result(
                assertion.id, INVALID_JSON_MESSAGE, INVALID_JSON_ACTUAL
            )

        prop = assertion.property
        expected = assertion.expected
        value = resolve(body_json, prop)
        found = value is not MISSING
        actual = render(value)
        op = assertion.operator

        if op == Op.EXISTS:
            passed = found
            message = f'Property "{prop}" exists' if passed else f'Property "{prop}" does not exist'
        elif op == Op.NOT_EXISTS:
            passed = not found
            message = f'Property "{prop}" does not exist' if passed else f'Property "{prop}" exists'
        elif op == Op.EQUALS:
            passed = found and json_equal(value, _expected_json(expected))
            message = f"{prop} equals {expected}" if passed else f"Expected {expected}, got {actual}"
        elif op == Op.NOT_EQUALS:
            passed = not found or not json_equal(value, _expected_json(expected))
            message = (
                f"{prop} does not equal {expected}"
                if passed
                else f"Expected not {expected}, got {actual}"
            )
        elif op == Op.CONTAINS:
            # Containment is a substring test on the canonical text, so
            # strings are matched with their quotes and containers as JSON.
            passed = found and expected in canonical_json(value)
            message = (
                f'{prop} contains "{expected}"'
                if passed
                else f'{prop} does not contain "{expected}"'
            )
        else:
            passed, message = _unknown_operator(assertion)

        return AssertionResult(assertion.id, passed, actual, message)

    def check_header_exists(
        self, assertion: Assertion, response: ResponseDescription, body_json: Any = _UNPARSED
    ) -> AssertionResult:
        name = assertion.property
        exists = response.has_header(name)
        actual = "exists" if exists else "not found"
        op = assertion.operator

        if op == Op.EXISTS:
            passed = exists
            message = f'Header "{name}" exists' if passed else f'Header "{name}" not found'
        elif op == Op.NOT_EXISTS:
            passed = not exists
            message = f'Header "{name}" does not exist' if passed else f'Header "{name}" exists'
        else:
            passed, message = _unknown_operator(assertion)

        return AssertionResult(assertion.id, passed, actual, message)

    def check_header_equals(
        self, assertion: Assertion, response: ResponseDescription, body_json: Any = _UNPARSED
    ) -> AssertionResult:
        name = assertion.property
        expected = assertion.expected
        value = response.header(name)
        if value is None:
            return AssertionResult.failed_result(
                assertion.id, f'Header "{name}" not found', "not found"
            )
        op = assertion.operator

        if op == Op.EQUALS:
            passed = value == expected
            message = (
                f'Header "{name}" equals "{expected}"'
                if passed
                else f'Expected "{expected}", got "{value}"'
            )
        elif op == Op.NOT_EQUALS:
            passed = value != expected
            message = (
                f'Header "{name}" does not equal "{expected}"'
                if passed
                else f'Expected not "{expected}", got "{value}"'
            )
        elif op == Op.CONTAINS:
            passed = expected in value
            message = (
                f'Header "{name}" contains "{expected}"'
                if passed
                else f'Header does not contain "{expected}"'
            )
        else:
            passed, message = _unknown_operator(assertion)

        return AssertionResult(assertion.id, passed, value, message)


def _parse_body(response: ResponseDescription) -> Any:
    try:
        return parse_document(response.body)
    except InvalidJSONError as e:
        logger.debug(f"Response body is not JSON: {e}")
        return _NOT_JSON


def _expected_json(text: str) -> Any:
    """Expected value of a bodyJson comparison; JSON null when not JSON."""
    try:
        return parse_document(text)
    except InvalidJSONError:
        return None


def run_assertions(
    assertions: Iterable[Assertion],
    response: ResponseDescription,
) -> list[AssertionResult]:
    """Evaluate assertions against a response with a fresh evaluator."""
    return AssertionEvaluator().evaluate(assertions, response)


def summarize(results: Iterable[AssertionResult]) -> AssertionSummary:
    """Count passed and failed results."""
    results = list(results)
    passed = sum(1 for r in results if r.passed)
    return AssertionSummary(passed=passed, failed=len(results) - passed, total=len(results))
