"""
Text-in, text-out entry points.

Compound inputs arrive as JSON text and compound outputs leave as JSON
text. None of these functions raise for malformed input; each one degrades
to a fixed fallback value instead:

    unparsable variable table     -> text(s) returned unchanged
    unparsable text list          -> "[]"
    unparsable document           -> "undefined" / original text / false
    unparsable assertions/response -> "[]"
"""

from __future__ import annotations

import logging
from typing import Any

from . import templating
from .assertions import AssertionEvaluator
from .jsonpath import (
    InvalidJSONError,
    canonical_json,
    extract,
    extract_batch,
    format_json,
    json_info as describe_json,
    minify_json,
    parse_document,
    validate_json,
)
from .suites import PayloadValidator, parse_assertion, parse_response

logger = logging.getLogger(__name__)


def _load(text: str) -> Any:
    """Parse JSON text, or return None after logging why it failed."""
    try:
        return parse_document(text)
    except InvalidJSONError as e:
        logger.debug(f"Ignoring unparsable input: {e}")
        return None


def _string_map(text: str) -> dict[str, str] | None:
    data = _load(text)
    if not isinstance(data, dict) or not all(isinstance(v, str) for v in data.values()):
        return None
    return data


def _string_list(text: str) -> list[str] | None:
    data = _load(text)
    if not isinstance(data, list) or not all(isinstance(v, str) for v in data):
        return None
    return data


# ─────────────────────────────────────────────────────────────────────────────
# Templates
# ─────────────────────────────────────────────────────────────────────────────

def substitute_variables(text: str, variables_json: str) -> str:
    if not text or "{{" not in text:
        return text
    variables = _string_map(variables_json)
    if variables is None:
        return text
    return templating.substitute(text, variables)


def substitute_variables_batch(texts_json: str, variables_json: str) -> str:
    texts = _string_list(texts_json)
    if texts is None:
        return "[]"
    variables = _string_map(variables_json)
    if variables is None:
        return canonical_json(texts)
    return canonical_json(templating.substitute_batch(texts, variables))


def find_variables(text: str) -> str:
    return canonical_json(templating.find_variables(text))


def has_variables(text: str) -> bool:
    return templating.has_variables(text)


# ─────────────────────────────────────────────────────────────────────────────
# JSON
# ─────────────────────────────────────────────────────────────────────────────

def json_extract(document: str, path: str) -> str:
    return extract(document, path)


def json_extract_batch(document: str, paths_json: str) -> str:
    try:
        value = parse_document(document)
    except InvalidJSONError:
        return "{}"
    paths = _string_list(paths_json)
    if paths is None:
        return "{}"
    return canonical_json(extract_batch(value, paths))


def json_format(document: str) -> str:
    return format_json(document)


def json_minify(document: str) -> str:
    return minify_json(document)


def json_validate(document: str) -> bool:
    return validate_json(document)


def json_info(document: str) -> str:
    return canonical_json(describe_json(document).to_dict())


# ─────────────────────────────────────────────────────────────────────────────
# Assertions
# ─────────────────────────────────────────────────────────────────────────────

def run_assertions(assertions_json: str, response_json: str) -> str:
    """
    Evaluate a JSON array of assertions against a JSON response description.

    Returns:
        JSON array of {assertionId, passed, actual, message}, or "[]" when
        either input does not parse or has the wrong shape.
    """
    validator = PayloadValidator()

    raw_assertions = _load(assertions_json)
    checked = validator.validate_assertions(raw_assertions)
    if not checked.is_valid:
        logger.debug(f"Rejecting assertions payload:\n{checked}")
        return "[]"

    raw_response = _load(response_json)
    checked = validator.validate_response(raw_response)
    if not checked.is_valid:
        logger.debug(f"Rejecting response payload:\n{checked}")
        return "[]"

    assertions = [parse_assertion(item) for item in raw_assertions]
    results = AssertionEvaluator().evaluate(assertions, parse_response(raw_response))
    return canonical_json([r.to_dict() for r in results])
