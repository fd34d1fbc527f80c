"""
Chain variables: values lifted out of one response to feed later requests.

Each rule names a source (JSON body path, header, regex, status, raw body
or a full JSONPath query) and the variable that receives the value.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterable

from jsonpath_ng import parse as parse_jsonpath
from jsonpath_ng.exceptions import JsonPathLexerError, JsonPathParserError

from ..assertions.models import ResponseDescription
from ..jsonpath import MISSING, InvalidJSONError, canonical_json, parse_document, resolve

logger = logging.getLogger(__name__)


class ExtractionType(str, Enum):
    """Where an extracted value comes from."""
    JSON = "json"  # dotted path into the body
    JSONPATH = "jsonpath"  # full JSONPath expression, first match
    HEADER = "header"
    REGEX = "regex"  # first capture group, else whole match
    STATUS = "status"
    BODY = "body"


@dataclass
class ExtractionRule:
    """Extract one value from a response into a named variable."""
    type: ExtractionType
    path: str  # JSON path, JSONPath, header name or regex pattern
    variable_name: str


def _as_text(value: Any) -> str | None:
    """Variables are text: strings stay raw, everything else becomes JSON."""
    if value is None or value is MISSING:
        return None
    if isinstance(value, str):
        return value
    return canonical_json(value)


def extract_json_value(body: str, path: str) -> str | None:
    if not path.strip():
        return None
    try:
        document = parse_document(body)
    except InvalidJSONError:
        return None
    return _as_text(resolve(document, path))


def extract_jsonpath_value(body: str, expression: str) -> str | None:
    try:
        document = parse_document(body)
    except InvalidJSONError:
        return None
    try:
        matches = parse_jsonpath(expression).find(document)
    except (JsonPathParserError, JsonPathLexerError) as e:
        logger.debug(f"Invalid JSONPath expression {expression!r}: {e}")
        return None
    if not matches:
        return None
    return _as_text(matches[0].value)


def extract_regex_value(text: str, pattern: str) -> str | None:
    try:
        compiled = re.compile(pattern)
    except re.error as e:
        logger.debug(f"Invalid regex pattern {pattern!r}: {e}")
        return None
    match = compiled.search(text)
    if match is None:
        return None
    if compiled.groups and match.group(1) is not None:
        return match.group(1)
    return match.group(0)


def extract_value(rule: ExtractionRule, response: ResponseDescription) -> str | None:
    """
    Extract a value from a response based on a rule.

    Returns:
        The extracted text, or None when the source has nothing to offer.
    """
    if rule.type == ExtractionType.JSON:
        return extract_json_value(response.body, rule.path)
    elif rule.type == ExtractionType.JSONPATH:
        return extract_jsonpath_value(response.body, rule.path)
    elif rule.type == ExtractionType.HEADER:
        return response.header(rule.path)
    elif rule.type == ExtractionType.REGEX:
        return extract_regex_value(response.body, rule.path)
    elif rule.type == ExtractionType.STATUS:
        return str(response.status_code)
    elif rule.type == ExtractionType.BODY:
        return response.body
    return None


def extract_variables(
    rules: Iterable[ExtractionRule],
    response: ResponseDescription,
) -> dict[str, str]:
    """Apply rules in order; rules that find nothing are skipped."""
    variables: dict[str, str] = {}
    for rule in rules:
        value = extract_value(rule, response)
        if value is None:
            logger.debug(f"Extraction for '{rule.variable_name}' found nothing ({rule.type.value}: {rule.path})")
            continue
        variables[rule.variable_name] = value
    return variables
