"""
Chain-variable extraction from responses.

Usage:
    from voltcheck.extraction import ExtractionRule, ExtractionType, extract_variables

    rules = [ExtractionRule(ExtractionType.JSON, "data.token", "token")]
    variables = extract_variables(rules, response)
"""

from .chain import (
    ExtractionRule,
    ExtractionType,
    extract_json_value,
    extract_jsonpath_value,
    extract_regex_value,
    extract_value,
    extract_variables,
)

__all__ = [
    "ExtractionRule",
    "ExtractionType",
    "extract_json_value",
    "extract_jsonpath_value",
    "extract_regex_value",
    "extract_value",
    "extract_variables",
]
