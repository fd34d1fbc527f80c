"""
Schema parser for suites and assertion payloads.

This module converts validated YAML/JSON data into typed structures.
"""

from __future__ import annotations

from typing import Any

from ..assertions.models import Assertion, ResponseDescription
from ..extraction.chain import ExtractionRule, ExtractionType
from ..jsonpath import canonical_json
from .models import Suite


def to_text(value: Any) -> str:
    """Strings stay as they are; other values become their JSON text."""
    if isinstance(value, str):
        return value
    return canonical_json(value)


def parse_assertion(data: dict[str, Any]) -> Assertion:
    """Build an Assertion, keeping the raw type/operator tags."""
    return Assertion.from_tags(
        id=data["id"],
        type=data["type"],
        property=data.get("property") or "",
        operator=data["operator"],
        expected=to_text(data["expected"]) if "expected" in data else "",
        enabled=data.get("enabled", True),
    )


def parse_response(data: dict[str, Any]) -> ResponseDescription:
    return ResponseDescription(
        status_code=data["statusCode"],
        headers={name: to_text(value) for name, value in data["headers"].items()},
        body=to_text(data["body"]),
        timing_ms=data["timingMs"],
    )


class SuiteParser:
    """Parses and converts validated YAML to a typed Suite."""

    def __init__(self, data: dict[str, Any]):
        self.data = data

    def parse(self) -> Suite:
        """Convert validated data to a typed Suite."""
        return Suite(
            version=self.data["version"],
            name=self.data["name"],
            variables=self._parse_variables(),
            assertions=[parse_assertion(a) for a in self.data["assertions"]],
            extract=self._parse_extract(),
        )

    def _parse_variables(self) -> dict[str, str]:
        variables = self.data.get("variables") or {}
        return {name: to_text(value) for name, value in variables.items()}

    def _parse_extract(self) -> list[ExtractionRule]:
        rules: list[ExtractionRule] = []
        for rule in self.data.get("extract") or []:
            rules.append(
                ExtractionRule(
                    type=ExtractionType(rule["type"]),
                    path=rule.get("path") or "",
                    variable_name=rule["variable"],
                )
            )
        return rules
