"""
Suite and response loader.

This module provides the public API for loading and validating suite
files and response description files from disk or YAML strings.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from ..assertions.models import ResponseDescription
from .models import Suite
from .parser import SuiteParser, parse_response
from .validation import PayloadValidator, SchemaValidator, ValidationResult


def _read_yaml(path: Path) -> tuple[Any, ValidationResult]:
    """Read a YAML mapping from disk, reporting problems as validation errors."""
    result = ValidationResult()

    if not path.exists():
        result.add_error(
            str(path),
            "File not found",
            suggestion="Check the file path is correct"
        )
        return None, result

    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        result.add_error(
            str(path),
            f"Invalid YAML syntax: {e}",
            suggestion="Check YAML formatting (indentation, colons, etc.)"
        )
        return None, result

    if not isinstance(data, dict):
        result.add_error(
            str(path),
            "File must contain a YAML object (not a list or scalar)",
            value=type(data).__name__
        )
        return None, result

    return data, result


def _parse_suite_data(data: dict[str, Any]) -> tuple[Suite | None, ValidationResult]:
    validator = SchemaValidator(data)
    result = validator.validate()

    if not result.is_valid:
        return None, result

    parser = SuiteParser(data)
    return parser.parse(), result


def load_suite(path: str | Path) -> tuple[Suite | None, ValidationResult]:
    """
    Load and validate a suite from a YAML file.

    Args:
        path: Path to the YAML suite file

    Returns:
        Tuple of (Suite or None, ValidationResult)
        If validation fails, Suite will be None.

    Example:
        suite, result = load_suite("suites/users.yaml")
        if not result.is_valid:
            print(result)
            sys.exit(1)
    """
    data, result = _read_yaml(Path(path))
    if not result.is_valid:
        return None, result
    return _parse_suite_data(data)


def validate_suite_yaml(yaml_string: str) -> tuple[Suite | None, ValidationResult]:
    """
    Validate a suite from a YAML string (useful for testing).

    Args:
        yaml_string: YAML content as a string

    Returns:
        Tuple of (Suite or None, ValidationResult)
    """
    try:
        data = yaml.safe_load(yaml_string)
    except yaml.YAMLError as e:
        result = ValidationResult()
        result.add_error("yaml", f"Invalid YAML syntax: {e}")
        return None, result

    if not isinstance(data, dict):
        result = ValidationResult()
        result.add_error(
            "yaml",
            "Content must be a YAML object",
            value=type(data).__name__
        )
        return None, result

    return _parse_suite_data(data)


def load_response(path: str | Path) -> tuple[ResponseDescription | None, ValidationResult]:
    """
    Load a response description (statusCode, headers, body, timingMs).

    JSON files work as well, since JSON is valid YAML. The body may be given
    as a mapping or list, in which case it is used as its JSON text.

    Returns:
        Tuple of (ResponseDescription or None, ValidationResult)
    """
    data, result = _read_yaml(Path(path))
    if not result.is_valid:
        return None, result

    result = PayloadValidator(strict=False).validate_response(data)
    if not result.is_valid:
        return None, result

    return parse_response(data), result
