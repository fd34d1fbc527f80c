"""
Suite Files for Response Assertions

This package loads, validates and parses YAML suites (variables,
assertions and extraction rules) and response description files.

Usage:
    from voltcheck.suites import load_suite, load_response

    suite, result = load_suite("suites/users.yaml")
    if not result.is_valid:
        print(result)

    response, result = load_response("responses/users.json")
"""

# Public API
from .loader import load_response, load_suite, validate_suite_yaml

# Models
from .models import Suite

# Parsing (for the text boundary)
from .parser import SuiteParser, parse_assertion, parse_response, to_text

# Validation
from .validation import PayloadValidator, SchemaValidator, ValidationError, ValidationResult

__all__ = [
    # Loader functions
    "load_suite",
    "load_response",
    "validate_suite_yaml",
    # Models
    "Suite",
    # Parsing
    "SuiteParser",
    "parse_assertion",
    "parse_response",
    "to_text",
    # Validation
    "PayloadValidator",
    "SchemaValidator",
    "ValidationError",
    "ValidationResult",
]
