"""
voltcheck - HTTP Response Assertion Tool

This package provides components for checking recorded HTTP responses
against declarative assertion suites.

Subpackages:
    - templating: {{name}} placeholder substitution
    - jsonpath: Dotted-path lookup and JSON document introspection
    - assertions: Assertion evaluation engine and type/operator catalogue
    - extraction: Chain-variable extraction from responses
    - suites: Parse and validate suite YAML files
    - reporting: Run reports and result tracking

Modules:
    - wire: JSON-text entry points that never raise
    - diagnostics: One-time rich traceback and log handler setup

Usage:
    from voltcheck import load_suite, load_response, AssertionEvaluator, Reporter

    suite, result = load_suite("suites/users.yaml")
    response, _ = load_response("responses/users.json")

    reporter = Reporter.from_suite(suite)
    reporter.start_run()

    results = AssertionEvaluator().evaluate(suite.assertions, response)
    reporter.record_results(suite.assertions, results)

    report = reporter.finish_run()
    print(report.summary())
"""

__version__ = "0.1.0"
__author__ = "Ahaan Chaudhuri"

# Re-export templating for convenience
from .templating import (
    find_variables,
    has_variables,
    interpolate,
    substitute,
    substitute_batch,
)

# Re-export jsonpath for convenience
from .jsonpath import (
    # Document primitives
    MISSING,
    InvalidJSONError,
    canonical_json,
    json_equal,
    parse_document,
    # Resolver
    extract,
    extract_batch,
    resolve,
    # Introspection
    JSONInfo,
    format_json,
    json_info,
    minify_json,
    validate_json,
)

# Re-export assertions for convenience
from .assertions import (
    # Models
    Assertion,
    AssertionOperator,
    AssertionResult,
    AssertionSummary,
    AssertionType,
    ResponseDescription,
    # Engine
    AssertionEvaluator,
    run_assertions,
    summarize,
    # Catalogue
    create_empty_assertion,
    operators_for_type,
)

# Re-export extraction for convenience
from .extraction import (
    ExtractionRule,
    ExtractionType,
    extract_variables,
)

# Re-export suites for convenience
from .suites import (
    # Loader functions
    load_response,
    load_suite,
    validate_suite_yaml,
    # Models
    Suite,
    # Validation
    SchemaValidator,
    ValidationError,
    ValidationResult,
)

# Re-export reporting for convenience
from .reporting import (
    ResultRecord,
    Reporter,
    RunReport,
    RunStatus,
)

__all__ = [
    # Package info
    "__version__",
    "__author__",
    # Templating
    "find_variables",
    "has_variables",
    "interpolate",
    "substitute",
    "substitute_batch",
    # JSON paths - Document primitives
    "MISSING",
    "InvalidJSONError",
    "canonical_json",
    "json_equal",
    "parse_document",
    # JSON paths - Resolver
    "extract",
    "extract_batch",
    "resolve",
    # JSON paths - Introspection
    "JSONInfo",
    "format_json",
    "json_info",
    "minify_json",
    "validate_json",
    # Assertions - Models
    "Assertion",
    "AssertionOperator",
    "AssertionResult",
    "AssertionSummary",
    "AssertionType",
    "ResponseDescription",
    # Assertions - Engine
    "AssertionEvaluator",
    "run_assertions",
    "summarize",
    # Assertions - Catalogue
    "create_empty_assertion",
    "operators_for_type",
    # Extraction
    "ExtractionRule",
    "ExtractionType",
    "extract_variables",
    # Suites - Loader functions
    "load_response",
    "load_suite",
    "validate_suite_yaml",
    # Suites - Models
    "Suite",
    # Suites - Validation
    "SchemaValidator",
    "ValidationError",
    "ValidationResult",
    # Reporting
    "ResultRecord",
    "Reporter",
    "RunReport",
    "RunStatus",
]
