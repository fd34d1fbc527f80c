"""
Reporting for Assertion Runs

This package captures complete records of a suite evaluated against one
response.

Features:
    - Run metadata (ID, timestamps, suite info)
    - Per-assertion verdicts with the interpolated definition
    - Extracted chain variables
    - JSON serialization
    - Human-readable summaries

Usage:
    from voltcheck.reporting import Reporter

    reporter = Reporter.from_suite(suite)
    reporter.start_run()
    reporter.record_results(assertions, results)
    report = reporter.finish_run()
    print(report.summary())

    reporter.save_json("reports/run.json")
"""

# Models
from .models import ResultRecord, RunReport, RunStatus

# Reporter
from .reporter import Reporter

__all__ = [
    # Models
    "ResultRecord",
    "RunReport",
    "RunStatus",
    # Reporter
    "Reporter",
]
