"""
Reporter for building and managing run reports.

This module provides the Reporter class which helps construct
run reports from suite evaluations.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Iterable

from .models import ResultRecord, RunReport

if TYPE_CHECKING:
    from ..assertions import Assertion, AssertionResult, ResponseDescription
    from ..suites import Suite


class Reporter:
    """
    Builds and manages run reports.

    Example:
        suite, _ = load_suite("suites/users.yaml")
        reporter = Reporter.from_suite(suite)

        reporter.start_run()
        reporter.record_response(response)
        reporter.record_results(assertions, results)

        report = reporter.finish_run()
        print(report.summary())
    """

    def __init__(self, report: RunReport):
        """
        Initialize with a RunReport.

        Use Reporter.from_suite() for the typical case.
        """
        self.report = report

    @classmethod
    def from_suite(cls, suite: Suite, run_id: str | None = None) -> Reporter:
        """
        Create a Reporter from a parsed Suite.

        Args:
            suite: The parsed suite to create a report for
            run_id: Optional custom run ID (auto-generated if not provided)
        """
        report = RunReport(suite_name=suite.name, suite_version=suite.version)
        if run_id:
            report.run_id = run_id
        return cls(report)

    def start_run(self) -> None:
        """Mark the run as started."""
        self.report.start()

    def finish_run(self) -> RunReport:
        """
        Mark the run as completed and return the final report.

        Returns:
            The completed RunReport with summary stats
        """
        self.report.complete()
        return self.report

    def record_response(self, response: ResponseDescription) -> None:
        self.report.status_code = response.status_code
        self.report.timing_ms = response.timing_ms

    def record_results(
        self,
        assertions: Iterable[Assertion],
        results: Iterable[AssertionResult],
    ) -> list[ResultRecord]:
        """
        Record verdicts next to the definitions they came from.

        Both sequences are in evaluation order, one result per assertion.
        """
        records = []
        for assertion, result in zip(assertions, results):
            record = ResultRecord(
                assertion_id=assertion.id,
                assertion_type=assertion.type_tag,
                operator=assertion.operator_tag,
                property=assertion.property,
                expected=assertion.expected,
                enabled=assertion.enabled,
                passed=result.passed,
                actual=result.actual,
                message=result.message,
            )
            self.report.results.append(record)
            records.append(record)
        return records

    def record_variables(self, variables: dict[str, str]) -> None:
        self.report.extracted.update(variables)

    def save_json(self, path: str | Path) -> Path:
        """
        Save the report as JSON.

        Args:
            path: File path to save to

        Returns:
            The path the report was written to
        """
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(self.report.to_json(), encoding="utf-8")
        return path
