"""
Report data models for assertion runs.

This module defines the data structures for capturing complete
run records including metadata, per-assertion verdicts and timing.
"""

from __future__ import annotations

import json
import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any


class RunStatus(str, Enum):
    """Overall status of a suite run."""
    PENDING = "pending"
    RUNNING = "running"
    PASSED = "passed"
    FAILED = "failed"


@dataclass
class ResultRecord:
    """
    Record of a single assertion evaluation.

    Captures the definition that was checked (after variable
    interpolation) together with the verdict.
    """
    assertion_id: str
    assertion_type: str
    operator: str
    property: str = ""
    expected: str = ""
    enabled: bool = True

    passed: bool | None = None  # None until evaluated
    actual: str = ""
    message: str = ""

    def to_dict(self) -> dict[str, Any]:
        """Convert to JSON-serializable dict."""
        return {
            "assertion_id": self.assertion_id,
            "assertion_type": self.assertion_type,
            "operator": self.operator,
            "property": self.property,
            "expected": self.expected,
            "enabled": self.enabled,
            "passed": self.passed,
            "actual": self.actual,
            "message": self.message,
        }


@dataclass
class RunReport:
    """
    Complete record of a suite run against one response.
    """
    # Run identification
    run_id: str = field(default_factory=lambda: str(uuid.uuid4()))

    # Timing
    started_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    ended_at: datetime | None = None
    duration_ms: float | None = None

    # Suite info
    suite_name: str = ""
    suite_version: int = 1

    # Response info
    status_code: int | None = None
    timing_ms: int | None = None

    # Overall status
    status: RunStatus = RunStatus.PENDING

    # Records
    results: list[ResultRecord] = field(default_factory=list)
    extracted: dict[str, str] = field(default_factory=dict)

    # Summary stats
    total: int = 0
    passed: int = 0
    failed: int = 0
    skipped: int = 0

    def start(self) -> None:
        """Mark the run as started."""
        self.status = RunStatus.RUNNING
        self.started_at = datetime.now(timezone.utc)

    def complete(self) -> None:
        """Mark the run as completed and calculate final status."""
        self.ended_at = datetime.now(timezone.utc)
        delta = self.ended_at - self.started_at
        self.duration_ms = delta.total_seconds() * 1000

        self.total = len(self.results)
        self.passed = sum(1 for r in self.results if r.enabled and r.passed)
        self.failed = sum(1 for r in self.results if r.passed is False)
        self.skipped = sum(1 for r in self.results if not r.enabled)

        self.status = RunStatus.FAILED if self.failed > 0 else RunStatus.PASSED

    def get_result(self, assertion_id: str) -> ResultRecord | None:
        for record in self.results:
            if record.assertion_id == assertion_id:
                return record
        return None

    def to_dict(self) -> dict[str, Any]:
        """Convert to JSON-serializable dict."""
        return {
            "run_id": self.run_id,
            "started_at": self.started_at.isoformat() if self.started_at else None,
            "ended_at": self.ended_at.isoformat() if self.ended_at else None,
            "duration_ms": self.duration_ms,
            "suite_name": self.suite_name,
            "suite_version": self.suite_version,
            "response": {
                "status_code": self.status_code,
                "timing_ms": self.timing_ms,
            },
            "status": self.status.value,
            "summary": {
                "total": self.total,
                "passed": self.passed,
                "failed": self.failed,
                "skipped": self.skipped,
            },
            "results": [record.to_dict() for record in self.results],
            "extracted": dict(self.extracted),
        }

    def to_json(self, indent: int = 2) -> str:
        """Convert to JSON string."""
        return json.dumps(self.to_dict(), indent=indent, ensure_ascii=False, default=str)

    def summary(self) -> str:
        """Generate a human-readable summary."""
        lines = [
            f"═══════════════════════════════════════════════════════════",
            f"  Run Report: {self.suite_name}",
            f"═══════════════════════════════════════════════════════════",
            f"  Run ID:     {self.run_id}",
            f"  Status:     {_status_icon(self.status)} {self.status.value.upper()}",
            f"  Response:   {self.status_code} in {self.timing_ms}ms",
            f"───────────────────────────────────────────────────────────",
            f"  Assertions: {self.passed} passed, {self.failed} failed, {self.skipped} skipped",
            f"───────────────────────────────────────────────────────────",
        ]

        for record in self.results:
            icon = "⏭️" if not record.enabled else ("✅" if record.passed else "❌")
            lines.append(f"  {icon} [{record.assertion_id}] {record.assertion_type} {record.operator}")
            if record.passed is False:
                lines.append(f"      └─ {record.message}")

        if self.extracted:
            lines.append(f"───────────────────────────────────────────────────────────")
            for name, value in self.extracted.items():
                lines.append(f"  {{{{{name}}}}} = {value}")

        lines.append(f"═══════════════════════════════════════════════════════════")
        return "\n".join(lines)


def _status_icon(status: RunStatus) -> str:
    """Get icon for run status."""
    return {
        RunStatus.PENDING: "⏳",
        RunStatus.RUNNING: "🔄",
        RunStatus.PASSED: "✅",
        RunStatus.FAILED: "❌",
    }.get(status, "❓")
