"""
Typed data structures for assertion suites.

A suite bundles variables, the assertions to evaluate and the extraction
rules to apply to one response.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from ..assertions.models import Assertion
from ..extraction.chain import ExtractionRule


@dataclass
class Suite:
    """Fully parsed and validated suite."""
    version: int
    name: str
    variables: dict[str, str] = field(default_factory=dict)
    assertions: list[Assertion] = field(default_factory=list)
    extract: list[ExtractionRule] = field(default_factory=list)
