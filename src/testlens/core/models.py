"""Framework-agnostic test result model.

This module defines the canonical tree that every report parser produces:
a run contains suites, a suite contains groups and a group contains test
cases. Renderers consume this tree without knowing which test runner
generated the source report.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

SortKey = Callable[[Any], Any]


class TestExecutionResult(Enum):
    """Canonical outcome of a single test case."""

    SUCCESS = "success"
    FAILED = "failed"
    SKIPPED = "skipped"


def _by_name(item: Any) -> tuple[str, str]:
    # Case-insensitive first, so "apple" comes before "Zeta"
    name = item.name or ""
    return name.casefold(), name


def _aggregate_result(results: list[TestExecutionResult | None]) -> TestExecutionResult:
    if TestExecutionResult.FAILED in results:
        return TestExecutionResult.FAILED
    return TestExecutionResult.SUCCESS


@dataclass
class TestCaseError:
    """Failure details of a test case.

    ``path`` and ``line`` point at the tracked source file that raised the
    error; both stay unset when no stack frame could be resolved.
    """

    details: str
    path: str | None = None
    line: int | None = None
    message: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        return {
            "path": self.path,
            "line": self.line,
            "message": self.message,
            "details": self.details,
        }


@dataclass
class TestCaseResult:
    """A single test case result."""

    name: str
    result: TestExecutionResult | None
    time: float = 0
    error: TestCaseError | None = None

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        return {
            "name": self.name,
            "result": self.result.value if self.result else None,
            "time": self.time,
            "error": self.error.to_dict() if self.error else None,
        }


@dataclass
class TestGroupResult:
    """An ordered list of test cases, optionally named."""

    name: str | None
    tests: list[TestCaseResult] = field(default_factory=list)

    @property
    def passed(self) -> int:
        return sum(1 for t in self.tests if t.result == TestExecutionResult.SUCCESS)

    @property
    def failed(self) -> int:
        return sum(1 for t in self.tests if t.result == TestExecutionResult.FAILED)

    @property
    def skipped(self) -> int:
        return sum(1 for t in self.tests if t.result == TestExecutionResult.SKIPPED)

    @property
    def time(self) -> float:
        return sum(t.time for t in self.tests)

    @property
    def result(self) -> TestExecutionResult:
        return _aggregate_result([t.result for t in self.tests])

    @property
    def failed_tests(self) -> list[TestCaseResult]:
        return [t for t in self.tests if t.result == TestExecutionResult.FAILED]

    def sort(self, key: SortKey | None = None) -> None:
        """Sort test cases in place. The sort is stable."""
        self.tests.sort(key=key or _by_name)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        return {
            "name": self.name,
            "tests": [t.to_dict() for t in self.tests],
        }


@dataclass
class TestSuiteResult:
    """A named collection of test groups."""

    name: str
    groups: list[TestGroupResult] = field(default_factory=list)
    total_time: float | None = None

    @property
    def tests(self) -> int:
        return sum(len(g.tests) for g in self.groups)

    @property
    def passed(self) -> int:
        return sum(g.passed for g in self.groups)

    @property
    def failed(self) -> int:
        return sum(g.failed for g in self.groups)

    @property
    def skipped(self) -> int:
        return sum(g.skipped for g in self.groups)

    @property
    def time(self) -> float:
        if self.total_time is not None:
            return self.total_time
        return sum(g.time for g in self.groups)

    @property
    def result(self) -> TestExecutionResult:
        return _aggregate_result([g.result for g in self.groups])

    @property
    def failed_groups(self) -> list[TestGroupResult]:
        return [g for g in self.groups if g.result == TestExecutionResult.FAILED]

    def sort(self, deep: bool, key: SortKey | None = None) -> None:
        """Sort groups in place, and their test cases too when ``deep``."""
        self.groups.sort(key=key or _by_name)
        if deep:
            for group in self.groups:
                group.sort(key)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        return {
            "name": self.name,
            "time": self.time,
            "groups": [g.to_dict() for g in self.groups],
        }


@dataclass
class TestRunResult:
    """Normalized result of one test report.

    ``path`` identifies the report the run was parsed from. The tree is
    assembled first and sorted once afterwards; parsers never sort it
    incrementally.
    """

    path: str
    suites: list[TestSuiteResult] = field(default_factory=list)
    total_time: float | None = None

    @property
    def tests(self) -> int:
        return sum(s.tests for s in self.suites)

    @property
    def passed(self) -> int:
        return sum(s.passed for s in self.suites)

    @property
    def failed(self) -> int:
        return sum(s.failed for s in self.suites)

    @property
    def skipped(self) -> int:
        return sum(s.skipped for s in self.suites)

    @property
    def time(self) -> float:
        if self.total_time is not None:
            return self.total_time
        return sum(s.time for s in self.suites)

    @property
    def result(self) -> TestExecutionResult:
        return _aggregate_result([s.result for s in self.suites])

    @property
    def failed_suites(self) -> list[TestSuiteResult]:
        return [s for s in self.suites if s.result == TestExecutionResult.FAILED]

    def sort(self, deep: bool, key: SortKey | None = None) -> None:
        """Sort suites in place using a stable sort.

        Args:
            deep: Also sort the groups and test cases of every suite.
            key: Sort key applied at every level. Defaults to the name.
        """
        self.suites.sort(key=key or _by_name)
        if deep:
            for suite in self.suites:
                suite.sort(deep, key)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        return {
            "path": self.path,
            "time": self.time,
            "result": self.result.value,
            "tests": self.tests,
            "passed": self.passed,
            "failed": self.failed,
            "skipped": self.skipped,
            "suites": [s.to_dict() for s in self.suites],
        }
