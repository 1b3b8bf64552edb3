"""NUnit XML parser for test reports.

This module converts NUnit result documents into the framework-agnostic
TestRunResult model. NUnit has no notion of a test group distinct from the
test class, so every class becomes one suite holding a single unnamed
group.

Failure locations are recovered from .NET stack traces, whose frames look
like::

    at Foo.Bar() in /home/runner/work/repo/src/Foo.cs:line 42

Only frames pointing at one of the caller's tracked files are used.
"""

from __future__ import annotations

import re
import xml.etree.ElementTree as ET
from dataclasses import dataclass, field

from testlens.config import ParseOptions
from testlens.core.exceptions import DurationFormatError, MalformedReportError
from testlens.core.models import (
    TestCaseError,
    TestCaseResult,
    TestExecutionResult,
    TestGroupResult,
    TestRunResult,
    TestSuiteResult,
)
from testlens.logging import get_logger
from testlens.parsers.base import TestParser
from testlens.parsers.nunit_types import (
    ErrorInfo,
    NunitReport,
    Outcome,
    TestCase,
    TestRun,
    TestSuite,
)
from testlens.utils.durations import parse_net_duration
from testlens.utils.paths import get_base_path, normalize_file_path

logger = get_logger(__name__)

# Element names, in the compact spelling and in NUnit 3's hyphenated one
RUN_TAGS = frozenset({"testrun", "test-run"})
SUITE_TAGS = frozenset({"testsuite", "test-suite"})
CASE_TAGS = frozenset({"testcase", "test-case"})
MESSAGE_TAGS = frozenset({"message"})
STACK_TRACE_TAGS = frozenset({"stack-trace", "stacktrace"})

STACK_FRAME_PATTERN = re.compile(r" in (.+):line (\d+)$")
LINE_SPLIT_PATTERN = re.compile(r"\r*\n")

OUTCOME_RESULTS = {
    Outcome.PASSED: TestExecutionResult.SUCCESS,
    Outcome.NOT_EXECUTED: TestExecutionResult.SKIPPED,
    Outcome.FAILED: TestExecutionResult.FAILED,
}


@dataclass
class Test:
    """A test case reduced to the fields the result model needs."""

    name: str
    outcome: Outcome | None
    duration: float
    error: ErrorInfo | None = None

    @property
    def result(self) -> TestExecutionResult | None:
        if self.outcome is None:
            return None
        return OUTCOME_RESULTS[self.outcome]


@dataclass
class TestClass:
    """Tests sharing one ``classname``, in report order."""

    name: str
    tests: list[Test] = field(default_factory=list)


@dataclass
class SourceLocation:
    """Tracked file and line a stack frame points at."""

    path: str
    line: int


class NunitParser(TestParser):
    """Parser for NUnit XML reports."""

    def __init__(self, options: ParseOptions) -> None:
        super().__init__(options)
        self.assumed_work_dir: str | None = None

    def parse(self, path: str, content: str) -> TestRunResult:
        """Parse NUnit XML into a sorted TestRunResult.

        Args:
            path: Report path, used in error messages and as run identity.
            content: NUnit XML document.

        Returns:
            TestRunResult with one suite per test class.

        Raises:
            MalformedReportError: If ``content`` is not well-formed XML.
        """
        report = self._get_nunit_report(path, content)
        test_classes = self._get_test_classes(report)

        result = self._get_test_run_result(path, report, test_classes)
        result.sort(True, self.options.sort_key)
        return result

    def _get_nunit_report(self, path: str, content: str) -> NunitReport:
        """Parse XML text into the typed report tree."""
        try:
            root = ET.fromstring(content.lstrip("\ufeff"))  # noqa: S314 - trusted test report data
        except ET.ParseError as e:
            raise MalformedReportError(path, str(e)) from e

        if root.tag not in RUN_TAGS:
            logger.debug("nunit_report_empty", path=path, root=root.tag)
            return NunitReport()

        testrun = TestRun(attrs=dict(root.attrib))
        testrun.testsuites = [self._parse_testsuite(el) for el in root if el.tag in SUITE_TAGS]

        logger.debug("nunit_report_parsed", path=path, suites=len(testrun.testsuites))
        return NunitReport(testrun=testrun)

    @staticmethod
    def _parse_testsuite(element: ET.Element) -> TestSuite:
        """Convert a suite element and everything below it.

        Nesting depth of real reports follows namespace depth, so the tree
        is walked with an explicit stack instead of recursion.
        """
        root = TestSuite(attrs=dict(element.attrib))
        pending = [(element, root)]

        while pending:
            current, suite = pending.pop()
            for child in current:
                if child.tag in CASE_TAGS:
                    suite.testcases.append(NunitParser._parse_testcase(child))
                elif child.tag in SUITE_TAGS:
                    nested = TestSuite(attrs=dict(child.attrib))
                    suite.testsuites.append(nested)
                    pending.append((child, nested))

        return root

    @staticmethod
    def _parse_testcase(element: ET.Element) -> TestCase:
        """Convert a test case element and its failure records."""
        failures = []
        for failure in element.findall("failure"):
            failures.append(
                ErrorInfo(
                    messages=NunitParser._texts(failure, MESSAGE_TAGS),
                    stack_traces=NunitParser._texts(failure, STACK_TRACE_TAGS),
                )
            )
        return TestCase(attrs=dict(element.attrib), failures=failures)

    @staticmethod
    def _texts(element: ET.Element, tags: frozenset[str]) -> list[str]:
        """Collect non-blank text of the direct children named ``tags``."""
        texts = []
        for child in element:
            if child.tag not in tags:
                continue
            text = "".join(child.itertext())
            if text.strip():
                texts.append(text)
        return texts

    def _get_test_classes(self, report: NunitReport) -> list[TestClass]:
        """Flatten all suites and group their test cases by class name."""
        if report.testrun is None or not report.testrun.testsuites:
            return []

        unit_tests = [
            test_case
            for testsuite in report.testrun.testsuites
            for test_case in self._get_all_test_cases(testsuite)
        ]
        logger.debug("nunit_test_cases_flattened", count=len(unit_tests))

        test_classes: dict[str, TestClass] = {}
        for test_case in unit_tests:
            class_name = test_case.classname or ""
            test_class = test_classes.get(class_name)
            if test_class is None:
                test_class = TestClass(class_name)
                test_classes[class_name] = test_class

            test = Test(
                name=test_case.name or "",
                outcome=self._get_outcome(test_case),
                duration=self._get_duration(test_case.duration),
                error=self._get_error_info(test_case),
            )
            test_class.tests.append(test)

        return list(test_classes.values())

    def _get_test_run_result(
        self, path: str, report: NunitReport, test_classes: list[TestClass]
    ) -> TestRunResult:
        """Assemble suites, groups and cases into the run result."""
        total_time = self._get_duration(report.testrun.duration) if report.testrun else 0

        suites = []
        for test_class in test_classes:
            tests = [
                TestCaseResult(test.name, test.result, test.duration, self._get_error(test))
                for test in test_class.tests
            ]
            group = TestGroupResult(None, tests)
            suites.append(TestSuiteResult(test_class.name, [group]))

        return TestRunResult(path, suites, total_time)

    @staticmethod
    def _get_all_test_cases(testsuite: TestSuite) -> list[TestCase]:
        """Collect test cases depth-first: own cases, then each child suite."""
        test_cases: list[TestCase] = []
        pending = [testsuite]

        while pending:
            suite = pending.pop()
            test_cases.extend(suite.testcases)
            pending.extend(reversed(suite.testsuites))

        return test_cases

    @staticmethod
    def _get_outcome(test_case: TestCase) -> Outcome | None:
        try:
            return Outcome(test_case.result)
        except ValueError:
            return None

    @staticmethod
    def _get_duration(duration: str | None) -> float:
        if not duration:
            return 0
        try:
            return parse_net_duration(duration)
        except DurationFormatError as e:
            logger.warning("nunit_invalid_duration", duration=e.value)
            return 0

    @staticmethod
    def _get_error_info(test_case: TestCase) -> ErrorInfo | None:
        if test_case.result != Outcome.FAILED.value:
            return None
        if not test_case.failures:
            return None
        return test_case.failures[0]

    def _get_error(self, test: Test) -> TestCaseError | None:
        """Build error details for a failed test, if enabled and available."""
        if not self.options.parse_errors or test.error is None:
            return None

        error = test.error
        if not error.messages or not error.stack_traces:
            return None

        message = error.messages[0]
        stack_trace = error.stack_traces[0]
        src = self._exception_throw_source(stack_trace)

        return TestCaseError(
            details=f"{message}\n{stack_trace}",
            path=src.path if src else None,
            line=src.line if src else None,
            message=message,
        )

    def _exception_throw_source(self, stack_trace: str) -> SourceLocation | None:
        """Find the first stack frame located in a tracked file."""
        tracked_files = self.options.tracked_files

        for line in LINE_SPLIT_PATTERN.split(stack_trace):
            match = STACK_FRAME_PATTERN.search(line)
            if match is None:
                continue

            file_path = normalize_file_path(match.group(1))
            work_dir = self._get_work_dir(file_path)
            if work_dir is None or not file_path.startswith(work_dir):
                continue

            file = file_path[len(work_dir) :]
            if file in tracked_files:
                return SourceLocation(path=file, line=int(match.group(2)))

        return None

    def _get_work_dir(self, path: str) -> str | None:
        """Return the explicit work dir, or infer it once from ``path``."""
        if self.options.work_dir is not None:
            return self.options.work_dir

        if self.assumed_work_dir is None:
            self.assumed_work_dir = get_base_path(path, self.options.tracked_files)
            if self.assumed_work_dir is not None:
                logger.debug("nunit_work_dir_inferred", work_dir=self.assumed_work_dir)

        return self.assumed_work_dir
