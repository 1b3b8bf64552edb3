"""testlens - normalize NUnit test reports into a framework-agnostic result model."""

__version__ = "0.1.0"

from testlens.config import ParseOptions
from testlens.core.exceptions import MalformedReportError
from testlens.core.models import (
    TestCaseError,
    TestCaseResult,
    TestExecutionResult,
    TestGroupResult,
    TestRunResult,
    TestSuiteResult,
)
from testlens.parsers import NunitParser

__all__ = [
    "NunitParser",
    "ParseOptions",
    "MalformedReportError",
    "TestExecutionResult",
    "TestCaseError",
    "TestCaseResult",
    "TestGroupResult",
    "TestSuiteResult",
    "TestRunResult",
]
