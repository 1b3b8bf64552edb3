"""Abstract base class for test report parsers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from testlens.config import ParseOptions
    from testlens.core.models import TestRunResult


class TestParser(ABC):
    """Abstract base class for test report parsers.

    Each report format should have a concrete implementation of this
    class. A parser instance may cache state inferred from the report it
    parses, so create a new instance per report.
    """

    def __init__(self, options: ParseOptions) -> None:
        self.options = options

    @abstractmethod
    def parse(self, path: str, content: str) -> TestRunResult:
        """Convert report content to a normalized test run.

        Args:
            path: Report path, used as the identity of the run.
            content: Report content.

        Returns:
            TestRunResult sorted for display.
        """
