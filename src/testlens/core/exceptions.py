"""Shared exceptions for the testlens package."""


class TestlensError(Exception):
    """Base class for all testlens errors."""


class MalformedReportError(TestlensError):
    """Exception raised when report content is not well-formed XML.

    Carries the report path and the underlying parser diagnostic so that
    callers processing many reports can tell which one failed and why.
    """

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Invalid XML at {path}\n\n{reason}")


class DurationFormatError(TestlensError, ValueError):
    """Exception raised when a duration string is not a recognized format."""

    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__(f'Invalid format: "{value}" is not a NET duration')
