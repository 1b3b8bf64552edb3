"""Typed tree of an NUnit XML result document.

Producers of NUnit reports differ in which attributes they write, so every
attribute is kept in an ``attrs`` mapping and exposed through accessors that
return None when the attribute is missing.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class Outcome(Enum):
    """Result codes written by NUnit that testlens understands."""

    PASSED = "Passed"
    NOT_EXECUTED = "NotExecuted"
    FAILED = "Failed"


@dataclass
class ErrorInfo:
    """Content of a ``failure`` element."""

    messages: list[str] = field(default_factory=list)
    stack_traces: list[str] = field(default_factory=list)


@dataclass
class TestCase:
    """A ``testcase`` element."""

    attrs: dict[str, str] = field(default_factory=dict)
    failures: list[ErrorInfo] = field(default_factory=list)

    @property
    def id(self) -> str | None:
        return self.attrs.get("id")

    @property
    def name(self) -> str | None:
        return self.attrs.get("name")

    @property
    def fullname(self) -> str | None:
        return self.attrs.get("fullname")

    @property
    def methodname(self) -> str | None:
        return self.attrs.get("methodname")

    @property
    def classname(self) -> str | None:
        return self.attrs.get("classname")

    @property
    def result(self) -> str | None:
        return self.attrs.get("result")

    @property
    def duration(self) -> str | None:
        return self.attrs.get("duration")


@dataclass
class TestSuite:
    """A ``testsuite`` element, possibly containing nested suites."""

    attrs: dict[str, str] = field(default_factory=dict)
    testsuites: list[TestSuite] = field(default_factory=list)
    testcases: list[TestCase] = field(default_factory=list)

    @property
    def type(self) -> str | None:
        return self.attrs.get("type")

    @property
    def id(self) -> str | None:
        return self.attrs.get("id")

    @property
    def name(self) -> str | None:
        return self.attrs.get("name")

    @property
    def fullname(self) -> str | None:
        return self.attrs.get("fullname")

    @property
    def result(self) -> str | None:
        return self.attrs.get("result")

    @property
    def duration(self) -> str | None:
        return self.attrs.get("duration")


@dataclass
class TestRun:
    """The ``testrun`` root element with its aggregate counters."""

    attrs: dict[str, str] = field(default_factory=dict)
    testsuites: list[TestSuite] = field(default_factory=list)

    @property
    def id(self) -> str | None:
        return self.attrs.get("id")

    @property
    def result(self) -> str | None:
        return self.attrs.get("result")

    @property
    def total(self) -> str | None:
        return self.attrs.get("total")

    @property
    def passed(self) -> str | None:
        return self.attrs.get("passed")

    @property
    def failed(self) -> str | None:
        return self.attrs.get("failed")

    @property
    def skipped(self) -> str | None:
        return self.attrs.get("skipped")

    @property
    def duration(self) -> str | None:
        return self.attrs.get("duration")


@dataclass
class NunitReport:
    """A parsed NUnit document. ``testrun`` is None for an empty report."""

    testrun: TestRun | None = None
