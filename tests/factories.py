"""Test data factories for testlens tests.

This module provides factory functions for building NUnit XML documents.
Use these instead of pasting large XML strings into each test.

Usage:
    from tests.factories import make_nunit_report, make_test_case, make_test_suite

    def test_something():
        xml = make_nunit_report(make_test_suite(make_test_case(name="Adds")))
"""

from __future__ import annotations

from xml.sax.saxutils import quoteattr


def make_failure(
    message: str | None = "Expected: 1\n  But was: 2",
    stack_trace: str | None = None,
) -> str:
    """Build a ``failure`` element. None omits the child element."""
    parts = ["<failure>"]
    if message is not None:
        parts.append(f"<message><![CDATA[{message}]]></message>")
    if stack_trace is not None:
        parts.append(f"<stack-trace><![CDATA[{stack_trace}]]></stack-trace>")
    parts.append("</failure>")
    return "".join(parts)


def make_test_case(
    name: str = "Adds",
    classname: str = "Calculator.Tests.AdditionTests",
    result: str | None = "Passed",
    duration: str | None = "0.010",
    failure: str = "",
) -> str:
    """Build a ``testcase`` element."""
    attrs = [
        f"id={quoteattr(name)}",
        f"name={quoteattr(name)}",
        f"fullname={quoteattr(f'{classname}.{name}')}",
        f"classname={quoteattr(classname)}",
    ]
    if result is not None:
        attrs.append(f"result={quoteattr(result)}")
    if duration is not None:
        attrs.append(f"duration={quoteattr(duration)}")
    return f"<testcase {' '.join(attrs)}>{failure}</testcase>"


def make_test_suite(
    *children: str, name: str = "AdditionTests", suite_type: str = "TestFixture"
) -> str:
    """Build a ``testsuite`` element around already-built children."""
    return (
        f"<testsuite type={quoteattr(suite_type)} name={quoteattr(name)}>"
        f"{''.join(children)}"
        "</testsuite>"
    )


def make_nunit_report(*suites: str, duration: str | None = "1.5") -> str:
    """Build a complete ``testrun`` document around already-built suites."""
    duration_attr = f" duration={quoteattr(duration)}" if duration is not None else ""
    return (
        '<?xml version="1.0" encoding="utf-8" standalone="no"?>\n'
        f'<testrun id="0" result="Failed"{duration_attr}>'
        f"{''.join(suites)}"
        "</testrun>"
    )


def make_nested_suites(depth: int, test_case: str) -> str:
    """Build ``depth`` suites nested inside each other around one test case."""
    xml = test_case
    for level in range(depth):
        xml = make_test_suite(xml, name=f"Level{level}", suite_type="Namespace")
    return xml
