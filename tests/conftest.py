"""Pytest configuration and fixtures."""

from __future__ import annotations

from io import StringIO
from typing import TYPE_CHECKING

import pytest
import structlog

from testlens.config import ParseOptions, get_settings
from testlens.logging import configure_logging

if TYPE_CHECKING:
    from collections.abc import Generator


@pytest.fixture(autouse=True)
def clear_settings_cache() -> Generator[None, None, None]:
    """Make every test read TESTLENS_* variables afresh."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture(autouse=True)
def reset_logging() -> Generator[None, None, None]:
    """Drop logging configuration made by a test so it cannot outlive its stream."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def log_output() -> Generator[StringIO, None, None]:
    """Capture JSON log lines emitted during the test."""
    output = StringIO()
    configure_logging(log_level="DEBUG", json_format=True, stream=output)
    yield output
    structlog.reset_defaults()


@pytest.fixture
def tracked_options() -> ParseOptions:
    """Options tracking the files used by the stack trace fixtures."""
    return ParseOptions(
        parse_errors=True,
        tracked_files={"src/Foo.cs", "src/Calculator/Calculator.cs", "tests/Foo.Tests/FooTests.cs"},
    )
