"""Test report parsers.

Usage:
    from testlens.config import ParseOptions
    from testlens.parsers import NunitParser

    options = ParseOptions(tracked_files={"src/Foo.cs"})
    result = NunitParser(options).parse("TestResults.xml", xml_text)
"""

from .base import TestParser
from .nunit import NunitParser

__all__ = [
    "TestParser",
    "NunitParser",
]
