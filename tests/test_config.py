"""Tests for parse options and environment settings."""

from __future__ import annotations

from testlens.config import ParseOptions, Settings, get_settings


class TestSettings:
    """Tests for Settings loaded from the environment."""

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("TESTLENS_WORK_DIR", raising=False)
        monkeypatch.delenv("TESTLENS_PARSE_ERRORS", raising=False)

        settings = Settings(_env_file=None)

        assert settings.parse_errors is True
        assert settings.work_dir is None
        assert settings.log_level == "INFO"
        assert settings.log_json_format is True

    def test_reads_prefixed_environment(self, monkeypatch):
        monkeypatch.setenv("TESTLENS_PARSE_ERRORS", "false")
        monkeypatch.setenv("TESTLENS_WORK_DIR", "/home/runner/work/repo")
        monkeypatch.setenv("TESTLENS_LOG_LEVEL", "DEBUG")

        settings = get_settings()

        assert settings.parse_errors is False
        assert settings.work_dir == "/home/runner/work/repo"
        assert settings.log_level == "DEBUG"

    def test_get_settings_is_cached(self):
        assert get_settings() is get_settings()


class TestParseOptions:
    """Tests for ParseOptions."""

    def test_defaults(self):
        options = ParseOptions()

        assert options.parse_errors is True
        assert options.tracked_files == frozenset()
        assert options.work_dir is None
        assert options.sort_key is None

    def test_tracked_files_are_normalized(self):
        options = ParseOptions(tracked_files=["src\\Foo.cs", " tests/FooTests.cs"])

        assert options.tracked_files == frozenset({"src/Foo.cs", "tests/FooTests.cs"})

    def test_work_dir_gets_trailing_slash(self):
        assert ParseOptions(work_dir="C:\\agent\\work").work_dir == "C:/agent/work/"

    def test_empty_work_dir_means_no_prefix(self):
        assert ParseOptions(work_dir="").work_dir == ""

    def test_from_settings(self):
        settings = Settings(_env_file=None, parse_errors=False, work_dir="/repo")

        options = ParseOptions.from_settings(settings, tracked_files=["src/Foo.cs"])

        assert options.parse_errors is False
        assert options.work_dir == "/repo/"
        assert options.tracked_files == frozenset({"src/Foo.cs"})

    def test_from_settings_uses_environment(self, monkeypatch):
        monkeypatch.setenv("TESTLENS_PARSE_ERRORS", "0")

        options = ParseOptions.from_settings()

        assert options.parse_errors is False
