"""Configuration for testlens parsers."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

from testlens.core.models import SortKey
from testlens.utils.paths import normalize_dir_path, normalize_file_path


class Settings(BaseSettings):
    """Defaults loaded from ``TESTLENS_*`` environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="TESTLENS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Parsing
    parse_errors: bool = True
    work_dir: str | None = None

    # Logging
    log_level: str = "INFO"
    log_json_format: bool = True


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


@dataclass(frozen=True)
class ParseOptions:
    """Options controlling how a report is turned into a TestRunResult.

    Attributes:
        parse_errors: Populate error details of failed test cases.
        tracked_files: Repository-relative paths eligible as failure source.
        work_dir: Path prefix stripped from stack trace paths. When None it
            is inferred from the first stack frame matching a tracked file.
        sort_key: Key used to order suites, groups and cases. Defaults to
            ordering by name.
    """

    parse_errors: bool = True
    tracked_files: frozenset[str] = field(default_factory=frozenset)
    work_dir: str | None = None
    sort_key: SortKey | None = None

    def __post_init__(self) -> None:
        # Accept any iterable of paths, e.g. a list produced by `git ls-files`
        object.__setattr__(
            self, "tracked_files", frozenset(normalize_file_path(f) for f in self.tracked_files)
        )
        if self.work_dir is not None:
            object.__setattr__(self, "work_dir", normalize_dir_path(self.work_dir, True))

    @classmethod
    def from_settings(
        cls,
        settings: Settings | None = None,
        tracked_files: Iterable[str] = (),
        sort_key: SortKey | None = None,
    ) -> ParseOptions:
        """Build options from environment settings.

        Args:
            settings: Settings to read. Defaults to ``get_settings()``.
            tracked_files: Repository-relative paths eligible as failure source.
            sort_key: Optional ordering key for the result tree.

        Returns:
            ParseOptions instance.
        """
        if settings is None:
            settings = get_settings()
        return cls(
            parse_errors=settings.parse_errors,
            tracked_files=frozenset(tracked_files),
            work_dir=settings.work_dir,
            sort_key=sort_key,
        )
