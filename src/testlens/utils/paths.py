"""Helpers for comparing file paths reported by different platforms."""

from __future__ import annotations

from collections.abc import Iterable


def normalize_file_path(path: str) -> str:
    """Trim whitespace and convert Windows separators to forward slashes."""
    if not path:
        return path
    return path.strip().replace("\\", "/")


def normalize_dir_path(path: str, add_trailing_slash: bool) -> str:
    """Normalize a directory path, optionally ensuring a trailing slash."""
    if not path:
        return path
    path = normalize_file_path(path)
    if add_trailing_slash and not path.endswith("/"):
        path += "/"
    return path


def get_base_path(path: str, tracked_files: Iterable[str]) -> str | None:
    """Find the directory prefix that turns ``path`` into a tracked file.

    The longest tracked file that ``path`` ends with, on a directory
    boundary, wins, so
    ``/repo/src/Foo.cs`` against ``{"src/Foo.cs", "Foo.cs"}`` yields
    ``/repo/``.

    Args:
        path: Normalized absolute or relative file path.
        tracked_files: Normalized repository-relative file paths.

    Returns:
        The prefix to strip, ``""`` when ``path`` is itself tracked, or
        None when no tracked file matches.
    """
    tracked_files = list(tracked_files)
    if path in tracked_files:
        return ""

    longest = ""
    for file in tracked_files:
        # Match whole path segments: /repo/libsrc/Foo.cs is not src/Foo.cs
        if path.endswith("/" + file) and len(file) > len(longest):
            longest = file

    if not longest:
        return None
    return path[: len(path) - len(longest)]
