# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Helpers for reasoning about changeset and report paths.

Changeset paths are repository-relative POSIX strings while SwiftLint reports
absolute paths. The helpers here operate on plain strings so that both kinds
compare the way the review host expects, without touching the filesystem.
"""

from __future__ import annotations

from pathlib import PurePosixPath
from typing import Final

SWIFT_SUFFIX: Final[str] = ".swift"
_SEPARATOR: Final[str] = "/"


def is_swift_file(path: str) -> bool:
    """Return ``True`` when ``path`` names a Swift source file.

    Args:
        path: Repository-relative path from the changeset.

    Returns:
        bool: ``True`` when the path ends with ``.swift``.
    """

    return path.endswith(SWIFT_SUFFIX)


def normalize_directory(directory: str) -> str:
    """Return ``directory`` without trailing separators."""

    return directory.rstrip(_SEPARATOR)


def is_within_directory(path: str, directory: str) -> bool:
    """Return whether ``path`` lives under ``directory``.

    The comparison ignores trailing slashes on ``directory`` so ``"Tests"`` and
    ``"Tests/"`` select the same files, while ``"TestsExtra/a.swift"`` is not
    considered part of ``"Tests"``.

    Args:
        path: Repository-relative file path.
        directory: Directory prefix used to scope selection.

    Returns:
        bool: ``True`` when the path is located below ``directory``.
    """

    prefix = normalize_directory(directory)
    if not prefix:
        return True
    return path.startswith(prefix + _SEPARATOR)


def strip_path_prefix(path: str, prefix: str) -> str:
    """Return ``path`` relative to ``prefix`` when it starts with it.

    Args:
        path: Path reported by the linter, usually absolute.
        prefix: Directory the linter was executed from.

    Returns:
        str: ``path`` with ``prefix`` and the joining separator removed, or the
        original value when it does not start with ``prefix``.
    """

    base = normalize_directory(prefix)
    if not base or not path:
        return path
    return path.removeprefix(base + _SEPARATOR)


def base_name(path: str) -> str:
    """Return the final component of ``path`` or ``""`` for empty input."""

    if not path:
        return ""
    return PurePosixPath(path).name


__all__ = [
    "SWIFT_SUFFIX",
    "base_name",
    "is_swift_file",
    "is_within_directory",
    "normalize_directory",
    "strip_path_prefix",
]
