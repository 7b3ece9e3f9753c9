# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Changeset models describing the files touched by a pull request."""

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping
from typing import Final

from pydantic import BaseModel, ConfigDict, Field

_HUNK_HEADER: Final[re.Pattern[str]] = re.compile(
    r"^@@ -\d+(?:,(?P<old_count>\d+))? \+(?P<new_start>\d+)(?:,(?P<new_count>\d+))? @@",
)
_ADDED_PREFIX: Final[str] = "+"
_REMOVED_PREFIX: Final[str] = "-"
_NO_NEWLINE_MARKER: Final[str] = "\\"


class FileDiff(BaseModel):
    """Line-level diff of a single file in the new revision."""

    model_config = ConfigDict(frozen=True)

    changed_lines: frozenset[int] = Field(default_factory=frozenset)

    def contains_line(self, line: int) -> bool:
        """Return ``True`` when ``line`` was added or modified."""

        return line in self.changed_lines

    @classmethod
    def from_unified_diff(cls, diff: str | Iterable[str]) -> FileDiff:
        """Build a diff from unified diff text for a single file.

        Args:
            diff: Unified diff as text or as an iterable of lines.

        Returns:
            FileDiff: Diff recording the new-file numbers of every added line.
        """

        return cls(changed_lines=frozenset(parse_changed_lines(diff)))


def parse_changed_lines(diff: str | Iterable[str]) -> list[int]:
    """Return new-file line numbers of lines added by a unified diff.

    Args:
        diff: Unified diff as text or an iterable of lines.

    Returns:
        list[int]: Added line numbers in the order they appear.
    """

    lines = diff.splitlines() if isinstance(diff, str) else diff
    changed: list[int] = []
    cursor = 0
    old_remaining = 0
    new_remaining = 0
    for raw_line in lines:
        if old_remaining <= 0 and new_remaining <= 0:
            header = _HUNK_HEADER.match(raw_line)
            if header:
                cursor = int(header.group("new_start"))
                old_remaining = _hunk_length(header.group("old_count"))
                new_remaining = _hunk_length(header.group("new_count"))
            continue
        if raw_line.startswith(_NO_NEWLINE_MARKER):
            continue
        if raw_line.startswith(_ADDED_PREFIX):
            changed.append(cursor)
            cursor += 1
            new_remaining -= 1
        elif raw_line.startswith(_REMOVED_PREFIX):
            old_remaining -= 1
        else:
            cursor += 1
            old_remaining -= 1
            new_remaining -= 1
    return changed


def _hunk_length(count: str | None) -> int:
    return 1 if count is None else int(count)


class Changeset(BaseModel):
    """Immutable description of the files created, modified, and deleted by a review."""

    model_config = ConfigDict(frozen=True)

    created: tuple[str, ...] = ()
    modified: tuple[str, ...] = ()
    deleted: tuple[str, ...] = ()
    diffs: Mapping[str, FileDiff] = Field(default_factory=dict)

    @property
    def lintable_files(self) -> list[str]:
        """Return created files followed by modified files."""

        return [*self.created, *self.modified]

    def touches(self, path: str) -> bool:
        """Return ``True`` when ``path`` was created or modified."""

        return path in self.created or path in self.modified

    def diff_for(self, path: str) -> FileDiff | None:
        """Return the line diff recorded for ``path`` if one is known."""

        return self.diffs.get(path)


__all__ = ["Changeset", "FileDiff", "parse_changed_lines"]
