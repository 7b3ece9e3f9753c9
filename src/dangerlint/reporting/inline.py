# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Emit violations as file and line anchored review comments."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from ..changeset import Changeset
from ..core.models import Violation
from ..core.severity import Classification, classify
from ..interfaces import InlineAction


def is_anchorable(changeset: Changeset, path: str, line: int) -> bool:
    """Return whether a comment at ``path``:``line`` can be attached to the diff.

    The file must be created or modified by the changeset. When the changeset
    carries a line diff for the file, ``line`` must also be one of its changed
    lines; files without diff information accept any line.

    Args:
        changeset: Files touched by the review.
        path: Repository-relative path of the violation.
        line: Line number reported by the linter.

    Returns:
        bool: ``True`` when an inline comment can be placed.
    """

    if not path or not changeset.touches(path):
        return False
    diff = changeset.diff_for(path)
    return diff is None or diff.contains_line(line)


@dataclass(frozen=True, slots=True)
class InlineActions:
    """Callbacks receiving inline warnings and failures."""

    warn: InlineAction
    fail: InlineAction

    def dispatch(self, classification: Classification, message: str, path: str, line: int) -> None:
        """Route one annotation to the callback matching ``classification``."""

        target = self.fail if classification is Classification.FAIL else self.warn
        target(message, path, line)


def report_inline(
    violations: Sequence[Violation],
    *,
    changeset: Changeset,
    current_path: str,
    strict: bool,
    actions: InlineActions,
) -> list[Violation]:
    """Emit one inline annotation per anchorable violation.

    Args:
        violations: Violations in report order.
        changeset: Files touched by the review.
        current_path: Directory SwiftLint reported absolute paths against.
        strict: Whether every violation is reported as a failure.
        actions: Warn and fail callbacks.

    Returns:
        list[Violation]: Violations that could not be anchored, in report
        order, for the caller to render in the markdown summary.
    """

    unanchored: list[Violation] = []
    for violation in violations:
        path = violation.relative_file(current_path)
        if not is_anchorable(changeset, path, violation.line):
            unanchored.append(violation)
            continue
        actions.dispatch(classify(violation, strict=strict), violation.message_text, path, violation.line)
    return unanchored


__all__ = ["InlineActions", "is_anchorable", "report_inline"]
