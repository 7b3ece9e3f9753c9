# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Render violations as a consolidated markdown table."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Final

from ..core.models import Violation
from ..core.severity import classify
from ..interfaces import MarkdownAction

MARKDOWN_TITLE: Final[str] = "### SwiftLint found issues"
TABLE_HEADER: Final[str] = "| Severity | File | Reason |"
TABLE_DIVIDER: Final[str] = "| -------- | ---- | ------ |"


def format_location(violation: Violation) -> str:
    """Return ``<file name>:<line>``, or ``""`` when the violation has no file."""

    if not violation.file:
        return ""
    return f"{violation.file_name}:{violation.line}"


def format_row(violation: Violation, *, strict: bool) -> str:
    """Return the table row for ``violation``.

    Args:
        violation: Violation to render.
        strict: Whether strict mode escalates the displayed severity.

    Returns:
        str: Row in ``<Severity> | <file>:<line> | <message> |`` form.
    """

    label = classify(violation, strict=strict).label
    return f"{label} | {format_location(violation)} | {violation.message_text} |"


def render_markdown(violations: Sequence[Violation], *, strict: bool) -> str | None:
    """Return the markdown report for ``violations``.

    Args:
        violations: Violations in report order.
        strict: Whether strict mode escalates the displayed severity.

    Returns:
        str | None: The report, or ``None`` when there is nothing to report.
    """

    if not violations:
        return None
    lines = [MARKDOWN_TITLE, "", TABLE_HEADER, TABLE_DIVIDER]
    lines.extend(format_row(violation, strict=strict) for violation in violations)
    return "\n".join(lines)


def report_markdown(violations: Sequence[Violation], *, strict: bool, markdown: MarkdownAction) -> bool:
    """Send the markdown report to ``markdown`` when violations exist.

    Args:
        violations: Violations in report order.
        strict: Whether strict mode escalates the displayed severity.
        markdown: Callback receiving the rendered report.

    Returns:
        bool: ``True`` when the callback was invoked.
    """

    rendered = render_markdown(violations, strict=strict)
    if rendered is None:
        return False
    markdown(rendered)
    return True


__all__ = [
    "MARKDOWN_TITLE",
    "TABLE_DIVIDER",
    "TABLE_HEADER",
    "format_location",
    "format_row",
    "render_markdown",
    "report_markdown",
]
