# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Filesystem-backed implementations of the report collaborators."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from ..interfaces import CurrentPathProvider, ReportDeleter


def read_text_file(path: str) -> str:
    """Return the UTF-8 contents of ``path``.

    Args:
        path: Report file written by the linter.

    Returns:
        str: File contents, or ``""`` when the file was never produced.
    """

    report = Path(path)
    if not report.exists():
        return ""
    return report.read_text(encoding="utf-8")


class FileReportDeleter(ReportDeleter):
    """Unlink stale reports, treating a missing file as already deleted."""

    def delete_report(self, path: str) -> None:
        """Delete the report at ``path`` if present.

        Args:
            path: Location of the report file.

        Raises:
            OSError: When the file exists but cannot be removed.
        """

        Path(path).unlink(missing_ok=True)


@dataclass(slots=True)
class WorkingDirectoryPathProvider(CurrentPathProvider):
    """Report the process working directory, or a fixed ``root`` when given."""

    root: Path | None = None

    @property
    def current_path(self) -> str:
        """Return the absolute working directory as a string."""

        base = self.root if self.root is not None else Path.cwd()
        return str(base.resolve())


__all__ = [
    "FileReportDeleter",
    "WorkingDirectoryPathProvider",
    "read_text_file",
]
