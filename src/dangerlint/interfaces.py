# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Interfaces for the collaborators the lint pipeline depends on."""

from __future__ import annotations

from abc import abstractmethod
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass
from typing import Protocol, TypeAlias, runtime_checkable

FileReader: TypeAlias = Callable[[str], str]
InlineAction: TypeAlias = Callable[[str, str, int], None]
MarkdownAction: TypeAlias = Callable[[str], None]


@dataclass(frozen=True, slots=True)
class ShellResult:
    """Output captured from an external command."""

    stdout: str = ""
    returncode: int = 0

    @property
    def succeeded(self) -> bool:
        """Return ``True`` when the command exited with status zero."""

        return self.returncode == 0


@runtime_checkable
class ShellRunner(Protocol):
    """Execute an external command on behalf of the pipeline."""

    @abstractmethod
    def run(
        self,
        command: str,
        arguments: Sequence[str],
        environment: Mapping[str, str],
        output_file: str | None = None,
    ) -> ShellResult:
        """Run ``command`` with ``arguments`` and extra ``environment`` entries.

        Args:
            command: Executable to launch.
            arguments: Command-line arguments; quoted values are kept verbatim.
            environment: Variables added to the inherited process environment.
            output_file: Optional path receiving the command's standard output.

        Returns:
            ShellResult: Captured standard output and the exit status.
        """


@runtime_checkable
class ReportDeleter(Protocol):
    """Remove the linter report left over from a previous run."""

    @abstractmethod
    def delete_report(self, path: str) -> None:
        """Delete the report stored at ``path``.

        Args:
            path: Location of the report file.

        Raises:
            OSError: When the report exists but cannot be removed.
        """


@runtime_checkable
class CurrentPathProvider(Protocol):
    """Expose the working directory absolute violation paths are relative to."""

    @property
    @abstractmethod
    def current_path(self) -> str:
        """Return the absolute path of the current working directory."""


__all__ = [
    "CurrentPathProvider",
    "FileReader",
    "InlineAction",
    "MarkdownAction",
    "ReportDeleter",
    "ShellResult",
    "ShellRunner",
]
