# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""In-memory collaborators for exercising the lint pipeline without I/O."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field

from ..interfaces import CurrentPathProvider, ReportDeleter, ShellResult, ShellRunner


@dataclass(frozen=True, slots=True)
class ShellInvocation:
    """Arguments received by :meth:`RecordingShellRunner.run`."""

    command: str
    arguments: tuple[str, ...]
    environment: dict[str, str]
    output_file: str | None


@dataclass(slots=True)
class RecordingShellRunner(ShellRunner):
    """Shell runner that records invocations instead of launching processes."""

    result: ShellResult = field(default_factory=ShellResult)
    invocations: list[ShellInvocation] = field(default_factory=list)

    def run(
        self,
        command: str,
        arguments: Sequence[str],
        environment: Mapping[str, str],
        output_file: str | None = None,
    ) -> ShellResult:
        """Record the call and return the configured :attr:`result`."""

        self.invocations.append(
            ShellInvocation(
                command=command,
                arguments=tuple(arguments),
                environment=dict(environment),
                output_file=output_file,
            ),
        )
        return self.result

    def invocations_of(self, command: str) -> list[ShellInvocation]:
        """Return the recorded invocations of ``command``."""

        return [invocation for invocation in self.invocations if invocation.command == command]


@dataclass(slots=True)
class FakeCurrentPathProvider(CurrentPathProvider):
    """Current path provider returning a fixed directory."""

    path: str = "/"

    @property
    def current_path(self) -> str:
        """Return the configured directory."""

        return self.path


@dataclass(slots=True)
class SpyReportDeleter(ReportDeleter):
    """Report deleter remembering the paths it was asked to delete."""

    error: Exception | None = None
    received_paths: list[str] = field(default_factory=list)

    def delete_report(self, path: str) -> None:
        """Record ``path`` and raise the configured error, if any."""

        self.received_paths.append(path)
        if self.error is not None:
            raise self.error


@dataclass(slots=True)
class StaticReportReader:
    """File reader returning a fixed payload and recording requested paths."""

    payload: str = "[]"
    requested_paths: list[str] = field(default_factory=list)

    def __call__(self, path: str) -> str:
        """Return :attr:`payload` for any ``path``."""

        self.requested_paths.append(path)
        return self.payload


__all__ = [
    "FakeCurrentPathProvider",
    "RecordingShellRunner",
    "ShellInvocation",
    "SpyReportDeleter",
    "StaticReportReader",
]
