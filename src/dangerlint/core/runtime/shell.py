# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Subprocess-backed :class:`ShellRunner` implementation."""

from __future__ import annotations

import logging
import os
import shlex
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from pathlib import Path

from ...interfaces import ShellResult, ShellRunner
from .process import CommandOptions, run_command

LOGGER = logging.getLogger(__name__)


def split_command_line(command: str, arguments: Sequence[str]) -> list[str]:
    """Tokenise ``command`` and ``arguments`` the way a POSIX shell would.

    Arguments such as ``--config "My Config.yml"`` carry their own quoting, so
    the joined command line is split with :func:`shlex.split` rather than
    passed through a shell.

    Args:
        command: Executable path; quoted so spaces in it are preserved.
        arguments: Arguments that may embed double-quoted values.

    Returns:
        list[str]: Argument vector suitable for :func:`run_command`.
    """

    return shlex.split(" ".join([shlex.quote(command), *arguments]))


@dataclass(slots=True)
class SubprocessShellRunner(ShellRunner):
    """Run commands as child processes with an extended environment."""

    cwd: Path | None = None

    def run(
        self,
        command: str,
        arguments: Sequence[str],
        environment: Mapping[str, str],
        output_file: str | None = None,
    ) -> ShellResult:
        """Execute ``command`` without raising on a non-zero exit status.

        Args:
            command: Executable to launch. Relative paths with a directory
                part are resolved against :attr:`cwd`.
            arguments: Arguments using the quoted-value convention.
            environment: Variables layered over :data:`os.environ`.
            output_file: Optional file receiving standard output.

        Returns:
            ShellResult: Captured standard output and exit status.
        """

        executable = command
        command_path = Path(command)
        if self.cwd is not None and not command_path.is_absolute() and len(command_path.parts) > 1:
            executable = str(self.cwd / command_path)
        argv = split_command_line(executable, arguments)
        env = {**os.environ, **environment}
        stdout_path = Path(output_file) if output_file is not None else None
        if stdout_path is not None and self.cwd is not None and not stdout_path.is_absolute():
            stdout_path = self.cwd / stdout_path
        options = CommandOptions(
            cwd=self.cwd,
            env=env,
            check=False,
            capture_output=True,
            stdout_path=stdout_path,
        )
        completed = run_command(argv, options=options)
        if completed.stderr:
            LOGGER.debug("%s stderr: %s", command, completed.stderr.strip())
        return ShellResult(stdout=completed.stdout or "", returncode=completed.returncode)


__all__ = ["SubprocessShellRunner", "split_command_line"]
