# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Build and execute the SwiftLint command line."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Final

from .interfaces import FileReader, ShellRunner
from .selection import AllFiles, LintStyle, enumerates_files

LOGGER = logging.getLogger(__name__)

INPUT_FILE_COUNT_VARIABLE: Final[str] = "SCRIPT_INPUT_FILE_COUNT"
INPUT_FILE_VARIABLE_PREFIX: Final[str] = "SCRIPT_INPUT_FILE_"
_LINT_SUBCOMMAND: Final[str] = "lint"
_JSON_REPORTER: Final[str] = "--reporter json"
_QUIET_FLAG: Final[str] = "--quiet"
_SCRIPT_INPUT_FLAGS: Final[tuple[str, ...]] = ("--use-script-input-files", "--force-exclude")


def quote_argument(value: str) -> str:
    """Wrap ``value`` in double quotes for the shell-style argument contract."""

    return f'"{value}"'


def build_arguments(style: LintStyle, *, config_file: str | None = None, quiet: bool = False) -> list[str]:
    """Return the SwiftLint arguments for a single run.

    Option values are embedded in the same argument as their flag and wrapped
    in double quotes (``--config "path"``) so paths with spaces survive the
    shell-style tokenisation performed by the runner.

    Args:
        style: Selection policy that decides between script input files and
            directory scanning.
        config_file: Optional SwiftLint configuration file.
        quiet: Whether SwiftLint should suppress status logging.

    Returns:
        list[str]: Arguments passed to the SwiftLint executable.
    """

    arguments = [_LINT_SUBCOMMAND, _JSON_REPORTER]
    if quiet:
        arguments.append(_QUIET_FLAG)
    if config_file:
        arguments.append(f"--config {quote_argument(config_file)}")
    if isinstance(style, AllFiles):
        if style.directory is not None:
            arguments.append(f"--path {quote_argument(style.directory)}")
    else:
        arguments.extend(_SCRIPT_INPUT_FLAGS)
    return arguments


def build_environment(files: Sequence[str], style: LintStyle) -> dict[str, str]:
    """Return the ``SCRIPT_INPUT_FILE_*`` variables describing ``files``.

    Values are raw paths; quoting only applies to command-line arguments.

    Args:
        files: Ordered files selected for linting.
        style: Selection policy; :class:`AllFiles` never enumerates files.

    Returns:
        dict[str, str]: Environment entries, empty for :class:`AllFiles`.
    """

    if not enumerates_files(style):
        return {}
    environment = {INPUT_FILE_COUNT_VARIABLE: str(len(files))}
    for index, path in enumerate(files):
        environment[f"{INPUT_FILE_VARIABLE_PREFIX}{index}"] = path
    return environment


@dataclass(frozen=True, slots=True)
class SwiftLintInvocation:
    """Fully resolved SwiftLint command ready for execution."""

    executable: str
    arguments: tuple[str, ...]
    environment: dict[str, str]
    output_file: str


@dataclass(frozen=True, slots=True)
class InvocationResult:
    """Outcome of a SwiftLint run alongside the report it wrote."""

    succeeded: bool
    report: str


def prepare_invocation(
    executable: str,
    files: Sequence[str],
    style: LintStyle,
    *,
    output_file: str,
    config_file: str | None = None,
    quiet: bool = False,
) -> SwiftLintInvocation:
    """Assemble the command, arguments, and environment for one SwiftLint run."""

    return SwiftLintInvocation(
        executable=executable,
        arguments=tuple(build_arguments(style, config_file=config_file, quiet=quiet)),
        environment=build_environment(files, style),
        output_file=output_file,
    )


def invoke(invocation: SwiftLintInvocation, *, shell: ShellRunner, read_file: FileReader) -> InvocationResult:
    """Launch SwiftLint once and read the JSON report it wrote.

    A non-zero exit status is reported but never raised; SwiftLint exits
    non-zero whenever it finds serious violations while still writing a
    complete report.

    Args:
        invocation: Prepared command description.
        shell: Runner used to execute the process.
        read_file: Reader used to load the report from ``invocation.output_file``.

    Returns:
        InvocationResult: Exit indicator and report contents.
    """

    LOGGER.debug(
        "Running %s %s with %d environment entries",
        invocation.executable,
        " ".join(invocation.arguments),
        len(invocation.environment),
    )
    result = shell.run(
        invocation.executable,
        list(invocation.arguments),
        dict(invocation.environment),
        invocation.output_file,
    )
    if not result.succeeded:
        LOGGER.debug("%s exited with status %d", invocation.executable, result.returncode)
    return InvocationResult(
        succeeded=result.succeeded,
        report=read_file(invocation.output_file),
    )


__all__ = [
    "INPUT_FILE_COUNT_VARIABLE",
    "INPUT_FILE_VARIABLE_PREFIX",
    "InvocationResult",
    "SwiftLintInvocation",
    "build_arguments",
    "build_environment",
    "invoke",
    "prepare_invocation",
    "quote_argument",
]
