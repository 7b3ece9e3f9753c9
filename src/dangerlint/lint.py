# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""End-to-end SwiftLint review pipeline."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from .changeset import Changeset
from .config import LintConfig
from .core.models import Violation
from .core.runtime.shell import SubprocessShellRunner
from .filesystem.reports import FileReportDeleter, WorkingDirectoryPathProvider, read_text_file
from .interfaces import CurrentPathProvider, FileReader, InlineAction, MarkdownAction, ReportDeleter, ShellRunner
from .invoker import invoke, prepare_invocation
from .parsers import decode_violations
from .reporting.inline import InlineActions, report_inline
from .reporting.markdown import report_markdown
from .selection import enumerates_files, select_files

LOGGER = logging.getLogger(__name__)


def _ignore_inline(message: str, file: str, line: int) -> None:
    del message, file, line


def _ignore_markdown(markdown: str) -> None:
    del markdown


@dataclass(slots=True)
class LintContext:
    """Collaborators used by :func:`lint` for one review run."""

    changeset: Changeset
    shell: ShellRunner = field(default_factory=SubprocessShellRunner)
    read_file: FileReader = read_text_file
    report_deleter: ReportDeleter = field(default_factory=FileReportDeleter)
    current_path_provider: CurrentPathProvider = field(default_factory=WorkingDirectoryPathProvider)
    warn_inline: InlineAction = _ignore_inline
    fail_inline: InlineAction = _ignore_inline
    markdown: MarkdownAction = _ignore_markdown


def _delete_previous_report(path: str, deleter: ReportDeleter) -> None:
    try:
        deleter.delete_report(path)
    except Exception as exc:  # noqa: BLE001 - best-effort cleanup
        LOGGER.debug("Could not delete previous report %s: %s", path, exc)


def lint(config: LintConfig, context: LintContext) -> list[Violation]:
    """Run SwiftLint over the review changeset and report its findings.

    Reporting happens through the callbacks of ``context``: inline mode emits
    one warn/fail annotation per anchorable violation and summarises the rest
    in markdown, markdown mode emits a single table. Nothing is reported when
    SwiftLint finds no violations.

    Args:
        config: Invocation and reporting settings.
        context: Changeset and collaborators for this run.

    Returns:
        list[Violation]: Every decoded violation, in report order, regardless
        of how they were reported.

    Raises:
        ViolationDecodeError: If the report SwiftLint wrote cannot be decoded.
    """

    _delete_previous_report(config.output_file_path, context.report_deleter)

    style = config.lint_style
    files = select_files(context.changeset, style)
    if enumerates_files(style) and not files:
        LOGGER.debug("No Swift files to lint; skipping SwiftLint")
        return []

    invocation = prepare_invocation(
        config.swiftlint_path,
        files,
        style,
        output_file=config.output_file_path,
        config_file=config.config_file,
        quiet=config.quiet,
    )
    result = invoke(invocation, shell=context.shell, read_file=context.read_file)
    violations = decode_violations(result.report)
    LOGGER.debug("SwiftLint reported %d violation(s)", len(violations))

    remaining = violations
    if config.inline:
        remaining = report_inline(
            violations,
            changeset=context.changeset,
            current_path=context.current_path_provider.current_path,
            strict=config.strict,
            actions=InlineActions(warn=context.warn_inline, fail=context.fail_inline),
        )
    report_markdown(remaining, strict=config.strict, markdown=context.markdown)
    return violations


__all__ = ["LintContext", "lint"]
