# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""CLI command running SwiftLint over the current Git changeset."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Annotated

import typer

from ..changeset import Changeset
from ..config import DEFAULT_REPORT_PATH, DEFAULT_SWIFTLINT_PATH, ConfigError, LintConfig, OutputConfig
from ..core.logging import configure_library_logging
from ..core.runtime.shell import SubprocessShellRunner
from ..core.severity import Classification, classify
from ..discovery.git import GitChangesetConfig, GitChangesetDiscovery
from ..filesystem.reports import WorkingDirectoryPathProvider
from ..interfaces import ShellRunner
from ..lint import LintContext, lint
from ..parsers import ViolationDecodeError
from ..results import DangerResults
from ..selection import AllFiles, Files, LintStyle, ModifiedAndCreatedFiles
from .shared import CLIError, CLILogger, build_cli_logger

DEBUG_ENVIRONMENT_VARIABLE = "DEBUG"


def build_lint_style(*, all_files: bool, directory: str | None, files: list[str]) -> LintStyle:
    """Translate CLI selection flags into a :data:`LintStyle`.

    Args:
        all_files: Whether SwiftLint should discover files itself.
        directory: Optional directory scoping the selection.
        files: Explicit files requested on the command line.

    Returns:
        LintStyle: Selection policy matching the flags.

    Raises:
        ConfigError: If the flags describe conflicting policies.
    """

    if files and (all_files or directory is not None):
        raise ConfigError("--file cannot be combined with --all or --directory")
    if all_files:
        return AllFiles(directory=directory)
    if files:
        return Files(paths=tuple(files))
    return ModifiedAndCreatedFiles(directory=directory)


def discover_changeset(root: Path, *, base_ref: str) -> Changeset:
    """Return the Git changeset of ``root`` relative to ``base_ref``."""

    return GitChangesetDiscovery().discover(GitChangesetConfig(base_ref=base_ref), root)


def build_shell(root: Path) -> ShellRunner:
    """Return the runner used to launch SwiftLint from ``root``."""

    return SubprocessShellRunner(cwd=root)


def emit_results(results: DangerResults, logger: CLILogger) -> None:
    """Render recorded inline annotations and markdown on the console."""

    for annotation in results.warnings:
        logger.warn(f"{annotation.file}:{annotation.line}: {annotation.message}")
    for annotation in results.fails:
        logger.fail(f"{annotation.file}:{annotation.line}: {annotation.message}")
    for markdown in results.markdowns:
        logger.markdown(markdown)


def lint_command(
    swiftlint_path: Annotated[
        str,
        typer.Option("--swiftlint-path", help="SwiftLint executable to run."),
    ] = DEFAULT_SWIFTLINT_PATH,
    config_file: Annotated[
        str | None,
        typer.Option("--config", help="SwiftLint configuration file."),
    ] = None,
    strict: Annotated[bool, typer.Option("--strict", help="Report every violation as a failure.")] = False,
    quiet: Annotated[bool, typer.Option("--quiet", help="Pass --quiet to SwiftLint.")] = False,
    inline: Annotated[bool, typer.Option("--inline", help="Report violations inline where possible.")] = False,
    all_files: Annotated[bool, typer.Option("--all", help="Let SwiftLint discover files itself.")] = False,
    directory: Annotated[
        str | None,
        typer.Option("--directory", help="Only lint files below this directory."),
    ] = None,
    files: Annotated[
        list[str] | None,
        typer.Option("--file", help="Lint only these changed files (repeatable)."),
    ] = None,
    base_ref: Annotated[str, typer.Option("--base", help="Git revision to diff against.")] = "HEAD",
    root: Annotated[
        Path,
        typer.Option("--root", help="Repository root.", file_okay=False, dir_okay=True),
    ] = Path(),
    report_out: Annotated[
        str,
        typer.Option("--report-out", help="Where SwiftLint writes its JSON report."),
    ] = DEFAULT_REPORT_PATH,
    results_out: Annotated[
        Path | None,
        typer.Option("--results-out", help="Write review results as JSON to this path."),
    ] = None,
    verbose: Annotated[bool, typer.Option("--verbose", help="Enable debug output.")] = False,
    silent: Annotated[bool, typer.Option("--silent", help="Only print failures.")] = False,
    emoji: Annotated[bool, typer.Option("--emoji/--no-emoji", help="Toggle emoji output.")] = True,
    color: Annotated[bool, typer.Option("--color/--no-color", help="Toggle coloured output.")] = True,
) -> None:
    """Run SwiftLint on the changed Swift files and report the violations.

    Raises:
        typer.Exit: Always raised; status 1 when failures were reported or the
            run could not complete.
    """

    output = OutputConfig(
        verbose=verbose or DEBUG_ENVIRONMENT_VARIABLE in os.environ,
        silent=silent,
        emoji=emoji,
        color=color,
    )
    logger = build_cli_logger(
        emoji=output.emoji,
        debug=output.verbose,
        silent=output.silent,
        no_color=not output.color,
    )
    configure_library_logging(verbose=output.verbose and not output.silent)

    try:
        results, failures = _run(
            root=root.resolve(),
            base_ref=base_ref,
            report_out=report_out,
            config=_build_config(
                swiftlint_path=swiftlint_path,
                config_file=config_file,
                strict=strict,
                quiet=quiet,
                inline=inline,
                all_files=all_files,
                directory=directory,
                files=files or [],
            ),
            logger=logger,
        )
    except CLIError as exc:
        logger.fail(str(exc))
        raise typer.Exit(code=exc.exit_code) from exc

    emit_results(results, logger)
    if results_out is not None:
        results.write(results_out)
        logger.debug(f"results={results_out}")
    if failures:
        logger.fail(f"SwiftLint reported {failures} failure(s)")
        raise typer.Exit(code=1)
    if results.is_empty:
        logger.ok("SwiftLint found no issues")
    raise typer.Exit(code=0)


def _build_config(
    *,
    swiftlint_path: str,
    config_file: str | None,
    strict: bool,
    quiet: bool,
    inline: bool,
    all_files: bool,
    directory: str | None,
    files: list[str],
) -> LintConfig:
    try:
        style = build_lint_style(all_files=all_files, directory=directory, files=files)
    except ConfigError as exc:
        raise CLIError(str(exc)) from exc
    return LintConfig(
        swiftlint_path=swiftlint_path,
        lint_style=style,
        config_file=config_file,
        strict=strict,
        quiet=quiet,
        inline=inline,
    )


def _run(
    *,
    root: Path,
    base_ref: str,
    report_out: str,
    config: LintConfig,
    logger: CLILogger,
) -> tuple[DangerResults, int]:
    report_path = Path(report_out)
    if not report_path.is_absolute():
        report_path = root / report_path
    config = config.model_copy(update={"output_file_path": str(report_path)})

    changeset = discover_changeset(root, base_ref=base_ref)
    logger.debug(
        f"created={len(changeset.created)} modified={len(changeset.modified)} deleted={len(changeset.deleted)}",
    )
    results = DangerResults()
    context = LintContext(
        changeset=changeset,
        shell=build_shell(root),
        current_path_provider=WorkingDirectoryPathProvider(root),
        warn_inline=results.warn_inline,
        fail_inline=results.fail_inline,
        markdown=results.markdown,
    )
    try:
        violations = lint(config, context)
    except FileNotFoundError as exc:
        raise CLIError(str(exc)) from exc
    except ViolationDecodeError as exc:
        raise CLIError(f"Could not read the SwiftLint report: {exc}") from exc
    failures = sum(1 for violation in violations if classify(violation, strict=config.strict) is Classification.FAIL)
    logger.debug(f"command={config.swiftlint_path} violations={len(violations)} failures={failures}")
    return results, failures


__all__ = [
    "build_lint_style",
    "build_shell",
    "discover_changeset",
    "emit_results",
    "lint_command",
]
