# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""CLI tests for the ``lint`` command."""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path

import pytest
from typer.testing import CliRunner

from dangerlint import __version__
from dangerlint.changeset import Changeset
from dangerlint.cli.app import app
from dangerlint.cli.lint import build_lint_style
from dangerlint.cli.shared import build_cli_logger
from dangerlint.config import ConfigError
from dangerlint.interfaces import ShellResult
from dangerlint.selection import AllFiles, Files, ModifiedAndCreatedFiles
from dangerlint.testing import RecordingShellRunner


@dataclass(slots=True)
class ReportWritingShell(RecordingShellRunner):
    """Record invocations and write a canned report to the output file."""

    payload: str = "[]"

    def run(self, command, arguments, environment, output_file=None) -> ShellResult:
        if output_file is not None:
            Path(output_file).write_text(self.payload, encoding="utf-8")
        return RecordingShellRunner.run(self, command, arguments, environment, output_file)


def _violation(severity: str, path: Path, line: int) -> dict[str, object]:
    return {
        "rule_id": "line_length",
        "reason": "Line should be 120 characters or less",
        "character": None,
        "file": str(path),
        "severity": severity,
        "type": "Line Length",
        "line": line,
    }


@pytest.fixture
def patched(monkeypatch: pytest.MonkeyPatch):
    def install(changeset: Changeset, payload: str = "[]") -> RecordingShellRunner:
        shell = ReportWritingShell(payload=payload)
        monkeypatch.setattr("dangerlint.cli.lint.discover_changeset", lambda root, *, base_ref: changeset)
        monkeypatch.setattr("dangerlint.cli.lint.build_shell", lambda root: shell)
        return shell

    return install


def test_version_option() -> None:
    result = CliRunner().invoke(app, ["--version"])

    assert result.exit_code == 0
    assert __version__ in result.stdout


def test_lint_reports_no_issues(tmp_path: Path, patched) -> None:
    shell = patched(Changeset(modified=("Sources/A.swift",)))

    result = CliRunner().invoke(app, ["lint", "--root", str(tmp_path), "--no-emoji"])

    assert result.exit_code == 0
    assert "SwiftLint found no issues" in result.stdout
    (invocation,) = shell.invocations
    assert invocation.command == "swiftlint"
    assert invocation.output_file == str(tmp_path.resolve() / "swiftlintReport.json")
    assert invocation.environment == {"SCRIPT_INPUT_FILE_COUNT": "1", "SCRIPT_INPUT_FILE_0": "Sources/A.swift"}


def test_lint_fails_on_errors_and_writes_results(tmp_path: Path, patched) -> None:
    root = tmp_path.resolve()
    payload = json.dumps([_violation("Error", root / "Sources" / "A.swift", 3)])
    patched(Changeset(modified=("Sources/A.swift",)), payload)
    results_path = tmp_path / "out" / "results.json"

    result = CliRunner().invoke(
        app,
        ["lint", "--root", str(tmp_path), "--inline", "--results-out", str(results_path), "--no-emoji"],
    )

    assert result.exit_code == 1
    written = json.loads(results_path.read_text(encoding="utf-8"))
    assert written["fails"] == [
        {"message": "Line should be 120 characters or less (`line_length`)", "file": "Sources/A.swift", "line": 3},
    ]
    assert written["markdowns"] == []


def test_lint_warnings_exit_zero_unless_strict(tmp_path: Path, patched) -> None:
    root = tmp_path.resolve()
    payload = json.dumps([_violation("Warning", root / "Sources" / "A.swift", 3)])
    changeset = Changeset(modified=("Sources/A.swift",))

    patched(changeset, payload)
    relaxed = CliRunner().invoke(app, ["lint", "--root", str(tmp_path), "--no-emoji"])
    patched(changeset, payload)
    strict = CliRunner().invoke(app, ["lint", "--root", str(tmp_path), "--strict", "--no-emoji"])

    assert relaxed.exit_code == 0
    assert strict.exit_code == 1


def test_lint_rejects_conflicting_selection(tmp_path: Path, patched) -> None:
    shell = patched(Changeset(modified=("Sources/A.swift",)))

    result = CliRunner().invoke(
        app,
        ["lint", "--root", str(tmp_path), "--all", "--file", "Sources/A.swift", "--no-emoji"],
    )

    assert result.exit_code == 1
    assert shell.invocations == []


def test_lint_reports_malformed_report(tmp_path: Path, patched) -> None:
    patched(Changeset(modified=("Sources/A.swift",)), "{not json")

    result = CliRunner().invoke(app, ["lint", "--root", str(tmp_path), "--no-emoji"])

    assert result.exit_code == 1


def test_build_lint_style() -> None:
    assert build_lint_style(all_files=False, directory=None, files=[]) == ModifiedAndCreatedFiles()
    assert build_lint_style(all_files=True, directory="Tests", files=[]) == AllFiles(directory="Tests")
    assert build_lint_style(all_files=False, directory=None, files=["a.swift"]) == Files(paths=("a.swift",))
    with pytest.raises(ConfigError):
        build_lint_style(all_files=False, directory="Tests", files=["a.swift"])


def test_build_cli_logger_honours_no_color() -> None:
    plain = build_cli_logger(emoji=False, no_color=True)
    default = build_cli_logger(emoji=False)

    assert plain.console.no_color
    assert plain.use_color is False
    assert default.use_color is None


def test_lint_accepts_no_color(tmp_path: Path, patched) -> None:
    patched(Changeset(modified=("Sources/A.swift",)))

    result = CliRunner().invoke(app, ["lint", "--root", str(tmp_path), "--no-color", "--no-emoji"])

    assert result.exit_code == 0
    assert "\x1b[" not in result.stdout
