# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for the subprocess-backed shell runner."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

from dangerlint.core.runtime.process import CommandOptions, SubprocessExecutionError, run_command
from dangerlint.core.runtime.shell import SubprocessShellRunner, split_command_line


def test_split_command_line_honours_embedded_quotes() -> None:
    argv = split_command_line(
        "/opt/Swift Lint/swiftlint",
        ["lint", "--reporter json", '--config "My Config.yml"'],
    )

    assert argv == ["/opt/Swift Lint/swiftlint", "lint", "--reporter", "json", "--config", "My Config.yml"]


def test_runner_writes_stdout_to_output_file(tmp_path: Path) -> None:
    runner = SubprocessShellRunner(cwd=tmp_path)
    script = "import os, sys; print(os.environ['SCRIPT_INPUT_FILE_0']); sys.exit(2)"

    result = runner.run(
        sys.executable,
        ["-c", f'"{script}"'],
        {"SCRIPT_INPUT_FILE_0": "Test Dir/A.swift"},
        "report.json",
    )

    assert result.returncode == 2
    assert not result.succeeded
    assert (tmp_path / "report.json").read_text(encoding="utf-8").strip() == "Test Dir/A.swift"


def test_runner_captures_stdout_without_output_file(tmp_path: Path) -> None:
    result = SubprocessShellRunner(cwd=tmp_path).run(sys.executable, ["-c", '"print(42)"'], {})

    assert result.succeeded
    assert result.stdout.strip() == "42"


def test_missing_executable_raises() -> None:
    with pytest.raises(FileNotFoundError):
        SubprocessShellRunner().run("definitely-not-a-real-swiftlint", ["lint"], {})


def test_run_command_check_raises_on_failure() -> None:
    with pytest.raises(SubprocessExecutionError) as excinfo:
        run_command(
            [sys.executable, "-c", "import sys; sys.exit(3)"],
            options=CommandOptions(capture_output=True),
        )

    assert excinfo.value.returncode == 3


def test_relative_executable_resolves_against_runner_cwd(
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    repo = tmp_path / "repo"
    tool = repo / "Pods" / "SwiftLint" / "swiftlint"
    tool.parent.mkdir(parents=True)
    tool.write_text(f"#!{sys.executable}\nprint('[]')\n", encoding="utf-8")
    tool.chmod(0o755)
    elsewhere = tmp_path / "elsewhere"
    elsewhere.mkdir()
    monkeypatch.chdir(elsewhere)

    result = SubprocessShellRunner(cwd=repo).run("Pods/SwiftLint/swiftlint", ["lint"], {}, "swiftlintReport.json")

    assert result.succeeded
    assert (repo / "swiftlintReport.json").read_text(encoding="utf-8").strip() == "[]"
