# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for path helpers and filesystem-backed collaborators."""

from __future__ import annotations

from pathlib import Path

import pytest

from dangerlint.filesystem import (
    FileReportDeleter,
    WorkingDirectoryPathProvider,
    base_name,
    is_swift_file,
    is_within_directory,
    read_text_file,
    strip_path_prefix,
)


@pytest.mark.parametrize(
    ("path", "expected"),
    [("App.swift", True), ("Sources/App.swift", True), ("circle.yml", False), ("swift", False)],
)
def test_is_swift_file(path: str, expected: bool) -> None:
    assert is_swift_file(path) is expected


def test_is_within_directory_requires_a_separator() -> None:
    assert is_within_directory("Tests/SomeFile.swift", "Tests")
    assert is_within_directory("Tests/SomeFile.swift", "Tests/")
    assert not is_within_directory("TestsExtra/SomeFile.swift", "Tests")
    assert not is_within_directory("Test Dir/SomeThirdFile.swift", "Tests")


def test_strip_path_prefix_and_base_name() -> None:
    assert strip_path_prefix("/Users/ash/bin/Sources/A.swift", "/Users/ash/bin") == "Sources/A.swift"
    assert strip_path_prefix("/tmp/A.swift", "/Users/ash/bin") == "/tmp/A.swift"
    assert strip_path_prefix("", "/Users/ash/bin") == ""
    assert base_name("/Users/ash/bin/Sources/A.swift") == "A.swift"
    assert base_name("") == ""


def test_read_text_file_returns_empty_for_missing_report(tmp_path: Path) -> None:
    assert read_text_file(str(tmp_path / "missing.json")) == ""

    report = tmp_path / "report.json"
    report.write_text("[]", encoding="utf-8")
    assert read_text_file(str(report)) == "[]"


def test_file_report_deleter_tolerates_missing_file(tmp_path: Path) -> None:
    report = tmp_path / "swiftlintReport.json"
    report.write_text("[]", encoding="utf-8")
    deleter = FileReportDeleter()

    deleter.delete_report(str(report))
    deleter.delete_report(str(report))

    assert not report.exists()


def test_working_directory_provider(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    assert WorkingDirectoryPathProvider(tmp_path).current_path == str(tmp_path.resolve())

    monkeypatch.chdir(tmp_path)
    assert WorkingDirectoryPathProvider().current_path == str(tmp_path.resolve())
