# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

import pytest

from dangerlint.changeset import Changeset
from dangerlint.testing import FakeCurrentPathProvider, RecordingShellRunner, SpyReportDeleter

VIOLATION_JSON = """
[
    {
        "rule_id" : "opening_brace",
        "reason" : "Opening braces should be preceded by a single space and on the same line as the declaration.",
        "character" : 39,
        "file" : "/Users/ash/bin/SomeFile.swift",
        "severity" : "Warning",
        "type" : "Opening Brace Spacing",
        "line" : 8
    },
    {
        "rule_id" : "line_length",
        "reason" : "Line should be 120 characters or less: currently 211 characters",
        "character" : null,
        "file" : "/Users/ash/bin/AnotherFile.swift",
        "severity" : "Error",
        "type" : "Line Length",
        "line" : 10
    }
]
"""

VIOLATION_JSON_WITHOUT_FILE = """
[
    {
        "rule_id" : "opening_brace",
        "reason" : "Opening braces should be preceded by a single space and on the same line as the declaration.",
        "character" : 39,
        "severity" : "Warning",
        "file" : "",
        "type" : "Opening Brace Spacing",
        "line" : 0
    }
]
"""


@pytest.fixture
def shell() -> RecordingShellRunner:
    """Return a shell runner that records invocations."""
    return RecordingShellRunner()


@pytest.fixture
def path_provider() -> FakeCurrentPathProvider:
    """Return a path provider rooted where the fixture reports live."""
    return FakeCurrentPathProvider(path="/Users/ash/bin")


@pytest.fixture
def report_deleter() -> SpyReportDeleter:
    """Return a report deleter recording the paths it receives."""
    return SpyReportDeleter()


@pytest.fixture
def changeset() -> Changeset:
    """Return a review changeset touching Swift and non-Swift files."""
    return Changeset(
        created=("SomeFile.swift", "docs/README.md"),
        modified=("AnotherFile.swift", "Harvey/Kit.swift", "circle.yml"),
        deleted=("Old.swift",),
    )


@pytest.fixture
def violation_report() -> str:
    """Return a SwiftLint JSON report with one warning and one error."""
    return VIOLATION_JSON


@pytest.fixture
def violation_report_without_file() -> str:
    """Return a SwiftLint JSON report whose only violation has no file."""
    return VIOLATION_JSON_WITHOUT_FILE
