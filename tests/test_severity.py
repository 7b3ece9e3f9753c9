# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for severity classification."""

from __future__ import annotations

import pytest

from dangerlint.core.models import Violation
from dangerlint.core.severity import Classification, RawSeverity, classify, classify_severity


@pytest.mark.parametrize(
    ("severity", "expected"),
    [
        (RawSeverity.WARNING, Classification.WARN),
        (RawSeverity.ERROR, Classification.FAIL),
    ],
)
def test_native_classification(severity: RawSeverity, expected: Classification) -> None:
    assert classify_severity(severity, strict=False) is expected


@pytest.mark.parametrize("severity", list(RawSeverity))
def test_strict_mode_escalates_everything(severity: RawSeverity) -> None:
    assert classify_severity(severity, strict=True) is Classification.FAIL


def test_classification_labels_match_swiftlint_vocabulary() -> None:
    assert Classification.WARN.label == "Warning"
    assert Classification.FAIL.label == "Error"


def test_classify_reads_violation_severity() -> None:
    violation = Violation(rule_id="todo", reason="TODOs should be resolved", severity="Warning")

    assert classify(violation, strict=False) is Classification.WARN
    assert classify(violation, strict=True) is Classification.FAIL
