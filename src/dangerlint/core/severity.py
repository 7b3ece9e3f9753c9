# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Severity related types and helpers."""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Final

if TYPE_CHECKING:
    from .models import Violation


class RawSeverity(str, Enum):
    """Severity vocabulary emitted by SwiftLint's JSON reporter."""

    WARNING = "Warning"
    ERROR = "Error"


class Classification(str, Enum):
    """Review outcome assigned to a violation at reporting time."""

    WARN = "warn"
    FAIL = "fail"

    @property
    def label(self) -> str:
        """Return the severity label rendered in markdown reports.

        Returns:
            str: ``"Warning"`` for :attr:`WARN` and ``"Error"`` for :attr:`FAIL`.
        """

        return _CLASSIFICATION_LABELS[self]


_CLASSIFICATION_LABELS: Final[dict[Classification, str]] = {
    Classification.WARN: RawSeverity.WARNING.value,
    Classification.FAIL: RawSeverity.ERROR.value,
}

_NATIVE_CLASSIFICATION: Final[dict[RawSeverity, Classification]] = {
    RawSeverity.WARNING: Classification.WARN,
    RawSeverity.ERROR: Classification.FAIL,
}


def classify_severity(severity: RawSeverity, *, strict: bool) -> Classification:
    """Map a raw SwiftLint severity onto a review classification.

    Args:
        severity: Severity reported by SwiftLint.
        strict: When ``True`` every violation is escalated to a failure.

    Returns:
        Classification: Classification used by the reporters.
    """

    if strict:
        return Classification.FAIL
    return _NATIVE_CLASSIFICATION[RawSeverity(severity)]


def classify(violation: Violation, *, strict: bool) -> Classification:
    """Return the classification of ``violation`` honouring ``strict`` mode."""

    return classify_severity(violation.severity, strict=strict)


__all__ = [
    "Classification",
    "RawSeverity",
    "classify",
    "classify_severity",
]
