# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Core models and severity helpers."""

from __future__ import annotations

from .models import Violation
from .severity import Classification, RawSeverity, classify, classify_severity

__all__ = [
    "Classification",
    "RawSeverity",
    "Violation",
    "classify",
    "classify_severity",
]
