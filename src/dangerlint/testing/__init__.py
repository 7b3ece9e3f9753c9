# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Testing helpers for code that drives the lint pipeline."""

from __future__ import annotations

from .fakes import (
    FakeCurrentPathProvider,
    RecordingShellRunner,
    ShellInvocation,
    SpyReportDeleter,
    StaticReportReader,
)

__all__ = [
    "FakeCurrentPathProvider",
    "RecordingShellRunner",
    "ShellInvocation",
    "SpyReportDeleter",
    "StaticReportReader",
]
