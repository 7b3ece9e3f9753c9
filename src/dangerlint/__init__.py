# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""SwiftLint review automation: select changed files, lint them, report violations."""

from __future__ import annotations

from .changeset import Changeset, FileDiff
from .config import LintConfig
from .core.models import Violation
from .core.severity import Classification, RawSeverity, classify
from .lint import LintContext, lint
from .parsers import ViolationDecodeError, decode_violations
from .results import DangerResults
from .selection import AllFiles, Files, LintStyle, ModifiedAndCreatedFiles, select_files

__version__ = "0.1.0"

__all__ = [
    "AllFiles",
    "Changeset",
    "Classification",
    "DangerResults",
    "FileDiff",
    "Files",
    "LintConfig",
    "LintContext",
    "LintStyle",
    "ModifiedAndCreatedFiles",
    "RawSeverity",
    "Violation",
    "ViolationDecodeError",
    "__version__",
    "classify",
    "decode_violations",
    "lint",
    "select_files",
]
