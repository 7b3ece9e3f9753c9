# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Filesystem helpers for path matching and report handling."""

from __future__ import annotations

from .paths import (
    SWIFT_SUFFIX,
    base_name,
    is_swift_file,
    is_within_directory,
    normalize_directory,
    strip_path_prefix,
)
from .reports import FileReportDeleter, WorkingDirectoryPathProvider, read_text_file

__all__ = [
    "SWIFT_SUFFIX",
    "FileReportDeleter",
    "WorkingDirectoryPathProvider",
    "base_name",
    "is_swift_file",
    "is_within_directory",
    "normalize_directory",
    "read_text_file",
    "strip_path_prefix",
]
