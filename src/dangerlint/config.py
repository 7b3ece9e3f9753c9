# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Configuration models for a SwiftLint review run."""

from __future__ import annotations

from typing import Final

from pydantic import BaseModel, ConfigDict, Field

from .selection import LintStyle, ModifiedAndCreatedFiles

DEFAULT_SWIFTLINT_PATH: Final[str] = "swiftlint"
DEFAULT_REPORT_PATH: Final[str] = "swiftlintReport.json"


class ConfigError(Exception):
    """Raised when configuration input is invalid."""


class LintConfig(BaseModel):
    """Settings controlling how SwiftLint is invoked and how findings are reported."""

    model_config = ConfigDict(frozen=True)

    swiftlint_path: str
    lint_style: LintStyle = Field(default_factory=ModifiedAndCreatedFiles)
    config_file: str | None = None
    strict: bool = False
    quiet: bool = False
    inline: bool = False
    output_file_path: str = DEFAULT_REPORT_PATH


class OutputConfig(BaseModel):
    """Console presentation preferences of the CLI."""

    model_config = ConfigDict(validate_assignment=True)

    verbose: bool = False
    silent: bool = False
    emoji: bool = True
    color: bool = True


__all__ = [
    "DEFAULT_REPORT_PATH",
    "DEFAULT_SWIFTLINT_PATH",
    "ConfigError",
    "LintConfig",
    "OutputConfig",
]
