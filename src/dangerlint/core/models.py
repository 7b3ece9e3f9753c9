# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Core data models shared across the dangerlint package."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, field_validator

from ..filesystem.paths import base_name, strip_path_prefix
from .severity import RawSeverity


class Violation(BaseModel):
    """Single finding decoded from a SwiftLint JSON report.

    The ``character`` and ``type`` keys of the report are ignored; ``file`` and
    ``line`` fall back to ``""`` and ``0`` when absent or ``null``.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    rule_id: str
    reason: str
    file: str = ""
    severity: RawSeverity
    line: int = 0

    @field_validator("file", mode="before")
    @classmethod
    def _default_file(cls, value: object) -> object:
        return "" if value is None else value

    @field_validator("line", mode="before")
    @classmethod
    def _default_line(cls, value: object) -> object:
        return 0 if value is None else value

    @property
    def message_text(self) -> str:
        """Return the reason followed by the rule identifier in backticks."""

        return f"{self.reason} (`{self.rule_id}`)"

    @property
    def file_name(self) -> str:
        """Return the base name of the violating file, or ``""`` when unknown."""

        return base_name(self.file)

    def relative_file(self, current_path: str) -> str:
        """Return the violation path relative to ``current_path``.

        Args:
            current_path: Working directory SwiftLint was launched from.

        Returns:
            str: Path stripped of the ``current_path`` prefix when it starts
            with it, otherwise the stored path unchanged.
        """

        return strip_path_prefix(self.file, current_path)


__all__ = ["Violation"]
