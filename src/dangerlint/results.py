# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Review results accumulated during a run and handed to the review host."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field


class Annotation(BaseModel):
    """Single warning, failure, or message, optionally anchored to a file line."""

    model_config = ConfigDict(frozen=True)

    message: str
    file: str | None = None
    line: int | None = None


class DangerResults(BaseModel):
    """Ordered feedback collected for the review host.

    Instances double as the inline and markdown callbacks of the lint
    pipeline via :meth:`warn_inline`, :meth:`fail_inline`, and
    :meth:`markdown`.
    """

    model_config = ConfigDict(validate_assignment=True)

    fails: list[Annotation] = Field(default_factory=list)
    warnings: list[Annotation] = Field(default_factory=list)
    messages: list[Annotation] = Field(default_factory=list)
    markdowns: list[str] = Field(default_factory=list)

    def warn_inline(self, message: str, file: str, line: int) -> None:
        """Record an inline warning."""

        self.warnings.append(Annotation(message=message, file=file, line=line))

    def fail_inline(self, message: str, file: str, line: int) -> None:
        """Record an inline failure."""

        self.fails.append(Annotation(message=message, file=file, line=line))

    def message(self, message: str) -> None:
        """Record an informational message that is not attached to a file."""

        self.messages.append(Annotation(message=message))

    def markdown(self, markdown: str) -> None:
        """Record a markdown block."""

        self.markdowns.append(markdown)

    @property
    def has_failures(self) -> bool:
        """Return ``True`` when at least one failure was recorded."""

        return bool(self.fails)

    @property
    def is_empty(self) -> bool:
        """Return ``True`` when no feedback of any kind was recorded."""

        return not (self.fails or self.warnings or self.messages or self.markdowns)

    def to_json(self) -> str:
        """Serialise the results using the review host's JSON layout."""

        return self.model_dump_json(indent=2, exclude_none=True)

    def write(self, path: Path) -> None:
        """Write the JSON results to ``path``, creating parent directories."""

        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(self.to_json() + "\n", encoding="utf-8")


__all__ = ["Annotation", "DangerResults"]
