# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""File-selection policies deciding which changed files SwiftLint inspects."""

from __future__ import annotations

from typing import Annotated, Literal, TypeAlias

from pydantic import BaseModel, ConfigDict, Field

from .changeset import Changeset
from .filesystem.paths import is_swift_file, is_within_directory


class ModifiedAndCreatedFiles(BaseModel):
    """Lint the created and modified Swift files, optionally below ``directory``."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["modified_and_created"] = "modified_and_created"
    directory: str | None = None


class AllFiles(BaseModel):
    """Let SwiftLint discover files itself, scoped to ``directory`` when given."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["all"] = "all"
    directory: str | None = None


class Files(BaseModel):
    """Lint an explicit list of files that also appear in the changeset."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["files"] = "files"
    paths: tuple[str, ...] = ()


LintStyle: TypeAlias = Annotated[
    ModifiedAndCreatedFiles | AllFiles | Files,
    Field(discriminator="kind"),
]


def enumerates_files(style: LintStyle) -> bool:
    """Return ``True`` when ``style`` passes an explicit file list to SwiftLint."""

    return not isinstance(style, AllFiles)


def select_files(changeset: Changeset, style: LintStyle) -> list[str]:
    """Return the ordered Swift files that ``style`` selects from ``changeset``.

    Args:
        changeset: Files touched by the review.
        style: Selection policy.

    Returns:
        list[str]: Repository-relative Swift paths. :class:`AllFiles` always
        yields an empty list because SwiftLint enumerates files itself.
    """

    match style:
        case AllFiles():
            return []
        case Files(paths=paths):
            return [path for path in paths if is_swift_file(path) and changeset.touches(path)]
        case ModifiedAndCreatedFiles(directory=directory):
            selected = [path for path in changeset.lintable_files if is_swift_file(path)]
            if directory is None:
                return selected
            return [path for path in selected if is_within_directory(path, directory)]
    raise TypeError(f"Unsupported lint style: {style!r}")


__all__ = [
    "AllFiles",
    "Files",
    "LintStyle",
    "ModifiedAndCreatedFiles",
    "enumerates_files",
    "select_files",
]
