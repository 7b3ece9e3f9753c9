# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Build review changesets from Git."""

from __future__ import annotations

from collections.abc import Callable, Iterator, Sequence
from dataclasses import dataclass
from itertools import islice
from pathlib import Path
from typing import Final

from ..changeset import Changeset, FileDiff
from ..core.runtime.process import CommandOptions, run_command

GitRunner = Callable[[Sequence[str], Path], list[str]]

_ADDED: Final[str] = "A"
_DELETED: Final[str] = "D"
_MODIFIED_CODES: Final[frozenset[str]] = frozenset({"M", "R", "C", "T"})
_TWO_PATH_CODES: Final[frozenset[str]] = frozenset({"R", "C"})


@dataclass(frozen=True, slots=True)
class GitChangesetConfig:
    """Options controlling which revisions Git compares.

    With ``use_merge_base`` the work tree is compared against the merge base
    of ``HEAD`` and ``base_ref``, so commits that only landed on the base
    branch are not attributed to the review.
    """

    base_ref: str = "HEAD"
    use_merge_base: bool = True
    include_untracked: bool = True
    with_line_diffs: bool = True


class GitChangesetDiscovery:
    """Collect created, modified, and deleted files reported by Git."""

    def __init__(self, *, runner: GitRunner | None = None) -> None:
        """Create a Git changeset discovery.

        Args:
            runner: Optional command runner used to execute git commands. A
                sensible default based on :func:`run_command` is used when
                omitted.
        """

        self._runner = runner or self._default_runner

    def discover(self, config: GitChangesetConfig, root: Path) -> Changeset:
        """Return the changeset between the resolved base and the work tree.

        Args:
            config: Revision and diff options.
            root: Repository root directory.

        Returns:
            Changeset: Repository-relative paths grouped by change kind, with
            line diffs for created and modified files when requested.
        """

        diff_ref = self._resolve_diff_ref(config, root)
        created: list[str] = []
        modified: list[str] = []
        deleted: list[str] = []
        for status, path in self._name_status(diff_ref, root):
            if status == _ADDED:
                created.append(path)
            elif status == _DELETED:
                deleted.append(path)
            elif status in _MODIFIED_CODES:
                modified.append(path)
        untracked: list[str] = []
        if config.include_untracked:
            untracked = [path for path in self._untracked(root) if path not in created]
            created.extend(untracked)

        diffs: dict[str, FileDiff] = {}
        if config.with_line_diffs:
            skipped = set(untracked)
            for path in [*created, *modified]:
                if path in skipped:
                    continue
                diffs[path] = FileDiff.from_unified_diff(self._runner(self._diff_command(diff_ref, path), root))
        return Changeset(created=tuple(created), modified=tuple(modified), deleted=tuple(deleted), diffs=diffs)

    def _resolve_diff_ref(self, config: GitChangesetConfig, root: Path) -> str:
        """Return the revision to diff against.

        Falls back to ``config.base_ref`` when merge-base resolution is
        disabled or git prints nothing.
        """

        if not config.use_merge_base:
            return config.base_ref
        output = self._runner(["git", "merge-base", "HEAD", config.base_ref], root)
        if output and output[0].strip():
            return output[0].strip()
        return config.base_ref

    def _name_status(self, diff_ref: str, root: Path) -> Iterator[tuple[str, str]]:
        """Yield ``(status, path)`` pairs from ``git diff --name-status -z``.

        Renames and copies carry two paths; the destination is reported.
        """

        fields = self._nul_fields(["git", "diff", "--name-status", "-z", diff_ref, "--"], root)
        tokens = iter(fields)
        for status in tokens:
            width = 2 if status[:1] in _TWO_PATH_CODES else 1
            paths = list(islice(tokens, width))
            if len(paths) < width:
                return
            yield status[0], paths[-1]

    def _untracked(self, root: Path) -> Iterator[str]:
        yield from self._nul_fields(["git", "ls-files", "-z", "--others", "--exclude-standard"], root)

    def _nul_fields(self, cmd: Sequence[str], root: Path) -> list[str]:
        """Run ``cmd`` and split its ``-z`` output into non-empty fields."""

        output = "\n".join(self._runner(cmd, root))
        return [field for field in output.split("\0") if field]

    @staticmethod
    def _diff_command(diff_ref: str, path: str) -> list[str]:
        return ["git", "diff", "--unified=0", diff_ref, "--", path]

    @staticmethod
    def _default_runner(cmd: Sequence[str], root: Path) -> list[str]:
        """Execute ``cmd`` returning stdout lines while swallowing failures.

        Args:
            cmd: Git command to execute.
            root: Repository root directory.

        Returns:
            list[str]: Raw stdout lines produced by subprocess execution.
        """

        cp = run_command(cmd, options=CommandOptions(cwd=root, capture_output=True, text=True, check=False))
        if cp.returncode != 0:
            return []
        return (cp.stdout or "").splitlines()


__all__ = ["GitChangesetConfig", "GitChangesetDiscovery", "GitRunner"]
