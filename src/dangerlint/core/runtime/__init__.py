# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Process execution helpers."""

from __future__ import annotations

from .process import CommandOptions, SubprocessExecutionError, run_command
from .shell import SubprocessShellRunner, split_command_line

__all__ = [
    "CommandOptions",
    "SubprocessExecutionError",
    "SubprocessShellRunner",
    "run_command",
    "split_command_line",
]
