# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared logging helpers."""

from __future__ import annotations

from .public import configure_library_logging, emoji, fail, ok, warn

__all__ = [
    "configure_library_logging",
    "emoji",
    "fail",
    "ok",
    "warn",
]
