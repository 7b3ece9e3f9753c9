# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Changeset discovery strategies."""

from __future__ import annotations

from .git import GitChangesetConfig, GitChangesetDiscovery, GitRunner

__all__ = ["GitChangesetConfig", "GitChangesetDiscovery", "GitRunner"]
