# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Reporters turning violations into review feedback."""

from .inline import InlineActions, is_anchorable, report_inline
from .markdown import (
    MARKDOWN_TITLE,
    TABLE_DIVIDER,
    TABLE_HEADER,
    format_location,
    format_row,
    render_markdown,
    report_markdown,
)

__all__ = [
    "InlineActions",
    "MARKDOWN_TITLE",
    "TABLE_DIVIDER",
    "TABLE_HEADER",
    "format_location",
    "format_row",
    "is_anchorable",
    "render_markdown",
    "report_inline",
    "report_markdown",
]
