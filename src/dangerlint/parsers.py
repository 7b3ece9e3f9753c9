# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Decode SwiftLint JSON reports into :class:`Violation` instances."""

from __future__ import annotations

import json
from typing import Final

from pydantic import TypeAdapter, ValidationError

from .core.models import Violation

_VIOLATIONS_ADAPTER: Final[TypeAdapter[list[Violation]]] = TypeAdapter(list[Violation])


class ViolationDecodeError(ValueError):
    """Raised when a SwiftLint report is not an array of violation objects."""


def decode_violations(payload: str) -> list[Violation]:
    """Parse the SwiftLint JSON reporter output.

    Args:
        payload: Report contents read from the output file.

    Returns:
        list[Violation]: Violations in report order. A blank payload, which
        SwiftLint leaves behind when it produced no report, yields ``[]``.

    Raises:
        ViolationDecodeError: If the payload is not valid JSON or any element
            does not match the violation shape.
    """

    text = payload.strip()
    if not text:
        return []
    try:
        document = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ViolationDecodeError(f"SwiftLint report is not valid JSON: {exc}") from exc
    if not isinstance(document, list):
        raise ViolationDecodeError(
            f"SwiftLint report must be a JSON array, got {type(document).__name__}",
        )
    try:
        return _VIOLATIONS_ADAPTER.validate_python(document)
    except ValidationError as exc:
        raise ViolationDecodeError(f"SwiftLint report has malformed entries: {exc}") from exc


__all__ = ["ViolationDecodeError", "decode_violations"]
