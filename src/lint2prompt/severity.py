# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Severity related types and helpers."""

from __future__ import annotations

from enum import Enum, IntEnum
from typing import Final


class SeverityLevel(IntEnum):
    """Severity levels as numbered by the editor diagnostic API."""

    ERROR = 0
    WARNING = 1
    INFORMATION = 2
    HINT = 3


class Severity(str, Enum):
    """Lowercase severity labels used in every rendering."""

    ERROR = "error"
    WARNING = "warning"
    INFO = "info"
    HINT = "hint"
    UNKNOWN = "unknown"


_LEVEL_TO_LABEL: Final[dict[SeverityLevel, Severity]] = {
    SeverityLevel.ERROR: Severity.ERROR,
    SeverityLevel.WARNING: Severity.WARNING,
    SeverityLevel.INFORMATION: Severity.INFO,
    SeverityLevel.HINT: Severity.HINT,
}


def severity_label(level: object) -> Severity:
    """Return the label for a source severity ``level``.

    Args:
        level: Severity value supplied by a diagnostic source. Integers and
            :class:`SeverityLevel` members are recognised.

    Returns:
        Severity: Matching label, or ``Severity.UNKNOWN`` for anything else.
    """

    if isinstance(level, bool) or not isinstance(level, int):
        return Severity.UNKNOWN
    try:
        member = SeverityLevel(level)
    except ValueError:
        return Severity.UNKNOWN
    return _LEVEL_TO_LABEL[member]


def capitalize_severity(severity: Severity | str) -> str:
    """Return ``severity`` with an uppercase first letter (``error`` -> ``Error``)."""

    text = severity.value if isinstance(severity, Severity) else str(severity)
    return text[:1].upper() + text[1:]


__all__ = ["Severity", "SeverityLevel", "capitalize_severity", "severity_label"]
