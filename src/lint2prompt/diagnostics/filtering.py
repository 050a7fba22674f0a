# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Helpers for suppressing diagnostics by originating tool name."""

from __future__ import annotations

import re
from collections.abc import Sequence
from re import Pattern
from typing import Final

from ..models import DiagnosticRecord, FileDiagnostics

_WILDCARD: Final[str] = "*"


def compile_ignore_pattern(pattern: str) -> Pattern[str]:
    """Return a case-insensitive regex matching the whole tool name.

    ``*`` stands for zero or more characters; every other character is literal.

    Args:
        pattern: Glob-like ignore pattern such as ``"eslint*"``.

    Returns:
        Pattern[str]: Compiled expression to be used with ``fullmatch``.
    """

    body = ".*".join(re.escape(part) for part in pattern.split(_WILDCARD))
    return re.compile(body, re.IGNORECASE)


def is_ignored(diagnostic: DiagnosticRecord, patterns: Sequence[Pattern[str]]) -> bool:
    """Return ``True`` when ``diagnostic`` comes from an ignored tool."""

    tool = diagnostic.source
    if not patterns or not tool:
        return False
    return any(pattern.fullmatch(tool) for pattern in patterns)


def filter_diagnostics(
    diagnostics: Sequence[DiagnosticRecord],
    patterns: Sequence[str],
) -> list[DiagnosticRecord]:
    """Return diagnostics whose tool name matches none of ``patterns``.

    Args:
        diagnostics: Diagnostics reported for a single file.
        patterns: Glob-like ignore patterns. An empty list keeps everything.

    Returns:
        list[DiagnosticRecord]: Retained diagnostics in their original order.
    """

    if not patterns:
        return list(diagnostics)
    compiled = [compile_ignore_pattern(pattern) for pattern in patterns]
    return [diagnostic for diagnostic in diagnostics if not is_ignored(diagnostic, compiled)]


def filter_entries(
    entries: Sequence[FileDiagnostics],
    patterns: Sequence[str],
) -> list[FileDiagnostics]:
    """Filter every file's diagnostics and drop files left without any.

    Args:
        entries: ``(path, diagnostics)`` pairs from a diagnostic source.
        patterns: Glob-like ignore patterns.

    Returns:
        list[FileDiagnostics]: Non-empty filtered entries in input order.
    """

    kept: list[FileDiagnostics] = []
    for file_path, diagnostics in entries:
        filtered = filter_diagnostics(diagnostics, patterns)
        if filtered:
            kept.append((file_path, filtered))
    return kept


__all__ = ["compile_ignore_pattern", "filter_diagnostics", "filter_entries", "is_ignored"]
