# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Group diagnostics into issues that share code, severity and message."""

from __future__ import annotations

from collections.abc import Sequence

from ..codes import extract_code_value
from ..models import DiagnosticRecord, DiagnosticsData, FileDiagnostics, Issue, Location
from ..severity import severity_label
from .context import ContextReader, read_file_context


def sort_diagnostics(diagnostics: Sequence[DiagnosticRecord]) -> list[DiagnosticRecord]:
    """Return ``diagnostics`` stably sorted by start line, then start column."""

    return sorted(diagnostics, key=lambda diagnostic: diagnostic.sort_key)


def merge_file_diagnostics(
    file_path: str,
    diagnostics: Sequence[DiagnosticRecord],
    reader: ContextReader = read_file_context,
) -> list[Issue]:
    """Merge the diagnostics of one file into issues with multiple locations.

    Args:
        file_path: Path used both as the report key and for context lookups.
        diagnostics: Diagnostics reported for ``file_path``.
        reader: Callable returning source text for a zero-based line range.

    Returns:
        list[Issue]: Issues in order of first occurrence; each location list
        follows the sorted ``(line, column)`` order.
    """

    issues: dict[tuple[str, str, str], Issue] = {}
    for diagnostic in sort_diagnostics(diagnostics):
        start_line = diagnostic.range.start.line
        end_line = diagnostic.range.end.line
        candidate = Issue(
            code=extract_code_value(diagnostic.code),
            severity=severity_label(diagnostic.severity),
            message=diagnostic.message,
        )
        issue = issues.setdefault(candidate.key, candidate)

        issue.locations.append(
            Location(
                lines=(start_line + 1, end_line + 1),
                context=reader(file_path, start_line, end_line),
            ),
        )
    return list(issues.values())


def build_diagnostics_data(
    entries: Sequence[FileDiagnostics],
    reader: ContextReader = read_file_context,
) -> DiagnosticsData:
    """Return merged issues keyed by file path, skipping files without diagnostics.

    Args:
        entries: ``(path, diagnostics)`` pairs in source order.
        reader: Callable returning source text for a zero-based line range.

    Returns:
        DiagnosticsData: Mapping preserving the order files were encountered.
    """

    result: DiagnosticsData = {}
    for file_path, diagnostics in entries:
        if not diagnostics:
            continue
        result[file_path] = merge_file_diagnostics(file_path, diagnostics, reader)
    return result


__all__ = ["build_diagnostics_data", "merge_file_diagnostics", "sort_diagnostics"]
