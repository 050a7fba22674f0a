# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Render merged diagnostics as JSON, verbose text, or compact prompt text."""

from __future__ import annotations

import json
from collections.abc import Sequence
from enum import Enum
from typing import Final

from ..codes import extract_code_value
from ..diagnostics.context import ContextReader, read_file_context
from ..diagnostics.grouping import build_diagnostics_data, sort_diagnostics
from ..models import DiagnosticRecord, DiagnosticsData, FileDiagnostics, Issue, Location
from ..severity import capitalize_severity, severity_label

NO_PROBLEMS_TEXT: Final[str] = "No problems found."
FENCE: Final[str] = "```"
JSON_INDENT: Final[int] = 2


class OutputFormat(str, Enum):
    """Available renderings."""

    JSON = "json"
    TEXT = "text"
    COMPACT = "compact"


def render_json(data: DiagnosticsData) -> str:
    """Serialise merged diagnostics as an indented JSON document.

    Args:
        data: Issues keyed by file path.

    Returns:
        str: JSON object mapping each path to its list of issues.
    """

    payload = {file_path: [issue.model_dump(mode="json") for issue in issues] for file_path, issues in data.items()}
    return json.dumps(payload, indent=JSON_INDENT, ensure_ascii=False)


def _verbose_line(diagnostic: DiagnosticRecord) -> str:
    severity = severity_label(diagnostic.severity).value
    start_line = diagnostic.range.start.line + 1
    end_line = diagnostic.range.end.line + 1
    column = diagnostic.range.start.character + 1
    code_value = extract_code_value(diagnostic.code)
    code = f"[{code_value}] " if code_value else ""
    if start_line == end_line:
        location = f"Line {start_line}"
    else:
        location = f"Lines {start_line}-{end_line}"
    return f"{location}, Column {column} - {severity}: {code}{diagnostic.message}"


def render_verbose(entries: Sequence[FileDiagnostics]) -> str:
    """Render every diagnostic occurrence on its own line, grouped by file.

    Diagnostics are not merged here; each one is listed in ``(line, column)``
    order under a ``File: <path>`` header, followed by a blank line.

    Args:
        entries: ``(path, diagnostics)`` pairs.

    Returns:
        str: Rendered text, empty when there is nothing to report.
    """

    parts: list[str] = []
    for file_path, diagnostics in entries:
        if not diagnostics:
            continue
        parts.append(f"File: {file_path}\n")
        for diagnostic in sort_diagnostics(diagnostics):
            parts.append(f"{_verbose_line(diagnostic)}\n")
        parts.append("\n")
    return "".join(parts)


def _location_header(location: Location) -> str:
    start_line, end_line = location.lines
    if location.is_single_line:
        return f"# Line {start_line}"
    return f"# Line {start_line} to {end_line}"


def _render_issue(issue: Issue) -> str:
    title = f"{FENCE}{capitalize_severity(issue.severity)}: {issue.code}, {issue.message}\n"
    # Consecutive locations of one issue are separated by a blank line.
    body = "\n".join(f"{_location_header(location)}\n{location.context}\n" for location in issue.locations)
    return f"{title}{body}{FENCE}\n\n"


def render_compact(data: DiagnosticsData) -> str:
    """Render merged issues as fenced blocks suited to an LLM prompt.

    Args:
        data: Issues keyed by file path.

    Returns:
        str: Compact text, or ``"No problems found."`` when no file has issues.
    """

    if not any(data.values()):
        return NO_PROBLEMS_TEXT
    parts: list[str] = []
    for file_path, issues in data.items():
        if not issues:
            continue
        parts.append(f"{file_path}:\n")
        parts.extend(_render_issue(issue) for issue in issues)
    return "".join(parts).rstrip()


def render(
    entries: Sequence[FileDiagnostics],
    output_format: OutputFormat | str,
    *,
    reader: ContextReader = read_file_context,
) -> str:
    """Render ``entries`` in the requested ``output_format``.

    Args:
        entries: ``(path, diagnostics)`` pairs.
        output_format: One of :class:`OutputFormat`.
        reader: Context reader used by the merged renderings.

    Returns:
        str: Rendered output.
    """

    fmt = OutputFormat(output_format)
    if fmt is OutputFormat.TEXT:
        return render_verbose(entries)
    data = build_diagnostics_data(entries, reader)
    if fmt is OutputFormat.JSON:
        return render_json(data)
    return render_compact(data)


__all__ = [
    "NO_PROBLEMS_TEXT",
    "OutputFormat",
    "render",
    "render_compact",
    "render_json",
    "render_verbose",
]
