# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for merging diagnostics into issues."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

from lint2prompt.diagnostics import build_diagnostics_data, merge_file_diagnostics, sort_diagnostics
from lint2prompt.models import DiagnosticRecord
from lint2prompt.severity import Severity, SeverityLevel

DiagnosticFactory = Callable[..., DiagnosticRecord]


def _no_context(file_path: str, start_line: int, end_line: int) -> str:
    return ""


def test_identical_diagnostics_merge_into_one_issue(diagnostic: DiagnosticFactory) -> None:
    later = diagnostic(19, 0, end_line=19, end_column=4, code="E1", message="bad")
    earlier = diagnostic(9, 0, code="E1", message="bad")

    issues = merge_file_diagnostics("/a.ts", [later, earlier], _no_context)

    assert len(issues) == 1
    issue = issues[0]
    assert (issue.code, issue.severity, issue.message) == ("E1", Severity.ERROR, "bad")
    assert [location.lines for location in issue.locations] == [(10, 10), (20, 20)]


def test_issue_order_follows_first_occurrence(diagnostic: DiagnosticFactory) -> None:
    diagnostics = [
        diagnostic(5, 3, code="B", message="second"),
        diagnostic(5, 1, code="A", message="first"),
        diagnostic(8, 0, code="A", message="first"),
        diagnostic(2, 0, code="C", message="zeroth", severity=SeverityLevel.WARNING),
    ]

    issues = merge_file_diagnostics("/a.ts", diagnostics, _no_context)

    assert [issue.code for issue in issues] == ["C", "A", "B"]
    assert [location.lines for location in issues[1].locations] == [(6, 6), (9, 9)]


def test_identity_includes_severity_and_message(diagnostic: DiagnosticFactory) -> None:
    diagnostics = [
        diagnostic(1, code="E1", message="bad"),
        diagnostic(2, code="E1", message="bad", severity=SeverityLevel.WARNING),
        diagnostic(3, code="E1", message="worse"),
        diagnostic(4, code={"value": "E1"}, message="bad"),
    ]

    issues = merge_file_diagnostics("/a.ts", diagnostics, _no_context)

    assert [(issue.severity.value, issue.message, len(issue.locations)) for issue in issues] == [
        ("error", "bad", 2),
        ("warning", "bad", 1),
        ("error", "worse", 1),
    ]


def test_missing_code_and_unknown_severity_are_normalised(diagnostic: DiagnosticFactory) -> None:
    issues = merge_file_diagnostics("/a.ts", [diagnostic(0, severity=7, message="odd")], _no_context)

    assert issues[0].code == "N/A"
    assert issues[0].severity is Severity.UNKNOWN


def test_locations_carry_context(diagnostic: DiagnosticFactory, source_file: Path) -> None:
    issues = merge_file_diagnostics(str(source_file), [diagnostic(2, end_line=3, code="W1", message="m")])

    location = issues[0].locations[0]
    assert location.lines == (3, 4)
    assert location.context == "line 3\nline 4"


def test_context_reader_receives_zero_based_lines(diagnostic: DiagnosticFactory) -> None:
    calls: list[tuple[str, int, int]] = []

    def _reader(file_path: str, start_line: int, end_line: int) -> str:
        calls.append((file_path, start_line, end_line))
        return "ctx"

    merge_file_diagnostics("/a.ts", [diagnostic(4, end_line=6)], _reader)

    assert calls == [("/a.ts", 4, 6)]


def test_build_diagnostics_data_skips_empty_files(diagnostic: DiagnosticFactory) -> None:
    entries = [
        ("/b.ts", [diagnostic(1, code="X")]),
        ("/empty.ts", []),
        ("/a.ts", [diagnostic(1, code="Y")]),
    ]

    data = build_diagnostics_data(entries, _no_context)

    assert list(data) == ["/b.ts", "/a.ts"]
    assert data["/a.ts"][0].code == "Y"


def test_build_diagnostics_data_is_fresh_per_call(diagnostic: DiagnosticFactory) -> None:
    entries = [("/a.ts", [diagnostic(1, code="X")])]

    first = build_diagnostics_data(entries, _no_context)
    first["/a.ts"].clear()

    assert len(build_diagnostics_data(entries, _no_context)["/a.ts"]) == 1


def test_sort_is_stable_on_equal_positions(diagnostic: DiagnosticFactory) -> None:
    first = diagnostic(3, 1, message="first")
    second = diagnostic(3, 1, message="second")
    earlier = diagnostic(0, 9, message="earlier")

    ordered = sort_diagnostics([first, second, earlier])

    assert [item.message for item in ordered] == ["earlier", "first", "second"]


def test_issues_are_keyed_by_code_severity_and_message(diagnostic: DiagnosticFactory) -> None:
    diagnostics = [
        diagnostic(0, code={"value": "E1"}, message="bad"),
        diagnostic(1, code="E1", message="bad"),
        diagnostic(2, code="E1", message="bad", severity=SeverityLevel.WARNING),
    ]

    issues = merge_file_diagnostics("/a.ts", diagnostics, _no_context)

    assert [issue.key for issue in issues] == [("E1", "error", "bad"), ("E1", "warning", "bad")]
    assert len(issues[0].locations) == 2
