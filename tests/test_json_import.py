# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for loading diagnostics dumps."""

from __future__ import annotations

import io
import json
from pathlib import Path

import pytest

from lint2prompt.codes import StructuredCode
from lint2prompt.diagnostics import DiagnosticsImportError, JsonDiagnosticSource, StaticDiagnosticSource
from lint2prompt.diagnostics.json_import import parse_diagnostics_payload, resolve_file_path
from lint2prompt.models import Range
from lint2prompt.severity import Severity, SeverityLevel, severity_label


def test_lsp_style_entries() -> None:
    payload = [
        {
            "uri": "file:///work/src/app%20main.ts",
            "diagnostics": [
                {
                    "range": {"start": {"line": 4, "character": 2}, "end": {"line": 5, "character": 0}},
                    "severity": 2,
                    "code": {"value": "no-unused-vars", "target": "https://eslint.org"},
                    "message": "unused",
                    "source": "eslint",
                },
            ],
        },
        {"uri": "file:///work/src/clean.ts", "diagnostics": []},
    ]

    entries = parse_diagnostics_payload(payload)

    assert [path for path, _ in entries] == ["/work/src/app main.ts", "/work/src/clean.ts"]
    record = entries[0][1][0]
    assert record.range == Range.of(4, 2, 5, 0)
    assert record.severity == SeverityLevel.WARNING
    assert isinstance(record.code, StructuredCode)
    assert record.source == "eslint"
    assert entries[1][1] == []


def test_editor_range_pair_and_named_severity() -> None:
    payload = {
        "/a.ts": [
            {
                "range": [{"line": 1, "character": 0}, {"line": 1, "character": 3}],
                "severity": "Information",
                "message": "note",
            },
            {"message": "no range", "severity": "Bogus"},
        ],
    }

    records = parse_diagnostics_payload(payload)[0][1]

    assert records[0].range == Range.of(1, 0, 1, 3)
    assert severity_label(records[0].severity) is Severity.INFO
    assert records[1].range == Range()
    assert severity_label(records[1].severity) is Severity.UNKNOWN


def test_problems_panel_markers_grouped_by_resource() -> None:
    payload = [
        {
            "resource": "/w/b.py",
            "owner": "_generated_diagnostic_collection_name_#1",
            "code": "E501",
            "severity": 8,
            "message": "line too long",
            "source": "Flake8",
            "startLineNumber": 3,
            "startColumn": 80,
            "endLineNumber": 3,
            "endColumn": 95,
        },
        {"resource": "/w/a.py", "severity": 4, "message": "w", "startLineNumber": 1, "startColumn": 1},
        {"resource": "/w/b.py", "severity": 1, "message": "h", "owner": "pyright", "startLineNumber": 7},
    ]

    entries = parse_diagnostics_payload(payload)

    assert [path for path, _ in entries] == ["/w/b.py", "/w/a.py"]
    first, hint = entries[0][1]
    assert first.range == Range.of(2, 79, 2, 94)
    assert severity_label(first.severity) is Severity.ERROR
    assert first.source == "Flake8"
    assert severity_label(hint.severity) is Severity.HINT
    assert hint.source == "pyright"
    assert severity_label(entries[1][1][0].severity) is Severity.WARNING


def test_missing_lsp_severity_defaults_to_error() -> None:
    records = parse_diagnostics_payload([{"file": "x.ts", "diagnostics": [{"message": "m"}]}])[0][1]
    assert severity_label(records[0].severity) is Severity.ERROR


@pytest.mark.parametrize(
    "payload",
    [
        "just a string",
        [1, 2],
        [{"message": "no file, no markers"}],
        {"/a.ts": "not a list"},
        [{"uri": "/a.ts", "diagnostics": [{"range": "bad"}]}],
    ],
)
def test_malformed_payloads_raise(payload: object) -> None:
    with pytest.raises(DiagnosticsImportError):
        parse_diagnostics_payload(payload)  # type: ignore[arg-type]


def test_resolve_file_path_anchors_relative_paths(tmp_path: Path) -> None:
    assert resolve_file_path("src/a.ts", tmp_path) == str(tmp_path / "src" / "a.ts")
    assert resolve_file_path("/abs/a.ts", tmp_path) == "/abs/a.ts"
    assert resolve_file_path("src/a.ts") == "src/a.ts"


def test_json_source_reads_file(tmp_path: Path) -> None:
    dump = tmp_path / "problems.json"
    dump.write_text(json.dumps({"src/a.ts": [{"message": "m", "severity": 1}]}), encoding="utf-8")

    entries = JsonDiagnosticSource(dump, root=tmp_path).get_diagnostics()

    assert entries[0][0] == str(tmp_path / "src" / "a.ts")
    assert entries[0][1][0].message == "m"


def test_json_source_reads_stdin_stream() -> None:
    stream = io.StringIO('[{"path": "/a.ts", "diagnostics": [{"message": "m"}]}]')

    entries = JsonDiagnosticSource("-", stream=stream).get_diagnostics()

    assert entries[0][0] == "/a.ts"


def test_json_source_empty_document_is_empty() -> None:
    assert JsonDiagnosticSource("-", stream=io.StringIO("  ")).get_diagnostics() == []


def test_json_source_errors(tmp_path: Path) -> None:
    with pytest.raises(DiagnosticsImportError, match="unable to read"):
        JsonDiagnosticSource(tmp_path / "missing.json").get_diagnostics()

    broken = tmp_path / "broken.json"
    broken.write_text("{not json", encoding="utf-8")
    with pytest.raises(DiagnosticsImportError, match="invalid diagnostics JSON"):
        JsonDiagnosticSource(broken).get_diagnostics()


def test_static_source_returns_copies() -> None:
    source = StaticDiagnosticSource([("/a.ts", [])])
    first = source.get_diagnostics()
    first.clear()
    assert source.get_diagnostics() == [("/a.ts", [])]
