# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for source context extraction."""

from __future__ import annotations

from pathlib import Path

import pytest

from lint2prompt.diagnostics.context import FileContextReader, read_file_context, slice_lines


def test_reads_inclusive_range(source_file: Path) -> None:
    assert read_file_context(source_file, 1, 2) == "line 2\nline 3"
    assert read_file_context(source_file, 4, 4) == "line 5"


def test_range_beyond_file_is_empty(source_file: Path) -> None:
    assert read_file_context(source_file, 20, 25) == ""


def test_range_partially_beyond_file_is_clamped(source_file: Path) -> None:
    assert read_file_context(source_file, 8, 30) == "line 9\nline 10"
    assert read_file_context(source_file, -5, 0) == "line 1"


def test_missing_file_yields_empty_string(tmp_path: Path) -> None:
    assert read_file_context(tmp_path / "missing.ts", 0, 3) == ""


def test_directory_yields_empty_string(tmp_path: Path) -> None:
    assert read_file_context(tmp_path, 0, 0) == ""


def test_carriage_returns_are_kept(tmp_path: Path) -> None:
    path = tmp_path / "crlf.ts"
    path.write_bytes(b"first\r\nsecond\r\n")
    assert read_file_context(path, 0, 1) == "first\r\nsecond\r"


def test_lone_carriage_returns_do_not_split_lines(tmp_path: Path) -> None:
    path = tmp_path / "mac.ts"
    path.write_bytes(b"one\rtwo\nthree")
    assert read_file_context(path, 0, 0) == "one\rtwo"
    assert read_file_context(path, 1, 1) == "three"


def test_file_reader_reads_each_file_once(source_file: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    reads: list[Path] = []
    original = Path.read_bytes

    def _tracking_read_bytes(self: Path) -> bytes:
        reads.append(self)
        return original(self)

    monkeypatch.setattr(Path, "read_bytes", _tracking_read_bytes)
    reader = FileContextReader()

    assert reader(str(source_file), 0, 0) == "line 1"
    assert reader(str(source_file), 9, 9) == "line 10"
    assert reader(str(source_file), 12, 12) == ""
    assert reads == [source_file]


def test_slice_lines_handles_empty_input() -> None:
    assert slice_lines([], 0, 0) == ""
    assert slice_lines(["a", "b", "c"], 2, 1) == ""
    assert slice_lines(["a", "b", "c"], 0, 1) == "a\nb"
