# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from lint2prompt.models import DiagnosticRecord, Range
from lint2prompt.severity import SeverityLevel

DiagnosticFactory = Callable[..., DiagnosticRecord]


def make_diagnostic(
    line: int,
    column: int = 0,
    *,
    end_line: int | None = None,
    end_column: int | None = None,
    severity: SeverityLevel | int = SeverityLevel.ERROR,
    code: object = None,
    message: str = "problem",
    source: str = "",
) -> DiagnosticRecord:
    """Build a diagnostic from zero-based coordinates."""
    return DiagnosticRecord(
        severity=severity,
        code=code,
        message=message,
        range=Range.of(
            line,
            column,
            line if end_line is None else end_line,
            column if end_column is None else end_column,
        ),
        source=source,
    )


@pytest.fixture
def diagnostic() -> DiagnosticFactory:
    """Return the :func:`make_diagnostic` factory."""
    return make_diagnostic


@pytest.fixture
def source_file(tmp_path: Path) -> Path:
    """Return a ten-line source file whose lines read ``line 1`` .. ``line 10``."""
    path = tmp_path / "app.ts"
    path.write_text("\n".join(f"line {number}" for number in range(1, 11)), encoding="utf-8")
    return path
