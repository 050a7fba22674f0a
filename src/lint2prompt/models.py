# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Core data models shared across the lint2prompt package."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TypeAlias

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .codes import AbsentCode, DiagnosticCode, coerce_code
from .severity import Severity, SeverityLevel


class Position(BaseModel):
    """Zero-based line/character position inside a document."""

    model_config = ConfigDict(frozen=True)

    line: int = 0
    character: int = 0


class Range(BaseModel):
    """Zero-based span covered by a diagnostic."""

    model_config = ConfigDict(frozen=True)

    start: Position = Field(default_factory=Position)
    end: Position = Field(default_factory=Position)

    @classmethod
    def of(cls, start_line: int, start_character: int, end_line: int, end_character: int) -> Range:
        """Build a range from four zero-based coordinates."""
        return cls(
            start=Position(line=start_line, character=start_character),
            end=Position(line=end_line, character=end_character),
        )


class DiagnosticRecord(BaseModel):
    """Diagnostic as reported by the editor, read-only to the pipeline."""

    model_config = ConfigDict(frozen=True)

    severity: SeverityLevel | int = SeverityLevel.ERROR
    code: DiagnosticCode = Field(default_factory=AbsentCode)
    message: str = ""
    range: Range = Field(default_factory=Range)
    source: str = ""

    @field_validator("code", mode="before")
    @classmethod
    def _resolve_code(cls, value: object) -> object:
        """Resolve duck-typed code payloads into the tagged variant."""
        return coerce_code(value)

    @field_validator("source", mode="before")
    @classmethod
    def _default_source(cls, value: object) -> object:
        return "" if value is None else value

    @property
    def sort_key(self) -> tuple[int, int]:
        """Return the ``(start line, start column)`` ordering key."""
        return self.range.start.line, self.range.start.character


class Location(BaseModel):
    """One occurrence of an issue: 1-based inclusive lines plus source text."""

    model_config = ConfigDict(validate_assignment=True)

    lines: tuple[int, int]
    context: str = ""

    @property
    def is_single_line(self) -> bool:
        return self.lines[0] == self.lines[1]


class Issue(BaseModel):
    """Deduplicated diagnostic identity with every location it occurs at."""

    model_config = ConfigDict(validate_assignment=True)

    code: str
    severity: Severity
    message: str
    locations: list[Location] = Field(default_factory=list)

    @property
    def key(self) -> tuple[str, str, str]:
        """Return the ``(code, severity, message)`` identity tuple."""
        return self.code, self.severity.value, self.message


FileDiagnostics: TypeAlias = tuple[str, Sequence[DiagnosticRecord]]
FileReport: TypeAlias = list[Issue]
DiagnosticsData: TypeAlias = dict[str, FileReport]


__all__ = [
    "DiagnosticRecord",
    "DiagnosticsData",
    "FileDiagnostics",
    "FileReport",
    "Issue",
    "Location",
    "Position",
    "Range",
]
