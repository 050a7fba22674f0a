# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Diagnostics package exposing filtering, grouping and context helpers."""

from __future__ import annotations

from .context import ContextReader, FileContextReader, read_file_context
from .filtering import compile_ignore_pattern, filter_diagnostics, filter_entries
from .grouping import build_diagnostics_data, merge_file_diagnostics, sort_diagnostics
from .json_import import DiagnosticSource, DiagnosticsImportError, JsonDiagnosticSource, StaticDiagnosticSource

__all__ = (
    "ContextReader",
    "DiagnosticSource",
    "DiagnosticsImportError",
    "FileContextReader",
    "JsonDiagnosticSource",
    "StaticDiagnosticSource",
    "build_diagnostics_data",
    "compile_ignore_pattern",
    "filter_diagnostics",
    "filter_entries",
    "merge_file_diagnostics",
    "read_file_context",
    "sort_diagnostics",
)
