# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Reporting helpers for merged diagnostics."""

from __future__ import annotations

from .formatters import (
    NO_PROBLEMS_TEXT,
    OutputFormat,
    render,
    render_compact,
    render_json,
    render_verbose,
)

__all__ = [
    "NO_PROBLEMS_TEXT",
    "OutputFormat",
    "render",
    "render_compact",
    "render_json",
    "render_verbose",
]
