# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Read literal source text for diagnostic line ranges."""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from pathlib import Path
from typing import Final, TypeAlias

LOGGER = logging.getLogger(__name__)

LINE_SEPARATOR: Final[str] = "\n"

ContextReader: TypeAlias = Callable[[str, int, int], str]


def _load_lines(file_path: str | Path) -> list[str] | None:
    """Return the ``\\n``-separated lines of ``file_path`` or ``None`` when unreadable."""

    path = Path(file_path)
    try:
        if not path.exists():
            return None
        # Decoded from bytes so "\r" survives; only "\n" separates lines.
        content = path.read_bytes().decode("utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        LOGGER.debug("Unable to read %s for context: %s", path, exc)
        return None
    return content.split(LINE_SEPARATOR)


def slice_lines(lines: Sequence[str], start_line: int, end_line: int) -> str:
    """Return ``lines[start_line:end_line + 1]`` joined, clamping to valid indices.

    Args:
        lines: File content split on ``\\n``.
        start_line: Zero-based first line.
        end_line: Zero-based last line (inclusive).

    Returns:
        str: Joined text, or an empty string when the clamped range is empty.
    """

    effective_start = max(0, start_line)
    effective_end = min(len(lines) - 1, end_line)
    if effective_start > effective_end:
        return ""
    return LINE_SEPARATOR.join(lines[effective_start : effective_end + 1])


def read_file_context(file_path: str | Path, start_line: int, end_line: int) -> str:
    """Return the text spanning ``start_line``..``end_line`` of ``file_path``.

    Missing or unreadable files yield an empty string instead of raising.

    Args:
        file_path: Path of the source file.
        start_line: Zero-based first line.
        end_line: Zero-based last line (inclusive).

    Returns:
        str: Literal text of the requested lines joined by ``\\n``.
    """

    lines = _load_lines(file_path)
    if lines is None:
        return ""
    return slice_lines(lines, start_line, end_line)


class FileContextReader:
    """Context reader that reads each file at most once per invocation."""

    def __init__(self) -> None:
        self._cache: dict[str, list[str] | None] = {}

    def __call__(self, file_path: str, start_line: int, end_line: int) -> str:
        """Return the text of the requested lines, see :func:`read_file_context`."""

        key = str(file_path)
        if key not in self._cache:
            self._cache[key] = _load_lines(key)
        lines = self._cache[key]
        if lines is None:
            return ""
        return slice_lines(lines, start_line, end_line)


__all__ = ["ContextReader", "FileContextReader", "read_file_context", "slice_lines"]
