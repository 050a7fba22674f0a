# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Clipboard sinks receiving the assembled prompt."""

from __future__ import annotations

import asyncio
import logging
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Protocol, TextIO

import pyperclip

LOGGER = logging.getLogger(__name__)


class ClipboardError(RuntimeError):
    """Raised when the prompt cannot be delivered to the clipboard."""


class ClipboardSink(Protocol):
    """Destination for the assembled prompt text."""

    async def write_text(self, text: str) -> None:
        """Deliver ``text``; failures propagate to the caller."""
        ...


@dataclass(slots=True)
class SystemClipboard:
    """Copy text to the system clipboard through :mod:`pyperclip`."""

    async def write_text(self, text: str) -> None:
        """Copy ``text`` to the system clipboard.

        The blocking pyperclip call runs in a worker thread.

        Args:
            text: Prompt text to copy.

        Raises:
            ClipboardError: If no clipboard mechanism is available or copying fails.
        """

        LOGGER.debug("Copying %d characters to the clipboard", len(text))
        try:
            await asyncio.to_thread(pyperclip.copy, text)
        except pyperclip.PyperclipException as exc:
            raise ClipboardError(f"unable to copy to the clipboard: {exc}") from exc


@dataclass(slots=True)
class StreamSink:
    """Write the prompt to a text stream instead of the clipboard."""

    stream: TextIO = field(default_factory=lambda: sys.stdout)

    async def write_text(self, text: str) -> None:
        self.stream.write(text)
        if not text.endswith("\n"):
            self.stream.write("\n")
        self.stream.flush()


@dataclass(slots=True)
class FileSink:
    """Write the prompt to ``path`` as UTF-8 text."""

    path: Path

    async def write_text(self, text: str) -> None:
        try:
            self.path.write_text(text, encoding="utf-8")
        except OSError as exc:
            raise ClipboardError(f"unable to write prompt to {self.path}: {exc}") from exc


__all__ = [
    "ClipboardError",
    "ClipboardSink",
    "FileSink",
    "StreamSink",
    "SystemClipboard",
]
