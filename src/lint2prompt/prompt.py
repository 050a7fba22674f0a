# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Assemble the clipboard prompt from compact diagnostic text."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from .clipboard import ClipboardSink
from .config import Lint2PromptSettings
from .diagnostics.context import ContextReader, FileContextReader
from .diagnostics.filtering import filter_entries
from .diagnostics.grouping import build_diagnostics_data
from .models import FileDiagnostics
from .reporting.formatters import render_compact

LOGGER = logging.getLogger(__name__)

QUOTE_FENCE = '"""'


def assemble_prompt(diagnostic_text: str, settings: Lint2PromptSettings | None = None) -> str:
    """Wrap ``diagnostic_text`` with the configured prefix and suffix.

    Args:
        diagnostic_text: Compact rendering of the diagnostics.
        settings: Settings supplying the prefix and suffix; defaults apply when omitted.

    Returns:
        str: ``<prefix>\\n\\n\"\"\"\\n<text>\\n\"\"\"\\n\\n<suffix>``.
    """

    active = settings or Lint2PromptSettings()
    return (
        f"{active.effective_prefix}\n\n"
        f"{QUOTE_FENCE}\n{diagnostic_text.strip()}\n{QUOTE_FENCE}\n\n"
        f"{active.effective_suffix}"
    )


def build_prompt(
    entries: Sequence[FileDiagnostics],
    settings: Lint2PromptSettings | None = None,
    *,
    reader: ContextReader | None = None,
) -> str | None:
    """Return the prompt for ``entries``, or ``None`` when nothing survives filtering.

    Args:
        entries: ``(path, diagnostics)`` pairs from a diagnostic source.
        settings: Ignore patterns plus prompt prefix and suffix.
        reader: Context reader; a fresh :class:`FileContextReader` by default.

    Returns:
        str | None: Assembled prompt text.
    """

    active = settings or Lint2PromptSettings()
    filtered = filter_entries(entries, active.linter_ignored)
    if not filtered:
        return None
    data = build_diagnostics_data(filtered, reader or FileContextReader())
    LOGGER.debug("Rendering %d issue(s) across %d file(s)", sum(len(issues) for issues in data.values()), len(data))
    return assemble_prompt(render_compact(data), active)


async def copy_diagnostics_to_clipboard(
    entries: Sequence[FileDiagnostics],
    settings: Lint2PromptSettings | None,
    sink: ClipboardSink,
    *,
    reader: ContextReader | None = None,
) -> bool:
    """Filter, render and deliver ``entries`` to ``sink``.

    Args:
        entries: ``(path, diagnostics)`` pairs from a diagnostic source.
        settings: Ignore patterns plus prompt prefix and suffix.
        sink: Clipboard sink written exactly once when there is something to copy.
        reader: Optional context reader.

    Returns:
        bool: ``True`` when a prompt was delivered, ``False`` when no
        diagnostics remained and the sink was left untouched.
    """

    prompt = build_prompt(entries, settings, reader=reader)
    if prompt is None:
        return False
    await sink.write_text(prompt)
    return True


__all__ = ["assemble_prompt", "build_prompt", "copy_diagnostics_to_clipboard"]
