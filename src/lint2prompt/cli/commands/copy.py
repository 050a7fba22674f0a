# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI command copying the diagnostics prompt to the clipboard."""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Annotated

import typer

from ...clipboard import ClipboardError, ClipboardSink, FileSink, StreamSink, SystemClipboard
from ...config import ConfigError
from ...diagnostics.json_import import DiagnosticsImportError
from ...logging import configure_logging, info, ok
from ...prompt import copy_diagnostics_to_clipboard
from ..shared import (
    ConfigOption,
    DiagnosticsOption,
    IgnoreOption,
    NoColorOption,
    NoEmojiOption,
    RootOption,
    VerboseOption,
    abort,
    load_entries,
    resolve_root,
    resolve_settings,
)

COPIED_MESSAGE = "Problems copied to clipboard."
NO_PROBLEMS_MESSAGE = "No problems found in the workspace."


def _select_sink(*, to_stdout: bool, output: Path | None) -> ClipboardSink:
    if output is not None:
        return FileSink(output)
    if to_stdout:
        return StreamSink()
    return SystemClipboard()


def copy_command(
    diagnostics: DiagnosticsOption = "-",
    root: RootOption = None,
    config: ConfigOption = None,
    ignore: IgnoreOption = None,
    prefix: Annotated[str | None, typer.Option("--prefix", help="Text placed before the diagnostics.")] = None,
    suffix: Annotated[str | None, typer.Option("--suffix", help="Text placed after the diagnostics.")] = None,
    to_stdout: Annotated[bool, typer.Option("--stdout", help="Print the prompt instead of copying it.")] = False,
    output: Annotated[Path | None, typer.Option("--output", "-o", help="Write the prompt to a file.")] = None,
    no_color: NoColorOption = False,
    no_emoji: NoEmojiOption = False,
    verbose: VerboseOption = False,
) -> None:
    """Copy the workspace diagnostics to the clipboard as an LLM prompt."""

    if to_stdout and output is not None:
        raise typer.BadParameter("cannot be combined with --stdout", param_hint="--output")
    configure_logging(verbose=verbose)
    use_emoji = not no_emoji
    use_color = False if no_color else None
    workspace = resolve_root(root)
    try:
        settings = resolve_settings(workspace, config=config, ignore=ignore, prefix=prefix, suffix=suffix)
        entries = load_entries(diagnostics, workspace)
    except (ConfigError, DiagnosticsImportError) as exc:
        raise abort(exc, use_emoji=use_emoji, use_color=use_color) from exc

    sink = _select_sink(to_stdout=to_stdout, output=output)
    try:
        copied = asyncio.run(copy_diagnostics_to_clipboard(entries, settings, sink))
    except ClipboardError as exc:
        raise abort(exc, use_emoji=use_emoji, use_color=use_color) from exc

    if not copied:
        info(NO_PROBLEMS_MESSAGE, use_emoji=use_emoji, use_color=use_color)
    elif output is not None:
        ok(f"Problems written to {output}.", use_emoji=use_emoji, use_color=use_color)
    elif not to_stdout:
        ok(COPIED_MESSAGE, use_emoji=use_emoji, use_color=use_color)


__all__ = ["COPIED_MESSAGE", "NO_PROBLEMS_MESSAGE", "copy_command"]
