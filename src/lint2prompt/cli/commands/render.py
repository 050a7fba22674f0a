# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI command printing diagnostics in one of the supported renderings."""

from __future__ import annotations

from typing import Annotated

import typer

from ...config import ConfigError
from ...diagnostics.context import FileContextReader
from ...diagnostics.filtering import filter_entries
from ...diagnostics.json_import import DiagnosticsImportError
from ...logging import configure_logging
from ...reporting.formatters import OutputFormat, render
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


def render_command(
    diagnostics: DiagnosticsOption = "-",
    output_format: Annotated[
        OutputFormat,
        typer.Option("--format", "-f", case_sensitive=False, help="Rendering to produce."),
    ] = OutputFormat.COMPACT,
    root: RootOption = None,
    config: ConfigOption = None,
    ignore: IgnoreOption = None,
    no_color: NoColorOption = False,
    no_emoji: NoEmojiOption = False,
    verbose: VerboseOption = False,
) -> None:
    """Print diagnostics as JSON, verbose text, or compact prompt text."""

    configure_logging(verbose=verbose)
    workspace = resolve_root(root)
    try:
        settings = resolve_settings(workspace, config=config, ignore=ignore)
        entries = load_entries(diagnostics, workspace)
    except (ConfigError, DiagnosticsImportError) as exc:
        raise abort(exc, use_emoji=not no_emoji, use_color=False if no_color else None) from exc

    filtered = filter_entries(entries, settings.linter_ignored)
    rendered = render(filtered, output_format, reader=FileContextReader())
    if rendered:
        typer.echo(rendered, nl=not rendered.endswith("\n"))


__all__ = ["render_command"]
