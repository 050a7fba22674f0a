# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Options and helpers shared by the CLI commands."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import Annotated, TypeAlias

import typer

from ..config import Lint2PromptSettings
from ..config_loader import load_settings
from ..diagnostics.json_import import JsonDiagnosticSource
from ..logging import fail
from ..models import FileDiagnostics

DiagnosticsOption: TypeAlias = Annotated[
    str,
    typer.Option(
        "--diagnostics",
        "-d",
        help="JSON diagnostics dump to read; '-' reads from stdin.",
    ),
]
RootOption: TypeAlias = Annotated[
    Path | None,
    typer.Option("--root", "-r", help="Workspace root for config discovery and relative paths."),
]
ConfigOption: TypeAlias = Annotated[
    Path | None,
    typer.Option("--config", "-c", help="Explicit TOML configuration file."),
]
IgnoreOption: TypeAlias = Annotated[
    list[str] | None,
    typer.Option("--ignore", "-i", help="Ignore diagnostics from matching tools (glob, repeatable)."),
]
VerboseOption: TypeAlias = Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging.")]
NoColorOption: TypeAlias = Annotated[bool, typer.Option("--no-color", help="Disable ANSI colour output.")]
NoEmojiOption: TypeAlias = Annotated[bool, typer.Option("--no-emoji", help="Disable emoji in messages.")]


def resolve_root(root: Path | None) -> Path:
    """Return ``root`` resolved, defaulting to the working directory."""

    return (root or Path.cwd()).resolve()


def resolve_settings(
    root: Path,
    *,
    config: Path | None,
    ignore: Sequence[str] | None,
    prefix: str | None = None,
    suffix: str | None = None,
) -> Lint2PromptSettings:
    """Load settings for ``root`` and apply command-line overrides.

    ``--ignore`` patterns extend the configured list; ``--prefix`` and
    ``--suffix`` replace the configured strings.

    Raises:
        ConfigError: If any configuration source is invalid.
    """

    settings = load_settings(
        root,
        config_path=config,
        overrides={"prompt_prefix": prefix, "prompt_suffix": suffix},
    )
    if ignore:
        settings.linter_ignored = [*settings.linter_ignored, *ignore]
    return settings


def load_entries(diagnostics: str, root: Path) -> list[FileDiagnostics]:
    """Read diagnostics from ``diagnostics`` (path or ``-``) relative to ``root``.

    Raises:
        DiagnosticsImportError: If the dump cannot be read or parsed.
    """

    return JsonDiagnosticSource(diagnostics, root=root).get_diagnostics()


def abort(exc: Exception, *, use_emoji: bool, use_color: bool | None) -> typer.Exit:
    """Report ``exc`` to the user and return the exit to raise."""

    fail(str(exc), use_emoji=use_emoji, use_color=use_color)
    return typer.Exit(code=1)


__all__ = [
    "ConfigOption",
    "DiagnosticsOption",
    "IgnoreOption",
    "NoColorOption",
    "NoEmojiOption",
    "RootOption",
    "VerboseOption",
    "abort",
    "load_entries",
    "resolve_root",
    "resolve_settings",
]
