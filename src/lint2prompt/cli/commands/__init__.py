# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""CLI command registry."""

from __future__ import annotations

import typer

from .copy import copy_command
from .render import render_command

__all__ = ["register_commands"]


def register_commands(app: typer.Typer) -> None:
    """Register the built-in commands on ``app``.

    Args:
        app: Typer application receiving the command registrations.
    """

    app.command("copy", help="Copy workspace diagnostics to the clipboard as an LLM prompt.")(copy_command)
    app.command("render", help="Print diagnostics as JSON, text, or compact prompt text.")(render_command)
