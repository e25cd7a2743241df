# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI application entry point wiring commands and shared options."""

from __future__ import annotations

from typing import Annotated

import typer

from ..logging import configure_logging
from .commands import register_commands
from .shared import CLIOptions
from .typer_ext import create_typer

app = create_typer(
    name="scan-matrix",
    help="Resolve code-scanning jobs and their build parameters for a repository.",
    no_args_is_help=True,
    add_completion=False,
)


@app.callback()
def main(
    ctx: typer.Context,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log detection and matrix details.")] = False,
    color: Annotated[bool, typer.Option("--color/--no-color", help="Colourise diagnostics.")] = True,
    emoji: Annotated[bool, typer.Option("--emoji/--no-emoji", help="Prefix diagnostics with emoji.")] = True,
) -> None:
    """Store presentation flags and route library logging to stderr."""

    ctx.obj = CLIOptions(verbose=verbose, use_color=color, use_emoji=emoji)
    configure_logging(verbose=verbose, use_color=color)


register_commands(app)

__all__ = ["app"]
