# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI command detecting the scanner languages of a GitHub repository."""

from __future__ import annotations

import json
from typing import Annotated

import typer

from ...github import fetch_github_languages
from ...languages import detect_languages
from ...logging import info
from ..shared import get_options


def detect_command(
    ctx: typer.Context,
    repo: Annotated[str, typer.Argument(help="Repository in owner/name form.")],
    token: Annotated[
        str | None,
        typer.Option("--token", envvar="GITHUB_TOKEN", help="GitHub token used for the API request."),
    ] = None,
) -> None:
    """Print the scanner languages detected for REPO as a JSON array."""

    options = get_options(ctx)
    info(f"Fetching languages for repository: {repo}", use_emoji=options.use_emoji, use_color=options.use_color)
    host_languages = fetch_github_languages(repo, token)
    detected = detect_languages(host_languages)
    typer.echo(json.dumps(detected, separators=(",", ":")))


def register(app: typer.Typer) -> None:
    """Register the ``detect`` command with ``app``."""

    app.command(name="detect")(detect_command)


__all__ = ["detect_command", "register"]
