# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI command building the scanner job matrix."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from ...errors import ScanMatrixError
from ...matrix import build_plan, merge_language_configs
from ...repo_config import load_repo_config
from ..shared import abort, coerce_detected_languages, coerce_overrides, get_options, parse_json_argument


def matrix_command(
    ctx: typer.Context,
    detected_languages: Annotated[
        str,
        typer.Argument(help='JSON array of scanner languages or a GitHub languages object, e.g. \'{"Java": 1000}\'.'),
    ],
    languages_config: Annotated[
        str | None,
        typer.Argument(help='JSON array of job overrides, e.g. \'[{"language": "java", "version": "21"}]\'.'),
    ] = None,
    repo: Annotated[str | None, typer.Argument(help="Repository in owner/name form.")] = None,
    config_dir: Annotated[Path | None, typer.Argument(help="Directory holding repository configs.")] = None,
) -> None:
    """Print the scan plan as a single JSON line.

    When REPO and CONFIG_DIR are both given, the repository's
    ``languages_config`` is layered underneath the workflow overrides.
    """

    options = get_options(ctx)
    try:
        detected = coerce_detected_languages(parse_json_argument(detected_languages, "detected_languages"))
        overrides = (
            coerce_overrides(parse_json_argument(languages_config, "languages_config")) if languages_config else []
        )
    except ScanMatrixError as exc:
        abort(exc, options, prefix="Error parsing JSON input")

    if repo and config_dir is not None:
        repo_config = load_repo_config(repo, config_dir)
        overrides = merge_language_configs(repo_config.languages_config, overrides)

    plan = build_plan(detected, overrides)
    typer.echo(plan.to_json())


def register(app: typer.Typer) -> None:
    """Register the ``matrix`` command with ``app``."""

    app.command(name="matrix")(matrix_command)


__all__ = ["matrix_command", "register"]
