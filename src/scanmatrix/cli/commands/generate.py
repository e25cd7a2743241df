# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI command generating the per-job CodeQL configuration and step outputs."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated, cast

import typer

from ...codeql_config import build_scan_config, write_scan_config
from ...constants import GENERATED_CONFIG_FILENAME
from ...errors import ScanMatrixError
from ...fallbacks import apply_language_config_fallbacks
from ...logging import ok
from ...models import InputParameters
from ...outputs import append_outputs, format_outputs
from ...repo_config import load_repo_config
from ...validation import sanitize_path, sanitize_rule_id, split_multiline, validate_required_inputs
from ..shared import abort, get_options


def generate_command(
    ctx: typer.Context,
    repo: Annotated[str | None, typer.Option("--repo", envvar="REPO", help="Repository in owner/name form.")] = None,
    language: Annotated[
        str | None,
        typer.Option("--language", envvar="LANGUAGE", help="Scanner language of this job."),
    ] = None,
    build_mode: Annotated[str | None, typer.Option("--build-mode", envvar="BUILD_MODE")] = None,
    build_command: Annotated[str | None, typer.Option("--build-command", envvar="BUILD_COMMAND")] = None,
    version: Annotated[str | None, typer.Option("--version", envvar="VERSION")] = None,
    distribution: Annotated[str | None, typer.Option("--distribution", envvar="DISTRIBUTION")] = None,
    paths_ignored: Annotated[
        str | None,
        typer.Option("--paths-ignored", envvar="PATHS_IGNORED", help="Newline-separated extra paths to ignore."),
    ] = None,
    rules_excluded: Annotated[
        str | None,
        typer.Option("--rules-excluded", envvar="RULES_EXCLUDED", help="Newline-separated extra rule ids to exclude."),
    ] = None,
    config_dir: Annotated[
        Path | None,
        typer.Option("--config-dir", help="Directory holding repository configs (defaults to the bundled set)."),
    ] = None,
    github_output: Annotated[
        Path | None,
        typer.Option("--github-output", envvar="GITHUB_OUTPUT", help="Step output file; stdout when unset."),
    ] = None,
    workspace: Annotated[
        Path | None,
        typer.Option("--workspace", envvar="GITHUB_WORKSPACE", help="Directory receiving the generated config."),
    ] = None,
) -> None:
    """Resolve one scan job's parameters and write its CodeQL configuration."""

    options = get_options(ctx)
    inputs = InputParameters(
        repo=repo,
        language=language,
        build_mode=build_mode,
        build_command=build_command,
        version=version,
        distribution=distribution,
        paths_ignored=split_multiline(paths_ignored, sanitize_path),
        rules_excluded=split_multiline(rules_excluded, sanitize_rule_id),
    )
    try:
        validate_required_inputs(inputs)
    except ScanMatrixError as exc:
        abort(exc, options)

    repo_config = load_repo_config(cast(str, inputs.repo), config_dir)
    resolved = apply_language_config_fallbacks(inputs, repo_config)

    step_outputs = {
        "build_mode": resolved.build_mode,
        "build_command": resolved.build_command,
        "version": resolved.version,
        "distribution": resolved.distribution,
    }
    if github_output is not None:
        append_outputs(github_output, step_outputs)
    else:
        for line in format_outputs(step_outputs):
            typer.echo(line)

    destination = (workspace or Path.cwd()) / GENERATED_CONFIG_FILENAME
    write_scan_config(build_scan_config(repo_config, resolved), destination)
    ok(f"Wrote scan configuration to {destination}", use_emoji=options.use_emoji, use_color=options.use_color)


def register(app: typer.Typer) -> None:
    """Register the ``generate-config`` command with ``app``."""

    app.command(name="generate-config")(generate_command)


__all__ = ["generate_command", "register"]
