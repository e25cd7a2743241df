# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Shared CLI state and argument decoding helpers."""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass
from typing import NoReturn

import typer
from pydantic import ValidationError

from ..errors import InvalidArgumentError, ScanMatrixError
from ..languages import detect_languages
from ..logging import fail
from ..models import LanguageJobDescriptor


@dataclass(slots=True, frozen=True)
class CLIOptions:
    """Presentation flags set by the top-level callback."""

    verbose: bool = False
    use_color: bool = True
    use_emoji: bool = True


def get_options(ctx: typer.Context) -> CLIOptions:
    """Return the :class:`CLIOptions` stored on ``ctx`` (defaults when absent)."""

    options = ctx.obj
    if isinstance(options, CLIOptions):
        return options
    return CLIOptions()


def abort(error: ScanMatrixError, options: CLIOptions, *, prefix: str = "Error") -> NoReturn:
    """Report ``error`` on stderr and exit with status 1.

    Raises:
        typer.Exit: Always, with exit code ``1``.
    """

    fail(f"{prefix}: {error}", use_emoji=options.use_emoji, use_color=options.use_color)
    raise typer.Exit(code=1) from error


def parse_json_argument(raw: str, name: str) -> object:
    """Decode the JSON text passed for the ``name`` argument.

    Raises:
        InvalidArgumentError: If ``raw`` is not valid JSON.
    """

    try:
        return json.loads(raw)
    except json.JSONDecodeError as exc:
        raise InvalidArgumentError(f"{name} is not valid JSON ({exc.msg} at position {exc.pos})") from exc


def coerce_detected_languages(payload: object) -> list[str]:
    """Return scanner languages from a pre-detected list or a host language mapping.

    A JSON array is taken as already-detected scanner identifiers. Anything
    else goes through host-language detection, which falls back to the
    default language for unusable input.

    Raises:
        InvalidArgumentError: If an array contains non-string entries.
    """

    if isinstance(payload, list):
        if not all(isinstance(item, str) for item in payload):
            raise InvalidArgumentError("detected languages array must contain only strings")
        return list(payload)
    return detect_languages(payload)


def coerce_overrides(payload: object) -> list[LanguageJobDescriptor]:
    """Validate a decoded override list into job descriptors.

    Raises:
        InvalidArgumentError: If ``payload`` is not a list of valid descriptors.
    """

    if not isinstance(payload, list):
        raise InvalidArgumentError("languages config must be a JSON array")
    descriptors: list[LanguageJobDescriptor] = []
    for position, entry in enumerate(payload):
        if not isinstance(entry, Mapping):
            raise InvalidArgumentError(f"languages config entry {position} must be an object")
        try:
            descriptors.append(LanguageJobDescriptor.model_validate(entry))
        except ValidationError as exc:
            raise InvalidArgumentError(f"languages config entry {position} is invalid: {exc}") from exc
    return descriptors


__all__ = [
    "CLIOptions",
    "abort",
    "coerce_detected_languages",
    "coerce_overrides",
    "get_options",
    "parse_json_argument",
]
