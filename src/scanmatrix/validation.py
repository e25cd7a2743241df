# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Input validation, sanitisation, and CI output escaping helpers."""

from __future__ import annotations

import re
from collections.abc import Callable
from typing import Final

from .errors import MissingInputError
from .models import InputParameters

_PATH_METACHARACTERS: Final[re.Pattern[str]] = re.compile(r"[;&|`$(){}\[\]<>]")
_RULE_ID_DISALLOWED: Final[re.Pattern[str]] = re.compile(r"[^a-zA-Z0-9\-/_]")


def validate_required_inputs(inputs: InputParameters) -> None:
    """Ensure the inputs needed to generate a scan configuration are present.

    Raises:
        MissingInputError: If ``repo`` or ``language`` is missing or empty.
    """

    if not inputs.repo or not inputs.language:
        raise MissingInputError("Missing required inputs: REPO and LANGUAGE are required")


def sanitize_path(value: str) -> str:
    """Strip shell metacharacters from a path fragment."""

    return _PATH_METACHARACTERS.sub("", value)


def sanitize_rule_id(value: str) -> str:
    """Keep only alphanumerics, hyphens, slashes, and underscores in a rule id."""

    return _RULE_ID_DISALLOWED.sub("", value)


def split_multiline(value: str | None, sanitizer: Callable[[str], str]) -> tuple[str, ...]:
    """Split a newline-separated workflow input into sanitised entries.

    Args:
        value: Raw multi-line input, possibly empty.
        sanitizer: Function applied to each non-blank line.

    Returns:
        tuple[str, ...]: Sanitised entries in input order.
    """

    if not value:
        return ()
    return tuple(sanitizer(line) for line in value.split("\n") if line.strip())


def escape_output(value: object) -> str:
    """Escape ``value`` for a ``GITHUB_OUTPUT`` line.

    Percent signs are escaped first so the escapes introduced for line breaks
    are not escaped again.

    Args:
        value: Value to serialise; falsy values become an empty string.

    Returns:
        str: Escaped single-line representation.
    """

    if not value:
        return ""
    return str(value).replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


__all__ = [
    "escape_output",
    "sanitize_path",
    "sanitize_rule_id",
    "split_multiline",
    "validate_required_inputs",
]
