# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Write resolved values to the GitHub Actions output channel."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path

from .validation import escape_output


def format_outputs(values: Mapping[str, object]) -> list[str]:
    """Return ``key=value`` lines with every value escaped."""

    return [f"{key}={escape_output(value)}" for key, value in values.items()]


def append_outputs(path: Path, values: Mapping[str, object]) -> None:
    """Append escaped ``key=value`` lines to the ``GITHUB_OUTPUT`` file at ``path``.

    Args:
        path: Output file provided by the runner.
        values: Output names mapped to their unescaped values.
    """

    with path.open("a", encoding="utf-8") as handle:
        for line in format_outputs(values):
            handle.write(f"{line}\n")


__all__ = ["append_outputs", "format_outputs"]
