# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Fill missing workflow inputs from the repository's language overrides."""

from __future__ import annotations

from typing import Final

from .models import InputParameters, RepositoryConfig

FALLBACK_FIELDS: Final[tuple[str, ...]] = ("build_mode", "build_command", "version", "distribution")


def apply_language_config_fallbacks(inputs: InputParameters, config: RepositoryConfig) -> InputParameters:
    """Return ``inputs`` with build parameters backfilled from ``config``.

    Explicit values always win. A field is backfilled only when the explicit
    value is falsy and the repository override for ``inputs.language`` carries
    a truthy value.

    Args:
        inputs: Explicit workflow inputs for one scanner job.
        config: Repository configuration providing ``languages_config``.

    Returns:
        InputParameters: ``inputs`` itself when nothing applies, otherwise a
        copy with the backfilled fields.
    """

    if not inputs.language:
        return inputs
    override = config.language_override(inputs.language)
    if override is None:
        return inputs

    updates: dict[str, str] = {}
    for field in FALLBACK_FIELDS:
        # Intentional: an empty string counts as missing, since unset workflow
        # inputs arrive as "".
        explicit = getattr(inputs, field)
        configured = getattr(override, field)
        if not explicit and configured:
            updates[field] = configured
    if not updates:
        return inputs
    return inputs.model_copy(update=updates)


__all__ = ["FALLBACK_FIELDS", "apply_language_config_fallbacks"]
