# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Language detection utilities for selecting relevant scanners."""

from __future__ import annotations

import logging
from collections.abc import Mapping

from .constants import FALLBACK_LANGUAGE, LANGUAGE_MAPPING

LOGGER = logging.getLogger(__name__)


def detect_languages(host_languages: object, *, logger: logging.Logger | None = None) -> list[str]:
    """Return the scanner languages implied by a host language breakdown.

    Only the presence of a key matters; byte counts are ignored. Unknown host
    languages are dropped and languages sharing a scanner collapse into one
    entry, keeping the first-seen order.

    Args:
        host_languages: Mapping of host language name to byte count, as
            returned by the GitHub languages endpoint. Any other value is
            treated as invalid input.
        logger: Optional logger receiving diagnostics; defaults to the module
            logger.

    Returns:
        list[str]: Scanner language identifiers, or ``[FALLBACK_LANGUAGE]``
        when the input is invalid or nothing supported was detected.
    """

    log = logger or LOGGER
    if not isinstance(host_languages, Mapping):
        log.warning("Invalid GitHub languages data, defaulting to %s", FALLBACK_LANGUAGE)
        return [FALLBACK_LANGUAGE]

    detected: dict[str, None] = {}
    for host_language in host_languages:
        scanner_language = LANGUAGE_MAPPING.get(host_language) if isinstance(host_language, str) else None
        if scanner_language is not None:
            detected.setdefault(scanner_language, None)

    if not detected:
        log.warning("No supported languages detected, defaulting to %s", FALLBACK_LANGUAGE)
        return [FALLBACK_LANGUAGE]
    return list(detected)


__all__ = ["detect_languages"]
