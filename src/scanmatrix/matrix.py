# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Scan plan construction from detected languages and job overrides."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence

from .constants import ALWAYS_INCLUDED_LANGUAGE, DEFAULT_CONFIGS
from .models import LanguageJobDescriptor, ScanPlan

LOGGER = logging.getLogger(__name__)


def build_plan(
    detected_languages: Iterable[str],
    overrides: Iterable[LanguageJobDescriptor] = (),
    *,
    logger: logging.Logger | None = None,
) -> ScanPlan:
    """Build the scanner job matrix for the detected languages.

    Every language in ``detected_languages`` plus the always-scanned
    workflow-definition language is resolved against ``overrides`` and the
    built-in defaults. An override matches a language either by the detected
    name (``java``) or by its default scanner name (``java-kotlin``). Matched
    overrides with ``ignore = true`` drop the language from the plan.

    Args:
        detected_languages: Scanner language identifiers detected for the repo.
        overrides: Job descriptors overriding the built-in defaults. Later
            entries replace earlier ones declaring the same language.
        logger: Optional logger receiving diagnostics; defaults to the module
            logger.

    Returns:
        ScanPlan: Deduplicated job matrix in working-set order.
    """

    log = logger or LOGGER
    detected = tuple(detected_languages)
    indexed = _index_by_language(overrides)
    log.debug("Auto-detected languages: %s", list(detected))
    log.debug("Provided custom configs: %s", [entry.to_matrix_entry() for entry in indexed.values()])

    working_set = dict.fromkeys((*detected, ALWAYS_INCLUDED_LANGUAGE))
    emitted: list[LanguageJobDescriptor] = []
    for language in working_set:
        default = DEFAULT_CONFIGS.get(language)
        match = _find_override(language, default, indexed.values())
        if match is not None and match.ignored:
            log.warning("%s detected but marked as ignored - skipping", language)
            continue
        if match is not None and default is not None:
            emitted.append(default.merged_with(match).without_control_flags())
        elif match is not None:
            emitted.append(match.without_control_flags())
        elif default is not None:
            emitted.append(default)

    plan = ScanPlan(include=tuple(_unique_by_language(emitted)))
    log.debug("Generated matrix: %s (%d entries)", plan.to_json(), len(plan.include))
    return plan


def merge_language_configs(
    file_configs: Sequence[LanguageJobDescriptor],
    input_configs: Iterable[LanguageJobDescriptor],
) -> list[LanguageJobDescriptor]:
    """Layer workflow-supplied overrides on top of repository file overrides.

    File entries keep their position. A workflow entry for a language already
    declared in the file is merged into the first such entry, with workflow
    fields winning; entries for new languages are appended.

    Args:
        file_configs: ``languages_config`` entries from the repository config.
        input_configs: Overrides supplied directly by the workflow.

    Returns:
        list[LanguageJobDescriptor]: Combined override sequence.
    """

    file_index = _index_by_language(file_configs)
    merged = list(file_configs)
    for language, input_config in _index_by_language(input_configs).items():
        file_config = file_index.get(language)
        if file_config is None:
            merged.append(input_config)
            continue
        position = next(index for index, entry in enumerate(merged) if entry.language == language)
        merged[position] = file_config.merged_with(input_config)
    return merged


def _index_by_language(descriptors: Iterable[LanguageJobDescriptor]) -> dict[str, LanguageJobDescriptor]:
    """Return descriptors keyed by language, later entries winning."""

    index: dict[str, LanguageJobDescriptor] = {}
    for descriptor in descriptors:
        index[descriptor.language] = descriptor
    return index


def _find_override(
    language: str,
    default: LanguageJobDescriptor | None,
    overrides: Iterable[LanguageJobDescriptor],
) -> LanguageJobDescriptor | None:
    """Return the first override addressing ``language`` by either name.

    When two overrides match through different names, the one declared first
    in the override sequence wins.
    """

    scanner_language = default.language if default is not None else None
    for override in overrides:
        if override.language in (language, scanner_language):
            return override
    return None


def _unique_by_language(descriptors: Iterable[LanguageJobDescriptor]) -> list[LanguageJobDescriptor]:
    seen: set[str] = set()
    unique: list[LanguageJobDescriptor] = []
    for descriptor in descriptors:
        if descriptor.language in seen:
            continue
        seen.add(descriptor.language)
        unique.append(descriptor)
    return unique


__all__ = ["build_plan", "merge_language_configs"]
