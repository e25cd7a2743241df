# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Build and render the CodeQL configuration document for a scan job."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from .models import InputParameters, RepositoryConfig

ScanConfigDocument = dict[str, Any]


def build_scan_config(config: RepositoryConfig, inputs: InputParameters) -> ScanConfigDocument:
    """Combine repository and workflow settings into a CodeQL config mapping.

    Repository entries come first, followed by the workflow additions. Empty
    sections are omitted.

    Args:
        config: Resolved repository configuration.
        inputs: Workflow inputs carrying extra ignored paths and excluded rules.

    Returns:
        ScanConfigDocument: Mapping ready for YAML rendering.
    """

    paths_ignored = [*config.paths_ignored, *inputs.paths_ignored]
    rules_excluded = [*config.rules_excluded, *inputs.rules_excluded]
    document: ScanConfigDocument = {}
    if paths_ignored:
        document["paths-ignore"] = paths_ignored
    if rules_excluded:
        document["query-filters"] = [{"exclude": {"id": rule}} for rule in rules_excluded]
    if config.queries:
        document["queries"] = [{"name": query.name, "uses": query.uses} for query in config.queries]
    return document


def render_scan_config(document: ScanConfigDocument) -> str:
    """Return ``document`` as YAML text preserving key order."""

    return yaml.safe_dump(document, sort_keys=False, default_flow_style=False)


def write_scan_config(document: ScanConfigDocument, destination: Path) -> Path:
    """Render ``document`` to ``destination`` and return the written path."""

    destination.parent.mkdir(parents=True, exist_ok=True)
    destination.write_text(render_scan_config(document), encoding="utf-8")
    return destination


__all__ = [
    "ScanConfigDocument",
    "build_scan_config",
    "render_scan_config",
    "write_scan_config",
]
