# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest
from typer.testing import CliRunner

ConfigWriter = Callable[[str, str], Path]


@pytest.fixture
def config_dir(tmp_path: Path) -> Path:
    """Return an empty directory for repository config files."""

    directory = tmp_path / "repo-configs"
    directory.mkdir()
    return directory


@pytest.fixture
def write_config(config_dir: Path) -> ConfigWriter:
    """Return a helper writing ``<name>.toml`` into :func:`config_dir`."""

    def _write(name: str, body: str) -> Path:
        path = config_dir / f"{name}.toml"
        path.write_text(body.strip() + "\n", encoding="utf-8")
        return path

    return _write


@pytest.fixture
def runner() -> CliRunner:
    """Return a Typer CLI runner."""

    return CliRunner()
