# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Repository configuration lookup with a default-file and built-in fallback."""

from __future__ import annotations

import logging
import tomllib
from pathlib import Path
from typing import Final

from pydantic import ValidationError

from .constants import (
    BUILTIN_PATHS_IGNORED,
    BUILTIN_QUERIES,
    BUILTIN_RULES_EXCLUDED,
    DEFAULT_CONFIG_NAME,
    REPO_CONFIG_SUFFIX,
)
from .errors import ConfigError
from .models import RepositoryConfig

LOGGER = logging.getLogger(__name__)

BUNDLED_CONFIG_DIR: Final[Path] = Path(__file__).resolve().parent / "repo_configs"


def builtin_default_config() -> RepositoryConfig:
    """Return the configuration used when no repository file can be loaded."""

    return RepositoryConfig(
        paths_ignored=BUILTIN_PATHS_IGNORED,
        rules_excluded=BUILTIN_RULES_EXCLUDED,
        languages_config=(),
        queries=BUILTIN_QUERIES,
    )


def repo_short_name(repo: str) -> str | None:
    """Return ``name`` from an ``owner/name`` repository identifier.

    Args:
        repo: Repository identifier, normally ``owner/name``.

    Returns:
        str | None: The second path segment, or ``None`` when absent.
    """

    segments = repo.split("/")
    if len(segments) < 2 or not segments[1]:
        return None
    return segments[1]


def resolve_config_path(repo: str, config_dir: Path) -> Path | None:
    """Return the config file that applies to ``repo`` under ``config_dir``.

    The repository-specific ``<name>.toml`` is preferred, then
    ``default.toml``. A missing directory simply yields no candidates.

    Args:
        repo: Repository identifier in ``owner/name`` form.
        config_dir: Directory holding repository config files.

    Returns:
        Path | None: First existing candidate, or ``None``.
    """

    candidates: list[Path] = []
    short_name = repo_short_name(repo)
    if short_name is not None:
        candidates.append(config_dir / f"{short_name}{REPO_CONFIG_SUFFIX}")
    candidates.append(config_dir / f"{DEFAULT_CONFIG_NAME}{REPO_CONFIG_SUFFIX}")
    for candidate in candidates:
        if candidate.is_file():
            return candidate
    return None


def read_config_file(path: Path) -> RepositoryConfig:
    """Parse and validate a repository configuration document.

    Args:
        path: TOML document to read.

    Returns:
        RepositoryConfig: Validated configuration.

    Raises:
        ConfigError: If the document is not valid TOML or fails validation.
        OSError: If the file cannot be read.
    """

    with path.open("rb") as handle:
        try:
            data = tomllib.load(handle)
        except (tomllib.TOMLDecodeError, UnicodeDecodeError) as exc:
            raise ConfigError(f"{path} is not valid TOML: {exc}") from exc
    try:
        return RepositoryConfig.model_validate(data)
    except ValidationError as exc:
        raise ConfigError(f"{path} does not describe a repository config: {exc}") from exc


def load_repo_config(
    repo: str,
    config_dir: Path | None = None,
    *,
    logger: logging.Logger | None = None,
) -> RepositoryConfig:
    """Load the configuration that applies to ``repo``.

    Failures never propagate: unreadable or invalid documents are logged and
    the built-in default is returned instead.

    Args:
        repo: Repository identifier in ``owner/name`` form.
        config_dir: Directory holding repository configs; defaults to the
            configs bundled with the package.
        logger: Optional logger receiving diagnostics; defaults to the module
            logger.

    Returns:
        RepositoryConfig: Loaded or fallback configuration.
    """

    log = logger or LOGGER
    base_dir = config_dir if config_dir is not None else BUNDLED_CONFIG_DIR
    try:
        path = resolve_config_path(repo, base_dir)
        if path is None:
            log.debug("No config file for %s under %s, using built-in defaults", repo, base_dir)
            return builtin_default_config()
        log.debug("Loading config for %s from %s", repo, path)
        return read_config_file(path)
    except (ConfigError, OSError) as exc:
        log.error('Error loading config for "%s": %s', repo, exc)
        log.error("Falling back to default configuration")
        return builtin_default_config()


__all__ = [
    "BUNDLED_CONFIG_DIR",
    "builtin_default_config",
    "load_repo_config",
    "read_config_file",
    "repo_short_name",
    "resolve_config_path",
]
