# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for repository configuration lookup and fallback."""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path

import pytest

from scanmatrix.errors import ConfigError
from scanmatrix.repo_config import (
    BUNDLED_CONFIG_DIR,
    builtin_default_config,
    load_repo_config,
    read_config_file,
    repo_short_name,
    resolve_config_path,
)

ConfigWriter = Callable[[str, str], Path]

REPO_BODY = """
pathsIgnored = ["vendor", "docs"]
rulesExcluded = ["js/unused-local-variable"]

[[languages_config]]
language = "java-kotlin"
build_mode = "manual"
build_command = "./gradlew :app:build"
version = 21
distribution = "temurin"

[[languages_config]]
language = "cpp"
ignore = true

[[queries]]
name = "Repo queries"
uses = "./query-suites/repo.qls"
"""


def test_builtin_default_config_values() -> None:
    config = builtin_default_config()

    assert config.paths_ignored == ("test",)
    assert config.rules_excluded == ("js/log-injection",)
    assert config.languages_config == ()
    assert [query.uses for query in config.queries] == [
        "./query-suites/base.qls",
        "./custom-queries/query-suites/custom-queries.qls",
    ]


@pytest.mark.parametrize(
    ("repo", "expected"),
    [("owner/name", "name"), ("org/repo/extra", "repo"), ("bare", None), ("owner/", None)],
)
def test_repo_short_name(repo: str, expected: str | None) -> None:
    assert repo_short_name(repo) == expected


def test_load_repo_config_reads_repo_specific_file(config_dir: Path, write_config: ConfigWriter) -> None:
    write_config("service", REPO_BODY)
    write_config("default", 'pathsIgnored = ["should-not-load"]')

    config = load_repo_config("owner/service", config_dir)

    assert config.paths_ignored == ("vendor", "docs")
    assert config.rules_excluded == ("js/unused-local-variable",)
    java = config.language_override("java-kotlin")
    assert java is not None
    assert java.version == "21"
    assert java.distribution == "temurin"
    cpp = config.language_override("cpp")
    assert cpp is not None and cpp.ignored


def test_load_repo_config_falls_back_to_default_file(config_dir: Path, write_config: ConfigWriter) -> None:
    write_config("default", 'pathsIgnored = ["from-default"]')

    config = load_repo_config("owner/nonexistent-repo", config_dir)

    assert config.paths_ignored == ("from-default",)
    assert config.languages_config == ()


def test_load_repo_config_without_any_file_returns_builtin(config_dir: Path) -> None:
    assert load_repo_config("owner/nonexistent-repo", config_dir) == builtin_default_config()


def test_load_repo_config_with_missing_directory_returns_builtin(tmp_path: Path) -> None:
    assert load_repo_config("owner/repo", tmp_path / "does-not-exist") == builtin_default_config()


def test_load_repo_config_with_bare_repo_name_uses_default_file(config_dir: Path, write_config: ConfigWriter) -> None:
    write_config("default", 'rulesExcluded = ["py/clear-text-logging"]')

    config = load_repo_config("just-a-name", config_dir)

    assert config.rules_excluded == ("py/clear-text-logging",)


def test_load_repo_config_recovers_from_invalid_toml(
    config_dir: Path,
    write_config: ConfigWriter,
    caplog: pytest.LogCaptureFixture,
) -> None:
    write_config("broken", "pathsIgnored = [unterminated")
    write_config("default", 'pathsIgnored = ["from-default"]')

    with caplog.at_level(logging.ERROR, logger="scanmatrix.repo_config"):
        config = load_repo_config("owner/broken", config_dir)

    assert config == builtin_default_config()
    assert 'Error loading config for "owner/broken"' in caplog.text
    assert "Falling back to default configuration" in caplog.text


def test_load_repo_config_recovers_from_schema_violation(config_dir: Path, write_config: ConfigWriter) -> None:
    write_config("odd", 'pathsIgnored = "not-a-list"\nunexpected = 1')

    assert load_repo_config("owner/odd", config_dir) == builtin_default_config()


def test_load_repo_config_rejects_unknown_build_mode(config_dir: Path, write_config: ConfigWriter) -> None:
    write_config(
        "odd",
        """
[[languages_config]]
language = "python"
build_mode = "sometimes"
""",
    )

    assert load_repo_config("owner/odd", config_dir) == builtin_default_config()


def test_load_repo_config_uses_injected_logger(
    config_dir: Path,
    write_config: ConfigWriter,
    caplog: pytest.LogCaptureFixture,
) -> None:
    write_config("broken", "[[[")
    logger = logging.getLogger("tests.repo_config")

    with caplog.at_level(logging.ERROR, logger="tests.repo_config"):
        load_repo_config("owner/broken", config_dir, logger=logger)

    assert {record.name for record in caplog.records} == {"tests.repo_config"}


def test_read_config_file_raises_config_error(config_dir: Path, write_config: ConfigWriter) -> None:
    path = write_config("broken", "= nope")

    with pytest.raises(ConfigError):
        read_config_file(path)


def test_resolve_config_path_prefers_repo_file(config_dir: Path, write_config: ConfigWriter) -> None:
    repo_file = write_config("service", "")
    default_file = write_config("default", "")

    assert resolve_config_path("owner/service", config_dir) == repo_file
    assert resolve_config_path("owner/other", config_dir) == default_file


def test_bundled_configs_load() -> None:
    default = load_repo_config("owner/unknown-repository")
    linea = load_repo_config("owner/lll")

    assert default.paths_ignored == ("test",)
    assert default.queries == builtin_default_config().queries
    assert linea.language_override("java-kotlin") is not None
    assert (BUNDLED_CONFIG_DIR / "default.toml").is_file()


def test_load_repo_config_rejects_integer_ignore_flag(config_dir: Path, write_config: ConfigWriter) -> None:
    write_config(
        "odd",
        """
[[languages_config]]
language = "cpp"
ignore = 1
""",
    )

    config = load_repo_config("owner/odd", config_dir)

    assert config == builtin_default_config()
    assert config.language_override("cpp") is None
