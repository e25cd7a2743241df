# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Language tables and built-in defaults used across scan-matrix."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Final

from .models import LanguageJobDescriptor, QuerySuite

FALLBACK_LANGUAGE: Final[str] = "javascript"
ALWAYS_INCLUDED_LANGUAGE: Final[str] = "actions"

# GitHub linguist names -> scanner language identifiers.
LANGUAGE_MAPPING: Final[Mapping[str, str]] = MappingProxyType(
    {
        "JavaScript": "javascript",
        "TypeScript": "typescript",
        "Python": "python",
        "Go": "go",
        "Swift": "swift",
        "Java": "java",
        "Kotlin": "java",
        "C++": "cpp",
        "C": "cpp",
        "C#": "csharp",
        "Ruby": "ruby",
    },
)

DEFAULT_CONFIGS: Final[Mapping[str, LanguageJobDescriptor]] = MappingProxyType(
    {
        "javascript": LanguageJobDescriptor(language="javascript-typescript"),
        "typescript": LanguageJobDescriptor(language="javascript-typescript"),
        "python": LanguageJobDescriptor(language="python"),
        "go": LanguageJobDescriptor(language="go"),
        "java": LanguageJobDescriptor(
            language="java-kotlin",
            build_mode="manual",
            build_command="./mvnw compile",
        ),
        "swift": LanguageJobDescriptor(language="swift"),
        "cpp": LanguageJobDescriptor(language="cpp"),
        "csharp": LanguageJobDescriptor(language="csharp"),
        "ruby": LanguageJobDescriptor(language="ruby"),
        ALWAYS_INCLUDED_LANGUAGE: LanguageJobDescriptor(language=ALWAYS_INCLUDED_LANGUAGE),
    },
)

DEFAULT_CONFIG_NAME: Final[str] = "default"
REPO_CONFIG_SUFFIX: Final[str] = ".toml"

BUILTIN_PATHS_IGNORED: Final[tuple[str, ...]] = ("test",)
BUILTIN_RULES_EXCLUDED: Final[tuple[str, ...]] = ("js/log-injection",)
BUILTIN_QUERIES: Final[tuple[QuerySuite, ...]] = (
    QuerySuite(
        name="Security-extended queries for JavaScript",
        uses="./query-suites/base.qls",
    ),
    QuerySuite(
        name="Security Code Scanner Custom Queries",
        uses="./custom-queries/query-suites/custom-queries.qls",
    ),
)

GENERATED_CONFIG_FILENAME: Final[str] = "codeql-config-generated.yml"

GITHUB_API_URL: Final[str] = "https://api.github.com"
GITHUB_API_VERSION: Final[str] = "2022-11-28"
GITHUB_REQUEST_TIMEOUT: Final[float] = 30.0

__all__ = [
    "ALWAYS_INCLUDED_LANGUAGE",
    "BUILTIN_PATHS_IGNORED",
    "BUILTIN_QUERIES",
    "BUILTIN_RULES_EXCLUDED",
    "DEFAULT_CONFIGS",
    "DEFAULT_CONFIG_NAME",
    "FALLBACK_LANGUAGE",
    "GENERATED_CONFIG_FILENAME",
    "GITHUB_API_URL",
    "GITHUB_API_VERSION",
    "GITHUB_REQUEST_TIMEOUT",
    "LANGUAGE_MAPPING",
    "REPO_CONFIG_SUFFIX",
]
