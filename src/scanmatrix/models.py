# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Pydantic models describing scanner jobs, repository configs, and inputs."""

from __future__ import annotations

import json
from typing import Literal, TypeAlias

from pydantic import BaseModel, ConfigDict, Field, StrictBool

BuildMode: TypeAlias = Literal["none", "manual", "autobuild"]
MatrixEntry: TypeAlias = dict[str, str | None]


class LanguageJobDescriptor(BaseModel):
    """Describe a single scanner job and the build parameters it needs.

    ``ignore`` is a control flag consumed while building a scan plan. It is
    never part of an emitted matrix entry.
    """

    model_config = ConfigDict(extra="forbid", frozen=True, coerce_numbers_to_str=True)

    language: str = Field(min_length=1)
    build_mode: BuildMode | None = None
    build_command: str | None = None
    version: str | None = None
    distribution: str | None = None
    ignore: StrictBool | None = None

    @property
    def ignored(self) -> bool:
        """Return ``True`` when the descriptor asks for its language to be skipped."""

        return self.ignore is True

    def merged_with(self, override: LanguageJobDescriptor) -> LanguageJobDescriptor:
        """Return a copy of ``self`` with every field set on ``override`` applied.

        Args:
            override: Descriptor whose explicitly supplied fields take priority.

        Returns:
            LanguageJobDescriptor: Field-wise merge of the two descriptors.
        """

        return self.model_copy(update=override.model_dump(exclude_unset=True))

    def without_control_flags(self) -> LanguageJobDescriptor:
        """Return a copy of the descriptor with the ``ignore`` flag removed."""

        if self.ignore is None:
            return self
        return self.model_copy(update={"ignore": None})

    def to_matrix_entry(self) -> MatrixEntry:
        """Return the JSON-ready matrix entry for this descriptor.

        Only explicitly supplied fields are emitted, so an override that sets a
        field to ``None`` keeps it as ``null``.
        """

        return self.model_dump(mode="json", exclude_unset=True, exclude={"ignore"})


class QuerySuite(BaseModel):
    """Reference to a query suite consumed by the scanner."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str
    uses: str


class RepositoryConfig(BaseModel):
    """Per-repository scanning configuration loaded from a TOML document."""

    model_config = ConfigDict(extra="forbid", frozen=True, populate_by_name=True)

    paths_ignored: tuple[str, ...] = Field(default=(), alias="pathsIgnored")
    rules_excluded: tuple[str, ...] = Field(default=(), alias="rulesExcluded")
    languages_config: tuple[LanguageJobDescriptor, ...] = ()
    queries: tuple[QuerySuite, ...] = ()

    def language_override(self, language: str) -> LanguageJobDescriptor | None:
        """Return the override declared for ``language``.

        Later entries win when the same language is declared more than once,
        matching how the plan builder indexes overrides.

        Args:
            language: Language identifier requested by the caller.

        Returns:
            LanguageJobDescriptor | None: Matching override, if any.
        """

        match: LanguageJobDescriptor | None = None
        for entry in self.languages_config:
            if entry.language == language:
                match = entry
        return match


class ScanPlan(BaseModel):
    """Final job matrix handed to the CI workflow."""

    model_config = ConfigDict(frozen=True)

    include: tuple[LanguageJobDescriptor, ...] = ()

    @property
    def languages(self) -> tuple[str, ...]:
        """Return the scanner languages in plan order."""

        return tuple(entry.language for entry in self.include)

    def to_dict(self) -> dict[str, list[MatrixEntry]]:
        """Return the plan as the ``{"include": [...]}`` matrix mapping."""

        return {"include": [entry.to_matrix_entry() for entry in self.include]}

    def to_json(self) -> str:
        """Return the plan serialised as a single compact JSON line."""

        return json.dumps(self.to_dict(), separators=(",", ":"))


class InputParameters(BaseModel):
    """Explicit values supplied to a single config-generation invocation."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    repo: str | None = None
    language: str | None = None
    build_mode: str | None = Field(default=None, alias="buildMode")
    build_command: str | None = Field(default=None, alias="buildCommand")
    version: str | None = None
    distribution: str | None = None
    paths_ignored: tuple[str, ...] = Field(default=(), alias="pathsIgnored")
    rules_excluded: tuple[str, ...] = Field(default=(), alias="rulesExcluded")


__all__ = [
    "BuildMode",
    "InputParameters",
    "LanguageJobDescriptor",
    "MatrixEntry",
    "QuerySuite",
    "RepositoryConfig",
    "ScanPlan",
]
