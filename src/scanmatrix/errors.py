# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Exception hierarchy shared by the scan-matrix resolution engine."""

from __future__ import annotations


class ScanMatrixError(Exception):
    """Base class for errors surfaced by scan-matrix."""


class ConfigError(ScanMatrixError):
    """Raised when a repository configuration document is invalid."""


class MissingInputError(ScanMatrixError):
    """Raised when a required workflow input was not supplied."""


class InvalidArgumentError(ScanMatrixError):
    """Raised when a CLI argument cannot be decoded into the expected shape."""


__all__ = [
    "ConfigError",
    "InvalidArgumentError",
    "MissingInputError",
    "ScanMatrixError",
]
