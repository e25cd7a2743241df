# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Fetch repository language statistics from the GitHub REST API."""

from __future__ import annotations

import json
import logging
import ssl
import urllib.error
import urllib.request
from collections.abc import Mapping
from typing import Any, Protocol

from .constants import GITHUB_API_URL, GITHUB_API_VERSION, GITHUB_REQUEST_TIMEOUT

LOGGER = logging.getLogger(__name__)


class UrlOpener(Protocol):
    """Subset of :class:`urllib.request.OpenerDirector` used for API calls."""

    def open(self, fullurl: urllib.request.Request, data: None = None, timeout: float = ...) -> Any: ...


def languages_url(repo: str) -> str:
    """Return the languages endpoint for ``owner/name``."""

    return f"{GITHUB_API_URL}/repos/{repo}/languages"


def build_request(repo: str, token: str | None = None) -> urllib.request.Request:
    """Return the HTTP request listing the languages of ``repo``."""

    headers = {
        "Accept": "application/vnd.github+json",
        "X-GitHub-Api-Version": GITHUB_API_VERSION,
        "User-Agent": "scan-matrix",
    }
    if token:
        headers["Authorization"] = f"token {token}"
    return urllib.request.Request(languages_url(repo), headers=headers)


def fetch_github_languages(
    repo: str,
    token: str | None = None,
    *,
    opener: UrlOpener | None = None,
    timeout: float = GITHUB_REQUEST_TIMEOUT,
    logger: logging.Logger | None = None,
) -> dict[str, int]:
    """Return the language byte counts GitHub reports for ``repo``.

    Any failure (HTTP error status, network error, or an unexpected body) is
    logged and yields an empty mapping so detection falls back to its default.

    Args:
        repo: Repository identifier in ``owner/name`` form.
        token: Optional API token used for private repositories and rate limits.
        opener: Optional URL opener; defaults to an HTTPS opener with the
            system trust store.
        timeout: Socket timeout in seconds.
        logger: Optional logger receiving diagnostics.

    Returns:
        dict[str, int]: Language name to byte count, or ``{}`` on failure.
    """

    log = logger or LOGGER
    request = build_request(repo, token)
    active_opener = opener or urllib.request.build_opener(
        urllib.request.HTTPSHandler(context=ssl.create_default_context()),
    )
    try:
        with active_opener.open(request, timeout=timeout) as response:
            payload = json.loads(response.read().decode("utf-8"))
    except urllib.error.HTTPError as exc:
        log.warning("Failed to fetch GitHub languages: GitHub API error: %s %s", exc.code, exc.reason)
        return {}
    except (urllib.error.URLError, OSError, ValueError) as exc:
        log.warning("Failed to fetch GitHub languages: %s", exc)
        return {}

    if not isinstance(payload, Mapping):
        log.warning("Failed to fetch GitHub languages: unexpected response %r", payload)
        return {}
    languages = {str(name): count for name, count in payload.items()}
    for name, count in languages.items():
        log.debug("  %s: %s bytes", name, count)
    return languages


__all__ = ["build_request", "fetch_github_languages", "languages_url"]
