# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for the GitHub languages client."""

from __future__ import annotations

import io
import json
import logging
import urllib.error
import urllib.request
from dataclasses import dataclass, field

import pytest

from scanmatrix.github import build_request, fetch_github_languages, languages_url


@dataclass
class FakeOpener:
    """Record requests and replay a canned response or error."""

    body: bytes = b"{}"
    error: Exception | None = None
    requests: list[urllib.request.Request] = field(default_factory=list)

    def open(self, fullurl: urllib.request.Request, data: None = None, timeout: float = 0) -> io.BytesIO:
        self.requests.append(fullurl)
        if self.error is not None:
            raise self.error
        return io.BytesIO(self.body)


def test_languages_url() -> None:
    assert languages_url("owner/repo") == "https://api.github.com/repos/owner/repo/languages"


def test_build_request_sets_headers() -> None:
    request = build_request("owner/repo", "secret")

    assert request.get_header("Accept") == "application/vnd.github+json"
    assert request.get_header("X-github-api-version") == "2022-11-28"
    assert request.get_header("Authorization") == "token secret"


def test_build_request_without_token_is_anonymous() -> None:
    assert build_request("owner/repo").get_header("Authorization") is None


def test_fetch_github_languages_returns_counts() -> None:
    opener = FakeOpener(body=json.dumps({"Java": 1200, "Kotlin": 300}).encode("utf-8"))

    languages = fetch_github_languages("owner/repo", opener=opener)

    assert languages == {"Java": 1200, "Kotlin": 300}
    assert opener.requests[0].full_url == "https://api.github.com/repos/owner/repo/languages"


def test_fetch_github_languages_returns_empty_on_http_error(caplog: pytest.LogCaptureFixture) -> None:
    error = urllib.error.HTTPError(languages_url("owner/repo"), 404, "Not Found", None, None)  # type: ignore[arg-type]

    with caplog.at_level(logging.WARNING, logger="scanmatrix.github"):
        languages = fetch_github_languages("owner/repo", opener=FakeOpener(error=error))

    assert languages == {}
    assert "GitHub API error: 404 Not Found" in caplog.text


def test_fetch_github_languages_returns_empty_on_network_error() -> None:
    opener = FakeOpener(error=urllib.error.URLError("connection refused"))

    assert fetch_github_languages("owner/repo", opener=opener) == {}


@pytest.mark.parametrize("body", [b"not json", b"[1, 2, 3]"])
def test_fetch_github_languages_returns_empty_on_unexpected_body(body: bytes) -> None:
    assert fetch_github_languages("owner/repo", opener=FakeOpener(body=body)) == {}
