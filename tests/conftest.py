"""Shared test fixtures for gh-dispatch tests."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from gh_dispatch.settings import GitHubSettings

API = "https://api.github.com"


def _make_response(body=None, status: int = 200, link: str | None = None) -> MagicMock:
    """Build a fake ``requests.Response`` carrying *body* as its JSON payload."""
    resp = MagicMock()
    resp.status_code = status
    resp.ok = status < 400
    resp.json.return_value = body
    resp.text = "" if body is None else repr(body)
    resp.headers = {"Link": link} if link is not None else {}
    return resp


def _next_link(page: int, last: int = 3) -> str:
    """Return a GitHub-style Link header pointing at *page*."""
    return (
        f'<{API}/user/repos?access_token=tok&per_page=100&page={page}>; rel="next", '
        f'<{API}/user/repos?access_token=tok&per_page=100&page={last}>; rel="last"'
    )


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    """Keep developer ``GITHUB_*`` variables out of the settings under test."""
    for name in ("API_URL", "PER_PAGE", "MAX_PAGES", "TIMEOUT", "USER_AGENT", "TOKEN"):
        monkeypatch.delenv(f"GITHUB_{name}", raising=False)


@pytest.fixture()
def settings() -> GitHubSettings:
    return GitHubSettings(_env_file=None)


@pytest.fixture()
def session():
    """A fake ``requests.Session``; set ``session.get.side_effect`` per test."""
    return MagicMock()


@pytest.fixture()
def make_response():
    return _make_response


@pytest.fixture()
def next_link():
    return _next_link
