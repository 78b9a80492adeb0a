"""Exceptions raised by the GitHub API helpers."""

from __future__ import annotations

import requests


class InvalidResponseError(requests.HTTPError):
    """The API answered with something other than a usable 200 response.

    The originating :class:`requests.Response` is kept on ``response`` so
    callers can inspect the status code and body.
    """

    @property
    def status_code(self) -> int | None:
        return self.response.status_code if self.response is not None else None

    @property
    def body(self) -> str | None:
        return self.response.text if self.response is not None else None


class LinkHeaderError(ValueError):
    """A ``Link`` header entry could not be parsed."""


class InvalidInvocationError(TypeError):
    """An operation was called with the wrong shape of arguments."""


class PageLimitExceededError(RuntimeError):
    """The server kept advertising a next page past ``max_pages``."""


class PaginationCancelledError(RuntimeError):
    """Pagination was cancelled between two page fetches."""
