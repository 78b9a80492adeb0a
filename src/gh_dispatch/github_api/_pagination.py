"""GitHub pagination helper."""

from __future__ import annotations

import logging
import re
import threading
from typing import Any

import requests

from gh_dispatch.github_api._errors import (
    InvalidResponseError,
    PageLimitExceededError,
    PaginationCancelledError,
)
from gh_dispatch.github_api._links import parse_links
from gh_dispatch.settings import GitHubSettings

logger = logging.getLogger(__name__)

_TOKEN_RE = re.compile(r"(access_token=)[^&\s]*")


def redact_token(text: str) -> str:
    """Mask every ``access_token`` query value in *text* (a URL or error message)."""
    return _TOKEN_RE.sub(r"\1***", text)


class Paginator:
    """Issue authenticated GETs and merge every page of a list endpoint.

    *session* may be any object with a ``requests``-compatible ``get``; when
    omitted the module-level :func:`requests.get` is used.
    """

    def __init__(
        self,
        settings: GitHubSettings | None = None,
        session: requests.Session | None = None,
    ) -> None:
        self.settings = settings or GitHubSettings()
        self._http = session if session is not None else requests

    @property
    def headers(self) -> dict[str, str]:
        return {
            "User-Agent": self.settings.user_agent,
            "Accept": "application/json",
        }

    def build_request(
        self,
        target: str,
        credential: str | None,
        page: int = 1,
    ) -> tuple[str, dict[str, Any] | None]:
        """Return ``(url, params)`` for *target*.

        Absolute URLs (e.g. a server-supplied next link) already embed their
        query string and are used verbatim.
        """
        if "://" in target:
            return target, None
        url = f"{self.settings.api_url}/{target.lstrip('/')}"
        params = {
            "access_token": credential,
            "per_page": self.settings.per_page,
            "page": page,
        }
        return url, params

    def _get(self, url: str, params: dict[str, Any] | None) -> requests.Response:
        resp = self._http.get(
            url,
            params=params,
            headers=self.headers,
            timeout=self.settings.timeout,
        )
        if resp.status_code != 200:
            raise InvalidResponseError(
                f"Invalid response: HTTP {resp.status_code} from {redact_token(url)}",
                response=resp,
            )
        return resp

    def fetch(
        self,
        target: str,
        credential: str | None = None,
        page: int = 1,
        cancel: threading.Event | None = None,
    ) -> Any:
        """Fetch *target* and every page advertised after it.

        Page bodies are concatenated in page order.  A single-page response
        is returned exactly as parsed, so object bodies (e.g. ``/user``)
        pass through untouched.  Any error aborts the whole call.
        """
        url, params = self.build_request(target, credential, page)
        items: list[Any] = []
        fetched = 0

        while True:
            if cancel is not None and cancel.is_set():
                raise PaginationCancelledError(f"Pagination cancelled before page {page}")

            logger.debug("GET %s (page %d)", redact_token(url), page)
            resp = self._get(url, params)
            data = resp.json()
            fetched += 1

            next_url = parse_links(resp.headers.get("Link")).get("next")
            if fetched == 1 and next_url is None:
                return data

            if not isinstance(data, list):
                raise InvalidResponseError(
                    f"Page {page} of a paginated response is not a JSON array",
                    response=resp,
                )
            items.extend(data)

            if next_url is None:
                break
            if fetched >= self.settings.max_pages:
                raise PageLimitExceededError(
                    f"Server advertised more than {self.settings.max_pages} pages "
                    f"for {redact_token(url)}"
                )

            # The next link carries its own credential and page number.
            url, params = next_url, None
            page += 1

        logger.info("Fetched %d items over %d pages", len(items), fetched)
        return items
