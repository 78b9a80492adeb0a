"""``Link`` response header parsing."""

from __future__ import annotations

import re

from gh_dispatch.github_api._errors import LinkHeaderError

_REL_RE = re.compile(r'rel="([^"]*)"')
_URL_RE = re.compile(r"^<([^>]*)>")


def parse_links(header: str | None) -> dict[str, str]:
    """Return ``{rel: url}`` for a header such as::

        <https://api.github.com/user/repos?page=3&per_page=100>; rel="next",
        <https://api.github.com/user/repos?page=50&per_page=100>; rel="last"

    An empty or missing header yields ``{}``.  Raises :class:`LinkHeaderError`
    if any entry lacks a bracketed URL or a quoted ``rel``.
    """
    if not header or not header.strip():
        return {}

    links: dict[str, str] = {}
    for raw_entry in header.split(","):
        entry = raw_entry.strip()
        rel = _REL_RE.search(entry)
        url = _URL_RE.match(entry)
        if rel is None or url is None:
            raise LinkHeaderError(f"Malformed Link header entry: {entry!r}")
        links[rel.group(1)] = url.group(1)
    return links
