"""Operation descriptors resolved by argument count."""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from typing import Any

from gh_dispatch.github_api._errors import InvalidInvocationError
from gh_dispatch.github_api._pagination import Paginator

logger = logging.getLogger(__name__)


def _is_placeholder(segment: str) -> bool:
    return segment.startswith(":")


def placeholder_count(template: str) -> int:
    """Return the number of ``:name`` segments in *template*."""
    return sum(1 for segment in template.split("/") if _is_placeholder(segment))


class Route:
    """An ordered set of URL templates for one logical API call.

    Templates are told apart by placeholder count; the number of positional
    arguments picks the first template with that many placeholders::

        >>> Route("user", "users/:user").resolve("octocat")
        'users/octocat'
    """

    def __init__(
        self,
        *templates: str,
        name: str | None = None,
        paginator: Paginator | None = None,
    ) -> None:
        if not templates:
            raise ValueError("A route needs at least one URL template")
        self.templates = tuple(templates)
        self.name = name
        self._paginator = paginator

    def __repr__(self) -> str:
        return f"Route({', '.join(repr(t) for t in self.templates)}, name={self.name!r})"

    def bind(self, paginator: Paginator) -> Route:
        """Return a copy of this route that fetches through *paginator*."""
        return Route(*self.templates, name=self.name, paginator=paginator)

    def resolve(self, *args: object) -> str:
        """Fill the template matching ``len(args)`` with *args*, left to right."""
        if any(arg is None or str(arg) == "" for arg in args):
            raise InvalidInvocationError(
                f"empty path value in {args!r}, every placeholder needs a value"
            )
        for template in self.templates:
            if placeholder_count(template) != len(args):
                continue
            values = iter(args)
            return "/".join(
                str(next(values)) if _is_placeholder(segment) else segment
                for segment in template.split("/")
            )
        raise InvalidInvocationError(
            f"incorrect number of parameters ({len(args)}) specified, "
            f"must follow one of the following: {', '.join(self.templates)}"
        )

    def __call__(self, *args: Any, cancel: threading.Event | None = None) -> None:
        """Callback-style dispatch: ``route(model, *path_args, credential, on_complete)``.

        *on_complete* is called exactly once, as ``on_complete(error)`` or
        ``on_complete(None, result)``.  Without a callable *on_complete*
        the call is dropped.
        """
        parts = list(args)
        model = parts.pop(0) if parts else None
        on_complete: Callable[..., Any] | None = parts.pop() if parts else None
        credential = parts.pop() if parts else None

        if not callable(on_complete):
            logger.debug("Dropping %s call without a completion callback", self.name)
            return
        if model is None or not credential:
            on_complete(
                InvalidInvocationError("either model, credential, or callback was not specified")
            )
            return
        if self._paginator is None:
            on_complete(
                RuntimeError(f"Route {self.name or self.templates} is not bound to a paginator")
            )
            return

        try:
            path = self.resolve(*parts)
            result = self._paginator.fetch(path, credential, cancel=cancel)
        except Exception as exc:  # delivered through the callback
            on_complete(exc)
            return
        on_complete(None, result)
