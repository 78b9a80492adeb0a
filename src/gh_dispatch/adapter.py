"""Callback-style GitHub adapter for ORM-hosted collections.

Every operation in :data:`~gh_dispatch.github_api.OPERATIONS` is exposed as
an attribute called as ``(model, *path_args, credential, on_complete)``.
Path variables are mapped onto the operation's templates by count, e.g.
``adapter.get_user(model, token, cb)`` fetches ``/user`` while
``adapter.get_user(model, "octocat", token, cb)`` fetches ``/users/octocat``.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import requests

from gh_dispatch.github_api import OPERATIONS, Paginator, Route
from gh_dispatch.settings import GitHubSettings


class GitHubAdapter:
    """GitHub adapter whose operations complete through a callback."""

    identity = "github"

    get_user: Route
    get_user_orgs: Route
    get_user_repos: Route
    get_org_repos: Route
    get_repo_contents: Route
    get_repo_branches: Route

    def __init__(
        self,
        settings: GitHubSettings | None = None,
        session: requests.Session | None = None,
    ) -> None:
        self.paginator = Paginator(settings, session)
        for name, route in OPERATIONS.items():
            setattr(self, name, route.bind(self.paginator))

    def register_collection(self, name: str, on_complete: Callable[[], Any]) -> Any:
        """Lifecycle hook required by the hosting ORM; currently a no-op."""
        return on_complete()
