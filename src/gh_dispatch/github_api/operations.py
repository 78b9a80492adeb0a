"""GitHub operations exposed by name."""

from __future__ import annotations

import logging
import threading
from typing import Any

import requests

from gh_dispatch.github_api._errors import InvalidInvocationError
from gh_dispatch.github_api._pagination import Paginator
from gh_dispatch.github_api._routes import Route
from gh_dispatch.settings import GitHubSettings

logger = logging.getLogger(__name__)

# Path variables are given between the model and the credential; the
# number of variables picks the template.
OPERATIONS: dict[str, Route] = {
    "get_user": Route("user", "users/:user", name="get_user"),
    "get_user_orgs": Route("user/orgs", "users/:user/orgs", name="get_user_orgs"),
    "get_user_repos": Route("user/repos", "users/:user/repos", name="get_user_repos"),
    "get_org_repos": Route("orgs/:org/repos", name="get_org_repos"),
    "get_repo_contents": Route("repos/:owner/:repo/contents/:path", name="get_repo_contents"),
    "get_repo_branches": Route("repos/:owner/:repo/branches", name="get_repo_branches"),
}


def _given(*args: str | None) -> tuple[str, ...]:
    return tuple(a for a in args if a is not None)


class GitHubClient:
    """Named GitHub operations for one access token.

    Each method returns the fully paginated body; errors are raised.
    """

    def __init__(
        self,
        token: str,
        settings: GitHubSettings | None = None,
        session: requests.Session | None = None,
    ) -> None:
        if not token:
            raise InvalidInvocationError("An access token is required")
        self.token = token
        self.paginator = Paginator(settings, session)

    def call(self, operation: str, *args: str, cancel: threading.Event | None = None) -> Any:
        """Resolve *operation* against ``OPERATIONS`` and fetch every page."""
        route = OPERATIONS.get(operation)
        if route is None:
            raise InvalidInvocationError(
                f"Unknown operation {operation!r}, expected one of: {', '.join(OPERATIONS)}"
            )
        path = route.resolve(*args)
        logger.debug("Dispatching %s to %s", operation, path)
        return self.paginator.fetch(path, self.token, cancel=cancel)

    def get_user(self, user: str | None = None) -> dict:
        """Return the authenticated user, or *user* when given."""
        return self.call("get_user", *_given(user))

    def get_user_orgs(self, user: str | None = None) -> list[dict]:
        return self.call("get_user_orgs", *_given(user))

    def get_user_repos(self, user: str | None = None) -> list[dict]:
        return self.call("get_user_repos", *_given(user))

    def get_org_repos(self, org: str) -> list[dict]:
        return self.call("get_org_repos", org)

    def get_repo_contents(self, owner: str, repo: str, path: str) -> Any:
        """Return a directory listing (list) or a single file entry (dict)."""
        return self.call("get_repo_contents", owner, repo, path)

    def get_repo_branches(self, owner: str, repo: str) -> list[dict]:
        return self.call("get_repo_branches", owner, repo)
