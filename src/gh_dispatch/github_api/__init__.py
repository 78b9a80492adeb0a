"""Paginated GitHub REST API helpers.

Re-exports the public names so callers can use
``from gh_dispatch.github_api import X``.
"""

import requests as requests  # noqa: F401  # re-export for mock patching

# -- Errors ------------------------------------------------------------------
from gh_dispatch.github_api._errors import (  # noqa: F401
    InvalidInvocationError,
    InvalidResponseError,
    LinkHeaderError,
    PageLimitExceededError,
    PaginationCancelledError,
)

# -- Link header -------------------------------------------------------------
from gh_dispatch.github_api._links import parse_links  # noqa: F401

# -- Pagination --------------------------------------------------------------
from gh_dispatch.github_api._pagination import Paginator, redact_token  # noqa: F401

# -- Routing -----------------------------------------------------------------
from gh_dispatch.github_api._routes import Route, placeholder_count  # noqa: F401

# -- Operations --------------------------------------------------------------
from gh_dispatch.github_api.operations import OPERATIONS, GitHubClient  # noqa: F401
