"""GitHub API dispatcher."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("gh-dispatch")
except PackageNotFoundError:
    __version__ = "0.0.0-dev"
