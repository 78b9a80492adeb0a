"""Tests for the callback-style adapter."""

from unittest.mock import MagicMock

from gh_dispatch.adapter import GitHubAdapter
from gh_dispatch.github_api import OPERATIONS, InvalidInvocationError


class TestGitHubAdapter:
    def test_identity(self) -> None:
        assert GitHubAdapter.identity == "github"

    def test_register_collection_completes_immediately(self, settings) -> None:
        cb = MagicMock(return_value="done")

        assert GitHubAdapter(settings).register_collection("repos", cb) == "done"
        cb.assert_called_once_with()

    def test_exposes_every_operation(self, settings) -> None:
        adapter = GitHubAdapter(settings)
        for name in OPERATIONS:
            assert getattr(adapter, name).templates == OPERATIONS[name].templates

    def test_get_user_variants(self, settings, session, make_response) -> None:
        session.get.return_value = make_response({"login": "octocat"})
        adapter = GitHubAdapter(settings, session)
        cb = MagicMock()

        adapter.get_user("model", "tok", cb)
        adapter.get_user("model", "octocat", "tok", cb)

        urls = [c.args[0] for c in session.get.call_args_list]
        assert urls == ["https://api.github.com/user", "https://api.github.com/users/octocat"]
        assert cb.call_count == 2
        cb.assert_called_with(None, {"login": "octocat"})

    def test_repo_branches_wrong_arity(self, settings, session) -> None:
        adapter = GitHubAdapter(settings, session)
        cb = MagicMock()

        adapter.get_repo_branches("model", "acme", "tok", cb)

        assert isinstance(cb.call_args.args[0], InvalidInvocationError)
        session.get.assert_not_called()
