"""Tests for Link header parsing."""

import pytest

from gh_dispatch.github_api import LinkHeaderError, parse_links


class TestParseLinks:
    """Tests for :func:`parse_links`."""

    def test_github_header(self) -> None:
        header = (
            '<https://api.github.com/user/repos?page=3&per_page=100>; rel="next", '
            '<https://api.github.com/user/repos?page=50&per_page=100>; rel="last"'
        )
        assert parse_links(header) == {
            "next": "https://api.github.com/user/repos?page=3&per_page=100",
            "last": "https://api.github.com/user/repos?page=50&per_page=100",
        }

    def test_one_key_per_entry(self) -> None:
        rels = ["first", "prev", "next", "last"]
        header = ", ".join(f'<https://x.test/{r}>; rel="{r}"' for r in rels)
        links = parse_links(header)
        assert len(links) == 4
        assert all(links[r] == f"https://x.test/{r}" for r in rels)

    def test_surrounding_whitespace_is_ignored(self) -> None:
        assert parse_links('   <https://x.test/2>; rel="next"  ') == {"next": "https://x.test/2"}

    def test_repeated_rel_keeps_last(self) -> None:
        header = '<https://x.test/a>; rel="next", <https://x.test/b>; rel="next"'
        assert parse_links(header) == {"next": "https://x.test/b"}

    @pytest.mark.parametrize("header", [None, "", "   "])
    def test_empty_header(self, header) -> None:
        assert parse_links(header) == {}

    @pytest.mark.parametrize(
        "header",
        [
            "<https://x.test/2>; rel=next",
            'https://x.test/2; rel="next"',
            '<https://x.test/2>; rel="next", garbage',
            '<https://x.test/2>; rel="next",',
        ],
    )
    def test_malformed_entry_raises(self, header) -> None:
        with pytest.raises(LinkHeaderError, match="Malformed Link header entry"):
            parse_links(header)

    def test_error_is_a_value_error(self) -> None:
        with pytest.raises(ValueError):
            parse_links("nope")
