"""Unit tests for request construction.

Tests cover:
- URL assembly under the /data/v4 prefix
- Omission of absent query parameters
- Rendering of integer and list query values
- Bearer header injection
"""

import pytest

from faceit.client import API_PREFIX, auth_headers, build_query, build_request, build_url


class TestBuildUrl:
    """Tests for build_url()."""

    def test_prefixes_path(self) -> None:
        """Test that the Data API prefix sits between host and path."""
        url = build_url("https://open.faceit.com", "/players/p1")
        assert url == "https://open.faceit.com/data/v4/players/p1"
        assert API_PREFIX == "/data/v4"

    def test_trailing_slash_on_host(self) -> None:
        """Test that a trailing slash on the host is not doubled."""
        assert build_url("https://api.test/", "/games") == "https://api.test/data/v4/games"

    def test_identifier_used_verbatim(self) -> None:
        """Test that path identifiers are not validated or rewritten."""
        url = build_url("https://api.test", "/matches/1-abc_DEF")
        assert url.endswith("/matches/1-abc_DEF")


class TestBuildQuery:
    """Tests for build_query()."""

    def test_none_values_are_omitted(self) -> None:
        """Test that absent parameters never appear in the query."""
        assert build_query({"offset": None, "limit": 20}) == [("limit", "20")]

    def test_all_absent_gives_empty_query(self) -> None:
        """Test that a call with only absent parameters has no query."""
        assert build_query({"offset": None, "limit": None}) == []
        assert build_query(None) == []
        assert build_query({}) == []

    def test_integers_in_plain_decimal(self) -> None:
        """Test integer rendering, including zero and negative values."""
        query = build_query({"offset": 0, "limit": 100, "to": -5})
        assert query == [("offset", "0"), ("limit", "100"), ("to", "-5")]

    def test_out_of_range_values_pass_through(self) -> None:
        """Test that values are not range checked locally."""
        assert build_query({"limit": 5000}) == [("limit", "5000")]

    def test_strings_as_is(self) -> None:
        """Test that strings are passed unchanged."""
        assert build_query({"nickname": "s1mple"}) == [("nickname", "s1mple")]

    def test_sequences_are_comma_joined(self) -> None:
        """Test the expanded parameter encoding."""
        query = build_query({"expanded": ["organizer", "game"]})
        assert query == [("expanded", "organizer,game")]

    def test_preserves_insertion_order(self) -> None:
        """Test that parameters keep their declared order."""
        query = build_query({"game": "cs2", "from": 1, "to": 2, "offset": None})
        assert [name for name, _ in query] == ["game", "from", "to"]

    def test_bool_rejected(self) -> None:
        """Test that booleans are refused instead of rendered as integers."""
        with pytest.raises(TypeError):
            build_query({"limit": True})


class TestBuildRequest:
    """Tests for build_request()."""

    def test_returns_url_and_query(self) -> None:
        """Test that URL and query are built together."""
        url, query = build_request(
            "https://api.test", "/players/p1/bans", {"offset": None, "limit": 20}
        )
        assert url == "https://api.test/data/v4/players/p1/bans"
        assert query == [("limit", "20")]


class TestAuthHeaders:
    """Tests for auth_headers()."""

    def test_bearer_credential(self) -> None:
        """Test that a credential is sent as a bearer token."""
        assert auth_headers("abc") == {"Authorization": "Bearer abc"}

    def test_no_credential(self) -> None:
        """Test that no header is produced without a credential."""
        assert auth_headers(None) == {}
