"""Tests for node URL parsing and rendering."""

import pytest

from contract_extrinsics.blockchain.urls import (
    DEFAULT_NODE_URL,
    canonicalize,
    parse_url,
    url_to_string,
)
from contract_extrinsics.exceptions import InvalidUrlError


class TestParseUrl:
    """Tests for parse_url."""

    def test_parses_websocket_url(self):
        """Websocket URLs are accepted."""
        url = parse_url("ws://localhost:9944")

        assert url.scheme == "ws"
        assert url.host == "localhost"
        assert url.port == 9944

    def test_accepts_parsed_url(self):
        """An already parsed URL is accepted."""
        url = parse_url(parse_url("wss://rpc.astar.network"))

        assert url.host == "rpc.astar.network"

    @pytest.mark.parametrize("value", ["", "not a url", "://missing-scheme", "ws://"])
    def test_invalid_url_raises(self, value):
        """Unparseable strings raise InvalidUrlError."""
        with pytest.raises(InvalidUrlError) as exc_info:
            parse_url(value)

        assert exc_info.value.value == value

    def test_non_string_raises(self):
        """Values that are not strings or URLs raise InvalidUrlError."""
        with pytest.raises(InvalidUrlError, match="expected a string or URL"):
            parse_url(9944)  # type: ignore[arg-type]

    def test_invalid_url_is_value_error(self):
        """InvalidUrlError can be caught as ValueError."""
        with pytest.raises(ValueError):
            parse_url("not a url")


class TestUrlToString:
    """Tests for canonical URL rendering."""

    def test_default_url(self):
        """The default node URL renders unchanged."""
        assert canonicalize(DEFAULT_NODE_URL) == "ws://localhost:9944"

    def test_adds_default_port(self):
        """The scheme's default port is written out."""
        assert canonicalize("wss://rpc.polkadot.io") == "wss://rpc.polkadot.io:443"
        assert canonicalize("ws://example.com") == "ws://example.com:80"
        assert canonicalize("https://example.com") == "https://example.com:443"

    def test_keeps_explicit_default_port(self):
        """An explicit default port renders the same as an omitted one."""
        assert canonicalize("wss://rpc.polkadot.io:443") == "wss://rpc.polkadot.io:443"

    def test_drops_root_path(self):
        """A bare trailing slash is dropped."""
        assert canonicalize("wss://rpc.polkadot.io:443/") == "wss://rpc.polkadot.io:443"

    def test_keeps_path_and_query(self):
        """Non-root paths and queries are preserved."""
        rendered = canonicalize("ws://127.0.0.1:9944/rpc?token=abc")

        assert rendered == "ws://127.0.0.1:9944/rpc?token=abc"

    def test_lowercases_scheme_and_host(self):
        """Scheme and host are normalized to lowercase."""
        assert canonicalize("WS://LocalHost:9944") == "ws://localhost:9944"

    @pytest.mark.parametrize(
        "value",
        [
            "ws://localhost:9944",
            "wss://rpc.polkadot.io",
            "ws://10.0.0.5:30333/ws",
            "http://node.example.com:8080/?a=1",
            "ws://:pw@node.example:9944",
            "ws://alice:pw@node.example:9944",
        ],
    )
    def test_round_trip(self, value):
        """Rendered URLs parse back to an equivalent URL."""
        rendered = url_to_string(parse_url(value))

        assert url_to_string(parse_url(rendered)) == rendered
        assert parse_url(rendered).host == parse_url(value).host

    def test_keeps_password_without_username(self):
        """A password with an empty username is preserved."""
        rendered = canonicalize("ws://:pw@node.example:9944")

        assert rendered == "ws://:pw@node.example:9944"
        assert parse_url(rendered).password == "pw"

    def test_keeps_username_and_password(self):
        """Full userinfo is preserved."""
        assert canonicalize("ws://alice:pw@node.example:9944") == "ws://alice:pw@node.example:9944"
