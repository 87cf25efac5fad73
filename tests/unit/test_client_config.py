"""Unit tests for client configuration.

Tests cover:
- Default configuration values
- Field validation
- YAML serialization and deserialization roundtrip
- Environment loading
- The fluent client builder
"""

from pathlib import Path

import httpx
import pytest
from pydantic import ValidationError

from faceit.client import FaceitClient
from faceit.config import DEFAULT_BASE_URL, DEFAULT_TIMEOUT, ClientBuilder, ClientConfig


class TestClientConfig:
    """Tests for ClientConfig validation."""

    def test_default_values(self) -> None:
        """Test that default config has expected values."""
        config = ClientConfig()
        assert config.base_url == DEFAULT_BASE_URL == "https://open.faceit.com"
        assert config.api_key is None
        assert config.timeout == DEFAULT_TIMEOUT == 30.0

    def test_trailing_slash_stripped(self) -> None:
        """Test that the base URL is normalized."""
        assert ClientConfig(base_url="https://api.test/").base_url == "https://api.test"

    def test_timeout_must_be_positive(self) -> None:
        """Test that timeout must be positive."""
        with pytest.raises(ValidationError):
            ClientConfig(timeout=0)
        with pytest.raises(ValidationError):
            ClientConfig(timeout=-1.0)

    def test_base_url_must_not_be_empty(self) -> None:
        """Test that an empty base URL is rejected."""
        with pytest.raises(ValidationError):
            ClientConfig(base_url="")

    def test_immutable(self) -> None:
        """Test that a built configuration cannot change."""
        config = ClientConfig(api_key="k")
        with pytest.raises(ValidationError):
            config.api_key = "other"  # type: ignore[misc]


class TestYamlRoundtrip:
    """Tests for YAML load and save."""

    def test_roundtrip(self, tmp_path: Path) -> None:
        """Test that saving and loading preserves values."""
        config = ClientConfig(base_url="https://api.test", api_key="k", timeout=5.0)
        path = tmp_path / "faceit.yaml"
        config.to_yaml(path)

        assert ClientConfig.from_yaml(path) == config

    def test_unset_key_not_written(self, tmp_path: Path) -> None:
        """Test that an absent api_key is left out of the file."""
        path = tmp_path / "faceit.yaml"
        ClientConfig().to_yaml(path)
        assert "api_key" not in path.read_text()

    def test_partial_file(self, tmp_path: Path) -> None:
        """Test that missing keys fall back to defaults."""
        path = tmp_path / "faceit.yaml"
        path.write_text("api_key: abc\n")
        config = ClientConfig.from_yaml(path)
        assert config.api_key == "abc"
        assert config.timeout == 30.0

    def test_empty_file(self, tmp_path: Path) -> None:
        """Test that an empty file gives the defaults."""
        path = tmp_path / "faceit.yaml"
        path.write_text("")
        assert ClientConfig.from_yaml(path) == ClientConfig()

    def test_invalid_value(self, tmp_path: Path) -> None:
        """Test that invalid values are rejected on load."""
        path = tmp_path / "faceit.yaml"
        path.write_text("timeout: -3\n")
        with pytest.raises(ValidationError):
            ClientConfig.from_yaml(path)

    def test_missing_file(self, tmp_path: Path) -> None:
        """Test that a missing file raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            ClientConfig.from_yaml(tmp_path / "missing.yaml")


class TestFromEnv:
    """Tests for environment loading."""

    def test_reads_variables(self) -> None:
        """Test that FACEIT_* variables are picked up."""
        config = ClientConfig.from_env(
            {
                "FACEIT_API_KEY": "env-key",
                "FACEIT_BASE_URL": "https://env.test/",
                "FACEIT_TIMEOUT": "2.5",
            }
        )
        assert config.api_key == "env-key"
        assert config.base_url == "https://env.test"
        assert config.timeout == 2.5

    def test_empty_environment(self) -> None:
        """Test that no variables gives the defaults."""
        assert ClientConfig.from_env({}) == ClientConfig()

    def test_invalid_timeout(self) -> None:
        """Test that a malformed timeout is rejected."""
        with pytest.raises(ValidationError):
            ClientConfig.from_env({"FACEIT_TIMEOUT": "soon"})


class TestClientBuilder:
    """Tests for ClientBuilder."""

    def test_defaults(self) -> None:
        """Test that an untouched builder gives the default configuration."""
        assert ClientBuilder().config() == ClientConfig()

    def test_overrides(self) -> None:
        """Test that each setter is applied."""
        config = (
            ClientBuilder()
            .base_url("https://api.test")
            .api_key("k")
            .timeout(3.0)
            .config()
        )
        assert config == ClientConfig(base_url="https://api.test", api_key="k", timeout=3.0)

    def test_from_config(self) -> None:
        """Test seeding a builder from an existing configuration."""
        original = ClientConfig(base_url="https://api.test", api_key="k", timeout=3.0)
        assert ClientBuilder.from_config(original).timeout(9.0).config() == ClientConfig(
            base_url="https://api.test", api_key="k", timeout=9.0
        )

    def test_invalid_value_rejected_on_build(self) -> None:
        """Test that validation happens when the client is built."""
        with pytest.raises(ValidationError):
            ClientBuilder().timeout(0).build()

    @pytest.mark.asyncio
    async def test_transport_options_reach_httpx(self) -> None:
        """Test that transport options are passed to the HTTP client."""
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(
                200,
                json={
                    "game_id": "cs2",
                    "short_label": "CS2",
                    "long_label": "Counter-Strike 2",
                },
            )

        client = (
            ClientBuilder()
            .base_url("https://api.test")
            .transport_options(transport=httpx.MockTransport(handler))
            .build()
        )
        assert isinstance(client, FaceitClient)

        async with client:
            game = await client.get_game("cs2")

        assert game.game_id == "cs2"
        assert str(seen[0].url) == "https://api.test/data/v4/games/cs2"
