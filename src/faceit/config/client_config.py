"""Client configuration with Pydantic validation.

``ClientConfig`` is immutable once built and is shared read-only by every
request a client makes. ``ClientBuilder`` collects overrides before
construction, including extra keyword arguments for the underlying
``httpx.AsyncClient``.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator

if TYPE_CHECKING:
    from faceit.client.http_client import FaceitClient

DEFAULT_BASE_URL = "https://open.faceit.com"
DEFAULT_TIMEOUT = 30.0

ENV_API_KEY = "FACEIT_API_KEY"
ENV_BASE_URL = "FACEIT_BASE_URL"
ENV_TIMEOUT = "FACEIT_TIMEOUT"


class ClientConfig(BaseModel):
    """Connection settings for the FACEIT Data API.

    The configuration can be:
    - Instantiated with defaults: `ClientConfig()`
    - Loaded from YAML: `ClientConfig.from_yaml("faceit.yaml")`
    - Loaded from the environment: `ClientConfig.from_env()`
    - Saved to YAML: `config.to_yaml("faceit.yaml")`
    """

    model_config = ConfigDict(frozen=True)

    base_url: str = Field(
        DEFAULT_BASE_URL,
        min_length=1,
        description="API host, without the /data/v4 prefix",
    )
    api_key: str | None = Field(
        None,
        description="API key or OAuth2 access token sent as a bearer credential",
    )
    timeout: float = Field(
        DEFAULT_TIMEOUT,
        gt=0,
        description="Request timeout in seconds",
    )

    @field_validator("base_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")

    @classmethod
    def from_yaml(cls, path: str | os.PathLike[str]) -> ClientConfig:
        """Load configuration from a YAML file.

        Args:
            path: Path to the YAML configuration file.

        Returns:
            A validated ClientConfig instance.

        Raises:
            FileNotFoundError: If the configuration file doesn't exist.
            ValidationError: If the configuration is invalid.
        """
        with open(path) as f:
            data = yaml.safe_load(f)
        return cls.model_validate(data or {})

    def to_yaml(self, path: str | os.PathLike[str]) -> None:
        """Save configuration to a YAML file.

        Args:
            path: Path where the YAML file will be saved.
        """
        with open(path, "w") as f:
            yaml.dump(
                self.model_dump(exclude_none=True),
                f,
                default_flow_style=False,
                sort_keys=False,
            )

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> ClientConfig:
        """Load configuration from FACEIT_* environment variables.

        Unset variables fall back to the defaults.
        """
        env = os.environ if environ is None else environ
        data: dict[str, Any] = {}
        if env.get(ENV_API_KEY):
            data["api_key"] = env[ENV_API_KEY]
        if env.get(ENV_BASE_URL):
            data["base_url"] = env[ENV_BASE_URL]
        if env.get(ENV_TIMEOUT):
            data["timeout"] = env[ENV_TIMEOUT]
        return cls.model_validate(data)


class ClientBuilder:
    """Fluent builder for ``FaceitClient``.

    Example:
        client = (
            ClientBuilder()
            .api_key("your-api-key-or-access-token")
            .timeout(60.0)
            .build()
        )
    """

    def __init__(self) -> None:
        self._base_url: str | None = None
        self._api_key: str | None = None
        self._timeout: float | None = None
        self._transport_options: dict[str, Any] = {}

    @classmethod
    def from_config(cls, config: ClientConfig) -> ClientBuilder:
        """Seed a builder with the values of an existing configuration."""
        return (
            cls()
            .base_url(config.base_url)
            .api_key(config.api_key)
            .timeout(config.timeout)
        )

    def base_url(self, url: str) -> ClientBuilder:
        """Override the API host."""
        self._base_url = url
        return self

    def api_key(self, key: str | None) -> ClientBuilder:
        """Set the API key or OAuth2 access token."""
        self._api_key = key
        return self

    def timeout(self, seconds: float) -> ClientBuilder:
        """Set the request timeout in seconds."""
        self._timeout = seconds
        return self

    def transport_options(self, **options: Any) -> ClientBuilder:
        """Pass extra keyword arguments to ``httpx.AsyncClient``.

        Use this for advanced transport settings such as ``transport=``,
        ``proxy=``, ``verify=`` or ``limits=``. Later calls update earlier ones.
        """
        self._transport_options.update(options)
        return self

    def config(self) -> ClientConfig:
        """Validate and return the immutable configuration."""
        data: dict[str, Any] = {}
        if self._base_url is not None:
            data["base_url"] = self._base_url
        if self._api_key is not None:
            data["api_key"] = self._api_key
        if self._timeout is not None:
            data["timeout"] = self._timeout
        return ClientConfig.model_validate(data)

    def build(self) -> FaceitClient:
        """Build the client.

        Raises:
            ValidationError: If a configured value is invalid.
        """
        from faceit.client.http_client import FaceitClient

        return FaceitClient(self.config(), **self._transport_options)
