"""Configuration module for the FACEIT API client.

This module provides the immutable client configuration, with support for
YAML and environment loading, and the fluent client builder.
"""

from faceit.config.client_config import (
    DEFAULT_BASE_URL,
    DEFAULT_TIMEOUT,
    ClientBuilder,
    ClientConfig,
)

__all__ = [
    "ClientBuilder",
    "ClientConfig",
    "DEFAULT_BASE_URL",
    "DEFAULT_TIMEOUT",
]
