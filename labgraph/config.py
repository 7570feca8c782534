"""Centralized configuration using Pydantic Settings.

This module provides a single source of truth for library defaults:
- which backing new graphs use
- the default graph name
- logging level and format

Configuration can be overridden via environment variables:
- LABGRAPH_GRAPH_DEFAULT_BACKING=matrix
- LABGRAPH_GRAPH_DEFAULT_NAME=labs
- LABGRAPH_LOG_LEVEL=DEBUG
- etc.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from .domain.errors import ConfigurationError


class GraphConfig(BaseSettings):
    """Graph construction configuration.

    Environment variables prefixed with LABGRAPH_GRAPH_.
    """

    model_config = SettingsConfigDict(env_prefix="LABGRAPH_GRAPH_")

    default_backing: Literal["matrix", "adjacency_list"] = "adjacency_list"
    default_name: str = "graph"


class ObservabilityConfig(BaseSettings):
    """Logging and observability configuration.

    Environment variables prefixed with LABGRAPH_LOG_.
    """

    model_config = SettingsConfigDict(env_prefix="LABGRAPH_LOG_")

    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    structured: bool = False  # Set True for JSON logging


class AppConfig(BaseSettings):
    """Main configuration aggregating all sub-configs.

    Sub-configurations can be accessed via attributes:

        config = get_config()
        print(config.graph.default_backing)
        print(config.observability.level)

    Environment variables prefixed with LABGRAPH_.
    """

    model_config = SettingsConfigDict(env_prefix="LABGRAPH_")

    graph: GraphConfig = Field(default_factory=GraphConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)


@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    """Get the singleton configuration.

    Configuration is loaded once and cached. To reload configuration
    (e.g., in tests), use reset_config() first.

    Returns:
        The configuration instance.

    Raises:
        ConfigurationError: If an environment variable holds an invalid value.
    """
    try:
        return AppConfig()
    except ValidationError as e:
        error = e.errors()[0]
        raise ConfigurationError(
            f"Invalid configuration: {error['msg']}",
            setting_name=".".join(str(part) for part in error["loc"]),
            cause=e,
        )


def reset_config() -> None:
    """Reset the configuration cache.

    Call this in tests to ensure a fresh configuration is loaded.
    """
    get_config.cache_clear()
