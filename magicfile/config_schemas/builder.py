#!/usr/bin/env python3
"""Fluent configuration builder."""

from typing import Any

from .schemas import EngineConfig, LoggingConfig, MagicFileConfig, SniffConfig


class ConfigBuilder:
    """Fluent API builder for MagicFileConfig."""

    def __init__(self) -> None:
        self._sniff_kwargs: dict[str, Any] = {}
        self._engine_kwargs: dict[str, Any] = {}
        self._logging_kwargs: dict[str, Any] = {}

    # Sniff Configuration Methods
    def with_sniff_window(self, max_bytes: int) -> "ConfigBuilder":
        self._sniff_kwargs["max_bytes"] = max_bytes
        return self

    # Engine Configuration Methods
    def with_magic_file(self, magic_file: str | None) -> "ConfigBuilder":
        self._engine_kwargs["magic_file"] = magic_file
        return self

    # Logging Configuration Methods
    def with_log_level(self, level: str) -> "ConfigBuilder":
        self._logging_kwargs["level"] = level
        return self

    def with_log_file(self, enabled: bool = True) -> "ConfigBuilder":
        self._logging_kwargs["log_file"] = enabled
        return self

    # Build Method
    def build(self) -> MagicFileConfig:
        """Build and return the config instance."""
        return MagicFileConfig(
            sniff=SniffConfig(**self._sniff_kwargs),
            engine=EngineConfig(**self._engine_kwargs),
            logging=LoggingConfig(**self._logging_kwargs),
        )


def create_default_config() -> MagicFileConfig:
    return ConfigBuilder().build()


def create_verbose_config() -> MagicFileConfig:
    return ConfigBuilder().with_log_level("DEBUG").build()
