#!/usr/bin/env python3
"""
magicfile Configuration Schemas - Typed Dataclasses
Copyright (C) 2025 Marc Rivero López

This program is free software: you can redistribute it and/or modify
it under the terms of the GNU General Public License as published by
the Free Software Foundation, either version 3 of the License, or
(at your option) any later version.

This program is distributed in the hope that it will be useful,
but WITHOUT ANY WARRANTY; without even the implied warranty of
MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the
GNU General Public License for more details.

You should have received a copy of the GNU General Public License
along with this program. If not, see <https://www.gnu.org/licenses/>.
"""

import logging
from dataclasses import asdict, dataclass, field
from typing import Any

from ..core.constants import MAX_SNIFF_BYTES, MAX_SNIFF_WINDOW_LIMIT


@dataclass(frozen=True)
class SniffConfig:
    """Sniff window configuration"""

    max_bytes: int = MAX_SNIFF_BYTES

    def __post_init__(self):
        """Validate configuration values"""
        if not (1 <= self.max_bytes <= MAX_SNIFF_WINDOW_LIMIT):
            raise ValueError(f"max_bytes must be between 1 and {MAX_SNIFF_WINDOW_LIMIT}")


@dataclass(frozen=True)
class EngineConfig:
    """Native engine configuration"""

    magic_file: str | None = None

    def __post_init__(self):
        """Validate configuration values"""
        if self.magic_file is not None and not str(self.magic_file).strip():
            raise ValueError("magic_file must be a non-empty path or null")


@dataclass(frozen=True)
class LoggingConfig:
    """Logging configuration"""

    level: str = "WARNING"
    log_file: bool = False

    def __post_init__(self):
        """Validate configuration values"""
        if not isinstance(logging.getLevelName(str(self.level).upper()), int):
            raise ValueError(f"Unknown logging level: {self.level}")

    @property
    def level_number(self) -> int:
        return logging.getLevelName(self.level.upper())


@dataclass(frozen=True)
class MagicFileConfig:
    """Main magicfile configuration container"""

    sniff: SniffConfig = field(default_factory=SniffConfig)
    engine: EngineConfig = field(default_factory=EngineConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to dictionary"""
        return asdict(self)

    @classmethod
    def from_dict(cls, config_dict: dict[str, Any]) -> "MagicFileConfig":
        """Create configuration from dictionary"""
        if not isinstance(config_dict, dict):
            raise TypeError("config_dict must be a dictionary")

        kwargs: dict[str, Any] = {}

        if "sniff" in config_dict:
            kwargs["sniff"] = SniffConfig(**config_dict["sniff"])

        if "engine" in config_dict:
            kwargs["engine"] = EngineConfig(**config_dict["engine"])

        if "logging" in config_dict:
            kwargs["logging"] = LoggingConfig(**config_dict["logging"])

        return cls(**kwargs)
