#!/usr/bin/env python3
"""
Configuration persistence utilities for magicfile.

This module encapsulates file IO for loading and saving configuration data,
keeping the Config model focused on validation and accessors.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from .utils.logger import get_logger

logger = get_logger(__name__)


class ConfigStore:
    """Load and save configuration dictionaries to disk."""

    @staticmethod
    def load(path: str) -> dict[str, Any] | None:
        """Load configuration from a JSON file path."""
        try:
            with open(path) as handle:
                data = json.load(handle)
            if isinstance(data, dict):
                return data
            logger.warning(f"Ignoring config {path}: top-level value is not an object")
        except (OSError, ValueError) as exc:
            logger.warning(f"Could not load config from {path}: {exc}")
        return None

    @staticmethod
    def save(path: str, payload: dict[str, Any]) -> None:
        """Save configuration to a JSON file path."""
        config_dir = Path(path).parent
        config_dir.mkdir(parents=True, exist_ok=True)
        with open(path, "w") as handle:
            json.dump(payload, handle, indent=2)
