#!/usr/bin/env python3
"""
magicfile Core Constants - Sniff window and engine thresholds

This module contains the constants shared by the input layer, the engine
gateway and the configuration schemas.

Copyright (C) 2025 Marc Rivero Lopez
Licensed under the GNU General Public License v3.0 (GPLv3)
"""

# =============================================================================
# Sniff Window Constants
# =============================================================================
# libmagic needs only a prefix of the content to make a reliable decision
MAX_SNIFF_BYTES = 4096  # Default sniff window read from streams
MAX_SNIFF_WINDOW_LIMIT = 1024 * 1024  # Upper bound for a configured window

# =============================================================================
# Command Line Messages
# =============================================================================
CLI_BANNER = "MagicFile binding for libmagic..."
CLI_USAGE = "First argument should be the path to an existing filename."

# =============================================================================
# Configuration Locations
# =============================================================================
CONFIG_ENV_VAR = "MAGICFILE_CONFIG"
CONFIG_DIR_NAME = ".magicfile"
CONFIG_FILE_NAME = "config.json"
