#!/usr/bin/env python3
"""
magicfile exceptions

Every failure raised by the input layer and the engine gateway derives from
MagicFileError so callers can catch the whole family at once, while each kind
stays individually catchable.

Copyright (C) 2025 Marc Rivero Lopez
Licensed under the GNU General Public License v3.0 (GPLv3)
"""

from __future__ import annotations

from typing import Any


class MagicFileError(Exception):
    """Base exception for magicfile operations"""


class InputNotFoundError(MagicFileError, FileNotFoundError):
    """Raised when a path does not exist or cannot be read"""

    def __init__(self, message: str, path: Any = None):
        super().__init__(message)
        self.path = path


class AlreadyConsumedError(MagicFileError):
    """Raised when a single-use stream is resolved a second time"""


class EmptyStreamError(MagicFileError):
    """Raised when a stream is closed or yields no bytes"""


class EngineError(MagicFileError):
    """Raised when the classification engine rejects an input or faults"""

    def __init__(self, diagnostic: str, check: Any = None):
        super().__init__(diagnostic)
        self.diagnostic = diagnostic
        self.check = check


class NoInputBoundError(MagicFileError):
    """Raised when a characterizer has no bound input to work on"""


__all__ = [
    "MagicFileError",
    "InputNotFoundError",
    "AlreadyConsumedError",
    "EmptyStreamError",
    "EngineError",
    "NoInputBoundError",
]
