#!/usr/bin/env python3
"""
magicfile Adapters Module

Adapters translate between the ClassificationEngine protocol and the
concrete native library. MagicAdapter binds libmagic through python-magic.

Copyright (C) 2025 Marc Rivero López
Licensed under the GNU General Public License v3.0 (GPLv3)

Usage:
    >>> from magicfile.adapters import load_engine
    >>>
    >>> engine = load_engine()
    >>> engine.mime_from_buffer(b"hello world\\n")
    'text/plain'
"""

from .magic_adapter import ENGINE_FAILURES, MagicAdapter, load_engine

__all__ = [
    "MagicAdapter",
    "ENGINE_FAILURES",
    "load_engine",
]
