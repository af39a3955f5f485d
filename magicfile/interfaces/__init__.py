#!/usr/bin/env python3
"""
magicfile Interfaces Module

Protocol-based interfaces for structural subtyping. Any object exposing the
six engine entry points can be injected into the ClassificationGateway,
without inheriting from anything in magicfile.

Copyright (C) 2025 Marc Rivero López
Licensed under the GNU General Public License v3.0 (GPLv3)

Example:
    >>> from magicfile.interfaces import ClassificationEngine
    >>> from magicfile.adapters.magic_adapter import load_engine
    >>>
    >>> engine = load_engine()
    >>> assert isinstance(engine, ClassificationEngine)
"""

from .core import ClassificationEngine, ConfigLike

__all__ = [
    "ClassificationEngine",
    "ConfigLike",
]
