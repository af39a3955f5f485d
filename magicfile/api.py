#!/usr/bin/env python3
"""
Static-style classification functions.

Each function accepts a filename, a path, a binary stream, raw bytes or an
InputSource. A raw stream is read and closed by the call, so passing the
same stream twice fails with EmptyStreamError.
"""

from __future__ import annotations

import threading
from collections.abc import Iterable
from typing import Any

from .core.characterizer import Characterizer
from .domain.checks import Check

_default_characterizer: Characterizer | None = None
_default_lock = threading.Lock()


def get_characterizer() -> Characterizer:
    """Return the shared characterizer, sized from the loaded configuration."""
    global _default_characterizer

    with _default_lock:
        if _default_characterizer is None:
            from .config import Config
            from .core.gateway import default_gateway

            config = Config()
            _default_characterizer = Characterizer(
                default_gateway(config), max_bytes=config.sniff_window
            )
        return _default_characterizer


def characterize(
    checks: Check | str | Iterable[Check | str], source: Any
) -> str | dict[Check, str]:
    """Run one check (returns a string) or several (returns a mapping)."""
    characterizer = get_characterizer()
    source = _required(source)
    if isinstance(checks, (Check, str)):
        return characterizer.characterize_one(checks, source)
    return characterizer.characterize_many(checks, source)


def check_text(source: Any) -> str:
    return get_characterizer().check_text(_required(source))


def check_mime(source: Any) -> str:
    return get_characterizer().check_mime(_required(source))


def check_encoding(source: Any) -> str:
    return get_characterizer().check_encoding(_required(source))


def _required(source: Any) -> Any:
    # None would otherwise fall back to the (empty) bound input
    if source is None:
        raise TypeError("No file specified")
    return source


__all__ = ["characterize", "check_text", "check_mime", "check_encoding", "get_characterizer"]
