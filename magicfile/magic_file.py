#!/usr/bin/env python3
"""
MagicFile - classification handle bound to one input

Copyright (C) 2025 Marc Rivero López
Licensed under the GNU General Public License v3.0 (GPLv3)
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from .core.characterizer import Characterizer
from .core.constants import MAX_SNIFF_BYTES
from .core.gateway import ClassificationGateway
from .core.input_source import InputSource
from .domain.checks import Check


class MagicFile:
    """
    Handle bound to a fixed input for its whole lifetime.

    The input may be a filename, a path, a binary stream, raw bytes or an
    InputSource. Streams are read once at construction, so every check on
    the handle works on the same sniffed bytes.

    Example:
        >>> with open("report.pdf", "rb") as fh:
        ...     m = MagicFile(fh)
        >>> m.check_mime()
        'application/pdf'
    """

    def __init__(
        self,
        source: Any,
        *,
        gateway: ClassificationGateway | None = None,
        max_bytes: int = MAX_SNIFF_BYTES,
    ):
        if source is None:
            raise TypeError("No file specified")
        self._characterizer = Characterizer(gateway, source, max_bytes=max_bytes, eager=True)

    @property
    def source(self) -> InputSource:
        return self._characterizer.source

    def characterize(
        self, checks: Check | str | Iterable[Check | str]
    ) -> str | dict[Check, str]:
        """Run one check (returns a string) or several (returns a mapping)."""
        if isinstance(checks, (Check, str)):
            return self._characterizer.characterize_one(checks)
        return self._characterizer.characterize_many(checks)

    def check_text(self) -> str:
        return self._characterizer.check_text()

    def check_mime(self) -> str:
        return self._characterizer.check_mime()

    def check_encoding(self) -> str:
        return self._characterizer.check_encoding()

    def __repr__(self) -> str:
        return f"MagicFile({self.source!r})"
