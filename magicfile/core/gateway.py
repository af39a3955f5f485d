#!/usr/bin/env python3
"""
magicfile Classification Gateway - Serialized access to the native engine

libmagic keeps parsing state inside its cookies and is not safe for
concurrent use. Every engine call, whatever its check kind or input mode,
runs under one process-wide lock. Check kinds are mapped to engine entry
points through lookup tables so the six call shapes share a single locking
path.

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

from __future__ import annotations

import threading
from pathlib import Path
from typing import Any

from ..adapters.magic_adapter import ENGINE_FAILURES, load_engine
from ..domain.checks import Check
from ..interfaces.core import ClassificationEngine, ConfigLike
from ..utils.logger import get_logger
from .exceptions import EngineError
from .sniff_buffer import SniffBuffer

logger = get_logger(__name__)

# Single lock for every engine call in the process
_ENGINE_LOCK = threading.Lock()

PATH_OPERATIONS: dict[Check, str] = {
    Check.TEXT: "text_from_path",
    Check.MIMETYPE: "mime_from_path",
    Check.ENCODING: "encoding_from_path",
}

BUFFER_OPERATIONS: dict[Check, str] = {
    Check.TEXT: "text_from_buffer",
    Check.MIMETYPE: "mime_from_buffer",
    Check.ENCODING: "encoding_from_buffer",
}


class ClassificationGateway:
    """
    Serializes calls into a ClassificationEngine and maps its failures.

    Attributes:
        engine: Engine handle exposing the six native entry points
    """

    def __init__(self, engine: ClassificationEngine):
        self.engine = engine

    def classify_path(self, kind: Check, path: str | Path) -> str:
        """
        Classify a file by path.

        Raises:
            EngineError: If the engine cannot open or classify the file
        """
        return self._invoke(PATH_OPERATIONS, kind, str(path))

    def classify_buffer(self, kind: Check, buffer: SniffBuffer) -> str:
        """
        Classify a sniff buffer.

        Raises:
            EngineError: If the buffer is empty or the engine rejects it
        """
        if buffer.is_empty:
            raise EngineError("Cannot classify an empty buffer", kind)
        return self._invoke(BUFFER_OPERATIONS, kind, buffer.data)

    def _invoke(self, table: dict[Check, str], kind: Check, argument: Any) -> str:
        try:
            operation = getattr(self.engine, table[kind])
        except KeyError:
            raise ValueError(f"Unsupported check kind: {kind!r}") from None

        with _ENGINE_LOCK:
            try:
                result = operation(argument)
            except ENGINE_FAILURES as e:
                logger.debug(f"Engine rejected {kind.value} check: {e}")
                raise EngineError(str(e), kind) from e

        if not result:
            raise EngineError(f"Engine returned no {kind.value} result", kind)
        return result


_default_gateway: ClassificationGateway | None = None
_default_gateway_lock = threading.Lock()


def default_gateway(config: ConfigLike | None = None) -> ClassificationGateway:
    """Return the shared gateway wired to the process-wide libmagic handle."""
    global _default_gateway

    with _default_gateway_lock:
        if _default_gateway is None:
            if config is None:
                from ..config import Config

                config = Config()
            magic_file = config.typed_config.engine.magic_file
            _default_gateway = ClassificationGateway(load_engine(magic_file))
        return _default_gateway


__all__ = [
    "ClassificationGateway",
    "PATH_OPERATIONS",
    "BUFFER_OPERATIONS",
    "default_gateway",
]
