#!/usr/bin/env python3
"""
magicfile Input Sources - Where the bytes to classify come from

An input source is one of three variants:

    PathInput    a filesystem path, classified by libmagic in path mode
    StreamInput  a single-read binary stream, materialized once into a buffer
    BufferInput  bytes that were already read

Each variant resolves itself to either a ``Path`` or a ``SniffBuffer``. The
module-level ``resolve`` dispatches on the variant so callers never need to
know which one they hold.

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

import os
import threading
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, BinaryIO, Union

from ..utils.logger import get_logger
from .constants import MAX_SNIFF_BYTES
from .exceptions import AlreadyConsumedError, EmptyStreamError, InputNotFoundError
from .sniff_buffer import SniffBuffer

logger = get_logger(__name__)


class StreamState(Enum):
    """Lifecycle of a single-read stream source"""

    UNRESOLVED = "unresolved"  # Nothing read yet
    RESOLVING = "resolving"  # Materialization in progress
    RESOLVED = "resolved"  # Bytes handed out, stream closed
    FAILED = "failed"  # Materialization failed, stream closed


def _check_readable(path: Path) -> None:
    if not path.exists() or not os.access(path, os.R_OK):
        raise InputNotFoundError(f"File cannot be read: {path.absolute()}", path)


def _is_closed(stream: Any) -> bool:
    return bool(getattr(stream, "closed", False))


@dataclass(frozen=True)
class PathInput:
    """Filesystem path whose readability is re-checked on every resolution"""

    path: Path

    def resolve(self) -> Path:
        """Return the path, failing if it vanished or became unreadable."""
        _check_readable(self.path)
        return self.path


@dataclass(eq=False)
class StreamInput:
    """
    Single-read binary stream.

    The first resolution reads the sniff window, closes the stream and marks
    the source consumed. Later resolutions fail with AlreadyConsumedError.

    Attributes:
        stream: Binary file-like object owned by this source
        capacity: Sniff window size in bytes
        state: Current StreamState
    """

    stream: BinaryIO
    capacity: int = MAX_SNIFF_BYTES
    state: StreamState = field(default=StreamState.UNRESOLVED, init=False)
    _lock: threading.Lock = field(default_factory=threading.Lock, init=False, repr=False)

    @property
    def consumed(self) -> bool:
        return self.state is not StreamState.UNRESOLVED

    def resolve(self) -> SniffBuffer:
        """Materialize the stream into a SniffBuffer exactly once."""
        with self._lock:
            if self.consumed:
                raise AlreadyConsumedError(
                    f"Stream was already consumed (state: {self.state.value})"
                )
            self.state = StreamState.RESOLVING

        try:
            if _is_closed(self.stream):
                raise EmptyStreamError("At end of stream or stream is closed")
            buffer = SniffBuffer.fill(self.stream, self.capacity)
            if buffer.is_empty:
                raise EmptyStreamError("At end of stream or stream is closed")
        except Exception:
            self.state = StreamState.FAILED
            self.stream.close()
            raise

        self.state = StreamState.RESOLVED
        return buffer


@dataclass(frozen=True)
class BufferInput:
    """Already materialized bytes; resolution is repeatable"""

    buffer: SniffBuffer

    def resolve(self) -> SniffBuffer:
        return self.buffer


InputSource = Union[PathInput, StreamInput, BufferInput]
Resolved = Union[Path, SniffBuffer]


def from_path(path: str | os.PathLike[str]) -> PathInput:
    """
    Create a path source.

    Raises:
        InputNotFoundError: If the path does not exist or is not readable
    """
    if path is None:
        raise TypeError("No file specified")
    source = PathInput(Path(path))
    _check_readable(source.path)
    return source


def from_stream(stream: BinaryIO, capacity: int = MAX_SNIFF_BYTES) -> StreamInput:
    """Wrap a binary stream; nothing is read until the source is resolved."""
    if stream is None:
        raise TypeError("No stream specified")
    return StreamInput(stream, capacity)


def from_buffer(data: Any, capacity: int = MAX_SNIFF_BYTES) -> BufferInput:
    """Wrap pre-read bytes (or an existing SniffBuffer)."""
    if isinstance(data, SniffBuffer):
        return BufferInput(data)
    return BufferInput(SniffBuffer.from_bytes(data, capacity))


def as_input_source(value: Any, capacity: int = MAX_SNIFF_BYTES) -> InputSource:
    """
    Coerce caller input into an InputSource.

    Args:
        value: InputSource, path (str or os.PathLike), bytes-like object,
            SniffBuffer or binary stream
        capacity: Sniff window used for streams and raw bytes

    Returns:
        Matching InputSource variant
    """
    if isinstance(value, (PathInput, StreamInput, BufferInput)):
        return value
    if value is None:
        raise TypeError("No file specified")
    if isinstance(value, (str, os.PathLike)):
        return from_path(value)
    if isinstance(value, (bytes, bytearray, memoryview, SniffBuffer)):
        return from_buffer(value, capacity)
    if callable(getattr(value, "read", None)):
        return from_stream(value, capacity)
    raise TypeError(f"Unsupported input type: {type(value).__name__}")


def resolve(source: InputSource) -> Resolved:
    """Resolve any input source variant to a path or a sniff buffer."""
    if isinstance(source, (PathInput, StreamInput, BufferInput)):
        resolved = source.resolve()
        logger.debug(f"Resolved {type(source).__name__} to {type(resolved).__name__}")
        return resolved
    raise TypeError(f"Unsupported input source: {type(source).__name__}")


def materialize(source: InputSource) -> PathInput | BufferInput:
    """Turn a stream source into a repeatable buffer source."""
    if isinstance(source, StreamInput):
        return BufferInput(source.resolve())
    return source


__all__ = [
    "StreamState",
    "PathInput",
    "StreamInput",
    "BufferInput",
    "InputSource",
    "Resolved",
    "from_path",
    "from_stream",
    "from_buffer",
    "as_input_source",
    "resolve",
    "materialize",
]
