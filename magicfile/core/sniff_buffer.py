#!/usr/bin/env python3
"""
Bounded sniff buffer

The SniffBuffer is the canonical payload handed to the engine in buffer mode:
a prefix of the content that never exceeds the configured sniff window.

Copyright (C) 2025 Marc Rivero Lopez
Licensed under the GNU General Public License v3.0 (GPLv3)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, BinaryIO

from ..utils.logger import get_logger
from .constants import MAX_SNIFF_BYTES

logger = get_logger(__name__)


@dataclass(frozen=True)
class SniffBuffer:
    """
    Immutable byte prefix of at most ``capacity`` bytes.

    The buffer holds exactly the bytes that were read; a short read is not
    padded, so the engine always classifies the real content.

    Attributes:
        data: Bytes to classify
        capacity: Maximum number of bytes the buffer may hold
    """

    data: bytes
    capacity: int = MAX_SNIFF_BYTES

    def __post_init__(self):
        """Validate buffer bounds"""
        if self.capacity < 1:
            raise ValueError("capacity must be positive")
        if not isinstance(self.data, bytes):
            raise TypeError(f"data must be bytes, got {type(self.data).__name__}")
        if len(self.data) > self.capacity:
            raise ValueError(
                f"buffer holds {len(self.data)} bytes, exceeding capacity {self.capacity}"
            )

    def __len__(self) -> int:
        return len(self.data)

    def __bytes__(self) -> bytes:
        return self.data

    @property
    def is_empty(self) -> bool:
        return not self.data

    @classmethod
    def from_bytes(cls, data: Any, capacity: int = MAX_SNIFF_BYTES) -> SniffBuffer:
        """Wrap pre-read bytes, truncating them to the sniff window."""
        if not isinstance(data, (bytes, bytearray, memoryview)):
            raise TypeError(f"Expected a bytes-like object, got {type(data).__name__}")
        return cls(bytes(data[:capacity]), capacity)

    @classmethod
    def fill(cls, stream: BinaryIO, capacity: int = MAX_SNIFF_BYTES) -> SniffBuffer:
        """
        Read up to ``capacity`` bytes from ``stream`` and close it.

        Short reads are retried until the window is full or the stream reports
        end of data. The stream is closed on every exit path, since a stream
        is single-use once its prefix has been taken.

        Args:
            stream: Binary file-like object
            capacity: Sniff window size in bytes

        Returns:
            SniffBuffer holding the bytes obtained (possibly none)

        Raises:
            TypeError: If the stream yields text instead of bytes
        """
        chunks: list[bytes] = []
        remaining = capacity
        try:
            while remaining > 0:
                chunk = stream.read(remaining)
                if not chunk:
                    break
                if isinstance(chunk, str):
                    raise TypeError("stream must be opened in binary mode")
                chunks.append(bytes(chunk))
                remaining -= len(chunk)
        finally:
            stream.close()

        data = b"".join(chunks)
        logger.debug(f"Read {len(data)} of {capacity} sniff bytes from stream")
        return cls(data[:capacity], capacity)


__all__ = ["SniffBuffer"]
