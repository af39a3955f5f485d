#!/usr/bin/env python3
"""
magicfile Core Package - Input abstraction and engine invocation discipline

This package provides the core components for classification:
- SniffBuffer: bounded prefix of the content to classify
- PathInput / StreamInput / BufferInput: the three input shapes
- ClassificationGateway: serialized access to the native engine
- Characterizer: resolves an input once and runs the requested checks

Copyright (C) 2025 Marc Rivero Lopez
Licensed under the GNU General Public License v3.0 (GPLv3)
"""

from .characterizer import Characterizer
from .constants import MAX_SNIFF_BYTES, MAX_SNIFF_WINDOW_LIMIT
from .exceptions import (
    AlreadyConsumedError,
    EmptyStreamError,
    EngineError,
    InputNotFoundError,
    MagicFileError,
    NoInputBoundError,
)
from .gateway import ClassificationGateway, default_gateway
from .input_source import (
    BufferInput,
    InputSource,
    PathInput,
    StreamInput,
    StreamState,
    as_input_source,
    from_buffer,
    from_path,
    from_stream,
    materialize,
    resolve,
)
from .sniff_buffer import SniffBuffer

__all__ = [
    # Main classes
    "Characterizer",
    "ClassificationGateway",
    "SniffBuffer",
    # Input sources
    "InputSource",
    "PathInput",
    "StreamInput",
    "BufferInput",
    "StreamState",
    "from_path",
    "from_stream",
    "from_buffer",
    "as_input_source",
    "resolve",
    "materialize",
    "default_gateway",
    # Exceptions
    "MagicFileError",
    "InputNotFoundError",
    "AlreadyConsumedError",
    "EmptyStreamError",
    "EngineError",
    "NoInputBoundError",
    # Constants
    "MAX_SNIFF_BYTES",
    "MAX_SNIFF_WINDOW_LIMIT",
]
