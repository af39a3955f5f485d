#!/usr/bin/env python3
"""
magicfile - libmagic classification for paths, streams and buffers

Author: Marc Rivero (@seifreed)
License: GPL-3.0
"""

from .__version__ import __author__, __license__, __version__

__description__ = "libmagic classification for paths, streams and buffers"

from .api import characterize, check_encoding, check_mime, check_text
from .core import (
    AlreadyConsumedError,
    BufferInput,
    Characterizer,
    ClassificationGateway,
    EmptyStreamError,
    EngineError,
    InputNotFoundError,
    MagicFileError,
    NoInputBoundError,
    PathInput,
    SniffBuffer,
    StreamInput,
    from_buffer,
    from_path,
    from_stream,
)
from .domain.checks import ALL_CHECKS, Check
from .magic_file import MagicFile

__all__ = [
    "MagicFile",
    "Characterizer",
    "ClassificationGateway",
    "SniffBuffer",
    "PathInput",
    "StreamInput",
    "BufferInput",
    "from_path",
    "from_stream",
    "from_buffer",
    "Check",
    "ALL_CHECKS",
    "characterize",
    "check_text",
    "check_mime",
    "check_encoding",
    "MagicFileError",
    "InputNotFoundError",
    "AlreadyConsumedError",
    "EmptyStreamError",
    "EngineError",
    "NoInputBoundError",
    "__version__",
    "__author__",
    "__license__",
    "__description__",
]
