"""Adapter over python-magic exposing the six native classification entry points."""

from __future__ import annotations

import threading

import magic

from ..core.exceptions import EngineError
from ..utils.logger import get_logger

logger = get_logger(__name__)

# Exceptions raised by libmagic through python-magic
ENGINE_FAILURES: tuple[type[BaseException], ...] = (magic.MagicException, OSError)


class MagicAdapter:
    """Thin wrapper around python-magic to keep libmagic details out of callers."""

    def __init__(self, magic_file: str | None = None) -> None:
        self.magic_file = magic_file
        try:
            self._text = magic.Magic(magic_file=magic_file)
            self._mime = magic.Magic(mime=True, magic_file=magic_file)
            self._encoding = magic.Magic(mime_encoding=True, magic_file=magic_file)
        except ENGINE_FAILURES as e:
            raise EngineError(f"Could not load magic database: {e}") from e

    def text_from_path(self, path: str) -> str:
        return self._text.from_file(path)

    def mime_from_path(self, path: str) -> str:
        return self._mime.from_file(path)

    def encoding_from_path(self, path: str) -> str:
        return self._encoding.from_file(path)

    def text_from_buffer(self, data: bytes) -> str:
        return self._text.from_buffer(data)

    def mime_from_buffer(self, data: bytes) -> str:
        return self._mime.from_buffer(data)

    def encoding_from_buffer(self, data: bytes) -> str:
        return self._encoding.from_buffer(data)


_engine: MagicAdapter | None = None
_engine_init_lock = threading.Lock()


def load_engine(magic_file: str | None = None) -> MagicAdapter:
    """
    Return the process-wide engine handle, creating it on first use.

    The handle is created once; later calls with a different database are
    ignored because libmagic cookies are not re-initialized.
    """
    global _engine

    if _engine is None:
        with _engine_init_lock:
            if _engine is None:
                logger.debug(f"Loading libmagic (database: {magic_file or 'default'})")
                _engine = MagicAdapter(magic_file)
                return _engine

    if magic_file is not None and magic_file != _engine.magic_file:
        logger.warning(
            f"Engine already loaded with database {_engine.magic_file or 'default'}, "
            f"ignoring {magic_file}"
        )
    return _engine


__all__ = ["MagicAdapter", "ENGINE_FAILURES", "load_engine"]
