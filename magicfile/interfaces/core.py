#!/usr/bin/env python3
"""Core protocol interfaces for dependency inversion."""

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class ClassificationEngine(Protocol):
    """The six native entry points: three check kinds times two input modes."""

    def text_from_path(self, path: str) -> str: ...

    def mime_from_path(self, path: str) -> str: ...

    def encoding_from_path(self, path: str) -> str: ...

    def text_from_buffer(self, data: bytes) -> str: ...

    def mime_from_buffer(self, data: bytes) -> str: ...

    def encoding_from_buffer(self, data: bytes) -> str: ...


class ConfigLike(Protocol):
    @property
    def typed_config(self) -> Any: ...
