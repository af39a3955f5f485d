#!/usr/bin/env python3
"""
magicfile Characterizer - Resolve an input once, run the requested checks

Copyright (C) 2025 Marc Rivero Lopez
Licensed under the GNU General Public License v3.0 (GPLv3)
"""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path
from typing import Any

from ..domain.checks import Check
from ..utils.logger import get_logger
from .constants import MAX_SNIFF_BYTES
from .exceptions import NoInputBoundError
from .gateway import ClassificationGateway, default_gateway
from .input_source import (
    InputSource,
    Resolved,
    as_input_source,
    materialize,
    resolve,
)

logger = get_logger(__name__)


class Characterizer:
    """
    Orchestrates input resolution and engine calls.

    A characterizer can work on inputs passed per call, or on an input bound
    with ``bind``. Stream inputs are materialized at bind time when ``eager``
    is set, which makes the bound input usable for any number of checks.

    Attributes:
        max_bytes: Sniff window used for streams and raw bytes
        eager: Default binding policy for stream inputs
    """

    def __init__(
        self,
        gateway: ClassificationGateway | None = None,
        source: Any = None,
        *,
        max_bytes: int = MAX_SNIFF_BYTES,
        eager: bool = True,
    ):
        self._gateway = gateway
        self._source: InputSource | None = None
        self.max_bytes = max_bytes
        self.eager = eager

        if source is not None:
            self.bind(source)

    @property
    def gateway(self) -> ClassificationGateway:
        if self._gateway is None:
            self._gateway = default_gateway()
        return self._gateway

    @property
    def source(self) -> InputSource | None:
        return self._source

    def bind(self, source: Any, eager: bool | None = None) -> InputSource:
        """
        Bind an input for later checks, replacing any previous one.

        Args:
            source: Anything accepted by ``as_input_source``
            eager: Materialize stream inputs now; defaults to ``self.eager``

        Returns:
            The bound InputSource
        """
        bound = as_input_source(source, self.max_bytes)
        if self.eager if eager is None else eager:
            bound = materialize(bound)
        self._source = bound
        logger.debug(f"Bound {type(bound).__name__}")
        return bound

    def characterize_one(self, kind: Check | str, source: Any = None) -> str:
        """Run a single check against ``source`` or the bound input."""
        check = Check.coerce(kind)
        resolved = resolve(self._select(source))
        return self._classify(check, resolved)

    def characterize_many(
        self, kinds: Check | str | Iterable[Check | str], source: Any = None
    ) -> dict[Check, str]:
        """
        Run several checks against a single resolution of the input.

        The input is resolved exactly once, so a stream is read only once no
        matter how many checks are requested. The first engine failure aborts
        the whole call.

        Args:
            kinds: Check kinds to run (a single kind is accepted); duplicates
                are ignored
            source: Input to use instead of the bound one

        Returns:
            Mapping of check kind to engine result
        """
        if isinstance(kinds, (Check, str)):
            kinds = (kinds,)
        checks = list(dict.fromkeys(Check.coerce(kind) for kind in kinds))
        resolved = resolve(self._select(source))
        return {check: self._classify(check, resolved) for check in checks}

    def check_text(self, source: Any = None) -> str:
        return self.characterize_one(Check.TEXT, source)

    def check_mime(self, source: Any = None) -> str:
        return self.characterize_one(Check.MIMETYPE, source)

    def check_encoding(self, source: Any = None) -> str:
        return self.characterize_one(Check.ENCODING, source)

    def _select(self, source: Any) -> InputSource:
        if source is not None:
            return as_input_source(source, self.max_bytes)
        if self._source is None:
            raise NoInputBoundError("No input stream or file set")
        return self._source

    def _classify(self, check: Check, resolved: Resolved) -> str:
        if isinstance(resolved, Path):
            return self.gateway.classify_path(check, resolved)
        return self.gateway.classify_buffer(check, resolved)


__all__ = ["Characterizer"]
