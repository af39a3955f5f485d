"""Check kinds understood by the classification engine."""

from __future__ import annotations

from enum import Enum


class Check(Enum):
    """Classification dimensions a caller can request"""

    TEXT = "text"  # Human-readable description
    MIMETYPE = "mime"  # MIME type
    ENCODING = "encoding"  # Character encoding

    @classmethod
    def coerce(cls, value: Check | str) -> Check:
        """Return the member matching ``value`` (member, value or name)."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            needle = value.strip().lower()
            for member in cls:
                if needle in (member.value, member.name.lower()):
                    return member
        raise ValueError(f"Unknown check kind: {value!r}")


ALL_CHECKS: tuple[Check, ...] = (Check.TEXT, Check.MIMETYPE, Check.ENCODING)
