"""Domain types shared across magicfile."""

from .checks import ALL_CHECKS, Check

__all__ = ["Check", "ALL_CHECKS"]
