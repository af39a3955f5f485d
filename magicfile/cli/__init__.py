"""Command line helpers for magicfile."""

from .display import console, display_error, display_results

__all__ = ["console", "display_results", "display_error"]
