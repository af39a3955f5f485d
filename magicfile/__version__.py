"""Version information for magicfile."""

__version__ = "1.0.0"
__author__ = "Marc Rivero López"
__license__ = "GPL-3.0"
