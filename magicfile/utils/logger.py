#!/usr/bin/env python3
"""
Logging utilities for magicfile
"""

import logging
import sys
from pathlib import Path

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logger(
    name: str = "magicfile", level: int = logging.WARNING, log_file: bool = False
) -> logging.Logger:
    """Setup logger with a console handler and an optional file handler"""

    logger = logging.getLogger(name)
    logger.setLevel(level)

    formatter = logging.Formatter(LOG_FORMAT)

    # Avoid duplicate handlers
    if logger.handlers:
        for handler in logger.handlers:
            if isinstance(handler, logging.StreamHandler) and not isinstance(
                handler, logging.FileHandler
            ):
                handler.setLevel(level)
    else:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(level)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    has_file_handler = any(isinstance(h, logging.FileHandler) for h in logger.handlers)
    if log_file and not has_file_handler:
        _add_file_handler(logger, formatter)

    return logger


def _add_file_handler(logger: logging.Logger, formatter: logging.Formatter) -> None:
    try:
        log_dir = Path.home() / ".magicfile" / "logs"
        log_dir.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(log_dir / "magicfile.log")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)
    except OSError as e:
        logger.warning(f"File logging disabled: {e}")


def get_logger(name: str = "magicfile") -> logging.Logger:
    """Get logger instance"""
    return logging.getLogger(name)
