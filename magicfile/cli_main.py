#!/usr/bin/env python3
"""
magicfile CLI - Command Line Interface

Characterizes one file with libmagic and prints its textual description,
MIME type and encoding.

Copyright (C) 2025 Marc Rivero López

This program is free software: you can redistribute it and/or modify
it under the terms of the GNU General Public License as published by
the Free Software Foundation, either version 3 of the License, or
(at your option) any later version.

This program is distributed in the hope that it will be useful,
but WITHOUT ANY WARRANTY; without even the implied warranty of
MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the
GNU General Public License for more details.

You should have received a copy of the GNU General Public License
along with this program. If not, see <https://www.gnu.org/licenses/>.
"""

import os
import sys

import click

from .api import characterize
from .cli.display import console, display_error, display_results
from .config import Config
from .core.constants import CLI_BANNER, CLI_USAGE
from .core.exceptions import MagicFileError
from .domain.checks import ALL_CHECKS
from .utils.logger import setup_logger


def main(filename: str | None) -> None:
    """Characterize ``filename`` and exit with a status code."""
    logging_config = Config().typed_config.logging
    setup_logger(level=logging_config.level_number, log_file=logging_config.log_file)

    console.print(CLI_BANNER, highlight=False)

    if not filename or not os.path.exists(filename) or not os.access(filename, os.R_OK):
        console.print(CLI_USAGE, highlight=False)
        sys.exit(1)

    try:
        results = characterize(ALL_CHECKS, filename)
    except MagicFileError as e:
        display_error(str(e))
        sys.exit(1)

    display_results(filename, results)


@click.command()
@click.argument("filename", type=click.Path(), required=False)
def cli(filename: str | None):
    """Show the libmagic description, MIME type and encoding of FILENAME."""
    main(filename)
