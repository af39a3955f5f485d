#!/usr/bin/env python3
"""
magicfile CLI Display Module

Rich console and result rendering for the command line.
"""

import sys
from typing import IO, cast

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ..domain.checks import Check


class _StdoutProxy:
    def write(self, data: str) -> int:
        return sys.stdout.write(data)

    def flush(self) -> None:
        sys.stdout.flush()

    def isatty(self) -> bool:
        return sys.stdout.isatty()

    @property
    def encoding(self) -> str:
        return getattr(sys.stdout, "encoding", "utf-8")

    @property
    def errors(self) -> str:
        return getattr(sys.stdout, "errors", "strict")


console = Console(file=cast(IO[str], _StdoutProxy()))

# Row labels, in display order
CHECK_LABELS: dict[Check, str] = {
    Check.TEXT: "Textual representation",
    Check.MIMETYPE: "Magic mime type",
    Check.ENCODING: "Encoding",
}


def display_results(filename: str, results: dict[Check, str]) -> None:
    """Print the characteristics table for one file."""
    console.print(f"Characteristics for: [bold]{escape(filename)}[/bold]", highlight=False)

    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("Check", style="cyan", no_wrap=True)
    table.add_column("Result", overflow="fold")

    for check, label in CHECK_LABELS.items():
        if check in results:
            table.add_row(label, escape(results[check]))

    console.print(table)


def display_error(message: str) -> None:
    console.print(f"[red]Error: {escape(message)}[/red]", highlight=False)
