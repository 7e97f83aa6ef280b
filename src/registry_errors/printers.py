"""
Human-readable output formatting.

Centralizes all CLI output so commands stay thin and focused.
"""
from __future__ import annotations

import typer
from typing import Iterable

from rich.console import Console
from rich.table import Table

from .codes import ErrorCode
from .errors import Errors

_console = Console()


def print_codes(codes: Iterable[ErrorCode]) -> None:
    """
    Print the error code vocabulary as a table.

    Args:
        codes: Codes to list, in display order
    """
    table = Table(title="Error codes")
    table.add_column("Code", style="cyan", no_wrap=True)
    table.add_column("Message", style="yellow")

    for code in codes:
        table.add_row(str(code), code.message)

    _console.print(table)


def print_parsed_code(text: str, code: ErrorCode) -> None:
    """Print the code a string parses to."""
    if str(code) == text:
        typer.echo(f"{text}: {code.message}")
    else:
        typer.echo(f"{text!r} is not a known error code; treated as {code}: {code.message}")


def print_errors(errs: Errors) -> None:
    """
    Print an error aggregate using its display form.

    Multi-error text already ends with a newline.
    """
    typer.echo(str(errs), nl=len(errs) <= 1)


def print_envelope(errs: Errors, indent: int) -> None:
    """Print an error aggregate as its JSON response body."""
    typer.echo(errs.to_json(indent=indent or None))
