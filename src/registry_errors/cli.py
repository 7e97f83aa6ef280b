"""
registry-errors CLI

Inspection commands for the registry error vocabulary:
- codes: List every error code with its message
- parse: Show which code a string maps to
- describe: Read an error response body and print its display form
"""
from __future__ import annotations

import logging
import typer
from pathlib import Path
from typing import Optional

from .codes import ErrorCode, parse_error_code
from .errors import Errors
from .mappers import run_and_exit
from .printers import print_codes, print_envelope, print_errors, print_parsed_code
from .settings import Settings, create_settings_from_env

app = typer.Typer(name="registry-errors", help="Registry error codes and envelopes")


@app.callback()
def configure(ctx: typer.Context) -> None:
    """Load settings from the environment and configure logging."""
    settings = run_and_exit(create_settings_from_env)
    logging.basicConfig(
        level=settings.log_level_value,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    ctx.obj = settings


@app.command()
def codes() -> None:
    """List every error code with its canonical message."""
    print_codes(sorted(ErrorCode))


@app.command()
def parse(
    text: str = typer.Argument(..., help="Error code string, e.g. UNKNOWN_MANIFEST"),
) -> None:
    """Show which error code a string parses to."""
    print_parsed_code(text, parse_error_code(text))


@app.command()
def describe(
    ctx: typer.Context,
    path: Optional[Path] = typer.Argument(None, help="Error response body (reads stdin if omitted)"),
    as_json: bool = typer.Option(False, "--json", help="Print the normalized envelope instead"),
) -> None:
    """Print the display form of an error response body."""
    settings: Settings = ctx.obj

    def _describe() -> None:
        if path is None:
            data = typer.get_text_stream("stdin").read()
        else:
            data = path.read_text(encoding="utf-8")

        errs = Errors.from_json(data)
        if as_json:
            print_envelope(errs, settings.json_indent)
        else:
            print_errors(errs)

    run_and_exit(_describe)


def main() -> None:
    """CLI entry point."""
    app()


if __name__ == "__main__":
    main()
