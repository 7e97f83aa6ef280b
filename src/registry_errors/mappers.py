"""
Error mapping and CLI utilities.

Provides centralized exception-to-exit-code mapping so every Typer command
handles failures the same way.
"""
from __future__ import annotations

import logging
import typer
from typing import Callable, TypeVar

T = TypeVar('T')

logger = logging.getLogger(__name__)

EXIT_CODES = {
    "ValidationError": 2,
    "ValueError": 2,
    "JSONDecodeError": 2,
    "FileNotFoundError": 4,
}

FALLBACK_EXIT_CODE = 3


def exit_code_for(exc: BaseException) -> int:
    """
    Map exception to standardized exit code.

    - 0: Success
    - 2: Malformed input or configuration (ValidationError, ValueError)
    - 3: Any other failure
    - 4: Input file missing (FileNotFoundError)
    """
    return EXIT_CODES.get(type(exc).__name__, FALLBACK_EXIT_CODE)


def run_and_exit(func: Callable[[], T]) -> T:
    """
    Unified error wrapper for CLI commands.

    Executes the given function and maps any exception to typer.Exit with
    the matching exit code, chained to the original exception.
    """
    try:
        return func()
    except Exception as e:
        logger.debug(f"Command failed with {type(e).__name__}: {e}")
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=exit_code_for(e)) from e
