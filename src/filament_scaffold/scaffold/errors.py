"""Typed exceptions and error handling decorator."""

from __future__ import annotations

import functools
from pathlib import Path
from typing import Any, Callable, TypeVar

from rich.console import Console
from rich.markup import escape

F = TypeVar("F", bound=Callable[..., Any])

err_console = Console(stderr=True)


class ScaffoldError(Exception):
    """Base exception for filament-scaffold."""

    exit_code: int = 1


class CollisionError(ScaffoldError):
    """Target file already exists and --force was not given."""

    exit_code = 5

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)
        super().__init__(
            f"File already exists: {self.path}. Use --force to overwrite."
        )


class ConfigurationError(ScaffoldError):
    """Config file is missing, unreadable, or invalid."""

    exit_code = 6


class ValidationError(ScaffoldError):
    """User input cannot be turned into a resource."""

    exit_code = 7

    def __init__(self, message: str = "Validation error") -> None:
        super().__init__(message)


def error_handler(func: F) -> F:
    """Decorator that catches ScaffoldError and prints user-friendly messages."""

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except ScaffoldError as exc:
            err_console.print(f"[bold red]Error:[/] {escape(str(exc))}", highlight=False)
            raise SystemExit(exc.exit_code)
        except ValueError as exc:
            err_console.print(f"[bold red]Error:[/] {escape(str(exc))}", highlight=False)
            raise SystemExit(1)

    return wrapper  # type: ignore[return-value]
