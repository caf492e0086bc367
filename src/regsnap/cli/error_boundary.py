"""Error boundary handling for CLI commands.

This module provides a decorator to catch well-known exceptions at CLI entry
points and display clean error messages without stack traces.
"""

import functools
from collections.abc import Callable
from typing import Any, TypeVar

import click

from regsnap.cli.output import user_output
from regsnap.core.errors import SnapshotError

T = TypeVar("T", bound=Callable[..., Any])


def _debug_enabled() -> bool:
    ctx = click.get_current_context(silent=True)
    if ctx is None:
        return False
    if ctx.obj is not None:
        return bool(getattr(ctx.obj, "debug", False))
    # Context creation itself failed; fall back to the group's --debug flag
    return bool(ctx.find_root().params.get("debug", False))


def cli_error_boundary(func: T) -> T:
    """Decorator that catches well-known exceptions and displays clean error messages.

    Catches:
        - SnapshotError: Configuration, manifest, edge and registry failures
        - FileNotFoundError: Missing files
        - PermissionError: Permission denied errors
        - ValueError: Invalid input

    All other exceptions bubble up normally with full stack traces. With
    --debug, nothing is caught.

    Example:
        @click.command()
        @cli_error_boundary
        def my_command():
            ...
    """

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except (SnapshotError, FileNotFoundError, PermissionError, ValueError) as e:
            if _debug_enabled():
                raise
            user_output(click.style("Error: ", fg="red") + str(e))
            raise SystemExit(1) from None

    return wrapper  # type: ignore[return-value]
