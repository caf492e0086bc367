"""Output utilities for CLI commands with clear intent.

user_output goes to stderr so stdout carries only the snapshot itself, which
callers redirect or diff.
"""

import click


def user_output(message: str) -> None:
    """Write a message for humans to stderr."""
    click.echo(message, err=True)


def machine_output(content: str) -> None:
    """Write machine-readable content to stdout without adding a blank line."""
    click.echo(content, nl=not content.endswith("\n"))
