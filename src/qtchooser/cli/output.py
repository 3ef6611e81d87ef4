"""Output routing for CLI commands.

user_output: diagnostics and human messages, to stderr
machine_output: data meant to be consumed by scripts, to stdout
"""

import click


def user_output(message: str = "") -> None:
    """Write a human-facing message to stderr."""
    click.echo(message, err=True)


def machine_output(message: str = "") -> None:
    """Write machine-consumable output to stdout."""
    click.echo(message)
