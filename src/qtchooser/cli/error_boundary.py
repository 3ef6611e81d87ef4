"""Error boundary turning core failures into CLI diagnostics."""

from collections.abc import Callable
from functools import wraps
from typing import Any

from qtchooser.cli.output import user_output
from qtchooser.core.constants import CHOOSER_NAME, EXIT_FAILURE
from qtchooser.core.errors import ChooserError


def report_error(program: str, error: ChooserError) -> None:
    """Print ``<program>: <message>`` to stderr."""
    user_output(f"{program}: {error}")


def chooser_error_boundary(func: Callable) -> Callable:
    """Decorator that reports ChooserError and exits with status 1.

    The program name is taken from the ChooserContext passed to the command
    (first positional argument when the command uses @click.pass_obj).
    Any other exception propagates unchanged.

    Example:
        @click.command("print-env")
        @click.pass_obj
        @chooser_error_boundary
        def print_env_cmd(ctx: ChooserContext) -> None:
            ...
    """

    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except ChooserError as e:
            program = getattr(args[0], "program", CHOOSER_NAME) if args else CHOOSER_NAME
            report_error(program, e)
            raise SystemExit(EXIT_FAILURE) from None

    return wrapper
