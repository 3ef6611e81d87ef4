"""Options shared by commands that select an SDK."""

import click

from qtchooser.core.context import ChooserContext

qt_option = click.option(
    "--qt",
    "target_sdk",
    default=None,
    metavar="VERSION",
    help="Qt version to use (overrides QT_SELECT).",
)


def requested_sdk(ctx: ChooserContext, option_value: str | None) -> str:
    """SDK requested on the command line, else by QT_SELECT, else the default."""
    if option_value is not None:
        return option_value
    return ctx.env.qt_select or ""
