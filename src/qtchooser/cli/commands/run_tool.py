"""Run a tool from the selected Qt version."""

import click

from qtchooser.cli.error_boundary import chooser_error_boundary
from qtchooser.cli.options import qt_option, requested_sdk
from qtchooser.core.context import ChooserContext
from qtchooser.core.dispatch import run_tool


@click.command(
    "run-tool",
    context_settings=dict(ignore_unknown_options=True, allow_interspersed_args=False),
)
@qt_option
@click.argument("tool")
@click.argument("args", nargs=-1, type=click.UNPROCESSED)
@click.pass_obj
@chooser_error_boundary
def run_tool_cmd(
    ctx: ChooserContext, target_sdk: str | None, tool: str, args: tuple[str, ...]
) -> None:
    """Run TOOL from the selected Qt version, passing ARGS through."""
    run_tool(ctx, requested_sdk(ctx, target_sdk), tool, [tool, *args])
