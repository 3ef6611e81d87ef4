import logging
import sys
from enum import Enum

import click

from qtchooser.cli.commands.install import install_cmd
from qtchooser.cli.commands.list_versions import list_versions_cmd
from qtchooser.cli.commands.print_env import print_env_cmd
from qtchooser.cli.commands.run_tool import run_tool_cmd
from qtchooser.cli.help_formatter import ChooserGroup
from qtchooser.cli.legacy_args import legacy_command_args
from qtchooser.cli.wrapper import is_wrapper_invocation, run_wrapper
from qtchooser.core.constants import CHOOSER_NAME, EXIT_IMPOSSIBLE
from qtchooser.core.context import create_context

logger = logging.getLogger(__name__)

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])  # terse help flags


class InvocationMode(Enum):
    WRAPPER = "wrapper"
    COMMAND = "command"


def configure_debug_logging() -> None:
    logging.basicConfig(level=logging.DEBUG, format="[DEBUG %(name)s:%(lineno)d] %(message)s")


@click.group(cls=ChooserGroup, context_settings=CONTEXT_SETTINGS)
@click.version_option(package_name="qtchooser")
@click.option("--debug", is_flag=True, help="Print debug logging to stderr.")
@click.pass_context
def cli(ctx: click.Context, debug: bool) -> None:
    """Run Qt tools from one of several installed Qt versions."""
    # Only create context if not already provided (e.g., by tests)
    if ctx.obj is None:
        ctx.obj = create_context()
    if debug:
        configure_debug_logging()


cli.add_command(list_versions_cmd)
cli.add_command(list_versions_cmd, name="l")
cli.add_command(print_env_cmd)
cli.add_command(install_cmd)
cli.add_command(run_tool_cmd)


def main(argv: list[str] | None = None) -> None:
    """CLI entry point used by the `qtchooser` console script and tool symlinks."""
    args = list(sys.argv if argv is None else argv)
    ctx = create_context(args[0] if args else CHOOSER_NAME)
    if ctx.env.debug:
        configure_debug_logging()

    mode = InvocationMode.WRAPPER if is_wrapper_invocation(ctx, args) else InvocationMode.COMMAND
    logger.debug("Invoked as %s in %s mode", ctx.program, mode.value)

    if mode is InvocationMode.WRAPPER:
        sys.exit(run_wrapper(ctx, args))
    if mode is InvocationMode.COMMAND:
        command_args = legacy_command_args(args)
        if command_args is None:
            command_args = args[1:]
        cli.main(args=command_args, prog_name=CHOOSER_NAME, obj=ctx)
        return
    sys.exit(EXIT_IMPOSSIBLE)
