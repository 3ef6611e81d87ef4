"""Print the environment of the selected Qt version."""

import click

from qtchooser.cli.error_boundary import chooser_error_boundary
from qtchooser.cli.json_output import emit_model
from qtchooser.cli.json_schemas import SdkEnvironmentResponse
from qtchooser.cli.options import qt_option, requested_sdk
from qtchooser.cli.output import machine_output
from qtchooser.core.context import ChooserContext
from qtchooser.core.registry import Sdk
from qtchooser.core.selection import require_sdk


def format_environment(sdk: Sdk) -> list[str]:
    """Shell assignments describing sdk.

    Values are wrapped in double quotes so paths with spaces survive, but
    nothing is escaped: paths containing quotes or backslashes are not
    supported.
    """
    return [
        f'QT_SELECT="{sdk.name}"',
        f'QTTOOLDIR="{sdk.tools_dir}"',
        f'QTLIBDIR="{sdk.libraries_dir}"',
    ]


@click.command("print-env")
@qt_option
@click.option(
    "--json",
    "output_json",
    is_flag=True,
    help="Output JSON format",
)
@click.pass_obj
@chooser_error_boundary
def print_env_cmd(ctx: ChooserContext, target_sdk: str | None, output_json: bool) -> None:
    """Print the selected Qt version's name and directories."""
    sdk = require_sdk(ctx, requested_sdk(ctx, target_sdk))

    if output_json:
        emit_model(
            SdkEnvironmentResponse(
                name=sdk.name,
                tools_dir=sdk.tools_dir,
                libraries_dir=sdk.libraries_dir,
                config_file=str(sdk.config_file) if sdk.config_file is not None else None,
            )
        )
        return

    for line in format_environment(sdk):
        machine_output(line)
