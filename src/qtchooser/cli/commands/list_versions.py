"""List the registered Qt versions."""

import click

from qtchooser.cli.json_output import emit_model
from qtchooser.cli.json_schemas import SdkListResponse
from qtchooser.cli.output import machine_output
from qtchooser.core.context import ChooserContext
from qtchooser.core.registry import list_sdk_names


@click.command("list-versions")
@click.option(
    "--json",
    "output_json",
    is_flag=True,
    help="Output JSON format",
)
@click.pass_obj
def list_versions_cmd(ctx: ChooserContext, output_json: bool) -> None:
    """List the registered Qt versions, one per line."""
    names = list_sdk_names(ctx.search_paths())

    if output_json:
        emit_model(SdkListResponse(versions=names))
        return

    for name in names:
        machine_output(name)
