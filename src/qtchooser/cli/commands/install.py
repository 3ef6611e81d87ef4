"""Register a Qt installation."""

import click

from qtchooser.cli.error_boundary import chooser_error_boundary
from qtchooser.cli.output import user_output
from qtchooser.core.constants import DEFAULT_SDK_NAME
from qtchooser.core.context import ChooserContext
from qtchooser.core.installer import InstallOptions, install_sdk


@click.command("install")
@click.option("-f", "--force", is_flag=True, help="Replace an existing Qt version of that name.")
@click.option("--local", is_flag=True, help="Register for the current user only.")
@click.argument("name", required=False, default="")
@click.argument("qmake_path", metavar="QMAKE", required=False, default="")
@click.pass_obj
@chooser_error_boundary
def install_cmd(
    ctx: ChooserContext, force: bool, local: bool, name: str, qmake_path: str
) -> None:
    """Register the Qt installation QMAKE belongs to as NAME.

    An empty NAME registers the default Qt version.
    """
    descriptor = install_sdk(
        ctx,
        name,
        qmake_path,
        InstallOptions(force_overwrite=force, local_only=local),
    )
    registered = name or DEFAULT_SDK_NAME
    user_output(click.style(f"Registered {registered} in {descriptor}", fg="green"))
