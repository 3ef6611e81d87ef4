"""Custom Click help formatter for organized command display."""

import click

ENVIRONMENT_VARIABLES = [
    ("QT_SELECT", "version of Qt to be run (same as the --qt option)"),
    ("QTCHOOSER_RUNTOOL", "name of the tool to be run (same as run-tool)"),
    ("QTCHOOSER_NO_GLOBAL_DIR", "skip the system-wide registry directories"),
    ("QTCHOOSER_DEBUG", "print debug logging to stderr"),
]


class ChooserGroup(click.Group):
    """Click Group that organizes commands into sections in help output.

    Commands are organized into sections based on their usage patterns:
    - Registry: inspecting and registering Qt installations
    - Dispatch: running a tool from a Qt installation
    - Quick Access: short aliases

    The help also ends with the environment variables qtchooser honors.
    """

    def format_commands(self, ctx: click.Context, formatter: click.HelpFormatter) -> None:
        """Format commands into organized sections."""
        commands = []
        for subcommand in self.list_commands(ctx):
            cmd = self.get_command(ctx, subcommand)
            if cmd is None or cmd.hidden:
                continue
            commands.append((subcommand, cmd))

        if not commands:
            return

        registry = ["list-versions", "print-env", "install"]
        dispatch = ["run-tool"]

        registry_cmds = []
        dispatch_cmds = []
        alias_cmds = []
        for name, cmd in commands:
            if name in registry:
                registry_cmds.append((name, cmd))
            elif name in dispatch:
                dispatch_cmds.append((name, cmd))
            else:
                alias_cmds.append((name, cmd))

        if registry_cmds:
            with formatter.section("Registry"):
                self._format_command_list(formatter, registry_cmds)

        if dispatch_cmds:
            with formatter.section("Dispatch"):
                self._format_command_list(formatter, dispatch_cmds)

        if alias_cmds:
            with formatter.section("Quick Access (Aliases)"):
                self._format_command_list(formatter, alias_cmds)

    def format_epilog(self, ctx: click.Context, formatter: click.HelpFormatter) -> None:
        super().format_epilog(ctx, formatter)
        with formatter.section("Environment variables"):
            formatter.write_dl(ENVIRONMENT_VARIABLES)
        formatter.write_paragraph()
        formatter.write_text(
            "When invoked through a symlink named after a tool (e.g. qmake), "
            "qtchooser runs that tool directly: <tool> [-qt=<version>] [arguments]"
        )

    def _format_command_list(
        self,
        formatter: click.HelpFormatter,
        commands: list[tuple[str, click.Command]],
    ) -> None:
        """Format a list of commands with their help text."""
        rows = []
        for name, cmd in commands:
            help_text = cmd.get_short_help_str(limit=formatter.width)
            rows.append((name, help_text))

        if rows:
            formatter.write_dl(rows)
