"""Translation of the historical single-dash command flags.

Older scripts call ``qtchooser -list-versions``, ``qtchooser -qt=5 -print-env``
or ``qtchooser -install -f NAME QMAKE``. These are rewritten into the
equivalent subcommand arguments before click parses them.
"""

from qtchooser.cli.wrapper import parse_wrapper_args

MODE_FLAGS = {
    "install": "install",
    "list-versions": "list-versions",
    "l": "list-versions",
    "print-env": "print-env",
}
INSTALL_FLAGS = {
    "f": "--force",
    "force": "--force",
    "local": "--local",
}


def _flag_name(arg: str) -> str:
    # Up to three leading dashes are accepted
    name = arg
    for _ in range(3):
        if name.startswith("-"):
            name = name[1:]
    return name


def _mode_for(name: str) -> str | None:
    if name.startswith("print-env"):
        return "print-env"
    return MODE_FLAGS.get(name)


def legacy_command_args(argv: list[str]) -> list[str] | None:
    """Rewrite a legacy command line into subcommand arguments.

    Args:
        argv: Full argument vector, argv[0] included

    Returns:
        Arguments for the click group, or None when argv does not use the
        legacy flags. Unknown flags are passed through so click reports them.

    Example:
        >>> legacy_command_args(["qtchooser", "-qt=5", "-print-env"])
        ['print-env', '--qt', '5']
        >>> legacy_command_args(["qtchooser", "list-versions"]) is None
        True
    """
    invocation = parse_wrapper_args(argv, target_tool=None, target_sdk=None)
    rest = invocation.forwarded[1:]

    starts_with_flag = bool(rest) and rest[0].startswith("-") and (
        _mode_for(_flag_name(rest[0])) is not None
    )
    if invocation.target_sdk is None and not starts_with_flag:
        return None

    mode: str | None = None
    install_options: list[str] = []
    positionals: list[str] = []
    for arg in rest:
        if arg.startswith("-"):
            name = _flag_name(arg)
            if _mode_for(name) is not None:
                mode = _mode_for(name)
            elif mode == "install" and name in INSTALL_FLAGS:
                install_options.append(INSTALL_FLAGS[name])
            elif name == "help":
                continue
            else:
                return [arg]
        elif mode == "install":
            positionals.append(arg)
        else:
            return None

    if mode is None:
        return ["--help"]
    if mode == "install":
        return ["install", *install_options, *positionals]
    if mode == "print-env" and invocation.target_sdk is not None:
        return ["print-env", "--qt", invocation.target_sdk]
    return [mode]
