"""Wrapper mode: running as a stand-in for a Qt tool.

When qtchooser is invoked through a symlink named after a tool (``qmake``,
``moc``, ...), or with QTCHOOSER_RUNTOOL set, its arguments belong to the
tool. Only a few leading options are consumed; everything from the first
unrecognized argument on is forwarded untouched.
"""

from dataclasses import dataclass

from qtchooser.cli.error_boundary import report_error
from qtchooser.core.constants import CHOOSER_NAME, EXIT_FAILURE, EXIT_SUCCESS
from qtchooser.core.context import ChooserContext
from qtchooser.core.dispatch import run_tool
from qtchooser.core.errors import ChooserError, NoToolSelectedError

RUN_TOOL_PREFIX = "run-tool="


@dataclass(frozen=True)
class WrapperInvocation:
    """Result of consuming the dispatcher's own leading options.

    forwarded keeps the original argv[0] as its first element; dispatch
    replaces it with the resolved tool path.
    """

    target_sdk: str | None
    target_tool: str | None
    forwarded: list[str]


def is_chooser_name(program: str) -> bool:
    return program in (CHOOSER_NAME, CHOOSER_NAME + ".exe")


def _strip_dashes(arg: str) -> str:
    option = arg[1:]
    if option.startswith("-"):
        option = option[1:]
    return option


def parse_wrapper_args(
    argv: list[str], target_tool: str | None, target_sdk: str | None
) -> WrapperInvocation:
    """Consume leading dispatcher options from argv.

    Recognized, with one or two leading dashes:
    - ``-qtX`` / ``-qt=X``: select SDK X
    - ``-run-tool=T``: select tool T, only if no tool is known yet
    - ``--``: consumed, ends option processing

    Example:
        >>> inv = parse_wrapper_args(["qmake", "-qt=5", "-v"], "qmake", None)
        >>> (inv.target_sdk, inv.forwarded)
        ('5', ['qmake', '-v'])
    """
    index = 1
    while index < len(argv):
        arg = argv[index]
        if not arg.startswith("-"):
            break
        option = _strip_dashes(arg)
        if not option:
            index += 1
            break
        if option.startswith("qt"):
            value = option[2:]
            target_sdk = value[1:] if value.startswith("=") else value
        elif target_tool is None and option.startswith(RUN_TOOL_PREFIX):
            target_tool = option[len(RUN_TOOL_PREFIX) :]
        else:
            break
        index += 1

    program = argv[0] if argv else CHOOSER_NAME
    return WrapperInvocation(
        target_sdk=target_sdk,
        target_tool=target_tool,
        forwarded=[program, *argv[index:]],
    )


def is_wrapper_invocation(ctx: ChooserContext, argv: list[str]) -> bool:
    """Whether argv should be handled in wrapper mode rather than by the command CLI."""
    if not is_chooser_name(ctx.program):
        return True
    if ctx.env.runtool is not None:
        return True
    # Legacy form: qtchooser [-qt=X] -run-tool=T [arguments]
    return parse_wrapper_args(argv, target_tool=None, target_sdk=None).target_tool is not None


def run_wrapper(ctx: ChooserContext, argv: list[str]) -> int:
    """Dispatch to the tool named by argv[0], QTCHOOSER_RUNTOOL or -run-tool=.

    Returns:
        Exit status; only reached when dispatch did not replace the process
    """
    tool = ctx.env.runtool if is_chooser_name(ctx.program) else ctx.program
    invocation = parse_wrapper_args(argv, target_tool=tool, target_sdk=ctx.env.qt_select)

    try:
        if not invocation.target_tool:
            raise NoToolSelectedError()
        run_tool(
            ctx,
            invocation.target_sdk or "",
            invocation.target_tool,
            invocation.forwarded,
        )
    except ChooserError as e:
        report_error(ctx.program, e)
        return EXIT_FAILURE
    return EXIT_SUCCESS
