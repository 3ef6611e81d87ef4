"""Tool dispatch: resolve a tool inside the selected SDK and exec it."""

import logging
import os
from pathlib import Path

from qtchooser.core.constants import CHOOSER_NAME
from qtchooser.core.context import ChooserContext
from qtchooser.core.errors import SelfReferenceLoopError, ToolExecError
from qtchooser.core.selection import require_sdk

logger = logging.getLogger(__name__)


def tool_path_for(ctx: ChooserContext, tools_dir: str, tool: str) -> str:
    """Join tools_dir and tool, expanding a leading ``~`` to the user's home."""
    path = tools_dir + os.sep + tool
    if path.startswith("~"):
        path = ctx.user_home() + path[1:]
    return path


def _names_dispatcher(ctx: ChooserContext, candidate: str) -> bool:
    candidate_path = Path(candidate)
    if candidate_path.name in (CHOOSER_NAME, CHOOSER_NAME + ".exe"):
        return True
    return ctx.executable is not None and candidate_path == ctx.executable


def links_back_to_self(ctx: ChooserContext, tool_path: str) -> bool:
    """Whether tool_path is a symlink that ends up at the dispatcher.

    Both the link's direct target and its fully resolved path are checked.
    Regular files are never considered a loop.
    """
    if not os.path.islink(tool_path):
        return False

    try:
        direct_target = os.readlink(tool_path)
    except OSError:
        return False
    if not os.path.isabs(direct_target):
        direct_target = os.path.join(os.path.dirname(tool_path), direct_target)

    resolved = os.path.realpath(tool_path)
    return _names_dispatcher(ctx, direct_target) or _names_dispatcher(ctx, resolved)


def app_bundle_path(tool_path: str) -> str:
    """Executable inside a macOS application bundle named after the tool.

    Example:
        >>> app_bundle_path("/opt/qt/bin/designer")
        '/opt/qt/bin/designer.app/Contents/MacOS/designer'
    """
    return f"{tool_path}.app/Contents/MacOS/{os.path.basename(tool_path)}"


def run_tool(ctx: ChooserContext, target_sdk: str, target_tool: str, argv: list[str]) -> None:
    """Replace the current process with target_tool from the selected SDK.

    Args:
        ctx: Invocation context
        target_sdk: Requested SDK name; empty selects the default SDK
        target_tool: Tool name relative to the SDK's tools directory
        argv: Argument vector to forward; argv[0] is replaced by the tool path

    Raises:
        SdkNotFoundError: If no SDK provides the request
        SelfReferenceLoopError: If the tool is a link back to the dispatcher
        ToolExecError: If the tool could not be executed

    Note:
        With RealProcessOps this function does not return on success.
    """
    sdk = require_sdk(ctx, target_sdk, target_tool)

    tool_path = tool_path_for(ctx, sdk.tools_dir, target_tool)
    if links_back_to_self(ctx, tool_path):
        raise SelfReferenceLoopError(tool_path, ctx.program)

    exec_argv = [tool_path, *argv[1:]]
    logger.debug("Executing %s from SDK %s", tool_path, sdk.name)
    try:
        ctx.process.exec_tool(tool_path, exec_argv)
        return
    except OSError as e:
        error = e

    if ctx.platform == "darwin":
        bundle_path = app_bundle_path(tool_path)
        logger.debug("Retrying with application bundle %s", bundle_path)
        try:
            ctx.process.exec_tool(bundle_path, exec_argv)
            return
        except OSError as e:
            error = e

    raise ToolExecError(tool_path, error.strerror or str(error))
