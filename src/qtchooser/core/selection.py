"""SDK selection policy."""

import logging

from qtchooser.core.constants import SINGLE_INSTANCE_TOOLS
from qtchooser.core.context import ChooserContext
from qtchooser.core.errors import SdkNotFoundError
from qtchooser.core.registry import MatchAny, MatchByName, Sdk, scan_sdks

logger = logging.getLogger(__name__)


def fallback_allowed(tool: str) -> bool:
    """Whether tool may be taken from any SDK when no version was requested.

    Only tools that exist for a single Qt version qualify; for everything
    else picking an arbitrary SDK would silently run the wrong version.
    """
    return tool in SINGLE_INSTANCE_TOOLS


def select_sdk(ctx: ChooserContext, target_sdk: str, target_tool: str = "") -> Sdk:
    """Pick the SDK that should serve a request.

    1. The SDK named target_sdk, or the default SDK when target_sdk is empty.
    2. With no version requested and a single-instance tool requested, if
       step 1 found nothing usable for that tool, the first SDK in search
       order that provides it.

    Returns:
        The selected Sdk, or Sdk.invalid() if nothing matched
    """
    paths = ctx.search_paths()
    sdk = scan_sdks(paths, MatchByName(target_sdk))

    if not target_sdk and fallback_allowed(target_tool) and not sdk.has_tool(target_tool):
        logger.debug("Default SDK cannot run %s, falling back to any SDK", target_tool)
        sdk = scan_sdks(paths, MatchAny(), target_tool=target_tool)

    return sdk


def require_sdk(ctx: ChooserContext, target_sdk: str, target_tool: str = "") -> Sdk:
    """Like select_sdk, but raise when nothing matches.

    Raises:
        SdkNotFoundError: If no SDK satisfies the request
    """
    sdk = select_sdk(ctx, target_sdk, target_tool)
    if not sdk.is_valid:
        raise SdkNotFoundError(target_sdk)
    return sdk
