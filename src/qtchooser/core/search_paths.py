"""Registry directory resolution.

Builds the precedence-ordered list of directories that may hold SDK
descriptors, most specific (the user's) first, system-wide last.
"""

import logging
import os
from pathlib import Path

from qtchooser.core.config import BuildConfig, ChooserEnv, split_path_list
from qtchooser.core.constants import (
    DEFAULT_CONFIG_DIRS,
    DEFAULT_CONFIG_HOME_SUBDIR,
    REGISTRY_SUBDIR,
)

logger = logging.getLogger(__name__)


def search_paths(env: ChooserEnv, build_config: BuildConfig) -> tuple[Path, ...]:
    """Return registry directories in search order.

    Order:
    1. $XDG_CONFIG_HOME, or <home>/.config
    2. each entry of $XDG_CONFIG_DIRS, or /etc/xdg when unset
    3. the build-time global directories, unless $QTCHOOSER_NO_GLOBAL_DIR is set

    Each entry is suffixed with the qtchooser subdirectory. Existence is not
    checked here; scanning skips directories that are missing.
    """
    if env.config_home:
        config_home = env.config_home
    else:
        # Plain concatenation keeps an empty home absolute ("/.config")
        config_home = env.user_home() + os.sep + DEFAULT_CONFIG_HOME_SUBDIR
    bases = [config_home]

    config_dirs = DEFAULT_CONFIG_DIRS if env.config_dirs is None else env.config_dirs
    bases.extend(split_path_list(config_dirs))

    if not env.no_global_dir:
        bases.extend(split_path_list(build_config.global_dirs))

    # Empty components ("a::b") would otherwise become paths relative to the cwd
    paths = tuple(Path(base) / REGISTRY_SUBDIR for base in bases if base)
    logger.debug("Search paths: %s", [str(p) for p in paths])
    return paths
