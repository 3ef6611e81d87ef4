"""SDK registration.

Writes a new descriptor into the most general registry directory that
accepts it. The descriptor is written to a temporary file next to its final
location and renamed into place, so readers never see a partial file.
"""

import errno
import logging
import os
import random
from dataclasses import dataclass
from pathlib import Path

from qtchooser.core.constants import (
    DEFAULT_SDK_NAME,
    DESCRIPTOR_SUFFIX,
    QUERY_LIBRARIES_DIR,
    QUERY_TOOLS_DIR,
)
from qtchooser.core.context import ChooserContext
from qtchooser.core.errors import (
    InstallError,
    InstallWriteError,
    QueryHelperError,
    SdkAlreadyExistsError,
)
from qtchooser.core.registry import (
    DESCRIPTOR_ENCODING,
    DESCRIPTOR_ERRORS,
    MatchByName,
    scan_sdks,
)

logger = logging.getLogger(__name__)

DESCRIPTOR_MODE = 0o666


@dataclass(frozen=True)
class InstallOptions:
    """How install_sdk places the descriptor.

    force_overwrite: replace an existing SDK of the same name
    local_only: only write to the user's own registry directory
    """

    force_overwrite: bool = False
    local_only: bool = False


def descriptor_contents(tools_dir: str, libraries_dir: str) -> str:
    return f"{tools_dir}\n{libraries_dir}\n"


def install_candidates(paths: tuple[Path, ...], local_only: bool) -> list[Path]:
    """Directories to try, in the order they are tried.

    The search path is walked backwards so the least specific (most
    general) directory is attempted first. With local_only, only the most
    specific directory is eligible.
    """
    if not paths:
        return []
    if local_only:
        return [paths[0]]
    return list(reversed(paths))


def _open_temp_file(final_path: Path) -> tuple[int, Path]:
    """Create a uniquely named temp file beside final_path.

    Retries with a fresh suffix on name collisions. If the directory does not
    exist it is created together with its ancestors and the open is retried
    once.

    Raises:
        OSError: If the file cannot be created
    """
    created_parent = False
    while True:
        temp_path = final_path.with_name(f"{final_path.name}.{random.randrange(2**31)}")
        try:
            fd = os.open(temp_path, os.O_WRONLY | os.O_CREAT | os.O_EXCL, DESCRIPTOR_MODE)
        except FileExistsError:
            continue
        except FileNotFoundError:
            if created_parent:
                raise
            final_path.parent.mkdir(parents=True, exist_ok=True)
            created_parent = True
            continue
        return fd, temp_path


def _write_temp_file(fd: int, temp_path: Path, contents: str) -> None:
    try:
        with os.fdopen(
            fd, "w", encoding=DESCRIPTOR_ENCODING, errors=DESCRIPTOR_ERRORS, newline="\n"
        ) as handle:
            handle.write(contents)
    except OSError as e:
        temp_path.unlink(missing_ok=True)
        raise InstallWriteError(
            f'error writing to "{temp_path}": {e.strerror or e}'
        ) from e


def _query(ctx: ChooserContext, qmake_path: str, variable: str) -> str:
    try:
        return ctx.qmake.query(qmake_path, variable)
    except RuntimeError as e:
        raise QueryHelperError(qmake_path, str(e)) from e


def install_sdk(
    ctx: ChooserContext,
    sdk_name: str,
    qmake_path: str,
    options: InstallOptions | None = None,
) -> Path:
    """Register the Qt installation that qmake_path belongs to as sdk_name.

    Args:
        ctx: Invocation context
        sdk_name: Name to register; empty registers the default SDK
        qmake_path: qmake of the installation, queried for its directories
        options: Placement and overwrite behavior

    Returns:
        Path of the descriptor that was written

    Raises:
        InstallError: If qmake_path is empty
        SdkAlreadyExistsError: If sdk_name exists and force_overwrite is off
        QueryHelperError: If qmake cannot be queried
        InstallWriteError: If no registry directory accepted the descriptor
    """
    opts = options if options is not None else InstallOptions()
    name = sdk_name or DEFAULT_SDK_NAME

    if not qmake_path:
        raise InstallError("missing option: path to qmake")

    paths = ctx.search_paths()
    if not opts.force_overwrite:
        existing = scan_sdks(paths, MatchByName(name))
        if existing.is_valid:
            raise SdkAlreadyExistsError(name)

    tools_dir = _query(ctx, qmake_path, QUERY_TOOLS_DIR)
    libraries_dir = _query(ctx, qmake_path, QUERY_LIBRARIES_DIR)
    contents = descriptor_contents(tools_dir, libraries_dir)
    file_name = name + DESCRIPTOR_SUFFIX

    final_path: Path | None = None
    last_error: OSError | None = None
    for directory in install_candidates(paths, opts.local_only):
        final_path = directory / file_name
        try:
            fd, temp_path = _open_temp_file(final_path)
        except OSError as e:
            logger.debug("Cannot create descriptor in %s: %s", directory, e)
            last_error = e
            continue

        _write_temp_file(fd, temp_path, contents)

        try:
            os.replace(temp_path, final_path)
        except OSError as e:
            logger.debug("Cannot rename %s onto %s: %s", temp_path, final_path, e)
            temp_path.unlink(missing_ok=True)
            last_error = e
            continue

        logger.debug("Installed SDK %s at %s", name, final_path)
        return final_path

    if last_error is None:
        reason = os.strerror(errno.ENOENT)
    else:
        reason = last_error.strerror or str(last_error)
    raise InstallWriteError(f"could not create SDK: {final_path}: {reason}")
