"""SDK registry: descriptor discovery, parsing and scanning.

A registry directory holds one ``<name>.conf`` descriptor per SDK. The first
line of a descriptor is the tools directory, the second the libraries
directory; further lines are reserved. Paths are stored verbatim with no
escaping, so paths containing newlines are not representable.

Scanning walks the search path in precedence order and offers each distinct
SDK name to a visitor. A name seen in a more specific directory shadows the
same name in every later directory.
"""

import logging
import os
import stat
from abc import ABC, abstractmethod
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from pathlib import Path

from qtchooser.core.constants import DEFAULT_SDK_NAME, DESCRIPTOR_SUFFIX
from qtchooser.core.errors import RegistryCorruptedError

logger = logging.getLogger(__name__)

# Descriptors are bytes as far as qtchooser is concerned
DESCRIPTOR_ENCODING = "utf-8"
DESCRIPTOR_ERRORS = "surrogateescape"


@dataclass(frozen=True)
class Sdk:
    """One registered Qt installation.

    A record with an empty tools_dir is invalid and stands for "not found".
    """

    name: str
    config_file: Path | None
    tools_dir: str
    libraries_dir: str

    @staticmethod
    def invalid() -> "Sdk":
        return Sdk(name="", config_file=None, tools_dir="", libraries_dir="")

    @property
    def is_valid(self) -> bool:
        return bool(self.tools_dir)

    def has_tool(self, tool: str) -> bool:
        """Check that tools_dir/tool exists and is executable by its owner.

        On Windows there is no execute bit, so existence is enough.
        """
        if not self.tools_dir or not tool:
            return False
        try:
            st = os.stat(os.path.join(self.tools_dir, tool))
        except OSError:
            return False
        if os.name == "nt":
            return True
        return bool(st.st_mode & stat.S_IXUSR)


@dataclass(frozen=True)
class SdkCandidate:
    """A descriptor found during a scan, not yet parsed."""

    name: str
    config_file: Path


class SdkVisitor(ABC):
    """Decides which scanned SDK answers a request.

    consider() is called once per distinct SDK name in precedence order.
    finish() is called only when the scan ends without an accepted record.
    """

    @abstractmethod
    def consider(self, candidate: SdkCandidate) -> Sdk | None:
        """Return the parsed record if the candidate matches, None otherwise."""

    def finish(self, seen_names: frozenset[str]) -> None:
        """Receive every distinct SDK name the scan saw."""


class MatchByName(SdkVisitor):
    """Accept the SDK named target_sdk, or the default SDK if target_sdk is empty."""

    def __init__(self, target_sdk: str) -> None:
        self._target_sdk = target_sdk

    def consider(self, candidate: SdkCandidate) -> Sdk | None:
        wanted = self._target_sdk or DEFAULT_SDK_NAME
        if candidate.name != wanted:
            return None
        return read_descriptor(candidate)


class MatchAny(SdkVisitor):
    """Accept any readable SDK regardless of its name."""

    def consider(self, candidate: SdkCandidate) -> Sdk | None:
        return read_descriptor(candidate)


class NameCollector(SdkVisitor):
    """Accept nothing; record the sorted set of names seen."""

    def __init__(self) -> None:
        self._names: list[str] = []

    @property
    def names(self) -> list[str]:
        return self._names

    def consider(self, candidate: SdkCandidate) -> Sdk | None:
        return None

    def finish(self, seen_names: frozenset[str]) -> None:
        self._names = sorted(seen_names)


def sdk_name_from_filename(filename: str) -> str | None:
    """Map a directory entry name to an SDK name.

    Returns None for files that are not descriptors. A bare ``.conf`` file
    denotes the default SDK.

    Example:
        >>> sdk_name_from_filename("5.conf")
        '5'
        >>> sdk_name_from_filename(".conf")
        'default'
        >>> sdk_name_from_filename("README") is None
        True
    """
    if not filename.endswith(DESCRIPTOR_SUFFIX):
        return None
    name = filename[: -len(DESCRIPTOR_SUFFIX)]
    return name or DEFAULT_SDK_NAME


def _list_descriptors(directory: Path) -> list[tuple[str, Path]]:
    try:
        entries = list(os.scandir(directory))
    except OSError:
        # Missing or unreadable directories are simply not part of the registry
        return []

    found: list[tuple[str, Path]] = []
    for entry in sorted(entries, key=lambda e: e.name):
        try:
            if entry.is_dir():
                continue
        except OSError:
            continue
        name = sdk_name_from_filename(entry.name)
        if name is None:
            continue
        found.append((name, Path(entry.path)))
    return found


def iter_candidates(
    paths: Iterable[Path], seen_names: set[str] | None = None
) -> Iterator[SdkCandidate]:
    """Yield one candidate per distinct SDK name in precedence order.

    Args:
        paths: Registry directories, most specific first
        seen_names: Optional set that is filled with every name yielded

    The first directory containing a name wins; later descriptors with the
    same name are skipped.
    """
    seen = seen_names if seen_names is not None else set()
    for directory in paths:
        for name, config_file in _list_descriptors(directory):
            if name in seen:
                logger.debug("Skipping shadowed descriptor %s", config_file)
                continue
            seen.add(name)
            yield SdkCandidate(name=name, config_file=config_file)


def read_descriptor(candidate: SdkCandidate) -> Sdk | None:
    """Parse a descriptor file into an Sdk.

    Returns:
        The Sdk, or None if the file has fewer than two lines

    Raises:
        RegistryCorruptedError: If the file cannot be opened at all
    """
    try:
        handle = candidate.config_file.open(
            "r", encoding=DESCRIPTOR_ENCODING, errors=DESCRIPTOR_ERRORS, newline="\n"
        )
    except OSError as e:
        raise RegistryCorruptedError(candidate.config_file, e.strerror or str(e)) from e

    with handle:
        tools_line = handle.readline()
        libraries_line = handle.readline()

    if not tools_line or not libraries_line:
        logger.debug("Descriptor %s has fewer than two lines", candidate.config_file)
        return None

    return Sdk(
        name=candidate.name,
        config_file=candidate.config_file,
        tools_dir=tools_line.removesuffix("\n"),
        libraries_dir=libraries_line.removesuffix("\n"),
    )


def scan_sdks(paths: Iterable[Path], visitor: SdkVisitor, target_tool: str = "") -> Sdk:
    """Return the first SDK the visitor accepts.

    When target_tool is given, an accepted SDK that does not provide the tool
    is skipped and the scan continues. If nothing is accepted the visitor's
    finish() receives all names seen and the invalid record is returned.
    """
    seen: set[str] = set()
    for candidate in iter_candidates(paths, seen):
        sdk = visitor.consider(candidate)
        if sdk is None:
            continue
        if target_tool and not sdk.has_tool(target_tool):
            logger.debug("SDK %s has no tool %s", sdk.name, target_tool)
            continue
        logger.debug("Matched SDK %s from %s", sdk.name, sdk.config_file)
        return sdk

    visitor.finish(frozenset(seen))
    return Sdk.invalid()


def list_sdk_names(paths: Iterable[Path]) -> list[str]:
    """Return all registered SDK names, sorted."""
    collector = NameCollector()
    scan_sdks(paths, collector)
    return collector.names
