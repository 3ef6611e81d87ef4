"""Error types raised by the qtchooser core.

Core modules raise these; the CLI error boundary turns them into a
``<program>: <message>`` diagnostic on stderr and exit code 1.
"""

from pathlib import Path


class ChooserError(Exception):
    """Base class for all qtchooser failures that end the current invocation."""


class SdkNotFoundError(ChooserError):
    """No registered SDK matches the request."""

    def __init__(self, target_sdk: str) -> None:
        super().__init__(f"could not find a Qt installation of '{target_sdk}'")
        self.target_sdk = target_sdk


class SdkAlreadyExistsError(ChooserError):
    """Install target is already registered and overwrite was not requested."""

    def __init__(self, sdk_name: str) -> None:
        super().__init__(f'SDK "{sdk_name}" already exists')
        self.sdk_name = sdk_name


class RegistryCorruptedError(ChooserError):
    """A descriptor that was just listed could not be opened.

    This is an inconsistent view of the registry (a race or a broken
    filesystem), not an absent SDK, so it is never folded into not-found.
    """

    def __init__(self, config_file: Path, reason: str) -> None:
        super().__init__(f"could not open config file '{config_file}': {reason}")
        self.config_file = config_file


class InstallError(ChooserError):
    """Install was called with unusable arguments."""


class QueryHelperError(ChooserError):
    """The qmake query helper could not be run or produced no output."""

    def __init__(self, qmake_path: str, reason: str) -> None:
        super().__init__(f"error running {qmake_path}: {reason}")
        self.qmake_path = qmake_path


class InstallWriteError(ChooserError):
    """The descriptor could not be written to any registry directory."""


class SelfReferenceLoopError(ChooserError):
    """The resolved tool is a link back to the dispatcher itself."""

    def __init__(self, tool_path: str, program: str) -> None:
        super().__init__(
            f"could not exec '{tool_path}' since it links to {program} itself. "
            "Check your installation."
        )
        self.tool_path = tool_path


class ToolExecError(ChooserError):
    """Replacing the process with the resolved tool failed."""

    def __init__(self, tool_path: str, reason: str) -> None:
        super().__init__(f"could not exec '{tool_path}': {reason}")
        self.tool_path = tool_path


class NoToolSelectedError(ChooserError):
    """Wrapper mode was entered without a tool name."""

    def __init__(self) -> None:
        super().__init__("no tool selected. Stop.")
