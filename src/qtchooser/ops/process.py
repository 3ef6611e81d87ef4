"""Process replacement interface.

Dispatch hands control to the resolved tool through this capability, so the
dispatch logic can be tested without replacing the test runner's process.
"""

from abc import ABC, abstractmethod


class ProcessOps(ABC):
    """Abstract interface for replacing the running program image."""

    @abstractmethod
    def exec_tool(self, path: str, argv: list[str]) -> None:
        """Replace the current process with the program at path.

        Args:
            path: Absolute path of the executable
            argv: Full argument vector; argv[0] is conventionally path

        Raises:
            OSError: If the program could not be executed

        Note:
            In production (RealProcessOps) this never returns on success. The
            fake records the call and returns.
        """
        ...
