"""Real process replacement using os.execv."""

import os

from qtchooser.ops.process import ProcessOps


class RealProcessOps(ProcessOps):
    """Replaces the current process via os.execv.

    Example:
        ops = RealProcessOps()
        ops.exec_tool("/usr/lib/qt5/bin/qmake", ["/usr/lib/qt5/bin/qmake", "-v"])
        # Never returns - process is replaced
    """

    def exec_tool(self, path: str, argv: list[str]) -> None:
        os.execv(path, argv)
