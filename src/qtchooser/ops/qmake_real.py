"""Real qmake queries using subprocess."""

from qtchooser.core.subprocess import run_subprocess_with_context
from qtchooser.ops.qmake import QtQuery


class RealQtQuery(QtQuery):
    """Runs qmake and reads one line of its standard output."""

    def query(self, qmake_path: str, variable: str) -> str:
        result = run_subprocess_with_context(
            [qmake_path, "-query", variable],
            operation_context=f"query {variable} from qmake",
            errors="surrogateescape",
        )
        if not result.stdout:
            raise RuntimeError(f"qmake printed no value for {variable}")
        return result.stdout.split("\n", 1)[0]
