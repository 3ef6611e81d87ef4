"""Subprocess execution with rich error context."""

import subprocess
from collections.abc import Sequence
from typing import Any


def run_subprocess_with_context(
    cmd: Sequence[str],
    operation_context: str,
    encoding: str = "utf-8",
    check: bool = True,
    **kwargs: Any,
) -> subprocess.CompletedProcess[str]:
    """Execute subprocess, capturing text output, with enriched error reporting.

    Wraps subprocess.run() to catch CalledProcessError and missing binaries
    and re-raise them as RuntimeError with operation context, stderr output
    and command details.

    Args:
        cmd: Command and arguments to execute
        operation_context: Human-readable description of operation
        encoding: Text encoding to use (default: "utf-8")
        check: Whether to raise on non-zero exit (default: True)
        **kwargs: Additional arguments passed to subprocess.run()

    Returns:
        CompletedProcess instance from subprocess.run()

    Raises:
        RuntimeError: If the command fails or cannot be started
    """
    try:
        return subprocess.run(
            cmd,
            capture_output=True,
            text=True,
            encoding=encoding,
            check=check,
            **kwargs,
        )

    except subprocess.CalledProcessError as e:
        cmd_str = " ".join(str(arg) for arg in cmd)
        error_msg = f"Failed to {operation_context}"
        error_msg += f"\nCommand: {cmd_str}"
        error_msg += f"\nExit code: {e.returncode}"

        if e.stderr:
            stderr_stripped = e.stderr.strip()
            if stderr_stripped:
                error_msg += f"\nstderr: {stderr_stripped}"

        raise RuntimeError(error_msg) from e

    except OSError as e:
        cmd_str = " ".join(str(arg) for arg in cmd)
        error_msg = f"Could not run command while trying to {operation_context}: {cmd[0]}"
        error_msg += f"\n{e.strerror or e}"
        error_msg += f"\nFull command: {cmd_str}"
        raise RuntimeError(error_msg) from e
