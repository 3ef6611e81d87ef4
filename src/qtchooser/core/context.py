"""Application context with dependency injection."""

import os
import shutil
import sys
from dataclasses import dataclass
from pathlib import Path

from qtchooser.core.config import (
    BuildConfig,
    ChooserEnv,
    load_build_config,
)
from qtchooser.core.constants import CHOOSER_NAME
from qtchooser.core.search_paths import search_paths
from qtchooser.ops.process import ProcessOps
from qtchooser.ops.process_real import RealProcessOps
from qtchooser.ops.qmake import QtQuery
from qtchooser.ops.qmake_real import RealQtQuery


@dataclass(frozen=True)
class ChooserContext:
    """Immutable context holding all inputs of one qtchooser invocation.

    Created at CLI entry point and threaded through the application.
    Frozen to prevent accidental modification at runtime.

    program: name the process was invoked under (basename of argv[0]),
        used as the diagnostic prefix and as the default tool name
    executable: resolved path of the running dispatcher, if known; used to
        detect tools that link back to the dispatcher
    platform: value of sys.platform at startup
    """

    env: ChooserEnv
    build_config: BuildConfig
    process: ProcessOps
    qmake: QtQuery
    program: str
    executable: Path | None
    platform: str

    def search_paths(self) -> tuple[Path, ...]:
        """Registry directories for this invocation, most specific first."""
        return search_paths(self.env, self.build_config)

    def user_home(self) -> str:
        return self.env.user_home()

    @staticmethod
    def for_test(
        env: ChooserEnv | None = None,
        build_config: BuildConfig | None = None,
        process: ProcessOps | None = None,
        qmake: QtQuery | None = None,
        program: str = CHOOSER_NAME,
        executable: Path | None = None,
        platform: str = "linux",
    ) -> "ChooserContext":
        """Create test context with optional pre-configured ops.

        Args:
            env: Environment snapshot. If None, every variable is unset.
            build_config: If None, no global directories are configured.
            process: If None, creates an empty FakeProcessOps.
            qmake: If None, creates a FakeQtQuery with no answers.
            program: Name the dispatcher pretends to run under.
            executable: Resolved dispatcher path for loop detection.
            platform: Platform string, e.g. "darwin" to enable bundle fallback.

        Returns:
            ChooserContext that never touches the real process table

        Example:
            >>> env = ChooserEnv.from_environ({"XDG_CONFIG_HOME": str(tmp_path)})
            >>> ctx = ChooserContext.for_test(env=env)
        """
        from tests.fakes.process import FakeProcessOps
        from tests.fakes.qmake import FakeQtQuery

        return ChooserContext(
            env=env if env is not None else ChooserEnv.empty(),
            build_config=build_config if build_config is not None else BuildConfig(global_dirs=""),
            process=process if process is not None else FakeProcessOps(),
            qmake=qmake if qmake is not None else FakeQtQuery(),
            program=program,
            executable=executable,
            platform=platform,
        )


def _resolve_executable(argv0: str) -> Path | None:
    if os.sep in argv0 or (os.altsep is not None and os.altsep in argv0):
        candidate: str | None = argv0
    else:
        candidate = shutil.which(argv0)
    if candidate is None:
        return None
    return Path(candidate).resolve()


def create_context(argv0: str = CHOOSER_NAME) -> ChooserContext:
    """Create production context with real implementations.

    Reads the environment and the packaged build configuration exactly once.

    Args:
        argv0: argv[0] of the running process

    Returns:
        ChooserContext with real process and qmake ops
    """
    return ChooserContext(
        env=ChooserEnv.from_environ(),
        build_config=load_build_config(),
        process=RealProcessOps(),
        qmake=RealQtQuery(),
        program=Path(argv0).name,
        executable=_resolve_executable(argv0),
        platform=sys.platform,
    )
