"""Environment and build-time configuration.

Both are loaded once at the CLI entry point and stored in ChooserContext.
Nothing below the entry point reads ``os.environ`` directly.
"""

import os
import tomllib
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from qtchooser.core.constants import LIST_SEPARATOR

BUILD_CONFIG_PATH = Path(__file__).resolve().parent.parent / "data" / "build_config.toml"


@dataclass(frozen=True)
class ChooserEnv:
    """Immutable snapshot of the environment variables qtchooser consumes.

    ``None`` means the variable was unset; an empty string means it was set
    to nothing. The distinction matters for list-valued variables.
    """

    home: str | None
    config_home: str | None
    config_dirs: str | None
    no_global_dir: str | None
    qt_select: str | None
    runtool: str | None
    debug: str | None

    @staticmethod
    def from_environ(environ: Mapping[str, str] | None = None) -> "ChooserEnv":
        source = os.environ if environ is None else environ
        return ChooserEnv(
            home=source.get("HOME"),
            config_home=source.get("XDG_CONFIG_HOME"),
            config_dirs=source.get("XDG_CONFIG_DIRS"),
            no_global_dir=source.get("QTCHOOSER_NO_GLOBAL_DIR"),
            qt_select=source.get("QT_SELECT"),
            runtool=source.get("QTCHOOSER_RUNTOOL"),
            debug=source.get("QTCHOOSER_DEBUG"),
        )

    @staticmethod
    def empty() -> "ChooserEnv":
        """Environment with every variable unset."""
        return ChooserEnv.from_environ({})

    def user_home(self) -> str:
        """Return the user's home directory.

        Uses $HOME when set, otherwise the password database entry of the
        current user. Returns an empty string if neither is available.
        """
        if self.home is not None:
            return self.home
        try:
            import pwd
        except ImportError:
            return str(Path.home())
        try:
            return pwd.getpwuid(os.getuid()).pw_dir
        except KeyError:
            return ""


@dataclass(frozen=True)
class BuildConfig:
    """Settings fixed when qtchooser is packaged for a system.

    global_dirs: list-separated directories searched after the XDG ones
    """

    global_dirs: str


def load_build_config(config_path: Path = BUILD_CONFIG_PATH) -> BuildConfig:
    """Load build_config.toml if present; otherwise return defaults.

    Raises:
        ValueError: If global_dirs is present but not a string
    """
    if not config_path.exists():
        return BuildConfig(global_dirs="")

    data = tomllib.loads(config_path.read_text(encoding="utf-8"))
    global_dirs = data.get("global_dirs", "")
    if not isinstance(global_dirs, str):
        raise ValueError(f"'global_dirs' must be a string in {config_path}")
    return BuildConfig(global_dirs=global_dirs)


def split_path_list(value: str, separator: str = LIST_SEPARATOR) -> list[str]:
    """Split a list-separated value, keeping empty components between separators.

    An empty value yields no entries at all.

    Example:
        >>> split_path_list("/etc/xdg:/opt/xdg", ":")
        ['/etc/xdg', '/opt/xdg']
        >>> split_path_list("", ":")
        []
    """
    if not value:
        return []
    return value.split(separator)
