"""Shared constants for qtchooser."""

import os

# Name the dispatcher runs under when it is not invoked through a tool alias
CHOOSER_NAME = "qtchooser"

# Registry layout: <config dir>/qtchooser/<name>.conf
REGISTRY_SUBDIR = "qtchooser"
DESCRIPTOR_SUFFIX = ".conf"

# SDK selected when no version is requested
DEFAULT_SDK_NAME = "default"

LIST_SEPARATOR = os.pathsep

DEFAULT_CONFIG_HOME_SUBDIR = ".config"
DEFAULT_CONFIG_DIRS = "/etc/xdg"

# Variables queried from qmake when registering an SDK
QUERY_TOOLS_DIR = "QT_INSTALL_BINS"
QUERY_LIBRARIES_DIR = "QT_INSTALL_LIBS"

# Tools that only ever shipped with one Qt major version. When no version
# is requested, these may come from whichever SDK has them.
SINGLE_INSTANCE_TOOLS = frozenset(
    {
        "qdbus",
        "qml",
        "qmlimportscanner",
        "qmlscene",
        "qtdiag",
        "qtpaths",
        "qtplugininfo",
    }
)

EXIT_SUCCESS = 0
EXIT_FAILURE = 1
# Mode dispatch reached a state the argument handling rules out
EXIT_IMPOSSIBLE = 127
