"""Run Qt tools from one of several installed Qt versions."""

__version__ = "0.1.0"
