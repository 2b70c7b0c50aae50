"""Tiny `key = value` configuration store with `$name` / `${name}` expansion."""

from textconfig.core.config import TextConfig, load_config
from textconfig.core.errors import ConfigError, ConfigLintError, ConfigLoadError
from textconfig.core.expand.expand_value import expand, expand_once, trace_expansion
from textconfig.core.model import DEFAULT_RECURSION_LIMIT
from textconfig.core.store import ConfigStore

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_RECURSION_LIMIT",
    "ConfigError",
    "ConfigLintError",
    "ConfigLoadError",
    "ConfigStore",
    "TextConfig",
    "expand",
    "expand_once",
    "load_config",
    "trace_expansion",
]
