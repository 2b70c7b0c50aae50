from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class ConfigError(Exception):
    """Problem with a config file or lookup, located by file and `line N` or key.

    Loading raises these; lint returns them as a list so every finding in a
    file can be shown at once.
    """

    code: str
    message: str
    file: Optional[str] = None
    path: Optional[str] = None

    def __str__(self) -> str:
        parts: list[str] = []
        if self.file:
            parts.append(self.file)
        if self.path:
            parts.append(self.path)
        loc = ":".join(parts) if parts else "<config>"
        return f"{loc}: {self.code}: {self.message}"


class ConfigLoadError(ConfigError):
    """The file could not be opened, read or decoded."""


class ConfigLintError(ConfigError):
    """A line the loader accepts but reinterprets, drops or cannot fully expand."""
