from __future__ import annotations

from pathlib import Path
from typing import Iterable, Optional

from textconfig.core.access.convert import to_float, to_int
from textconfig.core.dump.dump_config import dump_text
from textconfig.core.expand.expand_value import expand
from textconfig.core.io.load_config import load_file, load_lines
from textconfig.core.model import DEFAULT_RECURSION_LIMIT, LINE_BREAK, LIST_SEPARATOR
from textconfig.core.parse.parse_line import trim
from textconfig.core.store import ConfigStore


class TextConfig:
    """Typed, expanding read API over a ConfigStore.

    Every getter looks the key up, expands the raw value and converts it.
    Missing keys fall back to the caller's default; non-numeric text read as a
    number converts to zero. Nothing computed here is cached on the store.
    """

    def __init__(
        self,
        recursion_limit: int = DEFAULT_RECURSION_LIMIT,
        store: Optional[ConfigStore] = None,
    ) -> None:
        self.store = store if store is not None else ConfigStore(recursion_limit)

    @classmethod
    def from_file(cls, path: str | Path, recursion_limit: int = DEFAULT_RECURSION_LIMIT) -> TextConfig:
        cfg = cls(recursion_limit)
        load_file(cfg.store, path)
        return cfg

    @classmethod
    def from_lines(cls, lines: Iterable[str], recursion_limit: int = DEFAULT_RECURSION_LIMIT) -> TextConfig:
        cfg = cls(recursion_limit)
        load_lines(cfg.store, lines)
        return cfg

    @classmethod
    def from_text(cls, text: str, recursion_limit: int = DEFAULT_RECURSION_LIMIT) -> TextConfig:
        return cls.from_lines(text.split(LINE_BREAK), recursion_limit)

    # ------------------------------------------------------------------
    # Append API
    # ------------------------------------------------------------------
    def add(self, line: str) -> TextConfig:
        """Insert one `key = value` line in memory; never written back to a file."""
        self.store.insert(line)
        return self

    @property
    def recursion_limit(self) -> int:
        return self.store.recursion_limit

    def set_recursion_limit(self, limit: int) -> None:
        self.store.set_recursion_limit(limit)

    # ------------------------------------------------------------------
    # Typed getters
    # ------------------------------------------------------------------
    def get_raw(self, key: str) -> Optional[str]:
        return self.store.lookup(key)

    def get_value(self, key: str) -> Optional[str]:
        """Return the expanded value of ``key``, or None if it is not set."""
        raw = self.store.lookup(key)
        if raw is None:
            return None
        return expand(raw, self.store)

    def get_int(self, key: str, default: int = 0) -> int:
        value = self.get_value(key)
        return default if value is None else to_int(value)

    def get_long(self, key: str, default: int = 0) -> int:
        # Python ints are unbounded; kept for parity with the int getter.
        value = self.get_value(key)
        return default if value is None else to_int(value)

    def get_double(self, key: str, default: float = 0.0) -> float:
        value = self.get_value(key)
        return default if value is None else to_float(value)

    def get_string(self, key: str, default: Optional[str] = None) -> Optional[str]:
        value = self.get_value(key)
        return default if value is None else value

    def get_list(self, key: str) -> Optional[list[str]]:
        """Split the expanded value on commas.

        Pieces are trimmed and empty pieces dropped. Returns None when the key
        is absent, so an absent key and an empty value stay distinguishable.
        """
        value = self.get_value(key)
        if value is None:
            return None
        return split_list(value)

    def dump(self) -> str:
        return dump_text(self.store)

    def __contains__(self, key: object) -> bool:
        return key in self.store

    def __len__(self) -> int:
        return len(self.store)

    def __repr__(self) -> str:
        return f"TextConfig(keys={len(self.store)}, recursion_limit={self.recursion_limit})"


def split_list(value: str) -> list[str]:
    pieces = (trim(p) for p in value.split(LIST_SEPARATOR))
    return [p for p in pieces if p]


def load_config(path: str | Path, recursion_limit: int = DEFAULT_RECURSION_LIMIT) -> TextConfig:
    """Load a config file. Raises ConfigLoadError if it cannot be read."""
    return TextConfig.from_file(path, recursion_limit)
