from __future__ import annotations

import logging
from typing import Iterator, Optional

from textconfig.core.model import DEFAULT_RECURSION_LIMIT
from textconfig.core.parse.parse_line import split_line

logger = logging.getLogger(__name__)


class ConfigStore:
    """Raw key -> value mapping plus the expansion pass budget.

    Only raw values are kept; expansion happens on every read. Entries are
    never removed. No locking: callers sharing a store across threads must
    serialize access themselves.
    """

    def __init__(self, recursion_limit: int = DEFAULT_RECURSION_LIMIT) -> None:
        self._items: dict[str, str] = {}
        self._recursion_limit = DEFAULT_RECURSION_LIMIT
        self.set_recursion_limit(recursion_limit)

    # ------------------------------------------------------------------
    @property
    def recursion_limit(self) -> int:
        return self._recursion_limit

    def set_recursion_limit(self, limit: int) -> None:
        if isinstance(limit, bool) or not isinstance(limit, int) or limit < 1:
            raise ValueError(f"recursion limit must be a positive integer, got {limit!r}")
        self._recursion_limit = limit

    def insert(self, line: str) -> None:
        pair = split_line(line)
        if pair is None:
            logger.debug("discarding line with empty key: %r", line)
            return

        key, value = pair
        if key in self._items:
            logger.debug("overwriting key %s", key)
        self._items[key] = value

    def lookup(self, key: str) -> Optional[str]:
        return self._items.get(key)

    def keys(self) -> list[str]:
        return sorted(self._items)

    def items(self) -> list[tuple[str, str]]:
        """Return (key, raw value) pairs in lexicographic key order."""
        return sorted(self._items.items())

    def __contains__(self, key: object) -> bool:
        return key in self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[str]:
        return iter(self.keys())

    def __repr__(self) -> str:
        return f"ConfigStore({dict(self.items())!r}, recursion_limit={self._recursion_limit})"
