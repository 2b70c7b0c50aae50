from __future__ import annotations

from typing import Optional

from textconfig.core.model import SEPARATOR, WHITESPACE


def trim(text: str) -> str:
    """Strip space, tab, CR and LF from both ends of ``text``."""
    return text.strip(WHITESPACE)


def is_identifier_char(ch: str) -> bool:
    # ASCII only: references never pick up non-ASCII letters or digits.
    return ch.isascii() and (ch.isalnum() or ch == "_")


def split_line(line: str) -> Optional[tuple[str, str]]:
    """Split one `key = value` line on its first separator.

    A line without a separator becomes a same-text key/value pair. Returns
    None when the key trims to empty; such lines are dropped by callers.
    """
    key, sep, value = line.partition(SEPARATOR)
    if sep:
        key, value = trim(key), trim(value)
    else:
        key = value = trim(line)

    if not key:
        return None
    return key, value
