from __future__ import annotations

from dataclasses import dataclass


# Format constants for the flat `key = value` syntax.
SEPARATOR = "="
COMMENT_PREFIX = "#"
LIST_SEPARATOR = ","
WHITESPACE = " \t\r\n"
# Only "\n" ends an entry; "\r" before it is trimmed away.
LINE_BREAK = "\n"

# Expansion syntax.
REFERENCE_MARKER = "$"
ESCAPE_MARKER = "\\"
BRACE_OPEN = "{"
BRACE_CLOSE = "}"

DEFAULT_RECURSION_LIMIT = 3


@dataclass(frozen=True)
class ParsedLine:
    line_no: int
    text: str
    key: str
    value: str
    has_separator: bool
