from __future__ import annotations

import re

from textconfig.core.model import WHITESPACE

# Leading-prefix parsers mirroring C's atoi/strtod: take the longest numeric
# prefix after leading whitespace and ignore the rest. No prefix means zero.
_INT_PREFIX = re.compile(r"[+-]?\d+")
_HEX_FLOAT_PREFIX = re.compile(r"[+-]?0[xX](?:[0-9a-fA-F]+\.?[0-9a-fA-F]*|\.[0-9a-fA-F]+)(?:[pP][+-]?\d+)?")
_FLOAT_PREFIX = re.compile(
    r"[+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan)",
    re.IGNORECASE,
)


def to_int(text: str) -> int:
    m = _INT_PREFIX.match(text.lstrip(WHITESPACE + "\v\f"))
    return int(m.group(0)) if m else 0


def to_float(text: str) -> float:
    text = text.lstrip(WHITESPACE + "\v\f")
    m = _HEX_FLOAT_PREFIX.match(text)
    if m:
        return float.fromhex(m.group(0))
    m = _FLOAT_PREFIX.match(text)
    return float(m.group(0)) if m else 0.0
