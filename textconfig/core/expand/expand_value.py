from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from typing import Optional, Protocol

from textconfig.core.model import BRACE_CLOSE, BRACE_OPEN, ESCAPE_MARKER, REFERENCE_MARKER
from textconfig.core.parse.parse_line import is_identifier_char

logger = logging.getLogger(__name__)


class RawLookup(Protocol):
    def lookup(self, key: str) -> Optional[str]: ...

    @property
    def recursion_limit(self) -> int: ...


class ScanState(enum.Enum):
    PLAIN = "plain"
    ESCAPE = "escape"
    DOLLAR_SEEN = "dollar_seen"
    FETCH_KEY = "fetch_key"
    REPLACE = "replace"
    FINISH = "finish"
    REPLACE_FINISH = "replace_finish"


_DONE = (ScanState.FINISH, ScanState.REPLACE_FINISH)
_RESOLVING = (ScanState.REPLACE, ScanState.REPLACE_FINISH)


@dataclass(frozen=True)
class ScanResult:
    text: str
    substitutions: int
    missing: tuple[str, ...] = ()


@dataclass(frozen=True)
class ExpansionTrace:
    text: str
    passes: int
    exhausted: bool = False
    missing: tuple[str, ...] = ()


def scan(text: str, store: RawLookup) -> ScanResult:
    """Run one scan-and-substitute pass over ``text``.

    References are recognised lazily: identifier characters after a `$` are
    collected until a boundary character shows up, the collected name is
    resolved against the store's raw values, and the boundary character is
    replayed from the plain state (unless it is the `}` closing a braced
    reference). End of input acts as a terminator character.

    Unresolved references emit nothing and leave their name in the key buffer,
    so `$nope $a` looks up `nopea`; only a successful lookup clears it. Once a
    `{` has been seen, any later `}` that ends a reference is consumed. A
    backslash is dropped and makes the next character literal, so `\\$x` yields `$x`.
    """
    out: list[str] = []
    key: list[str] = []
    missing: list[str] = []
    substitutions = 0

    state = ScanState.PLAIN
    brace_open = False
    n = len(text)
    i = 0

    while True:
        at_end = i >= n
        ch = "" if at_end else text[i]

        if ch == ESCAPE_MARKER:
            state = ScanState.ESCAPE
        elif at_end:
            state = ScanState.REPLACE_FINISH if state is ScanState.FETCH_KEY else ScanState.FINISH
        elif ch == REFERENCE_MARKER and state is not ScanState.ESCAPE:
            state = ScanState.DOLLAR_SEEN
        elif state is ScanState.DOLLAR_SEEN:
            state = ScanState.FETCH_KEY
        elif state is ScanState.FETCH_KEY and not is_identifier_char(ch) and ch != BRACE_OPEN:
            state = ScanState.REPLACE
        elif state is not ScanState.FETCH_KEY:
            state = ScanState.PLAIN

        if state is ScanState.PLAIN:
            out.append(ch)
        elif state is ScanState.FETCH_KEY:
            if is_identifier_char(ch):
                key.append(ch)
            elif ch == BRACE_OPEN:
                brace_open = True
        elif state in _RESOLVING:
            name = "".join(key)
            value = store.lookup(name)
            if value is not None:
                out.append(value)
                substitutions += 1
                key.clear()
            elif name:
                # The name stays buffered and prefixes the next reference.
                missing.append(name)

            # brace_open is sticky for the rest of the pass.
            if not (brace_open and ch == BRACE_CLOSE):
                # Replay the boundary character from the plain state.
                i -= 1

        if state in _DONE:
            break
        i += 1

    return ScanResult(text="".join(out), substitutions=substitutions, missing=tuple(missing))


def expand_once(text: str, store: RawLookup) -> str:
    return scan(text, store).text


def trace_expansion(
    text: str,
    store: RawLookup,
    recursion_limit: Optional[int] = None,
) -> ExpansionTrace:
    """Expand ``text`` with at most ``recursion_limit`` passes and report how it went.

    Text without `$` is returned untouched after zero passes. Passes stop early
    once one performs no substitution; otherwise the output of the last pass is
    returned even if it still holds references (chains deeper than the limit,
    or keys referencing each other). ``exhausted`` is set in that case.
    """
    limit = store.recursion_limit if recursion_limit is None else recursion_limit
    if REFERENCE_MARKER not in text:
        return ExpansionTrace(text=text, passes=0)

    current = text
    passes = 0
    missing: list[str] = []
    substituted = False
    while passes < limit:
        result = scan(current, store)
        passes += 1
        current = result.text
        for name in result.missing:
            if name not in missing:
                missing.append(name)
        substituted = result.substitutions > 0
        if not substituted:
            break

    exhausted = substituted and passes == limit and REFERENCE_MARKER in current
    if exhausted:
        logger.debug("expansion stopped after %d passes with references left: %r", passes, current)
    return ExpansionTrace(text=current, passes=passes, exhausted=exhausted, missing=tuple(missing))


def expand(text: str, store: RawLookup, recursion_limit: Optional[int] = None) -> str:
    return trace_expansion(text, store, recursion_limit).text
