from __future__ import annotations

from typing import Iterable, Optional

from textconfig.core.errors import ConfigLintError
from textconfig.core.expand.expand_value import trace_expansion
from textconfig.core.io.load_config import iter_config_lines
from textconfig.core.model import DEFAULT_RECURSION_LIMIT, SEPARATOR, ParsedLine
from textconfig.core.parse.parse_line import trim
from textconfig.core.store import ConfigStore


# Lint rules for the flat `key = value` format:
# - L_MISSING_SEPARATOR: line has no '=' and is stored as `key = key`
# - L_EMPTY_KEY: key is empty after trimming; the line is dropped
# - L_DUPLICATE_KEY: key was already set on an earlier line and gets overwritten
# - L_UNRESOLVED_REFERENCE: value references a key that is not defined
# - L_RECURSION_LIMIT_REACHED: expansion ran out of passes with references left


def parse_lines(lines: Iterable[str]) -> list[ParsedLine]:
    out: list[ParsedLine] = []
    for line_no, text in iter_config_lines(lines):
        key, sep, value = text.partition(SEPARATOR)
        if sep:
            out.append(ParsedLine(line_no, text, trim(key), trim(value), True))
        else:
            out.append(ParsedLine(line_no, text, text, text, False))
    return out


def lint_config(
    lines: Iterable[str],
    *,
    file: Optional[str] = None,
    recursion_limit: int = DEFAULT_RECURSION_LIMIT,
) -> list[ConfigLintError]:
    """Lint config lines.

    Findings describe how the loader will interpret the file; none of them
    stops it from loading. Returned sorted by line.
    """
    parsed = parse_lines(lines)
    store = ConfigStore(recursion_limit)
    errors: list[ConfigLintError] = []

    defined_at: dict[str, int] = {}
    for pl in parsed:
        path = f"line {pl.line_no}"

        if not pl.has_separator:
            errors.append(
                ConfigLintError(
                    code="L_MISSING_SEPARATOR",
                    message=f"no '{SEPARATOR}' found; line is stored as key and value: {pl.text}",
                    file=file,
                    path=path,
                )
            )

        if not pl.key:
            errors.append(
                ConfigLintError(
                    code="L_EMPTY_KEY",
                    message="key is empty; line is ignored",
                    file=file,
                    path=path,
                )
            )
            continue

        if pl.key in defined_at:
            errors.append(
                ConfigLintError(
                    code="L_DUPLICATE_KEY",
                    message=f"key '{pl.key}' overrides the value set on line {defined_at[pl.key]}",
                    file=file,
                    path=path,
                )
            )
        defined_at[pl.key] = pl.line_no
        store.insert(pl.text)

    # Rules below look at the effective (last) definition of each key.
    for key, raw in store.items():
        path = f"line {defined_at[key]}"
        trace = trace_expansion(raw, store)
        for name in trace.missing:
            errors.append(
                ConfigLintError(
                    code="L_UNRESOLVED_REFERENCE",
                    message=f"'{key}' references undefined key '{name}', which expands to nothing",
                    file=file,
                    path=path,
                )
            )
        if trace.exhausted:
            errors.append(
                ConfigLintError(
                    code="L_RECURSION_LIMIT_REACHED",
                    message=(
                        f"'{key}' is still unexpanded after {trace.passes} passes "
                        f"(recursion limit {store.recursion_limit}): {trace.text}"
                    ),
                    file=file,
                    path=path,
                )
            )

    return _sorted(errors)


def _sorted(errors: list[ConfigLintError]) -> list[ConfigLintError]:
    return sorted(errors, key=lambda e: (e.file or "", _line_of(e), e.code))


def _line_of(e: ConfigLintError) -> int:
    if e.path and e.path.startswith("line "):
        return int(e.path[len("line "):])
    return 0
