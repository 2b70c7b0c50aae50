from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Iterator

from textconfig.core.errors import ConfigLoadError
from textconfig.core.model import COMMENT_PREFIX, LINE_BREAK
from textconfig.core.parse.parse_line import trim
from textconfig.core.store import ConfigStore

logger = logging.getLogger(__name__)


def read_config_lines(path: str | Path) -> list[str]:
    """Read a UTF-8 config file into a list of lines.

    Raises ConfigLoadError when the file is missing or cannot be read; no
    partial content is returned.
    """
    p = Path(path)
    if not p.exists():
        raise ConfigLoadError(
            code="E_FILE_NOT_FOUND",
            message=f"can not open configuration file {p}",
            file=str(p),
        )

    try:
        raw_text = p.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise ConfigLoadError(code="E_FILE_DECODE", message=str(e), file=str(p)) from e
    except OSError as e:
        raise ConfigLoadError(code="E_FILE_READ", message=str(e), file=str(p)) from e

    return raw_text.split(LINE_BREAK)


def iter_config_lines(lines: Iterable[str]) -> Iterator[tuple[int, str]]:
    """Yield (line number, trimmed line) for every entry line.

    Blank lines and lines whose first non-blank character is `#` are skipped.
    Line numbers are 1-based positions in ``lines``.
    """
    for line_no, line in enumerate(lines, start=1):
        trimmed = trim(line)
        if not trimmed or trimmed.startswith(COMMENT_PREFIX):
            continue
        yield line_no, trimmed


def load_lines(store: ConfigStore, lines: Iterable[str]) -> int:
    """Insert every entry line into ``store``. Returns the number of lines fed."""
    count = 0
    for _, line in iter_config_lines(lines):
        store.insert(line)
        count += 1
    logger.debug("fed %d lines into store (%d keys)", count, len(store))
    return count


def load_file(store: ConfigStore, path: str | Path) -> int:
    count = load_lines(store, read_config_lines(path))
    logger.info("loaded %s (%d entries)", path, count)
    return count
