from __future__ import annotations

import json
from pathlib import Path
from typing import Literal

import yaml

from textconfig.core.expand.expand_value import expand
from textconfig.core.model import SEPARATOR
from textconfig.core.store import ConfigStore


DumpFormat = Literal["text", "json", "yaml"]

DUMP_FORMATS: tuple[str, ...] = ("text", "json", "yaml")


def dump_text(store: ConfigStore) -> str:
    """Serialize raw entries as `key = value` lines in key order.

    The output re-parses to the same raw map.
    """
    return "".join(f"{key} {SEPARATOR} {value}\n" for key, value in store.items())


def config_to_dict(store: ConfigStore, *, expanded: bool = False) -> dict[str, str]:
    if not expanded:
        return dict(store.items())
    return {key: expand(value, store) for key, value in store.items()}


def render_config(store: ConfigStore, fmt: DumpFormat = "text", *, expanded: bool = False) -> str:
    if fmt == "text":
        if not expanded:
            return dump_text(store)
        data = config_to_dict(store, expanded=True)
        return "".join(f"{k} {SEPARATOR} {v}\n" for k, v in data.items())
    if fmt == "json":
        return json.dumps(config_to_dict(store, expanded=expanded), indent=2, sort_keys=True) + "\n"
    if fmt == "yaml":
        return yaml.safe_dump(
            config_to_dict(store, expanded=expanded),
            sort_keys=True,
            default_flow_style=False,
            allow_unicode=True,
        )
    raise ValueError(f"unknown dump format: {fmt} (choose one of: {', '.join(DUMP_FORMATS)})")


def write_dump(text: str, path: str) -> None:
    p = Path(path)
    if str(p.parent) not in (".", ""):
        p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(text, encoding="utf-8")
