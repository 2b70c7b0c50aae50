from __future__ import annotations

import json
import logging
from typing import Any, Optional

import typer
from rich.console import Console
from rich.table import Table
from rich.text import Text

from textconfig.core.access.convert import to_float, to_int
from textconfig.core.config import TextConfig, split_list
from textconfig.core.dump.dump_config import DUMP_FORMATS, render_config, write_dump
from textconfig.core.errors import ConfigError, ConfigLintError, ConfigLoadError
from textconfig.core.expand.expand_value import expand
from textconfig.core.io.load_config import read_config_lines
from textconfig.core.lint.lint_config import lint_config
from textconfig.core.model import DEFAULT_RECURSION_LIMIT

app = typer.Typer(add_completion=False, no_args_is_help=True)
console = Console()

VALUE_TYPES: tuple[str, ...] = ("string", "int", "long", "double", "list")

RECURSION_LIMIT_ENV = "TEXTCONFIG_RECURSION_LIMIT"


def _recursion_limit_option() -> Any:
    return typer.Option(
        DEFAULT_RECURSION_LIMIT,
        "--recursion-limit",
        min=1,
        envvar=RECURSION_LIMIT_ENV,
        help="Maximum expansion passes per lookup",
    )


def _set_option() -> Any:
    return typer.Option(
        None,
        "--set",
        "-s",
        help="Extra `key = value` line applied after loading (repeatable)",
    )


@app.callback()
def _callback(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log debug output to stderr"),
) -> None:
    """textconfig CLI."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )


@app.command("get")
def get(
    path: str = typer.Argument(..., help="Path to a config file"),
    key: str = typer.Argument(..., help="Key to read"),
    type_: str = typer.Option("string", "--type", help="Value type: string|int|long|double|list"),
    default: Optional[str] = typer.Option(None, "--default", help="Value used when the key is missing"),
    raw: bool = typer.Option(False, "--raw", help="Print the stored value without expansion"),
    format: str = typer.Option("text", "--format", help="Output format: text|json"),
    set_lines: Optional[list[str]] = _set_option(),
    recursion_limit: int = _recursion_limit_option(),
) -> None:
    """Read one key, expanded and converted to the requested type."""
    if type_ not in VALUE_TYPES:
        _fail_usage("E_GET_UNKNOWN_TYPE", f"unknown type: {type_} (choose one of: {', '.join(VALUE_TYPES)})", "type")
    if format not in ("text", "json"):
        _fail_usage("E_GET_UNKNOWN_FORMAT", f"unknown format: {format} (choose one of: text, json)", "format")
    if raw and type_ != "string":
        _fail_usage("E_GET_RAW_TYPE", "--raw can only be combined with --type string", "raw")

    cfg = _load_or_exit(path, recursion_limit, set_lines)

    found = key in cfg
    if not found and default is None:
        _print_errors(
            [
                ConfigError(
                    code="E_KEY_NOT_FOUND",
                    message=f"key not found: {key}",
                    file=path,
                    path=key,
                )
            ]
        )
        raise typer.Exit(code=1)

    if raw:
        value: Any = cfg.get_raw(key) if found else default
    elif found:
        value = _typed_value(cfg, key, type_)
    else:
        value = _typed_default(default or "", type_)

    if format == "json":
        payload = {"key": key, "found": found, "type": type_, "value": value}
        typer.echo(json.dumps(payload, indent=2, sort_keys=True))
        return

    if isinstance(value, list):
        for item in value:
            typer.echo(item)
        return
    typer.echo(str(value))


@app.command("dump")
def dump(
    path: str = typer.Argument(..., help="Path to a config file"),
    format: str = typer.Option("text", "--format", help="Output format: text|json|yaml"),
    expanded: bool = typer.Option(False, "--expanded", help="Dump expanded values instead of raw ones"),
    out: Optional[str] = typer.Option(None, "--out", help="Write to this file instead of stdout"),
    set_lines: Optional[list[str]] = _set_option(),
    recursion_limit: int = _recursion_limit_option(),
) -> None:
    """Print every entry in key order."""
    if format not in DUMP_FORMATS:
        _fail_usage(
            "E_DUMP_UNKNOWN_FORMAT",
            f"unknown format: {format} (choose one of: {', '.join(DUMP_FORMATS)})",
            "format",
        )

    cfg = _load_or_exit(path, recursion_limit, set_lines)
    text = render_config(cfg.store, format, expanded=expanded)  # type: ignore[arg-type]

    if out is None:
        typer.echo(text, nl=False)
        return
    write_dump(text, out)
    typer.echo(f"OK: wrote {len(cfg)} entries to {out}")


@app.command("lint")
def lint(
    path: str = typer.Argument(..., help="Path to a config file"),
    format: str = typer.Option("text", "--format", help="Output format: text|json"),
    recursion_limit: int = _recursion_limit_option(),
) -> None:
    """Report lines the loader silently reinterprets or drops, and references that do not resolve."""
    if format not in ("text", "json"):
        _fail_usage("E_LINT_UNKNOWN_FORMAT", f"unknown format: {format} (choose one of: text, json)", "format")

    def _to_item(e: ConfigError) -> dict:
        source = "load" if isinstance(e, ConfigLoadError) else "lint"
        return {
            "code": e.code,
            "message": e.message,
            "file": e.file,
            "path": e.path,
            "severity": "error" if source == "load" else "warning",
            "source": source,
        }

    def _emit_json(ok: bool, errors: list[ConfigError], exit_code: int) -> None:
        payload = {
            "tool": "textconfig",
            "command": "lint",
            "ok": ok,
            "error_count": len(errors),
            "errors": [_to_item(e) for e in errors],
        }
        typer.echo(json.dumps(payload, indent=2, sort_keys=True))
        raise typer.Exit(code=exit_code)

    try:
        lines = read_config_lines(path)
    except ConfigLoadError as e:
        if format == "json":
            _emit_json(False, [e], 1)
        _print_errors([e])
        raise typer.Exit(code=1)

    findings: list[ConfigLintError] = lint_config(lines, file=path, recursion_limit=recursion_limit)

    if format == "json":
        _emit_json(not findings, list(findings), 2 if findings else 0)

    if findings:
        # Already in line order.
        for e in findings:
            typer.echo(str(e), err=True)
        raise typer.Exit(code=2)
    typer.echo("OK: lint passed")


@app.command("show")
def show(
    path: str = typer.Argument(..., help="Path to a config file"),
    recursion_limit: int = _recursion_limit_option(),
) -> None:
    """Show raw and expanded values side by side."""
    cfg = _load_or_exit(path, recursion_limit, None)

    table = Table(title=path)
    table.add_column("Key")
    table.add_column("Raw")
    table.add_column("Expanded")
    for key, raw_value in cfg.store.items():
        table.add_row(Text(key), Text(raw_value), Text(expand(raw_value, cfg.store)))
    console.print(table)


def _load_or_exit(path: str, recursion_limit: int, set_lines: Optional[list[str]]) -> TextConfig:
    try:
        cfg = TextConfig.from_file(path, recursion_limit)
    except ConfigLoadError as e:
        _print_errors([e])
        raise typer.Exit(code=1)
    for line in set_lines or []:
        cfg.add(line)
    return cfg


def _typed_value(cfg: TextConfig, key: str, type_: str) -> Any:
    if type_ == "int":
        return cfg.get_int(key)
    if type_ == "long":
        return cfg.get_long(key)
    if type_ == "double":
        return cfg.get_double(key)
    if type_ == "list":
        return cfg.get_list(key)
    return cfg.get_string(key)


def _typed_default(default: str, type_: str) -> Any:
    if type_ in ("int", "long"):
        return to_int(default)
    if type_ == "double":
        return to_float(default)
    if type_ == "list":
        return split_list(default)
    return default


def _fail_usage(code: str, message: str, path: str) -> None:
    _print_errors([ConfigError(code=code, message=message, file=None, path=path)])
    raise typer.Exit(code=2)


def _print_errors(errors: list[ConfigError]) -> None:
    errors_sorted = sorted(errors, key=lambda e: (e.file or "", e.path or "", e.code))
    for e in errors_sorted:
        typer.echo(str(e), err=True)


def main() -> None:
    app(prog_name="textconfig")


cli = typer.main.get_command(app)

if __name__ == "__main__":
    main()
