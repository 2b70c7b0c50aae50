import json
from pathlib import Path

import yaml
from typer.testing import CliRunner

from textconfig.cli import app

runner = CliRunner()


def test_cli_dump_text(sample_cfg):
    r = runner.invoke(app, ["dump", sample_cfg])
    assert r.exit_code == 0, r.output
    assert r.stdout == (
        "cite = $string from floor ${int}th\n"
        "double = 3.14159\n"
        "int = 42\n"
        "long = 1234567890123\n"
        "string = hello world\n"
        "vector = a, b ,, c\n"
    )


def test_cli_dump_json_expanded(sample_cfg):
    r = runner.invoke(app, ["dump", sample_cfg, "--format", "json", "--expanded"])
    assert r.exit_code == 0
    data = json.loads(r.stdout)
    assert data["cite"] == "hello world from floor 42th"
    assert list(data) == sorted(data)


def test_cli_dump_yaml_to_file(sample_cfg, tmp_path: Path):
    out_path = tmp_path / "out" / "config.yaml"
    r = runner.invoke(app, ["dump", sample_cfg, "--format", "yaml", "--out", str(out_path)])
    assert r.exit_code == 0
    assert "OK: wrote 6 entries" in r.stdout
    data = yaml.safe_load(out_path.read_text(encoding="utf-8"))
    assert data["vector"] == "a, b ,, c"


def test_cli_dump_with_set_lines(sample_cfg):
    r = runner.invoke(app, ["dump", sample_cfg, "-s", "extra = 1", "-s", "int = 43"])
    assert r.exit_code == 0
    assert "extra = 1\n" in r.stdout
    assert "int = 43\n" in r.stdout


def test_cli_dump_output_is_deterministic(sample_cfg, tmp_path: Path):
    out1 = tmp_path / "dump1.cfg"
    out2 = tmp_path / "dump2.cfg"
    r1 = runner.invoke(app, ["dump", sample_cfg, "--out", str(out1)])
    r2 = runner.invoke(app, ["dump", sample_cfg, "--out", str(out2)])
    assert r1.exit_code == 0
    assert r2.exit_code == 0
    assert out1.read_text(encoding="utf-8") == out2.read_text(encoding="utf-8")


def test_cli_dump_unknown_format(sample_cfg):
    r = runner.invoke(app, ["dump", sample_cfg, "--format", "toml"])
    assert r.exit_code == 2
    assert "E_DUMP_UNKNOWN_FORMAT" in r.output
