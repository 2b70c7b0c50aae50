import json

import yaml

from textconfig import TextConfig
from textconfig.core.dump.dump_config import config_to_dict, dump_text, render_config, write_dump


def _config() -> TextConfig:
    return TextConfig().add("name = world").add("greeting = hello $name").add("standalone")


def test_dump_text_reparses_to_same_map():
    cfg = _config()
    again = TextConfig.from_text(dump_text(cfg.store))
    assert again.store.items() == cfg.store.items()


def test_config_to_dict_raw_and_expanded():
    store = _config().store
    assert config_to_dict(store)["greeting"] == "hello $name"
    assert config_to_dict(store, expanded=True)["greeting"] == "hello world"


def test_render_json():
    data = json.loads(render_config(_config().store, "json", expanded=True))
    assert data == {"greeting": "hello world", "name": "world", "standalone": "standalone"}


def test_render_yaml():
    data = yaml.safe_load(render_config(_config().store, "yaml"))
    assert data["greeting"] == "hello $name"


def test_render_expanded_text():
    text = render_config(_config().store, "text", expanded=True)
    assert "greeting = hello world\n" in text


def test_render_empty_store():
    assert render_config(TextConfig().store, "text") == ""


def test_write_dump_creates_parent_dirs(tmp_path):
    out = tmp_path / "nested" / "dir" / "dump.cfg"
    write_dump("a = 1\n", str(out))
    assert out.read_text(encoding="utf-8") == "a = 1\n"
