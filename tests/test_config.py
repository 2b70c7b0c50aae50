import pytest

from textconfig import TextConfig, load_config


def test_round_trip_without_references():
    cfg = TextConfig().add("key =   some value  ")
    assert cfg.get_string("key") == "some value"


def test_add_is_chainable_and_overwrites():
    cfg = TextConfig().add("a = 1").add("a = 2").add("b = $a")
    assert cfg.get_int("b") == 2
    assert len(cfg) == 2


def test_get_int_default_when_missing():
    cfg = TextConfig()
    assert cfg.get_int("missing", 42) == 42
    assert cfg.get_int("missing") == 0


def test_get_int_non_numeric_is_zero():
    cfg = TextConfig().add("word = hello")
    assert cfg.get_int("word", 99) == 0


def test_get_long_handles_large_values():
    cfg = TextConfig().add("big = 9007199254740993")
    assert cfg.get_long("big") == 9007199254740993
    assert cfg.get_long("missing", 7) == 7


def test_get_double_returns_float():
    cfg = TextConfig().add("ratio = 3.5")
    value = cfg.get_double("ratio")
    assert isinstance(value, float)
    assert value == pytest.approx(3.5)
    assert cfg.get_double("missing", 0.25) == pytest.approx(0.25)


def test_get_string_expands_and_defaults():
    cfg = TextConfig().add("host = example.org").add("url = https://$host/api")
    assert cfg.get_string("url") == "https://example.org/api"
    assert cfg.get_string("missing") is None
    assert cfg.get_string("missing", "fallback") == "fallback"


def test_get_raw_is_unexpanded():
    cfg = TextConfig().add("host = example.org").add("url = https://$host/api")
    assert cfg.get_raw("url") == "https://$host/api"
    assert cfg.get_raw("missing") is None


def test_get_list_trims_and_drops_empty_pieces():
    cfg = TextConfig().add("vector = a, b ,, c")
    assert cfg.get_list("vector") == ["a", "b", "c"]


def test_get_list_absent_vs_empty():
    cfg = TextConfig().add("empty =").add("commas = , ,")
    assert cfg.get_list("missing") is None
    assert cfg.get_list("empty") == []
    assert cfg.get_list("commas") == []


def test_get_list_expands_before_splitting():
    cfg = TextConfig().add("base = x, y").add("all = $base, z")
    assert cfg.get_list("all") == ["x", "y", "z"]


def test_recursion_limit_applies_to_getters():
    cfg = TextConfig(recursion_limit=1).add("a = $b").add("b = $c").add("c = C")
    assert cfg.get_string("a") == "$c"
    cfg.set_recursion_limit(2)
    assert cfg.get_string("a") == "C"
    assert cfg.recursion_limit == 2


def test_values_are_recomputed_on_every_read():
    cfg = TextConfig().add("name = old").add("greeting = hi $name")
    assert cfg.get_string("greeting") == "hi old"
    cfg.add("name = new")
    assert cfg.get_string("greeting") == "hi new"


def test_from_text_skips_comments_and_blanks():
    cfg = TextConfig.from_text("# comment\n\n   # indented comment\nkey = value\n")
    assert len(cfg) == 1
    assert "key" in cfg


def test_load_sample_file(sample_cfg):
    cfg = load_config(sample_cfg)
    assert cfg.get_int("int") == 42
    assert cfg.get_long("long") == 1234567890123
    assert cfg.get_double("double") == pytest.approx(3.14159)
    assert cfg.get_string("string") == "hello world"
    assert cfg.get_list("vector") == ["a", "b", "c"]
    assert cfg.get_string("cite") == "hello world from floor 42th"


def test_dynamic_line_on_loaded_file(sample_cfg):
    cfg = load_config(sample_cfg)
    cfg.add("dynamic = $int + $long")
    assert cfg.get_string("dynamic") == "42 + 1234567890123"


def test_dump_is_raw_and_sorted():
    cfg = TextConfig().add("b = $a").add("a = 1")
    assert cfg.dump() == "a = 1\nb = $a\n"


def test_invalid_recursion_limit():
    with pytest.raises(ValueError):
        TextConfig(recursion_limit=0)
