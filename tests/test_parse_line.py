from textconfig.core.parse.parse_line import is_identifier_char, split_line, trim


def test_trim_strips_fixed_whitespace_set():
    assert trim(" \t value \r\n") == "value"
    assert trim("a b") == "a b"


def test_trim_all_whitespace_is_empty():
    assert trim(" \t\r\n ") == ""
    assert trim("") == ""


def test_trim_keeps_other_whitespace():
    assert trim("\vvalue\f") == "\vvalue\f"


def test_split_on_first_separator():
    assert split_line("  key =  value  ") == ("key", "value")
    assert split_line("url = http://host/?a=1&b=2") == ("url", "http://host/?a=1&b=2")


def test_split_empty_value():
    assert split_line("key =") == ("key", "")


def test_split_without_separator_uses_line_as_key_and_value():
    assert split_line("  standalone ") == ("standalone", "standalone")


def test_split_empty_key_is_rejected():
    assert split_line(" = value") is None
    assert split_line("   ") is None


def test_identifier_chars():
    assert all(is_identifier_char(c) for c in "azAZ09_")
    assert not any(is_identifier_char(c) for c in "{}$-. é")
