import pytest

from ftselect.colours import colour_code, colour_token


def test_colour_code_known():
    assert colour_code("red") == "\033[0;31m"
    assert colour_code("eoc") == "\033[0m"
    assert colour_code("yellow") == "\033[0;33m"


def test_colour_code_unknown():
    assert colour_code("pink") is None
    assert colour_code("") is None


def test_token_known_colour():
    assert colour_token("{cyan}rest") == ("\033[0;36m", len("{cyan}"))


def test_token_unknown_kept_literal():
    assert colour_token("{pink}x") == ("{pink}", len("{pink}"))


def test_token_empty_name_kept_literal():
    assert colour_token("{}abc") == ("{}", len("{}"))


def test_token_without_closing_brace():
    assert colour_token("{red") == ("{red", len("{red"))


def test_token_consumed_prefix_ends_with_brace():
    text = "{green}hello {eoc}"
    _, consumed = colour_token(text)
    assert text[consumed - 1] == "}"
    assert text[consumed:] == "hello {eoc}"


def test_token_requires_brace():
    with pytest.raises(ValueError):
        colour_token("red}")