import pytest

from ftselect.fmt.spec import (
    ArgSize,
    ArgType,
    Spec,
    is_conversion,
    parse_spec,
    spec_length,
)


def parse(text, *args):
    return parse_spec(text, iter(args))


@pytest.mark.parametrize(
    "text, expected",
    [
        ("d", True),
        ("-05.3ld", True),
        ("%", True),
        ("k", False),
        ("5k", False),
        ("", False),
        ("05", False),
    ],
)
def test_is_conversion(text, expected):
    assert is_conversion(text) is expected


@pytest.mark.parametrize(
    "text, expected",
    [("d", 1), ("-05.3ld", 7), ("5k", 2), ("05", 2), ("drest", 1)],
)
def test_spec_length(text, expected):
    assert spec_length(text) == expected


def test_full_specification():
    spec = parse("-05.3ld")
    assert spec.dash and spec.zero
    assert spec.width == 5
    assert spec.dot and spec.prec == 3
    assert spec.size is ArgSize.L
    assert spec.type is ArgType.DECIMAL
    assert spec.conversion == "d"
    assert spec.valid


def test_default_spec_matches_plain_decimal():
    assert parse("d") == Spec(conversion="d")


@pytest.mark.parametrize("conv", ["d", "i"])
def test_signed_conversions(conv):
    spec = parse(conv)
    assert spec.type is ArgType.DECIMAL
    assert spec.size is ArgSize.NONE


@pytest.mark.parametrize(
    "text, size",
    [
        ("hd", ArgSize.H),
        ("hhd", ArgSize.HH),
        ("ld", ArgSize.L),
        ("lld", ArgSize.LL),
        ("jd", ArgSize.J),
        ("zd", ArgSize.Z),
        ("Lf", ArgSize.BIG_L),
    ],
)
def test_length_modifiers(text, size):
    assert parse(text).size is size


@pytest.mark.parametrize(
    "conv, kind",
    [("U", ArgType.UNSIGNED), ("O", ArgType.OCTAL), ("D", ArgType.DECIMAL), ("F", ArgType.FLOAT_UPPER)],
)
def test_upper_case_conversions_are_long(conv, kind):
    spec = parse(conv)
    assert spec.type is kind
    assert spec.size is ArgSize.L


def test_upper_case_keeps_long_long():
    assert parse("llU").size is ArgSize.LL


def test_upper_hex_keeps_size():
    spec = parse("X")
    assert spec.type is ArgType.HEX_UPPER
    assert spec.size is ArgSize.NONE


def test_upper_float_overrides_big_l():
    assert parse("LF").size is ArgSize.L


def test_percent():
    spec = parse("%")
    assert spec.type is ArgType.PERCENT
    assert spec.conversion == "%"


def test_star_width_consumes_argument():
    args = iter([7, 99])
    spec = parse_spec("*d", args)
    assert spec.width == 7
    assert list(args) == [99]


def test_negative_star_width_left_justifies():
    spec = parse("*d", -4)
    assert spec.dash
    assert spec.width == 4


def test_star_precision():
    spec = parse(".*s", 2)
    assert spec.dot and spec.prec == 2
    assert spec.type is ArgType.STRING


def test_negative_star_precision_is_dropped():
    spec = parse(".*d", -1)
    assert not spec.dot
    assert spec.prec == 0


def test_missing_star_argument():
    with pytest.raises(TypeError):
        parse("*d")


def test_non_integer_star_argument():
    with pytest.raises(TypeError):
        parse("*d", "wide")


def test_binary_pads_to_whole_bytes():
    plain = parse("b")
    assert plain.type is ArgType.BINARY
    assert plain.zero
    assert plain.width == 8
    wide = parse("10b")
    assert wide.width % 8 == 0
    assert wide.width >= 10


def test_dash_after_width():
    spec = parse("5-d")
    assert spec.dash
    assert spec.width == 5


def test_sign_flags():
    spec = parse("+ d")
    assert spec.plus and spec.space
    assert not spec.dash


def test_alternate_hex():
    spec = parse("#x")
    assert spec.sharp
    assert spec.type is ArgType.HEX


def test_unknown_conversion_becomes_char():
    spec = parse("5k")
    assert spec.type is ArgType.CHAR
    assert spec.width == 5
    assert spec.conversion == "k"
    assert not spec.valid


def test_truncated_specification():
    spec = parse("5")
    assert spec.conversion == ""
    assert not spec.valid
    assert spec.type is ArgType.CHAR