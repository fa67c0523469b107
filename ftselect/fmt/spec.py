"""Parsing of ``%`` conversion specifications."""

from __future__ import annotations

import operator
from collections.abc import Iterator
from dataclasses import dataclass
from enum import IntEnum
from typing import Any

_DIGITS = "0123456789"
_LEADING_FLAGS = "- 0#+"
_WIDTH_CHARS = "*." + _DIGITS
_NUMBER_CHARS = _DIGITS + "*"
_LENGTH_CHARS = "hlLjz"
_SPEC_CHARS = "+ 0123456789#hlLzj.-*"
_CONVERSIONS = "diuoxXcspf%UbODF"


class ArgType(IntEnum):
    """Kind of value a conversion produces."""

    DECIMAL = 0
    OCTAL = 1
    UNSIGNED = 2
    HEX = 3
    HEX_UPPER = 4
    BINARY = 5
    POINTER = 6
    STRING = 7
    CHAR = 8
    FLOAT = 9
    FLOAT_UPPER = 10
    PERCENT = 11


class ArgSize(IntEnum):
    """Length modifier of a conversion."""

    NONE = 0
    H = 1
    HH = 2
    L = 3
    LL = 4
    J = 5
    Z = 6
    BIG_L = 7


_TYPES: dict[str, ArgType] = {
    "d": ArgType.DECIMAL,
    "i": ArgType.DECIMAL,
    "o": ArgType.OCTAL,
    "O": ArgType.OCTAL,
    "u": ArgType.UNSIGNED,
    "U": ArgType.UNSIGNED,
    "D": ArgType.DECIMAL,
    "x": ArgType.HEX,
    "X": ArgType.HEX_UPPER,
    "b": ArgType.BINARY,
    "p": ArgType.POINTER,
    "s": ArgType.STRING,
    "c": ArgType.CHAR,
    "f": ArgType.FLOAT,
    "F": ArgType.FLOAT_UPPER,
    "%": ArgType.PERCENT,
}


@dataclass
class Spec:
    """Flags, width, precision and type of one conversion specification."""

    sharp: bool = False
    zero: bool = False
    dash: bool = False
    plus: bool = False
    space: bool = False
    dot: bool = False
    prec: int = 0
    width: int = 0
    size: ArgSize = ArgSize.NONE
    type: ArgType = ArgType.DECIMAL
    conversion: str = ""

    @property
    def valid(self) -> bool:
        """True when the specification ends in a known conversion character."""
        return self.conversion != "" and self.conversion in _CONVERSIONS


def _at(text: str, pos: int) -> str:
    return text[pos] if 0 <= pos < len(text) else ""


def _is_in(text: str, pos: int, chars: str) -> bool:
    ch = _at(text, pos)
    return ch != "" and ch in chars


def _run(text: str, pos: int, chars: str) -> int:
    """Length of the run of ``chars`` starting at ``pos``."""
    end = pos
    while _is_in(text, end, chars):
        end += 1
    return end - pos


def _atoi(text: str, pos: int) -> int:
    digits = text[pos:pos + _run(text, pos, _DIGITS)]
    return int(digits) if digits else 0


def _next_int(args: Iterator[Any]) -> int:
    try:
        value = next(args)
    except StopIteration:
        raise TypeError("not enough arguments for format string") from None
    return operator.index(value)


def is_conversion(text: str) -> bool:
    """Tell whether ``text`` (what follows a ``%``) holds a known conversion."""
    return _is_in(text, _run(text, 0, _SPEC_CHARS), _CONVERSIONS)


def spec_length(text: str) -> int:
    """Number of characters the specification occupies after the ``%``.

    This is the run of flag characters plus the character ending it; a
    specification cut short by the end of ``text`` takes the rest of it.
    """
    return min(_run(text, 0, _SPEC_CHARS) + 1, len(text))


def _read_width_value(text: str, pos: int, args: Iterator[Any], spec: Spec) -> None:
    if _is_in(text, pos, _DIGITS):
        spec.width = _atoi(text, pos)
        pos += _run(text, pos, _DIGITS)
    if _at(text, pos) == "*":
        spec.width = _next_int(args)
        pos += 1
    if _is_in(text, pos, _DIGITS):
        spec.width = _atoi(text, pos)
    if spec.width < 0:
        spec.dash = True
        spec.width = -spec.width


def _read_precision(text: str, pos: int, args: Iterator[Any], spec: Spec) -> int:
    spec.dot = True
    i = 1
    if _is_in(text, pos + i, _DIGITS):
        spec.prec = _atoi(text, pos + i)
        i += _run(text, pos + i, _NUMBER_CHARS)
    if _at(text, pos + i) == "*":
        spec.prec = _next_int(args)
        i += 1
    if _is_in(text, pos + i, _DIGITS):
        spec.prec = _atoi(text, pos + i)
    if spec.prec < 0:
        spec.dot = False
        spec.prec = 0
    return _run(text, pos + i, _NUMBER_CHARS) + i


def _read_width(text: str, pos: int, args: Iterator[Any], spec: Spec) -> None:
    while _is_in(text, pos, _WIDTH_CHARS):
        if _is_in(text, pos, _NUMBER_CHARS):
            _read_width_value(text, pos, args, spec)
            pos += _run(text, pos, _NUMBER_CHARS)
        if _at(text, pos) == ".":
            pos += _read_precision(text, pos, args, spec)
        ch = _at(text, pos)
        if ch == "-":
            spec.dash = True
        elif ch == " ":
            spec.space = True
        elif ch == "#":
            spec.sharp = True
        if not _is_in(text, pos, _WIDTH_CHARS):
            break
        pos += 1


def _read_length(text: str, pos: int, spec: Spec) -> None:
    ch, following = _at(text, pos), _at(text, pos + 1)
    if ch == "l":
        spec.size = ArgSize.LL if following == "l" else ArgSize.L
    elif ch == "h":
        spec.size = ArgSize.HH if following == "h" else ArgSize.H
    elif ch == "z":
        spec.size = ArgSize.Z
    elif ch == "L":
        spec.size = ArgSize.BIG_L
    elif ch == "j":
        spec.size = ArgSize.J


def _fix_binary(spec: Spec) -> None:
    spec.zero = True
    if not spec.width:
        spec.width = 1
    while spec.width % 8:
        spec.width += 1


def _read_type(text: str, pos: int, spec: Spec) -> None:
    rest = text[pos:]
    if not is_conversion(rest):
        spec.type = ArgType.CHAR
        return
    ch = rest[_run(rest, 0, _SPEC_CHARS)]
    spec.type = _TYPES[ch]
    if (
        "A" <= ch <= "Z"
        and spec.size not in (ArgSize.L, ArgSize.LL)
        and spec.type is not ArgType.HEX_UPPER
    ):
        spec.size = ArgSize.L
    if ch == "b":
        _fix_binary(spec)


def parse_spec(text: str, args: Iterator[Any]) -> Spec:
    """Parse the specification at the start of ``text`` (what follows a ``%``).

    ``args`` is an iterator; a ``*`` width or precision takes the next integer
    from it. An unknown conversion character yields a CHAR specification whose
    ``conversion`` holds that character.
    """
    spec = Spec()
    pos = 0
    if _is_in(text, pos, _LEADING_FLAGS):
        flag_pos = pos
        while _is_in(text, flag_pos, _LEADING_FLAGS):
            ch = text[flag_pos]
            if ch == "-":
                spec.dash = True
            elif ch == " ":
                spec.space = True
            elif ch == "0":
                spec.zero = True
            elif ch == "#":
                spec.sharp = True
            elif ch == "+":
                spec.plus = True
            flag_pos += 1
        while _is_in(text, pos, _LEADING_FLAGS):
            if text[pos] == "0" and _at(text, pos + 1) == "0":
                pos += 1
                break
            pos += 1
    if _is_in(text, pos, _WIDTH_CHARS):
        _read_width(text, pos, args, spec)
        pos += _run(text, pos, _WIDTH_CHARS)
    if _is_in(text, pos, _LENGTH_CHARS):
        _read_length(text, pos, spec)
        pos += 1
    _read_type(text, pos, spec)
    spec.conversion = _at(text, _run(text, 0, _SPEC_CHARS))
    return spec