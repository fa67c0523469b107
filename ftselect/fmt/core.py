"""The formatting engine: ``%`` conversions and ``{colour}`` markup."""

from __future__ import annotations

import numbers
import operator
import os
import re
import sys
from collections.abc import Iterable, Iterator
from typing import Any

from ..colours import colour_token
from .fields import format_field, result_size, signed_to_base, unsigned_to_base
from .spec import ArgSize, ArgType, Spec, parse_spec, spec_length

_SPECIAL = re.compile(r"[%{]")

_NUMBER_BASES: dict[ArgType, int] = {
    ArgType.DECIMAL: 10,
    ArgType.OCTAL: 8,
    ArgType.UNSIGNED: 10,
    ArgType.HEX: 16,
    ArgType.HEX_UPPER: 16,
    ArgType.BINARY: 2,
}

_SIZE_BITS: dict[ArgSize, int] = {
    ArgSize.NONE: 32,
    ArgSize.H: 16,
    ArgSize.HH: 8,
    ArgSize.L: 64,
    ArgSize.LL: 64,
    ArgSize.J: 64,
    ArgSize.Z: 64,
    ArgSize.BIG_L: 64,
}

_FLOAT_KINDS = (ArgType.FLOAT, ArgType.FLOAT_UPPER)
_SPECIAL_FLOATS = ("inf", "nan")
_NULL_STRING = "(null)"
_NULL_POINTER = "0"
_DEFAULT_FLOAT_PRECISION = 6


def _next(args: Iterator[Any]) -> Any:
    try:
        return next(args)
    except StopIteration:
        raise TypeError("not enough arguments for format string") from None


def _as_signed(value: int, bits: int) -> int:
    half = 1 << (bits - 1)
    return ((value + half) % (1 << bits)) - half


def _number(spec: Spec, value: Any) -> str:
    number = operator.index(value)
    bits = _SIZE_BITS[spec.size]
    base = _NUMBER_BASES[spec.type]
    if spec.type is ArgType.DECIMAL:
        return signed_to_base(_as_signed(number, bits), base)
    return unsigned_to_base(number % (1 << bits), base)


def _pointer(value: Any) -> str:
    if value is None:
        return _NULL_POINTER
    address = operator.index(value) if isinstance(value, numbers.Integral) else id(value)
    if address == 0:
        return _NULL_POINTER
    return unsigned_to_base(address, 16)


def _string(value: Any) -> str:
    if value is None:
        return _NULL_STRING
    if not isinstance(value, str):
        raise TypeError(f"%s needs a str, not {type(value).__name__}")
    return value


def _char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise TypeError("%c needs a single character")
        return value
    return chr(operator.index(value) & 0xFF)


def _float(spec: Spec, value: Any) -> str:
    if not isinstance(value, numbers.Real):
        raise TypeError(f"%f needs a real number, not {type(value).__name__}")
    if not spec.dot:
        spec.dot = True
        spec.prec = _DEFAULT_FLOAT_PRECISION
    return format(float(value), f".{spec.prec}f")


def _finish(raw: str, spec: Spec, kind: ArgType) -> str:
    text = format_field(raw, spec, kind)
    if kind in _FLOAT_KINDS and raw in _SPECIAL_FLOATS:
        return text
    return text[:result_size(spec, text, kind)]


def convert_argument(spec: Spec, args: Iterable[Any]) -> str:
    """Convert the next value of ``args`` as ``spec`` says and return the field.

    An unknown conversion character is formatted as a character field of its own.
    """
    args = iter(args)
    if not spec.valid:
        return _finish(spec.conversion, spec, spec.type)
    kind = spec.type
    if kind is ArgType.PERCENT:
        spec.type = ArgType.CHAR
        return _finish("%", spec, ArgType.CHAR)
    if kind in _NUMBER_BASES:
        raw = _number(spec, _next(args))
    elif kind is ArgType.POINTER:
        raw = _pointer(_next(args))
    elif kind is ArgType.STRING:
        raw = _string(_next(args))
    elif kind is ArgType.CHAR:
        raw = _char(_next(args))
    else:
        raw = _float(spec, _next(args))
    return _finish(raw, spec, spec.type)


def _render(fmt: str, args: Iterator[Any]) -> str:
    out: list[str] = []
    pos = 0
    while pos < len(fmt):
        match = _SPECIAL.search(fmt, pos)
        stop = match.start() if match else len(fmt)
        out.append(fmt[pos:stop])
        pos = stop
        if pos >= len(fmt):
            break
        if fmt[pos] == "{":
            code, used = colour_token(fmt[pos:])
            out.append(code)
            pos += used
            continue
        rest = fmt[pos + 1:]
        spec = parse_spec(rest, args)
        out.append(convert_argument(spec, args))
        pos += 1 + spec_length(rest)
    return "".join(out)


def sprintf(fmt: str, *args: Any) -> str:
    """Return ``fmt`` with its conversions and colour tokens expanded."""
    return _render(fmt, iter(args))


def printf(fmt: str, *args: Any) -> int:
    """Write the formatted text to standard output; return its length."""
    text = sprintf(fmt, *args)
    sys.stdout.write(text)
    sys.stdout.flush()
    return len(text)


def dprintf(fd: int, fmt: str, *args: Any) -> int:
    """Write the formatted text to file descriptor ``fd``; return the bytes written."""
    data = sprintf(fmt, *args).encode("utf-8")
    view = memoryview(data)
    while view:
        written = os.write(fd, view)
        view = view[written:]
    return len(data)