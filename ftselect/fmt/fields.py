"""Turning a converted argument into its final padded, prefixed field."""

from __future__ import annotations

from dataclasses import replace

from .spec import ArgType, Spec

_DIGIT_CHARS = "0123456789abcdefghijklmnopqrstuvwxyz"
_WORD_MASK = (1 << 64) - 1
_HEX_KINDS = (ArgType.HEX, ArgType.HEX_UPPER)
_PREFIXED_KINDS = (ArgType.HEX, ArgType.HEX_UPPER, ArgType.POINTER)
_FLOAT_KINDS = (ArgType.FLOAT, ArgType.FLOAT_UPPER)
_SPECIAL_FLOATS = ("inf", "nan")


def _check_base(base: int) -> None:
    if not 2 <= base <= len(_DIGIT_CHARS):
        raise ValueError(f"base must be between 2 and {len(_DIGIT_CHARS)}, not {base}")


def _digits(value: int, base: int) -> str:
    if value == 0:
        return "0"
    out = []
    while value:
        value, digit = divmod(value, base)
        out.append(_DIGIT_CHARS[digit])
    return "".join(reversed(out))


def signed_to_base(n: int, base: int) -> str:
    """Write ``n`` in ``base`` with lower-case digits and a leading ``-`` if negative."""
    _check_base(base)
    return "-" + _digits(-n, base) if n < 0 else _digits(n, base)


def unsigned_to_base(n: int, base: int) -> str:
    """Write ``n`` in ``base`` as a 64-bit unsigned value (negatives wrap around)."""
    _check_base(base)
    return _digits(n & _WORD_MASK, base)


def apply_precision(text: str, spec: Spec, kind: ArgType) -> str:
    """Apply the precision: truncate strings, zero-extend numbers."""
    if text.startswith("-"):
        return "-" + apply_precision(text[1:], spec, kind)
    result = text
    length = len(text)
    if length > spec.prec and (kind is ArgType.STRING or text == "0"):
        result = result[:spec.prec]
    if length < spec.prec and kind not in (ArgType.CHAR, ArgType.STRING):
        result = "0" * (spec.prec - length) + result
    return result


def apply_width(text: str, spec: Spec, kind: ArgType) -> str:
    """Pad ``text`` to the field width, left or right, with spaces or zeros."""
    if text.startswith("-") and spec.zero:
        return "-" + apply_width(text[1:], replace(spec, width=spec.width - 1), kind)
    length = 1 if kind is ArgType.CHAR else len(text)
    zero_pad = spec.zero and not spec.dash and (
        (length < spec.prec and spec.dot) or not spec.dot or not spec.prec
    )
    missing = max(spec.width - length, 0)
    pad = ("0" if zero_pad else " ") * missing
    return text + pad if spec.dash else pad + text


def _pad_before_prefix(text: str, spec: Spec, kind: ArgType) -> str:
    if kind in _PREFIXED_KINDS:
        return apply_width(text, replace(spec, width=spec.width - 2), kind)
    if kind is ArgType.OCTAL:
        return apply_width(text, replace(spec, width=spec.width - 1), kind)
    return text


def apply_alternate(text: str, spec: Spec, kind: ArgType) -> str:
    """Add the ``#`` form prefix: ``0`` for octal, ``0x`` for hex and pointers."""
    if kind in _HEX_KINDS and not text:
        return text
    if kind is not ArgType.POINTER and text == "0":
        return text
    result = _pad_before_prefix(text, spec, kind) if spec.zero else text
    if kind is ArgType.OCTAL:
        if not result.startswith("0"):
            result = "0" + result
    elif kind in _PREFIXED_KINDS:
        if len(result) < 2 or result[1] not in "xX":
            result = "0x" + result
    return result


def _apply_sign(text: str, spec: Spec, kind: ArgType) -> str:
    result = text
    if spec.zero:
        result = apply_width(text, replace(spec, width=spec.width - 1), kind)
    if text[:1] not in (" ", "-", "+"):
        result = ("+" if spec.plus else " ") + result
    return result


def format_field(text: str, spec: Spec, kind: ArgType) -> str:
    """Apply precision, alternate form, sign and width to a converted value."""
    if kind in _FLOAT_KINDS and text in _SPECIAL_FLOATS:
        return text.upper() if kind is ArgType.FLOAT_UPPER else text
    result = text
    if spec.dot:
        result = apply_precision(result, spec, kind)
    if spec.sharp or kind is ArgType.POINTER:
        result = apply_alternate(result, spec, kind)
    if (spec.space or spec.plus) and kind is ArgType.DECIMAL:
        result = _apply_sign(result, spec, kind)
    if spec.width:
        result = apply_width(result, spec, kind)
    if kind is ArgType.HEX_UPPER:
        result = result.upper()
    return result


def result_size(spec: Spec, text: str, kind: ArgType) -> int:
    """Number of characters a formatted field counts for in the output."""
    length = len(text)
    if (length > spec.prec and length > spec.width) or kind is ArgType.STRING:
        return length
    if spec.dot and spec.prec > spec.width and kind not in (ArgType.FLOAT, ArgType.CHAR):
        return spec.prec
    if (not spec.dot and spec.width) or spec.prec < spec.width:
        return spec.width
    if kind is ArgType.CHAR:
        return 1
    return 0