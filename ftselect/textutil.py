"""Small string helpers used across the package."""

from __future__ import annotations

_BLANKS = " \n\t"


def split(text: str, sep: str) -> list[str]:
    """Split ``text`` on ``sep``, dropping empty pieces."""
    if len(sep) != 1:
        raise ValueError("separator must be a single character")
    return [piece for piece in text.split(sep) if piece]


def find(haystack: str, needle: str) -> int | None:
    """Return the index of the first ``needle`` in ``haystack``, or None."""
    index = haystack.find(needle)
    return None if index < 0 else index


def substring(text: str, start: int, length: int) -> str:
    """Return ``length`` characters of ``text`` beginning at ``start``."""
    if start < 0 or length < 0 or start + length > len(text):
        raise ValueError(
            f"range {start}:{start + length} is outside a string of length {len(text)}"
        )
    return text[start:start + length]


def trim(text: str) -> str:
    """Strip spaces, newlines and tabs from both ends of ``text``."""
    return text.strip(_BLANKS)


def to_upper(char: str) -> str:
    """Upper-case a single ASCII letter; any other character is returned as is."""
    if "a" <= char <= "z":
        return chr(ord(char) - ord("a") + ord("A"))
    return char


def to_lower(char: str) -> str:
    """Lower-case a single ASCII letter; any other character is returned as is."""
    if "A" <= char <= "Z":
        return chr(ord(char) - ord("A") + ord("a"))
    return char


def upper(text: str) -> str:
    """Upper-case the ASCII letters of ``text``."""
    return "".join(to_upper(char) for char in text)


def number_length(n: int) -> int:
    """Count the decimal digits of ``n``, ignoring its sign."""
    return len(str(abs(n)))


def binary_string(num: int, size: int) -> str:
    """Render the low ``size`` bits of ``num``, most significant first, in groups of eight."""
    if size < 1:
        raise ValueError("size must be at least 1")
    bits = format(num & ((1 << size) - 1), f"0{size}b")
    return " ".join(bits[start:start + 8] for start in range(0, size, 8))