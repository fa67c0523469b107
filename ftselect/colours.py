"""Named colour escape sequences and ``{name}`` markup tokens."""

from __future__ import annotations

COLOURS: dict[str, str] = {
    "red": "\033[0;31m",
    "green": "\033[0;32m",
    "yellow": "\033[0;33m",
    "blue": "\033[0;34m",
    "magenta": "\033[0;35m",
    "cyan": "\033[0;36m",
    "eoc": "\033[0m",
}


def colour_code(name: str) -> str | None:
    """Return the escape sequence for a colour name, or None if unknown."""
    return COLOURS.get(name)


def colour_token(text: str) -> tuple[str, int]:
    """Expand a ``{name}`` token at the start of ``text``.

    Returns the replacement and the number of characters consumed. An unknown
    name is kept literally, braces included.
    """
    if not text.startswith("{"):
        raise ValueError("colour token must start with '{'")
    close = text.find("}", 1)
    if close < 0:
        return text, len(text)
    code = colour_code(text[1:close])
    if code is None:
        return text[:close + 1], close + 1
    return code, close + 1