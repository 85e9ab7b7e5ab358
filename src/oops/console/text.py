"""Rendering of '&'-prefixed legacy colour codes with rich."""

from __future__ import annotations

from rich.style import Style
from rich.text import Text

COLOR_CODES = {
    "0": "black",
    "1": "blue",
    "2": "green",
    "3": "cyan",
    "4": "red",
    "5": "magenta",
    "6": "yellow",
    "7": "grey70",
    "8": "grey42",
    "9": "bright_blue",
    "a": "bright_green",
    "b": "bright_cyan",
    "c": "bright_red",
    "d": "bright_magenta",
    "e": "bright_yellow",
    "f": "bright_white",
}

FORMAT_CODES = {
    "l": "bold",
    "m": "strike",
    "n": "underline",
    "o": "italic",
}


def legacy_text(message: str, char: str = "&") -> Text:
    """Convert a message with legacy codes into styled rich Text.

    A colour code resets any formatting, ``r`` resets everything and ``k``
    (obfuscated) is dropped. Unknown codes are left as typed.
    """
    text = Text()
    style = Style()
    head, *pieces = message.split(char)
    if head:
        text.append(head, style)

    for piece in pieces:
        code = piece[:1].lower()
        if code in COLOR_CODES:
            style = Style(color=COLOR_CODES[code])
            piece = piece[1:]
        elif code in FORMAT_CODES:
            style = style + Style(**{FORMAT_CODES[code]: True})
            piece = piece[1:]
        elif code == "r":
            style = Style()
            piece = piece[1:]
        elif code == "k":
            piece = piece[1:]
        else:
            piece = char + piece
        if piece:
            text.append(piece, style)

    return text


def strip_codes(message: str, char: str = "&") -> str:
    """Plain text of a message with its codes removed."""
    return legacy_text(message, char).plain
