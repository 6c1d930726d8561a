# topmark:header:start
#
#   project      : ChatMark
#   file         : info.py
#   file_relpath : src/chatmark/characters/info.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Glyph width metadata for the default chat font."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final


@dataclass(frozen=True)
class CharacterInfo:
    """Width of one glyph in font units.

    Attributes:
        char (str): The glyph (a single character).
        length (int): Base width.
    """

    char: str
    length: int

    @property
    def bold_length(self) -> int:
        """Width when rendered bold: one unit wider, except for a space."""
        if self.char == " ":
            return self.length
        return self.length + 1


DEFAULT_INFO: Final[CharacterInfo] = CharacterInfo("a", 5)

_NARROW: Final[dict[int, str]] = {
    1: "il!:;'|.,",
    2: "`",
    3: 'I[]" ',
    4: "fkt(){}<>",
    6: "@",
}

# ASCII letters, digits and common punctuation shipped with the table.
_STANDARD: Final[str] = (
    "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789"
    "!@#$%^&*()-_+={}[]:;\"'<>?/\\|~`., "
)


def default_character_infos() -> list[CharacterInfo]:
    """Return the built-in glyph widths (5 units unless listed as narrower/wider)."""
    widths: dict[str, int] = {c: 5 for c in _STANDARD}
    for width, chars in _NARROW.items():
        for c in chars:
            widths[c] = width
    return [CharacterInfo(c, w) for c, w in widths.items()]
