# topmark:header:start
#
#   project      : ChatMark
#   file         : small_caps.py
#   file_relpath : src/chatmark/characters/small_caps.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Small-caps letter conversion.

``to_small_caps`` first strips accents (NFKD decomposition, combining marks
dropped) and then maps every ASCII letter, whatever its case, to its small
capital glyph. ``to_normal`` maps those glyphs back to lowercase letters.
"""

from __future__ import annotations

import unicodedata
from typing import Final

from chatmark.characters.info import CharacterInfo
from chatmark.core.text import is_blank

SMALL_CAPS: Final[dict[str, str]] = {
    "a": "ᴀ",
    "b": "ʙ",
    "c": "ᴄ",
    "d": "ᴅ",
    "e": "ᴇ",
    "f": "ғ",
    "g": "ɢ",
    "h": "ʜ",
    "i": "ɪ",
    "j": "ᴊ",
    "k": "ᴋ",
    "l": "ʟ",
    "m": "ᴍ",
    "n": "ɴ",
    "o": "ᴏ",
    "p": "ᴘ",
    "q": "ǫ",
    "r": "ʀ",
    "s": "s",
    "t": "ᴛ",
    "u": "ᴜ",
    "v": "ᴠ",
    "w": "ᴡ",
    "x": "x",
    "y": "ʏ",
    "z": "ᴢ",
}

# Glyphs that share their code point with a plain letter ("s", "x") are left
# out so that `to_normal` does not touch ordinary text.
_NORMAL: Final[dict[str, str]] = {v: k for k, v in SMALL_CAPS.items() if v != k}

_TO_SMALL: Final[dict[int, str]] = {
    **{ord(k): v for k, v in SMALL_CAPS.items()},
    **{ord(k.upper()): v for k, v in SMALL_CAPS.items()},
}


def strip_accents(text: str) -> str:
    """Return ``text`` without combining marks (NFKD based)."""
    if is_blank(text):
        return text
    decomposed = unicodedata.normalize("NFKD", text)
    return "".join(c for c in decomposed if not unicodedata.category(c).startswith("M"))


def to_small_caps(text: str) -> str:
    """Convert letters of ``text`` to small-caps glyphs."""
    if is_blank(text):
        return text
    return strip_accents(text).translate(_TO_SMALL)


def to_normal(text: str) -> str:
    """Convert small-caps glyphs of ``text`` back to lowercase letters."""
    if is_blank(text):
        return text
    return "".join(_NORMAL.get(c, c) for c in text)


def is_small_caps(char: str) -> bool:
    """Return True if ``char`` is one of the small-caps glyphs."""
    return char in _NORMAL


def small_caps_infos() -> list[CharacterInfo]:
    """Return widths for the small-caps glyphs (5 units, ``ɪ`` is 3)."""
    return [CharacterInfo(glyph, 3 if glyph == "ɪ" else 5) for glyph in _NORMAL]
