# topmark:header:start
#
#   project      : ChatMark
#   file         : __init__.py
#   file_relpath : src/chatmark/characters/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Glyph widths, small caps and line centering."""

from __future__ import annotations

from chatmark.characters.aligner import TextAligner
from chatmark.characters.info import DEFAULT_INFO, CharacterInfo
from chatmark.characters.small_caps import strip_accents, to_normal, to_small_caps
from chatmark.characters.table import CharacterWidthTable

__all__ = [
    "DEFAULT_INFO",
    "CharacterInfo",
    "CharacterWidthTable",
    "TextAligner",
    "strip_accents",
    "to_normal",
    "to_small_caps",
]
