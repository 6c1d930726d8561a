# topmark:header:start
#
#   project      : ChatMark
#   file         : table.py
#   file_relpath : src/chatmark/characters/table.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Per-character width table used to measure rendered chat text."""

from __future__ import annotations

from typing import TYPE_CHECKING

from chatmark.characters.info import DEFAULT_INFO, CharacterInfo, default_character_infos
from chatmark.characters.small_caps import small_caps_infos
from chatmark.config.logging import get_logger
from chatmark.core.text import is_blank

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from chatmark.config.logging import ChatmarkLogger

logger: ChatmarkLogger = get_logger(__name__)


def _single_char(value: str | None) -> str | None:
    """Return ``value`` if it is exactly one non-blank character, else None."""
    if value is None or len(value) != 1 or is_blank(value):
        return None
    return value


class CharacterWidthTable:
    """Mapping from glyph to `CharacterInfo`.

    The table is seeded with the default font widths and the small-caps glyphs.
    Characters without an entry measure as `DEFAULT_INFO`.

    Args:
        infos (Iterable[CharacterInfo] | None): Initial entries; ``None`` seeds the
            built-in widths.
        default (CharacterInfo): Fallback for unknown characters.
    """

    def __init__(
        self,
        infos: Iterable[CharacterInfo] | None = None,
        *,
        default: CharacterInfo = DEFAULT_INFO,
    ) -> None:
        self.default: CharacterInfo = default
        self._infos: dict[str, CharacterInfo] = {}
        if infos is None:
            infos = [*default_character_infos(), *small_caps_infos()]
        for info in infos:
            self._infos[info.char] = info

    def __len__(self) -> int:
        return len(self._infos)

    def __contains__(self, char: object) -> bool:
        return char in self._infos

    def __iter__(self) -> Iterator[CharacterInfo]:
        return iter(self._infos.values())

    def add_character(self, char: str, length: int) -> bool:
        """Register (or replace) the width of ``char``.

        Args:
            char (str): A single, non-blank character.
            length (int): Base width in font units.

        Returns:
            bool: True if the entry was stored; False for an invalid ``char``.
        """
        if _single_char(char) is None:
            logger.debug("Ignoring width for invalid character %r", char)
            return False
        self._infos[char] = CharacterInfo(char, int(length))
        logger.debug("Character %r width set to %d", char, length)
        return True

    def remove_characters(self, *chars: str) -> int:
        """Drop the entries for ``chars`` and return how many were removed."""
        removed: int = 0
        for char in chars:
            if _single_char(char) is not None and self._infos.pop(char, None) is not None:
                removed += 1
        return removed

    def get_info(self, char: str) -> CharacterInfo:
        """Return the width entry for ``char`` (the default glyph when unknown)."""
        if len(char) != 1:
            return self.default
        return self._infos.get(char, self.default)
