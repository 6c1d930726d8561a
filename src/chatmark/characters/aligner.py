# topmark:header:start
#
#   project      : ChatMark
#   file         : aligner.py
#   file_relpath : src/chatmark/characters/aligner.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Centering of chat lines by measured glyph width.

A line is centered only when it starts with the center prefix (``[C]`` by
default). The prefix is removed, the remaining text is cleaned of everything
that does not render (color tokens, inline event markup, unicode escapes) and
measured glyph by glyph. Spaces are then prepended four units at a time until
the left half of the budget is filled.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from chatmark.chat.markup import strip_markup
from chatmark.colors.codec import strip_bukkit, translate_alternate_codes
from chatmark.colors.palette import COLOR_CHAR
from chatmark.config.logging import get_logger
from chatmark.constants import DEFAULT_CENTER_PREFIX, DEFAULT_CHAT_WIDTH
from chatmark.core.text import is_blank
from chatmark.pipeline.applier import StringApplier

if TYPE_CHECKING:
    from collections.abc import Sequence

    from chatmark.characters.table import CharacterWidthTable
    from chatmark.colors.codec import ColorCodec
    from chatmark.config.logging import ChatmarkLogger
    from chatmark.pipeline.contracts import TextOperator

logger: ChatmarkLogger = get_logger(__name__)

SPACE_WIDTH: int = 4


class TextAligner:
    """Compute left padding that visually centers a line.

    Args:
        table (CharacterWidthTable): Glyph widths.
        codec (ColorCodec): Used to strip color tokens before measuring.
        center_prefix (str): Marker that requests centering.
        cleaners (Sequence[TextOperator]): Extra operators run after color and
            markup stripping (the engine passes the unicode escape expansion).
    """

    def __init__(
        self,
        table: CharacterWidthTable,
        codec: ColorCodec,
        *,
        center_prefix: str = DEFAULT_CENTER_PREFIX,
        cleaners: Sequence[TextOperator] = (),
    ) -> None:
        self.table: CharacterWidthTable = table
        self.codec: ColorCodec = codec
        self.center_prefix: str = center_prefix
        self.cleaners: tuple[TextOperator, ...] = tuple(cleaners)

    def clean(self, text: str) -> str:
        """Return the part of ``text`` that takes up space on screen.

        Color tokens are removed; formatting codes are kept (as ``§`` codes)
        so the measurement can detect bold runs.
        """
        applier = StringApplier.simplified(text)
        applier.apply(self.codec.strip).apply(strip_bukkit)
        applier.apply(translate_alternate_codes).apply(strip_markup)
        for cleaner in self.cleaners:
            applier.apply(cleaner)
        return applier.result()

    def measure(self, text: str) -> int:
        """Return the rendered width of already-cleaned ``text``.

        ``§`` plus the following code character is zero width; ``l``/``L``
        turns bold on and any other code turns it off. Every glyph adds one
        unit of spacing.
        """
        size: int = 0
        after_code: bool = False
        bold: bool = False

        for char in text:
            if char == COLOR_CHAR:
                after_code = True
                continue
            if after_code:
                after_code = False
                bold = char in "lL"
                continue

            info = self.table.get_info(char)
            size += (info.bold_length if bold else info.length) + 1
        return size

    def align(self, text: str, limit: int = DEFAULT_CHAT_WIDTH) -> str:
        """Center ``text`` if it starts with the center prefix.

        Args:
            text (str): Line to center.
            limit (int): Half-width budget in font units.

        Returns:
            str: Padding plus the prefix-free text, or ``text`` unchanged when no
            centering was requested.
        """
        if is_blank(text):
            return text
        prefix: str = self.center_prefix
        if is_blank(prefix) or not text.startswith(prefix):
            return text

        before: str = text.replace(prefix, "")
        size: int = self.measure(self.clean(before))

        to_compensate: int = limit - size // 2
        compensated: int = 0
        spaces: int = 0
        while compensated < to_compensate:
            spaces += 1
            compensated += SPACE_WIDTH

        logger.trace("aligned width=%d padding=%d", size, spaces)
        return " " * spaces + before

