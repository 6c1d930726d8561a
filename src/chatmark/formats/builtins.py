# topmark:header:start
#
#   project      : ChatMark
#   file         : builtins.py
#   file_relpath : src/chatmark/formats/builtins.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Built-in formats seeded by `FormatRegistry.set_defaults`."""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

from chatmark.characters.small_caps import to_small_caps
from chatmark.core.text import is_blank
from chatmark.formats.base import ContextualFormat, TextFormat

if TYPE_CHECKING:
    import re

    from chatmark.formats.base import Format
    from chatmark.recipient import Recipient

SMALL_CAPS: Final[str] = "SMALL_CAPS"
CHARACTER: Final[str] = "CHARACTER"
BLANK_SPACES: Final[str] = "BLANK_SPACES"


def _small_caps_body(match: re.Match[str]) -> str:
    return match.group(2)


def _code_point(match: re.Match[str]) -> str:
    return chr(int(match.group(1), 16))


def small_caps_format() -> TextFormat[str]:
    """``<small_caps>text</small_caps>`` or ``<sc>text</sc>`` to small-caps glyphs."""
    fmt: TextFormat[str]

    def _apply(text: str) -> str:
        if is_blank(text):
            return text
        return fmt.pattern.sub(lambda m: to_small_caps(m.group(2)), text)

    fmt = TextFormat(
        regex=r"(?i)<(small_caps|sc)>(.+?)</(small_caps|sc)>",
        function=_apply,
        stripper=_small_caps_body,
    )
    return fmt


def character_format() -> TextFormat[str]:
    """``<U:XXXX>`` to the character with that (hexadecimal) code point."""
    fmt: TextFormat[str]

    def _apply(text: str) -> str:
        if is_blank(text):
            return text
        return fmt.pattern.sub(_code_point, text)

    fmt = TextFormat(
        regex=r"<[Uu]:([a-fA-F\d]{4})>",
        function=_apply,
        stripper=_code_point,
    )
    return fmt


def blank_spaces_format() -> ContextualFormat[int]:
    """``<add_space:N>``: number of blank lines to send before the message.

    Evaluates to 0 when no (non-``None``) recipient is given, the text is
    blank, or the marker is absent.
    """
    fmt: ContextualFormat[int]

    def _apply(recipients: tuple[Recipient | None, ...], text: str) -> int:
        if is_blank(text) or not any(r is not None for r in recipients):
            return 0
        match = fmt.pattern.search(text)
        if match is None:
            return 0
        return int(match.group(1))

    fmt = ContextualFormat(regex=r"(?i)<add_space:(\d+)>", function=_apply)
    return fmt


def default_formats() -> dict[str, Format[object]]:
    """Return the built-in formats keyed by identifier, in registration order."""
    return {
        SMALL_CAPS: small_caps_format(),
        CHARACTER: character_format(),
        BLANK_SPACES: blank_spaces_format(),
    }
