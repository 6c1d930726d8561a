# topmark:header:start
#
#   project      : ChatMark
#   file         : codec.py
#   file_relpath : src/chatmark/colors/codec.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Color codec: colorize and strip chat text.

`ColorCodec` owns an ordered list of `ColorPattern` syntaxes. Patterns are
applied in registration order, each as an independent pass over the evolving
string; once a span has been consumed by one pattern it is gone, so
overlapping syntaxes resolve in favor of the earlier pattern.

Legacy ``&`` codes are translated to ``§`` after the patterns have run.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Final

from chatmark.colors.client import is_legacy
from chatmark.colors.palette import COLOR_CHAR
from chatmark.colors.patterns import HEX, default_patterns
from chatmark.config.logging import get_logger
from chatmark.constants import DEFAULT_SERVER_VERSION
from chatmark.core.text import is_blank

if TYPE_CHECKING:
    from collections.abc import Iterable

    from chatmark.colors.patterns import ColorPattern
    from chatmark.config.logging import ChatmarkLogger
    from chatmark.recipient import Recipient

logger: ChatmarkLogger = get_logger(__name__)

_ALT_CODE: Final[re.Pattern[str]] = re.compile(r"&([0-9a-fk-orx])", re.IGNORECASE)
_BUKKIT_CODE: Final[re.Pattern[str]] = re.compile(r"[&§][a-f\dx]", re.IGNORECASE)
_SPECIAL_CODE: Final[re.Pattern[str]] = re.compile(r"[&§][k-orx]", re.IGNORECASE)

# Any color-selecting token: legacy codes plus every single-color syntax.
COLOR_PATTERN: Final[re.Pattern[str]] = re.compile(
    rf"[&§][a-fk-or\d]|[{{]#{HEX}[}}]|<#{HEX}>|%#{HEX}%|\[#{HEX}]|&?#{HEX}|&x{HEX}",
    re.IGNORECASE,
)


def translate_alternate_codes(text: str) -> str:
    """Turn ``&`` codes (``&a``, ``&l``, ``&x``...) into ``§`` codes."""
    return _ALT_CODE.sub(lambda m: COLOR_CHAR + m.group(1).lower(), text)


def strip_bukkit(text: str) -> str:
    """Remove legacy color codes (``&0``-``&f``, ``§x``...)."""
    if is_blank(text):
        return text
    return _BUKKIT_CODE.sub("", text)


def strip_special(text: str) -> str:
    """Remove formatting codes (``&k``-``&o``, ``&r``, ``&x``)."""
    if is_blank(text):
        return text
    return _SPECIAL_CODE.sub("", text)


def starts_with_color(text: str) -> bool:
    """Return True if ``text`` begins with a color or formatting token."""
    if is_blank(text):
        return False
    return COLOR_PATTERN.match(text) is not None


def last_color(text: str) -> str | None:
    """Return the last color or formatting token found in ``text``, if any."""
    found: str | None = None
    for match in COLOR_PATTERN.finditer(text):
        found = match.group()
    return found


class ColorCodec:
    """Ordered set of color syntaxes with apply/strip operations.

    Args:
        patterns (Iterable[ColorPattern] | None): Syntaxes in application order.
            Defaults to `chatmark.colors.patterns.default_patterns`.
        server_version (int): Server major version; below 16 every target is
            treated as legacy.
    """

    def __init__(
        self,
        patterns: Iterable[ColorPattern] | None = None,
        *,
        server_version: int = DEFAULT_SERVER_VERSION,
    ) -> None:
        self._patterns: list[ColorPattern] = (
            list(patterns) if patterns is not None else default_patterns()
        )
        self.server_version: int = server_version

    @property
    def patterns(self) -> tuple[ColorPattern, ...]:
        """The registered syntaxes in application order."""
        return tuple(self._patterns)

    def add_pattern(self, pattern: ColorPattern) -> None:
        """Register an extra syntax, applied after the existing ones."""
        self._patterns.append(pattern)

    def apply(self, text: str, legacy: bool) -> str:
        """Replace every color token with native escapes.

        Args:
            text (str): Input text.
            legacy (bool): Downsample RGB colors to the 16 legacy colors.

        Returns:
            str: Text with tokens replaced; ``&`` codes are left untouched.
        """
        for pattern in self._patterns:
            text = pattern.apply(text, legacy)
        return text

    def strip(self, text: str) -> str:
        """Remove every color token, keeping gradient and rainbow bodies."""
        for pattern in self._patterns:
            text = pattern.strip(text)
        return text

    def is_legacy(self, recipient: Recipient | None) -> bool:
        """Return True if ``recipient`` (or the server) lacks RGB support."""
        return is_legacy(recipient, self.server_version)

    def colorize(self, text: str, recipient: Recipient | None = None) -> str:
        """Apply every syntax for ``recipient``'s capability, then ``&`` codes.

        Args:
            text (str): Input text.
            recipient (Recipient | None): Target deciding legacy vs RGB output.

        Returns:
            str: Text ready for a client.
        """
        legacy = self.is_legacy(recipient)
        result = translate_alternate_codes(self.apply(text, legacy))
        logger.trace("colorize(legacy=%s) %r -> %r", legacy, text, result)
        return result

    def strip_rgb(self, text: str) -> str:
        """Remove every RGB color token (same as `strip`)."""
        return self.strip(text)

    def strip_all(self, text: str) -> str:
        """Remove legacy codes, formatting codes and every color token."""
        return self.strip(strip_special(strip_bukkit(text)))
