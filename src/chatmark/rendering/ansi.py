# topmark:header:start
#
#   project      : ChatMark
#   file         : ansi.py
#   file_relpath : src/chatmark/rendering/ansi.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Terminal preview of ``§``-coded chat text.

Chat clients interpret ``§`` codes themselves; a terminal does not. This
module walks the codes of a legacy string and re-emits every run of plain
text through a yachalk style, so `chatmark render --format ansi` shows
roughly what a player would see.

Code semantics follow the chat client: a color code (legacy or ``§x`` RGB)
resets the formatting flags, ``§r`` resets everything, and ``§k`` is shown
as-is because terminals cannot obfuscate.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Final

from yachalk import chalk

from chatmark.colors.palette import COLOR_CHAR, LEGACY_COLORS, RGB
from chatmark.config.logging import get_logger

if TYPE_CHECKING:
    from chatmark.config.logging import ChatmarkLogger

logger: ChatmarkLogger = get_logger(__name__)

_CODE: Final[re.Pattern[str]] = re.compile(
    rf"{COLOR_CHAR}x((?:{COLOR_CHAR}[0-9a-f]){{6}})|{COLOR_CHAR}([0-9a-fk-or])",
    re.IGNORECASE,
)


@dataclass(frozen=True)
class _Style:
    color: RGB | None = None
    bold: bool = False
    italic: bool = False
    underline: bool = False
    strikethrough: bool = False

    def paint(self, text: str) -> str:
        flags = [
            name
            for name, enabled in (
                ("bold", self.bold),
                ("italic", self.italic),
                ("underline", self.underline),
                ("strikethrough", self.strikethrough),
            )
            if enabled
        ]
        if not text or (self.color is None and not flags):
            return text
        if self.color is not None:
            builder = chalk.hex(f"#{self.color.to_hex()}")
        else:
            builder = getattr(chalk, flags.pop(0))
        for name in flags:
            builder = getattr(builder, name)
        return builder(text)


def _next_style(style: _Style, match: re.Match[str]) -> _Style:
    rgb_digits, code = match.group(1), match.group(2)
    if rgb_digits is not None:
        return _Style(color=RGB.from_hex(rgb_digits.replace(COLOR_CHAR, "")))
    code = code.lower()
    if code in LEGACY_COLORS:
        return _Style(color=RGB.from_int(LEGACY_COLORS[code]))
    if code == "r":
        return _Style()
    if code == "l":
        return replace(style, bold=True)
    if code == "o":
        return replace(style, italic=True)
    if code == "n":
        return replace(style, underline=True)
    if code == "m":
        return replace(style, strikethrough=True)
    return style


def to_ansi(text: str) -> str:
    """Return ``text`` with its ``§`` codes turned into ANSI styles.

    Args:
        text (str): Legacy chat text (already colorized).

    Returns:
        str: The same visible text, styled with yachalk. When yachalk detects
        a terminal without color support the result carries no escapes.
    """
    out: list[str] = []
    style = _Style()
    pos = 0
    for match in _CODE.finditer(text):
        out.append(style.paint(text[pos : match.start()]))
        style = _next_style(style, match)
        pos = match.end()
    out.append(style.paint(text[pos:]))
    logger.trace("ANSI preview of %r", text)
    return "".join(out)
