# topmark:header:start
#
#   project      : ChatMark
#   file         : multi.py
#   file_relpath : src/chatmark/chat/multi.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Messages made of several components.

A raw line is split into components at every inline event block
(``<hover:"..."|run:"...">text</text>``) and at every bare URL. Each part
inherits the last color of the part before it unless it sets its own.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from chatmark.chat.click import ClickAction, ClickEvent
from chatmark.chat.component import ChatComponent
from chatmark.chat.markup import MARKUP_PATTERN, URL_PATTERN, normalize_url
from chatmark.colors.codec import last_color, starts_with_color
from chatmark.config.logging import get_logger
from chatmark.core.errors import InvalidInputError

if TYPE_CHECKING:
    import re
    from collections.abc import Sequence

    from chatmark.chat.contracts import MessageRenderer
    from chatmark.chat.message import CompiledMessage
    from chatmark.config.logging import ChatmarkLogger
    from chatmark.recipient import RecipientContext

logger: ChatmarkLogger = get_logger(__name__)


class MultiComponent:
    """Ordered list of `ChatComponent` parts built from raw lines.

    Args:
        renderer (MessageRenderer): Engine used to prepare and compile parts.
        text (str | None): First line to append.
        parse_urls (bool): Split bare URLs into their own open-url parts.
    """

    def __init__(
        self,
        renderer: MessageRenderer,
        text: str | None = None,
        *,
        parse_urls: bool = True,
    ) -> None:
        self.renderer: MessageRenderer = renderer
        self.parse_urls: bool = parse_urls
        self._parts: list[ChatComponent] = []
        if text is not None:
            self.append(text)

    def __len__(self) -> int:
        return len(self._parts)

    @property
    def parts(self) -> tuple[ChatComponent, ...]:
        return tuple(self._parts)

    def _add(self, text: str) -> ChatComponent:
        if self._parts and not starts_with_color(text):
            color = last_color(self._parts[-1].text)
            if color:
                text = color + text
        part = ChatComponent.segment(self.renderer, text, parse_urls=self.parse_urls)
        self._parts.append(part)
        return part

    def _add_plain(self, text: str) -> None:
        last = 0
        for match in URL_PATTERN.finditer(text):
            if match.start() > last:
                self._add(text[last : match.start()])
            url = match.group()
            part = self._add(url)
            if self.parse_urls:
                part.click = ClickEvent(ClickAction.OPEN_URL, normalize_url(url))
            last = match.end()
        if last < len(text):
            self._add(text[last:])

    def _add_markup(self, match: re.Match[str]) -> None:
        part = self._add(match.group("text"))
        pairs = ((match.group("k1"), match.group("v1")), (match.group("k2"), match.group("v2")))
        for key, value in pairs:
            if key is None:
                continue
            if key.lower() == "hover":
                part.set_hover(value)
            else:
                part.set_click(ClickAction.from_name(key), value)

    def append(self, text: str) -> MultiComponent:
        """Split ``text`` into parts and add them after the existing ones.

        The line is preformatted by the renderer (old event syntax, small caps
        and centering) before splitting. An empty string adds one empty part.
        """
        if text == "":
            self._add(text)
            return self

        line = self.renderer.preformat(text)
        last = 0
        for match in MARKUP_PATTERN.finditer(line):
            if match.start() > last:
                self._add_plain(line[last : match.start()])
            self._add_markup(match)
            last = match.end()
        if last < len(line):
            self._add_plain(line[last:])
        logger.trace("multi component now has %d part(s)", len(self._parts))
        return self

    def set_click(self, action: ClickAction | str, payload: str | None = None) -> MultiComponent:
        """Set the click of the last part."""
        if self._parts:
            self._parts[-1].set_click(action, payload)
        return self

    def set_hover(self, lines: str | Sequence[str]) -> MultiComponent:
        """Set the hover of the last part."""
        if self._parts:
            self._parts[-1].set_hover(lines)
        return self

    def set_click_to_all(
        self, action: ClickAction | str, payload: str | None = None
    ) -> MultiComponent:
        """Set the same click on every part."""
        for part in self._parts:
            part.set_click(action, payload)
        return self

    def set_hover_to_all(self, lines: str | Sequence[str]) -> MultiComponent:
        """Set the same hover on every part."""
        for part in self._parts:
            part.set_hover(lines)
        return self

    def compile(self, recipient: RecipientContext = None) -> tuple[CompiledMessage, ...]:
        """Compile every part for ``recipient``.

        Raises:
            InvalidInputError: If nothing was appended.
        """
        if not self._parts:
            raise InvalidInputError("Cannot compile an empty message")
        return tuple(part.compile(recipient) for part in self._parts)

    def to_markup(self) -> str:
        """Return the whole message in inline markup form."""
        return "".join(part.to_markup() for part in self._parts)
