# topmark:header:start
#
#   project      : ChatMark
#   file         : component.py
#   file_relpath : src/chatmark/chat/component.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Single chat component: text plus optional click and hover."""

from __future__ import annotations

from typing import TYPE_CHECKING

from chatmark.chat.click import ClickAction, ClickEvent, parse_hover
from chatmark.chat.markup import URL_PATTERN, normalize_url
from chatmark.chat.message import CompiledMessage
from chatmark.config.logging import get_logger
from chatmark.core.errors import InvalidInputError
from chatmark.core.text import is_blank

if TYPE_CHECKING:
    from collections.abc import Sequence

    from chatmark.chat.contracts import MessageRenderer
    from chatmark.config.logging import ChatmarkLogger
    from chatmark.recipient import RecipientContext

logger: ChatmarkLogger = get_logger(__name__)


class ChatComponent:
    """Mutable builder for one compiled message.

    Args:
        renderer (MessageRenderer): Engine used to colorize and resolve text.
        text (str | None): Initial message; see `set_message`.
        parse_urls (bool): Attach an open-url click when the text holds a URL and
            no click was set explicitly.
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
        self._text: str = ""
        self.click: ClickEvent | None = None
        self.hover: tuple[str, ...] = ()
        if text is not None:
            self.set_message(text)

    @classmethod
    def segment(
        cls, renderer: MessageRenderer, text: str, *, parse_urls: bool = True
    ) -> ChatComponent:
        """Build a component without the blank-text check (used for message parts)."""
        component = cls(renderer, parse_urls=parse_urls)
        component._text = text
        return component

    @property
    def text(self) -> str:
        return self._text

    def set_message(self, text: str) -> ChatComponent:
        """Set the message text.

        Raises:
            InvalidInputError: If ``text`` is blank.
        """
        if is_blank(text):
            raise InvalidInputError("Message text must not be blank")
        self._text = text
        return self

    def set_click(self, action: ClickAction | str, payload: str | None = None) -> ChatComponent:
        """Attach a click event.

        ``set_click("run:/spawn")`` parses the markup form; with a ``payload``
        the first argument is the action (a member or any accepted alias).
        Events with a blank payload are ignored.
        """
        if payload is None:
            event = ClickEvent.parse(str(action))
        else:
            kind = action if isinstance(action, ClickAction) else ClickAction.from_name(action)
            event = ClickEvent(kind, payload)
        if not event.is_empty:
            self.click = event
        return self

    def set_hover(self, lines: str | Sequence[str]) -> ChatComponent:
        """Attach hover lines.

        A string is unwrapped from ``hover:"..."`` markup when present and split
        on the renderer's line separator.
        """
        if isinstance(lines, str):
            parsed = parse_hover(lines, self.renderer.line_separator)
        else:
            parsed = tuple(lines)
        if parsed and any(not is_blank(line) for line in parsed):
            self.hover = parsed
        return self

    def effective_click(self) -> ClickEvent | None:
        """The explicit click, else an open-url click for the first URL in the text."""
        if self.click is not None or not self.parse_urls:
            return self.click
        match = URL_PATTERN.search(self._text)
        if match is None:
            return None
        return ClickEvent(ClickAction.OPEN_URL, normalize_url(match.group()))

    def compile(self, recipient: RecipientContext = None) -> CompiledMessage:
        """Materialize the component for ``recipient``.

        The text and every hover line are colorized independently; the click
        payload has its placeholders resolved.
        """
        renderer = self.renderer
        text = renderer.colorize(recipient, recipient, self._text)

        click = self.effective_click()
        if click is not None:
            click = ClickEvent(click.action, renderer.replace(recipient, click.payload))

        hover = tuple(renderer.colorize(recipient, recipient, line) for line in self.hover)
        logger.trace("compiled component %r (click=%s, hover=%d)", text, click, len(hover))
        return CompiledMessage(text, click, hover)

    def to_markup(self, separator: str | None = None) -> str:
        """Return the component in inline markup form (plain text when it has no events)."""
        sep = self.renderer.line_separator if separator is None else separator
        events: list[str] = []
        if self.hover:
            events.append(f'hover:"{sep.join(self.hover)}"')
        if self.click is not None:
            events.append(self.click.to_markup())
        if not events:
            return self._text
        return f"<{'|'.join(events)}>{self._text}</text>"

    def __repr__(self) -> str:
        return f"ChatComponent(text={self._text!r}, click={self.click!r}, hover={self.hover!r})"
