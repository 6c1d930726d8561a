# topmark:header:start
#
#   project      : ChatMark
#   file         : contracts.py
#   file_relpath : src/chatmark/chat/contracts.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""What the chat layer needs from the engine that owns it."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from chatmark.recipient import RecipientContext


@runtime_checkable
class MessageRenderer(Protocol):
    """Text services used to compile components.

    `chatmark.engine.ChatEngine` is the production implementation.
    """

    @property
    def line_separator(self) -> str:
        """Token separating hover lines."""
        ...

    def colorize(self, target: RecipientContext, parser: RecipientContext, text: str) -> str:
        """Resolve placeholders, formats and colors for ``target``."""
        ...

    def replace(self, parser: RecipientContext, text: str) -> str:
        """Resolve placeholders and unicode escapes only."""
        ...

    def preformat(self, text: str) -> str:
        """Prepare a raw line before it is split into components."""
        ...
