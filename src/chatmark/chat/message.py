# topmark:header:start
#
#   project      : ChatMark
#   file         : message.py
#   file_relpath : src/chatmark/chat/message.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Compiled messages: the immutable output of `ChatComponent.compile`."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from chatmark.chat.click import ClickEvent


@dataclass(frozen=True)
class CompiledMessage:
    """Final text of one component plus its optional interactions.

    Attributes:
        text (str): Colorized text using ``§`` codes.
        click (ClickEvent | None): Click action, with placeholders resolved.
        hover (tuple[str, ...]): Colorized hover lines (empty for no hover).
    """

    text: str
    click: ClickEvent | None = None
    hover: tuple[str, ...] = ()

    def __str__(self) -> str:
        return self.to_legacy()

    @property
    def hover_text(self) -> str:
        """Hover lines joined with newlines (no trailing newline)."""
        return "\n".join(self.hover)

    def to_legacy(self) -> str:
        """Return the flat text, dropping click and hover metadata."""
        return self.text

    def to_json(self) -> dict[str, Any]:
        """Return the raw-JSON chat component for this message."""
        node: dict[str, Any] = {"text": self.text}
        if self.click is not None and not self.click.is_empty:
            node["clickEvent"] = {"action": self.click.action.key, "value": self.click.payload}
        if self.hover:
            node["hoverEvent"] = {"action": "show_text", "contents": self.hover_text}
        return node


def components_to_json(messages: tuple[CompiledMessage, ...] | list[CompiledMessage]) -> str:
    """Serialize several compiled messages as one raw-JSON text component.

    The messages become the ``extra`` children of an empty root node.
    """
    if not messages:
        return json.dumps({"text": ""}, ensure_ascii=False)
    root = {"text": "", "extra": [m.to_json() for m in messages]}
    return json.dumps(root, ensure_ascii=False)
