# topmark:header:start
#
#   project      : ChatMark
#   file         : __init__.py
#   file_relpath : src/chatmark/chat/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Message compilation: click/hover events, URL detection and multi-part messages."""

from __future__ import annotations

from chatmark.chat.click import ClickAction, ClickEvent
from chatmark.chat.component import ChatComponent
from chatmark.chat.contracts import MessageRenderer
from chatmark.chat.message import CompiledMessage, components_to_json
from chatmark.chat.multi import MultiComponent

__all__ = [
    "ChatComponent",
    "ClickAction",
    "ClickEvent",
    "CompiledMessage",
    "MessageRenderer",
    "MultiComponent",
    "components_to_json",
]
