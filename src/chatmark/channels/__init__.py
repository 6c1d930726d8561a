# topmark:header:start
#
#   project      : ChatMark
#   file         : __init__.py
#   file_relpath : src/chatmark/channels/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Leading channel markers such as ``[action_bar]``."""

from __future__ import annotations

from chatmark.channels.model import Channel, ChannelFlag, default_channels
from chatmark.channels.registry import ChannelRegistry

__all__ = ["Channel", "ChannelFlag", "ChannelRegistry", "default_channels"]
