# topmark:header:start
#
#   project      : ChatMark
#   file         : __init__.py
#   file_relpath : src/chatmark/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration for ChatMark: TOML loading, runtime defaults and logging."""

from __future__ import annotations

from chatmark.config.model import Config, MutableConfig

__all__ = ["Config", "MutableConfig"]
