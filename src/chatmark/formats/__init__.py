# topmark:header:start
#
#   project      : ChatMark
#   file         : __init__.py
#   file_relpath : src/chatmark/formats/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Named, regex-triggered text transforms and their registry."""

from __future__ import annotations

from chatmark.formats.base import ContextualFormat, Format, PlainFormat, TextFormat
from chatmark.formats.builtins import BLANK_SPACES, CHARACTER, SMALL_CAPS
from chatmark.formats.registry import FormatRegistry

__all__ = [
    "BLANK_SPACES",
    "CHARACTER",
    "SMALL_CAPS",
    "ContextualFormat",
    "Format",
    "FormatRegistry",
    "PlainFormat",
    "TextFormat",
]
