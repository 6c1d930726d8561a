# topmark:header:start
#
#   project      : ChatMark
#   file         : __init__.py
#   file_relpath : src/chatmark/placeholders/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Recipient-dependent key substitution."""

from __future__ import annotations

from chatmark.placeholders.model import Placeholder
from chatmark.placeholders.registry import PlaceholderRegistry, default_placeholders

__all__ = ["Placeholder", "PlaceholderRegistry", "default_placeholders"]
