# topmark:header:start
#
#   project      : ChatMark
#   file         : __init__.py
#   file_relpath : src/chatmark/colors/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Color token parsing, colorization and stripping."""

from __future__ import annotations

from chatmark.colors.codec import (
    COLOR_PATTERN,
    ColorCodec,
    last_color,
    starts_with_color,
    strip_bukkit,
    strip_special,
    translate_alternate_codes,
)
from chatmark.colors.palette import COLOR_CHAR, RGB, escape, nearest_legacy
from chatmark.colors.patterns import ColorPattern, Gradient, Rainbow, SingleColor

__all__ = [
    "COLOR_CHAR",
    "COLOR_PATTERN",
    "RGB",
    "ColorCodec",
    "ColorPattern",
    "Gradient",
    "Rainbow",
    "SingleColor",
    "escape",
    "last_color",
    "nearest_legacy",
    "starts_with_color",
    "strip_bukkit",
    "strip_special",
    "translate_alternate_codes",
]
