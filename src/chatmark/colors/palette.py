# topmark:header:start
#
#   project      : ChatMark
#   file         : palette.py
#   file_relpath : src/chatmark/colors/palette.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""RGB values, the legacy 16-color palette and native color escapes.

Clients with RGB support understand the escape ``§x§r§r§g§g§b§b`` (six
lowercase hex digits, each preceded by ``§``). Older clients only know the 16
legacy colors ``§0``..``§f``; for them an RGB value is replaced by the
nearest palette entry (squared RGB distance, first entry wins on ties).
"""

from __future__ import annotations

from typing import Final, NamedTuple

COLOR_CHAR: Final[str] = "§"
ALT_COLOR_CHAR: Final[str] = "&"

# Legacy code -> RGB, in code order.
LEGACY_COLORS: Final[dict[str, int]] = {
    "0": 0x000000,
    "1": 0x0000AA,
    "2": 0x00AA00,
    "3": 0x00AAAA,
    "4": 0xAA0000,
    "5": 0xAA00AA,
    "6": 0xFFAA00,
    "7": 0xAAAAAA,
    "8": 0x555555,
    "9": 0x5555FF,
    "a": 0x55FF55,
    "b": 0x55FFFF,
    "c": 0xFF5555,
    "d": 0xFF55FF,
    "e": 0xFFFF55,
    "f": 0xFFFFFF,
}


class RGB(NamedTuple):
    """An 8-bit-per-channel color."""

    red: int
    green: int
    blue: int

    @classmethod
    def from_int(cls, value: int) -> RGB:
        """Build a color from a packed ``0xRRGGBB`` integer."""
        return cls((value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF)

    @classmethod
    def from_hex(cls, digits: str) -> RGB:
        """Build a color from six hex digits, with or without a leading ``#``."""
        return cls.from_int(int(digits.lstrip("#"), 16))

    def to_hex(self) -> str:
        """Return the six lowercase hex digits of this color."""
        return f"{self.red:02x}{self.green:02x}{self.blue:02x}"

    def distance(self, other: RGB) -> int:
        """Return the squared euclidean distance to ``other``."""
        return (
            (self.red - other.red) ** 2
            + (self.green - other.green) ** 2
            + (self.blue - other.blue) ** 2
        )


_LEGACY_RGB: Final[tuple[tuple[str, RGB], ...]] = tuple(
    (code, RGB.from_int(value)) for code, value in LEGACY_COLORS.items()
)


def nearest_legacy(color: RGB) -> str:
    """Return the legacy code (``0``-``9``, ``a``-``f``) closest to ``color``."""
    best_code, best_rgb = _LEGACY_RGB[0]
    best: int = color.distance(best_rgb)
    for code, rgb in _LEGACY_RGB[1:]:
        d = color.distance(rgb)
        if d < best:
            best_code, best = code, d
    return best_code


def escape(color: RGB, legacy: bool) -> str:
    """Return the in-text escape selecting ``color``.

    Args:
        color (RGB): The color to select.
        legacy (bool): If True, emit the nearest legacy code instead of RGB.

    Returns:
        str: ``§c``-style escape when ``legacy``, else ``§x§r§r§g§g§b§b``.
    """
    if legacy:
        return COLOR_CHAR + nearest_legacy(color)
    return COLOR_CHAR + "x" + "".join(COLOR_CHAR + d for d in color.to_hex())


def escape_hex(digits: str, legacy: bool) -> str:
    """Shorthand for ``escape(RGB.from_hex(digits), legacy)``."""
    return escape(RGB.from_hex(digits), legacy)
