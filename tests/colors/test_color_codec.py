# topmark:header:start
#
#   project      : ChatMark
#   file         : test_color_codec.py
#   file_relpath : tests/colors/test_color_codec.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Unit tests for `chatmark.colors.codec`.

Covers the single-color syntaxes, legacy ``&`` code translation, the strip
helpers and the legacy downsampling used for clients without RGB support.
"""

from __future__ import annotations

import pytest

from chatmark.colors.codec import (
    ColorCodec,
    last_color,
    starts_with_color,
    strip_bukkit,
    strip_special,
    translate_alternate_codes,
)
from chatmark.colors.patterns import SingleColor
from chatmark.recipient import Recipient

RED_RGB = "§x§f§f§0§0§0§0"
GREEN_RGB = "§x§0§0§f§f§0§0"


@pytest.mark.parametrize(
    "token",
    ["{#ff0000}", "%#ff0000%", "[#ff0000]", "<#ff0000>", "&xff0000", "&#ff0000", "#ff0000"],
)
def test_single_color_syntaxes_select_rgb(token: str) -> None:
    """Every single-color syntax becomes the same native RGB escape."""
    codec = ColorCodec()
    assert codec.colorize(f"{token}Hi") == f"{RED_RGB}Hi"


def test_single_color_is_case_insensitive() -> None:
    """Hex digits may be upper-case; the escape is always lower-case."""
    assert ColorCodec().colorize("{#FF0000}Hi") == f"{RED_RGB}Hi"


def test_legacy_recipient_gets_nearest_palette_code() -> None:
    """A 1.12 client receives the closest of the 16 legacy colors."""
    codec = ColorCodec()
    old = Recipient("Alex", protocol=340)
    assert codec.colorize("{#ff0000}Hi", old) == "§4Hi"
    assert codec.colorize("&#00ff00Hi", old) == "§2Hi"


def test_legacy_server_forces_palette_codes() -> None:
    """Below server version 16 every target is legacy."""
    codec = ColorCodec(server_version=12)
    assert codec.colorize("{#ff0000}Hi") == "§4Hi"
    assert codec.colorize("{#ff0000}Hi", Recipient("Alex", protocol=754)) == "§4Hi"


def test_alternate_codes_are_translated_after_patterns() -> None:
    """``&`` codes become ``§`` codes; RGB syntaxes are resolved first."""
    codec = ColorCodec()
    assert codec.colorize("&aHello") == "§aHello"
    assert codec.colorize("&#00ff00&lHi") == f"{GREEN_RGB}§lHi"


def test_apply_leaves_alternate_codes_alone() -> None:
    """`apply` only handles the registered syntaxes."""
    assert ColorCodec().apply("&a{#00ff00}x", legacy=False) == f"&a{GREEN_RGB}x"


def test_translate_alternate_codes_lowercases() -> None:
    assert translate_alternate_codes("&AHi &Lthere & friends") == "§aHi §lthere & friends"


def test_strip_bukkit_removes_color_codes_only() -> None:
    """Legacy color codes go, formatting codes stay."""
    assert strip_bukkit("&aHi §cthere &lbold") == "Hi there &lbold"
    assert strip_bukkit("   ") == "   "


def test_strip_special_removes_formatting_codes() -> None:
    assert strip_special("&lbold&r §oitalic&a") == "bold italic&a"


def test_strip_removes_rgb_tokens_and_keeps_bodies() -> None:
    """Single colors vanish; gradient bodies remain."""
    codec = ColorCodec()
    assert codec.strip("<#ff0000>ab</#0000ff> {#00ff00}c") == "ab c"
    assert codec.strip_rgb("&a{#00ff00}c") == "&ac"


def test_strip_all_removes_every_layer() -> None:
    codec = ColorCodec()
    assert codec.strip_all("&a&lHi {#ff0000}there <r:50>you</r>") == "Hi there you"


def test_starts_with_color() -> None:
    assert starts_with_color("&aHi")
    assert starts_with_color("{#ffffff}Hi")
    assert starts_with_color("§lHi")
    assert not starts_with_color("Hi &a")
    assert not starts_with_color("")


def test_last_color_returns_last_token() -> None:
    assert last_color("&aHi &cthere") == "&c"
    assert last_color("{#ff0000}a <#00ff00>b") == "<#00ff00>"
    assert last_color("plain") is None


def test_added_patterns_run_after_builtins() -> None:
    """Extra syntaxes are appended to the application order."""
    codec = ColorCodec()
    before = len(codec.patterns)
    codec.add_pattern(SingleColor(r"\(c:([a-f\d]{6})\)"))
    assert len(codec.patterns) == before + 1
    assert codec.colorize("(c:00ff00)x") == f"{GREEN_RGB}x"
    assert codec.strip("(c:00ff00)x") == "x"


def test_is_legacy_uses_server_version_without_recipient() -> None:
    assert not ColorCodec().is_legacy(None)
    assert ColorCodec(server_version=15).is_legacy(None)
