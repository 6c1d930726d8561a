# topmark:header:start
#
#   project      : ChatMark
#   file         : test_color_patterns.py
#   file_relpath : tests/colors/test_color_patterns.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Unit tests for the multi-color syntaxes in `chatmark.colors.patterns`."""

from __future__ import annotations

import pytest

from chatmark.colors.codec import ColorCodec
from chatmark.colors.palette import RGB
from chatmark.colors.patterns import (
    CustomGradient,
    Gradient,
    Rainbow,
    default_patterns,
    gradient_escapes,
    split_even,
    spread,
    visible_length,
)

RED = "§x§f§f§0§0§0§0"
GREEN = "§x§0§0§f§f§0§0"
BLUE = "§x§0§0§0§0§f§f"
CYAN = "§x§0§0§f§f§f§f"
BLACK = "§x§0§0§0§0§0§0"


def test_gradient_two_characters() -> None:
    """The first character gets the start color, the last the end color."""
    assert ColorCodec().colorize("<#ff0000>ab</#0000ff>") == f"{RED}a{BLUE}b"


def test_gradient_keeps_formatting_after_each_color() -> None:
    """Formatting codes inside the body are re-emitted after every color."""
    result = ColorCodec().colorize("<#ff0000>&lab</#0000ff>")
    assert result == f"{RED}§la{BLUE}§lb"


def test_gradient_single_character_is_left_uncolored() -> None:
    assert ColorCodec().colorize("<#ff0000>a</#0000ff>") == "a"


def test_gradient_with_inner_stops() -> None:
    """``<g:...>`` stops inside the body start a new segment."""
    result = ColorCodec().colorize("<g:ff0000>ab<g:00ff00>cd</g:0000ff>")
    assert result == f"{RED}a{GREEN}b{GREEN}c{BLUE}d"


def test_gradient_strip_drops_inner_stops() -> None:
    assert Gradient("g:").strip("<g:ff0000>ab<g:00ff00>cd</g:0000ff>") == "abcd"


def test_custom_gradient_spreads_over_stops() -> None:
    """Each later segment continues from the previous stop."""
    result = ColorCodec().colorize("<#ff0000:#00ff00:#0000ff>abcd</g>")
    assert result == f"{RED}a{GREEN}b§x§0§0§8§0§7§fc§x§0§0§0§1§f§ed"


def test_custom_gradient_strip_and_long_closing_tag() -> None:
    pattern = CustomGradient()
    assert pattern.strip("<#ff0000:#0000ff>abc</gradient>") == "abc"
    assert pattern.strip("x <#ff0000:#0000ff>abc</g> y") == "x abc y"


def test_rainbow_full_saturation() -> None:
    """Two characters split the hue circle in half: red then cyan."""
    assert ColorCodec().colorize("<r:100>ab</r>") == f"{RED}a{CYAN}b"
    assert ColorCodec().colorize("<rainbow:100>ab</rainbow>") == f"{RED}a{CYAN}b"


def test_rainbow_zero_saturation_is_black() -> None:
    assert ColorCodec().colorize("<r:0>ab</r>") == f"{BLACK}a{BLACK}b"


def test_rainbow_saturation_is_a_clamped_percent() -> None:
    assert Rainbow.saturation("50") == 0.5
    assert Rainbow.saturation("250") == 1.0


def test_rainbow_strip_keeps_body() -> None:
    assert Rainbow("rainbow").strip("<rainbow:80>hello</rainbow>!") == "hello!"


def test_legacy_gradient_uses_palette() -> None:
    assert ColorCodec(server_version=12).colorize("<#ff0000>ab</#0000ff>") == "§4a§1b"


@pytest.mark.parametrize(
    ("text", "expected"),
    [("ab", 2), ("&lab", 2), ("§x", 0), ("ab&", 3), ("", 0)],
)
def test_visible_length(text: str, expected: int) -> None:
    assert visible_length(text) == expected


def test_spread_reset_forgets_formatting() -> None:
    assert spread("&la&rb", ["1", "2"]) == "1&la2b"


@pytest.mark.parametrize(
    ("text", "parts", "expected"),
    [
        ("abcde", 2, ["abc", "de"]),
        ("abcd", 2, ["ab", "cd"]),
        ("ab", 3, ["a", "b", ""]),
        ("abc", 1, ["abc"]),
    ],
)
def test_split_even(text: str, parts: int, expected: list[str]) -> None:
    assert split_even(text, parts) == expected


def test_gradient_escapes_walk_in_integer_steps() -> None:
    escapes = gradient_escapes(RGB(0, 255, 0), RGB(0, 0, 255), 3, legacy=False)
    assert escapes == [GREEN, "§x§0§0§8§0§7§f", "§x§0§0§0§1§f§e"]


def test_default_patterns_apply_multi_colors_first() -> None:
    patterns = default_patterns()
    assert isinstance(patterns[0], CustomGradient)
    assert [type(p).__name__ for p in patterns[:5]] == [
        "CustomGradient",
        "Gradient",
        "Gradient",
        "Rainbow",
        "Rainbow",
    ]
    assert len(patterns) == 11
