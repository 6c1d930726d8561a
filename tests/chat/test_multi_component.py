# topmark:header:start
#
#   project      : ChatMark
#   file         : test_multi_component.py
#   file_relpath : tests/chat/test_multi_component.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Unit tests for `MultiComponent` splitting and compilation."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from chatmark.chat.click import ClickAction, ClickEvent
from chatmark.chat.multi import MultiComponent
from chatmark.core.errors import InvalidInputError

if TYPE_CHECKING:
    from chatmark.engine import ChatEngine


def test_split_at_markup(engine: ChatEngine) -> None:
    multi = MultiComponent(engine, 'Hi <hover:"tip"|run:"/spawn">click</text> bye')
    assert [p.text for p in multi.parts] == ["Hi ", "click", " bye"]
    middle = multi.parts[1]
    assert middle.hover == ("tip",)
    assert middle.click == ClickEvent(ClickAction.EXECUTE, "/spawn")


def test_parts_inherit_previous_color(engine: ChatEngine) -> None:
    multi = MultiComponent(engine, '&aHi <hover:"tip">there</text>')
    assert [p.text for p in multi.parts] == ["&aHi ", "&athere"]
    assert [m.text for m in multi.compile()] == ["§aHi ", "§athere"]


def test_part_with_own_color_is_untouched(engine: ChatEngine) -> None:
    multi = MultiComponent(engine, '&aHi <hover:"tip">&cthere</text>')
    assert multi.parts[1].text == "&cthere"


def test_split_at_urls(engine: ChatEngine) -> None:
    multi = MultiComponent(engine, "see https://x.org now")
    assert [p.text for p in multi.parts] == ["see ", "https://x.org", " now"]
    assert multi.parts[1].click == ClickEvent(ClickAction.OPEN_URL, "https://x.org")


def test_split_at_urls_without_click(engine: ChatEngine) -> None:
    multi = MultiComponent(engine, "see www.x.org", parse_urls=False)
    assert len(multi) == 2
    assert all(m.click is None for m in multi.compile())


def test_old_syntax_is_converted(engine: ChatEngine) -> None:
    multi = MultiComponent(engine, "<hover=[tip]>x</text>")
    assert len(multi) == 1
    assert multi.parts[0].hover == ("tip",)


def test_small_caps_and_centering_run_before_splitting(engine: ChatEngine) -> None:
    multi = MultiComponent(engine, "[C]<sc>Hi</sc>")
    (part,) = multi.parts
    assert part.text.endswith("ʜɪ")
    assert part.text.startswith(" ")


def test_empty_append_adds_one_empty_part(engine: ChatEngine) -> None:
    multi = MultiComponent(engine).append("")
    assert [p.text for p in multi.parts] == [""]


def test_compile_empty_message_is_invalid(engine: ChatEngine) -> None:
    with pytest.raises(InvalidInputError):
        MultiComponent(engine).compile()


def test_set_click_and_hover_target_last_part(engine: ChatEngine) -> None:
    multi = MultiComponent(engine, "a").append('<hover:"x">b</text>')
    multi.set_click("run", "/b").set_hover("last")
    assert multi.parts[0].click is None
    assert multi.parts[-1].click == ClickEvent(ClickAction.EXECUTE, "/b")
    assert multi.parts[-1].hover == ("last",)


def test_set_to_all(engine: ChatEngine) -> None:
    multi = MultiComponent(engine, 'a <hover:"x">b</text>')
    multi.set_click_to_all("suggest", "/help").set_hover_to_all(["h"])
    assert all(p.click == ClickEvent(ClickAction.SUGGEST, "/help") for p in multi.parts)
    assert all(p.hover == ("h",) for p in multi.parts)


def test_to_markup_normalizes_actions(engine: ChatEngine) -> None:
    multi = MultiComponent(engine, 'Hi <hover:"tip"|run:"/spawn">click</text> bye')
    assert multi.to_markup() == 'Hi <hover:"tip"|run_command:"/spawn">click</text> bye'
