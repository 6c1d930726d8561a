# topmark:header:start
#
#   project      : ChatMark
#   file         : test_format_registry.py
#   file_relpath : tests/formats/test_format_registry.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Unit tests for `FormatRegistry` and the format record variants."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from chatmark.core.errors import InvalidInputError
from chatmark.formats.base import ContextualFormat, Format, PlainFormat, TextFormat
from chatmark.formats.builtins import BLANK_SPACES, CHARACTER, SMALL_CAPS
from chatmark.formats.registry import FormatRegistry

if TYPE_CHECKING:
    from chatmark.recipient import Recipient, RecipientContext


def _shout() -> Format[str]:
    def _apply(recipient: RecipientContext, text: str) -> str:
        name = recipient.name.upper() if recipient is not None else "NOBODY"
        return text.replace("{shout}", name)

    return Format(regex=r"\{shout\}", function=_apply)


@pytest.fixture
def registry() -> FormatRegistry:
    reg = FormatRegistry()
    reg.set_defaults()
    return reg


def test_defaults_in_registration_order(registry: FormatRegistry) -> None:
    assert list(registry) == [SMALL_CAPS, CHARACTER, BLANK_SPACES]
    assert [fmt.kind for _, fmt in registry.items()] == ["text", "text", "contextual"]


def test_identifiers_are_case_insensitive(registry: FormatRegistry) -> None:
    assert "small_caps" in registry
    assert registry.get(" character ") is registry.get(CHARACTER)


def test_load_keeps_first_registration(registry: FormatRegistry) -> None:
    original = registry.get(SMALL_CAPS)
    assert not registry.load("small_caps", _shout())
    assert registry.get(SMALL_CAPS) is original
    assert not registry.load("   ", _shout())
    assert registry.load("shout", _shout())
    assert list(registry)[-1] == "SHOUT"


def test_remove(registry: FormatRegistry) -> None:
    assert registry.remove("blank_spaces")
    assert not registry.remove("blank_spaces")
    assert len(registry) == 2


def test_edit_format_requires_existing_identifier(registry: FormatRegistry) -> None:
    replacement = _shout()
    assert not registry.edit_format("missing", replacement)
    assert registry.edit_format("character", replacement)
    assert registry.get(CHARACTER) is replacement


def test_edit_id_never_overwrites(registry: FormatRegistry) -> None:
    assert not registry.edit_id(CHARACTER, SMALL_CAPS)
    assert not registry.edit_id("missing", "other")
    assert not registry.edit_id(CHARACTER, "  ")
    fmt = registry.get(CHARACTER)
    assert registry.edit_id(CHARACTER, "unicode")
    assert registry.get("UNICODE") is fmt
    assert CHARACTER not in registry


def test_set_defaults_only_fills_missing(registry: FormatRegistry) -> None:
    replacement = _shout()
    registry.edit_format(SMALL_CAPS, replacement)
    registry.remove(CHARACTER)
    registry.set_defaults()
    assert len(registry) == 3
    assert registry.get(SMALL_CAPS) is replacement


def test_apply_all_runs_inline_formats(registry: FormatRegistry, steve: Recipient) -> None:
    registry.load("shout", _shout())
    text = "<sc>hi</sc> <U:0041> {shout} <add_space:2>"
    assert registry.apply_all(steve, text) == "ʜɪ A STEVE <add_space:2>"
    assert registry.apply_all(None, "{shout}") == "NOBODY"


def test_apply_all_skips_blank_text(registry: FormatRegistry) -> None:
    assert registry.apply_all(None, "  ") == "  "


def test_strip_all_removes_markers(registry: FormatRegistry) -> None:
    assert registry.strip_all("<sc>hi</sc> <add_space:2><U:0041>") == "hi A"


def test_invalid_regex_is_invalid_input() -> None:
    with pytest.raises(InvalidInputError):
        TextFormat(regex="(", function=str.upper)


def test_text_format_ignores_recipient(steve: Recipient) -> None:
    fmt = TextFormat(regex="x", function=str.upper)
    assert fmt.accept(steve, "x") == "X"
    assert fmt.is_formatted("axb")
    assert fmt.remove_format("axb") == "ab"


def test_plain_format_always_runs() -> None:
    fmt = PlainFormat(function=lambda _r, t: t + "!")
    assert not fmt.is_formatted("anything")
    assert fmt.remove_format("anything") == "anything"
    registry = FormatRegistry()
    registry.load("bang", fmt)
    assert registry.apply_all(None, "hi") == "hi!"


def test_contextual_format_receives_a_tuple(steve: Recipient) -> None:
    seen: list[tuple[Recipient | None, ...]] = []

    def _count(recipients: tuple[Recipient | None, ...], text: str) -> int:
        seen.append(recipients)
        return len(recipients)

    fmt = ContextualFormat(regex="x", function=_count)
    assert not fmt.inline
    assert fmt.accept(steve, "x") == 1
    assert fmt.accept([steve, None], "x") == 2
    assert fmt.accept(None, "x") == 1
    assert seen[0] == (steve,)


def test_contextual_formats_are_not_applied_inline(steve: Recipient) -> None:
    registry = FormatRegistry()
    registry.load("count", ContextualFormat(regex="x", function=lambda rs, t: len(rs)))
    assert registry.apply_all(steve, "x") == "x"
