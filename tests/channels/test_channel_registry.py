# topmark:header:start
#
#   project      : ChatMark
#   file         : test_channel_registry.py
#   file_relpath : tests/channels/test_channel_registry.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Unit tests for channels, markers and `ChannelRegistry.identify`."""

from __future__ import annotations

import dataclasses

import pytest

from chatmark.channels.model import Channel, ChannelFlag, default_channels
from chatmark.channels.registry import ChannelRegistry
from chatmark.core.errors import InvalidInputError


@pytest.fixture
def registry() -> ChannelRegistry:
    reg = ChannelRegistry()
    reg.set_defaults()
    return reg


def test_default_channels(registry: ChannelRegistry) -> None:
    assert [c.name for c in registry] == [
        "chat",
        "action_bar",
        "title",
        "bossbar",
        "json",
        "webhook",
    ]
    assert registry.default.name == "chat"


@pytest.mark.parametrize(
    ("text", "name", "arguments", "body"),
    [
        ("[title:5]Welcome", "title", ("5",), "Welcome"),
        ("[title]Welcome", "title", (), "Welcome"),
        ("[TITLE]Welcome", "title", (), "Welcome"),
        ("[bossbar:red:10]Boss", "bossbar", ("red", "10"), "Boss"),
        ("[action_bar]Low health", "action_bar", (), "Low health"),
        ("[webhook:staff]Report", "webhook", ("staff",), "Report"),
        ("Hello", "chat", (), "Hello"),
        ("Hi [title]there", "chat", (), "Hi [title]there"),
    ],
)
def test_identify(
    registry: ChannelRegistry,
    text: str,
    name: str,
    arguments: tuple[str, ...],
    body: str,
) -> None:
    channel = registry.identify(text)
    assert channel.name == name
    assert channel.arguments(text) == arguments
    assert channel.strip(text) == body


def test_identify_blank_and_exact_names(registry: ChannelRegistry) -> None:
    assert registry.identify("  ").name == "chat"
    assert registry.identify("title").name == "title"


def test_title_arguments_must_be_numeric(registry: ChannelRegistry) -> None:
    assert registry.identify("[title:abc]x").name == "chat"


def test_case_sensitive_channel() -> None:
    channel = Channel("Shout", case_sensitive=True)
    assert channel.matches("[Shout]hey")
    assert not channel.matches("[shout]hey")


def test_aliases_are_markers() -> None:
    channel = Channel("action_bar", aliases=("ab", "action_bar"), flag=ChannelFlag.ACTION_BAR)
    assert channel.marker_names == ("action_bar", "ab")
    assert channel.matches("[ab]x")
    assert channel.strip("[AB]x") == "x"


def test_set_delimiters_rebinds_channels(registry: ChannelRegistry) -> None:
    registry.set_delimiters("{", "}")
    assert registry.identify("{title:3}x").name == "title"
    assert registry.identify("[title:3]x").name == "chat"
    assert registry.get("title") is not None
    assert registry.get("title").start_delimiter == "{"  # type: ignore[union-attr]


def test_loaded_channels_use_registry_delimiters() -> None:
    registry = ChannelRegistry(start_delimiter="<<", end_delimiter=">>")
    registry.load(Channel("news"))
    assert registry.identify("<<news>>Today").name == "news"


def test_load_keeps_first_registration(registry: ChannelRegistry) -> None:
    assert not registry.load(Channel("title", prefix="X"))
    assert registry.get("title").prefix == ""  # type: ignore[union-attr]


def test_replace_requires_existing_channel(registry: ChannelRegistry) -> None:
    title = registry.get("title")
    assert title is not None
    assert registry.replace(dataclasses.replace(title, prefix="&6"))
    assert registry.get("title").prefix == "&6"  # type: ignore[union-attr]
    assert not registry.replace(Channel("missing"))


def test_default_channel_cannot_be_removed(registry: ChannelRegistry) -> None:
    assert not registry.remove("chat")
    assert registry.remove("json")
    assert not registry.remove("json")
    assert "json" not in registry


def test_unregistered_default_is_synthesized() -> None:
    registry = ChannelRegistry(default="system")
    assert registry.default.name == "system"
    assert registry.default.flag is ChannelFlag.CHAT
    assert registry.identify("hello").name == "system"


def test_custom_channel_is_identified_and_stripped(registry: ChannelRegistry) -> None:
    assert registry.load(Channel("global", prefix="[G] "))
    channel = registry.identify("[global]Hello")
    assert channel.name == "global"
    assert channel.strip("[global]Hello") == "Hello"
    assert channel.apply_prefix(channel.strip("[global]Hello")) == "[G] Hello"


def test_apply_prefix() -> None:
    assert Channel("chat", prefix="&7[Chat] ").apply_prefix("hi") == "&7[Chat] hi"
    assert Channel("chat").apply_prefix("hi") == "hi"


@pytest.mark.parametrize("kwargs", [{"name": "  "}, {"name": "x", "pattern": "("}])
def test_invalid_channels(kwargs: dict[str, str]) -> None:
    with pytest.raises(InvalidInputError):
        Channel(**kwargs)


def test_channel_flag_parse() -> None:
    assert ChannelFlag.parse("actionbar") is ChannelFlag.ACTION_BAR
    assert ChannelFlag.parse("Boss-Bar") is ChannelFlag.BOSSBAR
    assert ChannelFlag.parse("nope") is None


def test_default_channels_flags() -> None:
    assert {c.name: c.flag.key for c in default_channels()} == {
        "chat": "chat",
        "action_bar": "action_bar",
        "title": "title",
        "bossbar": "bossbar",
        "json": "json",
        "webhook": "webhook",
    }
