# topmark:header:start
#
#   project      : ChatMark
#   file         : test_config_model.py
#   file_relpath : tests/config/test_config_model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the configuration model: TOML parsing, layering and export."""

from __future__ import annotations

from typing import TYPE_CHECKING

import tomlkit

from chatmark.config.io import load_defaults_dict, load_toml_dict, to_toml
from chatmark.config.model import Config, MutableConfig
from chatmark.constants import DEFAULT_CHAT_WIDTH, DEFAULT_SERVER_VERSION

if TYPE_CHECKING:
    from pathlib import Path

FULL_TOML = """\
[engine]
chat_width = 120
center_prefix = "<c>"
case_sensitive_placeholders = true
server_version = "twelve"

[channels]
start_delimiter = "{"
end_delimiter = "}"

[channels.prefixes]
chat = "&7> "

[channels.aliases]
action_bar = ["ab", "bar"]
title = "t"

[placeholders]
"{server}" = "Lobby"
"{bad}" = 3

[characters]
"é" = 2
"ab" = 3
"x" = "wide"
"""


def _write(tmp_path: Path, name: str, text: str) -> Path:
    path = tmp_path / name
    path.write_text(text, encoding="utf-8")
    return path


def test_defaults_freeze_to_constants() -> None:
    config = MutableConfig.from_defaults().freeze()
    assert config.chat_width == DEFAULT_CHAT_WIDTH
    assert config.server_version == DEFAULT_SERVER_VERSION
    assert config.center_prefix == "[C]"
    assert config.line_separator == "<n>"
    assert config.case_sensitive_placeholders is None
    assert config.default_channel == "chat"
    assert config.config_files == ()


def test_empty_builder_freezes_to_defaults() -> None:
    assert MutableConfig().freeze() == MutableConfig.from_defaults().freeze()


def test_from_toml_file_parses_every_section(tmp_path: Path) -> None:
    path = _write(tmp_path, "chatmark.toml", FULL_TOML)
    draft = MutableConfig.from_toml_file(path)
    assert draft is not None
    config = draft.freeze()

    assert config.config_files == (str(path),)
    assert config.chat_width == 120
    assert config.center_prefix == "<c>"
    assert config.case_sensitive_placeholders is True
    assert config.start_delimiter == "{"
    assert config.end_delimiter == "}"
    assert dict(config.channel_prefixes) == {"chat": "&7> "}
    assert dict(config.channel_aliases) == {"action_bar": ("ab", "bar"), "title": ("t",)}


def test_wrong_types_are_skipped(tmp_path: Path) -> None:
    draft = MutableConfig.from_toml_file(_write(tmp_path, "c.toml", FULL_TOML))
    assert draft is not None
    assert draft.server_version is None
    assert draft.placeholders == {"{server}": "Lobby"}
    assert draft.characters == {"é": 2}


def test_missing_file_yields_none(tmp_path: Path) -> None:
    assert MutableConfig.from_toml_file(tmp_path / "missing.toml") is None


def test_invalid_toml_loads_as_empty(tmp_path: Path) -> None:
    path = _write(tmp_path, "broken.toml", "[engine\nchat_width = ")
    assert load_toml_dict(path) == {}


def test_merge_overrides_scalars_and_tables_keywise() -> None:
    base = MutableConfig.from_toml_dict(
        {"engine": {"chat_width": 120}, "placeholders": {"{server}": "Lobby", "{a}": "1"}}
    )
    layer = MutableConfig.from_toml_dict(
        {"engine": {"lang_prefix": "&8"}, "placeholders": {"{server}": "Hub"}}
    )
    merged = base.merge_with(layer).freeze()
    assert merged.chat_width == 120
    assert merged.lang_prefix == "&8"
    assert dict(merged.placeholders) == {"{server}": "Hub", "{a}": "1"}


def test_load_merged_later_files_win(tmp_path: Path) -> None:
    first = _write(tmp_path, "a.toml", "[engine]\nchat_width = 100\nserver_version = 12\n")
    second = _write(tmp_path, "b.toml", "[engine]\nchat_width = 80\n")
    config = MutableConfig.load_merged([first, second, tmp_path / "gone.toml"]).freeze()
    assert config.chat_width == 80
    assert config.server_version == 12
    assert config.config_files == (str(first), str(second))


def test_thaw_freeze_is_identity() -> None:
    config = MutableConfig.from_toml_dict(tomlkit.parse(FULL_TOML).unwrap()).freeze()
    assert config.thaw().freeze() == config


def test_to_toml_drops_unset_values() -> None:
    config: Config = MutableConfig.from_defaults().freeze()
    text = config.to_toml()
    assert "chat_width = 154" in text
    assert "case_sensitive_placeholders" not in text
    reparsed = MutableConfig.from_toml_dict(tomlkit.parse(text).unwrap()).freeze()
    assert reparsed == config


def test_defaults_dict_is_a_fresh_copy() -> None:
    data = load_defaults_dict()
    data["engine"]["chat_width"] = 1
    assert load_defaults_dict()["engine"]["chat_width"] == DEFAULT_CHAT_WIDTH


def test_to_toml_nested_tables() -> None:
    text = to_toml({"channels": {"aliases": {"title": ["t"]}, "default": None}})
    assert tomlkit.parse(text).unwrap() == {"channels": {"aliases": {"title": ["t"]}}}
