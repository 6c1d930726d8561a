# topmark:header:start
#
#   project      : ChatMark
#   file         : model.py
#   file_relpath : src/chatmark/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration model and merge policy.

This module defines:
    - `Config`: an immutable runtime snapshot used to build a
      `chatmark.engine.ChatEngine`.
    - `MutableConfig`: a mutable builder used while merging defaults and
      TOML files; it can be frozen into `Config` and thawed back for edits.

Scalar fields of the builder are tri-state (``None`` = not set by this
layer) so that `MutableConfig.merge_with` can tell "unset" from "set to the
default value". Table-valued fields merge key-wise, the overriding layer
winning per key.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from chatmark.config.io import (
    get_bool_value_or_none,
    get_int_value_or_none,
    get_string_list_value,
    get_string_value_or_none,
    get_table_value,
    load_defaults_dict,
    load_toml_dict,
    to_toml,
)
from chatmark.config.keys import Toml
from chatmark.config.logging import get_logger
from chatmark.constants import (
    DEFAULT_CENTER_PREFIX,
    DEFAULT_CHANNEL,
    DEFAULT_CHAT_WIDTH,
    DEFAULT_END_DELIMITER,
    DEFAULT_LANG_PREFIX,
    DEFAULT_LANG_PREFIX_KEY,
    DEFAULT_LINE_SEPARATOR,
    DEFAULT_SERVER_VERSION,
    DEFAULT_START_DELIMITER,
)

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping
    from pathlib import Path

    from chatmark.config.io import TomlTable
    from chatmark.config.logging import ChatmarkLogger

logger: ChatmarkLogger = get_logger(__name__)


# ------------------ Immutable runtime config ------------------


@dataclass(frozen=True, slots=True)
class Config:
    """Immutable runtime configuration for ChatMark.

    Attributes:
        config_files (tuple[str, ...]): Config sources that were merged, in order.
        center_prefix (str): Marker requesting centered output.
        line_separator (str): Token separating lines and hover lines.
        lang_prefix_key (str): Token replaced by ``lang_prefix``.
        lang_prefix (str): Replacement for ``lang_prefix_key``.
        chat_width (int): Alignment budget in font units.
        server_version (int): Server major version (< 16 forces legacy colors).
        case_sensitive_placeholders (bool | None): Forced placeholder matching mode;
            ``None`` lets every placeholder use its own flag.
        start_delimiter (str): Channel marker opening delimiter.
        end_delimiter (str): Channel marker closing delimiter.
        default_channel (str): Name of the fallback channel.
        channel_prefixes (Mapping[str, str]): Display prefix per channel name.
        channel_aliases (Mapping[str, tuple[str, ...]]): Extra marker names per channel.
        placeholders (Mapping[str, str]): Static placeholders.
        characters (Mapping[str, int]): Extra glyph widths.
    """

    config_files: tuple[str, ...]
    center_prefix: str
    line_separator: str
    lang_prefix_key: str
    lang_prefix: str
    chat_width: int
    server_version: int
    case_sensitive_placeholders: bool | None
    start_delimiter: str
    end_delimiter: str
    default_channel: str
    channel_prefixes: Mapping[str, str]
    channel_aliases: Mapping[str, tuple[str, ...]]
    placeholders: Mapping[str, str]
    characters: Mapping[str, int]

    def to_toml_dict(self) -> TomlTable:
        """Return this configuration in the TOML table layout."""
        return {
            Toml.SECTION_ENGINE: {
                Toml.KEY_CENTER_PREFIX: self.center_prefix,
                Toml.KEY_LINE_SEPARATOR: self.line_separator,
                Toml.KEY_LANG_PREFIX_KEY: self.lang_prefix_key,
                Toml.KEY_LANG_PREFIX: self.lang_prefix,
                Toml.KEY_CHAT_WIDTH: self.chat_width,
                Toml.KEY_SERVER_VERSION: self.server_version,
                Toml.KEY_CASE_SENSITIVE_PLACEHOLDERS: self.case_sensitive_placeholders,
            },
            Toml.SECTION_CHANNELS: {
                Toml.KEY_START_DELIMITER: self.start_delimiter,
                Toml.KEY_END_DELIMITER: self.end_delimiter,
                Toml.KEY_DEFAULT_CHANNEL: self.default_channel,
                Toml.SECTION_CHANNEL_PREFIXES: dict(self.channel_prefixes),
                Toml.SECTION_CHANNEL_ALIASES: {k: list(v) for k, v in self.channel_aliases.items()},
            },
            Toml.SECTION_PLACEHOLDERS: dict(self.placeholders),
            Toml.SECTION_CHARACTERS: dict(self.characters),
        }

    def to_toml(self) -> str:
        """Render this configuration as TOML text."""
        return to_toml(self.to_toml_dict())

    def thaw(self) -> MutableConfig:
        """Return a mutable copy of this frozen config.

        Returns:
            MutableConfig: A mutable builder initialized from this snapshot.
        """
        return MutableConfig(
            config_files=list(self.config_files),
            center_prefix=self.center_prefix,
            line_separator=self.line_separator,
            lang_prefix_key=self.lang_prefix_key,
            lang_prefix=self.lang_prefix,
            chat_width=self.chat_width,
            server_version=self.server_version,
            case_sensitive_placeholders=self.case_sensitive_placeholders,
            start_delimiter=self.start_delimiter,
            end_delimiter=self.end_delimiter,
            default_channel=self.default_channel,
            channel_prefixes=dict(self.channel_prefixes),
            channel_aliases={k: list(v) for k, v in self.channel_aliases.items()},
            placeholders=dict(self.placeholders),
            characters=dict(self.characters),
        )


# -------------------------- Mutable builder --------------------------


def _pick(override: Any, base: Any) -> Any:
    return override if override is not None else base


@dataclass
class MutableConfig:
    """Mutable configuration used while merging layers.

    See `Config` for the meaning of each field. Scalars are ``None`` when the
    layer does not set them.
    """

    config_files: list[str] = field(default_factory=lambda: [])
    center_prefix: str | None = None
    line_separator: str | None = None
    lang_prefix_key: str | None = None
    lang_prefix: str | None = None
    chat_width: int | None = None
    server_version: int | None = None
    case_sensitive_placeholders: bool | None = None
    start_delimiter: str | None = None
    end_delimiter: str | None = None
    default_channel: str | None = None
    channel_prefixes: dict[str, str] = field(default_factory=lambda: {})
    channel_aliases: dict[str, list[str]] = field(default_factory=lambda: {})
    placeholders: dict[str, str] = field(default_factory=lambda: {})
    characters: dict[str, int] = field(default_factory=lambda: {})

    # ---------------------------- Build/freeze ----------------------------
    def freeze(self) -> Config:
        """Freeze this builder into an immutable `Config`, filling unset values."""
        return Config(
            config_files=tuple(self.config_files),
            center_prefix=_pick(self.center_prefix, DEFAULT_CENTER_PREFIX),
            line_separator=_pick(self.line_separator, DEFAULT_LINE_SEPARATOR),
            lang_prefix_key=_pick(self.lang_prefix_key, DEFAULT_LANG_PREFIX_KEY),
            lang_prefix=_pick(self.lang_prefix, DEFAULT_LANG_PREFIX),
            chat_width=_pick(self.chat_width, DEFAULT_CHAT_WIDTH),
            server_version=_pick(self.server_version, DEFAULT_SERVER_VERSION),
            case_sensitive_placeholders=self.case_sensitive_placeholders,
            start_delimiter=_pick(self.start_delimiter, DEFAULT_START_DELIMITER),
            end_delimiter=_pick(self.end_delimiter, DEFAULT_END_DELIMITER),
            default_channel=_pick(self.default_channel, DEFAULT_CHANNEL),
            channel_prefixes=dict(self.channel_prefixes),
            channel_aliases={k: tuple(v) for k, v in self.channel_aliases.items()},
            placeholders=dict(self.placeholders),
            characters=dict(self.characters),
        )

    # --------------------------- Loaders/parsers --------------------------
    @classmethod
    def from_defaults(cls) -> MutableConfig:
        """Return a builder populated with the runtime defaults."""
        return cls.from_toml_dict(load_defaults_dict())

    @classmethod
    def from_toml_file(cls, path: Path) -> MutableConfig | None:
        """Load configuration from a single TOML file.

        Args:
            path (Path): Path to the TOML file.

        Returns:
            MutableConfig | None: The parsed layer; None if the file could not be read.
        """
        logger.debug("Creating MutableConfig from TOML config: %s", path)
        if not path.is_file():
            logger.error("Config file not found: %s", path)
            return None

        toml_data: TomlTable = load_toml_dict(path)
        draft: MutableConfig = cls.from_toml_dict(toml_data)
        draft.config_files = [str(path)]
        logger.debug("Generated MutableConfig: %s", draft)
        return draft

    @classmethod
    def from_toml_dict(cls, data: TomlTable) -> MutableConfig:
        """Create a draft config from a parsed TOML dict.

        Unknown keys are ignored; values of the wrong type are logged and skipped.

        Args:
            data (TomlTable): The parsed TOML data as a dictionary.

        Returns:
            MutableConfig: The resulting draft.
        """
        engine_tbl: TomlTable = get_table_value(data, Toml.SECTION_ENGINE)
        logger.trace("TOML [engine]: %s", engine_tbl)

        channels_tbl: TomlTable = get_table_value(data, Toml.SECTION_CHANNELS)
        logger.trace("TOML [channels]: %s", channels_tbl)

        placeholders_tbl: TomlTable = get_table_value(data, Toml.SECTION_PLACEHOLDERS)
        characters_tbl: TomlTable = get_table_value(data, Toml.SECTION_CHARACTERS)

        where = Toml.SECTION_ENGINE
        draft: MutableConfig = cls(
            center_prefix=get_string_value_or_none(engine_tbl, Toml.KEY_CENTER_PREFIX, where=where),
            line_separator=get_string_value_or_none(
                engine_tbl, Toml.KEY_LINE_SEPARATOR, where=where
            ),
            lang_prefix_key=get_string_value_or_none(
                engine_tbl, Toml.KEY_LANG_PREFIX_KEY, where=where
            ),
            lang_prefix=get_string_value_or_none(engine_tbl, Toml.KEY_LANG_PREFIX, where=where),
            chat_width=get_int_value_or_none(engine_tbl, Toml.KEY_CHAT_WIDTH, where=where),
            server_version=get_int_value_or_none(engine_tbl, Toml.KEY_SERVER_VERSION, where=where),
            case_sensitive_placeholders=get_bool_value_or_none(
                engine_tbl, Toml.KEY_CASE_SENSITIVE_PLACEHOLDERS, where=where
            ),
        )

        where = Toml.SECTION_CHANNELS
        draft.start_delimiter = get_string_value_or_none(
            channels_tbl, Toml.KEY_START_DELIMITER, where=where
        )
        draft.end_delimiter = get_string_value_or_none(
            channels_tbl, Toml.KEY_END_DELIMITER, where=where
        )
        draft.default_channel = get_string_value_or_none(
            channels_tbl, Toml.KEY_DEFAULT_CHANNEL, where=where
        )

        prefixes_tbl: TomlTable = get_table_value(channels_tbl, Toml.SECTION_CHANNEL_PREFIXES)
        for name in prefixes_tbl:
            value = get_string_value_or_none(prefixes_tbl, name, where="channels.prefixes")
            if value is not None:
                draft.channel_prefixes[name] = value

        aliases_tbl: TomlTable = get_table_value(channels_tbl, Toml.SECTION_CHANNEL_ALIASES)
        for name in aliases_tbl:
            aliases = get_string_list_value(aliases_tbl, name, where="channels.aliases")
            if aliases:
                draft.channel_aliases[name] = aliases

        for key in placeholders_tbl:
            value = get_string_value_or_none(placeholders_tbl, key, where=Toml.SECTION_PLACEHOLDERS)
            if value is not None:
                draft.placeholders[key] = value

        for char in characters_tbl:
            width = get_int_value_or_none(characters_tbl, char, where=Toml.SECTION_CHARACTERS)
            if width is None:
                continue
            if len(char) != 1:
                logger.warning("Ignoring [characters] key %r: expected a single character", char)
                continue
            draft.characters[char] = width

        return draft

    @classmethod
    def load_merged(cls, config_files: Iterable[Path] = ()) -> MutableConfig:
        """Merge the runtime defaults with ``config_files`` (later files win).

        Files that cannot be read are skipped (the error is logged).
        """
        draft: MutableConfig = cls.from_defaults()
        for path in config_files:
            layer = cls.from_toml_file(path)
            if layer is not None:
                draft = draft.merge_with(layer)
        return draft

    # ------------------------------- Merging -------------------------------
    def merge_with(self, other: MutableConfig) -> MutableConfig:
        """Return a new draft where values set in ``other`` override this draft.

        Args:
            other (MutableConfig): The config whose values override those of this draft.

        Returns:
            MutableConfig: A new mutable configuration representing the merged result.
        """
        return MutableConfig(
            config_files=self.config_files + other.config_files,
            center_prefix=_pick(other.center_prefix, self.center_prefix),
            line_separator=_pick(other.line_separator, self.line_separator),
            lang_prefix_key=_pick(other.lang_prefix_key, self.lang_prefix_key),
            lang_prefix=_pick(other.lang_prefix, self.lang_prefix),
            chat_width=_pick(other.chat_width, self.chat_width),
            server_version=_pick(other.server_version, self.server_version),
            case_sensitive_placeholders=_pick(
                other.case_sensitive_placeholders, self.case_sensitive_placeholders
            ),
            start_delimiter=_pick(other.start_delimiter, self.start_delimiter),
            end_delimiter=_pick(other.end_delimiter, self.end_delimiter),
            default_channel=_pick(other.default_channel, self.default_channel),
            channel_prefixes={**self.channel_prefixes, **other.channel_prefixes},
            channel_aliases={**self.channel_aliases, **other.channel_aliases},
            placeholders={**self.placeholders, **other.placeholders},
            characters={**self.characters, **other.characters},
        )
