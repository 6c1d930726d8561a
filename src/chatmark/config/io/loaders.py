# topmark:header:start
#
#   project      : ChatMark
#   file         : loaders.py
#   file_relpath : src/chatmark/config/io/loaders.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load TOML configuration sources.

Parsing is done with `tomlkit` and returned as plain `dict` structures.
Runtime defaults are defined in code (`load_defaults_dict`) so the engine can
run without any file.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

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
    from pathlib import Path

    from chatmark.config.logging import ChatmarkLogger

    from .types import TomlTable

logger: ChatmarkLogger = get_logger(__name__)


def load_defaults_dict() -> TomlTable:
    """Return ChatMark's **runtime defaults** as a Python dict.

    This function performs no I/O. Sections and keys align with
    `chatmark.config.keys.Toml`.

    Returns:
        TomlTable: A new dict, so callers can mutate it safely.
    """
    return {
        Toml.SECTION_ENGINE: {
            Toml.KEY_CENTER_PREFIX: DEFAULT_CENTER_PREFIX,
            Toml.KEY_LINE_SEPARATOR: DEFAULT_LINE_SEPARATOR,
            Toml.KEY_LANG_PREFIX_KEY: DEFAULT_LANG_PREFIX_KEY,
            Toml.KEY_LANG_PREFIX: DEFAULT_LANG_PREFIX,
            Toml.KEY_CHAT_WIDTH: DEFAULT_CHAT_WIDTH,
            Toml.KEY_SERVER_VERSION: DEFAULT_SERVER_VERSION,
            # NOTE: case_sensitive_placeholders is unset: each placeholder decides.
        },
        Toml.SECTION_CHANNELS: {
            Toml.KEY_START_DELIMITER: DEFAULT_START_DELIMITER,
            Toml.KEY_END_DELIMITER: DEFAULT_END_DELIMITER,
            Toml.KEY_DEFAULT_CHANNEL: DEFAULT_CHANNEL,
            Toml.SECTION_CHANNEL_PREFIXES: {},
            Toml.SECTION_CHANNEL_ALIASES: {},
        },
        Toml.SECTION_PLACEHOLDERS: {},
        Toml.SECTION_CHARACTERS: {},
    }


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path (Path): Path to a TOML document (e.g. ``chatmark.toml``).

    Returns:
        TomlTable: The parsed TOML content.

    Notes:
        - Errors are logged and an empty dict is returned on failure.
        - Encoding is assumed to be UTF-8.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
        data_any: Any = doc.unwrap()
        return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}
    except OSError as e:
        logger.error("Error loading TOML from %s: %s", path, e)
        return {}
    except TomlkitParseError as e:
        logger.error("Error decoding TOML from %s: %s", path, e)
        return {}
    except (TypeError, ValueError) as e:
        logger.error("Unknown error while reading TOML from %s: %s", path, e)
        return {}
