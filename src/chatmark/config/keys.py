# topmark:header:start
#
#   project      : ChatMark
#   file         : keys.py
#   file_relpath : src/chatmark/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical TOML section and key names for ChatMark configuration.

Keys defined here represent the external configuration API; renaming or
removing one is a breaking change.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML section names and keys used by ChatMark configuration.

    The ordering of constants mirrors `load_defaults_dict` to make it easy to
    audit schema changes.
    """

    # [engine]
    SECTION_ENGINE: Final[str] = "engine"

    KEY_CENTER_PREFIX: Final[str] = "center_prefix"
    KEY_LINE_SEPARATOR: Final[str] = "line_separator"
    KEY_LANG_PREFIX_KEY: Final[str] = "lang_prefix_key"
    KEY_LANG_PREFIX: Final[str] = "lang_prefix"
    KEY_CHAT_WIDTH: Final[str] = "chat_width"
    KEY_SERVER_VERSION: Final[str] = "server_version"
    KEY_CASE_SENSITIVE_PLACEHOLDERS: Final[str] = "case_sensitive_placeholders"

    # [channels]
    SECTION_CHANNELS: Final[str] = "channels"

    KEY_START_DELIMITER: Final[str] = "start_delimiter"
    KEY_END_DELIMITER: Final[str] = "end_delimiter"
    KEY_DEFAULT_CHANNEL: Final[str] = "default"

    # [channels.prefixes] / [channels.aliases]
    SECTION_CHANNEL_PREFIXES: Final[str] = "prefixes"
    SECTION_CHANNEL_ALIASES: Final[str] = "aliases"

    # [placeholders]: key -> static value
    SECTION_PLACEHOLDERS: Final[str] = "placeholders"

    # [characters]: one-character key -> width
    SECTION_CHARACTERS: Final[str] = "characters"
