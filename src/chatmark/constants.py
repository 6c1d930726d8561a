# topmark:header:start
#
#   project      : ChatMark
#   file         : constants.py
#   file_relpath : src/chatmark/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ChatMark constants."""

from __future__ import annotations

from importlib.metadata import version as get_version
from typing import Final

CHATMARK_VERSION: str = get_version("chatmark")

# Environment variable consulted by `chatmark.config.logging.resolve_env_log_level`.
LOG_LEVEL_ENV: Final[str] = "CHATMARK_LOG_LEVEL"

# Engine defaults (overridable through `[engine]` in a TOML config).
DEFAULT_CENTER_PREFIX: Final[str] = "[C]"
DEFAULT_LINE_SEPARATOR: Final[str] = "<n>"
DEFAULT_LANG_PREFIX_KEY: Final[str] = "<P>"
DEFAULT_LANG_PREFIX: Final[str] = ""
DEFAULT_CHAT_WIDTH: Final[int] = 154
DEFAULT_SERVER_VERSION: Final[int] = 21

# First server/client major version with native RGB support.
RGB_SUPPORT_VERSION: Final[int] = 16

# Channel marker defaults (`[channels]`).
DEFAULT_START_DELIMITER: Final[str] = "["
DEFAULT_END_DELIMITER: Final[str] = "]"
DEFAULT_CHANNEL: Final[str] = "chat"
