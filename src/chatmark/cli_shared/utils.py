# topmark:header:start
#
#   project      : ChatMark
#   file         : utils.py
#   file_relpath : src/chatmark/cli_shared/utils.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Output formats shared by ChatMark CLI commands."""

from __future__ import annotations

from enum import Enum


class OutputFormat(str, Enum):
    """Output format for CLI rendering.

    Members:
      DEFAULT: Human-friendly text output; may include ANSI color if enabled.
      JSON: Machine-readable JSON.
      MARKDOWN: Markdown, for pasting into documentation or issues.
      ANSI: Terminal preview where ``§`` codes become ANSI escape sequences.

    Not every command accepts every member; commands validate their own subset.
    """

    DEFAULT = "text"
    JSON = "json"
    MARKDOWN = "markdown"
    ANSI = "ansi"
