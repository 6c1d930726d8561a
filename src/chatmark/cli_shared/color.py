# topmark:header:start
#
#   project      : ChatMark
#   file         : color.py
#   file_relpath : src/chatmark/cli_shared/color.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Terminal color decisions for the ChatMark CLI.

`resolve_color_mode` combines the ``--color`` flag, the ``FORCE_COLOR`` and
``NO_COLOR`` conventions and the requested `OutputFormat`. Nothing here
imports Click.
"""

from __future__ import annotations

import os
import sys
from enum import Enum
from typing import TYPE_CHECKING

from chatmark.cli_shared.utils import OutputFormat
from chatmark.config.logging import get_logger

if TYPE_CHECKING:
    from chatmark.config.logging import ChatmarkLogger


logger: ChatmarkLogger = get_logger(__name__)

# Formats meant to be parsed or pasted; terminal escapes would corrupt them.
UNCOLORED_FORMATS: frozenset[OutputFormat] = frozenset(
    {OutputFormat.JSON, OutputFormat.MARKDOWN}
)


class ColorMode(str, Enum):
    """Value of the ``--color`` option.

    Example:
        >>> resolve_color_mode(color_mode_override=ColorMode.ALWAYS, output_format="json")
        False
    """

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


def _as_output_format(value: OutputFormat | str | None) -> OutputFormat | None:
    if value is None or isinstance(value, OutputFormat):
        return value
    try:
        return OutputFormat(value.lower())
    except ValueError:
        logger.debug("Unknown output format %r; color follows the other rules", value)
        return None


def _env_color_choice() -> bool | None:
    force_color: str | None = os.getenv("FORCE_COLOR")
    if force_color and force_color != "0":
        return True
    if os.getenv("NO_COLOR") is not None:
        return False
    return None


def resolve_color_mode(
    *,
    color_mode_override: ColorMode | None,
    output_format: OutputFormat | str | None,
    stdout_isatty: bool | None = None,
) -> bool:
    """Return True when program output may carry ANSI styles.

    The first rule that applies decides:

    1. ``output_format`` in `UNCOLORED_FORMATS` disables color.
    2. ``--color always`` / ``--color never``.
    3. ``FORCE_COLOR`` (any value but ``"0"``) enables color, then
       ``NO_COLOR`` (any value, even empty) disables it.
    4. Otherwise color follows whether stdout is a terminal.

    Args:
        color_mode_override (ColorMode | None): Parsed ``--color`` value, or None.
        output_format (OutputFormat | str | None): Requested format; strings are
            matched case-insensitively against `OutputFormat` values.
        stdout_isatty (bool | None): TTY status to use instead of probing
            `sys.stdout`.

    Returns:
        bool: Whether color is enabled.
    """
    fmt: OutputFormat | None = _as_output_format(output_format)
    if fmt in UNCOLORED_FORMATS:
        return False

    if color_mode_override is ColorMode.ALWAYS:
        return True
    if color_mode_override is ColorMode.NEVER:
        return False

    env_choice: bool | None = _env_color_choice()
    if env_choice is not None:
        return env_choice

    if stdout_isatty is None:
        try:
            stdout_isatty = sys.stdout.isatty()
        except (OSError, ValueError):
            stdout_isatty = False
    logger.trace("Color auto-detection: isatty=%s", stdout_isatty)
    return bool(stdout_isatty)
