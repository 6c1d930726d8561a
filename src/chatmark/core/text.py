# topmark:header:start
#
#   project      : ChatMark
#   file         : text.py
#   file_relpath : src/chatmark/core/text.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Small text helpers shared by the registries and the chat layer."""

from __future__ import annotations

import re

from chatmark.core.errors import InvalidInputError


def is_blank(text: str | None) -> bool:
    """Return True if ``text`` is ``None``, empty, or whitespace only."""
    return text is None or not text.strip()


def compile_pattern(regex: str, *, flags: int = 0, what: str = "pattern") -> re.Pattern[str]:
    """Compile ``regex`` and report syntax errors as invalid input.

    Args:
        regex (str): The regular expression source.
        flags (int): ``re`` flags to compile with.
        what (str): Short description of the owner, used in the error message.

    Returns:
        re.Pattern[str]: The compiled pattern.

    Raises:
        InvalidInputError: If ``regex`` is not a valid regular expression.
    """
    try:
        return re.compile(regex, flags)
    except re.error as exc:
        raise InvalidInputError(f"Invalid regex for {what}: {regex!r} ({exc})") from exc
