# topmark:header:start
#
#   project      : ChatMark
#   file         : markup.py
#   file_relpath : src/chatmark/chat/markup.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Inline interaction markup and URL detection.

Messages may carry click/hover events inline:

    <hover:"Line 1<n>Line 2"|run:"/spawn">Click here</text>

The older ``hover=[...]`` / ``run=[...]`` spelling is converted to the quoted
form before parsing.
"""

from __future__ import annotations

import re
from typing import Final

from chatmark.core.text import is_blank

_CLICK_KEYS: Final[str] = (
    r"execute|click|run(?:_command)?|suggest(?:_command)?|(?:open_)?url|(?:open_)?file"
    r"|(?:change_)?page|copy|(?:copy_to_)?clipboard"
)

MARKUP_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"<(?P<events>"
    rf"(?P<k1>hover|{_CLICK_KEYS}):\"(?P<v1>[^|]*?)\""
    rf"(?:\|(?P<k2>hover|{_CLICK_KEYS}):\"(?P<v2>[^|]*?)\")?"
    r")>(?P<text>.+?)</text>",
    re.IGNORECASE,
)

HOVER_PATTERN: Final[re.Pattern[str]] = re.compile(r"hover:\"(.*?)\"", re.IGNORECASE)

URL_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"\b(?:https?://|www\.)[-\w.]+\.[a-z]{2,}(?:[/?#]\S*)?",
    re.IGNORECASE,
)

_OLD_SYNTAX: Final[re.Pattern[str]] = re.compile(
    r"(hover|run|suggest|url)=\[([^|\[\]]+)]",
    re.IGNORECASE,
)


def convert_old_syntax(text: str) -> str:
    """Rewrite ``key=[value]`` events as ``key:"value"``."""
    if is_blank(text):
        return text
    return _OLD_SYNTAX.sub(lambda m: f'{m.group(1)}:"{m.group(2)}"', text)


def has_markup(text: str) -> bool:
    """Return True if ``text`` contains at least one inline event block."""
    return MARKUP_PATTERN.search(text) is not None


def strip_markup(text: str) -> str:
    """Replace every inline event block with its visible text."""
    if is_blank(text):
        return text
    return MARKUP_PATTERN.sub(lambda m: m.group("text"), convert_old_syntax(text))


def find_urls(text: str) -> list[str]:
    """Return the bare URLs found in ``text``, in order."""
    return [m.group() for m in URL_PATTERN.finditer(text)]


def normalize_url(url: str) -> str:
    """Prefix ``https://`` when ``url`` has no scheme."""
    if re.match(r"(?i)https?://", url):
        return url
    return "https://" + url
