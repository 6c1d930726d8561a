# topmark:header:start
#
#   project      : ChatMark
#   file         : click.py
#   file_relpath : src/chatmark/chat/click.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click and hover events attached to message components."""

from __future__ import annotations

from dataclasses import dataclass

from chatmark.chat.markup import HOVER_PATTERN
from chatmark.core.enum_mixins import KeyedStrEnum
from chatmark.core.text import is_blank


class ClickAction(KeyedStrEnum):
    """What happens when a component is clicked.

    The key is the action name used in raw JSON messages.
    """

    EXECUTE = ("run_command", "Run a command", ("click", "run", "execute", "run_cmd"))
    OPEN_URL = ("open_url", "Open a URL", ("url",))
    OPEN_FILE = ("open_file", "Open a file", ("file",))
    SUGGEST = ("suggest_command", "Suggest a command", ("suggest", "suggest_cmd"))
    CHANGE_PAGE = ("change_page", "Change the book page", ("page",))
    CLIPBOARD = ("copy_to_clipboard", "Copy to clipboard", ("copy", "clipboard"))

    @classmethod
    def from_name(cls, raw: str | None) -> ClickAction:
        """Parse ``raw``; unknown or blank names fall back to `SUGGEST`."""
        if is_blank(raw):
            return cls.SUGGEST
        return cls.parse(raw) or cls.SUGGEST


@dataclass(frozen=True)
class ClickEvent:
    """A click action and its payload (command, URL, page...)."""

    action: ClickAction
    payload: str

    @classmethod
    def parse(cls, raw: str) -> ClickEvent:
        """Build an event from ``kind:payload`` markup.

        Double quotes are removed and the text is split on the first colon, so
        ``url:"https://x.y"`` keeps the URL's own colon. A missing payload
        yields an empty one.
        """
        kind, _, payload = raw.replace('"', "").partition(":")
        return cls(ClickAction.from_name(kind), payload)

    @property
    def is_empty(self) -> bool:
        return is_blank(self.payload)

    def to_markup(self) -> str:
        return f'{self.action.key}:"{self.payload}"'


def parse_hover(raw: str, separator: str) -> tuple[str, ...]:
    """Split hover text into lines.

    ``raw`` may be bare text or contain ``hover:"..."`` markup; every marker
    is unwrapped in place and the text around it is kept.
    """
    body = HOVER_PATTERN.sub(lambda m: m.group(1), raw)
    return tuple(body.split(separator)) if separator else (body,)
