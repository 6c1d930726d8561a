# topmark:header:start
#
#   project      : ChatMark
#   file         : model.py
#   file_relpath : src/chatmark/channels/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Channel records and delivery flags.

A channel is recognized by a leading marker built from the registry's
delimiters, one of the channel's aliases and an optional argument pattern:

    [title:5]Welcome!
    ^     ^ ^
    |     | end delimiter
    |     arguments matched by the ``pattern`` suffix
    start delimiter + alias
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from chatmark.constants import DEFAULT_END_DELIMITER, DEFAULT_START_DELIMITER
from chatmark.core.enum_mixins import KeyedStrEnum
from chatmark.core.errors import InvalidInputError
from chatmark.core.text import compile_pattern, is_blank


class ChannelFlag(KeyedStrEnum):
    """Delivery target a channel hands its output to (opaque to the engine)."""

    CHAT = ("chat", "Chat line")
    ACTION_BAR = ("action_bar", "Action bar", ("actionbar",))
    TITLE = ("title", "Title and subtitle")
    BOSSBAR = ("bossbar", "Boss bar", ("boss_bar",))
    JSON = ("json", "Raw JSON component")
    WEBHOOK = ("webhook", "Webhook")


@dataclass(frozen=True)
class Channel:
    """A named message category.

    Attributes:
        name (str): Channel name; always the first marker alias.
        aliases (tuple[str, ...]): Extra marker names.
        prefix (str): Display prefix prepended by `apply_prefix`.
        pattern (str): Regex suffix matching the marker arguments, such as
            ``(?::\\d+)?``. Empty when the channel takes no arguments.
        case_sensitive (bool): Whether marker names must match case exactly.
        flag (ChannelFlag): Delivery target.
        start_delimiter (str): Literal opening delimiter.
        end_delimiter (str): Literal closing delimiter.
        marker (re.Pattern[str]): The compiled marker (derived).

    Raises:
        InvalidInputError: If ``name`` is blank or ``pattern`` is not a valid regex.
    """

    name: str
    aliases: tuple[str, ...] = ()
    prefix: str = ""
    pattern: str = ""
    case_sensitive: bool = False
    flag: ChannelFlag = ChannelFlag.CHAT
    start_delimiter: str = DEFAULT_START_DELIMITER
    end_delimiter: str = DEFAULT_END_DELIMITER
    marker: re.Pattern[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if is_blank(self.name):
            raise InvalidInputError("Channel name must not be blank")
        # Argument suffixes are validated on their own so errors point at them.
        if self.pattern:
            compile_pattern(self.pattern, what=f"channel {self.name!r}")

        names = "|".join(re.escape(n) for n in self.marker_names)
        regex = (
            f"{re.escape(self.start_delimiter)}"
            f"(?P<name>{names})(?P<args>{self.pattern})"
            f"{re.escape(self.end_delimiter)}"
        )
        flags = 0 if self.case_sensitive else re.IGNORECASE
        object.__setattr__(
            self, "marker", compile_pattern(regex, flags=flags, what=f"channel {self.name!r}")
        )

    @property
    def marker_names(self) -> tuple[str, ...]:
        """The name followed by the aliases, without duplicates."""
        return tuple(dict.fromkeys((self.name, *self.aliases)))

    def matches(self, text: str) -> bool:
        """Return True if ``text`` starts with this channel's marker."""
        return self.marker.match(text) is not None

    def strip(self, text: str) -> str:
        """Remove the leading marker from ``text``, if present."""
        match = self.marker.match(text)
        return text if match is None else text[match.end() :]

    def arguments(self, text: str) -> tuple[str, ...]:
        """Return the ``:``-separated marker arguments (empty when none)."""
        match = self.marker.match(text)
        if match is None:
            return ()
        args = match.group("args") or ""
        if args.startswith(":"):
            args = args[1:]
        return tuple(args.split(":")) if args else ()

    def apply_prefix(self, text: str) -> str:
        """Prepend the display prefix."""
        return self.prefix + text if self.prefix else text


def default_channels() -> list[Channel]:
    """Return the built-in channels in identification order."""
    return [
        Channel("chat", flag=ChannelFlag.CHAT),
        Channel("action_bar", flag=ChannelFlag.ACTION_BAR),
        Channel("title", pattern=r"(?::\d+)?", flag=ChannelFlag.TITLE),
        Channel("bossbar", pattern=r"(?::.+?)?", flag=ChannelFlag.BOSSBAR),
        Channel("json", flag=ChannelFlag.JSON),
        Channel("webhook", pattern=r"(?::.+?)?", flag=ChannelFlag.WEBHOOK),
    ]
