# topmark:header:start
#
#   project      : ChatMark
#   file         : registry.py
#   file_relpath : src/chatmark/channels/registry.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Channel registry and identification."""

from __future__ import annotations

import dataclasses
from typing import TYPE_CHECKING

from chatmark.channels.model import Channel, default_channels
from chatmark.config.logging import get_logger
from chatmark.constants import DEFAULT_CHANNEL, DEFAULT_END_DELIMITER, DEFAULT_START_DELIMITER
from chatmark.core.text import is_blank

if TYPE_CHECKING:
    from collections.abc import Iterator

    from chatmark.config.logging import ChatmarkLogger

logger: ChatmarkLogger = get_logger(__name__)


class ChannelRegistry:
    """Ordered channels sharing one pair of marker delimiters.

    Channels are rebound to the registry's delimiters when loaded, and again
    whenever the delimiters change.

    Args:
        start_delimiter (str): Literal opening delimiter.
        end_delimiter (str): Literal closing delimiter.
        default (str): Name of the fallback channel.
    """

    def __init__(
        self,
        *,
        start_delimiter: str = DEFAULT_START_DELIMITER,
        end_delimiter: str = DEFAULT_END_DELIMITER,
        default: str = DEFAULT_CHANNEL,
    ) -> None:
        self._start: str = start_delimiter
        self._end: str = end_delimiter
        self.default_name: str = default
        self._channels: dict[str, Channel] = {}

    def __len__(self) -> int:
        return len(self._channels)

    def __contains__(self, name: object) -> bool:
        return name in self._channels

    def __iter__(self) -> Iterator[Channel]:
        return iter(list(self._channels.values()))

    @property
    def start_delimiter(self) -> str:
        return self._start

    @property
    def end_delimiter(self) -> str:
        return self._end

    def set_delimiters(self, start: str, end: str) -> None:
        """Change the marker delimiters of every registered channel."""
        self._start, self._end = start, end
        self._channels = {name: self._bind(ch) for name, ch in self._channels.items()}
        logger.debug("Channel delimiters set to %r %r", start, end)

    def _bind(self, channel: Channel) -> Channel:
        if channel.start_delimiter == self._start and channel.end_delimiter == self._end:
            return channel
        return dataclasses.replace(
            channel, start_delimiter=self._start, end_delimiter=self._end
        )

    @property
    def default(self) -> Channel:
        """The fallback channel (a bare chat channel if none is registered)."""
        channel = self._channels.get(self.default_name)
        if channel is None:
            channel = self._bind(Channel(self.default_name))
        return channel

    def load(self, channel: Channel) -> bool:
        """Register ``channel`` unless its name is taken."""
        if channel.name in self._channels:
            logger.debug("Channel %s already registered; keeping the existing one", channel.name)
            return False
        self._channels[channel.name] = self._bind(channel)
        logger.debug("Loaded channel %s", channel.name)
        return True

    def replace(self, channel: Channel) -> bool:
        """Replace the registered channel with the same name."""
        if channel.name not in self._channels:
            return False
        self._channels[channel.name] = self._bind(channel)
        return True

    def remove(self, name: str) -> bool:
        """Delete a channel; the default channel cannot be removed."""
        if name == self.default_name or name not in self._channels:
            return False
        del self._channels[name]
        logger.debug("Removed channel %s", name)
        return True

    def get(self, name: str) -> Channel | None:
        """Return the channel called ``name``, if any."""
        return self._channels.get(name)

    def set_defaults(self) -> None:
        """Register the built-in channels that are missing."""
        for channel in default_channels():
            self.load(channel)

    def identify(self, text: str) -> Channel:
        """Return the channel whose marker starts ``text``.

        A blank text yields the default channel; a text equal to a channel name
        yields that channel. Otherwise channels are tried in registration order
        and the default channel is returned when none matches.
        """
        if is_blank(text):
            return self.default

        exact = self._channels.get(text)
        if exact is not None:
            return exact

        for channel in self._channels.values():
            if channel.matches(text):
                logger.trace("identified channel %s", channel.name)
                return channel
        return self.default
