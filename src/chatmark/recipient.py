# topmark:header:start
#
#   project      : ChatMark
#   file         : recipient.py
#   file_relpath : src/chatmark/recipient.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Recipient context passed to placeholder, format and color evaluation.

The host platform owns its player handle; ChatMark only needs a handful of
read-only attributes from it. `Recipient` is the plain value used by the CLI
and the tests. Any object exposing the same attribute names works as well,
because placeholders read attributes by name.
"""

from __future__ import annotations

from collections.abc import Collection
from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class Recipient:
    """Identity of one message target.

    Attributes:
        name (str): Account name.
        display_name (str | None): Decorated name; falls back to ``name``.
        uuid (str | None): Stable account identifier.
        world (str | None): Name of the world the recipient is in.
        game_mode (str | None): Current game mode name.
        x (float): X coordinate.
        y (float): Y coordinate.
        z (float): Z coordinate.
        yaw (float): Horizontal head rotation.
        pitch (float): Vertical head rotation.
        protocol (int | None): Client protocol number, used to decide whether the
            client understands RGB colors. ``None`` means "same as the server".
    """

    name: str
    display_name: str | None = None
    uuid: str | None = None
    world: str | None = None
    game_mode: str | None = None
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    yaw: float = 0.0
    pitch: float = 0.0
    protocol: int | None = None

    @property
    def shown_name(self) -> str:
        """Return the display name, or the account name when none is set."""
        return self.display_name or self.name


# A single recipient, or none at all (console / broadcast without a parser).
RecipientContext = Union[Recipient, None]

# What contextual formats receive: any collection of optional recipients.
Recipients = Collection[Union[Recipient, None]]


def as_recipients(target: Recipient | Recipients | None) -> tuple[Recipient | None, ...]:
    """Normalize one recipient, a collection, or ``None`` into a tuple.

    A single recipient (or ``None``) is wrapped in a one-element tuple.
    """
    if target is None or isinstance(target, Recipient):
        return (target,)
    return tuple(target)
