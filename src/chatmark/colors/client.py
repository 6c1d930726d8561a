# topmark:header:start
#
#   project      : ChatMark
#   file         : client.py
#   file_relpath : src/chatmark/colors/client.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Client protocol numbers and RGB capability.

A recipient's client supports RGB colors when its major version is 16 or
newer. The major version is looked up from the client's protocol number; a
protocol outside the table maps to 0 (treated as legacy). Without a recipient,
or without a known protocol, the server's own version applies.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

from chatmark.constants import RGB_SUPPORT_VERSION

if TYPE_CHECKING:
    from chatmark.recipient import Recipient

UNKNOWN_CLIENT: Final[int] = 0

# (major version, first protocol, last protocol, excluded protocols)
_PROTOCOL_TABLE: Final[tuple[tuple[int, int, int, frozenset[int]], ...]] = (
    (7, 0, 5, frozenset()),
    (8, 6, 47, frozenset()),
    (9, 48, 110, frozenset()),
    (10, 201, 210, frozenset(range(206, 210))),
    (11, 301, 316, frozenset()),
    (12, 317, 340, frozenset()),
    (13, 341, 404, frozenset()),
    (14, 441, 500, frozenset({499})),
    (15, 550, 578, frozenset()),
    (16, 701, 754, frozenset()),
    (17, 755, 756, frozenset()),
    (18, 757, 758, frozenset()),
    (19, 759, 762, frozenset()),
    (20, 763, 766, frozenset()),
    (21, 767, 770, frozenset()),
)


def version_for_protocol(protocol: int) -> int:
    """Return the major client version for ``protocol``, or 0 if unknown."""
    for major, first, last, excluded in _PROTOCOL_TABLE:
        if first <= protocol <= last and protocol not in excluded:
            return major
    return UNKNOWN_CLIENT


def client_version(recipient: Recipient | None, server_version: int) -> int:
    """Return the major version of ``recipient``'s client.

    Args:
        recipient (Recipient | None): The target, if any.
        server_version (int): Major version of the server.

    Returns:
        int: The client's major version; ``server_version`` when there is no
            recipient or the recipient does not report a protocol.
    """
    protocol: int | None = getattr(recipient, "protocol", None)
    if recipient is None or protocol is None:
        return server_version
    return version_for_protocol(protocol)


def is_legacy(recipient: Recipient | None, server_version: int) -> bool:
    """Return True if RGB colors must be downsampled for this target."""
    if server_version < RGB_SUPPORT_VERSION:
        return True
    return client_version(recipient, server_version) < RGB_SUPPORT_VERSION
