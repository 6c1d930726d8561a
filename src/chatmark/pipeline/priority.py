# topmark:header:start
#
#   project      : ChatMark
#   file         : priority.py
#   file_relpath : src/chatmark/pipeline/priority.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Priority tiers for deferred pipeline operators."""

from __future__ import annotations

from enum import IntEnum


class Priority(IntEnum):
    """Execution tier of a queued operator.

    Lower values run first, so ``HIGHEST`` operators see the untouched input
    and ``LOWEST`` operators see the output of everything else. Operators in
    the same tier run in insertion order.
    """

    HIGHEST = -2
    HIGH = -1
    NORMAL = 0
    LOW = 1
    LOWEST = 2
