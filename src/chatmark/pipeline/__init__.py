# topmark:header:start
#
#   project      : ChatMark
#   file         : __init__.py
#   file_relpath : src/chatmark/pipeline/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Priority-aware string transformation pipeline.

`StringApplier` threads one owned string through a sequence of text
operators. Two variants exist:

- ``StringApplier.simplified(value)`` runs each operator immediately and
  ignores priorities;
- ``StringApplier.prioritized(value)`` queues operators and runs them, in
  priority order then insertion order, the first time the result is read.
"""

from __future__ import annotations

from chatmark.pipeline.applier import PriorityApplier, SimpleApplier, StringApplier
from chatmark.pipeline.contracts import TextOperator
from chatmark.pipeline.priority import Priority

__all__ = [
    "Priority",
    "PriorityApplier",
    "SimpleApplier",
    "StringApplier",
    "TextOperator",
]
