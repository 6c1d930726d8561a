# topmark:header:start
#
#   project      : ChatMark
#   file         : contracts.py
#   file_relpath : src/chatmark/pipeline/contracts.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Structural contracts for pipeline operators.

Anything callable as ``operator(text) -> text`` is a pipeline operator: plain
functions, bound methods (``codec.strip_all``), lambdas closing over a
recipient, or objects implementing ``__call__``.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class TextOperator(Protocol):
    """A single ``str -> str`` transform stage."""

    def __call__(self, text: str, /) -> str:
        """Return the transformed text."""
        ...
