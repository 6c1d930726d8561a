# topmark:header:start
#
#   project      : ChatMark
#   file         : __init__.py
#   file_relpath : src/chatmark/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Core, UI-agnostic primitives shared across ChatMark.

The ``chatmark.core`` package holds small building blocks that are safe to
import from anywhere in the codebase (engine, config, CLI, tests) without
pulling in rendering or user-interface concerns.

Included modules:

- ``errors``
  The core exception taxonomy (``ChatmarkError``, ``InvalidInputError``).

- ``enum_mixins``
  Keyed string enums with labels and aliases, used for click actions and
  channel flags.

- ``text``
  Blank checks and regex compilation that reports bad patterns as invalid
  input.
"""

from __future__ import annotations
