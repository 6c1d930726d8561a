# topmark:header:start
#
#   project      : ChatMark
#   file         : errors.py
#   file_relpath : src/chatmark/core/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Core exception taxonomy for ChatMark.

Only *invalid input* is signalled with an exception. The other failure kinds
are ordinary return values:

- key conflicts in a registry: the mutator returns ``False`` and leaves the
  registry untouched;
- lookups without a match: ``get()`` returns ``None`` and channel
  identification falls back to the default channel;
- a failing transform operator: its own exception propagates unchanged to the
  caller of the render/align/replace call.

These classes carry no Click dependency; the CLI maps them onto its own
``click.ClickException`` subclasses in ``chatmark.cli.errors``.
"""

from __future__ import annotations


class ChatmarkError(Exception):
    """Base class for all ChatMark core errors."""


class InvalidInputError(ChatmarkError, ValueError):
    """Raised at the call that introduced an invalid value.

    Examples are blank message text, a blank placeholder key, or a malformed
    regular expression handed to a format or a channel.
    """
