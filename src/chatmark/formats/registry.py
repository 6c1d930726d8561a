# topmark:header:start
#
#   project      : ChatMark
#   file         : registry.py
#   file_relpath : src/chatmark/formats/registry.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Registry of named formats.

Identifiers are case-insensitive (stored upper-cased). Mutators never
overwrite silently and never raise on a key conflict: they return False and
leave the registry untouched.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from chatmark.config.logging import get_logger
from chatmark.core.text import is_blank
from chatmark.formats.builtins import default_formats

if TYPE_CHECKING:
    from collections.abc import Iterator

    from chatmark.config.logging import ChatmarkLogger
    from chatmark.formats.base import Format
    from chatmark.recipient import RecipientContext

logger: ChatmarkLogger = get_logger(__name__)


def _key(identifier: str) -> str:
    return identifier.strip().upper()


class FormatRegistry:
    """Mapping from identifier to `Format`, kept in registration order."""

    def __init__(self) -> None:
        self._formats: dict[str, Format[Any]] = {}

    def __len__(self) -> int:
        return len(self._formats)

    def __contains__(self, identifier: object) -> bool:
        return isinstance(identifier, str) and _key(identifier) in self._formats

    def __iter__(self) -> Iterator[str]:
        return iter(self._formats)

    def items(self) -> list[tuple[str, Format[Any]]]:
        """Return ``(identifier, format)`` pairs in registration order."""
        return list(self._formats.items())

    def load(self, identifier: str, fmt: Format[Any]) -> bool:
        """Register ``fmt`` under ``identifier`` if the identifier is free.

        Returns:
            bool: True if stored; False if the identifier is blank or taken (the
            first registration wins).
        """
        if is_blank(identifier):
            return False
        key = _key(identifier)
        if key in self._formats:
            logger.debug("Format %s already registered; keeping the existing one", key)
            return False
        self._formats[key] = fmt
        logger.debug("Loaded format %s (%s)", key, fmt.kind)
        return True

    def remove(self, identifier: str) -> bool:
        """Delete the format registered under ``identifier``."""
        if self._formats.pop(_key(identifier), None) is None:
            return False
        logger.debug("Removed format %s", _key(identifier))
        return True

    def edit_format(self, identifier: str, fmt: Format[Any]) -> bool:
        """Replace the logic stored under an existing ``identifier``."""
        key = _key(identifier)
        if key not in self._formats:
            return False
        self._formats[key] = fmt
        logger.debug("Replaced format %s", key)
        return True

    def edit_id(self, old_id: str, new_id: str) -> bool:
        """Move a format to a new identifier.

        Returns:
            bool: True iff ``old_id`` exists and ``new_id`` is free.
        """
        old_key, new_key = _key(old_id), _key(new_id)
        if is_blank(new_id) or old_key not in self._formats or new_key in self._formats:
            return False
        self._formats[new_key] = self._formats.pop(old_key)
        logger.debug("Renamed format %s -> %s", old_key, new_key)
        return True

    def get(self, identifier: str) -> Format[Any] | None:
        """Return the format registered under ``identifier``, if any."""
        return self._formats.get(_key(identifier))

    def set_defaults(self) -> None:
        """Register the built-in formats that are missing."""
        for key, fmt in default_formats().items():
            self.load(key, fmt)

    def apply_all(self, recipient: RecipientContext, text: str) -> str:
        """Run every inline format on ``text`` in registration order."""
        if is_blank(text):
            return text
        for key, fmt in self._formats.items():
            if not fmt.inline or not (fmt.always_apply or fmt.is_formatted(text)):
                continue
            text = str(fmt.accept(recipient, text))
            logger.trace("format %s -> %r", key, text)
        return text

    def strip_all(self, text: str) -> str:
        """Remove the markers of every registered format."""
        for fmt in self._formats.values():
            text = fmt.remove_format(text)
        return text
