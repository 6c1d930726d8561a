# topmark:header:start
#
#   project      : ChatMark
#   file         : registry.py
#   file_relpath : src/chatmark/placeholders/registry.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Registry of placeholders keyed by their literal key.

The first registration of a key wins; later loads of the same key return
False. Substitution runs placeholders in registration order.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from chatmark.config.logging import get_logger
from chatmark.core.text import is_blank
from chatmark.pipeline.applier import StringApplier
from chatmark.placeholders.model import Placeholder

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator

    from chatmark.config.logging import ChatmarkLogger
    from chatmark.recipient import RecipientContext

logger: ChatmarkLogger = get_logger(__name__)


def _attr(name: str) -> Callable[[RecipientContext], Any]:
    return lambda recipient: getattr(recipient, name, None)


def _coordinate(name: str) -> Callable[[RecipientContext], Any]:
    def _value(recipient: RecipientContext) -> float | None:
        raw = getattr(recipient, name, None)
        return None if raw is None else round(float(raw), 2)

    return _value


def default_placeholders() -> list[Placeholder[Any]]:
    """Return the identity and location placeholders."""
    return [
        Placeholder("{player}", _attr("name")),
        Placeholder("{playerDisplayName}", _attr("shown_name")),
        Placeholder("{playerUUID}", _attr("uuid")),
        Placeholder("{playerWorld}", _attr("world")),
        Placeholder("{playerGameMode}", _attr("game_mode")),
        *(
            Placeholder("{player%s}" % axis.capitalize(), _coordinate(axis))
            for axis in ("x", "y", "z", "yaw", "pitch")
        ),
    ]


class PlaceholderRegistry:
    """Ordered set of placeholders with unique keys."""

    def __init__(self) -> None:
        self._placeholders: dict[str, Placeholder[Any]] = {}

    def __len__(self) -> int:
        return len(self._placeholders)

    def __contains__(self, key: object) -> bool:
        return key in self._placeholders

    def __iter__(self) -> Iterator[Placeholder[Any]]:
        return iter(list(self._placeholders.values()))

    def get(self, key: str) -> Placeholder[Any] | None:
        """Return the placeholder registered under ``key``, if any."""
        return self._placeholders.get(key)

    def load(self, placeholder: Placeholder[Any]) -> bool:
        """Register ``placeholder`` unless its key is taken."""
        if placeholder.key in self._placeholders:
            logger.debug(
                "Placeholder %s already registered; keeping the existing one", placeholder.key
            )
            return False
        self._placeholders[placeholder.key] = placeholder
        logger.debug("Loaded placeholder %s", placeholder.key)
        return True

    def remove(self, key: str) -> bool:
        """Delete the placeholder registered under ``key``."""
        if self._placeholders.pop(key, None) is None:
            return False
        logger.debug("Removed placeholder %s", key)
        return True

    def edit(self, old_key: str, new_key: str) -> bool:
        """Re-key a placeholder.

        Returns:
            bool: True iff ``old_key`` exists and ``new_key`` is a free, non-blank key.
        """
        placeholder = self._placeholders.get(old_key)
        if placeholder is None or is_blank(new_key) or new_key in self._placeholders:
            return False
        del self._placeholders[old_key]
        self._placeholders[new_key] = placeholder.with_key(new_key)
        logger.debug("Renamed placeholder %s -> %s", old_key, new_key)
        return True

    def replace(
        self,
        recipient: RecipientContext,
        text: str,
        case_sensitive: bool | None = None,
    ) -> str:
        """Substitute every registered key found in ``text``.

        Args:
            recipient (RecipientContext): The recipient the values are computed for.
            text (str): Input text.
            case_sensitive (bool | None): Forces case (in)sensitive matching for
                every placeholder; ``None`` uses each placeholder's own flag.

        Returns:
            str: The substituted text; unchanged when ``recipient`` is None or
            ``text`` is blank.
        """
        if recipient is None or is_blank(text):
            return text

        applier = StringApplier.simplified(text)
        for placeholder in list(self._placeholders.values()):
            applier.apply(lambda s, p=placeholder: p.replace(recipient, s, case_sensitive))
        return applier.result()

    def set_defaults(self) -> None:
        """Load the default placeholders whose keys are not registered yet."""
        for placeholder in default_placeholders():
            self.load(placeholder)

    def reset(self) -> None:
        """Drop every placeholder and load the defaults again."""
        self._placeholders.clear()
        self.set_defaults()
