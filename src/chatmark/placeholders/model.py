# topmark:header:start
#
#   project      : ChatMark
#   file         : model.py
#   file_relpath : src/chatmark/placeholders/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Placeholder records: a literal key and a recipient-dependent value."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from chatmark.core.errors import InvalidInputError
from chatmark.core.text import is_blank

if TYPE_CHECKING:
    from collections.abc import Callable

    from chatmark.recipient import RecipientContext

T = TypeVar("T")


@dataclass(frozen=True)
class Placeholder(Generic[T]):
    """A key such as ``{player}`` bound to a value function.

    Attributes:
        key (str): Literal text to look for. Must not be blank.
        function (Callable[[RecipientContext], T | None]): Value producer. A
            ``None`` result leaves the text untouched.
        sensitive (bool): Whether the key is matched case-sensitively.

    Raises:
        InvalidInputError: If ``key`` is blank.
    """

    key: str
    function: Callable[[RecipientContext], T | None]
    sensitive: bool = False

    def __post_init__(self) -> None:
        if is_blank(self.key):
            raise InvalidInputError("Placeholder key must not be blank")

    @classmethod
    def constant(cls, key: str, value: Any, *, sensitive: bool = False) -> Placeholder[Any]:
        """Return a placeholder that always yields ``value``."""
        return cls(key, lambda _recipient: value, sensitive)

    def with_key(self, key: str) -> Placeholder[T]:
        """Return a copy of this placeholder under another key."""
        return Placeholder(key, self.function, self.sensitive)

    def replace(
        self,
        recipient: RecipientContext,
        text: str,
        case_sensitive: bool | None = None,
    ) -> str:
        """Substitute every occurrence of the key in ``text``.

        Args:
            recipient (RecipientContext): Passed to the value function.
            text (str): Input text.
            case_sensitive (bool | None): Override for `sensitive`.

        Returns:
            str: The text with the key replaced by ``str(value)``.
        """
        sensitive = self.sensitive if case_sensitive is None else case_sensitive
        flags = 0 if sensitive else re.IGNORECASE
        pattern = re.compile(re.escape(self.key), flags)
        if pattern.search(text) is None:
            return text

        value = self.function(recipient)
        if value is None:
            return text
        replacement = str(value)
        return pattern.sub(lambda _m: replacement, text)
