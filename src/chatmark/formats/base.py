# topmark:header:start
#
#   project      : ChatMark
#   file         : base.py
#   file_relpath : src/chatmark/formats/base.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Format records: named, regex-triggered text transforms.

A format is an immutable record holding a regex and a transform function.
The variant decides what the function receives:

* `Format`: ``function(recipient, text)``.
* `TextFormat`: ``function(text)``; the recipient is ignored.
* `ContextualFormat`: ``function(recipients, text)`` where ``recipients`` is a
  tuple; a single recipient is wrapped into a one-element tuple.
* `PlainFormat`: no regex at all; `is_formatted` is always False and
  `FormatRegistry.apply_all` runs it on every text.

``inline`` marks formats whose result is a string that can be substituted
back into the message; only those run in `FormatRegistry.apply_all`.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, ClassVar, Generic, TypeVar

from chatmark.core.text import compile_pattern, is_blank
from chatmark.recipient import as_recipients

if TYPE_CHECKING:
    from collections.abc import Callable

    from chatmark.recipient import Recipient, RecipientContext, Recipients

T = TypeVar("T")

_NEVER: re.Pattern[str] = re.compile(r"(?!)")


@dataclass(frozen=True, kw_only=True)
class Format(Generic[T]):
    """Regex-scoped transform evaluated for one recipient.

    Attributes:
        regex (str): Pattern source. Compiled once; a malformed regex raises
            `chatmark.core.errors.InvalidInputError`.
        function (Callable[[RecipientContext, str], T]): The transform.
        stripper (Callable[[re.Match[str]], str] | None): Replacement used by
            `remove_format` for each match; ``None`` removes the match.
        inline (bool): Whether the result is a string to splice into messages.
        pattern (re.Pattern[str]): The compiled regex (derived).
    """

    kind: ClassVar[str] = "format"
    # Run by `FormatRegistry.apply_all` even when the regex does not match.
    always_apply: ClassVar[bool] = False

    regex: str
    function: Callable[[RecipientContext, str], T]
    stripper: Callable[[re.Match[str]], str] | None = None
    inline: bool = True
    pattern: re.Pattern[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "pattern", self._compile())

    def _compile(self) -> re.Pattern[str]:
        return compile_pattern(self.regex, what=f"{self.kind} format")

    def is_formatted(self, text: str) -> bool:
        """Return True if the pattern occurs in ``text``."""
        return self.pattern.search(text) is not None

    def remove_format(self, text: str) -> str:
        """Return ``text`` with every marker removed (or replaced by the stripper)."""
        if is_blank(text):
            return text
        if self.stripper is None:
            return self.pattern.sub("", text)
        return self.pattern.sub(self.stripper, text)

    def accept(self, recipient: RecipientContext, text: str) -> T:
        """Evaluate the format for ``recipient``."""
        return self.function(recipient, text)


@dataclass(frozen=True, kw_only=True)
class TextFormat(Format[T]):
    """Format whose function only depends on the text."""

    kind: ClassVar[str] = "text"

    function: Callable[[str], T]  # type: ignore[assignment]

    def accept(self, recipient: RecipientContext, text: str) -> T:
        """Evaluate the format; ``recipient`` is ignored."""
        return self.function(text)


@dataclass(frozen=True, kw_only=True)
class ContextualFormat(Format[T]):
    """Format evaluated once for a whole group of recipients."""

    kind: ClassVar[str] = "contextual"

    function: Callable[[tuple[Recipient | None, ...], str], T]  # type: ignore[assignment]
    inline: bool = False

    def accept(  # type: ignore[override]
        self, recipient: Recipient | Recipients | None, text: str
    ) -> T:
        """Evaluate the format for one recipient or a collection of them."""
        return self.function(as_recipients(recipient), text)


@dataclass(frozen=True, kw_only=True)
class PlainFormat(Format[T]):
    """Format without a trigger regex: never reported as present in a text."""

    kind: ClassVar[str] = "plain"
    always_apply: ClassVar[bool] = True

    regex: str = ""

    def _compile(self) -> re.Pattern[str]:
        return _NEVER

    def is_formatted(self, text: str) -> bool:
        """Always False."""
        return False

    def remove_format(self, text: str) -> str:
        """Return ``text`` unchanged."""
        return text


AnyFormat = Format[Any]
