# topmark:header:start
#
#   project      : ChatMark
#   file         : enum_mixins.py
#   file_relpath : src/chatmark/core/enum_mixins.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Keyed string enums for ChatMark (typing-friendly, UI-agnostic).

Click actions and channel flags are closed vocabularies that users spell in
many ways (``run``, ``run_command``, ``RUN-COMMAND``...). ``KeyedStrEnum`` gives
each member a stable machine key, a human label and a set of aliases, and
parses user tokens against all three.

Provided:
    - ``KeyedStrEnum``:
        ``str`` enum whose ``.value`` is the machine key, with ``.label`` and
        ``.aliases`` metadata and an alias-aware ``parse()``.

Example:
    ```python
    class Mode(KeyedStrEnum):
        FAST = ("fast", "Fast mode", ("quick",))
        SAFE = ("safe", "Safe mode")

    assert Mode.parse("Quick") is Mode.FAST
    assert Mode.parse("nope") is None
    ```
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, TypeVar, cast

if TYPE_CHECKING:
    from collections.abc import Iterable

_KS = TypeVar("_KS", bound="KeyedStrEnum")


def _norm_token(s: str) -> str:
    """Normalize an identifier-like string to match keys and aliases."""
    return s.strip().lower().replace("-", "_").replace(" ", "_")


class KeyedStrEnum(str, Enum):
    """Enum where `.value` is a stable machine key; metadata lives on attributes.

    Attributes:
        label (str): Human-readable label for the member.
        aliases (tuple[str, ...]): Alternative tokens accepted by `parse()`.
    """

    label: str
    aliases: tuple[str, ...]

    def __new__(
        cls: type[_KS],
        key: str,
        label: str,
        aliases: Iterable[str] = (),
    ) -> _KS:
        """Create a new KeyedStrEnum member with key, label, and optional aliases.

        Args:
            key (str): The stable machine key (stored as `.value`).
            label (str): The human-readable label for the enum member.
            aliases (Iterable[str]): Optional aliases for parsing. Defaults to empty.

        Returns:
            _KS: The newly created enum member.
        """
        obj: _KS = str.__new__(cls, key)
        obj._value_ = key
        obj.label = label
        obj.aliases = tuple(aliases)
        return obj

    @property
    def key(self) -> str:
        """Stable machine key (same as `.value`)."""
        return cast("str", self.value)

    def tokens(self) -> tuple[str, ...]:
        """Return every token `parse()` accepts for this member, key first."""
        return (self.key, self.name.lower(), *self.aliases)

    @classmethod
    def parse(cls: type[_KS], raw: str | None) -> _KS | None:
        """Parse a token into an enum member.

        Matches against the stable key (`.value`), the member name (`.name`)
        and any configured aliases. Matching is case-insensitive and treats
        '-' and ' ' as '_'.

        Args:
            raw (str | None): The token to parse.

        Returns:
            _KS | None: The matching member, or ``None``.
        """
        if raw is None:
            return None
        token: str = _norm_token(raw)
        for member in cls:
            if any(token == _norm_token(t) for t in member.tokens()):
                return member
        return None
