# topmark:header:start
#
#   project      : ChatMark
#   file         : getters.py
#   file_relpath : src/chatmark/config/io/getters.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Value getters for TOML config tables.

Getters never raise: a missing key yields the default (or ``None``), and a value
of the wrong type is logged as a warning and ignored.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from chatmark.config.logging import get_logger

from .guards import is_any_list

if TYPE_CHECKING:
    from chatmark.config.logging import ChatmarkLogger

    from .types import TomlTable

logger: ChatmarkLogger = get_logger(__name__)


def _warn(where: str, key: str, expected: str, value: object) -> None:
    logger.warning(
        "Expected %s in %s.%s, got %s: %r", expected, where, key, type(value).__name__, value
    )


def get_string_value_or_none(table: TomlTable, key: str, *, where: str = "") -> str | None:
    """Extract an optional string value (``None`` when absent or not a string)."""
    value: Any | None = table.get(key)
    if value is None:
        return None
    if isinstance(value, str):
        return value
    _warn(where, key, "string", value)
    return None


def get_bool_value_or_none(table: TomlTable, key: str, *, where: str = "") -> bool | None:
    """Extract an optional boolean value (integers are not coerced)."""
    value: Any | None = table.get(key)
    if value is None:
        return None
    if isinstance(value, bool):
        return value
    _warn(where, key, "bool", value)
    return None


def get_int_value_or_none(table: TomlTable, key: str, *, where: str = "") -> int | None:
    """Extract an optional int value.

    Notes:
        ``bool`` is rejected (since ``bool`` is a subclass of ``int``).
    """
    value: Any | None = table.get(key)
    if value is None:
        return None
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    _warn(where, key, "int", value)
    return None


def get_string_list_value(table: TomlTable, key: str, *, where: str = "") -> list[str]:
    """Extract a list of strings; a bare string becomes a one-element list.

    Non-string items are dropped with a warning.
    """
    value: Any | None = table.get(key)
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if not is_any_list(value):
        _warn(where, key, "list of strings", value)
        return []
    out: list[str] = []
    for item in value:
        if isinstance(item, str):
            out.append(item)
        else:
            _warn(where, key, "string item", item)
    return out
