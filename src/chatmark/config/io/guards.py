# topmark:header:start
#
#   project      : ChatMark
#   file         : guards.py
#   file_relpath : src/chatmark/config/io/guards.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Type guards and normalization helpers for TOML parsing.

This module provides `TypeGuard`-based predicates that help Pyright narrow runtime
values coming from TOML parsing.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, TypeGuard

from chatmark.config.logging import get_logger

if TYPE_CHECKING:
    from chatmark.config.logging import ChatmarkLogger

    from .types import TomlTable


logger: ChatmarkLogger = get_logger(__name__)


def is_toml_table(obj: object) -> TypeGuard[TomlTable]:
    """Type guard for a TOML table-like mapping.

    Args:
        obj (object): Value to test.

    Returns:
        TypeGuard[TomlTable]: ``True`` if ``obj`` is a ``dict[str, Any]``.
    """
    return isinstance(obj, dict)


def is_any_list(obj: object) -> TypeGuard[list[Any]]:
    """Type guard for a generic list value (item types are not checked)."""
    return isinstance(obj, list)


def get_table_value(table: TomlTable, key: str) -> TomlTable:
    """Extract a sub-table from a TOML table.

    Returns a new empty dict if the sub-table is missing or not a mapping.

    Args:
        table (TomlTable): Parent table mapping.
        key (str): Sub-table key.

    Returns:
        TomlTable: The sub-table if present and a mapping, otherwise an empty dict.
    """
    value: Any | None = table.get(key)
    if value is not None and not is_toml_table(value):
        logger.debug("Not a TOML table at %s: %r", key, value)
    return value if is_toml_table(value) else {}
