# topmark:header:start
#
#   project      : ChatMark
#   file         : render.py
#   file_relpath : src/chatmark/config/io/render.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Render configuration dicts back to TOML text (tomlkit)."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import tomlkit

if TYPE_CHECKING:
    from .types import TomlTable


def _drop_none(value: Any) -> Any:
    if isinstance(value, dict):
        return {k: _drop_none(v) for k, v in value.items() if v is not None}
    if isinstance(value, (list, tuple)):
        return [_drop_none(v) for v in value if v is not None]
    return value


def to_toml(data: TomlTable) -> str:
    """Serialize ``data`` as a TOML document.

    TOML has no null value, so ``None`` entries are left out.
    """
    return tomlkit.dumps(_drop_none(data))
