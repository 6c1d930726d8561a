# topmark:header:start
#
#   project      : ChatMark
#   file         : __init__.py
#   file_relpath : src/chatmark/config/io/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TOML I/O helpers for ChatMark configuration.

Typical flow:
    1. Load the runtime defaults (``load_defaults_dict``).
    2. Load a user TOML file (``load_toml_dict``).
    3. Read values with the typed getters.
    4. Serialize back to TOML when needed (``to_toml``).
"""

from __future__ import annotations

from .getters import (
    get_bool_value_or_none,
    get_int_value_or_none,
    get_string_list_value,
    get_string_value_or_none,
)
from .guards import get_table_value, is_any_list, is_toml_table
from .loaders import load_defaults_dict, load_toml_dict
from .render import to_toml
from .types import TomlTable

__all__: list[str] = [
    "TomlTable",
    "get_bool_value_or_none",
    "get_int_value_or_none",
    "get_string_list_value",
    "get_string_value_or_none",
    "get_table_value",
    "is_any_list",
    "is_toml_table",
    "load_defaults_dict",
    "load_toml_dict",
    "to_toml",
]
