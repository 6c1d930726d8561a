# topmark:header:start
#
#   project      : ChatMark
#   file         : test_enum_choice_param.py
#   file_relpath : tests/cli_shared/test_enum_choice_param.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Unit tests for the `EnumChoiceParam` Click type."""

from __future__ import annotations

import click
import pytest

from chatmark.cli.cli_types import EnumChoiceParam
from chatmark.cli_shared.utils import OutputFormat


def test_converts_by_value_case_insensitively() -> None:
    param = EnumChoiceParam(OutputFormat)
    assert param.convert("JSON", None, None) is OutputFormat.JSON
    assert param.convert(OutputFormat.ANSI, None, None) is OutputFormat.ANSI
    assert param.convert(None, None, None) is None


def test_member_subset_rejects_others() -> None:
    param = EnumChoiceParam(OutputFormat, (OutputFormat.DEFAULT, OutputFormat.JSON))
    assert param.choices == ["text", "json"]
    with pytest.raises(click.BadParameter, match="Must be one of: text, json"):
        param.convert("markdown", None, None)


def test_shell_complete_prefix() -> None:
    param = EnumChoiceParam(OutputFormat)
    ctx = click.Context(click.Command("x"))
    items = param.shell_complete(ctx, click.Option(["--format"]), "a")
    assert [item.value for item in items] == ["ansi"]
