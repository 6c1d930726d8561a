# topmark:header:start
#
#   project      : ChatMark
#   file         : test_cli_align.py
#   file_relpath : tests/cli/test_cli_align.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI tests for `chatmark align`."""

from __future__ import annotations

from tests.cli.conftest import assert_SUCCESS, run_plain
from tests.conftest import mark_cli


@mark_cli
def test_align_centers_prefixed_line() -> None:
    result = run_plain("align", "[C]Hello")
    assert_SUCCESS(result)
    assert result.stdout.splitlines() == [" " * 36 + "Hello", "width: 22"]


@mark_cli
def test_align_keeps_formatting_codes() -> None:
    result = run_plain("align", "[C]&lHi")
    assert_SUCCESS(result)
    assert result.stdout.splitlines()[0] == " " * 38 + "&lHi"


@mark_cli
def test_align_leaves_unprefixed_lines_alone() -> None:
    result = run_plain("align", "Hello")
    assert_SUCCESS(result)
    assert result.stdout.splitlines() == ["Hello", "width: 22"]


@mark_cli
def test_align_rejects_non_positive_width() -> None:
    result = run_plain("align", "--width", "0", "[C]Hello")
    assert result.exit_code == 2


@mark_cli
def test_align_warns_about_missing_prefix() -> None:
    result = run_plain("align", "Hello")
    assert "prefix" in result.stderr
    assert "prefix" not in result.stdout
