# topmark:header:start
#
#   project      : ChatMark
#   file         : test_color_mode.py
#   file_relpath : tests/cli_shared/test_color_mode.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Unit tests for `resolve_color_mode` precedence."""

from __future__ import annotations

import pytest

from chatmark.cli_shared.color import ColorMode, resolve_color_mode
from chatmark.cli_shared.utils import OutputFormat


@pytest.fixture(autouse=True)
def clean_color_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("FORCE_COLOR", raising=False)
    monkeypatch.delenv("NO_COLOR", raising=False)


@pytest.mark.parametrize("fmt", ["json", "MARKDOWN", OutputFormat.JSON])
def test_uncolored_formats_never_color(fmt: OutputFormat | str) -> None:
    assert not resolve_color_mode(
        color_mode_override=ColorMode.ALWAYS, output_format=fmt, stdout_isatty=True
    )


def test_explicit_override_wins_over_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("NO_COLOR", "1")
    assert resolve_color_mode(color_mode_override=ColorMode.ALWAYS, output_format=None)
    monkeypatch.setenv("FORCE_COLOR", "1")
    assert not resolve_color_mode(color_mode_override=ColorMode.NEVER, output_format=None)


def test_force_color_beats_no_color(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("FORCE_COLOR", "1")
    monkeypatch.setenv("NO_COLOR", "1")
    assert resolve_color_mode(
        color_mode_override=ColorMode.AUTO, output_format=None, stdout_isatty=False
    )


def test_force_color_zero_is_ignored(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("FORCE_COLOR", "0")
    assert not resolve_color_mode(
        color_mode_override=None, output_format=None, stdout_isatty=False
    )


def test_no_color_disables_auto(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("NO_COLOR", "")
    assert not resolve_color_mode(
        color_mode_override=ColorMode.AUTO, output_format=None, stdout_isatty=True
    )


@pytest.mark.parametrize("isatty", [True, False])
def test_auto_follows_tty(isatty: bool) -> None:
    assert (
        resolve_color_mode(color_mode_override=None, output_format="text", stdout_isatty=isatty)
        is isatty
    )


def test_ansi_preview_format_allows_color() -> None:
    assert resolve_color_mode(
        color_mode_override=ColorMode.ALWAYS, output_format="ansi", stdout_isatty=False
    )


def test_unknown_format_follows_tty() -> None:
    assert resolve_color_mode(
        color_mode_override=None, output_format="ndjson", stdout_isatty=True
    )
