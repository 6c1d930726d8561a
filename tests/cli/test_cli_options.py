# topmark:header:start
#
#   project      : ChatMark
#   file         : test_cli_options.py
#   file_relpath : tests/cli/test_cli_options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI tests for the group options, config loading and exit codes."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from chatmark.cli.cmd_common import engine_errors
from chatmark.cli.errors import ChatmarkInputError, ChatmarkRenderError
from chatmark.cli.options import LOG_LEVELS, resolve_color_option, resolve_verbosity
from chatmark.cli_shared.color import ColorMode
from chatmark.cli_shared.exit_codes import ExitCode
from chatmark.core.errors import InvalidInputError
from tests.cli.conftest import (
    assert_CONFIG_ERROR,
    assert_FILE_NOT_FOUND,
    assert_SUCCESS,
    assert_USAGE_ERROR,
    run_cli,
    run_plain,
    stdout_lines,
)
from tests.conftest import mark_cli, parametrize

if TYPE_CHECKING:
    from pathlib import Path


def _config(tmp_path: Path, text: str) -> str:
    path = tmp_path / "chatmark.toml"
    path.write_text(text, encoding="utf-8")
    return str(path)


@mark_cli
def test_no_subcommand_prints_hint_and_help() -> None:
    result = run_plain()
    assert_SUCCESS(result)
    assert result.stdout.startswith("Hint: use 'chatmark render TEXT...' to render a message.")
    assert "Commands:" in result.stdout


@mark_cli
def test_verbose_and_quiet_are_exclusive() -> None:
    assert_USAGE_ERROR(run_plain("-v", "-q", "version"))


@parametrize(
    ("verbose", "quiet", "level"),
    [
        (0, 0, LOG_LEVELS["WARNING"]),
        (1, 0, LOG_LEVELS["INFO"]),
        (2, 0, LOG_LEVELS["DEBUG"]),
        (3, 0, LOG_LEVELS["TRACE"]),
        (5, 0, LOG_LEVELS["TRACE"]),
        (0, 1, LOG_LEVELS["ERROR"]),
        (0, 2, LOG_LEVELS["ERROR"]),
    ],
)
def test_resolve_verbosity(verbose: int, quiet: int, level: int) -> None:
    assert resolve_verbosity(verbose, quiet) == level


@parametrize(
    ("color_mode", "no_color", "expected"),
    [
        (None, False, ColorMode.AUTO),
        ("always", False, ColorMode.ALWAYS),
        ("always", True, ColorMode.NEVER),
        (ColorMode.NEVER, False, ColorMode.NEVER),
    ],
)
def test_resolve_color_option(
    color_mode: ColorMode | str | None, no_color: bool, expected: ColorMode
) -> None:
    assert resolve_color_option(color_mode, no_color) is expected


@mark_cli
def test_unknown_color_mode_is_a_click_error() -> None:
    assert run_cli(["--color", "sometimes", "version"]).exit_code == 2


@mark_cli
def test_color_never_keeps_output_plain() -> None:
    result = run_cli(["--color", "never", "version"])
    assert_SUCCESS(result)
    assert "\x1b[" not in result.stdout


@mark_cli
def test_missing_config_file(tmp_path: Path) -> None:
    result = run_plain("--config", str(tmp_path / "missing.toml"), "render", "Hi")
    assert_FILE_NOT_FOUND(result)


@mark_cli
@parametrize(
    "text",
    [
        "[engine]\nchat_width = 0\n",
        '[engine]\nline_separator = ""\n',
        '[channels]\nstart_delimiter = ""\n',
    ],
)
def test_invalid_config_values(tmp_path: Path, text: str) -> None:
    result = run_plain("--config", _config(tmp_path, text), "render", "Hi")
    assert_CONFIG_ERROR(result)


@mark_cli
def test_config_files_merge_in_order(tmp_path: Path) -> None:
    first = tmp_path / "a.toml"
    first.write_text("[channels.prefixes]\nchat = \"&7> \"\n", encoding="utf-8")
    second = tmp_path / "b.toml"
    second.write_text("[channels.prefixes]\nchat = \"&8| \"\n", encoding="utf-8")
    result = run_plain("--config", str(first), "--config", str(second), "render", "Hi")
    assert_SUCCESS(result)
    assert stdout_lines(result) == ["§8| Hi"]


@mark_cli
def test_config_changes_center_prefix(tmp_path: Path) -> None:
    path = _config(tmp_path, '[engine]\ncenter_prefix = "<c>"\n')
    result = run_plain("--config", path, "align", "<c>Hello")
    assert_SUCCESS(result)
    assert result.stdout.splitlines()[0] == " " * 36 + "Hello"


@mark_cli
def test_commands_without_engine_ignore_config(tmp_path: Path) -> None:
    result = run_plain("--config", str(tmp_path / "missing.toml"), "version")
    assert_SUCCESS(result)


def test_engine_errors_maps_invalid_input() -> None:
    with pytest.raises(ChatmarkInputError) as info, engine_errors():
        raise InvalidInputError("blank")
    assert info.value.exit_code == ExitCode.INPUT_ERROR


def test_engine_errors_maps_transform_failures() -> None:
    with pytest.raises(ChatmarkRenderError, match="RuntimeError: boom") as info, engine_errors():
        raise RuntimeError("boom")
    assert info.value.exit_code == ExitCode.RENDER_ERROR
