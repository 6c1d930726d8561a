# topmark:header:start
#
#   project      : ChatMark
#   file         : main.py
#   file_relpath : src/chatmark/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ChatMark command group.

Key ideas:
- Group-level options (verbosity, color, config files) are initialized once
  and placed into ``ctx.obj``.
- The engine is built lazily from the merged configuration by the first
  subcommand that needs it (see `chatmark.cli.cmd_common.get_engine`).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from chatmark.cli.commands.align import align_command
from chatmark.cli.commands.channel import channel_command
from chatmark.cli.commands.channels import channels_command
from chatmark.cli.commands.formats import formats_command
from chatmark.cli.commands.placeholders import placeholders_command
from chatmark.cli.commands.render import render_command
from chatmark.cli.commands.strip import strip_command
from chatmark.cli.commands.version import version_command
from chatmark.cli.console import ClickConsole
from chatmark.cli.options import (
    common_color_options,
    common_config_options,
    common_verbose_options,
    resolve_color_option,
    resolve_verbosity,
)
from chatmark.cli_shared.color import ColorMode, resolve_color_mode
from chatmark.config.logging import get_logger, resolve_env_log_level, setup_logging

if TYPE_CHECKING:
    from chatmark.cli_shared.console_api import ConsoleLike

logger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
    config_paths: tuple[str, ...] = (),
) -> None:
    """Initialize shared state (verbosity, logging, color, config) on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        color_mode (ColorMode | None): Explicit color mode from ``--color`` (or ``None``).
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
        config_paths (tuple[str, ...]): ``--config`` files, merged in order.

    Notes:
        ``CHATMARK_LOG_LEVEL`` takes precedence over ``-v``/``-q`` for the
        internal log level; ``-v``/``-q`` always drive program-output verbosity.
    """
    ctx.obj = ctx.obj or {}

    level_cli = resolve_verbosity(verbose, quiet)
    ctx.obj["verbosity_level"] = verbose

    level_env = resolve_env_log_level()
    log_level = level_env if level_env is not None else level_cli
    ctx.obj["log_level"] = log_level
    setup_logging(level=log_level)

    effective_color_mode = resolve_color_option(color_mode, no_color)
    enable_color = resolve_color_mode(
        color_mode_override=effective_color_mode, output_format=None
    )
    ctx.obj["color_enabled"] = enable_color
    ctx.color = enable_color

    ctx.obj["console"] = ClickConsole(enable_color=enable_color)
    ctx.obj["config_paths"] = tuple(config_paths)
    logger.debug(
        "CLI state: verbosity=%d log_level=%d color=%s config=%s",
        verbose,
        log_level,
        enable_color,
        config_paths,
    )


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="ChatMark: render rich chat text (colors, formats, placeholders, channels).",
)
@common_verbose_options
@common_color_options
@common_config_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
    config_paths: tuple[str, ...],
) -> None:
    """Entry point for the ChatMark CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        color_mode=color_mode,
        no_color=no_color,
        config_paths=config_paths,
    )
    console: ConsoleLike = ctx.obj["console"]

    if ctx.invoked_subcommand is None:
        console.print("Hint: use 'chatmark render TEXT...' to render a message.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(version_command)

cli.add_command(render_command)

cli.add_command(strip_command)

cli.add_command(align_command)

cli.add_command(channel_command)

cli.add_command(formats_command)

cli.add_command(placeholders_command)

cli.add_command(channels_command)

if __name__ == "__main__":
    cli()
