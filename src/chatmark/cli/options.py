# topmark:header:start
#
#   project      : ChatMark
#   file         : options.py
#   file_relpath : src/chatmark/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Options shared by the ``chatmark`` group: verbosity, color and config files.

Each ``common_*_options`` decorator attaches a family of Click options; the
``resolve_*`` helpers turn their parsed values into what `init_common_state`
stores on the context.
"""

from __future__ import annotations

import logging
from typing import Callable, ParamSpec, TypeVar

import click

from chatmark.cli.errors import ChatmarkUsageError
from chatmark.cli_shared.color import ColorMode
from chatmark.config.logging import TRACE_LEVEL, get_logger

P = ParamSpec("P")
R = TypeVar("R")

LOG_LEVELS = {
    "TRACE": TRACE_LEVEL,
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}

# Log level per number of ``-v`` flags; counts past the end stay at TRACE.
_VERBOSE_LEVELS: tuple[int, ...] = (
    LOG_LEVELS["WARNING"],
    LOG_LEVELS["INFO"],
    LOG_LEVELS["DEBUG"],
    LOG_LEVELS["TRACE"],
)

logger = get_logger(__name__)


def _apply(
    f: Callable[P, R], *options: Callable[[Callable[P, R]], Callable[P, R]]
) -> Callable[P, R]:
    for option in reversed(options):
        f = option(f)
    return f


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Map ``-v``/``-q`` counts to a log level.

    No flag gives WARNING; ``-v``, ``-vv`` and ``-vvv`` give INFO, DEBUG and
    TRACE; any number of ``-q`` gives ERROR.

    Raises:
        ChatmarkUsageError: Both ``-v`` and ``-q`` were given.
    """
    if verbose_count and quiet_count:
        raise ChatmarkUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")
    if quiet_count:
        return LOG_LEVELS["ERROR"]
    return _VERBOSE_LEVELS[min(verbose_count, len(_VERBOSE_LEVELS) - 1)]


def resolve_color_option(color_mode: ColorMode | str | None, no_color: bool) -> ColorMode:
    """Combine ``--color`` and ``--no-color``; ``--no-color`` wins."""
    if no_color:
        return ColorMode.NEVER
    return ColorMode(color_mode) if color_mode else ColorMode.AUTO


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Attach the counting ``-v/--verbose`` and ``-q/--quiet`` flags."""
    return _apply(
        f,
        click.option(
            "-v",
            "--verbose",
            count=True,
            help="Log more. Repeat for more detail (up to -vvv).",
        ),
        click.option("-q", "--quiet", count=True, help="Only log errors."),
    )


def common_color_options(f: Callable[P, R]) -> Callable[P, R]:
    """Attach ``--color {auto,always,never}`` and its ``--no-color`` shorthand."""
    return _apply(
        f,
        click.option(
            "--color",
            "color_mode",
            type=click.Choice([m.value for m in ColorMode]),
            default=None,
            help="When to style terminal output: auto (default), always or never.",
        ),
        click.option("--no-color", "no_color", is_flag=True, help="Same as --color never."),
    )


def common_config_options(f: Callable[P, R]) -> Callable[P, R]:
    """Attach the repeatable ``--config FILE`` option.

    Files are merged in the order given, on top of the built-in defaults.
    """
    return _apply(
        f,
        click.option(
            "--config",
            "config_paths",
            multiple=True,
            metavar="FILE",
            type=click.Path(file_okay=True, dir_okay=False),
            help="TOML settings file. Repeat to layer several files.",
        ),
    )
