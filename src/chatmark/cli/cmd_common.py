# topmark:header:start
#
#   project      : ChatMark
#   file         : cmd_common.py
#   file_relpath : src/chatmark/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common command utilities for Click-based commands.

This module holds small helpers used by multiple CLI commands: building the
engine from the group state, mapping core errors onto CLI errors, and
printing registry listings.
"""

from __future__ import annotations

import json
from contextlib import contextmanager
from pathlib import Path
from typing import TYPE_CHECKING

import click

from chatmark.cli.errors import (
    ChatmarkConfigError,
    ChatmarkFileNotFoundError,
    ChatmarkInputError,
    ChatmarkRenderError,
)
from chatmark.cli_shared.markdown import render_markdown_table
from chatmark.cli_shared.utils import OutputFormat
from chatmark.config.logging import get_logger
from chatmark.config.model import MutableConfig
from chatmark.core.errors import InvalidInputError
from chatmark.engine import ChatEngine

if TYPE_CHECKING:
    from collections.abc import Iterator, Sequence

    from chatmark.cli_shared.console_api import ConsoleLike
    from chatmark.config.logging import ChatmarkLogger
    from chatmark.config.model import Config

logger: ChatmarkLogger = get_logger(__name__)


def get_effective_verbosity(ctx: click.Context) -> int:
    """Return the program-output verbosity for this command (0 = terse)."""
    return int(ctx.obj.get("verbosity_level", 0))


def get_console(ctx: click.Context) -> ConsoleLike:
    """Return the console installed by the command group."""
    ctx.ensure_object(dict)
    return ctx.obj["console"]


def get_config(ctx: click.Context) -> Config:
    """Return the merged configuration, loading it once per invocation.

    Raises:
        ChatmarkFileNotFoundError: If a ``--config`` path does not exist.
        ChatmarkConfigError: If the merged values cannot drive an engine.
    """
    ctx.ensure_object(dict)
    config: Config | None = ctx.obj.get("config")
    if config is not None:
        return config

    paths = [Path(p) for p in ctx.obj.get("config_paths", ())]
    for path in paths:
        if not path.is_file():
            raise ChatmarkFileNotFoundError(f"Config file not found: {path}")

    config = MutableConfig.load_merged(paths).freeze()
    _check_config(config)
    ctx.obj["config"] = config
    return config


def _check_config(config: Config) -> None:
    problems: list[str] = []
    if config.chat_width <= 0:
        problems.append(f"chat_width must be positive (got {config.chat_width})")
    if not config.line_separator:
        problems.append("line_separator must not be empty")
    if not config.start_delimiter or not config.end_delimiter:
        problems.append("channel delimiters must not be empty")
    if problems:
        raise ChatmarkConfigError("Invalid configuration: " + "; ".join(problems))


def get_engine(ctx: click.Context) -> ChatEngine:
    """Return the engine built from the merged configuration (cached on ``ctx.obj``)."""
    ctx.ensure_object(dict)
    engine: ChatEngine | None = ctx.obj.get("engine")
    if engine is None:
        engine = ChatEngine.from_config(get_config(ctx))
        ctx.obj["engine"] = engine
    return engine


def join_text(words: tuple[str, ...]) -> str:
    """Join positional ``TEXT...`` arguments the way a shell user typed them."""
    return " ".join(words)


@contextmanager
def engine_errors() -> Iterator[None]:
    """Map core exceptions raised inside the block onto CLI errors.

    Raises:
        ChatmarkInputError: For `InvalidInputError`.
        ChatmarkRenderError: For any other exception raised by a transform.
    """
    try:
        yield
    except InvalidInputError as exc:
        raise ChatmarkInputError(str(exc)) from exc
    except click.ClickException:
        raise
    except Exception as exc:
        logger.debug("Render failure", exc_info=True)
        raise ChatmarkRenderError(f"{type(exc).__name__}: {exc}") from exc


LISTING_FORMATS = (OutputFormat.DEFAULT, OutputFormat.JSON, OutputFormat.MARKDOWN)


def emit_listing(
    console: ConsoleLike,
    fmt: OutputFormat,
    *,
    title: str,
    headers: Sequence[str],
    rows: Sequence[Sequence[str]],
    verbose: bool = False,
) -> None:
    """Print a registry listing as text columns, JSON records or a Markdown table.

    Args:
        console (ConsoleLike): Output console.
        fmt (OutputFormat): Requested format.
        title (str): Heading used by the text (verbose) and Markdown forms.
        headers (Sequence[str]): Column names; lower-cased they become the JSON keys.
        rows (Sequence[Sequence[str]]): One row per registry entry.
        verbose (bool): Print the heading in text mode.
    """
    if fmt == OutputFormat.JSON:
        keys = [h.lower().replace(" ", "_") for h in headers]
        console.print(
            json.dumps([dict(zip(keys, row)) for row in rows], indent=2, ensure_ascii=False)
        )
        return

    if fmt == OutputFormat.MARKDOWN:
        console.print(f"# {title}\n")
        console.print(render_markdown_table(headers, rows), nl=False)
        return

    if verbose:
        console.print(console.styled(f"{title}:\n", bold=True, underline=True))
    widths = [max((len(r[i]) for r in rows), default=0) for i in range(len(headers))]
    for row in rows:
        first, *rest = row
        tail = "  ".join(f"{cell:<{widths[i + 1]}}" for i, cell in enumerate(rest))
        console.print(f"{console.styled(f'{first:<{widths[0]}}', bold=True)}  {tail}".rstrip())
