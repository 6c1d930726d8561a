# topmark:header:start
#
#   project      : ChatMark
#   file         : placeholders.py
#   file_relpath : src/chatmark/cli/commands/placeholders.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ChatMark `placeholders` command: list the registered placeholders."""

from __future__ import annotations

import click

from chatmark.cli.cli_types import EnumChoiceParam
from chatmark.cli.cmd_common import (
    LISTING_FORMATS,
    emit_listing,
    get_console,
    get_effective_verbosity,
    get_engine,
)
from chatmark.cli_shared.utils import OutputFormat


@click.command(name="placeholders", help="List the registered placeholders.")
@click.option(
    "--format",
    "output_format",
    type=EnumChoiceParam(OutputFormat, LISTING_FORMATS),
    default=None,
    help=f"Output format ({', '.join(v.value for v in LISTING_FORMATS)}).",
)
def placeholders_command(*, output_format: OutputFormat | None = None) -> None:
    """List placeholder keys and whether each one matches case-sensitively."""
    ctx = click.get_current_context()
    engine = get_engine(ctx)
    rows = [[p.key, "yes" if p.sensitive else "no"] for p in engine.placeholders]
    emit_listing(
        get_console(ctx),
        output_format or OutputFormat.DEFAULT,
        title="Registered placeholders",
        headers=["Key", "Case sensitive"],
        rows=rows,
        verbose=get_effective_verbosity(ctx) > 0,
    )
