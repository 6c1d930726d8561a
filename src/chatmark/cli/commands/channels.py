# topmark:header:start
#
#   project      : ChatMark
#   file         : channels.py
#   file_relpath : src/chatmark/cli/commands/channels.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ChatMark `channels` command: list the registered channels."""

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


@click.command(name="channels", help="List the registered channels.")
@click.option(
    "--format",
    "output_format",
    type=EnumChoiceParam(OutputFormat, LISTING_FORMATS),
    default=None,
    help=f"Output format ({', '.join(v.value for v in LISTING_FORMATS)}).",
)
def channels_command(*, output_format: OutputFormat | None = None) -> None:
    """List channels with their flag, marker names and display prefix.

    The default channel is flagged with ``*`` in its name column.
    """
    ctx = click.get_current_context()
    engine = get_engine(ctx)
    default_name = engine.channels.default.name
    rows = [
        [
            channel.name + (" *" if channel.name == default_name else ""),
            channel.flag.key,
            ", ".join(channel.marker_names),
            channel.prefix,
        ]
        for channel in engine.channels
    ]
    emit_listing(
        get_console(ctx),
        output_format or OutputFormat.DEFAULT,
        title="Registered channels",
        headers=["Name", "Flag", "Markers", "Prefix"],
        rows=rows,
        verbose=get_effective_verbosity(ctx) > 0,
    )
