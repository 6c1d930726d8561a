# topmark:header:start
#
#   project      : ChatMark
#   file         : formats.py
#   file_relpath : src/chatmark/cli/commands/formats.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ChatMark `formats` command: list the registered formats."""

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


@click.command(name="formats", help="List the registered text formats.")
@click.option(
    "--format",
    "output_format",
    type=EnumChoiceParam(OutputFormat, LISTING_FORMATS),
    default=None,
    help=f"Output format ({', '.join(v.value for v in LISTING_FORMATS)}).",
)
def formats_command(*, output_format: OutputFormat | None = None) -> None:
    """List formats in registration order with their kind and trigger regex."""
    ctx = click.get_current_context()
    engine = get_engine(ctx)
    rows = [
        [identifier, fmt.kind, "yes" if fmt.inline else "no", fmt.regex]
        for identifier, fmt in engine.formats.items()
    ]
    emit_listing(
        get_console(ctx),
        output_format or OutputFormat.DEFAULT,
        title="Registered formats",
        headers=["Identifier", "Kind", "Inline", "Regex"],
        rows=rows,
        verbose=get_effective_verbosity(ctx) > 0,
    )
