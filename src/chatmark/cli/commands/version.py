# topmark:header:start
#
#   project      : ChatMark
#   file         : version.py
#   file_relpath : src/chatmark/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ChatMark `version` command.

Prints the current ChatMark version as installed in the active Python environment.
"""

from __future__ import annotations

import json

import click

from chatmark.cli.cli_types import EnumChoiceParam
from chatmark.cli.cmd_common import LISTING_FORMATS, get_console, get_effective_verbosity
from chatmark.cli_shared.utils import OutputFormat
from chatmark.constants import CHATMARK_VERSION


@click.command(name="version", help="Show the current version of ChatMark.")
@click.option(
    "--format",
    "output_format",
    type=EnumChoiceParam(OutputFormat, LISTING_FORMATS),
    default=None,
    help=f"Output format ({', '.join(v.value for v in LISTING_FORMATS)}).",
)
def version_command(*, output_format: OutputFormat | None = None) -> None:
    """Show the current version of ChatMark.

    Args:
        output_format (OutputFormat | None): Optional output format
            (plain text, json or markdown).
    """
    ctx = click.get_current_context()
    console = get_console(ctx)
    vlevel = get_effective_verbosity(ctx)
    fmt: OutputFormat = output_format or OutputFormat.DEFAULT

    if fmt == OutputFormat.JSON:
        console.print(json.dumps({"version": CHATMARK_VERSION}))
    elif fmt == OutputFormat.MARKDOWN:
        console.print("# ChatMark Version\n")
        console.print(f"**ChatMark version: {CHATMARK_VERSION}**")
    elif vlevel > 0:
        console.print(console.styled("ChatMark version:\n", bold=True, underline=True))
        console.print(f"    {console.styled(CHATMARK_VERSION, bold=True)}")
    else:
        console.print(console.styled(CHATMARK_VERSION, bold=True))
