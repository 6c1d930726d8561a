# topmark:header:start
#
#   project      : ChatMark
#   file         : channel.py
#   file_relpath : src/chatmark/cli/commands/channel.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ChatMark `channel` command: show how a message is routed."""

from __future__ import annotations

import json

import click

from chatmark.cli.cli_types import EnumChoiceParam
from chatmark.cli.cmd_common import get_console, get_engine, join_text
from chatmark.cli_shared.utils import OutputFormat

CHANNEL_FORMATS = (OutputFormat.DEFAULT, OutputFormat.JSON)


@click.command(name="channel", help="Identify the channel of a message.")
@click.argument("words", nargs=-1, required=True, metavar="TEXT...")
@click.option(
    "--format",
    "output_format",
    type=EnumChoiceParam(OutputFormat, CHANNEL_FORMATS),
    default=None,
    help=f"Output format ({', '.join(v.value for v in CHANNEL_FORMATS)}).",
)
def channel_command(*, words: tuple[str, ...], output_format: OutputFormat | None = None) -> None:
    """Print the identified channel, its marker arguments and the stripped body."""
    ctx = click.get_current_context()
    console = get_console(ctx)
    engine = get_engine(ctx)
    text = join_text(words)

    channel = engine.channels.identify(text)
    arguments = channel.arguments(text)
    body = channel.strip(text)

    if output_format == OutputFormat.JSON:
        payload = {
            "channel": channel.name,
            "flag": channel.flag.key,
            "arguments": list(arguments),
            "body": body,
        }
        console.print(json.dumps(payload, ensure_ascii=False))
        return

    console.print(f"channel  : {console.styled(channel.name, bold=True)} ({channel.flag.key})")
    console.print(f"arguments: {', '.join(arguments) if arguments else '-'}")
    console.print(f"body     : {body}")
