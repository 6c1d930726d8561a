# topmark:header:start
#
#   project      : ChatMark
#   file         : render.py
#   file_relpath : src/chatmark/cli/commands/render.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ChatMark `render` command.

Runs the full rendering flow on one message and prints the result:

- ``text`` (default): the flat legacy string of each delivered line;
- ``json``: the channel metadata plus the raw-JSON text component;
- ``ansi``: a terminal preview where ``§`` codes become ANSI styles.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

import click

from chatmark.channels.model import ChannelFlag
from chatmark.cli.cli_types import EnumChoiceParam
from chatmark.cli.cmd_common import (
    engine_errors,
    get_console,
    get_effective_verbosity,
    get_engine,
    join_text,
)
from chatmark.cli_shared.utils import OutputFormat
from chatmark.config.logging import get_logger
from chatmark.recipient import Recipient

if TYPE_CHECKING:
    from chatmark.config.logging import ChatmarkLogger
    from chatmark.engine import Rendered

logger: ChatmarkLogger = get_logger(__name__)

RENDER_FORMATS = (OutputFormat.DEFAULT, OutputFormat.JSON, OutputFormat.ANSI)


def rendered_to_dict(rendered: Rendered) -> dict[str, Any]:
    """Return the machine-readable view of a render result."""
    return {
        "channel": rendered.channel.name,
        "flag": rendered.flag.key,
        "arguments": list(rendered.arguments),
        "blank_lines": rendered.blank_lines,
        "component": json.loads(rendered.to_json()),
    }


def rendered_lines(rendered: Rendered) -> list[str]:
    """Return the flat text lines a recipient would see.

    Chat components join into one line; other channels deliver one line per
    compiled message (a title and its subtitle, for instance).
    """
    if rendered.flag is ChannelFlag.CHAT:
        return [rendered.legacy_text()]
    return [m.to_legacy() for m in rendered.messages]


@click.command(
    name="render",
    help="Render a message through channels, placeholders, formats and colors.",
    epilog="""
Words are joined with single spaces. Pass --recipient-name to resolve the
recipient placeholders ({player}, {playerDisplayName}...); without it
placeholders are left untouched.
""",
)
@click.argument("words", nargs=-1, required=True, metavar="TEXT...")
@click.option("--recipient-name", "recipient_name", default=None, help="Recipient account name.")
@click.option("--display-name", "display_name", default=None, help="Recipient display name.")
@click.option("--world", default=None, help="World the recipient is in.")
@click.option(
    "--protocol",
    type=int,
    default=None,
    help="Recipient client protocol number (older clients get legacy colors).",
)
@click.option(
    "--format",
    "output_format",
    type=EnumChoiceParam(OutputFormat, RENDER_FORMATS),
    default=None,
    help=f"Output format ({', '.join(v.value for v in RENDER_FORMATS)}).",
)
def render_command(
    *,
    words: tuple[str, ...],
    recipient_name: str | None = None,
    display_name: str | None = None,
    world: str | None = None,
    protocol: int | None = None,
    output_format: OutputFormat | None = None,
) -> None:
    """Render ``TEXT...`` and print the result.

    Args:
        words (tuple[str, ...]): Message words.
        recipient_name (str | None): Account name; enables placeholders when set.
        display_name (str | None): Display name for ``{playerDisplayName}``.
        world (str | None): World name for ``{playerWorld}``.
        protocol (int | None): Client protocol of the recipient.
        output_format (OutputFormat | None): ``text``, ``json`` or ``ansi``.
    """
    ctx = click.get_current_context()
    console = get_console(ctx)
    engine = get_engine(ctx)
    vlevel = get_effective_verbosity(ctx)
    fmt: OutputFormat = output_format or OutputFormat.DEFAULT

    recipient: Recipient | None = None
    if recipient_name:
        recipient = Recipient(
            recipient_name, display_name=display_name, world=world, protocol=protocol
        )
    elif display_name or world or protocol is not None:
        console.warn("--display-name, --world and --protocol need --recipient-name; ignored.")

    with engine_errors():
        rendered = engine.render(join_text(words), recipient)

    if fmt == OutputFormat.JSON:
        console.print(json.dumps(rendered_to_dict(rendered), ensure_ascii=False))
        return

    if vlevel > 0:
        args = ":".join(rendered.arguments)
        console.print(
            console.styled(
                f"[{rendered.channel.name}{':' + args if args else ''}] ({rendered.flag.label})",
                dim=True,
            )
        )
    for _ in range(rendered.blank_lines):
        console.print()
    for line in rendered_lines(rendered):
        console.chat(line, preview=fmt == OutputFormat.ANSI)
