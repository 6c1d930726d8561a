# topmark:header:start
#
#   project      : ChatMark
#   file         : strip.py
#   file_relpath : src/chatmark/cli/commands/strip.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ChatMark `strip` command.

Removes colors and markup from a message. ``--what`` selects which layer:

- ``all``: colors, format markers and inline event markup;
- ``rgb``: RGB syntaxes only (legacy codes are kept);
- ``bukkit``: legacy color codes;
- ``special``: legacy formatting codes (bold, italic...);
- ``formats``: format markers such as ``<sc>...</sc>``.
"""

from __future__ import annotations

from enum import Enum

import click

from chatmark.cli.cli_types import EnumChoiceParam
from chatmark.cli.cmd_common import engine_errors, get_console, get_engine, join_text
from chatmark.colors.codec import strip_bukkit, strip_special


class StripTarget(str, Enum):
    """What `chatmark strip` removes."""

    ALL = "all"
    RGB = "rgb"
    BUKKIT = "bukkit"
    SPECIAL = "special"
    FORMATS = "formats"


@click.command(name="strip", help="Remove colors and markup from a message.")
@click.argument("words", nargs=-1, required=True, metavar="TEXT...")
@click.option(
    "--what",
    "target",
    type=EnumChoiceParam(StripTarget),
    default=StripTarget.ALL.value,
    show_default=True,
    help=f"What to remove ({', '.join(v.value for v in StripTarget)}).",
)
def strip_command(*, words: tuple[str, ...], target: StripTarget) -> None:
    """Print ``TEXT...`` with the selected layer removed."""
    ctx = click.get_current_context()
    console = get_console(ctx)
    engine = get_engine(ctx)
    text = join_text(words)

    with engine_errors():
        if target == StripTarget.RGB:
            result = engine.codec.strip_rgb(text)
        elif target == StripTarget.BUKKIT:
            result = strip_bukkit(text)
        elif target == StripTarget.SPECIAL:
            result = strip_special(text)
        elif target == StripTarget.FORMATS:
            result = engine.formats.strip_all(text)
        else:
            result = engine.strip(text)
    console.print(result)
