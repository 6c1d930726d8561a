# topmark:header:start
#
#   project      : ChatMark
#   file         : align.py
#   file_relpath : src/chatmark/cli/commands/align.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ChatMark `align` command: center a line with the glyph width table."""

from __future__ import annotations

import click

from chatmark.cli.cmd_common import engine_errors, get_console, get_engine, join_text


@click.command(
    name="align",
    help="Center a line that starts with the center prefix.",
    epilog="""
Prints the padded line, then its measured width in font units. Lines that do
not start with the center prefix (default "[C]") are printed unchanged.
""",
)
@click.argument("words", nargs=-1, required=True, metavar="TEXT...")
@click.option(
    "--width",
    type=click.IntRange(min=1),
    default=None,
    help="Alignment budget in font units (default: engine.chat_width).",
)
def align_command(*, words: tuple[str, ...], width: int | None = None) -> None:
    """Print the centered line and the measured width of its content."""
    ctx = click.get_current_context()
    console = get_console(ctx)
    engine = get_engine(ctx)
    text = join_text(words)
    if not text.startswith(engine.settings.center_prefix):
        console.warn(f"No {engine.settings.center_prefix!r} prefix: the line is printed unchanged.")

    with engine_errors():
        aligned = engine.align(text, width)
        measured = engine.measure(text.replace(engine.settings.center_prefix, "", 1))
    console.print(aligned)
    console.print(console.styled(f"width: {measured}", dim=True))
