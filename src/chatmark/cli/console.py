# topmark:header:start
#
#   project      : ChatMark
#   file         : console.py
#   file_relpath : src/chatmark/cli/console.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click-backed console for ChatMark program output.

Rendered chat lines, listings and reports go through `ClickConsole`;
diagnostics go through `logging`. Chat text carries ``§`` codes that a
terminal does not understand, so `ClickConsole.chat` can show a colored
preview instead of the raw codes.
"""

from __future__ import annotations

import sys
from typing import Any, TextIO

import click

from chatmark.cli_shared.console_api import ConsoleLike
from chatmark.rendering.ansi import to_ansi


class ClickConsole(ConsoleLike):
    """Program-output console, independent from the logger.

    Args:
        enable_color (bool): Emit ANSI styles. When False every method writes
            plain text.
        out (TextIO | None): Stream for program output (default `sys.stdout`).
        err (TextIO | None): Stream for warnings and errors (default `sys.stderr`).
    """

    def __init__(
        self,
        *,
        enable_color: bool = True,
        out: TextIO | None = None,
        err: TextIO | None = None,
    ) -> None:
        self.enable_color: bool = enable_color
        self.out: TextIO = out or sys.stdout
        self.err: TextIO = err or sys.stderr

    def print(self, text: str = "", *, nl: bool = True) -> None:
        """Write ``text`` to the output stream."""
        click.echo(text, nl=nl, file=self.out, color=self.enable_color)

    def chat(self, text: str, *, preview: bool = False) -> None:
        """Write one line of legacy chat text.

        Args:
            text (str): Text with ``§`` codes.
            preview (bool): Translate the codes to terminal styles, as
                `chatmark render --format ansi` requests explicitly.
        """
        self.print(to_ansi(text) if preview else text)

    def warn(self, text: str, *, nl: bool = True) -> None:
        """Write a warning to the error stream."""
        click.secho(text, nl=nl, file=self.err, color=self.enable_color, fg="yellow")

    def error(self, text: str, *, nl: bool = True) -> None:
        """Write an error to the error stream."""
        click.secho(text, nl=nl, file=self.err, color=self.enable_color, fg="bright_red")

    def styled(self, text: str, **style_kwargs: Any) -> str:
        """Return ``text`` styled with `click.style` (unchanged when color is off).

        Args:
            text (str): Text to style.
            **style_kwargs (Any): `click.style` keywords such as ``fg``,
                ``bold``, ``dim`` or ``underline``.

        Returns:
            str: The styled text.
        """
        if not self.enable_color:
            return text
        return click.style(text, **style_kwargs)
