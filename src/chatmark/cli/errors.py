# topmark:header:start
#
#   project      : ChatMark
#   file         : errors.py
#   file_relpath : src/chatmark/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the ChatMark CLI.

Usage:
    Raise these exceptions in CLI commands to signal errors with standardized
    messages and exit codes. Core errors (`chatmark.core.errors`) are mapped
    onto them at the command boundary.

Styling:
    Exceptions prefer the project console if available (see `show()`); if no console
    is present in the Click context, they fall back to Click's default styling.
"""

from __future__ import annotations

from typing import IO, Any

import click

from chatmark.cli_shared.exit_codes import ExitCode


class ChatmarkError(click.ClickException):
    """Base class for all ChatMark CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text.

        Notes:
            - Unlike Click’s default, this method does not add color.
            - Colorization is applied in `show()` when a project console is present.
        """
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available.

        Falls back to Click’s default error display when no console is present.
        """
        ctx = click.get_current_context(silent=True)
        if ctx is not None and isinstance(getattr(ctx, "obj", None), dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(console.styled(f"Error: {self.format_message()}", fg="bright_red"))
                return
        super().show(file)


class ChatmarkUsageError(ChatmarkError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class ChatmarkInputError(ChatmarkError):
    """Error for message text the engine refuses (e.g. blank text)."""

    exit_code = ExitCode.INPUT_ERROR


class ChatmarkFileNotFoundError(ChatmarkError):
    """Error when a config path does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class ChatmarkRenderError(ChatmarkError):
    """Error for failures raised by a transform while rendering."""

    exit_code = ExitCode.RENDER_ERROR


class ChatmarkConfigError(ChatmarkError):
    """Error for configuration errors (missing/invalid/malformed config)."""

    exit_code = ExitCode.CONFIG_ERROR
