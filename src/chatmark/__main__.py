# topmark:header:start
#
#   project      : ChatMark
#   file         : __main__.py
#   file_relpath : src/chatmark/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running ChatMark via ``python -m chatmark``.

It delegates directly to :func:`chatmark.cli.main.cli`, so the module form and
the ``chatmark`` console script share one entry point.

Examples:
    Render a message from the command line::

        python -m chatmark render "&aHello <#ff0000>world"
"""

from __future__ import annotations

from chatmark.cli.main import cli

if __name__ == "__main__":
    cli()
