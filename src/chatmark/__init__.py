# topmark:header:start
#
#   project      : ChatMark
#   file         : __init__.py
#   file_relpath : src/chatmark/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ChatMark: rich-text formatting engine for chat messages.

ChatMark turns raw, markup-laden chat text into rendered output: flat text
with ``§`` color codes, raw-JSON components with click and hover events, or
centered lines measured glyph by glyph.

Example:
    ```python
    from chatmark import ChatEngine, Recipient

    engine = ChatEngine.with_defaults()
    rendered = engine.render("[C]&aHello {player}!", Recipient("Steve"))
    print(rendered.legacy_text())
    ```
"""

from __future__ import annotations

from chatmark.engine import ChatEngine, EngineSettings, Rendered
from chatmark.recipient import Recipient

__all__ = ["ChatEngine", "EngineSettings", "Recipient", "Rendered"]
