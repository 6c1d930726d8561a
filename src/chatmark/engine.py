# topmark:header:start
#
#   project      : ChatMark
#   file         : engine.py
#   file_relpath : src/chatmark/engine.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""The rendering engine: one explicit context holding every registry.

`ChatEngine` owns the format, placeholder and channel registries, the glyph
width table and the color codec, plus the `EngineSettings` that tune them.
It is built once at startup (`ChatEngine.with_defaults` or
`ChatEngine.from_config`) and passed to whoever renders messages.

Full flow of `ChatEngine.render`:

    raw text
      -> channel identification (marker arguments, marker stripped)
      -> blank-line count (``<add_space:N>``)
      -> channel display prefix
      -> placeholders
      -> old event syntax, small caps, centering
      -> split into components; per component:
         lang prefix key, placeholders, formats, colors
      -> compiled messages

The engine holds mutable registries and does no locking: mutate them during
setup, then render from a single thread.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import TYPE_CHECKING

from chatmark.channels.model import ChannelFlag
from chatmark.channels.registry import ChannelRegistry
from chatmark.characters.aligner import TextAligner
from chatmark.characters.table import CharacterWidthTable
from chatmark.chat.markup import convert_old_syntax, strip_markup
from chatmark.chat.message import CompiledMessage, components_to_json
from chatmark.chat.multi import MultiComponent
from chatmark.colors.codec import ColorCodec
from chatmark.config.logging import get_logger
from chatmark.constants import (
    DEFAULT_CENTER_PREFIX,
    DEFAULT_CHAT_WIDTH,
    DEFAULT_LANG_PREFIX,
    DEFAULT_LANG_PREFIX_KEY,
    DEFAULT_LINE_SEPARATOR,
    DEFAULT_SERVER_VERSION,
)
from chatmark.core.errors import InvalidInputError
from chatmark.core.text import is_blank
from chatmark.formats.builtins import BLANK_SPACES, CHARACTER, SMALL_CAPS
from chatmark.formats.registry import FormatRegistry
from chatmark.pipeline.applier import StringApplier
from chatmark.pipeline.priority import Priority
from chatmark.placeholders.model import Placeholder
from chatmark.placeholders.registry import PlaceholderRegistry

if TYPE_CHECKING:
    from chatmark.channels.model import Channel
    from chatmark.config.logging import ChatmarkLogger
    from chatmark.config.model import Config
    from chatmark.recipient import RecipientContext

logger: ChatmarkLogger = get_logger(__name__)


@dataclass(frozen=True)
class EngineSettings:
    """Tunables of a `ChatEngine`.

    Attributes:
        center_prefix (str): Marker requesting centered output.
        line_separator (str): Token separating lines (and hover lines).
        lang_prefix_key (str): Token replaced by ``lang_prefix`` when colorizing.
        lang_prefix (str): Replacement for ``lang_prefix_key``.
        chat_width (int): Alignment budget in font units.
        server_version (int): Server major version.
        case_sensitive_placeholders (bool | None): Forced placeholder matching mode.
    """

    center_prefix: str = DEFAULT_CENTER_PREFIX
    line_separator: str = DEFAULT_LINE_SEPARATOR
    lang_prefix_key: str = DEFAULT_LANG_PREFIX_KEY
    lang_prefix: str = DEFAULT_LANG_PREFIX
    chat_width: int = DEFAULT_CHAT_WIDTH
    server_version: int = DEFAULT_SERVER_VERSION
    case_sensitive_placeholders: bool | None = None

    @classmethod
    def from_config(cls, config: Config) -> EngineSettings:
        """Extract the engine tunables from a frozen `Config`."""
        return cls(
            center_prefix=config.center_prefix,
            line_separator=config.line_separator,
            lang_prefix_key=config.lang_prefix_key,
            lang_prefix=config.lang_prefix,
            chat_width=config.chat_width,
            server_version=config.server_version,
            case_sensitive_placeholders=config.case_sensitive_placeholders,
        )


@dataclass(frozen=True)
class Rendered:
    """Result of `ChatEngine.render`.

    Attributes:
        channel (Channel): The identified channel.
        arguments (tuple[str, ...]): Channel marker arguments (e.g. title seconds).
        body (str): The text after channel handling, before compilation.
        blank_lines (int): Blank lines requested with ``<add_space:N>``.
        messages (tuple[CompiledMessage, ...]): Compiled components, in order.
    """

    channel: Channel
    arguments: tuple[str, ...]
    body: str
    blank_lines: int
    messages: tuple[CompiledMessage, ...]

    @property
    def flag(self) -> ChannelFlag:
        return self.channel.flag

    def legacy_text(self) -> str:
        """Return the flat text of every component, without interactions."""
        return "".join(m.to_legacy() for m in self.messages)

    def to_json(self) -> str:
        """Return the components as one raw-JSON text component."""
        return components_to_json(self.messages)

    def __str__(self) -> str:
        return self.legacy_text()


class ChatEngine:
    """Explicit rendering context.

    Args:
        settings (EngineSettings | None): Tunables; defaults when ``None``.
        formats (FormatRegistry | None): Format registry (empty when ``None``).
        placeholders (PlaceholderRegistry | None): Placeholder registry.
        channels (ChannelRegistry | None): Channel registry.
        characters (CharacterWidthTable | None): Glyph widths (built-in when ``None``).
        codec (ColorCodec | None): Color codec (default syntaxes when ``None``).

    Use `with_defaults` for an engine with every built-in seeded.
    """

    def __init__(
        self,
        settings: EngineSettings | None = None,
        *,
        formats: FormatRegistry | None = None,
        placeholders: PlaceholderRegistry | None = None,
        channels: ChannelRegistry | None = None,
        characters: CharacterWidthTable | None = None,
        codec: ColorCodec | None = None,
    ) -> None:
        self.settings: EngineSettings = settings or EngineSettings()
        self.formats: FormatRegistry = formats if formats is not None else FormatRegistry()
        self.placeholders: PlaceholderRegistry = (
            placeholders if placeholders is not None else PlaceholderRegistry()
        )
        self.channels: ChannelRegistry = channels if channels is not None else ChannelRegistry()
        self.characters: CharacterWidthTable = (
            characters if characters is not None else CharacterWidthTable()
        )
        self.codec: ColorCodec = (
            codec if codec is not None else ColorCodec(server_version=self.settings.server_version)
        )
        self.aligner: TextAligner = TextAligner(
            self.characters,
            self.codec,
            center_prefix=self.settings.center_prefix,
            cleaners=(self._expand_characters,),
        )

    # ------------------------------ Construction ------------------------------

    @classmethod
    def with_defaults(cls, settings: EngineSettings | None = None) -> ChatEngine:
        """Return an engine with the built-in formats, placeholders and channels."""
        engine = cls(settings)
        engine.set_defaults()
        return engine

    @classmethod
    def from_config(cls, config: Config) -> ChatEngine:
        """Build a fully seeded engine from a frozen `Config`.

        Static placeholders, glyph widths, channel prefixes and aliases from the
        config are layered on top of the built-ins.
        """
        engine = cls(
            EngineSettings.from_config(config),
            channels=ChannelRegistry(
                start_delimiter=config.start_delimiter,
                end_delimiter=config.end_delimiter,
                default=config.default_channel,
            ),
        )
        engine.set_defaults()

        for key, value in config.placeholders.items():
            engine.placeholders.load(Placeholder.constant(key, value))
        for char, width in config.characters.items():
            engine.characters.add_character(char, width)

        names = set(config.channel_prefixes) | set(config.channel_aliases)
        for name in names:
            channel = engine.channels.get(name)
            if channel is None:
                logger.warning("Ignoring configuration for unknown channel %r", name)
                continue
            engine.channels.replace(
                dataclasses.replace(
                    channel,
                    prefix=config.channel_prefixes.get(name, channel.prefix),
                    aliases=(*channel.aliases, *config.channel_aliases.get(name, ())),
                )
            )
        logger.debug("Engine built from %d config file(s)", len(config.config_files))
        return engine

    def set_defaults(self) -> None:
        """Seed every registry with its built-ins (existing entries are kept)."""
        self.formats.set_defaults()
        self.placeholders.set_defaults()
        self.channels.set_defaults()

    @property
    def line_separator(self) -> str:
        return self.settings.line_separator

    # ------------------------------ Text services ------------------------------

    def _expand_characters(self, text: str) -> str:
        fmt = self.formats.get(CHARACTER)
        return text if fmt is None else str(fmt.accept(None, text))

    def replace_prefix_key(self, text: str, remove: bool = False) -> str:
        """Replace the lang prefix key with the lang prefix (or with nothing)."""
        if is_blank(text):
            return text
        replacement = "" if remove else self.settings.lang_prefix
        return text.replace(self.settings.lang_prefix_key, replacement)

    def split_lines(self, text: str, limit: int = 0) -> list[str]:
        """Split ``text`` on the line separator.

        Args:
            text (str): Input text.
            limit (int): Maximum number of parts; ``0`` means unlimited, with
                trailing empty parts dropped.

        Returns:
            list[str]: The lines.
        """
        parts = text.split(self.settings.line_separator, limit - 1 if limit > 0 else -1)
        if limit == 0:
            while parts and parts[-1] == "":
                parts.pop()
        return parts

    def replace(self, parser: RecipientContext, text: str) -> str:
        """Resolve placeholders, then ``<U:XXXX>`` escapes."""
        return (
            StringApplier.simplified(text)
            .apply(
                lambda s: self.placeholders.replace(
                    parser, s, self.settings.case_sensitive_placeholders
                )
            )
            .apply(self._expand_characters)
            .result()
        )

    def format(self, recipient: RecipientContext, text: str) -> str:
        """Run every inline format for ``recipient``."""
        return self.formats.apply_all(recipient, text)

    def colorize(self, target: RecipientContext, parser: RecipientContext, text: str) -> str:
        """Fully resolve ``text``: lang prefix, placeholders, formats, colors.

        Args:
            target (RecipientContext): Recipient whose client decides legacy vs RGB
                colors; ``parser`` is used when ``None``.
            parser (RecipientContext): Recipient placeholders are evaluated for.
            text (str): Input text.

        Returns:
            str: Text with ``§`` color codes.
        """
        viewer = target if target is not None else parser
        return (
            StringApplier.prioritized(text)
            .apply(lambda s: self.codec.colorize(s, viewer), Priority.LOWEST)
            .apply(lambda s: self.format(parser, s), Priority.LOW)
            .apply(lambda s: self.replace(parser, s))
            .apply(self.replace_prefix_key, Priority.HIGHEST)
            .result()
        )

    def align(self, text: str, limit: int | None = None) -> str:
        """Center ``text`` when it starts with the center prefix."""
        return self.aligner.align(text, self.settings.chat_width if limit is None else limit)

    def measure(self, text: str) -> int:
        """Return the rendered width of ``text`` in font units."""
        return self.aligner.measure(self.aligner.clean(text))

    def preformat(self, text: str) -> str:
        """Convert old event syntax, apply small caps and center the line."""
        small_caps = self.formats.get(SMALL_CAPS)
        applier = StringApplier.simplified(text).apply(convert_old_syntax)
        if small_caps is not None:
            applier.apply(lambda s: str(small_caps.accept(None, s)))
        return applier.apply(self.align).result()

    def strip(self, text: str) -> str:
        """Remove colors, format markers and inline event markup."""
        return (
            StringApplier.simplified(text)
            .apply(self.codec.strip_all)
            .apply(self.formats.strip_all)
            .apply(strip_markup)
            .result()
        )

    # -------------------------------- Rendering --------------------------------

    def _prefix_body(self, channel: Channel, body: str) -> str:
        # The centre marker must stay first for the aligner to see it.
        marker = self.settings.center_prefix
        if marker and body.startswith(marker):
            return marker + channel.apply_prefix(body[len(marker) :])
        return channel.apply_prefix(body)

    def render(self, text: str, recipient: RecipientContext = None) -> Rendered:
        """Render one raw message for ``recipient``.

        The channel flag decides how the body is compiled: chat messages are
        split into interactive components, titles into title and subtitle,
        webhooks only get placeholders resolved, and every other channel
        yields one colorized message.

        Raises:
            InvalidInputError: If ``text`` is blank.
        """
        if is_blank(text):
            raise InvalidInputError("Message text must not be blank")

        channel = self.channels.identify(text)
        arguments = channel.arguments(text)
        body = channel.strip(text)

        blank_lines = 0
        spaces = self.formats.get(BLANK_SPACES)
        if spaces is not None and spaces.is_formatted(body):
            counted = spaces.accept(recipient, body)
            blank_lines = counted if isinstance(counted, int) else 0
            body = spaces.remove_format(body)

        body = self._prefix_body(channel, body)
        if recipient is not None:
            body = self.replace(recipient, body)
        logger.debug("render channel=%s args=%s body=%r", channel.name, arguments, body)

        messages: tuple[CompiledMessage, ...]
        if channel.flag is ChannelFlag.CHAT:
            messages = MultiComponent(self, body).compile(recipient) if body else ()
        elif channel.flag is ChannelFlag.WEBHOOK:
            messages = (CompiledMessage(self.replace(recipient, body)),)
        elif channel.flag is ChannelFlag.TITLE:
            messages = tuple(
                CompiledMessage(self.colorize(recipient, recipient, line))
                for line in self.split_lines(body, 2)
            )
        else:
            messages = (CompiledMessage(self.colorize(recipient, recipient, body)),)

        return Rendered(channel, arguments, body, blank_lines, messages)
