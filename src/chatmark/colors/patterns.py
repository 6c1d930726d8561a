# topmark:header:start
#
#   project      : ChatMark
#   file         : patterns.py
#   file_relpath : src/chatmark/colors/patterns.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Color token syntaxes understood by the codec.

Every syntax implements the `ColorPattern` protocol: ``apply(text, legacy)``
replaces its tokens with color escapes, ``strip(text)`` removes them. Matches
are replaced by span in a single left-to-right pass, so text produced for one
match is never re-scanned by the same pattern.

Single colors select one color for the text that follows:

    {#RRGGBB}  %#RRGGBB%  [#RRGGBB]  <#RRGGBB>  &xRRGGBB  &#RRGGBB  #RRGGBB

Multi colors spread a sequence of colors over the characters of a body:

    <#RRGGBB:#RRGGBB[:#RRGGBB...]>text</g>       custom multi-stop gradient
    <g:RRGGBB>te<g:RRGGBB>xt</g:RRGGBB>          gradient with inner stops
    <#RRGGBB>text</#RRGGBB>                      gradient
    <rainbow:N>text</rainbow>  <r:N>text</r>     rainbow at N% saturation
"""

from __future__ import annotations

import colorsys
import math
import re
from typing import TYPE_CHECKING, Final, Protocol

from chatmark.colors.palette import ALT_COLOR_CHAR, COLOR_CHAR, RGB, escape, escape_hex
from chatmark.core.text import is_blank

if TYPE_CHECKING:
    from collections.abc import Sequence

HEX: Final[str] = r"[a-f\d]{6}"

_CODE_CHARS: Final[str] = ALT_COLOR_CHAR + COLOR_CHAR


class ColorPattern(Protocol):
    """One color token syntax."""

    def apply(self, text: str, legacy: bool) -> str:
        """Replace every token with color escapes."""
        ...

    def strip(self, text: str) -> str:
        """Remove every token, keeping any text the token wraps."""
        ...


# --- Per-character color spreading ---


def visible_length(text: str) -> int:
    """Count characters that receive a color when spreading a gradient.

    A ``&`` or ``§`` followed by another character is a code pair and is not
    counted; a trailing lone ``&``/``§`` is.
    """
    count = 0
    i = 0
    while i < len(text):
        if text[i] in _CODE_CHARS and i + 1 < len(text):
            i += 2
            continue
        count += 1
        i += 1
    return count


def spread(text: str, escapes: Sequence[str]) -> str:
    """Prefix each visible character of ``text`` with the next escape.

    Formatting codes found in ``text`` (``&l``, ``§o``...) are remembered and
    re-emitted after every color so they survive the color changes; ``r``
    forgets them. ``escapes`` must hold at least `visible_length` items.
    """
    if is_blank(text):
        return text
    specials = ""
    out: list[str] = []
    index = 0
    i = 0
    while i < len(text):
        char = text[i]
        if char not in _CODE_CHARS or i + 1 >= len(text):
            out.append(escapes[index] + specials + char)
            index += 1
            i += 1
            continue
        code = text[i + 1]
        specials = "" if code == "r" else specials + char + code
        i += 2
    return "".join(out)


def gradient_escapes(start: RGB, end: RGB, steps: int, legacy: bool) -> list[str]:
    """Return ``steps`` escapes walking linearly from ``start`` to ``end``.

    Each channel moves by a fixed integer step, so the last color may stop
    short of ``end`` by less than one step.
    """
    span = max(steps - 1, 1)
    deltas = [abs(a - b) // span for a, b in zip(start, end)]
    signs = [1 if a < b else -1 for a, b in zip(start, end)]
    return [
        escape(
            RGB(*(c + d * i * s for c, d, s in zip(start, deltas, signs))),
            legacy,
        )
        for i in range(steps)
    ]


def rainbow_escapes(steps: int, saturation: float, legacy: bool) -> list[str]:
    """Return ``steps`` escapes cycling once through the hue circle.

    ``saturation`` (0..1) is used for both saturation and brightness.
    """
    out: list[str] = []
    for i in range(steps):
        r, g, b = colorsys.hsv_to_rgb(i / steps, saturation, saturation)
        out.append(escape(RGB(*(int(c * 255 + 0.5) for c in (r, g, b))), legacy))
    return out


def apply_gradient(text: str, start: RGB, end: RGB, legacy: bool) -> str:
    """Spread a two-color gradient over ``text`` (no-op for 0 or 1 characters)."""
    n = visible_length(text)
    if n <= 1:
        return text
    return spread(text, gradient_escapes(start, end, n, legacy))


def apply_rainbow(text: str, saturation: float, legacy: bool) -> str:
    """Spread a rainbow over ``text`` (no-op for empty text)."""
    n = visible_length(text)
    if n == 0:
        return text
    return spread(text, rainbow_escapes(n, saturation, legacy))


def split_even(text: str, parts: int) -> list[str]:
    """Split ``text`` into ``parts`` consecutive chunks of near-equal size.

    Earlier chunks take the extra characters (ceil division per step).
    """
    if parts < 2:
        return [text]
    out: list[str] = []
    start = 0
    for i in range(parts):
        size = math.ceil((len(text) - start) / (parts - i))
        out.append(text[start : start + size])
        start += size
    return out


# --- Single colors ---


class SingleColor:
    """A token selecting one color, such as ``{#ff0000}``."""

    def __init__(self, regex: str) -> None:
        self.pattern: re.Pattern[str] = re.compile(regex, re.IGNORECASE)

    def apply(self, text: str, legacy: bool) -> str:
        """Replace each token with the escape for its color."""
        return self.pattern.sub(lambda m: escape_hex(m.group(1), legacy), text)

    def strip(self, text: str) -> str:
        """Remove each token."""
        return self.pattern.sub("", text)

    def __repr__(self) -> str:
        return f"SingleColor({self.pattern.pattern!r})"


SINGLE_COLOR_REGEXES: Final[tuple[str, ...]] = (
    rf"[{{]#({HEX})[}}]",
    rf"%#({HEX})%",
    rf"\[#({HEX})]",
    rf"<#({HEX})>",
    rf"&x({HEX})",
    # Bare form; it also matches inside text such as a URL fragment (`/#decade`).
    rf"&?#({HEX})",
)


# --- Multi colors ---


class CustomGradient:
    """Multi-stop gradient: ``<#aa0000:#00aa00:#0000aa>text</g>``."""

    pattern: Final[re.Pattern[str]] = re.compile(
        rf"<(#{HEX}(?::#{HEX})+)>(.+?)</g(?:radient)?>", re.IGNORECASE
    )

    def _render(self, match: re.Match[str], legacy: bool) -> str:
        stops = [RGB.from_hex(s) for s in match.group(1).split(":")]
        chunks = split_even(match.group(2), len(stops) - 1)
        out: list[str] = []
        for i, chunk in enumerate(chunks):
            if not chunk:
                continue
            if i == 0:
                out.append(apply_gradient(chunk, stops[i], stops[i + 1], legacy))
                continue
            # Start each later segment on the last character of the previous
            # one so the color steps stay continuous, then drop that character.
            n = visible_length(chunk) + 1
            escapes = gradient_escapes(stops[i], stops[i + 1], max(n, 2), legacy)
            out.append(spread(chunk, escapes[1:]))
        return "".join(out)

    def apply(self, text: str, legacy: bool) -> str:
        """Replace each token with its body colored stop to stop."""
        return self.pattern.sub(lambda m: self._render(m, legacy), text)

    def strip(self, text: str) -> str:
        """Replace each token with its body."""
        return self.pattern.sub(lambda m: m.group(2), text)


class Gradient:
    """Gradient with a configurable tag prefix and optional inner stops."""

    def __init__(self, prefix: str) -> None:
        self.prefix: str = prefix
        p = re.escape(prefix)
        self.pattern: re.Pattern[str] = re.compile(
            rf"<{p}({HEX})>(.+?)</{p}({HEX})>", re.IGNORECASE
        )
        self.stop: re.Pattern[str] = re.compile(rf"<{p}({HEX})>", re.IGNORECASE)

    def _segments(self, match: re.Match[str]) -> tuple[list[str], list[str]]:
        body = match.group(2)
        stops = [match.group(1), *(m.group(1) for m in self.stop.finditer(body)), match.group(3)]
        parts = [part for i, part in enumerate(self.stop.split(body)) if i % 2 == 0]
        return stops, parts

    def _render(self, match: re.Match[str], legacy: bool) -> str:
        stops, parts = self._segments(match)
        return "".join(
            apply_gradient(part, RGB.from_hex(a), RGB.from_hex(b), legacy)
            for part, a, b in zip(parts, stops, stops[1:])
        )

    def apply(self, text: str, legacy: bool) -> str:
        """Replace each token with its body colored from stop to stop."""
        return self.pattern.sub(lambda m: self._render(m, legacy), text)

    def strip(self, text: str) -> str:
        """Replace each token with its body, inner stops removed."""
        return self.pattern.sub(lambda m: "".join(self._segments(m)[1]), text)

    def __repr__(self) -> str:
        return f"Gradient({self.prefix!r})"


class Rainbow:
    """Rainbow over a body: ``<PREFIX:N>text</PREFIX>``, N in percent."""

    def __init__(self, prefix: str) -> None:
        self.prefix: str = prefix
        p = re.escape(prefix)
        self.pattern: re.Pattern[str] = re.compile(
            rf"<{p}:(\d{{1,3}})>(.+?)</{p}>", re.IGNORECASE
        )

    @staticmethod
    def saturation(raw: str) -> float:
        """Convert the percent argument into a 0..1 saturation."""
        return min(int(raw), 100) / 100

    def apply(self, text: str, legacy: bool) -> str:
        """Replace each token with its body in rainbow colors."""
        return self.pattern.sub(
            lambda m: apply_rainbow(m.group(2), self.saturation(m.group(1)), legacy), text
        )

    def strip(self, text: str) -> str:
        """Replace each token with its body."""
        return self.pattern.sub(lambda m: m.group(2), text)

    def __repr__(self) -> str:
        return f"Rainbow({self.prefix!r})"


def default_patterns() -> list[ColorPattern]:
    """Return the built-in syntaxes in application order (multi before single)."""
    patterns: list[ColorPattern] = [
        CustomGradient(),
        Gradient("g:"),
        Gradient("#"),
        Rainbow("rainbow"),
        Rainbow("r"),
    ]
    patterns.extend(SingleColor(regex) for regex in SINGLE_COLOR_REGEXES)
    return patterns
