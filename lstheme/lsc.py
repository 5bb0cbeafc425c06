"""Parsing of LS_COLORS-style variables into keys and styles."""

from __future__ import annotations

import re
from collections import deque
from dataclasses import dataclass
from typing import Iterator

from lstheme.style import RGB, AnyColour, Colour, Fixed, Style

_BYTE = re.compile(r"\+?[0-9]+")

_ATTRIBUTES = {
    "1": Style.bold,
    "2": Style.dimmed,
    "3": Style.italic,
    "4": Style.underline,
    "5": Style.blink,
    "7": Style.reverse,
    "8": Style.hidden,
    "9": Style.strikethrough,
}

_FOREGROUNDS = {str(30 + colour.value): colour for colour in Colour}
_BACKGROUNDS = {str(40 + colour.value): colour for colour in Colour}


@dataclass(frozen=True)
class LSColors:
    """A colon-separated list of ``key=value`` definitions."""

    text: str

    def pairs(self) -> Iterator[Pair]:
        """Yield every well-formed pair, in order, skipping malformed ones."""
        for entry in self.text.split(":"):
            bits = entry.split("=")[:3]
            if len(bits) == 2 and bits[0] and bits[1]:
                yield Pair(bits[0], bits[1])


def _parse_byte(text: str | None) -> int | None:
    if text is None or not _BYTE.fullmatch(text):
        return None
    number = int(text)
    return number if number <= 255 else None


def _next_or_none(tokens: deque[str]) -> str | None:
    return tokens.popleft() if tokens else None


def _parse_high_colour(tokens: deque[str]) -> AnyColour | None:
    """Read a 256-colour or true-colour specification after a 38 or 48."""
    if not tokens:
        return None
    kind = tokens[0]
    if kind == "5":
        tokens.popleft()
        index = _parse_byte(_next_or_none(tokens))
        return Fixed(index) if index is not None else None
    if kind == "2":
        tokens.popleft()
        if not tokens:
            return None
        components = [_parse_byte(_next_or_none(tokens)) for _ in range(3)]
        if None not in components:
            return RGB(*components)
    return None


@dataclass(frozen=True)
class Pair:
    """One ``key=value`` definition, where the value is a list of SGR codes."""

    key: str
    value: str

    def to_style(self) -> Style:
        """Interpret the value's codes; codes that are not understood are ignored."""
        style = Style()
        tokens = deque(self.value.split(";"))
        while tokens:
            code = tokens.popleft().lstrip("0")
            if code in _ATTRIBUTES:
                style = _ATTRIBUTES[code](style)
            elif code in _FOREGROUNDS:
                style = style.fg(_FOREGROUNDS[code])
            elif code in _BACKGROUNDS:
                style = style.on(_BACKGROUNDS[code])
            elif code == "38":
                colour = _parse_high_colour(tokens)
                if colour is not None:
                    style = style.fg(colour)
            elif code == "48":
                colour = _parse_high_colour(tokens)
                if colour is not None:
                    style = style.on(colour)
        return style