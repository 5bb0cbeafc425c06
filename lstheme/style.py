"""Terminal text styles: colours, attributes and their ANSI escape codes."""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from enum import Enum
from typing import Union

RESET = "\x1b[0m"


def _normal(colour: AnyColour) -> Style:
    return Style(foreground=colour)


def _bold(colour: AnyColour) -> Style:
    return Style(foreground=colour, is_bold=True)


def _underline(colour: AnyColour) -> Style:
    return Style(foreground=colour, is_underline=True)


def _on(colour: AnyColour, background: AnyColour) -> Style:
    return Style(foreground=colour, background=background)


class Colour(Enum):
    """The eight basic terminal colours."""

    BLACK = 0
    RED = 1
    GREEN = 2
    YELLOW = 3
    BLUE = 4
    PURPLE = 5
    CYAN = 6
    WHITE = 7

    def normal(self) -> Style:
        """A style with this colour as foreground and no attributes."""
        return _normal(self)

    def bold(self) -> Style:
        """A bold style with this colour as foreground."""
        return _bold(self)

    def underline(self) -> Style:
        """An underlined style with this colour as foreground."""
        return _underline(self)

    def on(self, background: AnyColour) -> Style:
        """A style with this foreground over the given background."""
        return _on(self, background)

    def foreground_code(self) -> str:
        return str(30 + self.value)

    def background_code(self) -> str:
        return str(40 + self.value)


def _check_byte(name: str, value: int) -> None:
    if not 0 <= value <= 255:
        raise ValueError(f"{name} must be between 0 and 255, got {value}")


@dataclass(frozen=True)
class Fixed:
    """One of the 256 colours of the extended terminal palette."""

    value: int

    def __post_init__(self) -> None:
        _check_byte("palette index", self.value)

    def normal(self) -> Style:
        """A style with this colour as foreground and no attributes."""
        return _normal(self)

    def bold(self) -> Style:
        """A bold style with this colour as foreground."""
        return _bold(self)

    def underline(self) -> Style:
        """An underlined style with this colour as foreground."""
        return _underline(self)

    def on(self, background: AnyColour) -> Style:
        """A style with this foreground over the given background."""
        return _on(self, background)

    def foreground_code(self) -> str:
        return f"38;5;{self.value}"

    def background_code(self) -> str:
        return f"48;5;{self.value}"


@dataclass(frozen=True)
class RGB:
    """A 24-bit true colour."""

    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        _check_byte("red", self.r)
        _check_byte("green", self.g)
        _check_byte("blue", self.b)

    def normal(self) -> Style:
        """A style with this colour as foreground and no attributes."""
        return _normal(self)

    def bold(self) -> Style:
        """A bold style with this colour as foreground."""
        return _bold(self)

    def underline(self) -> Style:
        """An underlined style with this colour as foreground."""
        return _underline(self)

    def on(self, background: AnyColour) -> Style:
        """A style with this foreground over the given background."""
        return _on(self, background)

    def foreground_code(self) -> str:
        return f"38;2;{self.r};{self.g};{self.b}"

    def background_code(self) -> str:
        return f"48;2;{self.r};{self.g};{self.b}"


AnyColour = Union[Colour, Fixed, RGB]

_ATTRIBUTE_CODES = (
    ("is_bold", "1"),
    ("is_dimmed", "2"),
    ("is_italic", "3"),
    ("is_underline", "4"),
    ("is_blink", "5"),
    ("is_reverse", "7"),
    ("is_hidden", "8"),
    ("is_strikethrough", "9"),
)


@dataclass(frozen=True)
class Style:
    """An immutable set of colours and attributes for a piece of text."""

    foreground: AnyColour | None = None
    background: AnyColour | None = None
    is_bold: bool = False
    is_dimmed: bool = False
    is_italic: bool = False
    is_underline: bool = False
    is_blink: bool = False
    is_reverse: bool = False
    is_hidden: bool = False
    is_strikethrough: bool = False

    @property
    def is_plain(self) -> bool:
        """Whether this style changes nothing about the text."""
        return self == Style()

    def bold(self) -> Style:
        return replace(self, is_bold=True)

    def dimmed(self) -> Style:
        return replace(self, is_dimmed=True)

    def italic(self) -> Style:
        return replace(self, is_italic=True)

    def underline(self) -> Style:
        return replace(self, is_underline=True)

    def blink(self) -> Style:
        return replace(self, is_blink=True)

    def reverse(self) -> Style:
        return replace(self, is_reverse=True)

    def hidden(self) -> Style:
        return replace(self, is_hidden=True)

    def strikethrough(self) -> Style:
        return replace(self, is_strikethrough=True)

    def fg(self, colour: AnyColour) -> Style:
        """A copy of this style with the given foreground colour."""
        return replace(self, foreground=colour)

    def on(self, colour: AnyColour) -> Style:
        """A copy of this style with the given background colour."""
        return replace(self, background=colour)

    def prefix(self) -> str:
        """The escape sequence that switches this style on, or '' if plain."""
        if self.is_plain:
            return ""
        codes = [code for attr, code in _ATTRIBUTE_CODES if getattr(self, attr)]
        if self.background is not None:
            codes.append(self.background.background_code())
        if self.foreground is not None:
            codes.append(self.foreground.foreground_code())
        return "\x1b[" + ";".join(codes) + "m"

    def paint(self, text: str) -> str:
        """The text wrapped in this style's escape sequences."""
        if self.is_plain:
            return text
        return f"{self.prefix()}{text}{RESET}"


def apply_overlay(base: Style, overlay: Style) -> Style:
    """Amend a base style with whatever the overlay style sets.

    Colours set in the overlay replace those of the base; attributes switched
    on in the overlay are switched on in the result. Nothing is switched off.
    """
    changes = {}
    if overlay.foreground is not None:
        changes["foreground"] = overlay.foreground
    if overlay.background is not None:
        changes["background"] = overlay.background
    for field in fields(Style):
        if field.name.startswith("is_") and getattr(overlay, field.name):
            changes[field.name] = True
    return replace(base, **changes)