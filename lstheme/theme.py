"""Build a theme from colour options and the LS_COLORS / EXA_COLORS variables."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from enum import Enum

from lstheme.lsc import LSColors
from lstheme.style import Style, apply_overlay
from lstheme.ui_styles import ColourScale, UiStyles

log = logging.getLogger(__name__)


class UseColours(Enum):
    """When coloured output should be produced."""

    ALWAYS = "always"
    AUTOMATIC = "automatic"
    NEVER = "never"


class Prefix(Enum):
    """The magnitude prefix of a displayed file size."""

    KILO = "k"
    KIBI = "Ki"
    MEGA = "M"
    MEBI = "Mi"
    GIGA = "G"
    GIBI = "Gi"
    TERA = "T"
    TEBI = "Ti"
    PETA = "P"
    PEBI = "Pi"
    EXA = "E"
    EXBI = "Ei"
    ZETTA = "Z"
    ZEBI = "Zi"
    YOTTA = "Y"
    YOBI = "Yi"


def _class_to_regex(pattern: str, start: int) -> tuple[str, int]:
    """Translate the bracket expression at ``start``; return it and the index after it."""
    pos = start + 1
    negate = pos < len(pattern) and pattern[pos] == "!"
    if negate:
        pos += 1
    body_start = pos
    if pos < len(pattern) and pattern[pos] == "]":
        pos += 1
    end = pattern.find("]", pos)
    if end == -1:
        raise ValueError(f"invalid range pattern in {pattern!r}")
    body = pattern[body_start:end]

    items = []
    rest = body
    while rest:
        if len(rest) >= 3 and rest[1] == "-":
            low, high = rest[0], rest[2]
            if low > high:
                raise ValueError(f"invalid range pattern in {pattern!r}")
            items.append(f"{re.escape(low)}-{re.escape(high)}")
            rest = rest[3:]
        else:
            items.append(re.escape(rest[0]))
            rest = rest[1:]
    return "[" + ("^" if negate else "") + "".join(items) + "]", end + 1


def _compile_glob(pattern: str) -> re.Pattern[str]:
    """Compile a shell glob into a regular expression matching whole names."""
    parts = []
    pos = 0
    length = len(pattern)
    while pos < length:
        char = pattern[pos]
        if char == "?":
            parts.append(".")
            pos += 1
        elif char == "*":
            run_end = pos
            while run_end < length and pattern[run_end] == "*":
                run_end += 1
            count = run_end - pos
            if count > 2:
                raise ValueError(
                    f"wildcards are either regular `*` or recursive `**` in {pattern!r}"
                )
            if count == 2:
                before_ok = pos == 0 or pattern[pos - 1] == "/"
                after_ok = run_end == length or pattern[run_end] == "/"
                if not (before_ok and after_ok):
                    raise ValueError(
                        f"recursive wildcards must form a single path component in {pattern!r}"
                    )
                if run_end < length:
                    parts.append("(?:.*/)?")
                    run_end += 1
                else:
                    parts.append(".*")
            else:
                parts.append(".*")
            pos = run_end
        elif char == "[":
            regex, pos = _class_to_regex(pattern, pos)
            parts.append(regex)
        else:
            parts.append(re.escape(char))
            pos += 1
    return re.compile("".join(parts), re.DOTALL)


@dataclass
class ExtensionMappings:
    """Glob patterns paired with the style of the file names they match."""

    mappings: list[tuple[str, Style]] = field(default_factory=list)
    _compiled: list[re.Pattern[str]] = field(
        default_factory=list, compare=False, repr=False
    )

    def __len__(self) -> int:
        return len(self.mappings)

    def add(self, pattern: str, style: Style) -> None:
        """Add a mapping; raise ValueError if the glob pattern is invalid."""
        compiled = _compile_glob(pattern)
        self.mappings.append((pattern, style))
        self._compiled.append(compiled)

    def colour_file(self, name: str) -> Style | None:
        """The style of the last mapping whose pattern matches the name."""
        for compiled, (_, style) in zip(reversed(self._compiled), reversed(self.mappings)):
            if compiled.fullmatch(name):
                return style
        return None


@dataclass
class Definitions:
    """The raw LS_COLORS and EXA_COLORS values, if set."""

    ls: str | None = None
    exa: str | None = None

    def _add_glob(self, exts: ExtensionMappings, key: str, style: Style) -> None:
        try:
            exts.add(key, style)
        except ValueError as error:
            log.warning("Couldn't parse glob pattern %r: %s", key, error)

    def parse_color_vars(self, colours: UiStyles) -> tuple[ExtensionMappings, bool]:
        """Apply both variables to ``colours`` and collect the file-name globs.

        Returns the glob mappings and whether the built-in file-type colours
        should still be used; EXA_COLORS turns them off when it starts with
        ``reset``.
        """
        exts = ExtensionMappings()

        if self.ls is not None:
            for pair in LSColors(self.ls).pairs():
                if not colours.set_ls(pair):
                    self._add_glob(exts, pair.key, pair.to_style())

        use_default_filetypes = True

        if self.exa is not None:
            if self.exa == "reset" or self.exa.startswith("reset:"):
                use_default_filetypes = False

            for pair in LSColors(self.exa).pairs():
                if not colours.set_ls(pair) and not colours.set_exa(pair):
                    self._add_glob(exts, pair.key, pair.to_style())

        return exts, use_default_filetypes


@dataclass
class Theme:
    """Interface styles together with the user's file-name colours.

    ``use_default_filetypes`` tells whether built-in file-type colours should
    be consulted for names that no mapping matches.
    """

    ui: UiStyles
    exts: ExtensionMappings = field(default_factory=ExtensionMappings)
    use_default_filetypes: bool = False

    def size_style(self, prefix: Prefix | None) -> Style:
        """The style of the number of a file size with the given prefix."""
        size = self.ui.size
        if prefix is None:
            return size.number_byte
        if prefix in (Prefix.KILO, Prefix.KIBI):
            return size.number_kilo
        if prefix in (Prefix.MEGA, Prefix.MEBI):
            return size.number_mega
        if prefix in (Prefix.GIGA, Prefix.GIBI):
            return size.number_giga
        return size.number_huge

    def unit_style(self, prefix: Prefix | None) -> Style:
        """The style of the unit of a file size with the given prefix."""
        size = self.ui.size
        if prefix is None:
            return size.unit_byte
        if prefix in (Prefix.KILO, Prefix.KIBI):
            return size.unit_kilo
        if prefix in (Prefix.MEGA, Prefix.MEBI):
            return size.unit_mega
        if prefix in (Prefix.GIGA, Prefix.GIBI):
            return size.unit_giga
        return size.unit_huge

    def broken_filename(self) -> Style:
        """The style of the target path of a broken symlink."""
        return apply_overlay(self.ui.broken_symlink, self.ui.broken_path_overlay)

    def broken_control_char(self) -> Style:
        """The style of a control character in a broken symlink's target."""
        return apply_overlay(self.ui.control_char, self.ui.broken_path_overlay)

    def colour_file(self, name: str) -> Style:
        """The style of a file name, falling back to the normal file style."""
        style = self.exts.colour_file(name)
        return style if style is not None else self.ui.filekinds.normal


@dataclass
class Options:
    """The user's choices about colouring output."""

    use_colours: UseColours = UseColours.AUTOMATIC
    colour_scale: ColourScale = ColourScale.FIXED
    definitions: Definitions = field(default_factory=Definitions)

    def to_theme(self, isatty: bool) -> Theme:
        """Build the theme, plain when colours are off for this output."""
        if self.use_colours is UseColours.NEVER or (
            self.use_colours is UseColours.AUTOMATIC and not isatty
        ):
            return Theme(UiStyles.plain(), ExtensionMappings(), use_default_filetypes=False)

        ui = UiStyles.default_theme(self.colour_scale)
        exts, use_default_filetypes = self.definitions.parse_color_vars(ui)
        return Theme(ui, exts, use_default_filetypes=use_default_filetypes)