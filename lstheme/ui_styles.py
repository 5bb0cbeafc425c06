"""The styles used for every part of the interface that can be coloured."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from lstheme.lsc import Pair
from lstheme.style import Colour, Fixed, Style


class ColourScale(Enum):
    """How file sizes are coloured: one colour, or a gradient by magnitude."""

    FIXED = "fixed"
    GRADIENT = "gradient"


@dataclass
class FileKinds:
    normal: Style = Style()
    directory: Style = Style()
    symlink: Style = Style()
    pipe: Style = Style()
    block_device: Style = Style()
    char_device: Style = Style()
    socket: Style = Style()
    special: Style = Style()
    executable: Style = Style()


@dataclass
class Permissions:
    user_read: Style = Style()
    user_write: Style = Style()
    user_execute_file: Style = Style()
    user_execute_other: Style = Style()

    group_read: Style = Style()
    group_write: Style = Style()
    group_execute: Style = Style()

    other_read: Style = Style()
    other_write: Style = Style()
    other_execute: Style = Style()

    special_user_file: Style = Style()
    special_other: Style = Style()

    attribute: Style = Style()


@dataclass
class Size:
    major: Style = Style()
    minor: Style = Style()

    number_byte: Style = Style()
    number_kilo: Style = Style()
    number_mega: Style = Style()
    number_giga: Style = Style()
    number_huge: Style = Style()

    unit_byte: Style = Style()
    unit_kilo: Style = Style()
    unit_mega: Style = Style()
    unit_giga: Style = Style()
    unit_huge: Style = Style()

    @staticmethod
    def colourful(scale: ColourScale) -> Size:
        """The default size colours for the given colour scale."""
        if scale is ColourScale.GRADIENT:
            numbers = {
                "number_byte": Fixed(118).normal(),
                "number_kilo": Fixed(190).normal(),
                "number_mega": Fixed(226).normal(),
                "number_giga": Fixed(220).normal(),
                "number_huge": Fixed(214).normal(),
            }
        else:
            numbers = {
                name: Colour.GREEN.bold()
                for name in ("number_byte", "number_kilo", "number_mega",
                             "number_giga", "number_huge")
            }
        units = {
            name: Colour.GREEN.normal()
            for name in ("unit_byte", "unit_kilo", "unit_mega", "unit_giga", "unit_huge")
        }
        return Size(
            major=Colour.GREEN.bold(),
            minor=Colour.GREEN.normal(),
            **numbers,
            **units,
        )


@dataclass
class Users:
    user_you: Style = Style()
    user_someone_else: Style = Style()
    group_yours: Style = Style()
    group_not_yours: Style = Style()


@dataclass
class Links:
    normal: Style = Style()
    multi_link_file: Style = Style()


@dataclass
class Git:
    new: Style = Style()
    modified: Style = Style()
    deleted: Style = Style()
    renamed: Style = Style()
    typechange: Style = Style()
    ignored: Style = Style()
    conflicted: Style = Style()


_NUMBER_FIELDS = ("number_byte", "number_kilo", "number_mega", "number_giga", "number_huge")
_UNIT_FIELDS = ("unit_byte", "unit_kilo", "unit_mega", "unit_giga", "unit_huge")

# Keys understood by LS_COLORS, mapped to the style they set.
_LS_KEYS = {
    "di": "filekinds.directory",
    "ex": "filekinds.executable",
    "fi": "filekinds.normal",
    "pi": "filekinds.pipe",
    "so": "filekinds.socket",
    "bd": "filekinds.block_device",
    "cd": "filekinds.char_device",
    "ln": "filekinds.symlink",
    "or": "broken_symlink",
}

# Keys understood only by EXA_COLORS ("sn" and "sb" are handled separately).
_EXA_KEYS = {
    "ur": "perms.user_read",
    "uw": "perms.user_write",
    "ux": "perms.user_execute_file",
    "ue": "perms.user_execute_other",
    "gr": "perms.group_read",
    "gw": "perms.group_write",
    "gx": "perms.group_execute",
    "tr": "perms.other_read",
    "tw": "perms.other_write",
    "tx": "perms.other_execute",
    "su": "perms.special_user_file",
    "sf": "perms.special_other",
    "xa": "perms.attribute",
    "nb": "size.number_byte",
    "nk": "size.number_kilo",
    "nm": "size.number_mega",
    "ng": "size.number_giga",
    "nh": "size.number_huge",
    "ub": "size.unit_byte",
    "uk": "size.unit_kilo",
    "um": "size.unit_mega",
    "ug": "size.unit_giga",
    "uh": "size.unit_huge",
    "df": "size.major",
    "ds": "size.minor",
    "uu": "users.user_you",
    "un": "users.user_someone_else",
    "gu": "users.group_yours",
    "gn": "users.group_not_yours",
    "lc": "links.normal",
    "lm": "links.multi_link_file",
    "ga": "git.new",
    "gm": "git.modified",
    "gd": "git.deleted",
    "gv": "git.renamed",
    "gt": "git.typechange",
    "gi": "git.ignored",
    "xx": "punctuation",
    "da": "date",
    "in": "inode",
    "bl": "blocks",
    "hd": "header",
    "lp": "symlink_path",
    "cc": "control_char",
    "bO": "broken_path_overlay",
}


@dataclass
class UiStyles:
    """One style for each part of the interface that can be coloured."""

    colourful: bool = False

    filekinds: FileKinds = field(default_factory=FileKinds)
    perms: Permissions = field(default_factory=Permissions)
    size: Size = field(default_factory=Size)
    users: Users = field(default_factory=Users)
    links: Links = field(default_factory=Links)
    git: Git = field(default_factory=Git)

    punctuation: Style = Style()
    date: Style = Style()
    inode: Style = Style()
    blocks: Style = Style()
    header: Style = Style()
    octal: Style = Style()

    symlink_path: Style = Style()
    control_char: Style = Style()
    broken_symlink: Style = Style()
    broken_path_overlay: Style = Style()

    @staticmethod
    def plain() -> UiStyles:
        """Styles that leave all output uncoloured."""
        return UiStyles()

    @staticmethod
    def default_theme(scale: ColourScale) -> UiStyles:
        """The built-in colourful theme."""
        return UiStyles(
            colourful=True,
            filekinds=FileKinds(
                normal=Style(),
                directory=Colour.BLUE.bold(),
                symlink=Colour.CYAN.normal(),
                pipe=Colour.YELLOW.normal(),
                block_device=Colour.YELLOW.bold(),
                char_device=Colour.YELLOW.bold(),
                socket=Colour.RED.bold(),
                special=Colour.YELLOW.normal(),
                executable=Colour.GREEN.bold(),
            ),
            perms=Permissions(
                user_read=Colour.YELLOW.bold(),
                user_write=Colour.RED.bold(),
                user_execute_file=Colour.GREEN.bold().underline(),
                user_execute_other=Colour.GREEN.bold(),
                group_read=Colour.YELLOW.normal(),
                group_write=Colour.RED.normal(),
                group_execute=Colour.GREEN.normal(),
                other_read=Colour.YELLOW.normal(),
                other_write=Colour.RED.normal(),
                other_execute=Colour.GREEN.normal(),
                special_user_file=Colour.PURPLE.normal(),
                special_other=Colour.PURPLE.normal(),
                attribute=Style(),
            ),
            size=Size.colourful(scale),
            users=Users(
                user_you=Colour.YELLOW.bold(),
                user_someone_else=Style(),
                group_yours=Colour.YELLOW.bold(),
                group_not_yours=Style(),
            ),
            links=Links(
                normal=Colour.RED.bold(),
                multi_link_file=Colour.RED.on(Colour.YELLOW),
            ),
            git=Git(
                new=Colour.GREEN.normal(),
                modified=Colour.BLUE.normal(),
                deleted=Colour.RED.normal(),
                renamed=Colour.YELLOW.normal(),
                typechange=Colour.PURPLE.normal(),
                ignored=Style().dimmed(),
                conflicted=Colour.RED.normal(),
            ),
            punctuation=Fixed(244).normal(),
            date=Colour.BLUE.normal(),
            inode=Colour.PURPLE.normal(),
            blocks=Colour.CYAN.normal(),
            octal=Colour.PURPLE.normal(),
            header=Style().underline(),
            symlink_path=Colour.CYAN.normal(),
            control_char=Colour.RED.normal(),
            broken_symlink=Colour.RED.normal(),
            broken_path_overlay=Style().underline(),
        )

    def _assign(self, path: str, style: Style) -> None:
        target: object = self
        *parents, name = path.split(".")
        for parent in parents:
            target = getattr(target, parent)
        setattr(target, name, style)

    def set_ls(self, pair: Pair) -> bool:
        """Apply a pair whose key is an LS_COLORS code; return whether it was one."""
        path = _LS_KEYS.get(pair.key)
        if path is None:
            return False
        self._assign(path, pair.to_style())
        return True

    def set_exa(self, pair: Pair) -> bool:
        """Apply a pair whose key is an EXA_COLORS-only code; return whether it was one.

        LS_COLORS codes are not considered here, so ``set_ls`` should be tried first.
        """
        if pair.key == "sn":
            self.set_number_style(pair.to_style())
            return True
        if pair.key == "sb":
            self.set_unit_style(pair.to_style())
            return True
        path = _EXA_KEYS.get(pair.key)
        if path is None:
            return False
        self._assign(path, pair.to_style())
        return True

    def set_number_style(self, style: Style) -> None:
        """Use one style for the numbers of all file sizes."""
        for name in _NUMBER_FIELDS:
            setattr(self.size, name, style)

    def set_unit_style(self, style: Style) -> None:
        """Use one style for the units of all file sizes."""
        for name in _UNIT_FIELDS:
            setattr(self.size, name, style)