from dataclasses import replace

import pytest

from lstheme.lsc import Pair
from lstheme.style import Colour, Fixed, Style
from lstheme.ui_styles import ColourScale, Size, UiStyles

NUMBERS = ("number_byte", "number_kilo", "number_mega", "number_giga", "number_huge")
UNITS = ("unit_byte", "unit_kilo", "unit_mega", "unit_giga", "unit_huge")


def test_plain_is_uncoloured():
    plain = UiStyles.plain()
    assert plain == UiStyles()
    assert plain.colourful is False
    assert plain.filekinds.directory == Style()
    assert plain.punctuation == Style()


def test_default_theme_values():
    theme = UiStyles.default_theme(ColourScale.FIXED)
    assert theme.colourful is True
    assert theme.filekinds.directory == Colour.BLUE.bold()
    assert theme.perms.user_execute_file == Colour.GREEN.bold().underline()
    assert theme.links.multi_link_file == Colour.RED.on(Colour.YELLOW)
    assert theme.git.ignored == Style().dimmed()
    assert theme.punctuation == Fixed(244).normal()
    assert theme.broken_path_overlay == Style().underline()


@pytest.mark.parametrize("scale", list(ColourScale))
def test_default_theme_uses_size_scale(scale):
    assert UiStyles.default_theme(scale).size == Size.colourful(scale)


def test_size_gradient_and_fixed():
    gradient = Size.colourful(ColourScale.GRADIENT)
    fixed = Size.colourful(ColourScale.FIXED)
    assert gradient.number_kilo == Fixed(190).normal()
    assert gradient.number_huge == Fixed(214).normal()
    assert all(getattr(fixed, n) == Colour.GREEN.bold() for n in NUMBERS)
    assert all(getattr(gradient, u) == Colour.GREEN.normal() for u in UNITS)
    assert gradient.major == fixed.major == Colour.GREEN.bold()


def test_default_themes_are_independent():
    first = UiStyles.default_theme(ColourScale.FIXED)
    first.set_ls(Pair("di", "31"))
    second = UiStyles.default_theme(ColourScale.FIXED)
    assert second.filekinds.directory == Colour.BLUE.bold()


@pytest.mark.parametrize(
    "key, value, path, expected",
    [
        ("di", "31", "filekinds.directory", Colour.RED.normal()),
        ("ex", "32", "filekinds.executable", Colour.GREEN.normal()),
        ("fi", "33", "filekinds.normal", Colour.YELLOW.normal()),
        ("pi", "34", "filekinds.pipe", Colour.BLUE.normal()),
        ("so", "35", "filekinds.socket", Colour.PURPLE.normal()),
        ("bd", "36", "filekinds.block_device", Colour.CYAN.normal()),
        ("cd", "35", "filekinds.char_device", Colour.PURPLE.normal()),
        ("ln", "34", "filekinds.symlink", Colour.BLUE.normal()),
        ("or", "33", "broken_symlink", Colour.YELLOW.normal()),
    ],
)
def test_set_ls(key, value, path, expected):
    styles = UiStyles()
    assert styles.set_ls(Pair(key, value)) is True
    target = styles
    for part in path.split("."):
        target = getattr(target, part)
    assert target == expected


def test_set_ls_rejects_exa_and_unknown_keys():
    styles = UiStyles()
    assert styles.set_ls(Pair("ur", "38;5;100")) is False
    assert styles.set_ls(Pair("*.txt", "31")) is False
    assert styles == UiStyles()


@pytest.mark.parametrize(
    "key, value, path, expected",
    [
        ("ur", "38;5;100", "perms.user_read", Fixed(100).normal()),
        ("ux", "38;5;102", "perms.user_execute_file", Fixed(102).normal()),
        ("xa", "38;5;112", "perms.attribute", Fixed(112).normal()),
        ("nk", "38;5;116", "size.number_kilo", Fixed(116).normal()),
        ("uh", "38;5;119", "size.unit_huge", Fixed(119).normal()),
        ("df", "38;5;115", "size.major", Fixed(115).normal()),
        ("gn", "38;5;120", "users.group_not_yours", Fixed(120).normal()),
        ("lm", "38;5;122", "links.multi_link_file", Fixed(122).normal()),
        ("gt", "38;5;127", "git.typechange", Fixed(127).normal()),
        ("xx", "38;5;128", "punctuation", Fixed(128).normal()),
        ("da", "38;5;129", "date", Fixed(129).normal()),
        ("cc", "38;5;134", "control_char", Fixed(134).normal()),
        ("bO", "4", "broken_path_overlay", Style().underline()),
    ],
)
def test_set_exa(key, value, path, expected):
    styles = UiStyles()
    assert styles.set_exa(Pair(key, value)) is True
    target = styles
    for part in path.split("."):
        target = getattr(target, part)
    assert target == expected


def test_set_exa_sn_and_sb_set_every_size_style():
    styles = UiStyles()
    assert styles.set_exa(Pair("sn", "38;5;113"))
    assert styles.set_exa(Pair("sb", "38;5;114"))
    assert all(getattr(styles.size, n) == Fixed(113).normal() for n in NUMBERS)
    assert all(getattr(styles.size, u) == Fixed(114).normal() for u in UNITS)


def test_set_exa_ignores_ls_keys():
    styles = UiStyles()
    assert styles.set_exa(Pair("di", "31")) is False
    assert styles.set_exa(Pair("zz", "31")) is False
    assert styles == UiStyles()


def test_later_pairs_override_earlier():
    styles = UiStyles()
    for value in ("31", "32", "33"):
        styles.set_ls(Pair("pi", value))
    assert styles.filekinds.pipe == Colour.YELLOW.normal()


def test_set_number_and_unit_style_leave_others_alone():
    styles = UiStyles.default_theme(ColourScale.GRADIENT)
    before = replace(styles.size)
    style = Colour.CYAN.bold()
    styles.set_number_style(style)
    assert all(getattr(styles.size, n) == style for n in NUMBERS)
    assert all(getattr(styles.size, u) == getattr(before, u) for u in UNITS)
    styles.set_unit_style(style)
    assert all(getattr(styles.size, u) == style for u in UNITS)
    assert styles.size.major == before.major