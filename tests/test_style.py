import pytest

from lstheme.style import RGB, Colour, Fixed, Style, apply_overlay


def test_default_style_is_plain():
    assert Style().is_plain
    assert Style().prefix() == ""


def test_plain_paint_returns_text_unchanged():
    assert Style().paint("hello") == "hello"


def test_colour_shortcuts_build_styles():
    assert Colour.RED.normal() == Style(foreground=Colour.RED)
    assert Colour.RED.bold() == Style().fg(Colour.RED).bold()
    assert Colour.GREEN.underline() == Style().fg(Colour.GREEN).underline()
    assert Colour.RED.on(Colour.YELLOW) == Style().fg(Colour.RED).on(Colour.YELLOW)


def test_fixed_and_rgb_shortcuts():
    assert Fixed(149).normal() == Style(foreground=Fixed(149))
    assert Fixed(121).on(Fixed(212)).background == Fixed(212)
    assert RGB(255, 100, 0).bold().is_bold
    assert RGB(1, 2, 3).underline().foreground == RGB(1, 2, 3)


def test_builders_do_not_mutate():
    base = Style()
    bold = base.bold()
    assert base.is_plain
    assert bold.is_bold
    assert not bold.is_plain


def test_repeated_attribute_is_idempotent():
    assert Style().bold().bold().bold() == Style().bold()


@pytest.mark.parametrize(
    "method, attribute",
    [
        ("bold", "is_bold"),
        ("dimmed", "is_dimmed"),
        ("italic", "is_italic"),
        ("underline", "is_underline"),
        ("blink", "is_blink"),
        ("reverse", "is_reverse"),
        ("hidden", "is_hidden"),
        ("strikethrough", "is_strikethrough"),
    ],
)
def test_each_attribute_method_sets_its_flag(method, attribute):
    style = getattr(Style(), method)()
    assert getattr(style, attribute) is True
    assert style.foreground is None and style.background is None


def test_prefix_of_bold_red():
    assert Colour.RED.bold().prefix() == "\x1b[1;31m"


def test_prefix_of_palette_colours_has_background_first():
    assert Fixed(1).on(Fixed(2)).prefix() == "\x1b[48;5;2;38;5;1m"


def test_paint_wraps_with_prefix_and_reset():
    style = Colour.BLUE.normal()
    assert style.paint("hi") == style.prefix() + "hi" + "\x1b[0m"


def test_rgb_prefix_contains_components():
    prefix = RGB(10, 20, 30).normal().prefix()
    assert "10;20;30" in prefix
    assert prefix.startswith("\x1b[")
    assert prefix.endswith("m")


@pytest.mark.parametrize("bad", [-1, 256, 999])
def test_fixed_rejects_out_of_range(bad):
    with pytest.raises(ValueError):
        Fixed(bad)


def test_rgb_rejects_out_of_range():
    with pytest.raises(ValueError):
        RGB(0, 256, 0)


def test_overlay_adds_underline():
    base = Colour.RED.normal()
    result = apply_overlay(base, Style().underline())
    assert result == Colour.RED.underline()


def test_overlay_replaces_colours():
    base = Colour.RED.on(Colour.YELLOW).bold()
    result = apply_overlay(base, Colour.BLUE.on(Colour.CYAN))
    assert result == Colour.BLUE.on(Colour.CYAN).bold()


def test_plain_overlay_changes_nothing():
    base = Fixed(100).on(Colour.WHITE).italic()
    assert apply_overlay(base, Style()) == base


def test_overlay_never_turns_attributes_off():
    base = Style().bold().underline()
    assert apply_overlay(base, Style().italic()) == Style().bold().underline().italic()