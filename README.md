# lstheme

Colour themes for terminal file listings. `lstheme` reads the values of the
`LS_COLORS` and `EXA_COLORS` environment variables, turns their ANSI escape
codes back into `Style` values, and lays them over a built-in default theme.

## Installing

```
pip install .
```

## Styles

`lstheme.style` holds the colour and style types:

- `Colour` – the eight basic colours (`Colour.RED`, `Colour.BLUE`, ...).
- `Fixed(n)` – one of the 256 palette colours; `n` must be 0–255.
- `RGB(r, g, b)` – a 24-bit colour; each part must be 0–255.
- `Style` – an immutable set of foreground, background and attributes.

Every colour has `normal()`, `bold()`, `underline()` and `on(background)`,
each returning a `Style`. A `Style` has `bold()`, `dimmed()`, `italic()`,
`underline()`, `blink()`, `reverse()`, `hidden()`, `strikethrough()`,
`fg(colour)` and `on(colour)`, each returning a new style.

```python
from lstheme.style import Colour, Fixed, Style

warning = Colour.RED.on(Colour.YELLOW)
dim = Style().dimmed()
print(warning.prefix())                           # '\x1b[43;31m'
print(Fixed(244).normal().paint("punctuation"))   # wrapped in escapes and a reset
```

`Style.prefix()` gives the escape sequence that switches the style on (an
empty string for a plain style), and `Style.paint(text)` wraps text in it and
a reset; a plain style leaves the text untouched.

`apply_overlay(base, overlay)` combines two styles: colours set in the overlay
replace those of the base, and attributes switched on in the overlay are
switched on in the result. Nothing is switched off.

## Parsing LS_COLORS

```python
from lstheme.lsc import LSColors

for pair in LSColors("di=01;34:*.txt=38;5;149").pairs():
    print(pair.key, pair.to_style())
```

`LSColors.pairs()` yields a `Pair` for every `key=value` entry with a
non-empty key and value; malformed entries are skipped. `Pair.to_style()`
understands attribute codes 1–5 and 7–9, foreground codes 30–37 and 38,
background codes 40–47 and 48 (with `5;n` for palette colours and
`2;r;g;b` for true colours). Leading zeros are ignored, and codes it does not
understand are skipped quietly.

## Interface styles

`lstheme.ui_styles.UiStyles` holds one style for each part of the interface
that can be coloured, grouped into `FileKinds`, `Permissions`, `Size`,
`Users`, `Links` and `Git`, plus punctuation, dates, inodes, blocks, headers,
symlink paths, control characters and broken symlinks.

- `UiStyles.plain()` – no colours at all.
- `UiStyles.default_theme(scale)` – the built-in colourful theme. With
  `ColourScale.GRADIENT` file-size numbers get a different colour per
  magnitude; with `ColourScale.FIXED` they are all bold green.
- `set_ls(pair)` – applies an `LS_COLORS` key (`di`, `ex`, `fi`, `pi`, `so`,
  `bd`, `cd`, `ln`, `or`) and returns whether the key was one of them.
- `set_exa(pair)` – applies one of the extra `EXA_COLORS` keys (permissions
  `ur`…`xa`, sizes `sn`, `sb`, `nb`…`uh`, `df`, `ds`, users `uu`, `un`, `gu`,
  `gn`, links `lc`, `lm`, git `ga`, `gm`, `gd`, `gv`, `gt`, `gi`, and `xx`,
  `da`, `in`, `bl`, `hd`, `lp`, `cc`, `bO`) and returns whether it was one.
- `set_number_style(style)` / `set_unit_style(style)` – one style for all
  size numbers or all size units.

## Building a theme

```python
import os, sys
from lstheme.theme import Definitions, Options, Prefix, UseColours
from lstheme.ui_styles import ColourScale

options = Options(
    use_colours=UseColours.AUTOMATIC,
    colour_scale=ColourScale.FIXED,
    definitions=Definitions(
        ls=os.environ.get("LS_COLORS"),
        exa=os.environ.get("EXA_COLORS"),
    ),
)
theme = options.to_theme(sys.stdout.isatty())
print(theme.colour_file("notes.txt").paint("notes.txt"))
print(theme.size_style(Prefix.MEGA).paint("12"), theme.unit_style(Prefix.MEGA).paint("M"))
```

`Options.to_theme(isatty)` returns a plain theme when colours are `NEVER`, or
`AUTOMATIC` and the output is not a terminal. Otherwise it starts from the
default theme and applies `LS_COLORS`, then `EXA_COLORS`, through
`Definitions.parse_color_vars`:

- Keys that `UiStyles` understands change the interface styles; `EXA_COLORS`
  understands both sets of keys and is applied after `LS_COLORS`.
- Any other key is read as a glob pattern (`*`, `?`, `[...]`) for file names
  and added to the theme's `ExtensionMappings`. Patterns that cannot be parsed
  are logged as a warning through `logging` and skipped.
- When `EXA_COLORS` is `reset` or starts with `reset:`,
  `Theme.use_default_filetypes` is `False`.

`Theme.colour_file(name)` returns the style of the last matching pattern, or
the normal file style. `Theme.size_style(prefix)` and
`Theme.unit_style(prefix)` pick size styles by `Prefix` (`None` for plain
bytes). `Theme.broken_filename()` and `Theme.broken_control_char()` lay the
broken-path overlay over the broken-symlink and control-character styles.

## What this package does not do

It builds themes only. It does not list directories or read file metadata,
and it has no command to run. It carries no built-in table of file-type
colours: `Theme.use_default_filetypes` only reports whether such colours
should be consulted, and it is up to the caller to supply them.

## Running the tests

```
pip install .[test]
pytest
```