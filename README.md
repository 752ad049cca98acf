# pixkit

Building blocks for a headless source-code editor, with no user interface:

- `pixkit.buffer` – `TextBuffer`, lines of UTF-8 bytes stored as glyphs,
  addressed by screen columns in which a tab reaches the next tab stop.
  Error markers and breakpoints keyed by line follow line insertions and
  removals.
- `pixkit.tokenizers` – hand-written C-style tokenizers for strings,
  character literals, identifiers, numbers and punctuation.
- `pixkit.model` – shared value types (`Coordinates`, `Glyph`,
  `Identifier`, `PaletteIndex`, `SelectionMode`), UTF-8 helpers, three
  colour palettes and `glyph_color`.
- `pixkit.variables` – `VariableCache`, named float variables referred to
  as `$name`.
- `pixkit.viewport` – `Viewport`, a screen rectangle clamped to
  non-negative values.

The package has no dependencies beyond the standard library.

## Install

    pip install .

For running the tests:

    pip install ".[test]"
    pytest

## The text buffer

```python
from pixkit.buffer import TextBuffer
from pixkit.model import Coordinates

buf = TextBuffer(tab_size=4)
buf.set_text("\tint x;\r\nreturn x;")      # carriage returns are dropped

buf.line_max_column(0)                     # 10: the tab fills columns 0-3
buf.character_index(Coordinates(0, 4))     # 1: the byte after the tab
buf.get_text(Coordinates(0, 0), Coordinates(1, 0))   # "\tint x;\n"

end, breaks = buf.insert_text_at(Coordinates(1, 0), "y = 1;\n")
# end == Coordinates(2, 0), breaks == 1
buf.text_lines()                           # ["\tint x;", "y = 1;", "return x;"]

buf.delete_range(Coordinates(1, 0), Coordinates(2, 0))
buf.text_lines()                           # ["\tint x;", "return x;"]
```

Other methods: `set_text_lines`, `character_column`,
`line_character_count`, `sanitize` (clamps a position to the text),
`advance`, `insert_line`, `remove_line`, `remove_lines`, and the word
helpers `find_word_start`, `find_word_end`, `find_next_word`,
`is_on_word_boundary` and `word_at`. Word boundaries are decided by
whitespace and by changes in each glyph's `color_index`.

`delete_range` and `remove_lines` raise `ValueError` when the end comes
before the start; `remove_line` and `remove_lines` raise `ValueError`
rather than remove the last remaining line. `changed` is set by every edit.

## Tokenizers

Each tokenizer takes a string and a start index and returns the `(begin,
end)` span of the token found there, or `None`:

```python
from pixkit.tokenizers import tokenize_c_style, tokenize_number

tokenize_number("0x1Fu", 0)               # (0, 5)
tokenize_c_style("  0x1Fu + x", 0)        # (2, 7, PaletteIndex.NUMBER)
```

`tokenize_c_style` skips leading blanks, then tries strings, character
literals, identifiers, numbers and punctuation in that order. Blanks
running to the end give an empty span with `PaletteIndex.DEFAULT`; text
that matches no rule gives `None`.

## Colours

`dark_palette()`, `light_palette()` and `retro_blue_palette()` return
tuples of packed 32-bit ABGR values indexed by `PaletteIndex`.
`glyph_color(glyph, palette, colorizer_enabled)` gives the colour a glyph
is drawn with: the comment colours for comment glyphs, and for
preprocessor glyphs the channel-wise average of the preprocessor colour and
the glyph's own.

## Variables and viewport

```python
from pixkit.variables import VariableCache
from pixkit.viewport import Viewport

cache = VariableCache()
cache.add_float("$speed", 2.5, 0.01, 0.0, 10.0)
cache.get_float("$speed")     # 2.5
cache.get_float("3.0")        # 3.0, parsed as a number
cache.set_float("$speed", 42) # clamped to 10.0

view = Viewport()
view.set_viewport(-5, 10, 100, 50)
view.min_x(), view.max_x(), view.min_y(), view.max_y()   # (0.0, 100, 10, 60)
view.screen_rect()            # None until show_viewport(True)
```

`add_float` keeps the first variable of a given name. `get_float` raises
`ValueError` when its argument is neither a known variable nor starts with
a number; `set_float` raises `KeyError` for an unknown name.

## What the package does not do

There is no editor object on top of the buffer: no cursor, selection,
undo/redo or clipboard. There are no language definitions (keyword and
identifier tables, regular-expression token rules) and nothing that runs
the tokenizers over a `TextBuffer` to set glyph colours or mark comments
and preprocessor lines; `Glyph.color_index` and its flags are only what
you set yourself. Nothing is drawn on screen, and no command-line program
is installed.