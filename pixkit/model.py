"""Core value types shared by the text editor: coordinates, glyphs, palettes."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntEnum


class PaletteIndex(IntEnum):
    """Index of a colour in a palette; also the colour class of a glyph."""

    DEFAULT = 0
    KEYWORD = 1
    NUMBER = 2
    STRING = 3
    CHAR_LITERAL = 4
    PUNCTUATION = 5
    PREPROCESSOR = 6
    IDENTIFIER = 7
    KNOWN_IDENTIFIER = 8
    PREPROC_IDENTIFIER = 9
    COMMENT = 10
    MULTI_LINE_COMMENT = 11
    BACKGROUND = 12
    CURSOR = 13
    SELECTION = 14
    ERROR_MARKER = 15
    BREAKPOINT = 16
    LINE_NUMBER = 17
    CURRENT_LINE_FILL = 18
    CURRENT_LINE_FILL_INACTIVE = 19
    CURRENT_LINE_EDGE = 20
    MAX = 21


class SelectionMode(Enum):
    """How a selection is extended from its raw endpoints."""

    NORMAL = "normal"
    WORD = "word"
    LINE = "line"


@dataclass(frozen=True, order=True)
class Coordinates:
    """A position on the rendered character grid.

    Tabs occupy as many columns as are needed to reach the next tab stop,
    so a column is a screen cell, not an index into the line's bytes.
    """

    line: int = 0
    column: int = 0

    @classmethod
    def invalid(cls) -> "Coordinates":
        """The sentinel returned where no position exists."""
        return cls(-1, -1)


@dataclass
class Glyph:
    """One byte of a line together with its colouring state."""

    char: int
    color_index: PaletteIndex = PaletteIndex.DEFAULT
    comment: bool = False
    multi_line_comment: bool = False
    preprocessor: bool = False


@dataclass
class Identifier:
    """A named symbol known to a language, with its tooltip declaration."""

    location: Coordinates = field(default_factory=Coordinates)
    declaration: str = ""


Palette = tuple[int, ...]


def utf8_char_length(c: int) -> int:
    """Length of the UTF-8 sequence introduced by lead byte ``c``."""
    if (c & 0xFE) == 0xFC:
        return 6
    if (c & 0xFC) == 0xF8:
        return 5
    if (c & 0xF8) == 0xF0:
        return 4
    if (c & 0xF0) == 0xE0:
        return 3
    if (c & 0xE0) == 0xC0:
        return 2
    return 1


def char_to_utf8(c: int) -> bytes:
    """Encode a UI character code to UTF-8; empty for a lone low surrogate."""
    if c < 0x80:
        return bytes([c])
    if c < 0x800:
        return bytes([(0xC0 + (c >> 6)) & 0xFF, 0x80 + (c & 0x3F)])
    if 0xDC00 <= c < 0xE000:
        return b""
    if 0xD800 <= c < 0xDC00:
        return bytes(
            [
                (0xF0 + (c >> 18)) & 0xFF,
                0x80 + ((c >> 12) & 0x3F),
                0x80 + ((c >> 6) & 0x3F),
                0x80 + (c & 0x3F),
            ]
        )
    return bytes(
        [
            (0xE0 + (c >> 12)) & 0xFF,
            0x80 + ((c >> 6) & 0x3F),
            0x80 + (c & 0x3F),
        ]
    )


_DARK: Palette = (
    0xFF7F7F7F,  # default
    0xFFD69C56,  # keyword
    0xFF00FF00,  # number
    0xFF7070E0,  # string
    0xFF70A0E0,  # char literal
    0xFFFFFFFF,  # punctuation
    0xFF408080,  # preprocessor
    0xFFAAAAAA,  # identifier
    0xFF9BC64D,  # known identifier
    0xFFC040A0,  # preproc identifier
    0xFF206020,  # comment (single line)
    0xFF406020,  # comment (multi line)
    0xFF101010,  # background
    0xFFE0E0E0,  # cursor
    0x80A06020,  # selection
    0x800020FF,  # error marker
    0x40F08000,  # breakpoint
    0xFF707000,  # line number
    0x40000000,  # current line fill
    0x40808080,  # current line fill (inactive)
    0x40A0A0A0,  # current line edge
)

_LIGHT: Palette = (
    0xFF7F7F7F,
    0xFFFF0C06,
    0xFF008000,
    0xFF2020A0,
    0xFF304070,
    0xFF000000,
    0xFF406060,
    0xFF404040,
    0xFF606010,
    0xFFC040A0,
    0xFF205020,
    0xFF405020,
    0xFFFFFFFF,
    0xFF000000,
    0x80600000,
    0xA00010FF,
    0x80F08000,
    0xFF505000,
    0x40000000,
    0x40808080,
    0x40000000,
)

_RETRO_BLUE: Palette = (
    0xFF00FFFF,
    0xFFFFFF00,
    0xFF00FF00,
    0xFF808000,
    0xFF808000,
    0xFFFFFFFF,
    0xFF008000,
    0xFF00FFFF,
    0xFFFFFFFF,
    0xFFFF00FF,
    0xFF808080,
    0xFF404040,
    0xFF800000,
    0xFF0080FF,
    0x80FFFF00,
    0xA00000FF,
    0x80FF8000,
    0xFF808000,
    0x40000000,
    0x40808080,
    0x40000000,
)


def dark_palette() -> Palette:
    """The dark colour scheme, as packed ABGR values."""
    return _DARK


def light_palette() -> Palette:
    """The light colour scheme, as packed ABGR values."""
    return _LIGHT


def retro_blue_palette() -> Palette:
    """The retro blue colour scheme, as packed ABGR values."""
    return _RETRO_BLUE


def glyph_color(glyph: Glyph, palette: Palette, colorizer_enabled: bool = True) -> int:
    """The packed colour a glyph is drawn with under ``palette``."""
    if not colorizer_enabled:
        return palette[PaletteIndex.DEFAULT]
    if glyph.comment:
        return palette[PaletteIndex.COMMENT]
    if glyph.multi_line_comment:
        return palette[PaletteIndex.MULTI_LINE_COMMENT]
    color = palette[glyph.color_index]
    if glyph.preprocessor:
        pp = palette[PaletteIndex.PREPROCESSOR]
        channels = (
            (((pp >> shift) & 0xFF) + ((color >> shift) & 0xFF)) // 2
            for shift in (0, 8, 16, 24)
        )
        return sum(value << shift for value, shift in zip(channels, (0, 8, 16, 24)))
    return color