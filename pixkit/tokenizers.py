"""Hand-written C-style tokenizers used to colour source lines.

Each tokenizer looks at ``text`` from index ``start`` and returns the
``(begin, end)`` span of the token found there, or ``None`` if the text at
``start`` is not that kind of token.
"""

from __future__ import annotations

from .model import PaletteIndex

_PUNCTUATION = frozenset("[]{}!%^&*()-+=~|<>?:/;,.")
_DIGITS = frozenset("0123456789")
_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")
_IDENT_START = frozenset("abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ_")
_IDENT_BODY = _IDENT_START | _DIGITS
_BLANKS = frozenset(" \t")

Span = tuple[int, int]


def _skip(text: str, pos: int, allowed: frozenset[str]) -> int:
    """Advance ``pos`` past every character in ``allowed``."""
    end = len(text)
    while pos < end and text[pos] in allowed:
        pos += 1
    return pos


def tokenize_string(text: str, start: int) -> Span | None:
    """A double-quoted string; ``\\"`` does not end it."""
    end = len(text)
    if start >= end or text[start] != '"':
        return None
    pos = start + 1
    while pos < end:
        if text[pos] == '"':
            return (start, pos + 1)
        if text[pos] == "\\" and pos + 1 < end and text[pos + 1] == '"':
            pos += 1
        pos += 1
    return None


def tokenize_char_literal(text: str, start: int) -> Span | None:
    """A single-quoted character literal, optionally with one escape."""
    end = len(text)
    if start >= end or text[start] != "'":
        return None
    pos = start + 1
    if pos < end and text[pos] == "\\":
        pos += 1
    if pos < end:
        pos += 1
    if pos < end and text[pos] == "'":
        return (start, pos + 1)
    return None


def tokenize_identifier(text: str, start: int) -> Span | None:
    """An ASCII identifier: a letter or underscore, then letters, digits, underscores."""
    if start >= len(text) or text[start] not in _IDENT_START:
        return None
    return (start, _skip(text, start + 1, _IDENT_BODY))


def tokenize_number(text: str, start: int) -> Span | None:
    """A signed integer, float, hex or binary literal with C suffixes."""
    end = len(text)
    if start >= end:
        return None
    first = text[start]
    starts_with_digit = first in _DIGITS
    if first not in "+-" and not starts_with_digit:
        return None

    pos = start + 1
    has_number = starts_with_digit
    digits_end = _skip(text, pos, _DIGITS)
    if digits_end > pos:
        has_number = True
    pos = digits_end
    if not has_number:
        return None

    is_float = is_hex = is_binary = False
    if pos < end:
        c = text[pos]
        if c == ".":
            is_float = True
            pos = _skip(text, pos + 1, _DIGITS)
        elif c in "xX":
            is_hex = True
            pos = _skip(text, pos + 1, _HEX_DIGITS)
        elif c in "bB":
            is_binary = True
            pos = _skip(text, pos + 1, frozenset("01"))

    if not is_hex and not is_binary:
        if pos < end and text[pos] in "eE":
            is_float = True
            pos += 1
            if pos < end and text[pos] in "+-":
                pos += 1
            exponent_end = _skip(text, pos, _DIGITS)
            if exponent_end == pos:
                return None
            pos = exponent_end
        if pos < end and text[pos] == "f":
            pos += 1

    if not is_float:
        pos = _skip(text, pos, frozenset("uUlL"))

    return (start, pos)


def tokenize_punctuation(text: str, start: int) -> Span | None:
    """A single punctuation character."""
    if start < len(text) and text[start] in _PUNCTUATION:
        return (start, start + 1)
    return None


_C_STYLE_RULES = (
    (tokenize_string, PaletteIndex.STRING),
    (tokenize_char_literal, PaletteIndex.CHAR_LITERAL),
    (tokenize_identifier, PaletteIndex.IDENTIFIER),
    (tokenize_number, PaletteIndex.NUMBER),
    (tokenize_punctuation, PaletteIndex.PUNCTUATION),
)


def tokenize_c_style(text: str, start: int) -> tuple[int, int, PaletteIndex] | None:
    """The next C-style token after leading blanks, with its colour class.

    Blanks running to the end of the text yield an empty span at the end
    with the default colour; text matching no rule yields ``None``.
    """
    pos = _skip(text, start, _BLANKS)
    if pos >= len(text):
        return (len(text), len(text), PaletteIndex.DEFAULT)
    for rule, color in _C_STYLE_RULES:
        span = rule(text, pos)
        if span is not None:
            return (span[0], span[1], color)
    return None