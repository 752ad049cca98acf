import pytest

from pixkit.buffer import TextBuffer
from pixkit.model import Coordinates, PaletteIndex


def make(text, tab_size=4):
    buf = TextBuffer(tab_size)
    buf.set_text(text)
    return buf


def full_text(buf):
    return buf.get_text(Coordinates(0, 0), Coordinates(len(buf.lines), 0))


@pytest.mark.parametrize("text", ["", "abc", "one\ntwo\nthree", "h\u00e9llo\n\tx", "a\n\nb\n"])
def test_set_text_round_trip(text):
    buf = make(text)
    assert full_text(buf) == text + "\n"
    assert buf.text_lines() == text.split("\n")


def test_carriage_returns_are_dropped():
    buf = make("a\r\nb")
    assert buf.text_lines() == ["a", "b"]
    assert buf.changed


def test_set_text_lines_empty_gives_one_line():
    buf = TextBuffer()
    buf.set_text_lines([])
    assert buf.text_lines() == [""]
    buf.set_text_lines(["x", "yz"])
    assert buf.text_lines() == ["x", "yz"]


def test_tab_column_example():
    # Coordinate (1, 5) addresses 'B' in "\tABC" with a tab size of 4.
    buf = make("\n\tABC")
    index = buf.character_index(Coordinates(1, 5))
    assert chr(buf.lines[1][index].char) == "B"
    assert buf.character_column(1, index) == 5


def test_line_max_column_counts_tab_stops():
    buf = make("\tABC")
    assert buf.line_max_column(0) == buf.character_column(0, len(buf.lines[0]))
    assert buf.line_max_column(0) == 7


def test_multibyte_characters_take_one_column():
    buf = make("h\u00e9llo")
    assert len(buf.lines[0]) == len("h\u00e9llo".encode())
    assert buf.line_character_count(0) == len("h\u00e9llo")
    assert buf.line_max_column(0) == len("h\u00e9llo")


def test_missing_line_queries():
    buf = make("abc")
    assert buf.character_index(Coordinates(5, 0)) == -1
    assert buf.character_column(5, 2) == 0
    assert buf.line_max_column(5) == 0
    assert buf.line_character_count(5) == 0


def test_sanitize_clamps():
    buf = make("abc\nde")
    assert buf.sanitize(Coordinates(9, 9)) == Coordinates(1, 2)
    assert buf.sanitize(Coordinates(0, 50)) == Coordinates(0, 3)
    assert buf.sanitize(Coordinates(0, 1)) == Coordinates(0, 1)


def test_advance_within_and_across_lines():
    buf = make("ab\ncd")
    assert buf.advance(Coordinates(0, 0)) == Coordinates(0, 1)
    assert buf.advance(Coordinates(0, 1)) == Coordinates(1, 0)


def test_get_text_partial():
    buf = make("hello\nworld")
    assert buf.get_text(Coordinates(0, 1), Coordinates(0, 4)) == "ell"
    assert buf.get_text(Coordinates(0, 3), Coordinates(1, 2)) == "lo\nwo"


def test_delete_range_single_line():
    buf = make("hello")
    buf.delete_range(Coordinates(0, 1), Coordinates(0, 3))
    assert buf.text_lines() == ["hlo"]


def test_delete_range_across_lines():
    buf = make("hello\nbig\nworld")
    buf.delete_range(Coordinates(0, 2), Coordinates(2, 3))
    assert buf.text_lines() == ["held"]


def test_delete_range_rejects_reversed():
    buf = make("hello")
    with pytest.raises(ValueError):
        buf.delete_range(Coordinates(0, 3), Coordinates(0, 1))


def test_insert_then_delete_restores_text():
    buf = make("abc\ndef")
    start = Coordinates(0, 1)
    end, added = buf.insert_text_at(start, "X\nYY\nZ")
    assert added == 2
    assert buf.text_lines() == ["aX", "YY", "Zbc", "def"]
    assert end == Coordinates(2, 1)
    buf.delete_range(start, end)
    assert buf.text_lines() == ["abc", "def"]


def test_insert_text_skips_carriage_return():
    buf = make("")
    end, added = buf.insert_text_at(Coordinates(0, 0), "a\r\nb")
    assert buf.text_lines() == ["a", "b"]
    assert added == 1
    assert end == Coordinates(1, 1)


def test_insert_line_shifts_markers():
    buf = make("a\nb\nc")
    buf.error_markers = {0: "first", 2: "third"}
    buf.breakpoints = {1, 2}
    new = buf.insert_line(1)
    assert new == []
    assert len(buf.lines) == 4
    assert buf.error_markers == {0: "first", 3: "third"}
    assert buf.breakpoints == {1 + 1, 2 + 1}


def test_remove_line():
    buf = make("a\nb\nc")
    buf.breakpoints = {1, 2}
    buf.remove_line(1)
    assert buf.text_lines() == ["a", "c"]
    assert buf.breakpoints == {1}


def test_remove_only_line_raises():
    buf = make("a")
    with pytest.raises(ValueError):
        buf.remove_line(0)


def test_remove_lines():
    buf = make("a\nb\nc\nd\ne")
    buf.breakpoints = {1, 4}
    buf.remove_lines(1, 2)
    assert buf.text_lines() == ["a", "c", "d", "e"]
    assert buf.breakpoints == {3}


def test_remove_lines_all_raises():
    buf = make("a\nb")
    with pytest.raises(ValueError):
        buf.remove_lines(0, 2)


def test_word_start_and_next_word():
    buf = make("foo bar")
    assert buf.find_word_start(Coordinates(0, 2)) == Coordinates(0, 0)
    assert buf.find_word_start(Coordinates(0, 6)) == Coordinates(0, 4)
    assert buf.find_next_word(Coordinates(0, 0)) == Coordinates(0, 4)


def test_word_end_includes_trailing_blanks():
    buf = make("foo bar")
    assert buf.find_word_end(Coordinates(0, 1)) == Coordinates(0, 4)
    assert buf.word_at(Coordinates(0, 1)) == "foo "
    assert buf.word_at(Coordinates(0, 5)) == "bar"


def test_word_queries_outside_text():
    buf = make("foo")
    assert buf.find_word_start(Coordinates(3, 0)) == Coordinates.invalid()
    assert buf.find_word_end(Coordinates(0, 3)) == Coordinates.invalid()
    assert buf.word_at(Coordinates(0, 3)) == ""


def test_word_start_stops_at_colour_change():
    buf = make("ab+cd")
    for glyph in buf.lines[0][:2]:
        glyph.color_index = PaletteIndex.IDENTIFIER
    buf.lines[0][2].color_index = PaletteIndex.PUNCTUATION
    for glyph in buf.lines[0][3:]:
        glyph.color_index = PaletteIndex.IDENTIFIER
    assert buf.find_word_start(Coordinates(0, 4)) == Coordinates(0, 3)
    assert buf.word_at(Coordinates(0, 4)) == "cd"


def test_next_word_at_end_of_text():
    buf = make("foo")
    assert buf.find_next_word(Coordinates(0, 1)) == Coordinates(0, 3)


def test_word_boundary():
    buf = make("ab cd")
    assert buf.is_on_word_boundary(Coordinates(0, 0), False)
    assert buf.is_on_word_boundary(Coordinates(0, 2), False)
    assert not buf.is_on_word_boundary(Coordinates(0, 1), False)
    assert buf.is_on_word_boundary(Coordinates(0, 5), False)
    assert not buf.is_on_word_boundary(Coordinates(0, 2), True)