"""The line store behind the text editor: bytes as glyphs, addressed by screen columns."""

from __future__ import annotations

from collections.abc import Iterable

from .model import Coordinates, Glyph, PaletteIndex, utf8_char_length

Line = list[Glyph]

_SPACES = b" \t\n\v\f\r"


def _isspace(c: int) -> bool:
    return c in _SPACES


def _isalnum(c: int) -> bool:
    return bytes((c,)).isalnum()


def _to_bytes(text: str | bytes) -> bytes:
    return text if isinstance(text, bytes) else text.encode("utf-8")


def _decode(data: bytes | bytearray) -> str:
    return bytes(data).decode("utf-8", errors="replace")


class TextBuffer:
    """Lines of UTF-8 glyphs with error markers and breakpoints that follow edits.

    Columns count screen cells: a tab advances to the next multiple of
    ``tab_size``, and every other character, whatever its byte length,
    takes one cell.
    """

    def __init__(self, tab_size: int = 4) -> None:
        self.tab_size = tab_size
        self.lines: list[Line] = [[]]
        self.error_markers: dict[int, str] = {}
        self.breakpoints: set[int] = set()
        self.changed = False

    # -- whole-text access -------------------------------------------------

    def set_text(self, text: str | bytes) -> None:
        """Replace the contents; carriage returns are dropped."""
        self.lines = [[]]
        for byte in _to_bytes(text):
            if byte == 0x0D:
                continue
            if byte == 0x0A:
                self.lines.append([])
            else:
                self.lines[-1].append(Glyph(byte, PaletteIndex.DEFAULT))
        self.changed = True

    def set_text_lines(self, lines: Iterable[str | bytes]) -> None:
        """Replace the contents with the given lines, taken verbatim."""
        new_lines = [
            [Glyph(byte, PaletteIndex.DEFAULT) for byte in _to_bytes(line)] for line in lines
        ]
        self.lines = new_lines or [[]]
        self.changed = True

    def text_lines(self) -> list[str]:
        """Every line as a string."""
        return [_decode(bytes(g.char for g in line)) for line in self.lines]

    def get_text(self, start: Coordinates, end: Coordinates) -> str:
        """The text between two positions, lines joined by newlines."""
        result = bytearray()
        lstart, lend = start.line, end.line
        istart = self.character_index(start)
        iend = self.character_index(end)
        while istart < iend or lstart < lend:
            if lstart >= len(self.lines):
                break
            line = self.lines[lstart]
            if istart < len(line):
                result.append(line[istart].char)
                istart += 1
            else:
                istart = 0
                lstart += 1
                result.append(0x0A)
        return _decode(result)

    # -- column arithmetic -------------------------------------------------

    def _has_line(self, line: int) -> bool:
        return 0 <= line < len(self.lines)

    def _next_tab_stop(self, column: int) -> int:
        return (column // self.tab_size) * self.tab_size + self.tab_size

    def character_index(self, coords: Coordinates) -> int:
        """Byte index of the glyph at ``coords``; -1 if the line does not exist."""
        if not self._has_line(coords.line):
            return -1
        line = self.lines[coords.line]
        column = 0
        index = 0
        while index < len(line) and column < coords.column:
            char = line[index].char
            column = self._next_tab_stop(column) if char == 0x09 else column + 1
            index += utf8_char_length(char)
        return index

    def character_column(self, line: int, index: int) -> int:
        """Screen column of byte ``index`` in ``line``."""
        if not self._has_line(line):
            return 0
        glyphs = self.lines[line]
        column = 0
        i = 0
        while i < index and i < len(glyphs):
            char = glyphs[i].char
            i += utf8_char_length(char)
            column = self._next_tab_stop(column) if char == 0x09 else column + 1
        return column

    def line_character_count(self, line: int) -> int:
        """Number of characters (not bytes) in ``line``."""
        if not self._has_line(line):
            return 0
        glyphs = self.lines[line]
        count = 0
        i = 0
        while i < len(glyphs):
            i += utf8_char_length(glyphs[i].char)
            count += 1
        return count

    def line_max_column(self, line: int) -> int:
        """Screen column just past the end of ``line``."""
        if not self._has_line(line):
            return 0
        glyphs = self.lines[line]
        column = 0
        i = 0
        while i < len(glyphs):
            char = glyphs[i].char
            column = self._next_tab_stop(column) if char == 0x09 else column + 1
            i += utf8_char_length(char)
        return column

    def sanitize(self, coords: Coordinates) -> Coordinates:
        """Clamp a position to the existing text."""
        if coords.line >= len(self.lines):
            if not self.lines:
                return Coordinates(0, 0)
            last = len(self.lines) - 1
            return Coordinates(last, self.line_max_column(last))
        column = min(coords.column, self.line_max_column(coords.line)) if self.lines else 0
        return Coordinates(coords.line, column)

    def advance(self, coords: Coordinates) -> Coordinates:
        """The position one character further on, wrapping to the next line."""
        if not self._has_line(coords.line):
            return coords
        line_no = coords.line
        line = self.lines[line_no]
        cindex = self.character_index(coords)
        if cindex + 1 < len(line):
            delta = utf8_char_length(line[cindex].char)
            cindex = min(cindex + delta, len(line) - 1)
        else:
            line_no += 1
            cindex = 0
        return Coordinates(line_no, self.character_column(line_no, cindex))

    # -- editing -----------------------------------------------------------

    def delete_range(self, start: Coordinates, end: Coordinates) -> None:
        """Remove the text from ``start`` up to ``end``."""
        if end < start:
            raise ValueError(f"range end {end} precedes start {start}")
        if end == start:
            return
        istart = self.character_index(start)
        iend = self.character_index(end)
        if start.line == end.line:
            line = self.lines[start.line]
            if end.column >= self.line_max_column(start.line):
                del line[istart:]
            else:
                del line[istart:iend]
        else:
            first = self.lines[start.line]
            last = self.lines[end.line]
            del first[istart:]
            del last[:iend]
            first.extend(last)
            self.remove_lines(start.line + 1, end.line + 1)
        self.changed = True

    def insert_text_at(self, where: Coordinates, text: str | bytes) -> tuple[Coordinates, int]:
        """Insert ``text`` at ``where``.

        Returns the position just after the inserted text and the number of
        line breaks inserted.
        """
        data = _to_bytes(text)
        line_no, column = where.line, where.column
        cindex = self.character_index(where)
        total_lines = 0
        pos = 0
        while pos < len(data):
            byte = data[pos]
            if byte == 0x0D:
                pos += 1
            elif byte == 0x0A:
                line = self.lines[line_no]
                new_line = self.insert_line(line_no + 1)
                if cindex < len(line):
                    new_line.extend(line[cindex:])
                    del line[cindex:]
                line_no += 1
                column = 0
                cindex = 0
                total_lines += 1
                pos += 1
            else:
                line = self.lines[line_no]
                length = utf8_char_length(byte)
                for value in data[pos:pos + length]:
                    line.insert(cindex, Glyph(value, PaletteIndex.DEFAULT))
                    cindex += 1
                pos += length
                column += 1
            self.changed = True
        return Coordinates(line_no, column), total_lines

    def insert_line(self, index: int) -> Line:
        """Insert an empty line before ``index`` and return it."""
        line: Line = []
        self.lines.insert(index, line)
        self.error_markers = {
            (k + 1 if k >= index else k): v for k, v in self.error_markers.items()
        }
        self.breakpoints = {b + 1 if b >= index else b for b in self.breakpoints}
        return line

    def remove_line(self, index: int) -> None:
        """Remove one line; the buffer must keep at least one."""
        if len(self.lines) <= 1:
            raise ValueError("cannot remove the only line")
        markers: dict[int, str] = {}
        for key, value in self.error_markers.items():
            shifted = key - 1 if key > index else key
            if shifted - 1 == index:
                continue
            markers[shifted] = value
        self.error_markers = markers
        self.breakpoints = {
            b - 1 if b >= index else b for b in self.breakpoints if b != index
        }
        del self.lines[index]
        self.changed = True

    def remove_lines(self, start: int, end: int) -> None:
        """Remove lines ``start`` up to, not including, ``end``."""
        if end < start:
            raise ValueError(f"range end {end} precedes start {start}")
        if len(self.lines) <= end - start:
            raise ValueError("cannot remove every line")
        markers: dict[int, str] = {}
        for key, value in self.error_markers.items():
            shifted = key - 1 if key >= start else key
            if start <= shifted <= end:
                continue
            markers[shifted] = value
        self.error_markers = markers
        self.breakpoints = {
            b - 1 if b >= start else b for b in self.breakpoints if not start <= b <= end
        }
        del self.lines[start:end]
        self.changed = True

    # -- words -------------------------------------------------------------

    def find_word_start(self, coords: Coordinates) -> Coordinates:
        """Start of the word at ``coords``, or the invalid position."""
        if not self._has_line(coords.line):
            return Coordinates.invalid()
        line = self.lines[coords.line]
        cindex = self.character_index(coords)
        if cindex >= len(line):
            return Coordinates.invalid()
        while cindex > 0 and _isspace(line[cindex].char):
            cindex -= 1
        color = line[cindex].color_index
        while cindex > 0:
            c = line[cindex].char
            if (c & 0xC0) != 0x80:
                if c <= 32 and _isspace(c):
                    cindex += 1
                    break
                if color != line[cindex - 1].color_index:
                    break
            cindex -= 1
        return Coordinates(coords.line, self.character_column(coords.line, cindex))

    def find_word_end(self, coords: Coordinates) -> Coordinates:
        """End of the word at ``coords``, past trailing blanks, or the invalid position."""
        if not self._has_line(coords.line):
            return Coordinates.invalid()
        line = self.lines[coords.line]
        cindex = self.character_index(coords)
        if cindex >= len(line):
            return Coordinates.invalid()
        prev_space = _isspace(line[cindex].char)
        color = line[cindex].color_index
        while cindex < len(line):
            c = line[cindex].char
            if color != line[cindex].color_index:
                break
            if prev_space != _isspace(c):
                if _isspace(c):
                    while cindex < len(line) and _isspace(line[cindex].char):
                        cindex += 1
                break
            cindex += utf8_char_length(c)
        return Coordinates(coords.line, self.character_column(coords.line, cindex))

    def find_next_word(self, coords: Coordinates) -> Coordinates:
        """Start of the next alphanumeric word after ``coords``."""
        if not self._has_line(coords.line):
            return coords
        line_no = coords.line
        cindex = self.character_index(coords)
        is_word = skip = False
        if cindex < len(self.lines[line_no]):
            is_word = _isalnum(self.lines[line_no][cindex].char)
            skip = is_word
        while not is_word or skip:
            if line_no >= len(self.lines):
                last = max(0, len(self.lines) - 1)
                return Coordinates(last, self.line_max_column(last))
            line = self.lines[line_no]
            if cindex < len(line):
                is_word = _isalnum(line[cindex].char)
                if is_word and not skip:
                    return Coordinates(line_no, self.character_column(line_no, cindex))
                if not is_word:
                    skip = False
                cindex += 1
            else:
                cindex = 0
                line_no += 1
                skip = False
                is_word = False
        return Coordinates(line_no, coords.column)

    def is_on_word_boundary(self, coords: Coordinates, colorizer_enabled: bool = True) -> bool:
        """Whether a word starts or ends at ``coords``."""
        if not self._has_line(coords.line) or coords.column == 0:
            return True
        line = self.lines[coords.line]
        cindex = self.character_index(coords)
        if cindex >= len(line):
            return True
        if colorizer_enabled:
            return line[cindex].color_index != line[cindex - 1].color_index
        return _isspace(line[cindex].char) != _isspace(line[cindex - 1].char)

    def word_at(self, coords: Coordinates) -> str:
        """The word under ``coords``; empty if there is none."""
        start = self.find_word_start(coords)
        end = self.find_word_end(coords)
        istart = self.character_index(start)
        iend = self.character_index(end)
        if istart >= iend:
            return ""
        line = self.lines[coords.line]
        return _decode(bytes(g.char for g in line[istart:iend]))