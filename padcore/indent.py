"""Automatic indentation, tab width switching and block (un)indenting."""

from __future__ import annotations

from padcore.buffer import TextBuffer
from padcore.undo import UndoManager


def compute_indentation(buffer: TextBuffer, line: int, limit: int | None = None) -> str | None:
    """Return the leading whitespace of ``line``, or None when it has none.

    When ``limit`` is an offset inside that whitespace, only the part
    before it is returned.
    """
    text = buffer.text
    start = buffer.line_start(line)
    end = start
    while end < len(text) and text[end] != "\n" and text[end].isspace():
        end += 1
    if end == start:
        return None
    if limit is not None and limit < end:
        return buffer.get_text(start, limit)
    return buffer.get_text(start, end)


class Indenter:
    """Indentation behaviour of the editor.

    ``enabled`` switches auto-indent on Return. ``tab_width`` is the width
    in use; ``default_tab_width`` is the one toggling returns to.
    """

    def __init__(self, undo: UndoManager | None = None, enabled: bool = False) -> None:
        self.undo = undo
        self.enabled = enabled
        self.default_tab_width = 8
        self.tab_width = 8

    def set_default_tab_width(self, width: int) -> None:
        """Set the default tab width and make it the current one."""
        self.default_tab_width = width
        self.tab_width = width

    def toggle_tab_width(self) -> int:
        """Switch between the default width and an alternative; return the new width."""
        if self.tab_width == self.default_tab_width:
            self.tab_width = 4 if self.default_tab_width == 8 else 8
        else:
            self.tab_width = self.default_tab_width
        return self.tab_width

    def indent_newline(self, buffer: TextBuffer) -> None:
        """Replace the selection by a newline carrying the current line's indentation."""
        with buffer.user_action():
            buffer.delete_selection()
            cursor = buffer.cursor
            ind = compute_indentation(buffer, buffer.line_of(cursor), cursor)
            buffer.insert(cursor, "\n" + (ind or ""))

    def _set_sequence(self, seq: bool) -> None:
        if self.undo is not None:
            self.undo.set_sequence(seq)

    def _selected_lines(self, buffer: TextBuffer) -> tuple[int, int, bool]:
        start, end = buffer.selection_bounds()
        cursor_at_start = buffer.cursor == start
        return buffer.line_of(start), buffer.line_of(end), cursor_at_start

    @staticmethod
    def _reselect(buffer: TextBuffer, start_line: int, end_line: int, cursor_at_start: bool) -> None:
        start = buffer.line_start(start_line)
        end = buffer.line_start(end_line)
        if cursor_at_start:
            buffer.select_range(start, end)
        else:
            buffer.select_range(end, start)

    def indent_lines(self, buffer: TextBuffer) -> None:
        """Put a tab before every selected line but the one the selection ends on."""
        start_line, end_line, cursor_at_start = self._selected_lines(buffer)
        for line in range(start_line, end_line):
            offset = buffer.line_start(line)
            buffer.place_cursor(offset)
            with buffer.user_action():
                buffer.insert(offset, "\t")
            self._set_sequence(True)
        self._set_sequence(False)
        self._reselect(buffer, start_line, end_line, cursor_at_start)

    def _unindent_width(self, ind: str) -> int:
        if not ind.startswith(" "):
            return 1
        width = 1
        while width < self.tab_width and width < len(ind) and ind[width] == " ":
            width += 1
        return width

    def unindent_lines(self, buffer: TextBuffer) -> None:
        """Remove one level of indentation from the selected lines.

        The cursor's line is handled even when nothing is selected.
        """
        start_line, end_line, cursor_at_start = self._selected_lines(buffer)
        line = start_line
        while True:
            ind = compute_indentation(buffer, line)
            if ind:
                start = buffer.line_start(line)
                end = start + self._unindent_width(ind)
                buffer.select_range(end, start)
                with buffer.user_action():
                    buffer.delete(start, end)
                self._set_sequence(True)
            line += 1
            if line >= end_line:
                break
        self._set_sequence(False)
        self._reselect(buffer, start_line, end_line, cursor_at_start)