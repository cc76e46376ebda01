"""Find, replace and jump-to-line operations on a text buffer."""

from __future__ import annotations

import re
from typing import Callable

from padcore.buffer import TextBuffer
from padcore.undo import UndoManager

NOT_FOUND_MESSAGE = "Search string not found"
REPLACED_MESSAGE = "%d strings replaced"


def _compile(pattern: str, match_case: bool) -> re.Pattern[str]:
    if not pattern:
        raise ValueError("search pattern must not be empty")
    return re.compile(re.escape(pattern), 0 if match_case else re.IGNORECASE)


def _check_start(text: str, start: int) -> None:
    if not 0 <= start <= len(text):
        raise IndexError(f"offset {start} outside text of length {len(text)}")


def find_forward(
    text: str, pattern: str, start: int = 0, match_case: bool = True
) -> tuple[int, int] | None:
    """Return the first match of ``pattern`` at or after ``start``, or None."""
    _check_start(text, start)
    found = _compile(pattern, match_case).search(text, start)
    return (found.start(), found.end()) if found else None


def find_backward(
    text: str, pattern: str, start: int | None = None, match_case: bool = True
) -> tuple[int, int] | None:
    """Return the last match of ``pattern`` ending at or before ``start``, or None."""
    if start is None:
        start = len(text)
    _check_start(text, start)
    regex = _compile(pattern, match_case)
    for pos in range(start - len(pattern), -1, -1):
        found = regex.match(text, pos, start)
        if found:
            return found.start(), found.end()
    return None


class Searcher:
    """Search state shared by the find, replace and jump commands.

    ``pattern`` and ``replacement`` are the strings last entered;
    ``match_case`` and ``replace_all`` are the dialog's check boxes.
    ``matches`` holds the highlighted occurrences of the pattern and
    ``replaced`` the ranges filled in by the latest replacement.
    Messages meant for the user are appended to ``messages`` and passed
    to ``notify`` when one is given.
    """

    def __init__(
        self,
        buffer: TextBuffer,
        undo: UndoManager | None = None,
        notify: Callable[[str], None] | None = None,
    ) -> None:
        self.buffer = buffer
        self.undo = undo
        self.notify = notify
        self.pattern: str | None = None
        self.replacement: str = ""
        self.match_case = False
        self.replace_all = False
        self.matches: list[tuple[int, int]] = []
        self.replaced: list[tuple[int, int]] = []
        self.messages: list[str] = []

    # -- helpers -------------------------------------------------------

    def _message(self, text: str) -> None:
        self.messages.append(text)
        if self.notify is not None:
            self.notify(text)

    def _set_sequence(self, seq: bool) -> None:
        if self.undo is not None:
            self.undo.set_sequence(seq)

    def _highlight(self) -> bool:
        self.matches = []
        self.replaced = []
        if not self.pattern:
            return False
        text = self.buffer.text
        pos = 0
        while True:
            found = find_forward(text, self.pattern, pos, self.match_case)
            if found is None:
                break
            self.matches.append(found)
            pos = found[1]
        return bool(self.matches)

    # -- commands ------------------------------------------------------

    def find(self, direction: int = 0) -> bool:
        """Select the next match; negative ``direction`` searches backwards.

        Direction 0 is a fresh search from the dialog and reports a miss;
        the search wraps around the buffer ends.
        """
        if not self.pattern:
            return False
        if direction == 0 or (direction != 2 and not self.matches):
            self._highlight()

        buffer = self.buffer
        text = buffer.text
        cursor = buffer.cursor
        if direction < 0:
            found = find_backward(text, self.pattern, cursor, self.match_case)
            if found is not None and found[1] == cursor:
                found = find_backward(text, self.pattern, found[0], self.match_case)
            if found is None:
                found = find_backward(text, self.pattern, len(text), self.match_case)
        else:
            found = find_forward(text, self.pattern, cursor, self.match_case)
            if found is None:
                found = find_forward(text, self.pattern, 0, self.match_case)

        if found is not None:
            start, end = found
            buffer.select_range(end, start)
            return True
        if direction == 0:
            self._message(NOT_FOUND_MESSAGE)
        return False

    def replace(self, confirm: Callable[[TextBuffer], bool | None] | None = None) -> int:
        """Replace matches of the pattern by the replacement; return how many.

        Unless ``replace_all`` is set, each selected match is offered to
        ``confirm``: True replaces it, False skips it, None stops. A stop
        before anything was replaced gives -1.
        """
        if not self.pattern:
            return 0
        buffer = self.buffer
        count = 0
        pos = 0
        home = buffer.cursor
        if self.replace_all:
            self.matches = []
            self.replaced = []
        else:
            self._highlight()

        while True:
            if self.replace_all:
                found = find_forward(buffer.text, self.pattern, pos, self.match_case)
                if found is not None:
                    buffer.select_range(found[1], found[0])
                    pos = buffer.cursor
                res = found is not None
            else:
                res = self.find(2)
            if not res:
                break

            if not self.replace_all:
                answer = confirm(buffer) if confirm is not None else True
                if answer is None:
                    if count == 0:
                        count = -1
                    break
                if not answer:
                    continue

            sel_start, sel_end = buffer.selection_bounds()
            buffer.delete_selection()
            home = self._after_delete(home, sel_start, sel_end)
            if self.replacement:
                offset = buffer.cursor
                self._set_sequence(True)
                with buffer.user_action():
                    buffer.insert(offset, self.replacement)
                if home >= offset:
                    home += len(self.replacement)
                pos = buffer.cursor
                self.replaced.append((offset, pos))
            else:
                pos = buffer.cursor
            count += 1
            self._set_sequence(self.replace_all)

        if self.replace_all:
            buffer.place_cursor(home)
            self._message(REPLACED_MESSAGE % count)
            self._set_sequence(False)
        return count

    @staticmethod
    def _after_delete(mark: int, start: int, end: int) -> int:
        if mark <= start:
            return mark
        if mark <= end:
            return start
        return mark - (end - start)

    def jump_to(self, line: int) -> int:
        """Move the cursor to the start of 1-based ``line``; return its offset.

        The line number is held within the lines of the buffer.
        """
        buffer = self.buffer
        last = buffer.line_count()
        line = max(1, min(int(line), last))
        offset = buffer.line_start(line - 1)
        buffer.place_cursor(offset)
        return offset