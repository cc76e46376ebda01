"""An in-memory text buffer with a cursor, a selection and change listeners."""

from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Iterator


class TextBuffer:
    """Editable text carrying an insert mark and a selection-bound mark.

    Listeners are plain objects. Whichever of these methods a listener
    defines is called:

    * ``insert_text(buffer, offset, text)``: after the text is in place
    * ``delete_range(buffer, start, end)``: before the text is removed
    * ``begin_user_action(buffer)`` and ``end_user_action(buffer)``
    * ``modified_changed(buffer)``
    * ``mark_set(buffer)``: the cursor or the selection was moved
    """

    def __init__(self, text: str = "") -> None:
        self._text = text
        self._insert = 0
        self._bound = 0
        self._modified = False
        self._listeners: list[Any] = []
        self._action_depth = 0

    # -- state ---------------------------------------------------------

    @property
    def text(self) -> str:
        """The whole contents of the buffer."""
        return self._text

    @property
    def cursor(self) -> int:
        """Offset of the insert mark."""
        return self._insert

    @property
    def bound(self) -> int:
        """Offset of the selection-bound mark."""
        return self._bound

    @property
    def modified(self) -> bool:
        """Whether the buffer differs from its last saved state."""
        return self._modified

    @modified.setter
    def modified(self, value: bool) -> None:
        value = bool(value)
        if value != self._modified:
            self._modified = value
            self._emit("modified_changed")

    @property
    def in_user_action(self) -> bool:
        """True while inside :meth:`user_action`."""
        return self._action_depth > 0

    def __len__(self) -> int:
        return len(self._text)

    # -- listeners -----------------------------------------------------

    def add_listener(self, listener: Any) -> None:
        """Register an object to be told about changes to the buffer."""
        self._listeners.append(listener)

    def _emit(self, event: str, *args: Any) -> None:
        for listener in list(self._listeners):
            handler = getattr(listener, event, None)
            if handler is not None:
                handler(self, *args)

    # -- editing -------------------------------------------------------

    def _check_offset(self, offset: int) -> int:
        if not 0 <= offset <= len(self._text):
            raise IndexError(f"offset {offset} outside buffer of length {len(self._text)}")
        return offset

    def insert(self, offset: int, text: str) -> None:
        """Insert ``text`` at ``offset``; marks at or after it move along."""
        self._check_offset(offset)
        if not text:
            return
        self._text = self._text[:offset] + text + self._text[offset:]
        size = len(text)
        if self._insert >= offset:
            self._insert += size
        if self._bound >= offset:
            self._bound += size
        self.modified = True
        self._emit("insert_text", offset, text)

    def delete(self, start: int, end: int) -> None:
        """Remove the text between two offsets, given in either order."""
        self._check_offset(start)
        self._check_offset(end)
        if start > end:
            start, end = end, start
        if start == end:
            return
        self._emit("delete_range", start, end)
        self._text = self._text[:start] + self._text[end:]
        self._insert = self._shift_after_delete(self._insert, start, end)
        self._bound = self._shift_after_delete(self._bound, start, end)
        self.modified = True

    @staticmethod
    def _shift_after_delete(mark: int, start: int, end: int) -> int:
        if mark <= start:
            return mark
        if mark <= end:
            return start
        return mark - (end - start)

    def get_text(self, start: int = 0, end: int | None = None) -> str:
        """Return the text between two offsets, given in either order."""
        if end is None:
            end = len(self._text)
        self._check_offset(start)
        self._check_offset(end)
        if start > end:
            start, end = end, start
        return self._text[start:end]

    # -- cursor and selection -----------------------------------------

    def place_cursor(self, offset: int) -> None:
        """Move both marks to ``offset``, clearing any selection."""
        self.select_range(offset, offset)

    def select_range(self, insert: int, bound: int) -> None:
        """Place the insert mark and the selection-bound mark."""
        self._insert = self._check_offset(insert)
        self._bound = self._check_offset(bound)
        self._emit("mark_set")

    def selection_bounds(self) -> tuple[int, int]:
        """Return the selection as an ordered ``(start, end)`` pair."""
        return min(self._insert, self._bound), max(self._insert, self._bound)

    def has_selection(self) -> bool:
        """True when the two marks are apart."""
        return self._insert != self._bound

    def delete_selection(self) -> bool:
        """Delete the selected text as a user action; report whether any was."""
        if not self.has_selection():
            return False
        start, end = self.selection_bounds()
        with self.user_action():
            self.delete(start, end)
        return True

    # -- lines ---------------------------------------------------------

    def line_count(self) -> int:
        """Number of lines; an empty buffer has one."""
        return self._text.count("\n") + 1

    def line_of(self, offset: int) -> int:
        """Zero-based line number holding ``offset``."""
        self._check_offset(offset)
        return self._text.count("\n", 0, offset)

    def line_start(self, line: int) -> int:
        """Offset where ``line`` begins; the buffer end for lines out of range."""
        if line < 0 or line >= self.line_count():
            return len(self._text)
        offset = 0
        for _ in range(line):
            offset = self._text.index("\n", offset) + 1
        return offset

    # -- grouping ------------------------------------------------------

    @contextmanager
    def user_action(self) -> Iterator[TextBuffer]:
        """Group edits as one user action; nested groups are folded in."""
        self._action_depth += 1
        if self._action_depth == 1:
            self._emit("begin_user_action")
        try:
            yield self
        finally:
            self._action_depth -= 1
            if self._action_depth == 0:
                self._emit("end_user_action")