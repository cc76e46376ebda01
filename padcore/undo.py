"""Undo and redo history for a :class:`~padcore.buffer.TextBuffer`."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Protocol

from padcore.buffer import TextBuffer

BACKSPACE = 0xFF08
TAB = 0xFF09
RETURN = 0xFF0D
DELETE = 0xFFFF
SPACE = 0x0020

# Key values below this are printable characters.
_FUNCTION_KEYS = 0xF000


class KeySource(Protocol):
    """Supplies the key value that caused the edit being recorded."""

    def current_keyval(self) -> int: ...

    def clear_keyval(self) -> None: ...


@dataclass
class _HeldKey:
    """Key source that holds one key value until it is cleared."""

    keyval: int = 0

    def current_keyval(self) -> int:
        return self.keyval

    def clear_keyval(self) -> None:
        self.keyval = 0


class _Command(Enum):
    INSERT = "insert"
    BACKSPACE = "backspace"
    DELETE = "delete"


@dataclass
class _Step:
    command: _Command
    start: int
    end: int
    text: str
    seq: bool = False


class _Recorder:
    """Buffer listener that forwards user edits to the manager."""

    def __init__(self, manager: UndoManager) -> None:
        self._manager = manager
        self.active = False

    def begin_user_action(self, buffer: TextBuffer) -> None:
        self.active = True

    def end_user_action(self, buffer: TextBuffer) -> None:
        self.active = False

    def insert_text(self, buffer: TextBuffer, offset: int, text: str) -> None:
        if self.active:
            self._manager._record(_Command.INSERT, offset, offset + len(text))

    def delete_range(self, buffer: TextBuffer, start: int, end: int) -> None:
        if self.active:
            manager = self._manager
            if manager._keys.current_keyval() == BACKSPACE:
                command = _Command.BACKSPACE
            else:
                command = _Command.DELETE
            manager._record(command, start, end)


class UndoManager:
    """Records edits made inside user actions and replays them backwards.

    Consecutive single-character keystrokes are merged into one step, so a
    typed word is undone at once. Steps flagged as a sequence are undone and
    redone together with their neighbour.
    """

    def __init__(self, buffer: TextBuffer, keys: KeySource | None = None) -> None:
        self._buffer = buffer
        self._keys: Any = keys if keys is not None else _HeldKey()
        self._undo: list[_Step] = []
        self._redo: list[_Step] = []
        self._pending: _Step | None = None
        self._modified_step = 0
        self._prev_keyval = 0
        self._seq_reserve = False
        self._recorder = _Recorder(self)
        buffer.add_listener(self._recorder)
        self.clear_all()

    # -- public API ----------------------------------------------------

    def clear_all(self) -> None:
        """Forget the whole history."""
        self._undo.clear()
        self._redo.clear()
        self._pending = None
        self.reset_modified_step()
        self._prev_keyval = 0

    def reset_modified_step(self) -> None:
        """Mark the current point in history as the unmodified state."""
        self._flush()
        self._modified_step = len(self._undo)

    def set_sequence(self, seq: bool) -> None:
        """Tie the latest step to the one that follows it."""
        if self._undo:
            self._undo[-1].seq = bool(seq)

    def reserve_sequence(self) -> None:
        """Tie the next recorded step to the one that follows it."""
        self._seq_reserve = True

    def undo(self) -> None:
        """Undo the latest step and any steps tied to it."""
        while self._undo_step():
            pass

    def redo(self) -> None:
        """Redo the latest undone step and any steps tied to it."""
        while self._redo_step():
            pass

    def can_undo(self) -> bool:
        """True when there is something to undo."""
        return bool(self._undo) or self._pending is not None

    def can_redo(self) -> bool:
        """True when there is something to redo."""
        return bool(self._redo)

    # -- recording -----------------------------------------------------

    def _append(self, command: _Command, start: int, end: int, text: str) -> None:
        self._undo.append(_Step(command, start, end, text, self._seq_reserve))
        self._seq_reserve = False

    def _flush(self) -> None:
        pending = self._pending
        if pending is not None:
            self._append(pending.command, pending.start, pending.end, pending.text)
            self._pending = None

    def _continues(self, command: _Command, start: int, end: int, keyval: int) -> bool:
        pending = self._pending
        if pending is None or end - start != 1 or command is not pending.command:
            return False
        if keyval == BACKSPACE:
            return end == pending.start
        if keyval == DELETE:
            return start == pending.start
        if keyval in (TAB, SPACE):
            return start == pending.end
        return (
            start == pending.end
            and 0 < keyval < _FUNCTION_KEYS
            and self._prev_keyval not in (RETURN, TAB, SPACE)
        )

    def _record(self, command: _Command, start: int, end: int) -> None:
        keyval = self._keys.current_keyval()
        text = self._buffer.get_text(start, end)

        if self._pending is not None:
            if self._continues(command, start, end, keyval):
                pending = self._pending
                if command is _Command.BACKSPACE:
                    pending.text = text + pending.text
                    pending.start -= 1
                else:
                    pending.text += text
                    pending.end += 1
                self._redo.clear()
                self._prev_keyval = keyval
                return
            self._flush()

        if not keyval and self._prev_keyval:
            self.set_sequence(True)

        keystroke = (0 < keyval < _FUNCTION_KEYS) or keyval in (BACKSPACE, DELETE, TAB)
        if end - start == 1 and keystroke:
            self._pending = _Step(command, start, end, text)
        else:
            self._append(command, start, end, text)

        self._redo.clear()
        self._prev_keyval = keyval
        self._keys.clear_keyval()

    # -- replay --------------------------------------------------------

    def _check_modified_step(self) -> None:
        at_saved_point = self._modified_step == len(self._undo)
        if self._buffer.modified == at_saved_point:
            self._buffer.modified = not at_saved_point

    def _undo_step(self) -> bool:
        self._flush()
        if self._undo:
            step = self._undo.pop()
            if step.command is _Command.INSERT:
                self._buffer.delete(step.start, step.end)
                cursor = step.start
            else:
                self._buffer.insert(step.start, step.text)
                if step.command is _Command.BACKSPACE:
                    cursor = step.start + len(step.text)
                else:
                    cursor = step.start
            self._redo.append(step)
            if self._undo and self._undo[-1].seq:
                return True
            self._buffer.place_cursor(cursor)
        self._check_modified_step()
        return False

    def _redo_step(self) -> bool:
        if self._redo:
            step = self._redo.pop()
            if step.command is _Command.INSERT:
                self._buffer.insert(step.start, step.text)
                cursor = step.start + len(step.text)
            else:
                self._buffer.delete(step.start, step.end)
                cursor = step.start
            self._undo.append(step)
            if step.seq:
                self.set_sequence(True)
                return True
            self._buffer.place_cursor(cursor)
        self._check_modified_step()
        return False