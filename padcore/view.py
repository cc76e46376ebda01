"""Keyboard handling of the editing view and its links to menu and history."""

from __future__ import annotations

import os
from enum import IntEnum, IntFlag

from padcore.buffer import TextBuffer
from padcore.indent import Indenter
from padcore.menu import MenuBar
from padcore.undo import UndoManager

# Added to a key value while Control is held, so that such keystrokes are
# never taken for typed characters.
CONTROL_OFFSET = 0x10000


class Key(IntEnum):
    """Key values the view reacts to."""

    SPACE = 0x0020
    BACKSPACE = 0xFF08
    TAB = 0xFF09
    RETURN = 0xFF0D
    UP = 0xFF52
    DOWN = 0xFF54
    PAGE_UP = 0xFF55
    PAGE_DOWN = 0xFF56
    ISO_LEFT_TAB = 0xFE20
    CONTROL_L = 0xFFE3
    CONTROL_R = 0xFFE4
    DELETE = 0xFFFF


class Modifier(IntFlag):
    """Modifier state accompanying a key press."""

    NONE = 0
    SHIFT = 1
    CONTROL = 4


class _ViewListener:
    """Keeps the menu and the history in step with the buffer."""

    def __init__(self, view: EditorView) -> None:
        self._view = view

    def modified_changed(self, buffer: TextBuffer) -> None:
        view = self._view
        if not buffer.modified and view.undo is not None:
            view.undo.reset_modified_step()
        exists = view.filename is not None and os.path.exists(view.filename)
        if view.menu is not None:
            view.menu.set_modified(buffer.modified or not exists)

    def mark_set(self, buffer: TextBuffer) -> None:
        if self._view.menu is not None:
            self._view.menu.set_selection(buffer.has_selection())


class EditorView:
    """The editing view over a buffer.

    It interprets key presses (auto-indent, tab width switching, block
    indenting) and remembers the last key value so that the undo history
    can merge keystrokes; it serves as the history's key source.
    """

    def __init__(
        self,
        buffer: TextBuffer,
        indenter: Indenter | None = None,
        menu: MenuBar | None = None,
        undo: UndoManager | None = None,
        filename: str | None = None,
    ) -> None:
        self.buffer = buffer
        self.indenter = indenter if indenter is not None else Indenter(undo)
        self.menu = menu
        self.undo = undo
        self.filename = filename
        self._keyval = 0
        buffer.add_listener(_ViewListener(self))
        if menu is not None:
            menu.set_selection(buffer.has_selection())

    def current_keyval(self) -> int:
        """The key value of the keystroke being processed, or 0."""
        return self._keyval

    def clear_keyval(self) -> None:
        """Forget the current key value."""
        self._keyval = 0

    def selection_spans_lines(self) -> bool:
        """True when the selected text contains a line break."""
        if not self.buffer.has_selection():
            return False
        start, end = self.buffer.selection_bounds()
        return "\n" in self.buffer.get_text(start, end)

    def key_press(self, keyval: int, state: int = Modifier.NONE) -> bool:
        """Handle a key press; return True when the view consumed it."""
        state = Modifier(state)
        buffer = self.buffer
        self._keyval = 0

        if keyval == Key.RETURN:
            if self.indenter.enabled:
                self.indenter.indent_newline(buffer)
                return True
        elif keyval in (Key.TAB, Key.ISO_LEFT_TAB):
            if keyval == Key.TAB and state & Modifier.CONTROL:
                self.indenter.toggle_tab_width()
                return True
            if state & Modifier.SHIFT:
                self.indenter.unindent_lines(buffer)
                return True
            if self.selection_spans_lines():
                self.indenter.indent_lines(buffer)
                return True

        value = int(keyval)
        if state & Modifier.CONTROL or keyval in (Key.CONTROL_L, Key.CONTROL_R):
            value += CONTROL_OFFSET
        self._keyval = value
        return False