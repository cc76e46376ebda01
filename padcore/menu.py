"""The editor's menu bar: its items, accelerators and sensitivities."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable


class ItemKind(Enum):
    BRANCH = "branch"
    ITEM = "item"
    CHECK = "check"
    SEPARATOR = "separator"


@dataclass
class MenuItem:
    """One entry of the menu bar."""

    path: str
    label: str
    kind: ItemKind = ItemKind.ITEM
    accelerator: str | None = None
    action: str | None = None
    stock: str | None = None
    sensitive: bool = True
    active: bool = False

    @property
    def key(self) -> str:
        """The path without mnemonic underscores, as items are looked up."""
        return strip_mnemonics(self.path)


def strip_mnemonics(path: str) -> str:
    """Remove mnemonic underscores from a menu path."""
    return path.replace("_", "")


_SEP = ItemKind.SEPARATOR
_BRANCH = ItemKind.BRANCH
_CHECK = ItemKind.CHECK
_ITEM = ItemKind.ITEM

_FILE_HEAD = [
    ("/_File", None, None, _BRANCH, None),
    ("/File/_New", "<control>N", "on_file_new", _ITEM, "gtk-new"),
    ("/File/_Open...", "<control>O", "on_file_open", _ITEM, "gtk-open"),
    ("/File/_Save", "<control>S", "on_file_save", _ITEM, "gtk-save"),
    ("/File/Save _As...", "<shift><control>S", "on_file_save_as", _ITEM, "gtk-save-as"),
    ("/File/---", None, None, _SEP, None),
]

_FILE_PRINT = [
    ("/File/Print Pre_view", "<shift><control>P", "on_file_print_preview", _ITEM, "gtk-print-preview"),
    ("/File/_Print...", "<control>P", "on_file_print", _ITEM, "gtk-print"),
    ("/File/---", None, None, _SEP, None),
]

_REST = [
    ("/File/_Quit", "<control>Q", "on_file_quit", _ITEM, "gtk-quit"),
    ("/_Edit", None, None, _BRANCH, None),
    ("/Edit/_Undo", "<control>Z", "on_edit_undo", _ITEM, "gtk-undo"),
    ("/Edit/_Redo", "<shift><control>Z", "on_edit_redo", _ITEM, "gtk-redo"),
    ("/Edit/---", None, None, _SEP, None),
    ("/Edit/Cu_t", "<control>X", "on_edit_cut", _ITEM, "gtk-cut"),
    ("/Edit/_Copy", "<control>C", "on_edit_copy", _ITEM, "gtk-copy"),
    ("/Edit/_Paste", "<control>V", "on_edit_paste", _ITEM, "gtk-paste"),
    ("/Edit/_Delete", None, "on_edit_delete", _ITEM, "gtk-delete"),
    ("/Edit/---", None, None, _SEP, None),
    ("/Edit/Select _All", "<control>A", "on_edit_select_all", _ITEM, None),
    ("/_Search", None, None, _BRANCH, None),
    ("/Search/_Find...", "<control>F", "on_search_find", _ITEM, "gtk-find"),
    ("/Search/Find _Next", "<control>G", "on_search_find_next", _ITEM, None),
    ("/Search/Find _Previous", "<shift><control>G", "on_search_find_previous", _ITEM, None),
    ("/Search/_Replace...", "<control>H", "on_search_replace", _ITEM, "gtk-find-and-replace"),
    ("/Search/---", None, None, _SEP, None),
    ("/Search/_Jump To...", "<control>J", "on_search_jump_to", _ITEM, "gtk-jump-to"),
    ("/_Options", None, None, _BRANCH, None),
    ("/Options/_Font...", None, "on_option_font", _ITEM, "gtk-select-font"),
    ("/Options/_Word Wrap", None, "on_option_word_wrap", _CHECK, None),
    ("/Options/_Line Numbers", None, "on_option_line_numbers", _CHECK, None),
    ("/Options/---", None, None, _SEP, None),
    ("/Options/_Auto Indent", None, "on_option_auto_indent", _CHECK, None),
    ("/_Help", None, None, _BRANCH, None),
    ("/Help/_About", None, "on_help_about", _ITEM, "gtk-about"),
]

# Key bindings that have no menu entry of their own, or duplicate one.
_HIDDEN_ACTIONS = {
    "<control>W": "on_file_close",
    "<control>T": "on_option_always_on_top",
}
_HIDDEN_ITEMS = {
    "<control>Y": "/Edit/Redo",
    "F3": "/Search/Find Next",
    "<shift>F3": "/Search/Find Previous",
    "<control>R": "/Search/Replace...",
}


class MenuBar:
    """The menu bar model.

    ``items`` lists the entries in menu order; ``accelerators`` maps each
    key binding to the name of the action it triggers.
    """

    def __init__(
        self,
        translate: Callable[[str], str] | None = None,
        printing: bool = True,
    ) -> None:
        tr = translate if translate is not None else (lambda path: path)
        entries = _FILE_HEAD + (_FILE_PRINT if printing else []) + _REST
        self.items: list[MenuItem] = []
        self._by_key: dict[str, MenuItem] = {}
        self.accelerators: dict[str, str] = {}
        for path, accel, action, kind, stock in entries:
            label = path if kind is _SEP else tr(path)
            item = MenuItem(
                path=path,
                label=label.rsplit("/", 1)[-1],
                kind=kind,
                accelerator=accel,
                action=action,
                stock=stock,
            )
            self.items.append(item)
            if kind is not _SEP:
                self._by_key[item.key] = item
            if accel is not None and action is not None:
                self.accelerators[accel] = action

        self.accelerators.update(_HIDDEN_ACTIONS)
        for accel, path in _HIDDEN_ITEMS.items():
            action = self.item(path).action
            if action is not None:
                self.accelerators[accel] = action

        self.item("/Search/Find Next").sensitive = False
        self.item("/Search/Find Previous").sensitive = False
        self.set_selection(False)

    def item(self, path: str) -> MenuItem:
        """Return the item at ``path``; mnemonic underscores are optional."""
        try:
            return self._by_key[strip_mnemonics(path)]
        except KeyError:
            raise KeyError(f"no menu item at {path!r}") from None

    def set_modified(self, modified: bool) -> None:
        """Enable Save only while there is something to save."""
        self.item("/File/Save").sensitive = bool(modified)

    def set_selection(self, exists: bool) -> None:
        """Enable Cut, Copy and Delete only while text is selected."""
        for path in ("/Edit/Cut", "/Edit/Copy", "/Edit/Delete"):
            self.item(path).sensitive = bool(exists)

    def set_clipboard(self, available: bool) -> None:
        """Enable Paste only while the clipboard holds text."""
        self.item("/Edit/Paste").sensitive = bool(available)