# padcore

The editing core of a small plain-text editor, with no toolkit attached.
It holds the text and records edits so they can be undone and redone.
It also does auto-indent and block indenting, finds and replaces text,
keeps menu item state up to date, and reads and writes the editor's
settings.

Every part works on ordinary Python objects, so you can drive it from any
front end or straight from tests. The package uses only the standard
library.

## Modules

- `padcore.buffer`: `TextBuffer` holds the text. It has an insert mark
  (`cursor`), a selection-bound mark (`bound`) and a `modified` flag. It offers
  line helpers (`line_count`, `line_of`, `line_start`) and a `user_action()`
  context manager that groups edits. Listeners added with `add_listener` are
  called through whichever of these methods they define: `insert_text`,
  `delete_range`, `begin_user_action`, `end_user_action`, `modified_changed` and
  `mark_set`. An offset outside the buffer raises `IndexError`.
- `padcore.undo`: `UndoManager` keeps the undo and redo history.
  - It records only the edits made inside a user action.
  - Single-character keystrokes that follow one another are merged into one
    step.
  - Steps tied with `set_sequence` or `reserve_sequence` are undone and redone
    together.
  - It sets the buffer's `modified` flag from the point marked by
    `reset_modified_step`.
- `padcore.indent`: `compute_indentation(buffer, line, limit)` returns a line's
  leading whitespace. `Indenter` provides:
  - `indent_newline` for auto-indent on newline.
  - `indent_lines` and `unindent_lines` to indent or unindent the selected
    lines.
  - `toggle_tab_width` to switch between the default tab width and an
    alternative: 4 when the default is 8, otherwise 8.
- `padcore.menu`: `MenuBar` and `MenuItem` hold the menu tree and its
  accelerators. `set_modified`, `set_selection` and `set_clipboard` make Save,
  Cut/Copy/Delete and Paste available or unavailable. Look items up with
  `item(path)`; mnemonic underscores in the path are optional.
- `padcore.view`: `EditorView`, `Key` and `Modifier` handle key presses through
  `key_press(keyval, state)`:
  - Return indents the new line when auto-indent is on.
  - Tab indents a selection that spans several lines.
  - Shift+Tab unindents.
  - Ctrl+Tab toggles the tab width.

  The view remembers the last key value and can serve as the undo history's key
  source.
- `padcore.search`: `find_forward` and `find_backward` search plain strings,
  matching case or ignoring it. `Searcher` offers:
  - `find(direction)`, which wraps around the ends of the buffer.
  - `replace(confirm)`, which works one match at a time through a confirmation
    callback or on all matches at once when `replace_all` is set.
  - `jump_to(line)`.
- `padcore.config`: `Config`, `Options`, `config_path`, `load_config`,
  `save_config`, `parse_args` and `read_stdin`.
  - The settings file holds window size, font, word wrap, line numbers and auto
    indent. It is kept at `$XDG_CONFIG_HOME/padcore/padcorerc`, or under
    `~/.config` when that variable is unset.
  - `parse_args` reads the command-line options `--codeset`, `--tab-width`,
    `--jump` and `--version`, plus an optional filename. It raises `UsageError`
    on malformed options.
  - `read_stdin` reads piped standard input if data arrives within a timeout.

## Example

```python
from padcore.buffer import TextBuffer
from padcore.undo import UndoManager

buf = TextBuffer()
history = UndoManager(buf)

with buf.user_action():
    buf.insert(0, "hello\nworld")

print(buf.line_count())     # 2
print(buf.line_of(7))       # 1

history.undo()
print(repr(buf.text))       # ''
history.redo()
print(buf.text)             # hello\nworld
```

Searching plain strings:

```python
from padcore.search import find_forward

print(find_forward("One two ONE", "one", 1, False))   # (8, 11)
```

## What it does not do

This package is the editing model only. It has no window, no drawing
(including line-number display), no dialogs and no clipboard access. It
does not open or save documents or convert their character encodings. It
installs no command to run: `parse_args` returns the options, and a front
end decides what to do with them.

## Requirements

Python 3.10 or later. Install `padcore[test]` to get pytest for the tests.