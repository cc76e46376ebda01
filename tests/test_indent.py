import pytest

from padcore.buffer import TextBuffer
from padcore.indent import Indenter, compute_indentation
from padcore.undo import UndoManager


def test_compute_indentation_returns_leading_whitespace():
    buf = TextBuffer("  \tfoo\nbar")
    assert compute_indentation(buf, 0) == "  \t"


def test_compute_indentation_none_without_whitespace():
    buf = TextBuffer("  \tfoo\nbar")
    assert compute_indentation(buf, 1) is None


def test_compute_indentation_stops_at_newline():
    buf = TextBuffer("   \nx")
    assert compute_indentation(buf, 0) == "   "


def test_compute_indentation_limit_cuts_short():
    buf = TextBuffer("    x")
    assert compute_indentation(buf, 0, 2) == "  "
    assert compute_indentation(buf, 0, 5) == "    "


def test_compute_indentation_line_out_of_range():
    buf = TextBuffer("  a")
    assert compute_indentation(buf, 5) is None


@pytest.mark.parametrize("default", [8, 4, 2])
def test_toggle_returns_to_default(default):
    ind = Indenter()
    ind.set_default_tab_width(default)
    first = ind.toggle_tab_width()
    assert first != default
    assert ind.toggle_tab_width() == default
    assert ind.tab_width == default


def test_toggle_from_eight_gives_four():
    ind = Indenter()
    assert ind.toggle_tab_width() == 4


def test_toggle_from_other_gives_eight():
    ind = Indenter()
    ind.set_default_tab_width(4)
    assert ind.toggle_tab_width() == 8


def test_set_default_tab_width_sets_current():
    ind = Indenter()
    ind.toggle_tab_width()
    ind.set_default_tab_width(3)
    assert ind.tab_width == 3
    assert ind.default_tab_width == 3


def test_indent_newline_copies_indentation():
    buf = TextBuffer("    abc")
    buf.place_cursor(len(buf))
    Indenter(enabled=True).indent_newline(buf)
    assert buf.text == "    abc\n    "
    assert buf.cursor == len(buf.text)


def test_indent_newline_inside_indentation_uses_prefix():
    buf = TextBuffer("    abc")
    buf.place_cursor(2)
    Indenter().indent_newline(buf)
    assert buf.text == "  \n    abc"


def test_indent_newline_replaces_selection():
    buf = TextBuffer("\tab cd")
    buf.select_range(3, 6)
    Indenter().indent_newline(buf)
    assert buf.text == "\tab\n\t"


def test_indent_lines_adds_tabs_and_keeps_selection():
    buf = TextBuffer("a\nb\nc")
    buf.select_range(0, 4)
    Indenter().indent_lines(buf)
    assert buf.text == "\ta\n\tb\nc"
    assert buf.selection_bounds() == (buf.line_start(0), buf.line_start(2))
    assert buf.cursor == buf.line_start(0)


def test_indent_lines_cursor_at_end_stays_at_end():
    buf = TextBuffer("a\nb\nc")
    buf.select_range(4, 0)
    Indenter().indent_lines(buf)
    assert buf.cursor == buf.line_start(2)
    assert buf.bound == buf.line_start(0)


def test_indent_lines_undone_in_one_step():
    buf = TextBuffer("a\nb\nc")
    undo = UndoManager(buf)
    buf.select_range(0, 4)
    Indenter(undo).indent_lines(buf)
    undo.undo()
    assert buf.text == "a\nb\nc"
    assert not undo.can_undo()


def test_unindent_lines_removes_tab_and_spaces():
    buf = TextBuffer("\ta\n    b\n  c")
    buf.select_range(0, buf.line_start(2))
    Indenter().unindent_lines(buf)
    assert buf.text == "a\nb\n  c"


def test_unindent_respects_tab_width():
    buf = TextBuffer("    b")
    ind = Indenter()
    ind.set_default_tab_width(2)
    ind.unindent_lines(buf)
    assert buf.text == "  b"


def test_unindent_removes_only_first_tab():
    buf = TextBuffer("\t\tx")
    Indenter().unindent_lines(buf)
    assert buf.text == "\tx"


def test_unindent_without_selection_handles_cursor_line():
    buf = TextBuffer("a\n  b")
    buf.place_cursor(len(buf))
    Indenter().unindent_lines(buf)
    assert buf.text == "a\nb"


def test_unindent_undone_in_one_step():
    text = "\ta\n\tb\nc"
    buf = TextBuffer(text)
    undo = UndoManager(buf)
    buf.select_range(0, buf.line_start(2))
    Indenter(undo).unindent_lines(buf)
    assert buf.text == "a\nb\nc"
    undo.undo()
    assert buf.text == text