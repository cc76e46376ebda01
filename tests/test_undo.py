from padcore import undo
from padcore.buffer import TextBuffer
from padcore.undo import UndoManager


class FakeKeys:
    def __init__(self):
        self.keyval = 0

    def current_keyval(self):
        return self.keyval

    def clear_keyval(self):
        self.keyval = 0


def make(text=""):
    buf = TextBuffer(text)
    keys = FakeKeys()
    manager = UndoManager(buf, keys)
    return buf, keys, manager


def type_text(buf, keys, text):
    for ch in text:
        keys.keyval = ord(ch)
        with buf.user_action():
            buf.insert(buf.cursor, ch)


def press_backspace(buf, keys):
    keys.keyval = undo.BACKSPACE
    with buf.user_action():
        buf.delete(buf.cursor - 1, buf.cursor)


def press_delete(buf, keys):
    keys.keyval = undo.DELETE
    with buf.user_action():
        buf.delete(buf.cursor, buf.cursor + 1)


def paste(buf, keys, text):
    keys.keyval = 0
    with buf.user_action():
        buf.insert(buf.cursor, text)


def test_typed_word_is_one_step():
    buf, keys, manager = make()
    type_text(buf, keys, "abc")
    assert manager.can_undo()
    manager.undo()
    assert buf.text == ""
    assert not manager.can_undo()
    assert manager.can_redo()
    manager.redo()
    assert buf.text == "abc"
    assert buf.cursor == len("abc")


def test_word_after_space_is_separate_step():
    buf, keys, manager = make()
    type_text(buf, keys, "ab c")
    manager.undo()
    assert buf.text == "ab "
    manager.undo()
    assert buf.text == ""


def test_backspaces_are_grouped():
    buf, keys, manager = make("abc")
    buf.place_cursor(len("abc"))
    press_backspace(buf, keys)
    press_backspace(buf, keys)
    assert buf.text == "a"
    manager.undo()
    assert buf.text == "abc"
    assert buf.cursor == len("abc")


def test_delete_key_presses_are_grouped():
    buf, keys, manager = make("abc")
    buf.place_cursor(0)
    press_delete(buf, keys)
    press_delete(buf, keys)
    assert buf.text == "c"
    manager.undo()
    assert buf.text == "abc"
    assert buf.cursor == 0


def test_paste_is_single_step():
    buf, keys, manager = make()
    paste(buf, keys, "hello world")
    manager.undo()
    assert buf.text == ""
    manager.redo()
    assert buf.text == "hello world"


def test_edits_outside_user_action_are_not_recorded():
    buf, keys, manager = make()
    buf.insert(0, "abc")
    assert not manager.can_undo()
    manager.undo()
    assert buf.text == "abc"


def test_new_edit_clears_redo():
    buf, keys, manager = make()
    paste(buf, keys, "one")
    manager.undo()
    assert manager.can_redo()
    paste(buf, keys, "two")
    assert not manager.can_redo()
    manager.redo()
    assert buf.text == "two"


def test_set_sequence_undoes_steps_together():
    buf, keys, manager = make()
    paste(buf, keys, "one")
    manager.set_sequence(True)
    paste(buf, keys, "two")
    manager.undo()
    assert buf.text == ""
    manager.redo()
    assert buf.text == "onetwo"


def test_reserve_sequence_ties_next_step():
    buf, keys, manager = make()
    manager.reserve_sequence()
    paste(buf, keys, "one")
    paste(buf, keys, "two")
    manager.undo()
    assert buf.text == ""


def test_unreserved_steps_undo_one_at_a_time():
    buf, keys, manager = make()
    paste(buf, keys, "one")
    paste(buf, keys, "two")
    manager.undo()
    assert buf.text == "one"


def test_modified_flag_follows_history():
    buf, keys, manager = make()
    type_text(buf, keys, "x")
    assert buf.modified is True
    manager.undo()
    assert buf.modified is False
    manager.redo()
    assert buf.modified is True


def test_reset_modified_step_marks_saved_point():
    buf, keys, manager = make()
    paste(buf, keys, "saved")
    manager.reset_modified_step()
    buf.modified = False
    paste(buf, keys, "more")
    assert buf.modified is True
    manager.undo()
    assert buf.text == "saved"
    assert buf.modified is False


def test_undo_places_cursor_at_insert_start():
    buf, keys, manager = make("start ")
    buf.place_cursor(len("start "))
    paste(buf, keys, "pasted")
    manager.undo()
    assert buf.cursor == len("start ")
    assert buf.text == "start "