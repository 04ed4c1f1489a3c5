"""Engine-level behaviour: modes, undo, transfer and edit sessions."""

import pytest

from core import DeletePolicy, EditKey, ModeError, Panel
from core.desktop.devtools.application.todo_engine import Mode, TodoEngine
from infrastructure.todo_file_parser import TodoFileParser

SAMPLE = """TODO(*): A
    TODO(): a1
    TODO(): a2
TODO(): B
<--->
DONE(2024-03-01 09:30 +0000): C
    DONE(2024-03-01 09:30 +0000): c1
"""


def make_engine(content: str = SAMPLE, **kwargs) -> TodoEngine:
    active, completed = TodoFileParser.parse_text(content)
    return TodoEngine(active, completed, **kwargs)


def texts(task_list):
    return [item.text for item in task_list.items]


def state(task_list):
    return [item.copy() for item in task_list.items], task_list.cursor


def type_text(engine: TodoEngine, text: str) -> None:
    for ch in text:
        engine.edit_with(EditKey.CHAR, ch)


def test_new_task_with_subtask_moves_to_completed():
    engine = TodoEngine()
    engine.begin_insert()
    type_text(engine, "A")
    assert engine.finish_edit() is True
    engine.begin_append()
    type_text(engine, "step")
    engine.finish_edit()
    assert texts(engine.active) == ["A", "step"]
    assert engine.active.items[0].active_count == 1

    engine.mark_current()
    assert engine.status_message == "Subtask done."
    assert engine.active.items[0].active_count == 0

    engine.move_up()
    assert engine.mark_current() is True
    assert engine.active.is_empty()
    assert texts(engine.completed) == ["A", "step"]
    assert all(item.done for item in engine.completed.items)
    assert engine.status_message == "Done! Great job!"
    engine.completed.validate()


def test_undo_transfer_restores_both_lists():
    engine = make_engine("TODO(): A\n    TODO(x): a1\n<--->\n")
    before_active = state(engine.active)
    before_completed = state(engine.completed)
    engine.mark_current()
    assert texts(engine.completed) == ["A", "a1"]

    assert engine.undo() is True
    assert state(engine.active) == before_active
    assert state(engine.completed) == before_completed
    assert engine.status_message == "Undo: Transfer"


def test_transfer_with_unfinished_subtasks_is_refused():
    engine = make_engine()
    assert engine.mark_current() is False
    assert engine.status_message == "Task still has 2 unfinished subtask(s)."
    assert texts(engine.active) == ["A", "a1", "a2", "B"]
    assert engine.active.history == []
    assert engine.completed.history == []
    assert not engine.operations.can_undo()


def test_reopen_completed_task():
    engine = make_engine()
    engine.toggle_focus()
    assert engine.mark_current() is True
    assert texts(engine.active) == ["A", "a1", "a2", "B", "C", "c1"]
    assert engine.active.cursor == 4
    assert engine.active.items[4].done is False
    assert engine.active.items[5].done is True
    assert engine.completed.is_empty()
    assert engine.status_message == "Not done yet? Keep going!"
    engine.active.validate()


def test_completed_subtasks_are_read_only():
    engine = make_engine()
    engine.toggle_focus()
    engine.move_down()
    assert engine.mark_current() is False
    assert engine.status_message == "Only whole tasks can move between TODO and DONE."


def test_insert_into_completed_is_refused():
    engine = make_engine()
    engine.toggle_focus()
    assert engine.begin_insert() is False
    assert engine.mode is Mode.NORMAL
    assert engine.status_message == "Only new TODO items can be added."


def test_empty_new_item_is_discarded():
    engine = make_engine()
    engine.begin_insert()
    assert engine.mode is Mode.EDITING
    assert engine.finish_edit() is True
    assert engine.mode is Mode.NORMAL
    assert texts(engine.active) == ["A", "a1", "a2", "B"]
    assert not engine.operations.can_undo()
    assert engine.active.history == []


def test_new_item_text_is_stripped():
    engine = TodoEngine()
    engine.begin_insert()
    type_text(engine, "  buy milk  ")
    engine.finish_edit()
    assert texts(engine.active) == ["buy milk"]


def test_cancel_restores_text():
    engine = make_engine()
    engine.begin_edit()
    engine.edit_with(EditKey.BACKSPACE)
    assert engine.editing_text() == ""
    engine.cancel_edit()
    assert engine.active.items[0].text == "A"
    assert engine.mode is Mode.NORMAL
    assert not engine.operations.can_undo()


def test_clearing_existing_item_keeps_editing():
    engine = make_engine()
    engine.begin_edit()
    engine.edit_with(EditKey.BACKSPACE)
    assert engine.finish_edit() is False
    assert engine.mode is Mode.EDITING
    assert engine.status_message == "Item can't be empty."


def test_unchanged_edit_leaves_no_history():
    engine = make_engine()
    engine.begin_edit()
    assert engine.finish_edit() is True
    assert not engine.operations.can_undo()
    assert engine.active.history == []


def test_edit_then_undo():
    engine = make_engine()
    engine.begin_edit()
    type_text(engine, "!")
    engine.finish_edit()
    assert engine.active.items[0].text == "A!"
    engine.undo()
    assert engine.active.items[0].text == "A"
    assert engine.status_message == "Undo: Edit"


def _append(engine):
    engine.begin_append()
    type_text(engine, "new")
    engine.finish_edit()


def _insert(engine):
    engine.begin_insert()
    type_text(engine, "new")
    engine.finish_edit()


@pytest.mark.parametrize(
    "cursor, operation",
    [
        (1, TodoEngine.drag_down),
        (3, TodoEngine.drag_up),
        (2, TodoEngine.delete_current),
        (1, TodoEngine.mark_current),
        (0, _append),
        (3, _insert),
    ],
)
def test_undo_restores_exact_state(cursor, operation):
    engine = make_engine()
    engine.active.cursor = cursor
    before = state(engine.active)
    operation(engine)
    assert state(engine.active) != before
    assert engine.undo() is True
    assert state(engine.active) == before
    engine.active.validate()


def test_delete_policy_blocks_active_roots_by_default():
    engine = make_engine()
    assert engine.delete_current() is False
    assert engine.status_message == "Delete policy 'subtasks' does not allow removing this item."
    assert texts(engine.active) == ["A", "a1", "a2", "B"]


def test_delete_policy_is_configurable():
    engine = make_engine(delete_policies={Panel.ACTIVE: DeletePolicy.ANY})
    assert engine.delete_current() is True
    assert texts(engine.active) == ["B"]
    assert engine.status_message == "Item deleted."


def test_history_limit_forgets_oldest_snapshots():
    engine = make_engine("TODO(): A\nTODO(): B\nTODO(): C\n<--->\n", history_limit=2)
    engine.drag_down()
    engine.drag_down()
    engine.drag_up()
    assert texts(engine.active) == ["B", "A", "C"]
    assert len(engine.active.history) == 2

    engine.undo()
    assert texts(engine.active) == ["B", "C", "A"]
    engine.undo()
    assert texts(engine.active) == ["B", "A", "C"]
    assert engine.undo() is False
    assert engine.status_message == "Nothing to undo."
    assert engine.active.history == []


def test_failed_drag_leaves_no_history():
    engine = make_engine()
    assert engine.drag_up() is False
    assert engine.status_message == "Can't drag up. Item is already at the top."
    assert engine.active.history == []
    assert not engine.operations.can_undo()


def test_hidden_subtasks_navigate_roots_only():
    engine = make_engine()
    engine.active.cursor = 2
    engine.toggle_subtasks()
    assert engine.status_message == "Subtasks hidden."
    assert engine.active.cursor == 0
    engine.move_down()
    assert engine.active.cursor == 3


def test_append_shows_hidden_subtasks():
    engine = make_engine()
    engine.toggle_subtasks()
    engine.begin_append()
    assert engine.show_subtasks is True
    assert engine.mode is Mode.EDITING


def test_wrong_mode_commands_are_fatal():
    engine = make_engine()
    with pytest.raises(ModeError):
        engine.finish_edit()
    with pytest.raises(ModeError):
        engine.edit_with(EditKey.CHAR, "x")
    engine.begin_insert()
    with pytest.raises(ModeError):
        engine.move_down()
    with pytest.raises(ModeError):
        engine.undo()


def test_commands_on_empty_lists():
    engine = TodoEngine()
    engine.move_down()
    engine.jump_half()
    assert engine.mark_current() is False
    assert engine.status_message == "List is empty."
    assert engine.begin_edit() is False
    assert engine.begin_append() is False


def test_failure_status_uses_current_language(monkeypatch):
    monkeypatch.setenv("TODO_LANG", "ru")
    engine = make_engine()
    assert engine.drag_up() is False
    assert engine.status_message == "Нельзя сдвинуть вверх: элемент уже первый."


def test_undo_with_hidden_subtasks_lands_on_root():
    engine = make_engine()
    engine.active.cursor = 1
    engine.begin_edit()
    type_text(engine, "!")
    engine.finish_edit()
    engine.toggle_subtasks()
    assert engine.undo() is True
    assert texts(engine.active) == ["A", "a1", "a2", "B"]
    assert engine.active.cursor == 0
    engine.toggle_subtasks()
    assert engine.active.cursor == 0
