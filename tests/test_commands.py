"""Routing of input-loop commands to the engine."""

import pytest

from core import ModeError
from core.desktop.devtools.application.commands import (
    EDITING_COMMANDS,
    NORMAL_HANDLERS,
    Command,
    dispatch,
)
from core.desktop.devtools.application.todo_engine import Mode, TodoEngine
from infrastructure.todo_file_parser import TodoFileParser


def make_engine() -> TodoEngine:
    active, completed = TodoFileParser.parse_text("TODO(): A\nTODO(): B\n<--->\n")
    return TodoEngine(active, completed)


def test_every_command_is_routed():
    for command in Command:
        assert command in NORMAL_HANDLERS or command in EDITING_COMMANDS or command is Command.QUIT


def test_quit_stops_the_loop():
    engine = make_engine()
    assert dispatch(engine, Command.QUIT) is False


def test_quit_while_editing_is_a_mode_error():
    engine = make_engine()
    dispatch(engine, Command.BEGIN_INSERT)
    with pytest.raises(ModeError):
        dispatch(engine, Command.QUIT)


def test_typing_session():
    engine = make_engine()
    assert dispatch(engine, Command.BEGIN_INSERT) is True
    for ch in "abd":
        dispatch(engine, Command.TYPE_CHAR, ch)
    dispatch(engine, Command.CURSOR_LEFT)
    dispatch(engine, Command.TYPE_CHAR, "c")
    dispatch(engine, Command.CURSOR_HOME)
    dispatch(engine, Command.DELETE_FORWARD)
    dispatch(engine, Command.CURSOR_END)
    dispatch(engine, Command.BACKSPACE)
    assert engine.editing_text() == "bc"
    assert dispatch(engine, Command.COMMIT) is True
    assert engine.mode is Mode.NORMAL
    assert [item.text for item in engine.active.items] == ["bc", "A", "B"]


def test_cancel_discards_new_item():
    engine = make_engine()
    dispatch(engine, Command.BEGIN_APPEND)
    dispatch(engine, Command.TYPE_CHAR, "x")
    dispatch(engine, Command.CANCEL)
    assert engine.mode is Mode.NORMAL
    assert [item.text for item in engine.active.items] == ["A", "B"]


def test_normal_command_clears_previous_status():
    engine = make_engine()
    engine.set_status("STATUS_SAVED", path="TODO")
    dispatch(engine, Command.MOVE_DOWN)
    assert engine.status_message == ""
    assert engine.active.cursor == 1


def test_failed_command_reports_status():
    engine = make_engine()
    dispatch(engine, Command.UNDO)
    assert engine.status_message == "Nothing to undo."


def test_editing_command_in_normal_mode_is_fatal():
    engine = make_engine()
    with pytest.raises(ModeError):
        dispatch(engine, Command.COMMIT)
    with pytest.raises(ModeError):
        dispatch(engine, Command.TYPE_CHAR, "x")
