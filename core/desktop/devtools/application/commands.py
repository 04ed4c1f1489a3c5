"""Command surface consumed from the input loop."""

from enum import Enum
from typing import Callable, Dict, Optional

from core import EditKey
from core.desktop.devtools.application.todo_engine import Mode, TodoEngine


class Command(Enum):
    # Normal mode
    MOVE_UP = "move_up"
    MOVE_DOWN = "move_down"
    JUMP_TOP = "jump_top"
    JUMP_BOTTOM = "jump_bottom"
    JUMP_HALF = "jump_half"
    DRAG_UP = "drag_up"
    DRAG_DOWN = "drag_down"
    TOGGLE_FOCUS = "toggle_focus"
    TOGGLE_SUBTASK_VISIBILITY = "toggle_subtask_visibility"
    MARK = "mark"
    DELETE = "delete"
    BEGIN_INSERT = "begin_insert"
    BEGIN_APPEND = "begin_append"
    BEGIN_EDIT = "begin_edit"
    UNDO = "undo"
    QUIT = "quit"
    # Editing mode
    TYPE_CHAR = "type_char"
    CURSOR_LEFT = "cursor_left"
    CURSOR_RIGHT = "cursor_right"
    CURSOR_HOME = "cursor_home"
    CURSOR_END = "cursor_end"
    BACKSPACE = "backspace"
    DELETE_FORWARD = "delete_forward"
    COMMIT = "commit"
    CANCEL = "cancel"


NORMAL_HANDLERS: Dict[Command, Callable[[TodoEngine], object]] = {
    Command.MOVE_UP: TodoEngine.move_up,
    Command.MOVE_DOWN: TodoEngine.move_down,
    Command.JUMP_TOP: TodoEngine.jump_top,
    Command.JUMP_BOTTOM: TodoEngine.jump_bottom,
    Command.JUMP_HALF: TodoEngine.jump_half,
    Command.DRAG_UP: TodoEngine.drag_up,
    Command.DRAG_DOWN: TodoEngine.drag_down,
    Command.TOGGLE_FOCUS: TodoEngine.toggle_focus,
    Command.TOGGLE_SUBTASK_VISIBILITY: TodoEngine.toggle_subtasks,
    Command.MARK: TodoEngine.mark_current,
    Command.DELETE: TodoEngine.delete_current,
    Command.BEGIN_INSERT: TodoEngine.begin_insert,
    Command.BEGIN_APPEND: TodoEngine.begin_append,
    Command.BEGIN_EDIT: TodoEngine.begin_edit,
    Command.UNDO: TodoEngine.undo,
}

EDIT_KEYS: Dict[Command, EditKey] = {
    Command.TYPE_CHAR: EditKey.CHAR,
    Command.CURSOR_LEFT: EditKey.LEFT,
    Command.CURSOR_RIGHT: EditKey.RIGHT,
    Command.CURSOR_HOME: EditKey.HOME,
    Command.CURSOR_END: EditKey.END,
    Command.BACKSPACE: EditKey.BACKSPACE,
    Command.DELETE_FORWARD: EditKey.DELETE,
}

EDITING_COMMANDS = frozenset(EDIT_KEYS) | {Command.COMMIT, Command.CANCEL}


def dispatch(engine: TodoEngine, command: Command, char: Optional[str] = None) -> bool:
    """Route one command to the engine; returns False when the loop should stop.

    Normal-mode commands clear the previous status message first so only the
    outcome of the latest command is shown.
    """
    if command in EDITING_COMMANDS:
        if command is Command.COMMIT:
            engine.finish_edit()
        elif command is Command.CANCEL:
            engine.cancel_edit()
        else:
            engine.edit_with(EDIT_KEYS[command], char)
        return True

    if command is Command.QUIT:
        engine.request_quit()
        return False
    if engine.mode is Mode.NORMAL:
        engine.clear_status()
    NORMAL_HANDLERS[command](engine)
    return True


__all__ = ["Command", "dispatch", "EDITING_COMMANDS", "NORMAL_HANDLERS"]
