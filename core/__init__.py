from .status import Action, DeletePolicy, Panel, DEFAULT_DELETE_POLICY
from .item import Item, now_local
from .task_list import TaskList
from .line_editor import EditKey, apply_edit
from .errors import (
    TodoError,
    AlreadyAtTop,
    AlreadyAtBottom,
    CannotLeaveParent,
    CannotInsert,
    CannotDelete,
    HasActiveSubtasks,
    StillActive,
    NotARoot,
    NothingToUndo,
    EmptyList,
    EmptyText,
    CompletedIsReadOnly,
    ModeError,
    InvariantError,
)

__all__ = [
    "Action",
    "DeletePolicy",
    "Panel",
    "DEFAULT_DELETE_POLICY",
    "Item",
    "now_local",
    "TaskList",
    "EditKey",
    "apply_edit",
    # Errors
    "TodoError",
    "AlreadyAtTop",
    "AlreadyAtBottom",
    "CannotLeaveParent",
    "CannotInsert",
    "CannotDelete",
    "HasActiveSubtasks",
    "StillActive",
    "NotARoot",
    "NothingToUndo",
    "EmptyList",
    "EmptyText",
    "CompletedIsReadOnly",
    "ModeError",
    "InvariantError",
]
