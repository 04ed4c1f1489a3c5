"""Error types raised by the list engine.

Recoverable errors (``TodoError`` subclasses) describe a policy violation in
user input: the engine rolls the attempted mutation back and shows the
message. ``ModeError`` and ``InvariantError`` indicate a defect in the caller
or a corrupted index structure and are never caught by the engine.
"""

from typing import Any, Dict


class TodoError(Exception):
    """Recoverable policy violation; ``key`` is the i18n message key."""

    key = "ERR_GENERIC"

    def __init__(self, **params: Any):
        self.params: Dict[str, Any] = params
        super().__init__(self.key)


class AlreadyAtTop(TodoError):
    key = "ERR_ALREADY_AT_TOP"


class AlreadyAtBottom(TodoError):
    key = "ERR_ALREADY_AT_BOTTOM"


class CannotLeaveParent(TodoError):
    key = "ERR_CANNOT_LEAVE_PARENT"


class CannotInsert(TodoError):
    key = "ERR_CANNOT_INSERT"


class CannotDelete(TodoError):
    key = "ERR_CANNOT_DELETE"


class HasActiveSubtasks(TodoError):
    key = "ERR_HAS_ACTIVE_SUBTASKS"


class StillActive(TodoError):
    key = "ERR_STILL_ACTIVE"


class NotARoot(TodoError):
    key = "ERR_NOT_A_ROOT"


class NothingToUndo(TodoError):
    key = "ERR_NOTHING_TO_UNDO"


class EmptyList(TodoError):
    key = "ERR_EMPTY_LIST"


class EmptyText(TodoError):
    key = "ERR_EMPTY_TEXT"


class CompletedIsReadOnly(TodoError):
    key = "ERR_COMPLETED_READ_ONLY"


class ModeError(RuntimeError):
    """A command was routed to the engine in the wrong mode."""


class InvariantError(AssertionError):
    """The parent/child index structure of a list is inconsistent."""


__all__ = [
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
