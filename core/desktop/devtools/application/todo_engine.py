"""Application-level orchestrator owning the active and completed lists."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, Optional, Sequence

from core import (
    Action,
    CompletedIsReadOnly,
    DEFAULT_DELETE_POLICY,
    DeletePolicy,
    EditKey,
    EmptyList,
    EmptyText,
    InvariantError,
    ModeError,
    NotARoot,
    NothingToUndo,
    Panel,
    StillActive,
    TaskList,
    TodoError,
    apply_edit,
)
from core.desktop.devtools.application.operation_history import MAX_HISTORY_SIZE, OperationHistory
from core.desktop.devtools.interface.i18n import translate

logger = logging.getLogger("todo.engine")


class Mode(Enum):
    NORMAL = "normal"
    EDITING = "editing"


@dataclass
class EditState:
    action: Action  # INSERT, APPEND or EDIT
    panel: Panel
    cursor: int
    original: str = ""


class TodoEngine:
    """Command surface driven by the input loop, one command at a time.

    Structural commands are valid only in ``Mode.NORMAL`` and text commands
    only in ``Mode.EDITING``; a command in the wrong mode raises ``ModeError``.
    Recoverable failures roll back the snapshot taken for the command and
    leave a translated message in ``status_message``.
    """

    def __init__(
        self,
        active: Optional[TaskList] = None,
        completed: Optional[TaskList] = None,
        *,
        history_limit: int = MAX_HISTORY_SIZE,
        delete_policies: Optional[Dict[Panel, DeletePolicy]] = None,
    ):
        self.active = active if active is not None else TaskList()
        self.completed = completed if completed is not None else TaskList()
        policies = dict(DEFAULT_DELETE_POLICY)
        policies.update(delete_policies or {})
        self.active.delete_policy = policies[Panel.ACTIVE]
        self.completed.delete_policy = policies[Panel.COMPLETED]
        self.focus: Panel = Panel.ACTIVE
        self.status_message: str = ""
        self.edit: Optional[EditState] = None
        self.show_subtasks: bool = True
        self.operations = OperationHistory(limit=history_limit)

    # -------------------- state --------------------
    @property
    def mode(self) -> Mode:
        return Mode.EDITING if self.edit is not None else Mode.NORMAL

    def list_for(self, panel: Panel) -> TaskList:
        return self.active if panel is Panel.ACTIVE else self.completed

    @property
    def focused(self) -> TaskList:
        return self.list_for(self.focus)

    def set_status(self, key: str, **kwargs) -> None:
        self.status_message = translate(key, **kwargs)

    def clear_status(self) -> None:
        self.status_message = ""

    def _fail(self, err: TodoError) -> None:
        self.status_message = translate(err.key, **err.params)

    def _require_normal(self, command: str) -> None:
        if self.edit is not None:
            raise ModeError(f"{command}() called while editing")

    def _require_editing(self, command: str) -> None:
        if self.edit is None:
            raise ModeError(f"{command}() called without a matching begin_insert/begin_append/begin_edit")

    # -------------------- undo bookkeeping --------------------
    def _record(self, action: Action, panels: Sequence[Panel]) -> None:
        dropped = self.operations.record(action, self.focus, tuple(panels))
        if dropped is not None:
            for panel in dropped.lists:
                self.list_for(panel).forget_oldest()
            logger.debug("Undo history full, forgot %s", dropped.action.name)

    def _run(self, action: Action, panels: Sequence[Panel], operation: Callable[[], object]) -> bool:
        lists = [self.list_for(panel) for panel in panels]
        for task_list in lists:
            task_list.snapshot()
        try:
            operation()
        except TodoError as err:
            for task_list in lists:
                task_list.restore()
            self._fail(err)
            return False
        self._record(action, panels)
        return True

    def _snap_to_roots(self) -> None:
        if self.show_subtasks:
            return
        for task_list in (self.active, self.completed):
            if task_list.items:
                task_list.cursor = task_list.root_of(task_list.cursor)

    # -------------------- navigation --------------------
    def _navigate(self, command: str, move: Callable[[bool], None]) -> None:
        self._require_normal(command)
        move(not self.show_subtasks)

    def move_up(self) -> None:
        self._navigate("move_up", self.focused.up)

    def move_down(self) -> None:
        self._navigate("move_down", self.focused.down)

    def jump_top(self) -> None:
        self._navigate("jump_top", self.focused.top)

    def jump_bottom(self) -> None:
        self._navigate("jump_bottom", self.focused.bottom)

    def jump_half(self) -> None:
        self._navigate("jump_half", self.focused.half)

    def request_quit(self) -> None:
        self._require_normal("quit")

    def toggle_focus(self) -> None:
        self._require_normal("toggle_focus")
        self.focus = self.focus.toggled()

    def toggle_subtasks(self) -> None:
        self._require_normal("toggle_subtasks")
        self.show_subtasks = not self.show_subtasks
        self._snap_to_roots()
        self.set_status("STATUS_SUBTASKS_SHOWN" if self.show_subtasks else "STATUS_SUBTASKS_HIDDEN")

    # -------------------- structural commands --------------------
    def drag_up(self) -> bool:
        self._require_normal("drag_up")
        return self._run(Action.DRAG_UP, [self.focus], self.focused.drag_up)

    def drag_down(self) -> bool:
        self._require_normal("drag_down")
        return self._run(Action.DRAG_DOWN, [self.focus], self.focused.drag_down)

    def delete_current(self) -> bool:
        self._require_normal("delete_current")
        if self._run(Action.DELETE, [self.focus], self.focused.delete):
            self._snap_to_roots()
            self.set_status("STATUS_DELETED")
            return True
        return False

    def mark_current(self) -> bool:
        """Mark a subtask done/undone; on a whole task, move it across lists."""
        self._require_normal("mark_current")
        item = self.focused.current()
        if item is None:
            self._fail(EmptyList())
            return False
        if item.is_root:
            return self.transfer_current()
        if self.focus is Panel.COMPLETED:
            self._fail(NotARoot())
            return False
        if not self._run(Action.MARK, [self.focus], self.focused.mark):
            return False
        self.set_status("STATUS_SUBTASK_DONE" if item.done else "STATUS_SUBTASK_REOPENED")
        return True

    def transfer_current(self) -> bool:
        self._require_normal("transfer_current")
        if self.focus is Panel.ACTIVE:
            ok = self._run(Action.TRANSFER, [Panel.ACTIVE, Panel.COMPLETED], self._complete_current)
            if ok:
                self.set_status("STATUS_DONE")
        else:
            ok = self._run(Action.TRANSFER, [Panel.ACTIVE, Panel.COMPLETED], self._reopen_current)
            if ok:
                self.set_status("STATUS_NOT_DONE")
        self._snap_to_roots()
        return ok

    def _complete_current(self) -> None:
        item = self.active.current()
        if item is None:
            raise EmptyList()
        if not item.is_root:
            raise NotARoot()
        if item.active_count > 0:
            raise StillActive(count=item.active_count)
        if not item.done:
            self.active.mark()
        self.active.transfer(self.completed)

    def _reopen_current(self) -> None:
        start = self.completed.transfer(self.active)
        self.active.cursor = start
        if self.active.items[start].done:
            self.active.mark()

    def undo(self) -> bool:
        self._require_normal("undo")
        operation = self.operations.pop()
        if operation is None:
            self._fail(NothingToUndo())
            return False
        for panel in operation.lists:
            self.list_for(panel).restore()
        self.focus = operation.panel
        self._snap_to_roots()
        self.set_status("STATUS_UNDO", action=translate(operation.action.value))
        return True

    # -------------------- editing --------------------
    def _begin_new_item(self, action: Action, create: Callable[[], int], prompt_key: str) -> bool:
        if self.focus is Panel.COMPLETED:
            self._fail(CompletedIsReadOnly())
            return False
        if not self.show_subtasks and action is Action.APPEND:
            self.toggle_subtasks()
        if not self._run(action, [self.focus], create):
            return False
        self.edit = EditState(action=action, panel=self.focus, cursor=0)
        self.set_status(prompt_key)
        return True

    def begin_insert(self) -> bool:
        self._require_normal("begin_insert")
        return self._begin_new_item(Action.INSERT, self.focused.insert_root, "STATUS_WHAT_TO_DO")

    def begin_append(self) -> bool:
        self._require_normal("begin_append")
        return self._begin_new_item(Action.APPEND, self.focused.append_child, "STATUS_WHAT_SUBTASK")

    def begin_edit(self) -> bool:
        self._require_normal("begin_edit")
        item = self.focused.current()
        if item is None:
            self._fail(EmptyList())
            return False
        self.focused.snapshot()
        self._record(Action.EDIT, [self.focus])
        self.edit = EditState(action=Action.EDIT, panel=self.focus, cursor=len(item.text), original=item.text)
        self.set_status("STATUS_EDITING")
        return True

    def editing_text(self) -> str:
        self._require_editing("editing_text")
        item = self.list_for(self.edit.panel).current()
        return item.text if item is not None else ""

    def edit_with(self, key: EditKey, char: Optional[str] = None) -> None:
        self._require_editing("edit_with")
        item = self.list_for(self.edit.panel).current()
        if item is None:
            raise InvariantError("edit session lost its item")
        item.text, self.edit.cursor = apply_edit(item.text, self.edit.cursor, key, char)

    def _rollback_session(self) -> None:
        state = self.edit
        operation = self.operations.pop()
        if operation is None or operation.action is not state.action:
            raise InvariantError("edit session has no matching history entry")
        self.list_for(state.panel).restore()
        self.focus = state.panel
        self.edit = None

    def finish_edit(self) -> bool:
        """Commit the edit session.

        Returns True when the engine is back in normal mode and False when the
        text was rejected and editing continues.
        """
        self._require_editing("finish_edit")
        state = self.edit
        task_list = self.list_for(state.panel)
        item = task_list.current()
        text = item.text.strip()
        if not text:
            if state.action is Action.EDIT:
                self._fail(EmptyText())
                return False
            self._rollback_session()
            self.clear_status()
            return True
        item.text = text
        if state.action is Action.EDIT and text == state.original:
            self.operations.pop()
            task_list.drop_snapshot()
        self.edit = None
        self.clear_status()
        return True

    def cancel_edit(self) -> None:
        """Abandon the edit session, restoring the state before it began."""
        self._require_editing("cancel_edit")
        self._rollback_session()
        self.clear_status()


__all__ = ["TodoEngine", "EditState", "Mode"]
