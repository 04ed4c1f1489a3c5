from enum import Enum
from typing import Final


class Panel(Enum):
    ACTIVE = "ACTIVE"
    COMPLETED = "COMPLETED"

    def toggled(self) -> "Panel":
        return Panel.COMPLETED if self is Panel.ACTIVE else Panel.ACTIVE


class Action(Enum):
    """Kinds of undoable operations (value = i18n key of the display label)."""

    INSERT = "ACTION_INSERT"
    APPEND = "ACTION_APPEND"
    EDIT = "ACTION_EDIT"
    DELETE = "ACTION_DELETE"
    DRAG_UP = "ACTION_DRAG_UP"
    DRAG_DOWN = "ACTION_DRAG_DOWN"
    MARK = "ACTION_MARK"
    TRANSFER = "ACTION_TRANSFER"


class DeletePolicy(Enum):
    ROOTS = "roots"
    SUBTASKS = "subtasks"
    ANY = "any"

    @classmethod
    def from_string(cls, value: str, default: "DeletePolicy") -> "DeletePolicy":
        token = (value or "").strip().lower()
        for policy in cls:
            if policy.value == token:
                return policy
        return default

    def allows(self, is_root: bool) -> bool:
        if self is DeletePolicy.ANY:
            return True
        if self is DeletePolicy.ROOTS:
            return is_root
        return not is_root


DEFAULT_DELETE_POLICY: Final[dict] = {
    Panel.ACTIVE: DeletePolicy.SUBTASKS,
    Panel.COMPLETED: DeletePolicy.ROOTS,
}
