"""Operation history for undo support.

Each list keeps its own stack of snapshots; this side stack records which
lists a logical operation snapshotted, so undo can restore one list or both
(transfer) and put the focus back where the operation started.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from core.status import Action, Panel

MAX_HISTORY_SIZE = 100


@dataclass
class Operation:
    action: Action
    panel: Panel  # focus when the operation started
    lists: Tuple[Panel, ...]  # lists holding a snapshot for this operation


@dataclass
class OperationHistory:
    """Bounded LIFO of undoable operations."""

    limit: int = MAX_HISTORY_SIZE
    operations: List[Operation] = field(default_factory=list)

    def record(self, action: Action, panel: Panel, lists: Tuple[Panel, ...]) -> Optional[Operation]:
        """Push an operation.

        Returns the oldest operation when the limit forced it out, so the
        caller can forget the snapshots it owned; otherwise None.
        """
        self.operations.append(Operation(action=action, panel=panel, lists=tuple(lists)))
        if len(self.operations) > self.limit:
            return self.operations.pop(0)
        return None

    def can_undo(self) -> bool:
        return bool(self.operations)

    def pop(self) -> Optional[Operation]:
        return self.operations.pop() if self.operations else None


__all__ = ["Operation", "OperationHistory", "MAX_HISTORY_SIZE"]
