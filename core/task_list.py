"""Tree-in-array list engine.

A forest of items is stored as a single pre-order sequence: every item's
subtree occupies the contiguous range ``[i, i + subtree_size(i))`` and parent
and child references are absolute indices into the same sequence. Every
structural mutation keeps those references consistent with one
"shift all indices >= X by N" pass.
"""

from __future__ import annotations

from typing import Callable, Iterator, List, Optional, Tuple

from .errors import (
    AlreadyAtBottom,
    AlreadyAtTop,
    CannotDelete,
    CannotInsert,
    CannotLeaveParent,
    EmptyList,
    HasActiveSubtasks,
    InvariantError,
    NotARoot,
    NothingToUndo,
    StillActive,
)
from .item import Item, now_local
from .status import DeletePolicy

Snapshot = Tuple[List[Item], int]


def _checked(value: int) -> int:
    if value < 0:
        raise InvariantError(f"index arithmetic went negative: {value}")
    return value


class TaskList:
    def __init__(self, items: Optional[List[Item]] = None, *, delete_policy: DeletePolicy = DeletePolicy.ANY):
        self.items: List[Item] = list(items or [])
        self.cursor: int = 0
        self.history: List[Snapshot] = []
        self.delete_policy = delete_policy

    def __len__(self) -> int:
        return len(self.items)

    # -------------------- queries --------------------
    def is_empty(self) -> bool:
        return not self.items

    def current(self) -> Optional[Item]:
        if not self.items:
            return None
        return self.items[self.cursor]

    def roots(self) -> List[int]:
        return [idx for idx, item in enumerate(self.items) if item.parent is None]

    @property
    def root_count(self) -> int:
        return sum(1 for item in self.items if item.parent is None)

    def subtree_size(self, index: int) -> int:
        """Size of the block owned by ``index`` (itself plus all descendants)."""
        item = self.items[index]
        return 1 + sum(self.subtree_size(child) for child in item.children)

    def ancestors(self, index: int) -> Iterator[int]:
        parent = self.items[index].parent
        while parent is not None:
            yield parent
            parent = self.items[parent].parent

    def depth(self, index: int) -> int:
        return sum(1 for _ in self.ancestors(index))

    def root_of(self, index: int) -> int:
        root = index
        for root in self.ancestors(index):
            pass
        return root

    def iter_rows(self) -> Iterator[Tuple[int, int, Item]]:
        """Yield ``(index, depth, item)`` in display order."""
        depths: List[int] = []
        for idx, item in enumerate(self.items):
            depth = 0 if item.parent is None else depths[item.parent] + 1
            depths.append(depth)
            yield idx, depth, item

    # -------------------- navigation --------------------
    def up(self, skip_children: bool = False) -> None:
        if not self.items:
            return
        if skip_children:
            current_root = self.root_of(self.cursor)
            earlier = [idx for idx in self.roots() if idx < current_root]
            self.cursor = earlier[-1] if earlier else current_root
        elif self.cursor > 0:
            self.cursor -= 1

    def down(self, skip_children: bool = False) -> None:
        if not self.items:
            return
        if skip_children:
            current_root = self.root_of(self.cursor)
            later = [idx for idx in self.roots() if idx > current_root]
            self.cursor = later[0] if later else current_root
        else:
            self.cursor = min(self.cursor + 1, len(self.items) - 1)

    def top(self, skip_children: bool = False) -> None:
        self.cursor = 0

    def bottom(self, skip_children: bool = False) -> None:
        if not self.items:
            return
        if skip_children:
            self.cursor = self.roots()[-1]
        else:
            self.cursor = len(self.items) - 1

    def half(self, skip_children: bool = False) -> None:
        roots = self.roots()
        if not roots:
            return
        self.cursor = roots[len(roots) // 2]

    # -------------------- index maintenance --------------------
    def _remap(self, fn: Callable[[int], int]) -> None:
        for item in self.items:
            if item.parent is not None:
                item.parent = _checked(fn(item.parent))
            if item.children:
                item.children = sorted(_checked(fn(child)) for child in item.children)

    def _shift(self, start: int, delta: int) -> None:
        self._remap(lambda idx: idx + delta if idx >= start else idx)

    def _activate_ancestors(self, index: int) -> None:
        # A done ancestor turns active by proxy and counts once more above itself.
        added = 1
        for ancestor_idx in list(self.ancestors(index)):
            ancestor = self.items[ancestor_idx]
            ancestor.active_count += added
            if ancestor.done:
                ancestor.done = False
                added += 1

    def _deactivate_ancestors(self, index: int, count: int) -> None:
        if count <= 0:
            return
        for ancestor_idx in list(self.ancestors(index)):
            ancestor = self.items[ancestor_idx]
            ancestor.active_count = _checked(ancestor.active_count - count)

    def _siblings(self, index: int) -> List[int]:
        parent = self.items[index].parent
        if parent is None:
            return self.roots()
        return list(self.items[parent].children)

    def _swap_blocks(self, first: int, second: int) -> None:
        first_size = self.subtree_size(first)
        second_size = self.subtree_size(second)
        if second != first + first_size:
            raise InvariantError(f"blocks at {first} and {second} are not adjacent")
        end = second + second_size

        def remap(idx: int) -> int:
            if first <= idx < second:
                return idx + second_size
            if second <= idx < end:
                return idx - first_size
            return idx

        self._remap(remap)
        self.items[first:end] = self.items[second:end] + self.items[first:second]

    def _remove_block(self, index: int) -> List[Item]:
        size = self.subtree_size(index)
        block = self.items[index:index + size]
        del self.items[index:index + size]
        self._shift(index + size, -size)
        if self.items:
            self.cursor = min(index, len(self.items) - 1)
        else:
            self.cursor = 0
        return block

    # -------------------- mutations --------------------
    def insert_root(self) -> int:
        """Insert an empty root before the cursor; returns its index."""
        if self.items and not self.items[self.cursor].is_root:
            raise CannotInsert()
        pos = self.cursor if self.items else 0
        self._shift(pos, 1)
        self.items.insert(pos, Item())
        self.cursor = pos
        return pos

    def append_child(self) -> int:
        """Append an empty subtask as the last child of the cursor item."""
        if not self.items:
            raise EmptyList()
        parent = self.cursor
        pos = parent + self.subtree_size(parent)
        self._shift(pos, 1)
        self.items.insert(pos, Item(parent=parent))
        self.items[parent].children.append(pos)
        self._activate_ancestors(pos)
        self.cursor = pos
        return pos

    def delete(self) -> List[Item]:
        """Remove the cursor item together with its subtree block."""
        if not self.items:
            raise EmptyList()
        index = self.cursor
        item = self.items[index]
        if not self.delete_policy.allows(item.is_root):
            raise CannotDelete(policy=self.delete_policy.value)
        size = self.subtree_size(index)
        removed_active = sum(1 for it in self.items[index:index + size] if not it.done)
        if item.parent is not None:
            self._deactivate_ancestors(index, removed_active)
            self.items[item.parent].children.remove(index)
        return self._remove_block(index)

    def mark(self) -> bool:
        """Toggle completion of the cursor item; returns the new ``done`` flag."""
        if not self.items:
            raise EmptyList()
        index = self.cursor
        item = self.items[index]
        if item.done:
            item.done = False
            self._activate_ancestors(index)
            return False
        if item.active_count > 0:
            raise HasActiveSubtasks(count=item.active_count)
        item.done = True
        item.timestamp = now_local()
        self._deactivate_ancestors(index, 1)
        return True

    def drag_up(self) -> None:
        if not self.items:
            raise EmptyList()
        index = self.cursor
        siblings = self._siblings(index)
        pos = siblings.index(index)
        if pos == 0:
            if index == 0 or self.items[index].is_root:
                raise AlreadyAtTop()
            raise CannotLeaveParent()
        previous = siblings[pos - 1]
        self._swap_blocks(previous, index)
        self.cursor = previous

    def drag_down(self) -> None:
        if not self.items:
            raise EmptyList()
        index = self.cursor
        siblings = self._siblings(index)
        pos = siblings.index(index)
        if pos == len(siblings) - 1:
            if index + self.subtree_size(index) >= len(self.items):
                raise AlreadyAtBottom()
            raise CannotLeaveParent()
        following = siblings[pos + 1]
        following_size = self.subtree_size(following)
        self._swap_blocks(index, following)
        self.cursor = index + following_size

    def transfer(self, destination: "TaskList") -> int:
        """Move the cursor root with its subtree to the end of ``destination``.

        Returns the index of the moved root inside ``destination``.
        """
        if not self.items:
            raise EmptyList()
        index = self.cursor
        item = self.items[index]
        if not item.is_root:
            raise NotARoot()
        if item.active_count > 0:
            raise StillActive(count=item.active_count)
        block = self._remove_block(index)
        start = len(destination.items)
        offset = start - index
        for moved in block:
            if moved.parent is not None:
                moved.parent = _checked(moved.parent + offset)
            moved.children = [_checked(child + offset) for child in moved.children]
        block[0].timestamp = now_local()
        destination.items.extend(block)
        return start

    # -------------------- undo history --------------------
    def snapshot(self) -> None:
        self.history.append(([item.copy() for item in self.items], self.cursor))

    def restore(self) -> None:
        if not self.history:
            raise NothingToUndo()
        self.items, self.cursor = self.history.pop()

    def drop_snapshot(self) -> None:
        if self.history:
            self.history.pop()

    def forget_oldest(self) -> None:
        if self.history:
            self.history.pop(0)

    # -------------------- consistency --------------------
    def validate(self) -> None:
        """Raise InvariantError when the index structure is inconsistent."""
        total = len(self.items)
        if total and not 0 <= self.cursor < total:
            raise InvariantError(f"cursor {self.cursor} outside 0..{total - 1}")
        for idx, item in enumerate(self.items):
            if item.parent is not None:
                if not 0 <= item.parent < idx:
                    raise InvariantError(f"item {idx} has parent {item.parent} not before it")
                if idx not in self.items[item.parent].children:
                    raise InvariantError(f"item {idx} missing from children of {item.parent}")
            if item.children != sorted(item.children):
                raise InvariantError(f"children of {idx} are out of order")
            for child in item.children:
                if not idx < child < total or self.items[child].parent != idx:
                    raise InvariantError(f"item {idx} lists {child} as child")
            size = self.subtree_size(idx)
            if idx + size > total:
                raise InvariantError(f"subtree of {idx} runs past the end")
            for inner in range(idx + 1, idx + size):
                if idx not in self.ancestors(inner):
                    raise InvariantError(f"subtree of {idx} is not contiguous at {inner}")
            pending = sum(1 for it in self.items[idx + 1:idx + size] if not it.done)
            if item.active_count != pending:
                raise InvariantError(f"item {idx} counts {item.active_count} active, found {pending}")
            if item.done and pending:
                raise InvariantError(f"item {idx} is done but has unfinished subtasks")


__all__ = ["TaskList", "Snapshot"]
