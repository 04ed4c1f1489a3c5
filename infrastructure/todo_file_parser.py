import re
from datetime import datetime
from pathlib import Path
from typing import List, Optional, Tuple

from core import Item, TaskList, now_local
from core.desktop.devtools.interface.constants import INDENT, SEPARATOR, TIMESTAMP_FORMAT


class TodoParseError(Exception):
    """Malformed todo file; carries the source path and 1-based line number."""

    def __init__(self, path: str, line_no: int, reason: str):
        self.path = path
        self.line_no = line_no
        self.reason = reason
        super().__init__(f"{path}:{line_no}: {reason}")


class _TreeBuilder:
    """Collects one section of indented lines into a pre-order item list."""

    def __init__(self, source: str):
        self.source = source
        self.items: List[Item] = []
        self.line_numbers: List[int] = []
        self.path: List[int] = []  # indices of the previous line's ancestors + itself

    def add(self, line_no: int, depth: int, item: Item) -> None:
        if depth > len(self.path):
            raise TodoParseError(self.source, line_no, "indentation jumps more than one level")
        idx = len(self.items)
        item.parent = self.path[depth - 1] if depth else None
        if item.parent is not None:
            self.items[item.parent].children.append(idx)
        self.items.append(item)
        self.line_numbers.append(line_no)
        self.path = self.path[:depth] + [idx]

    def build(self) -> TaskList:
        task_list = TaskList(self.items)
        for idx, item in enumerate(self.items):
            if item.done:
                continue
            for ancestor in task_list.ancestors(idx):
                task_list.items[ancestor].active_count += 1
        for idx, item in enumerate(self.items):
            if item.done and item.active_count:
                raise TodoParseError(self.source, self.line_numbers[idx], "finished item has unfinished subtasks")
        return task_list


class TodoFileParser:
    TODO_PATTERN = re.compile(r"^(?P<indent>(?:    )*)TODO\((?P<mark>[*x]?)\): (?P<text>.+)$")
    DONE_PATTERN = re.compile(
        r"^(?P<indent>(?:    )*)DONE\((?P<stamp>\d{4}-\d{2}-\d{2} \d{2}:\d{2} [+-]\d{4})\): (?P<text>.+)$"
    )

    @staticmethod
    def _depth(indent: str) -> int:
        return len(indent) // len(INDENT)

    @staticmethod
    def _parse_timestamp(value: str) -> Optional[datetime]:
        try:
            return datetime.strptime(value, TIMESTAMP_FORMAT)
        except ValueError:
            return None

    @classmethod
    def parse_text(cls, content: str, source: str = "<string>") -> Tuple[TaskList, TaskList]:
        """Parse file content into ``(active, completed)`` lists."""
        active = _TreeBuilder(source)
        completed = _TreeBuilder(source)
        seen_separator = False

        for line_no, line in enumerate(content.splitlines(), start=1):
            if line == SEPARATOR:
                if seen_separator:
                    raise TodoParseError(source, line_no, "duplicate separator")
                seen_separator = True
                continue
            todo = cls.TODO_PATTERN.match(line)
            if todo:
                if seen_separator:
                    raise TodoParseError(source, line_no, "TODO item after the separator")
                item = Item(text=todo.group("text"), timestamp=now_local(), done=todo.group("mark") == "x")
                active.add(line_no, cls._depth(todo.group("indent")), item)
                continue
            done = cls.DONE_PATTERN.match(line)
            if done:
                if not seen_separator:
                    raise TodoParseError(source, line_no, "DONE item before the separator")
                stamp = cls._parse_timestamp(done.group("stamp"))
                if stamp is None:
                    raise TodoParseError(source, line_no, f"invalid timestamp '{done.group('stamp')}'")
                item = Item(text=done.group("text"), timestamp=stamp, done=True)
                completed.add(line_no, cls._depth(done.group("indent")), item)
                continue
            raise TodoParseError(source, line_no, "invalid format")

        return active.build(), completed.build()

    @classmethod
    def parse(cls, filepath: Path) -> Tuple[TaskList, TaskList]:
        raw = Path(filepath).read_bytes()
        try:
            content = raw.decode("utf-8")
        except UnicodeDecodeError as exc:
            line_no = raw[:exc.start].count(b"\n") + 1
            raise TodoParseError(str(filepath), line_no, "invalid UTF-8") from exc
        return cls.parse_text(content, source=str(filepath))

    @staticmethod
    def _todo_mark(item: Item) -> str:
        if item.done:
            return "x"
        return "*" if item.active_count > 0 else ""

    @classmethod
    def serialize(cls, active: TaskList, completed: TaskList) -> str:
        lines: List[str] = []
        for _, depth, item in active.iter_rows():
            lines.append(f"{INDENT * depth}TODO({cls._todo_mark(item)}): {item.text}")
        lines.append(SEPARATOR)
        for _, depth, item in completed.iter_rows():
            stamp = item.timestamp.strftime(TIMESTAMP_FORMAT)
            lines.append(f"{INDENT * depth}DONE({stamp}): {item.text}")
        return "\n".join(lines) + "\n"


__all__ = ["TodoFileParser", "TodoParseError"]
