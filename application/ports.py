from dataclasses import dataclass
from typing import Protocol

from core import TaskList


@dataclass
class LoadResult:
    active: TaskList
    completed: TaskList
    existed: bool = True


class TodoRepository(Protocol):
    def load(self) -> LoadResult:
        ...

    def save(self, active: TaskList, completed: TaskList) -> None:
        ...
