import logging
from pathlib import Path

from core import TaskList
from application.ports import LoadResult, TodoRepository
from infrastructure.todo_file_parser import TodoFileParser

logger = logging.getLogger("todo.storage")


class FileTodoRepository(TodoRepository):
    def __init__(self, path: Path):
        self.path = Path(path).expanduser()

    def load(self) -> LoadResult:
        """Load both lists; a missing file yields empty lists.

        ``TodoParseError`` and any ``OSError`` other than a missing file
        propagate to the caller.
        """
        try:
            active, completed = TodoFileParser.parse(self.path)
        except FileNotFoundError:
            logger.info("%s does not exist yet, starting empty", self.path)
            return LoadResult(active=TaskList(), completed=TaskList(), existed=False)
        return LoadResult(active=active, completed=completed, existed=True)

    def save(self, active: TaskList, completed: TaskList) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(TodoFileParser.serialize(active, completed), encoding="utf-8")
        logger.info("Saved %d active and %d completed items to %s", len(active), len(completed), self.path)
