from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional


def now_local() -> datetime:
    """Current local time, minute precision, timezone-aware."""
    return datetime.now().astimezone().replace(second=0, microsecond=0)


@dataclass
class Item:
    text: str = ""
    timestamp: datetime = field(default_factory=now_local)
    parent: Optional[int] = None  # absolute index of the parent in the owning list
    children: List[int] = field(default_factory=list)
    active_count: int = 0  # not-done descendants, all depths
    done: bool = False

    @property
    def is_root(self) -> bool:
        return self.parent is None

    def copy(self) -> "Item":
        return Item(
            text=self.text,
            timestamp=self.timestamp,
            parent=self.parent,
            children=list(self.children),
            active_count=self.active_count,
            done=self.done,
        )
