"""Single-line text buffer editing used while an item is being edited."""

from enum import Enum
from typing import Optional, Tuple


class EditKey(Enum):
    CHAR = "char"
    LEFT = "left"
    RIGHT = "right"
    HOME = "home"
    END = "end"
    BACKSPACE = "backspace"
    DELETE = "delete"


def is_insertable(char: Optional[str]) -> bool:
    return bool(char) and len(char) == 1 and char.isprintable()


def apply_edit(text: str, cursor: int, key: EditKey, char: Optional[str] = None) -> Tuple[str, int]:
    """Apply one key to ``text`` with the caret at ``cursor``.

    Returns the new ``(text, cursor)``; the caret is clamped to the text first.
    Non-printable characters are ignored.
    """
    cursor = max(0, min(cursor, len(text)))
    if key is EditKey.LEFT:
        return text, max(0, cursor - 1)
    if key is EditKey.RIGHT:
        return text, min(len(text), cursor + 1)
    if key is EditKey.HOME:
        return text, 0
    if key is EditKey.END:
        return text, len(text)
    if key is EditKey.BACKSPACE:
        if cursor == 0:
            return text, cursor
        return text[:cursor - 1] + text[cursor:], cursor - 1
    if key is EditKey.DELETE:
        return text[:cursor] + text[cursor + 1:], cursor
    if key is EditKey.CHAR:
        if not is_insertable(char):
            return text, cursor
        return text[:cursor] + char + text[cursor:], cursor + 1
    return text, cursor


__all__ = ["EditKey", "apply_edit", "is_insertable"]
