"""Formatted-text builders for the two panels, the header and the footer."""

from typing import List, Tuple

from prompt_toolkit.formatted_text import FormattedText
from wcwidth import wcwidth

from core import Item, Panel
from core.desktop.devtools.application.todo_engine import Mode, TodoEngine
from core.desktop.devtools.interface.constants import INDENT
from core.desktop.devtools.interface.i18n import translate

Fragments = List[Tuple[str, str]]


def cell_width(text: str) -> int:
    return sum(max(wcwidth(ch), 0) for ch in text)


def truncate(text: str, max_cells: int) -> str:
    """Cut ``text`` so it occupies at most ``max_cells`` terminal cells."""
    out: List[str] = []
    used = 0
    for ch in text:
        width = max(wcwidth(ch), 0)
        if used + width > max_cells:
            break
        out.append(ch)
        used += width
    return "".join(out)


def item_style(item: Item) -> str:
    if item.done:
        return "class:item.done"
    if item.active_count:
        return "class:item.partial"
    return "class:item.todo"


def item_prefix(item: Item, depth: int) -> str:
    return f"{INDENT * depth}- [{'x' if item.done else ' '}] "


def _editing_fragments(prefix: str, text: str, cursor: int, width: int) -> Fragments:
    # Keep the caret visible when the text is wider than the panel.
    room = max(1, width - cell_width(prefix) - 1)
    start = 0
    while start < cursor and cell_width(text[start:cursor]) >= room:
        start += 1
    visible = truncate(text[start:], room)
    caret = cursor - start
    before, at, after = visible[:caret], visible[caret:caret + 1] or " ", visible[caret + 1:]
    return [
        ("class:editing", prefix + before),
        ("class:editing.caret", at),
        ("class:editing", after),
    ]


def render_panel(engine: TodoEngine, panel: Panel, width: int) -> FormattedText:
    task_list = engine.list_for(panel)
    focused = engine.focus is panel
    title = translate(f"PANEL_{panel.value}")
    parts: Fragments = [
        ("class:header.focused" if focused else "class:header", f" {title} "),
        ("", "\n"),
        ("class:border", "─" * max(0, width)),
        ("", "\n"),
    ]
    if task_list.is_empty():
        parts.append(("class:text.dim", translate("PANEL_EMPTY")))
        return FormattedText(parts)

    editing = engine.edit is not None and engine.edit.panel is panel
    for idx, depth, item in task_list.iter_rows():
        if depth and not engine.show_subtasks:
            continue
        prefix = item_prefix(item, depth)
        selected = idx == task_list.cursor
        if selected and editing:
            parts.extend(_editing_fragments(prefix, item.text, engine.edit.cursor, width))
            parts.append(("", "\n"))
            continue
        suffix = ""
        if panel is Panel.COMPLETED and depth == 0:
            suffix = f"  ({item.timestamp.strftime('%Y-%m-%d')})"
        if not engine.show_subtasks and item.children:
            suffix += " " + translate("HIDDEN_SUBTASKS", count=task_list.subtree_size(idx) - 1)
        line = truncate(prefix + item.text + suffix, width)
        if selected:
            style = "class:selected" if focused else "class:selected.inactive"
        else:
            style = item_style(item)
        parts.append((style, line))
        parts.append(("", "\n"))
    return FormattedText(parts)


def render_header(engine: TodoEngine, file_label: str) -> FormattedText:
    mode_key = "MODE_EDITING" if engine.mode is Mode.EDITING else "MODE_NORMAL"
    parts: Fragments = []
    for panel in Panel:
        name = translate(f"PANEL_{panel.value}")
        label = f"[{name}]" if engine.focus is panel else f" {name} "
        parts.append(("class:header" if engine.focus is panel else "class:text.dim", label))
    parts.append(("class:text.dim", f"  {file_label}  "))
    parts.append(("class:status", translate(mode_key)))
    return FormattedText(parts)


def render_footer(engine: TodoEngine) -> FormattedText:
    hints_key = "FOOTER_EDITING" if engine.mode is Mode.EDITING else "FOOTER_NORMAL"
    return FormattedText([
        ("class:status", engine.status_message or " "),
        ("", "\n"),
        ("class:text.dim", translate(hints_key)),
    ])


__all__ = ["render_panel", "render_header", "render_footer", "truncate", "cell_width"]
