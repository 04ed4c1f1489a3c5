#!/usr/bin/env python3
"""
todo.py — two-panel terminal task manager with nested subtasks.

Active tasks and completed tasks live in one plain-text file (``TODO`` by
default). This module wires the file repository, the engine and the TUI.
"""

import os
import sys
from importlib.metadata import PackageNotFoundError, version as pkg_version
from pathlib import Path
from typing import List, Optional

from config import get_default_file, get_delete_policies, get_history_limit, get_user_theme
from core import Panel
from core.desktop.devtools.application.todo_engine import TodoEngine
from core.desktop.devtools.interface.cli_parser import build_parser as build_cli_parser
from core.desktop.devtools.interface.constants import INDENT
from core.desktop.devtools.interface.i18n import translate
from core.desktop.devtools.interface.tui_app import cmd_tui
from core.desktop.devtools.interface.tui_themes import DEFAULT_THEME, THEMES
from infrastructure.file_repository import FileTodoRepository
from infrastructure.todo_file_parser import TodoParseError


def build_engine(repository: FileTodoRepository) -> TodoEngine:
    """Load the file and build an engine with the configured limits and policies."""
    result = repository.load()
    engine = TodoEngine(
        result.active,
        result.completed,
        history_limit=get_history_limit(),
        delete_policies=get_delete_policies(),
    )
    key = "STATUS_LOADED" if result.existed else "STATUS_NEW_FILE"
    engine.set_status(key, path=str(repository.path))
    return engine


def cmd_run(args) -> int:
    repository = FileTodoRepository(Path(args.file))
    engine = build_engine(repository)
    cmd_tui(engine, file_label=str(repository.path), theme=args.theme)
    repository.save(engine.active, engine.completed)
    print(translate("STATUS_SAVED", path=str(repository.path)))
    return 0


def format_lists(engine: TodoEngine, active_only: bool = False) -> List[str]:
    panels = [Panel.ACTIVE] if active_only else list(Panel)
    lines: List[str] = []
    for panel in panels:
        task_list = engine.list_for(panel)
        lines.append(f"{translate(f'PANEL_{panel.value}')} ({task_list.root_count})")
        if task_list.is_empty():
            lines.append(f"{INDENT}{translate('PANEL_EMPTY')}")
        for _, depth, item in task_list.iter_rows():
            mark = "x" if item.done else " "
            lines.append(f"{INDENT * (depth + 1)}- [{mark}] {item.text}")
    return lines


def cmd_show(args) -> int:
    repository = FileTodoRepository(Path(args.file))
    engine = build_engine(repository)
    for line in format_lists(engine, active_only=getattr(args, "active_only", False)):
        print(line)
    return 0


def build_parser():
    """Build CLI argument parser."""
    default_theme = get_user_theme()
    if default_theme not in THEMES:
        default_theme = DEFAULT_THEME
    return build_cli_parser(
        commands=sys.modules[__name__],
        themes=THEMES,
        default_theme=default_theme,
        default_file=get_default_file(),
    )


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.version:
        try:
            print(pkg_version("nested-todo"))
        except PackageNotFoundError:
            print("0.0.0")
        return 0
    if args.lang:
        os.environ["TODO_LANG"] = args.lang
    try:
        return args.func(args)
    except TodoParseError as exc:
        print(f"[ERROR]: {exc.path}:{exc.line_no}: {exc.reason}", file=sys.stderr)
        return 1
    except OSError as exc:
        print(f"[ERROR]: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
