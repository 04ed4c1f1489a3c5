#!/usr/bin/env python3
"""Interactive two-panel TUI built on prompt_toolkit."""

import os
import shutil
from typing import Dict, Optional, Tuple

from prompt_toolkit.application import Application
from prompt_toolkit.filters import Condition
from prompt_toolkit.key_binding import KeyBindings
from prompt_toolkit.keys import Keys
from prompt_toolkit.layout import HSplit, Layout, VSplit, Window
from prompt_toolkit.layout.controls import FormattedTextControl
from prompt_toolkit.layout.dimension import Dimension

from core import Panel
from core.desktop.devtools.application.commands import Command, dispatch
from core.desktop.devtools.application.todo_engine import Mode, TodoEngine
from core.desktop.devtools.interface.tui_render import render_footer, render_header, render_panel
from core.desktop.devtools.interface.tui_themes import DEFAULT_THEME, build_style

# Cyrillic aliases keep the bindings usable with a Russian keyboard layout.
NORMAL_KEYS: Dict[Command, Tuple[str, ...]] = {
    Command.MOVE_UP: ("up", "k", "л"),
    Command.MOVE_DOWN: ("down", "j", "о"),
    Command.JUMP_TOP: ("g", "п", "home"),
    Command.JUMP_BOTTOM: ("G", "П", "end"),
    Command.JUMP_HALF: ("h", "р"),
    Command.DRAG_UP: ("K", "Л", "s-up"),
    Command.DRAG_DOWN: ("J", "О", "s-down"),
    Command.TOGGLE_FOCUS: ("tab",),
    Command.TOGGLE_SUBTASK_VISIBILITY: ("s", "ы"),
    Command.MARK: ("enter", "space"),
    Command.DELETE: ("d", "в", "delete"),
    Command.BEGIN_INSERT: ("i", "ш"),
    Command.BEGIN_APPEND: ("a", "ф"),
    Command.BEGIN_EDIT: ("e", "у"),
    Command.UNDO: ("u", "г"),
    Command.QUIT: ("q", "й", "escape", "c-c"),
}

EDITING_KEYS: Dict[Command, Tuple[str, ...]] = {
    Command.CURSOR_LEFT: ("left",),
    Command.CURSOR_RIGHT: ("right",),
    Command.CURSOR_HOME: ("home", "c-a"),
    Command.CURSOR_END: ("end", "c-e"),
    Command.BACKSPACE: ("backspace",),
    Command.DELETE_FORWARD: ("delete",),
    Command.COMMIT: ("enter",),
    Command.CANCEL: ("escape", "c-c"),
}


class TodoTUI:
    """Full-screen view over a ``TodoEngine``; every key becomes one ``Command``."""

    def __init__(self, engine: TodoEngine, file_label: str = "", theme: str = DEFAULT_THEME):
        self.engine = engine
        self.file_label = file_label
        self.theme_name = theme
        self.style = build_style(theme)

        kb = self._build_key_bindings()

        self.status_bar = Window(
            content=FormattedTextControl(lambda: render_header(self.engine, self.file_label)),
            height=1,
            always_hide_cursor=True,
        )
        self.active_window = Window(
            content=FormattedTextControl(lambda: render_panel(self.engine, Panel.ACTIVE, self.panel_width())),
            always_hide_cursor=True,
            wrap_lines=False,
            width=Dimension(weight=1),
        )
        self.completed_window = Window(
            content=FormattedTextControl(lambda: render_panel(self.engine, Panel.COMPLETED, self.panel_width())),
            always_hide_cursor=True,
            wrap_lines=False,
            width=Dimension(weight=1),
        )
        self.footer = Window(
            content=FormattedTextControl(lambda: render_footer(self.engine)),
            height=Dimension(min=2, max=2),
            always_hide_cursor=True,
        )
        body = VSplit([self.active_window, Window(width=1, char="│", style="class:border"), self.completed_window])
        root = HSplit([self.status_bar, body, self.footer])

        self.app = Application(
            layout=Layout(root),
            key_bindings=kb,
            style=self.style,
            full_screen=True,
        )
        # prompt_toolkit waits 0.5s by default to tell a lone Escape from an
        # ANSI sequence; Escape is quit/cancel here so keep it snappy.
        try:
            self.app.ttimeoutlen = max(0.0, float(os.getenv("TODO_TUI_TTIMEOUTLEN", "0.05")))
        except ValueError:
            self.app.ttimeoutlen = 0.05

    @staticmethod
    def get_terminal_width() -> int:
        """Get current terminal width, default to 100 if unavailable."""
        return shutil.get_terminal_size((100, 24)).columns

    def panel_width(self) -> int:
        return max(10, (self.get_terminal_width() - 1) // 2)

    def handle(self, command: Command, char: Optional[str] = None) -> None:
        if not dispatch(self.engine, command, char):
            self.app.exit()

    def _bind(self, kb: KeyBindings, key: str, command: Command, flt) -> None:
        # Escape must fire immediately instead of waiting for a longer sequence.
        @kb.add(key, filter=flt, eager=key == "escape")
        def _(event):
            self.handle(command)

    def _build_key_bindings(self) -> KeyBindings:
        kb = KeyBindings()
        not_editing = Condition(lambda: self.engine.mode is Mode.NORMAL)
        editing_active = Condition(lambda: self.engine.mode is Mode.EDITING)

        for command, keys in NORMAL_KEYS.items():
            for key in keys:
                self._bind(kb, key, command, not_editing)
        for command, keys in EDITING_KEYS.items():
            for key in keys:
                self._bind(kb, key, command, editing_active)

        @kb.add(Keys.Any, filter=editing_active)
        def _(event):
            """Printable characters are typed into the item being edited."""
            self.handle(Command.TYPE_CHAR, event.data)

        return kb

    def run(self) -> None:
        self.app.run()


def cmd_tui(engine: TodoEngine, file_label: str, theme: str = DEFAULT_THEME) -> int:
    tui = TodoTUI(engine, file_label=file_label, theme=theme)
    tui.run()
    return 0


__all__ = ["TodoTUI", "cmd_tui", "NORMAL_KEYS", "EDITING_KEYS"]
