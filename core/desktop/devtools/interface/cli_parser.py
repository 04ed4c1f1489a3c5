"""CLI parser construction for the todo CLI/TUI."""

import argparse
from typing import Any, Mapping

from core.desktop.devtools.interface.constants import HELP


def build_parser(commands: Any, themes: Mapping[str, Any], default_theme: str, default_file: str) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="todo",
        description="todo — two-panel task manager with nested subtasks",
        epilog=HELP,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("-f", "--file", default=default_file, help=f"todo file to open (default: {default_file})")
    parser.add_argument("--theme", choices=list(themes.keys()), default=default_theme, help="color palette")
    parser.add_argument("--lang", choices=["en", "ru"], help="interface language")
    parser.add_argument("--version", action="store_true", help="show version and exit")
    parser.set_defaults(func=commands.cmd_run)

    sub = parser.add_subparsers(dest="command", help="commands")

    tui_p = sub.add_parser("tui", help="open the interactive editor (default)")
    tui_p.set_defaults(func=commands.cmd_run)

    show_p = sub.add_parser("show", help="print the parsed file and exit")
    show_p.add_argument("--active-only", action="store_true", help="skip completed tasks")
    show_p.set_defaults(func=commands.cmd_show)

    return parser


__all__ = ["build_parser"]
