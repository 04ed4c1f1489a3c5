#!/usr/bin/env python3
"""TUI themes and styling."""

from typing import Dict, List

from prompt_toolkit.styles import Style

# Style classes shared by every theme; themes override colors only.
BASE_PALETTE: Dict[str, str] = {
    "editing.caret": "reverse",
    "header": "#ffb347 bold",
    "border": "#4b525a",
}

THEMES: Dict[str, Dict[str, str]] = {
    "dark-olive": {
        "": "#d7dfe6",
        "item.todo": "#e06c75",
        "item.partial": "#e5c07b",
        "item.done": "#9ad974",
        "text": "#d7dfe6",
        "text.dim": "#97a0a9",
        "selected": "bg:#9ad974 #1c1c1c bold",
        "selected.inactive": "bg:#3b3b3b #d7dfe6",
        "editing": "bg:#3b3b3b #ffffff",
        "header.focused": "bg:#ffb347 #1c1c1c bold",
        "status": "#e5c07b",
    },
    "dark-contrast": {
        "": "#e8eaec",
        "item.todo": "#ff6b6b",
        "item.partial": "#f0c674",
        "item.done": "#b8f171",
        "text": "#e8eaec",
        "text.dim": "#a7b0ba",
        "selected": "bg:#00afaf #000000 bold",
        "selected.inactive": "bg:#3d4047 #e8eaec",
        "editing": "bg:#3d4047 #ffffff",
        "header.focused": "bg:#ffffff #000000 bold",
        "status": "#f0c674 bold",
        "border": "#5a6169",
    },
    "light": {
        "": "#24292f",
        "item.todo": "#cf222e",
        "item.partial": "#9a6700",
        "item.done": "#1a7f37",
        "text": "#24292f",
        "text.dim": "#6e7781",
        "selected": "bg:#0969da #ffffff bold",
        "selected.inactive": "bg:#d0d7de #24292f",
        "editing": "bg:#fff8c5 #24292f",
        "header": "#8250df bold",
        "header.focused": "bg:#8250df #ffffff bold",
        "status": "#9a6700 bold",
        "border": "#d0d7de",
    },
}

DEFAULT_THEME = "dark-olive"


def theme_names() -> List[str]:
    return sorted(THEMES)


def get_theme_palette(theme: str) -> Dict[str, str]:
    """Full palette for ``theme``; unknown names get the default theme."""
    palette = dict(BASE_PALETTE)
    palette.update(THEMES.get(theme) or THEMES[DEFAULT_THEME])
    return palette


def build_style(theme: str) -> Style:
    return Style.from_dict(get_theme_palette(theme))
