#!/usr/bin/env python3
"""Thin loader delegating CLI/TUI logic to the interface layer."""

import sys

from core.desktop.devtools.interface import todo_app as _todo_app

main = _todo_app.main

if __name__ == "__main__":
    sys.exit(_todo_app.main())
