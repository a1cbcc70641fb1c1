"""Keyboard shortcut bindings for toolbar result rows.

The first nine rows bind to the platform modifier plus ``1``-``9``. Later
rows use letters, skipping A, C, V and X (select all and clipboard keys in
the input field).
"""
# Author: Rich Lewis - GitHub: @RichLewis007

from __future__ import annotations

import sys

DIGIT_SHORTCUTS = 9
LETTER_SHORTCUTS = "BDEFGHIJKLMNOPQRSTUWYZ"


def shortcut_key(index: int) -> str | None:
    """Key bound to the result at ``index``, or None when it has none."""
    if index < 0:
        return None
    if index < DIGIT_SHORTCUTS:
        return str(index + 1)
    letter_index = index - DIGIT_SHORTCUTS
    if letter_index < len(LETTER_SHORTCUTS):
        return LETTER_SHORTCUTS[letter_index]
    return None


def index_for_key(key: str) -> int | None:
    """Result index bound to ``key`` (a digit or letter), or None."""
    if len(key) != 1:
        return None
    if key.isdigit():
        number = int(key)
        return number - 1 if 1 <= number <= DIGIT_SHORTCUTS else None
    position = LETTER_SHORTCUTS.find(key.upper())
    if position < 0:
        return None
    return DIGIT_SHORTCUTS + position


def modifier_label(platform: str | None = None) -> str:
    """Display name of the shortcut modifier for ``platform``."""
    platform = platform or sys.platform
    return "⌘" if platform == "darwin" else "Ctrl"
