"""Terminal plumbing shared by all menus."""

from simpleui.ui.keyboard import KeyReader, raw_mode
from simpleui.ui.styles import Style
from simpleui.ui.terminal import (
    Terminal,
    TokenReader,
    clear_screen,
    get_terminal,
    set_terminal,
)

__all__ = [
    "KeyReader",
    "Style",
    "Terminal",
    "TokenReader",
    "clear_screen",
    "get_terminal",
    "raw_mode",
    "set_terminal",
]
