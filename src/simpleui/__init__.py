"""simpleui - Numbered, quick-key and prompt console menus."""

from importlib.metadata import version

__version__ = version("simpleui")

from simpleui.menus import Menu, Prompt, QuickMenu, SubMenu, SubQuickMenu
from simpleui.ui import Style, Terminal, clear_screen

__all__ = [
    "Menu",
    "Prompt",
    "QuickMenu",
    "Style",
    "SubMenu",
    "SubQuickMenu",
    "Terminal",
    "clear_screen",
]
