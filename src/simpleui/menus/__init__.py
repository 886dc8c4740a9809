"""Menu types."""

from simpleui.menus.actions import Invokable, SubmenuAction
from simpleui.menus.menu import Menu
from simpleui.menus.prompt import Prompt
from simpleui.menus.quick import QuickMenu
from simpleui.menus.submenu import SubMenu, SubQuickMenu

__all__ = [
    "Invokable",
    "Menu",
    "Prompt",
    "QuickMenu",
    "SubMenu",
    "SubQuickMenu",
    "SubmenuAction",
]
