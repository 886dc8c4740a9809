"""Menus that can only be entered from a parent menu.

A SubMenu wraps a Menu (a SubQuickMenu wraps a QuickMenu) and exposes the
builder methods plus invoke(), which is what a parent's add_submenu()
action calls. There is no run().
"""

from typing import Optional

from simpleui.menus.actions import Invokable
from simpleui.menus.base import Action, HeaderRenderer
from simpleui.menus.menu import Menu
from simpleui.menus.quick import QuickMenu
from simpleui.ui.terminal import Terminal
from simpleui.utils.constants import BACK_LABEL


class SubMenu:
    """Numbered submenu whose option 0 is "Back"."""

    _menu_class: type[Menu] = Menu

    def __init__(self, prompt: str = "", *, terminal: Optional[Terminal] = None):
        self._menu = self._menu_class(prompt, terminal=terminal)
        self._menu._set_reserved_label(BACK_LABEL)

    def add_option(self, label: str, action: Action) -> "SubMenu":
        self._menu.add_option(label, action)
        return self

    def add_submenu(
        self, label: str, submenu: Invokable, borrowed: bool = False
    ) -> "SubMenu":
        self._menu.add_submenu(label, submenu, borrowed=borrowed)
        return self

    def set_header(self, header: HeaderRenderer) -> "SubMenu":
        self._menu.set_header(header)
        return self

    def set_title(self, prompt: str) -> "SubMenu":
        self._menu.set_title(prompt)
        return self

    @property
    def title(self) -> str:
        return self._menu.title

    @property
    def options(self) -> tuple[str, ...]:
        return self._menu.options

    @property
    def actions(self) -> tuple[Action, ...]:
        return self._menu.actions

    def get_title(self, index: int) -> str:
        return self._menu.get_title(index)

    def recall_option(self) -> int:
        return self._menu.recall_option()

    def recall_string(self) -> str:
        return self._menu.recall_string()

    def invoke(self) -> None:
        """Run the submenu loop until "Back" is chosen."""
        self._menu.run()


class SubQuickMenu(SubMenu):
    """Quick (single keypress) submenu whose option 0 is "Back"."""

    _menu_class = QuickMenu
