"""Numbered menus answered with a line of input."""

import re
from typing import Optional

from simpleui.menus.actions import Invokable, SubmenuAction
from simpleui.menus.base import Action, MenuBase
from simpleui.ui.styles import Style
from simpleui.utils.constants import INPUT_MARKER, INVALID_OPTION_MESSAGE, NO_SELECTION
from simpleui.utils.debug import debug_input, debug_menu

# Plain decimal integers only
OPTION_PATTERN = re.compile(r"[+-]?[0-9]+")


class Menu(MenuBase):
    """A numbered menu.

    Example:
        Menu("Main").add_option("Say hi", say_hi).add_submenu("More", more).run()
    """

    def add_option(self, label: str, action: Action) -> "Menu":
        """Append an option. Labels need not be unique."""
        self._options.append(label)
        self._actions.append(action)
        return self

    def add_submenu(
        self, label: str, submenu: Invokable, borrowed: bool = False
    ) -> "Menu":
        """Append an option that enters submenu.

        Args:
            label: Option label
            submenu: Menu, SubMenu or anything else with invoke()
            borrowed: Hold only a weak reference to submenu
        """
        return self.add_option(label, SubmenuAction(label, submenu, borrowed=borrowed))

    def read_string(self) -> str:
        """Show the menu and return one whitespace-delimited word."""
        return self._read_string()

    def recall_string(self) -> str:
        """Last value returned by read_string()."""
        return self._prev_string

    def recall_option(self) -> int:
        """Last value returned by read_option(), -1 before the first read."""
        return self._prev_option

    def _next_option(self) -> Optional[int]:
        token = self._terminal.read_token()
        if not OPTION_PATTERN.fullmatch(token):
            debug_input("not a number", token=token)
            return None
        return int(token)

    def _is_valid_option(self, option: Optional[int]) -> bool:
        return option is not None and 0 <= option < len(self._options)

    def _reject_option(self) -> None:
        self._terminal.write(INVALID_OPTION_MESSAGE, style=Style.ERROR)
        self._terminal.write(INPUT_MARKER, end="")

    def read_option(self) -> int:
        """Read until a valid option index is entered, then return it.

        Numbers out of range and anything that is not a number print
        "Invalid option." and ask again without redrawing the menu.
        """
        option = self._next_option()
        while not self._is_valid_option(option):
            self._reject_option()
            option = self._next_option()

        self._terminal.newline()
        self._prev_option = option
        return option

    def run(self) -> None:
        """Show the menu and dispatch selections until option 0 is chosen."""
        debug_menu("enter", title=self._prompt)
        self._terminal.clear()
        self._render()

        option = NO_SELECTION
        while option != 0:
            option = self.read_option()
            self._terminal.clear()
            debug_menu("dispatch", option=option, label=self._options[option])
            self._actions[option]()
            if option != 0:
                self._render()

        debug_menu("leave", title=self._prompt)

    def invoke(self) -> None:
        """Enter the menu from a parent menu's action."""
        self.run()
