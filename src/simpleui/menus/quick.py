"""Menus answered with a single keypress."""

from typing import Optional

from simpleui.menus.menu import Menu
from simpleui.ui.styles import Style
from simpleui.utils.constants import INVALID_OPTION_MESSAGE


class QuickMenu(Menu):
    """Menu that reads one key instead of a line.

    Only options 0-9 can be reached.
    """

    def _next_option(self) -> Optional[int]:
        return ord(self._terminal.read_key()) - ord("0")

    def _reject_option(self) -> None:
        self._terminal.write(INVALID_OPTION_MESSAGE, style=Style.ERROR)
