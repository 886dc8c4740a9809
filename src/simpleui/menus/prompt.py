"""Prompts for a single validated string."""

from typing import Callable, Optional

from simpleui.menus.base import MenuBase
from simpleui.ui.styles import Style
from simpleui.ui.terminal import Terminal
from simpleui.utils.constants import INPUT_MARKER, INVALID_INPUT_MESSAGE
from simpleui.utils.debug import debug_input

Validator = Callable[[str], bool]


def _accept_all(value: str) -> bool:
    return True


class Prompt(MenuBase):
    """Ask for a string until is_valid accepts it.

    Args:
        prompt: Question shown above the input marker
        is_valid: Predicate for accepted input (default: accept anything)
        whole_line: Read the whole line (spaces included) rather than one word
        terminal: Terminal to use instead of the shared one

    Example:
        age = Prompt("Age?", str.isdigit).get()
    """

    def __init__(
        self,
        prompt: str,
        is_valid: Optional[Validator] = None,
        *,
        whole_line: bool = True,
        terminal: Optional[Terminal] = None,
    ):
        super().__init__(prompt, terminal=terminal)
        self._is_valid = is_valid or _accept_all
        self._whole_line = whole_line

    def _render(self) -> None:
        self._render_preamble()
        self._terminal.write(INPUT_MARKER, end="")

    def get(self) -> str:
        """Return the first input that passes validation."""
        self._terminal.clear()
        value = self._read_string(self._whole_line)
        while not self._is_valid(value):
            debug_input("rejected", value=value)
            self._terminal.write(INVALID_INPUT_MESSAGE, style=Style.ERROR)
            value = self._read_string(self._whole_line)
        self._terminal.clear()
        return value
