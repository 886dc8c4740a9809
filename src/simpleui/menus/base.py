"""State and rendering shared by menus and prompts."""

import io
from contextlib import redirect_stdout
from typing import Any, Callable, Optional

from rich.text import Text

from simpleui.ui.styles import Style
from simpleui.ui.terminal import Terminal, get_terminal
from simpleui.utils.constants import EXIT_LABEL, INPUT_MARKER, NO_SELECTION

Action = Callable[[], Any]
HeaderRenderer = Callable[[], Any]


class MenuBase:
    """Prompt text, numbered options and an optional header.

    Option 0 is reserved for leaving the menu and its action clears the
    display. Options and actions always have the same length.
    """

    def __init__(self, prompt: str = "", *, terminal: Optional[Terminal] = None):
        self._terminal = terminal or get_terminal()
        self._prompt = prompt
        self._options: list[str] = [EXIT_LABEL]
        self._actions: list[Action] = [self._terminal.clear]
        self._header: Optional[HeaderRenderer] = None
        self._prev_option = NO_SELECTION
        self._prev_string = ""

    @property
    def title(self) -> str:
        return self._prompt

    @property
    def options(self) -> tuple[str, ...]:
        return tuple(self._options)

    @property
    def actions(self) -> tuple[Action, ...]:
        return tuple(self._actions)

    @property
    def terminal(self) -> Terminal:
        return self._terminal

    def get_title(self, index: int) -> str:
        """Label of option index."""
        return self._options[index]

    def set_header(self, header: HeaderRenderer):
        """Render header on every redraw, between the prompt and the options.

        Whatever the header returns (text or a rich renderable) is printed;
        None prints nothing.
        """
        self._header = header
        return self

    def set_title(self, prompt: str):
        self._prompt = prompt
        return self

    def _set_reserved_label(self, label: str) -> None:
        self._options[0] = label

    def _render_preamble(self) -> None:
        if self._prompt:
            self._terminal.write(self._prompt)
        if self._header is not None:
            # Highlight only when a prompt line separates it from the options
            style = Style.HEADER if self._prompt else None
            output = self._capture_header()
            if output:
                self._terminal.write(Text.from_ansi(output), style=style)
            self._terminal.newline()

    def _capture_header(self) -> str:
        """Run the header and return everything it printed or returned."""
        printed = io.StringIO()
        with self._terminal.console.capture() as capture, redirect_stdout(printed):
            rendered = self._header()
            if rendered is not None:
                self._terminal.write(rendered)
        return (capture.get() + printed.getvalue()).rstrip("\n")

    def _render(self) -> None:
        self._render_preamble()
        for index, label in enumerate(self._options[1:], start=1):
            self._terminal.write(f"{index}. {label}", style=Style.OPTION)
        # 0 goes last
        self._terminal.write(f"0. {self._options[0]}", style=Style.RESERVED)
        self._terminal.write(INPUT_MARKER, end="")

    def _read_string(self, whole_line: bool = False) -> str:
        self._render()
        if whole_line:
            value = self._terminal.read_line()
        else:
            value = self._terminal.read_token()
        self._terminal.newline()
        self._prev_string = value
        return value
