"""Console output, line input and screen clearing."""

import os
import subprocess
import sys
from collections import deque
from typing import Any, Optional, TextIO

from rich.console import Console

from simpleui.ui.keyboard import KeyReader
from simpleui.utils.config import Config
from simpleui.utils.constants import CLEAR_COMMAND_POSIX, CLEAR_COMMAND_WINDOWS
from simpleui.utils.debug import debug_input, debug_terminal
from simpleui.utils.exceptions import InputClosedError


class TokenReader:
    """Reads whitespace-delimited tokens, carrying leftovers across calls.

    Typing ``2 1`` on one line answers two consecutive reads.
    """

    def __init__(self, stream: Optional[TextIO] = None):
        self._stream = stream
        self._pending: deque[str] = deque()

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdin

    def _readline(self) -> str:
        line = self.stream.readline()
        if not line:
            raise InputClosedError("Input closed while waiting for a response")
        return line

    def read_token(self) -> str:
        """Block until a token is available and return it."""
        while not self._pending:
            self._pending.extend(self._readline().split())
        return self._pending.popleft()

    def read_line(self) -> str:
        """Return the rest of the current line, stripped.

        Tokens left over from a previous read count as the current line.
        """
        if self._pending:
            rest = " ".join(self._pending)
            self._pending.clear()
            return rest
        return self._readline().strip()


class Terminal:
    """Everything a menu needs from the terminal.

    Args:
        console: rich Console for output. Built from config when omitted.
        stdin: Input stream. Defaults to sys.stdin, resolved on every read.
        config: Configuration. Loaded from the default directory when omitted.
    """

    def __init__(
        self,
        console: Optional[Console] = None,
        stdin: Optional[TextIO] = None,
        config: Optional[Config] = None,
    ):
        self._config = config
        self._console = console
        self.tokens = TokenReader(stdin)
        self.keys = KeyReader(stdin)

    @property
    def config(self) -> Config:
        if self._config is None:
            self._config = Config()
        return self._config

    @property
    def console(self) -> Console:
        if self._console is None:
            self._console = Console(highlight=False, no_color=not self.config.color)
        return self._console

    def write(self, text: Any, style: Optional[str] = None, end: str = "\n") -> None:
        """Print text (or any rich renderable) in an optional style."""
        self.console.print(
            text,
            style=str(style) if style is not None else None,
            end=end,
            markup=False,
            highlight=False,
            soft_wrap=True,
        )

    def newline(self) -> None:
        self.console.print()

    def read_token(self) -> str:
        token = self.tokens.read_token()
        debug_input("token", value=token)
        return token

    def read_line(self) -> str:
        line = self.tokens.read_line()
        debug_input("line", value=line)
        return line

    def read_key(self) -> str:
        key = self.keys.read_key()
        debug_input("key", value=key)
        return key

    def clear(self) -> None:
        """Clear the display with the platform's clear command.

        Does nothing when output is not a terminal or clearing is disabled.
        """
        if not self.config.clear_screen or not self.console.is_terminal:
            return

        if os.name == "nt":
            command, shell = CLEAR_COMMAND_WINDOWS, True
        else:
            command, shell = CLEAR_COMMAND_POSIX, False

        try:
            subprocess.run(command, shell=shell, check=False)
        except OSError as exc:
            debug_terminal("clear command unavailable", command=command, error=str(exc))
            self.console.clear()


_terminal: Optional[Terminal] = None


def get_terminal() -> Terminal:
    """Get the process-wide terminal shared by menus created without one."""
    global _terminal
    if _terminal is None:
        _terminal = Terminal()
    return _terminal


def set_terminal(terminal: Optional[Terminal]) -> None:
    """Replace the shared terminal (None resets to a fresh default)."""
    global _terminal
    _terminal = terminal


def clear_screen() -> None:
    """Clear the display of the shared terminal."""
    get_terminal().clear()
