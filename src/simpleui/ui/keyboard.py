"""Single keystroke input.

On POSIX terminals the key is read with canonical mode and echo switched
off for the duration of one read. On Windows readchar does the console
work. Streams that are not terminals are read as-is.
"""

import io
import os
import sys
from contextlib import contextmanager
from typing import Iterator, Optional, TextIO

import readchar

from simpleui.utils.debug import debug_terminal, log_error
from simpleui.utils.exceptions import InputClosedError, TerminalModeError

if os.name != "nt":
    import termios
else:
    termios = None

# Skipped when keys come from a pipe or file
LINE_ENDINGS = ("\r", "\n")


def get_attributes(fd: int) -> list:
    """Return the terminal attributes of fd."""
    try:
        return termios.tcgetattr(fd)
    except termios.error as exc:
        raise TerminalModeError(str(exc), operation="tcgetattr") from exc


def set_attributes(fd: int, when: int, attributes: list) -> None:
    """Apply terminal attributes to fd."""
    try:
        termios.tcsetattr(fd, when, attributes)
    except termios.error as exc:
        raise TerminalModeError(str(exc), operation="tcsetattr") from exc


def raw_attributes(attributes: list) -> list:
    """Copy of attributes with canonical mode and echo disabled.

    Reads return after one character with no timeout.
    """
    raw = list(attributes)
    raw[6] = list(attributes[6])
    raw[3] &= ~(termios.ICANON | termios.ECHO)
    raw[6][termios.VMIN] = 1
    raw[6][termios.VTIME] = 0
    return raw


@contextmanager
def raw_mode(fd: int) -> Iterator[None]:
    """Hold fd in raw mode, restoring the saved attributes on exit.

    Attribute failures are logged and do not interrupt the read. Restoring
    is attempted even if switching to raw mode failed.
    """
    saved = None
    try:
        saved = get_attributes(fd)
    except TerminalModeError as exc:
        log_error("terminal", "could not read terminal attributes", exc)

    if saved is not None:
        try:
            set_attributes(fd, termios.TCSANOW, raw_attributes(saved))
            debug_terminal("raw mode on", fd=fd)
        except TerminalModeError as exc:
            log_error("terminal", "could not switch terminal to raw mode", exc)

    try:
        yield
    finally:
        if saved is not None:
            try:
                set_attributes(fd, termios.TCSADRAIN, saved)
                debug_terminal("terminal mode restored", fd=fd)
            except TerminalModeError as exc:
                log_error("terminal", "could not restore terminal mode", exc)


def _fileno(stream: TextIO) -> Optional[int]:
    try:
        return stream.fileno()
    except (AttributeError, ValueError, io.UnsupportedOperation):
        return None


class KeyReader:
    """Reads one key at a time without waiting for Enter."""

    def __init__(self, stream: Optional[TextIO] = None):
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdin

    def read_key(self) -> str:
        """Block until a key is pressed and return it.

        Raises:
            InputClosedError: The stream is exhausted.
        """
        stream = self.stream
        fd = _fileno(stream)

        if fd is None or not os.isatty(fd):
            key = stream.read(1)
            while key in LINE_ENDINGS:
                key = stream.read(1)
        elif os.name == "nt":
            key = readchar.readchar()
        else:
            with raw_mode(fd):
                key = stream.read(1)

        if not key:
            raise InputClosedError("Input closed while waiting for a key")
        return key
