"""Shared pytest fixtures."""

import io
import tempfile
from pathlib import Path

import pytest
from rich.console import Console

from simpleui.ui import terminal as terminal_module
from simpleui.ui.terminal import Terminal
from simpleui.utils import debug as debug_module
from simpleui.utils.config import Config


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test data."""
    with tempfile.TemporaryDirectory() as d:
        yield Path(d)


@pytest.fixture(autouse=True)
def mock_simpleui_dir(temp_dir, monkeypatch):
    """Point SIMPLEUI_DIR at a temp dir and reset cached state."""
    simpleui_dir = temp_dir / "simpleui"
    simpleui_dir.mkdir()
    monkeypatch.setenv("SIMPLEUI_DIR", str(simpleui_dir))
    for key in (
        "SIMPLEUI_DEBUG",
        "SIMPLEUI_COLOR",
        "SIMPLEUI_CLEAR_SCREEN",
        "FORCE_COLOR",
        "TTY_COMPATIBLE",
    ):
        monkeypatch.delenv(key, raising=False)
    debug_module.reload_config()
    terminal_module.set_terminal(None)
    yield simpleui_dir
    debug_module.reload_config()
    terminal_module.set_terminal(None)


class FakeTerminal:
    """A Terminal on in-memory streams, with a counter for clears."""

    def __init__(self, text: str, config: Config):
        self.out = io.StringIO()
        console = Console(file=self.out, width=200, color_system=None)
        self.terminal = Terminal(console=console, stdin=io.StringIO(text), config=config)
        self.clears = 0
        self.terminal.clear = self._clear

    def _clear(self):
        self.clears += 1
        self.out.write("<clear>\n")

    @property
    def output(self) -> str:
        return self.out.getvalue()


@pytest.fixture
def make_terminal(mock_simpleui_dir):
    """Factory for FakeTerminal instances reading the given input."""

    def _make(text: str = "") -> FakeTerminal:
        return FakeTerminal(text, Config(mock_simpleui_dir))

    return _make
