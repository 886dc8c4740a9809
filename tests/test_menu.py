"""Tests for numbered menus."""

import gc
import io

import pytest
from rich.console import Console

from simpleui.menus import Menu, SubMenu
from simpleui.menus.actions import SubmenuAction
from simpleui.ui.terminal import Terminal
from simpleui.utils.config import Config
from simpleui.utils.exceptions import InputClosedError, SubmenuGoneError


class Recorder:
    """Zero-argument action that counts its calls."""

    def __init__(self):
        self.calls = 0

    def __call__(self):
        self.calls += 1


def test_new_menu_has_exit_option(make_terminal):
    """A fresh menu only has option 0, labelled Exit, which clears."""
    fake = make_terminal()
    menu = Menu("Main", terminal=fake.terminal)

    assert menu.options == ("Exit",)
    assert menu.actions == (fake.terminal.clear,)
    assert menu.title == "Main"


def test_add_option_chains_in_order(make_terminal):
    """Chained add_option calls append labels and actions in order."""
    fake = make_terminal()
    a1, a2 = Recorder(), Recorder()

    menu = Menu(terminal=fake.terminal).add_option("A", a1).add_option("B", a2)

    assert menu.options == ("Exit", "A", "B")
    assert menu.actions == (fake.terminal.clear, a1, a2)


def test_add_option_allows_duplicate_labels(make_terminal):
    fake = make_terminal()
    menu = Menu(terminal=fake.terminal).add_option("A", Recorder()).add_option(
        "A", Recorder()
    )

    assert menu.options == ("Exit", "A", "A")
    assert len(menu.options) == len(menu.actions)


def test_get_title_and_set_title(make_terminal):
    fake = make_terminal()
    menu = Menu("Old", terminal=fake.terminal).add_option("A", Recorder())

    assert menu.set_title("New") is menu
    assert menu.title == "New"
    assert menu.get_title(0) == "Exit"
    assert menu.get_title(1) == "A"
    with pytest.raises(IndexError):
        menu.get_title(2)


class TestRender:
    """Tests for menu rendering."""

    def test_render_lists_options_then_exit(self, make_terminal):
        """Options 1..n are printed before option 0, then the marker."""
        fake = make_terminal()
        menu = (
            Menu("Pick one", terminal=fake.terminal)
            .add_option("Alpha", Recorder())
            .add_option("Beta", Recorder())
        )

        menu._render()

        assert fake.output == "Pick one\n1. Alpha\n2. Beta\n0. Exit\n> "

    def test_render_without_prompt(self, make_terminal):
        fake = make_terminal()
        menu = Menu(terminal=fake.terminal).add_option("Alpha", Recorder())

        menu._render()

        assert fake.output == "1. Alpha\n0. Exit\n> "

    def test_header_printed_between_prompt_and_options(self, make_terminal):
        """Prompt comes before the header output, option 0 after all others."""
        fake = make_terminal()
        menu = (
            Menu("Prompt", terminal=fake.terminal)
            .set_header(lambda: "Balance: 5")
            .add_option("Spend", Recorder())
            .add_option("Save", Recorder())
        )

        menu._render()
        out = fake.output

        assert out.index("Prompt") < out.index("Balance: 5") < out.index("1. Spend")
        assert out.index("2. Save") < out.index("0. Exit")
        assert "Balance: 5\n\n1. Spend" in out

    def test_header_rendered_on_every_redraw(self, make_terminal):
        fake = make_terminal()
        calls = Recorder()
        menu = Menu("P", terminal=fake.terminal).set_header(calls)

        menu._render()
        menu._render()

        assert calls.calls == 2

    def test_header_returning_none_prints_blank_line(self, make_terminal):
        fake = make_terminal()
        menu = Menu("P", terminal=fake.terminal).set_header(lambda: None)

        menu._render()

        assert fake.output == "P\n\n0. Exit\n> "

    def test_set_header_replaces_previous(self, make_terminal):
        fake = make_terminal()
        menu = (
            Menu("P", terminal=fake.terminal)
            .set_header(lambda: "first")
            .set_header(lambda: "second")
        )

        menu._render()

        assert "second" in fake.output
        assert "first" not in fake.output

    def test_labels_are_not_markup(self, make_terminal):
        """Square brackets in labels are printed literally."""
        fake = make_terminal()
        menu = Menu(terminal=fake.terminal).add_option("[bold]x[/bold]", Recorder())

        menu._render()

        assert "1. [bold]x[/bold]" in fake.output

    @pytest.fixture
    def colour_terminal(self, mock_simpleui_dir):
        out = io.StringIO()
        console = Console(
            file=out, width=200, color_system="standard", force_terminal=True
        )
        return Terminal(console=console, config=Config(mock_simpleui_dir)), out

    def test_printed_header_is_highlighted(self, colour_terminal):
        term, out = colour_terminal
        menu = Menu("Prompt", terminal=term).set_header(
            lambda: term.write("Balance: 5")
        )

        menu._render()

        assert "\x1b[33mBalance: 5" in out.getvalue()
        assert out.getvalue().count("Balance: 5") == 1

    def test_returned_header_is_highlighted(self, colour_terminal):
        term, out = colour_terminal
        menu = Menu("Prompt", terminal=term).set_header(lambda: "Balance: 5")

        menu._render()

        assert "\x1b[33mBalance: 5" in out.getvalue()

    def test_header_print_calls_are_captured(self, colour_terminal):
        term, out = colour_terminal
        menu = Menu("Prompt", terminal=term).set_header(lambda: print("Balance: 5"))

        menu._render()

        assert "\x1b[33mBalance: 5" in out.getvalue()

    def test_header_not_highlighted_without_prompt(self, colour_terminal):
        term, out = colour_terminal
        menu = Menu(terminal=term).set_header(lambda: term.write("Balance: 5"))

        menu._render()

        assert "Balance: 5" in out.getvalue()
        assert "\x1b[33m" not in out.getvalue()


class TestReadOption:
    """Tests for read_option()."""

    def test_returns_valid_option(self, make_terminal):
        fake = make_terminal("1\n")
        menu = Menu(terminal=fake.terminal).add_option("A", Recorder())

        assert menu.read_option() == 1
        assert menu.recall_option() == 1

    def test_recall_option_defaults_to_sentinel(self, make_terminal):
        fake = make_terminal()
        menu = Menu(terminal=fake.terminal)

        assert menu.recall_option() == -1
        assert menu.recall_string() == ""

    def test_rejects_out_of_range_and_garbage(self, make_terminal):
        """Invalid entries print a message and re-prompt without re-rendering."""
        fake = make_terminal("5\n-1\nabc\n2x\n1\n")
        menu = Menu("Title", terminal=fake.terminal).add_option("A", Recorder())

        assert menu.read_option() == 1
        assert fake.output.count("Invalid option.\n> ") == 4
        assert "Title" not in fake.output

    def test_only_plain_decimal_numbers_accepted(self, make_terminal):
        """Underscore separators and non-ASCII digits are not numbers."""
        fake = make_terminal("1_0\n１\n١\n+2\n")
        menu = Menu(terminal=fake.terminal)
        for n in range(11):
            menu.add_option(f"Option {n + 1}", Recorder())

        assert menu.read_option() == 2
        assert fake.output.count("Invalid option.") == 3

    def test_upper_bound_is_exclusive(self, make_terminal):
        fake = make_terminal("2\n0\n")
        menu = Menu(terminal=fake.terminal).add_option("A", Recorder())

        assert menu.read_option() == 0
        assert fake.output.count("Invalid option.") == 1

    def test_several_tokens_on_one_line(self, make_terminal):
        """Tokens typed on one line answer consecutive reads."""
        fake = make_terminal("2 1\n")
        menu = (
            Menu(terminal=fake.terminal)
            .add_option("A", Recorder())
            .add_option("B", Recorder())
        )

        assert menu.read_option() == 2
        assert menu.read_option() == 1

    def test_closed_input_raises(self, make_terminal):
        fake = make_terminal("9\n")
        menu = Menu(terminal=fake.terminal)

        with pytest.raises(InputClosedError):
            menu.read_option()

    def test_closed_input_is_eof_error(self, make_terminal):
        fake = make_terminal()
        menu = Menu(terminal=fake.terminal)

        with pytest.raises(EOFError):
            menu.read_option()


class TestReadString:
    """Tests for read_string()."""

    def test_renders_and_returns_first_word(self, make_terminal):
        fake = make_terminal("hello world\n")
        menu = Menu("Say something", terminal=fake.terminal)

        assert menu.read_string() == "hello"
        assert menu.recall_string() == "hello"
        assert fake.output.startswith("Say something\n")
        assert fake.output.endswith("> \n")

    def test_skips_blank_lines(self, make_terminal):
        fake = make_terminal("\n   \nword\n")
        menu = Menu(terminal=fake.terminal)

        assert menu.read_string() == "word"


class TestRun:
    """Tests for the run loop."""

    def test_dispatches_each_selection_once(self, make_terminal):
        fake = make_terminal("1\n2\n1\n0\n")
        a1, a2 = Recorder(), Recorder()
        menu = (
            Menu("Main", terminal=fake.terminal)
            .add_option("A", a1)
            .add_option("B", a2)
        )

        menu.run()

        assert a1.calls == 2
        assert a2.calls == 1
        assert menu.recall_option() == 0

    def test_exit_clears_and_stops(self, make_terminal):
        """Choosing 0 runs the clear action and leaves the loop."""
        fake = make_terminal("0\n1\n")
        a1 = Recorder()
        menu = Menu("Main", terminal=fake.terminal).add_option("A", a1)

        menu.run()

        assert a1.calls == 0
        # initial clear, clear after the read, option 0's own clear
        assert fake.clears == 3
        assert fake.output.count("Main") == 1

    def test_rerenders_after_each_action(self, make_terminal):
        fake = make_terminal("1\n1\n0\n")
        menu = Menu("Main", terminal=fake.terminal).add_option("A", Recorder())

        menu.run()

        assert fake.output.count("Main\n") == 3

    def test_action_output_appears_after_clear(self, make_terminal):
        fake = make_terminal("1\n0\n")
        menu = Menu("Main", terminal=fake.terminal)
        menu.add_option("Say", lambda: fake.terminal.write("said it"))

        menu.run()

        assert fake.output.index("<clear>") < fake.output.index("said it")

    def test_invalid_selection_does_not_dispatch(self, make_terminal):
        fake = make_terminal("7\nnope\n0\n")
        a1 = Recorder()
        menu = Menu(terminal=fake.terminal).add_option("A", a1)

        menu.run()

        assert a1.calls == 0
        assert fake.output.count("Invalid option.") == 2

    def test_run_propagates_closed_input(self, make_terminal):
        fake = make_terminal("1\n")
        menu = Menu(terminal=fake.terminal).add_option("A", Recorder())

        with pytest.raises(InputClosedError):
            menu.run()


class TestSubmenus:
    """Tests for add_submenu()."""

    def test_submenu_entered_and_left(self, make_terminal):
        fake = make_terminal("1\n1\n0\n0\n")
        inner = Recorder()
        settings = SubMenu("Settings", terminal=fake.terminal).add_option("Reset", inner)
        menu = Menu("Main", terminal=fake.terminal).add_submenu("Settings", settings)

        menu.run()

        assert inner.calls == 1
        assert "0. Back" in fake.output
        assert menu.recall_option() == 0
        assert settings.recall_option() == 0

    def test_plain_menu_can_be_a_submenu(self, make_terminal):
        fake = make_terminal("1\n0\n0\n")
        child = Menu("Child", terminal=fake.terminal)
        parent = Menu("Parent", terminal=fake.terminal).add_submenu("Child", child)

        parent.run()

        assert "0. Exit" in fake.output
        assert "Child" in fake.output

    def test_submenu_action_owns_target(self, make_terminal):
        fake = make_terminal()
        menu = Menu(terminal=fake.terminal).add_submenu(
            "Child", SubMenu("Child", terminal=fake.terminal)
        )
        gc.collect()

        action = menu.actions[1]
        assert isinstance(action, SubmenuAction)
        assert action.alive
        assert action.target.title == "Child"

    def test_borrowed_submenu_gone(self, make_terminal):
        """Entering a collected borrowed submenu raises SubmenuGoneError."""
        fake = make_terminal()
        child = SubMenu("Child", terminal=fake.terminal)
        menu = Menu(terminal=fake.terminal).add_submenu("Child", child, borrowed=True)
        action = menu.actions[1]
        assert action.alive

        del child
        gc.collect()

        assert not action.alive
        with pytest.raises(SubmenuGoneError, match="Child"):
            action()

    def test_submenu_action_repr(self, make_terminal):
        fake = make_terminal()
        child = SubMenu(terminal=fake.terminal)

        assert repr(SubmenuAction("X", child)) == "SubmenuAction('X', owned)"
        assert repr(SubmenuAction("X", child, borrowed=True)) == (
            "SubmenuAction('X', borrowed)"
        )
