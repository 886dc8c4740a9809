"""Demo menu tree used by `simpleui demo`."""

from dataclasses import dataclass
from functools import partial
from typing import Optional

from simpleui.menus import Menu, Prompt, QuickMenu, SubMenu, SubQuickMenu
from simpleui.ui.styles import Style
from simpleui.ui.terminal import Terminal, get_terminal

DEMO_COLOURS = (Style.RED, Style.GREEN, Style.BLUE, Style.MAGENTA)


@dataclass
class DemoState:
    """What the demo remembers between screens."""

    name: str = "stranger"
    greetings: int = 0
    colour: Style = Style.CYAN


def _show_colour(terminal: Terminal, state: DemoState, colour: Style) -> None:
    state.colour = colour
    terminal.write(f"Colour set to {colour.name.lower()}.", style=colour)


def build_demo(
    quick: bool = False,
    terminal: Optional[Terminal] = None,
    state: Optional[DemoState] = None,
) -> Menu:
    """Build the demo: a main menu with a name prompt and a colour submenu.

    Args:
        quick: Use single-keypress menus
        terminal: Terminal to render on (default: shared terminal)
        state: State object to mutate (default: fresh DemoState)
    """
    terminal = terminal or get_terminal()
    state = state or DemoState()
    menu_class = QuickMenu if quick else Menu
    submenu_class = SubQuickMenu if quick else SubMenu

    name_prompt = Prompt(
        "What should I call you?",
        lambda value: bool(value.strip()),
        terminal=terminal,
    )

    def set_name() -> None:
        state.name = name_prompt.get()

    def greet() -> None:
        state.greetings += 1
        terminal.write(f"Hello, {state.name}!", style=state.colour)

    colours = submenu_class("Pick a colour", terminal=terminal)
    for colour in DEMO_COLOURS:
        colours.add_option(
            colour.name.title(), partial(_show_colour, terminal, state, colour)
        )

    main = menu_class("simpleui demo", terminal=terminal)
    main.set_header(lambda: f"Name: {state.name} | Greetings: {state.greetings}")
    main.add_option("Set name", set_name)
    main.add_option("Greet", greet)
    main.add_submenu("Colours", colours)
    return main
