"""CLI command handlers."""

from simpleui.ui.terminal import get_terminal
from simpleui.utils.config import Config, get_simpleui_dir
from simpleui.utils.debug import reload_config
from simpleui.utils.exceptions import InputClosedError


def cmd_demo(quick: bool = False):
    """Run the demo menu tree until the user exits."""
    from simpleui.cli.demo import build_demo

    terminal = get_terminal()
    menu = build_demo(quick=quick, terminal=terminal)
    try:
        menu.run()
    except (InputClosedError, KeyboardInterrupt):
        terminal.newline()
        return
    terminal.console.print("[dim]Bye.[/dim]")


def cmd_status():
    """Show current configuration."""
    console = get_terminal().console
    simpleui_dir = get_simpleui_dir()
    config = Config(simpleui_dir)

    for attr, desc, enabled in config.get_toggles():
        color = "green" if enabled else "dim"
        console.print(
            f"[bold]{attr}:[/bold] [{color}]{'on' if enabled else 'off'}[/{color}]"
            f" [dim]({desc})[/dim]",
            soft_wrap=True,
        )

    console.print(
        f"[bold]Config:[/bold] [dim]{config.config_file}[/dim]", soft_wrap=True
    )


def cmd_debug_on():
    """Enable debug mode."""
    console = get_terminal().console
    config = Config(get_simpleui_dir())
    config.set_debug(True)
    reload_config()
    console.print("[green]Debug mode enabled[/green]")
    console.print(f"[dim]Logs: {config.log_file}[/dim]")


def cmd_debug_off():
    """Disable debug mode."""
    console = get_terminal().console
    config = Config(get_simpleui_dir())
    config.set_debug(False)
    reload_config()
    console.print("Debug mode disabled")
