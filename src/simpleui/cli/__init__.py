"""CLI entry point for simpleui.

Uses Typer for command routing. Running `simpleui` with no command starts
the demo menu.
"""

import typer

__all__ = ["app", "main"]

app = typer.Typer(
    name="simpleui",
    help="Numbered, quick-key and prompt console menus",
    no_args_is_help=False,
)


@app.callback(invoke_without_command=True)
def main(ctx: typer.Context) -> None:
    """Launch the demo menu if no command given."""
    if ctx.invoked_subcommand is None:
        from simpleui.cli.commands import cmd_demo

        cmd_demo(quick=False)


@app.command()
def demo(
    quick: bool = typer.Option(
        False,
        "--quick",
        "-q",
        help="Answer menus with a single keypress instead of a line",
    ),
) -> None:
    """Run the demo menu tree."""
    from simpleui.cli.commands import cmd_demo

    cmd_demo(quick=quick)


@app.command()
def status() -> None:
    """Show the effective configuration."""
    from simpleui.cli.commands import cmd_status

    cmd_status()


# Debug subcommand group
debug_app = typer.Typer(help="Debug mode commands")
app.add_typer(debug_app, name="debug")


@debug_app.command("on")
def debug_on() -> None:
    """Enable debug logging."""
    from simpleui.cli.commands import cmd_debug_on

    cmd_debug_on()


@debug_app.command("off")
def debug_off() -> None:
    """Disable debug logging."""
    from simpleui.cli.commands import cmd_debug_off

    cmd_debug_off()


def cli_main() -> None:
    """Entry point for pyproject.toml scripts."""
    app()


if __name__ == "__main__":
    cli_main()
