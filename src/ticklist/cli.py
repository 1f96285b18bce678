"""CLI entry point for Ticklist."""

import logging
from logging.handlers import RotatingFileHandler

import click
from rich.console import Console

from . import __version__
from .config import CONFIG_FILE, LOG_FILE, Config, ConfigError, InputConfig, load_config, save_config
from .render import render
from .styles import THEMES
from .tui_textual import TicklistApp

console = Console()
err_console = Console(stderr=True)

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def configure_logging(debug_logging: bool) -> None:
    """Send logs to a rotating debug file, or keep only warnings."""
    if debug_logging:
        LOG_FILE.parent.mkdir(parents=True, exist_ok=True)
        handler = RotatingFileHandler(
            LOG_FILE,
            maxBytes=5 * 1024 * 1024,  # 5MB
            backupCount=3,
        )
        logging.basicConfig(
            level=logging.DEBUG,
            format=LOG_FORMAT,
            handlers=[handler],
        )
        logging.info("Ticklist starting (debug logging enabled)")
    else:
        # Default: only warn+ so TUI stays clean
        logging.basicConfig(
            level=logging.WARNING,
            format=LOG_FORMAT,
        )


@click.group(invoke_without_command=True)
@click.option("--style", type=click.Choice(sorted(THEMES)), default=None, help="Colour theme override for this run")
@click.option("--debug-logging/--no-debug-logging", default=None, help="Enable debug logging to file")
@click.option("--version", "-v", is_flag=True, help="Show version")
@click.pass_context
def main(ctx: click.Context, style: str | None, debug_logging: bool | None, version: bool) -> None:
    """Ticklist - a minimal to-do list for the terminal."""
    if version:
        console.print(f"ticklist v{__version__}")
        return

    # If no subcommand, run the TUI
    if ctx.invoked_subcommand is None:
        config = load_config()
        # Apply CLI overrides (not saved to config file)
        if style is not None:
            config.style = style
        if debug_logging is not None:
            config.debug_logging = debug_logging
        run_ticklist(config)


def run_ticklist(config: Config | None = None) -> None:
    """Run the TUI until the user quits."""
    if config is None:
        config = load_config()
    configure_logging(config.debug_logging)

    app = TicklistApp(config=config)
    try:
        app.run()
    except Exception as exc:
        logger.exception("Ticklist crashed")
        err_console.print(f"[red]Error running program:[/red] {exc}")
        raise SystemExit(1)

    # Textual reports its own traceback and sets a non-zero return code
    if app.return_code:
        logger.error("Ticklist exited with return code %d", app.return_code)
        raise SystemExit(app.return_code)
    if app.session.quitting:
        console.print(render(app.session), end="", markup=False, highlight=False)
    logger.info("Ticklist exited with %d task(s) in memory", len(app.session.tasks))


@main.command()
@click.option("--char-limit", type=int, default=None, help="Maximum characters per task")
@click.option("--input-width", type=int, default=None, help="Visible width of the input field")
@click.option("--placeholder", default=None, help="Placeholder shown in the empty input field")
@click.option("--style", type=click.Choice(sorted(THEMES)), default=None, help="Colour theme")
@click.option("--debug-logging/--no-debug-logging", default=None, help="Enable debug logging to file")
@click.option("--show", is_flag=True, help="Show current configuration")
def config(
    char_limit: int | None,
    input_width: int | None,
    placeholder: str | None,
    style: str | None,
    debug_logging: bool | None,
    show: bool,
) -> None:
    """Configure Ticklist settings."""
    current = load_config()

    if show:
        console.print("\n[bold]Current Configuration:[/bold]")
        console.print(f"  Style:         [cyan]{current.style}[/cyan]")
        console.print(f"  Debug Logging: [cyan]{current.debug_logging}[/cyan]")
        console.print("\n[bold]Input:[/bold]")
        console.print(f"  Char Limit:    [cyan]{current.input.char_limit}[/cyan]")
        console.print(f"  Width:         [cyan]{current.input.width}[/cyan]")
        console.print(f"  Placeholder:   [cyan]{current.input.placeholder}[/cyan]")
        console.print(f"\nConfig file: [dim]{CONFIG_FILE}[/dim]")
        return

    if all(value is None for value in (char_limit, input_width, placeholder, style, debug_logging)):
        console.print("Use --char-limit, --input-width or --placeholder to tune the input field.")
        console.print("Use --style to pick a theme: " + ", ".join(sorted(THEMES)))
        console.print("Use --show to view current configuration.")
        return

    new_config = Config(
        input=InputConfig(
            char_limit=char_limit if char_limit is not None else current.input.char_limit,
            width=input_width if input_width is not None else current.input.width,
            placeholder=placeholder if placeholder is not None else current.input.placeholder,
        ),
        style=style or current.style,
        debug_logging=debug_logging if debug_logging is not None else current.debug_logging,
    )
    try:
        save_config(new_config)
    except ConfigError as exc:
        raise click.UsageError(str(exc))

    console.print("\n[green]Configuration saved![/green]")
    console.print(f"  Style:       [cyan]{new_config.style}[/cyan]")
    console.print(f"  Char Limit:  [cyan]{new_config.input.char_limit}[/cyan]")
    console.print(f"  Width:       [cyan]{new_config.input.width}[/cyan]")
    console.print(f"\nSaved to: [dim]{CONFIG_FILE}[/dim]")


if __name__ == "__main__":
    main()
