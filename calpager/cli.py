"""CLI entry point for calpager."""

import logging

import typer
from rich.logging import RichHandler

from calpager.commands.admin import init_command
from calpager.commands.navigate import goto_command, months_command, next_command, prev_command, show_command
from calpager.commands.selection import range_command, select_command

app = typer.Typer(
    name="calpager",
    help="Page through months and keep a date selection inside a range",
    add_completion=False,
)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging"),
) -> None:
    """Page through months and keep a date selection inside a range."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(show_path=False)],
        )


@app.command(name="init")
def init(
    force: bool = typer.Option(False, "--force", "-f", help="Overwrite existing config and session"),
) -> None:
    """Initialize calpager config and session."""
    init_command(force)


@app.command()
def show() -> None:
    """Show the current month, selection and range."""
    show_command()


@app.command(name="range")
def set_range(
    minimum: str = typer.Option(None, "--min", help="Minimum date (YYYY-MM-DD)"),
    maximum: str = typer.Option(None, "--max", help="Maximum date (YYYY-MM-DD)"),
    clear_min: bool = typer.Option(False, "--clear-min", help="Remove the minimum bound"),
    clear_max: bool = typer.Option(False, "--clear-max", help="Remove the maximum bound"),
) -> None:
    """Set the selectable range; the selection is clamped into it."""
    range_command(minimum, maximum, clear_min, clear_max)


@app.command()
def select(
    date: str = typer.Argument(None, help="Date to select (YYYY-MM-DD)"),
    clear: bool = typer.Option(False, "--clear", help="Clear the selection"),
) -> None:
    """Select a date and move to its month."""
    select_command(date, clear)


@app.command()
def goto(month: str) -> None:
    """Move to a month (YYYY-MM)."""
    goto_command(month)


@app.command(name="next")
def next_page() -> None:
    """Move forward one month."""
    next_command()


@app.command(name="prev")
def prev_page() -> None:
    """Move back one month."""
    prev_command()


@app.command()
def months(
    limit: int = typer.Option(12, help="Maximum months to list"),
) -> None:
    """List the months around the current one."""
    months_command(limit)


if __name__ == "__main__":
    app()
