"""Shared helpers for commands: restore, persist and display a controller."""

import sys
from pathlib import Path

from rich.console import Console
from rich.table import Table

from calpager.config import get_span_years, get_state_file, load_config_or_default
from calpager.dates import month_title
from calpager.domain.controller import CalendarController
from calpager.domain.models import CalendarDate
from calpager.store.session import get_state_path, load_session, save_session

console = Console()


def resolve_state_path() -> Path:
    """Session path from config, falling back to the XDG default."""
    return get_state_file(load_config_or_default()) or get_state_path()


def open_controller(state_path: Path) -> CalendarController:
    """Build a controller from config and the saved session.

    Exits with status 1 when the config or session file is malformed.
    """
    try:
        span_years = get_span_years(load_config_or_default())
        state, current_month = load_session(state_path)
        controller = CalendarController(span_years=span_years)
        controller.restore(state)
    except ValueError as e:
        console.print(f"[red]Could not load session: {e}[/red]", style="bold")
        sys.exit(1)

    if current_month is not None:
        controller.set_current_month(current_month)
    return controller


def close_controller(controller: CalendarController, state_path: Path) -> None:
    """Persist the controller's snapshot and current month."""
    save_session(controller.snapshot(), controller.current_month, state_path)


def report_selection_change(selected: CalendarDate | None) -> None:
    """Listener that tells the user about selections changed by the core."""
    if selected is None:
        console.print("[yellow]Selection cleared[/yellow]")
    else:
        console.print(f"[yellow]Selection is now {selected}[/yellow]")


def format_bound(value: CalendarDate | None) -> str:
    return str(value) if value is not None else "[dim]unbounded[/dim]"


def print_status(controller: CalendarController) -> None:
    """Print the current page, selection and bounds."""
    table = Table(show_header=False, box=None)
    table.add_column("Field", style="cyan")
    table.add_column("Value")

    position = controller.get_current_position()
    selected = controller.get_selected_date()

    table.add_row("Month", f"[bold]{month_title(controller.current_month)}[/bold]")
    table.add_row("Page", f"{position + 1} of {controller.page_count}")
    table.add_row("Selected", str(selected) if selected is not None else "[dim]none[/dim]")
    table.add_row("Minimum", format_bound(controller.minimum_date))
    table.add_row("Maximum", format_bound(controller.maximum_date))

    back = "[green]yes[/green]" if controller.can_page_backward() else "[red]no[/red]"
    forward = "[green]yes[/green]" if controller.can_page_forward() else "[red]no[/red]"
    table.add_row("Previous", back)
    table.add_row("Next", forward)

    console.print(table)
