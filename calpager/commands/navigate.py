"""Page navigation commands."""

import sys

from rich.console import Console
from rich.table import Table

from calpager.commands.session import close_controller, open_controller, print_status, resolve_state_path
from calpager.dates import month_title, parse_month
from calpager.domain.controller import CalendarController

console = Console()


def show_command() -> None:
    """Show the current page and selection."""
    print_status(open_controller(resolve_state_path()))


def goto_command(month: str) -> None:
    """Jump to the page for a YYYY-MM month, clamped to the first/last page."""
    try:
        target = parse_month(month)
    except ValueError as e:
        console.print(f"[red]{e}[/red]", style="bold")
        sys.exit(1)

    state_path = resolve_state_path()
    controller = open_controller(state_path)
    controller.set_current_month(target)
    if not controller.current_month.is_same_month(target):
        console.print(f"[yellow]{month_title(target)} is outside the range[/yellow]")

    close_controller(controller, state_path)
    print_status(controller)


def next_command() -> None:
    state_path = resolve_state_path()
    controller = open_controller(state_path)
    if not controller.can_page_forward():
        console.print("[yellow]Already at the last month[/yellow]")
    controller.page_forward()
    close_controller(controller, state_path)
    print_status(controller)


def prev_command() -> None:
    state_path = resolve_state_path()
    controller = open_controller(state_path)
    if not controller.can_page_backward():
        console.print("[yellow]Already at the first month[/yellow]")
    controller.page_backward()
    close_controller(controller, state_path)
    print_status(controller)


def page_window(controller: CalendarController, limit: int) -> range:
    """Positions of up to `limit` pages around the current one."""
    count = controller.page_count
    limit = max(1, min(limit, count))
    start = max(0, min(controller.get_current_position() - limit // 2, count - limit))
    return range(start, start + limit)


def months_command(limit: int = 12) -> None:
    """List pages around the current one."""
    controller = open_controller(resolve_state_path())
    current = controller.get_current_position()
    selected = controller.get_selected_date()

    table = Table(title=f"{controller.page_count} pages")
    table.add_column("Page", justify="right", style="dim")
    table.add_column("Month")
    table.add_column("Starts")

    for position in page_window(controller, limit):
        month = controller.get_month_at(position)
        label = month_title(month)
        if selected is not None and selected.is_same_month(month):
            label += " [yellow]*[/yellow]"
        if position == current:
            label = f"[bold cyan]{label}[/bold cyan]"
        table.add_row(str(position + 1), label, str(month))

    console.print(table)
