"""Range and selection commands."""

import sys

from rich.console import Console

from calpager.commands.session import (
    close_controller,
    open_controller,
    print_status,
    report_selection_change,
    resolve_state_path,
)
from calpager.dates import parse_date
from calpager.domain.models import CalendarDate, InvalidRangeError

console = Console()


def _parse_optional(text: str | None) -> CalendarDate | None:
    return parse_date(text) if text else None


def select_command(date_str: str | None, clear: bool = False) -> None:
    """Select a date (clamped into the range) or clear the selection."""
    if not clear and not date_str:
        console.print("[red]Provide a date (YYYY-MM-DD) or --clear[/red]", style="bold")
        sys.exit(1)

    state_path = resolve_state_path()
    controller = open_controller(state_path)
    controller.add_listener(report_selection_change)

    try:
        requested = None if clear else _parse_optional(date_str)
    except ValueError as e:
        console.print(f"[red]{e}[/red]", style="bold")
        sys.exit(1)

    controller.set_selected_date(requested)
    selected = controller.get_selected_date()
    if requested is not None and selected != requested:
        console.print(f"[yellow]{requested} is outside the range, clamped to {selected}[/yellow]")

    close_controller(controller, state_path)
    print_status(controller)


def range_command(
    min_str: str | None,
    max_str: str | None,
    clear_min: bool = False,
    clear_max: bool = False,
) -> None:
    """Change the selectable range; unspecified bounds are kept."""
    state_path = resolve_state_path()
    controller = open_controller(state_path)
    controller.add_listener(report_selection_change)

    try:
        minimum = None if clear_min else _parse_optional(min_str) or controller.minimum_date
        maximum = None if clear_max else _parse_optional(max_str) or controller.maximum_date
        controller.set_range(minimum, maximum)
    except InvalidRangeError as e:
        console.print(f"[red]Invalid range: {e}[/red]", style="bold")
        sys.exit(1)
    except ValueError as e:
        console.print(f"[red]{e}[/red]", style="bold")
        sys.exit(1)

    close_controller(controller, state_path)
    print_status(controller)
