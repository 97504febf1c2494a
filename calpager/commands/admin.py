"""Admin command for initializing config and session files."""

from pathlib import Path

from rich.console import Console

from calpager.config import create_default_config, get_config_path
from calpager.domain.state import CalendarState
from calpager.store.session import get_state_path, save_session, session_exists

console = Console()


def init_command(force: bool = False, config_path: Path | None = None, state_path: Path | None = None) -> None:
    """Create the default config and an empty session."""
    if config_path is None:
        config_path = get_config_path()
    if state_path is None:
        state_path = get_state_path()

    if config_path.exists() and not force:
        console.print(f"[yellow]Config already exists at {config_path}[/yellow]")
        console.print("[dim]Use --force to overwrite[/dim]")
    else:
        create_default_config(config_path)
        console.print(f"[green]✓[/green] Config created at {config_path}")

    if session_exists(state_path) and not force:
        console.print(f"[yellow]Session already exists at {state_path}[/yellow]")
        return

    save_session(CalendarState(), None, state_path)
    console.print(f"[green]✓[/green] Session created at {state_path}")
