"""Session file storage: persisted calendar state plus the current page."""

import logging
import os
import tomllib
from pathlib import Path
from typing import Any

import tomli_w

from calpager.domain.models import CalendarDate
from calpager.domain.state import CalendarState, coerce_date

logger = logging.getLogger(__name__)


def get_xdg_data_home() -> Path:
    """Get XDG data directory, with fallback to ~/.local/share."""
    xdg_data = os.environ.get("XDG_DATA_HOME")
    if xdg_data:
        return Path(xdg_data)
    return Path.home() / ".local" / "share"


def get_state_path() -> Path:
    """Get the session file path (XDG compliant)."""
    return get_xdg_data_home() / "calpager" / "state.toml"


def session_exists(state_path: Path | None = None) -> bool:
    if state_path is None:
        state_path = get_state_path()
    return state_path.exists()


def load_session(state_path: Path | None = None) -> tuple[CalendarState, CalendarDate | None]:
    """Load the saved state and current month.

    Args:
        state_path: Path to session file. If None, uses default location.

    Returns:
        Tuple of (state, current_month). A missing file is an empty session.

    Raises:
        ValueError: If the file holds malformed dates.
    """
    if state_path is None:
        state_path = get_state_path()

    if not session_exists(state_path):
        logger.debug("No session file at %s", state_path)
        return CalendarState(), None

    with open(state_path, "rb") as f:
        data = tomllib.load(f)

    state = CalendarState.from_dict(data.get("calendar", {}))
    current = data.get("view", {}).get("current")
    current_month = coerce_date(current).month_start() if current is not None else None
    return state, current_month


def save_session(
    state: CalendarState,
    current_month: CalendarDate | None = None,
    state_path: Path | None = None,
) -> None:
    """Write the state and current month to the session file.

    Args:
        state: Snapshot taken from the controller.
        current_month: Month shown at the current page, if any.
        state_path: Path to session file. If None, uses default location.
    """
    if state_path is None:
        state_path = get_state_path()

    state_path.parent.mkdir(parents=True, exist_ok=True)

    data: dict[str, Any] = {"calendar": state.to_dict()}
    if current_month is not None:
        data["view"] = {"current": current_month.month_start().to_date()}

    with open(state_path, "wb") as f:
        tomli_w.dump(data, f)
    logger.debug("Saved session to %s", state_path)
