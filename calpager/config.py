"""Configuration file management for calpager."""

import os
import tomllib
from datetime import MAXYEAR, MINYEAR, date
from pathlib import Path
from typing import Any

import tomli_w

from calpager.domain.months import DEFAULT_SPAN_YEARS


def get_xdg_config_home() -> Path:
    """Get XDG config directory, with fallback to ~/.config."""
    xdg_config = os.environ.get("XDG_CONFIG_HOME")
    if xdg_config:
        return Path(xdg_config)
    return Path.home() / ".config"


def get_config_path() -> Path:
    """Get the config file path (XDG compliant).

    Returns:
        Path to the config file.
    """
    return get_xdg_config_home() / "calpager" / "config.toml"


def create_default_config(config_path: Path | None = None) -> None:
    """Create default config file with secure permissions.

    Args:
        config_path: Path to config file. If None, uses default location.
    """
    if config_path is None:
        config_path = get_config_path()

    default_config: dict[str, Any] = {
        "span_years": DEFAULT_SPAN_YEARS,
    }
    save_config(default_config, config_path)


def load_config(config_path: Path | None = None) -> dict[str, Any]:
    """Load configuration from TOML file.

    Args:
        config_path: Path to config file. If None, uses default location.

    Returns:
        Configuration dictionary.

    Raises:
        FileNotFoundError: If config file doesn't exist.
    """
    if config_path is None:
        config_path = get_config_path()

    with open(config_path, "rb") as f:
        return tomllib.load(f)


def save_config(config: dict[str, Any], config_path: Path | None = None) -> None:
    """Save configuration to TOML file.

    Args:
        config: Configuration dictionary.
        config_path: Path to config file. If None, uses default location.
    """
    if config_path is None:
        config_path = get_config_path()

    config_path.parent.mkdir(parents=True, exist_ok=True)

    with open(config_path, "wb") as f:
        tomli_w.dump(config, f)

    os.chmod(config_path, 0o600)


def load_config_or_default(config_path: Path | None = None) -> dict[str, Any]:
    """Load configuration, returning an empty dict when no file exists."""
    try:
        return load_config(config_path)
    except FileNotFoundError:
        return {}


def get_span_years(config: dict[str, Any], today: date | None = None) -> int:
    """Years covered before/after today by an unbounded range.

    Args:
        config: Configuration dictionary.
        today: Day the span is measured from. If None, uses the local date.

    Raises:
        ValueError: If span_years is not a positive integer, or would reach
            outside years 1..9999.
    """
    span = config.get("span_years", DEFAULT_SPAN_YEARS)
    if isinstance(span, bool) or not isinstance(span, int) or span < 1:
        raise ValueError(f"span_years must be a positive integer, got {span!r}")

    if today is None:
        today = date.today()
    limit = min(today.year - MINYEAR, MAXYEAR - today.year)
    if span > limit:
        raise ValueError(f"span_years must be at most {limit}, got {span}")
    return span


def get_state_file(config: dict[str, Any]) -> Path | None:
    """Session file override from config, if any."""
    state_file = config.get("state_file")
    if not state_file:
        return None
    return Path(state_file).expanduser()
