"""Session store layer - persists calendar state between CLI invocations.

This module re-exports the public storage functions for easy importing.
"""

from calpager.store.session import (
    get_state_path,
    load_session,
    save_session,
    session_exists,
)

__all__ = [
    "get_state_path",
    "load_session",
    "save_session",
    "session_exists",
]
