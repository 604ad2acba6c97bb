"""
Data models for the status summary.
"""

from dataclasses import dataclass, field
from enum import Enum

SEPARATOR = "---"


class MenuAction(str, Enum):
    """Actions offered beneath the summary. Rendering is up to the UI."""
    LOGIN = "login"
    REFRESH = "refresh"
    SETTINGS = "settings"
    LOG_OUT = "log_out"
    TOGGLE_LAUNCH_AT_LOGIN = "toggle_launch_at_login"
    QUIT = "quit"


@dataclass(frozen=True)
class StatusSummary:
    """Menu text for the status item, top to bottom."""
    lines: tuple[str, ...] = ()
    has_debug_section: bool = False
    actions: tuple[MenuAction, ...] = ()
    launch_at_login_enabled: bool = False

    @property
    def banner_lines(self) -> list[str]:
        """Lines above the first separator, if a separator follows them."""
        if SEPARATOR not in self.lines:
            return []
        return list(self.lines[:self.lines.index(SEPARATOR)])

    def to_dict(self) -> dict:
        return {
            "lines": list(self.lines),
            "has_debug_section": self.has_debug_section,
            "actions": [a.value for a in self.actions],
            "launch_at_login_enabled": self.launch_at_login_enabled,
        }
