"""
Display Module - Status Icon State Machine

Collapse login, refresh and spending inputs into one of three icon states.
"""

from vibemeter.display.engine import DisplayStateEngine, compute_display_state, compute_gauge
from vibemeter.display.state import DisplayInputs, DisplayKind, DisplayState

__all__ = [
    "DisplayInputs",
    "DisplayKind",
    "DisplayState",
    "DisplayStateEngine",
    "compute_display_state",
    "compute_gauge",
]
