"""
Display State Engine - Derives the status icon state from live inputs.
"""

import math
from typing import Callable, Optional

from vibemeter.display.state import DisplayInputs, DisplayState, clamp_gauge
from vibemeter.log import get_logger
from vibemeter.spending.aggregator import SpendingAggregator

log = get_logger("vibemeter.display")

# Gauge movements at or below this are treated as recomputation noise
GAUGE_HYSTERESIS = 0.01


def compute_gauge(total_usd: float, upper_limit_usd: float) -> float:
    """Fraction of the upper limit spent, clamped to [0, 1]."""
    if not math.isfinite(upper_limit_usd) or upper_limit_usd <= 0:
        # No usable limit: any spend fills the gauge
        return 1.0 if total_usd > 0 else 0.0
    return clamp_gauge(total_usd / upper_limit_usd)


def compute_display_state(
    inputs: DisplayInputs,
    aggregator: Optional[SpendingAggregator] = None,
) -> DisplayState:
    """
    Candidate state for the given inputs, before hysteresis.

    A refresh in progress is checked before login so that a background fetch
    never flashes the logged-out icon.
    """
    aggregator = aggregator or SpendingAggregator()

    if inputs.refresh.any_refreshing:
        return DisplayState.loading()
    if not inputs.session.is_logged_in_to_any_provider:
        return DisplayState.not_logged_in()

    result = aggregator.aggregate(inputs.spending)
    if not result.has_data:
        return DisplayState.loading()

    return DisplayState.data(compute_gauge(result.total_usd, inputs.settings.upper_limit_usd))


class DisplayStateEngine:
    """
    Holds the current display state and applies hysteresis on updates.

    The current state has a single writer, ``update``; readers get an
    immutable ``DisplayState``.
    """

    def __init__(
        self,
        initial_state: Optional[DisplayState] = None,
        on_change: Optional[Callable[[DisplayState], None]] = None,
        threshold: float = GAUGE_HYSTERESIS,
        aggregator: Optional[SpendingAggregator] = None,
    ):
        self._state = initial_state or DisplayState.not_logged_in()
        self.on_change = on_change
        self.threshold = threshold
        self.aggregator = aggregator or SpendingAggregator()

    @property
    def current_state(self) -> DisplayState:
        return self._state

    def should_transition(self, candidate: DisplayState) -> bool:
        current = self._state
        if current.is_data and candidate.is_data:
            return abs(current.gauge_value - candidate.gauge_value) > self.threshold
        if candidate.is_data:
            # First data after loading or logging in always renders
            return True
        return current != candidate

    def update(self, inputs: DisplayInputs) -> Optional[DisplayState]:
        """
        Re-evaluate from a fresh snapshot.

        Returns the new state when it changed, otherwise None.
        """
        try:
            candidate = compute_display_state(inputs, self.aggregator)
        except (AttributeError, TypeError, ValueError, ArithmeticError) as e:
            log.warning("display_inputs_malformed", error=str(e))
            candidate = DisplayState.loading()

        if not self.should_transition(candidate):
            return None

        previous = self._state
        self._state = candidate
        log.debug("display_state_changed", previous=str(previous), current=str(candidate))

        if self.on_change is not None:
            self.on_change(candidate)
        return candidate

    def reset(self) -> None:
        """Forget the current state, e.g. after logging out of every provider."""
        self._state = DisplayState.not_logged_in()
