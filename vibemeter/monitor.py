"""
Spending Monitor - Push display state and summary changes to a subscriber.
"""

from typing import Callable, Optional

from vibemeter.display.engine import DisplayStateEngine
from vibemeter.display.state import DisplayInputs, DisplayState
from vibemeter.log import get_logger
from vibemeter.summary.builder import StatusSummaryBuilder
from vibemeter.summary.models import StatusSummary

log = get_logger("vibemeter.monitor")


class SpendingMonitor:
    """
    Re-evaluates the core whenever the shell delivers a new snapshot.

    The shell must only call ``publish`` with a complete, consistent snapshot;
    callbacks fire only for outputs that actually changed.
    """

    def __init__(
        self,
        engine: Optional[DisplayStateEngine] = None,
        builder: Optional[StatusSummaryBuilder] = None,
        on_display_state_changed: Optional[Callable[[DisplayState], None]] = None,
        on_summary_changed: Optional[Callable[[StatusSummary], None]] = None,
    ):
        self.engine = engine or DisplayStateEngine()
        self.builder = builder or StatusSummaryBuilder()
        self.on_display_state_changed = on_display_state_changed
        self.on_summary_changed = on_summary_changed
        self._summary: Optional[StatusSummary] = None

    @property
    def display_state(self) -> DisplayState:
        return self.engine.current_state

    @property
    def summary(self) -> Optional[StatusSummary]:
        return self._summary

    def publish(self, inputs: DisplayInputs) -> tuple[DisplayState, StatusSummary]:
        """Evaluate a snapshot and notify subscribers of whatever changed."""
        new_state = self.engine.update(inputs)
        if new_state is not None and self.on_display_state_changed is not None:
            self.on_display_state_changed(new_state)

        try:
            summary = self.builder.build(
                inputs.session,
                inputs.spending,
                inputs.rates,
                inputs.settings,
            )
        except (AttributeError, TypeError, ValueError, ArithmeticError) as e:
            # Same degradation as the engine: treat the spending as not fetched yet
            log.warning("spending_inputs_malformed", error=str(e))
            summary = self.builder.build(inputs.session, {}, inputs.rates, inputs.settings)

        if summary != self._summary:
            self._summary = summary
            log.debug("summary_changed", lines=len(summary.lines))
            if self.on_summary_changed is not None:
                self.on_summary_changed(summary)

        return self.engine.current_state, summary
