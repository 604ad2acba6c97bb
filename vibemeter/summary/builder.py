"""
Status Summary Builder - Assembles the menu text shown under the status icon.
"""

from typing import Mapping, Optional

from vibemeter.config.settings import Settings
from vibemeter.currency.converter import format_amount, rates_available
from vibemeter.currency.rates import ExchangeRateTable
from vibemeter.invoice.summarizer import InvoiceSummarizer
from vibemeter.providers.base import ProviderId, SpendingRecord, UserSession
from vibemeter.spending.aggregator import SpendingAggregator
from vibemeter.summary.models import SEPARATOR, MenuAction, StatusSummary

TEAM_FETCH_FAILED_BANNER = "Hmm, can't find your team vibe right now. 😕 Try a refresh?"
MISSING_RATES_BANNER = "Rates MIA! Showing USD for now. ✨"
INVOICE_HEADER = "📋 Invoice Details"
PRICING_ID_PREFIX_LENGTH = 8


class StatusSummaryBuilder:
    """Builds a ``StatusSummary`` from immutable snapshots of the inputs."""

    def __init__(
        self,
        aggregator: Optional[SpendingAggregator] = None,
        summarizer: Optional[InvoiceSummarizer] = None,
    ):
        self.aggregator = aggregator or SpendingAggregator()
        self.summarizer = summarizer or InvoiceSummarizer()

    def build(
        self,
        session: UserSession,
        spending: Mapping[ProviderId, SpendingRecord],
        rates: ExchangeRateTable,
        settings: Settings,
    ) -> StatusSummary:
        currency = settings.selected_currency_code
        logged_in = session.is_logged_in_to_any_provider
        primary = session.primary_provider
        primary_state = session.state_for(primary) if primary else None

        result = self.aggregator.aggregate(spending)

        lines = self._banners(session, rates, currency, result.has_data)
        if lines:
            lines.append(SEPARATOR)

        has_debug_section = False
        if logged_in:
            if primary_state.user_email:
                lines.append(f"Logged In As: {primary_state.user_email}")
            else:
                lines.append("Logged In")

            if result.has_data:
                spending_text = format_amount(result.total_usd, currency, rates)
            else:
                spending_text = "Loading..."
            lines.append(f"Current Spending: {spending_text}")
            lines.append(f"Warning at: {format_amount(settings.warning_limit_usd, currency, rates)}")
            lines.append(f"Max: {format_amount(settings.upper_limit_usd, currency, rates)}")

            if primary_state.team_name:
                lines.append(f"Vibing with: {primary_state.team_name}")

            record = spending.get(primary)
            if record is not None and record.has_itemized_invoice:
                has_debug_section = True
                lines.extend(self._invoice_block(record, rates, currency))

        return StatusSummary(
            lines=tuple(lines),
            has_debug_section=has_debug_section,
            actions=self._actions(logged_in),
            launch_at_login_enabled=settings.launch_at_login_enabled,
        )

    def _banners(
        self,
        session: UserSession,
        rates: ExchangeRateTable,
        currency: str,
        has_data: bool,
    ) -> list[str]:
        banners = []

        error_message = session.first_error_message
        if error_message:
            banners.append(error_message)

        if not session.is_logged_in_to_any_provider:
            return banners

        if any(session.state_for(p).team_fetch_failed for p in session.logged_in_providers):
            banners.append(TEAM_FETCH_FAILED_BANNER)

        # One banner per build, however many amounts fall back to USD;
        # nothing is announced until spending has arrived
        if has_data and not rates_available(currency, rates):
            banners.append(MISSING_RATES_BANNER)

        return banners

    def _invoice_block(
        self,
        record: SpendingRecord,
        rates: ExchangeRateTable,
        currency: str,
    ) -> list[str]:
        lines = [
            SEPARATOR,
            INVOICE_HEADER,
            f"Total: {format_amount(record.total_usd, currency, rates)}",
            f"Usage Items: {len(record.items)}",
        ]
        lines.extend(line.text for line in self.summarizer.summarize(record.items, rates, currency))

        if record.pricing_id:
            lines.append(f"Pricing ID: {record.pricing_id[:PRICING_ID_PREFIX_LENGTH]}...")
        return lines

    @staticmethod
    def _actions(logged_in: bool) -> tuple[MenuAction, ...]:
        if logged_in:
            actions = [MenuAction.REFRESH, MenuAction.SETTINGS, MenuAction.LOG_OUT]
        else:
            actions = [MenuAction.LOGIN, MenuAction.REFRESH, MenuAction.SETTINGS]
        actions.extend([MenuAction.TOGGLE_LAUNCH_AT_LOGIN, MenuAction.QUIT])
        return tuple(actions)
