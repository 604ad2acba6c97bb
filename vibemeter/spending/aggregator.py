"""
Spending Aggregator - Unified view across all providers.
"""

from typing import Mapping

from vibemeter.providers.base import ProviderId, SpendingRecord
from vibemeter.spending.models import AggregateResult


class SpendingAggregator:
    """Aggregates spending records across cost-tracking providers."""

    def aggregate(self, records: Mapping[ProviderId, SpendingRecord]) -> AggregateResult:
        """
        Sum spending across providers.

        Providers without a record are left out of ``per_provider`` rather than
        reported as zero, so callers can tell "not fetched yet" from "no spend".
        """
        per_provider = {}
        for provider, record in records.items():
            if record is None:
                continue
            per_provider[ProviderId(provider)] = record.total_cents

        return AggregateResult(
            total_usd_cents=sum(per_provider.values()),
            per_provider=per_provider,
        )


def aggregate(records: Mapping[ProviderId, SpendingRecord]) -> AggregateResult:
    return SpendingAggregator().aggregate(records)
