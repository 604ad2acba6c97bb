"""
Data models for spending aggregation.
"""

from dataclasses import dataclass, field
from typing import Mapping

from vibemeter.providers.base import ProviderId


@dataclass(frozen=True)
class AggregateResult:
    """Combined spend across every provider that has delivered a record."""
    total_usd_cents: int = 0
    per_provider: Mapping[ProviderId, int] = field(default_factory=dict)

    @property
    def has_data(self) -> bool:
        """False until at least one provider has been fetched, even with zero spend."""
        return bool(self.per_provider)

    @property
    def total_usd(self) -> float:
        return self.total_usd_cents / 100

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "total_usd_cents": self.total_usd_cents,
            "total_usd": round(self.total_usd, 2),
            "has_data": self.has_data,
            "by_provider": {
                provider.value: cents
                for provider, cents in self.per_provider.items()
            },
        }
