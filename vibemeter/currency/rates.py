"""
Exchange rate snapshot.
"""

import math
from dataclasses import dataclass, field
from datetime import datetime
from typing import Mapping, Optional

from vibemeter.config.currencies import BASE_CURRENCY


@dataclass(frozen=True)
class ExchangeRateTable:
    """
    Point-in-time multipliers relative to USD.

    A code missing from ``rates`` means "not convertible now", never a rate of 1.
    """
    rates: Mapping[str, float] = field(default_factory=dict)
    as_of: Optional[datetime] = None
    base_currency: str = BASE_CURRENCY

    def __post_init__(self):
        normalized = {}
        for code, rate in self.rates.items():
            if not math.isfinite(rate) or rate <= 0:
                raise ValueError(f"exchange rate for {code} must be a positive finite number, got {rate}")
            normalized[code.upper()] = float(rate)
        object.__setattr__(self, "rates", normalized)

    @classmethod
    def empty(cls) -> "ExchangeRateTable":
        """Table used before any rates have been fetched."""
        return cls()

    def covers(self, currency_code: str) -> bool:
        return currency_code.upper() in self.rates

    def rate_for(self, currency_code: str) -> Optional[float]:
        return self.rates.get(currency_code.upper())
