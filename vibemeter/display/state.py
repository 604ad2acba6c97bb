"""
Display states for the status icon.
"""

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Mapping, Optional

from vibemeter.config.settings import Settings
from vibemeter.currency.rates import ExchangeRateTable
from vibemeter.providers.base import ProviderId, RefreshStatus, SpendingRecord, UserSession


class DisplayKind(str, Enum):
    NOT_LOGGED_IN = "not_logged_in"
    LOADING = "loading"
    DATA = "data"


def clamp_gauge(value: float) -> float:
    if math.isnan(value):
        return 0.0
    return min(max(value, 0.0), 1.0)


@dataclass(frozen=True)
class DisplayState:
    """What the status icon shows. Only DATA carries a gauge value."""
    kind: DisplayKind
    gauge_value: Optional[float] = None

    def __post_init__(self):
        if self.kind == DisplayKind.DATA:
            object.__setattr__(self, "gauge_value", clamp_gauge(float(self.gauge_value or 0.0)))
        elif self.gauge_value is not None:
            raise ValueError(f"{self.kind.value} state carries no gauge value")

    @classmethod
    def not_logged_in(cls) -> "DisplayState":
        return cls(DisplayKind.NOT_LOGGED_IN)

    @classmethod
    def loading(cls) -> "DisplayState":
        return cls(DisplayKind.LOADING)

    @classmethod
    def data(cls, gauge_value: float) -> "DisplayState":
        return cls(DisplayKind.DATA, gauge_value)

    @property
    def is_data(self) -> bool:
        return self.kind == DisplayKind.DATA

    def to_dict(self) -> dict:
        return {
            "state": self.kind.value,
            "gauge_value": round(self.gauge_value, 4) if self.is_data else None,
        }

    def __str__(self) -> str:
        if self.is_data:
            return f"data({self.gauge_value:.2f})"
        return self.kind.value


@dataclass(frozen=True)
class DisplayInputs:
    """Every input the display state is derived from, as one consistent snapshot."""
    session: UserSession
    spending: Mapping[ProviderId, SpendingRecord]
    settings: Settings
    refresh: RefreshStatus = field(default_factory=RefreshStatus)
    rates: ExchangeRateTable = field(default_factory=ExchangeRateTable.empty)
