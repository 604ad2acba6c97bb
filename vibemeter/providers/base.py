"""
Base types shared by every cost-tracking provider.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Mapping, Optional


class ProviderId(str, Enum):
    """Supported cost-tracking providers."""
    CURSOR = "cursor"
    CLAUDE = "claude"

    @property
    def display_name(self) -> str:
        return PROVIDER_DISPLAY_NAMES.get(self, self.value.title())


PROVIDER_DISPLAY_NAMES = {
    ProviderId.CURSOR: "Cursor",
    ProviderId.CLAUDE: "Claude",
}


@dataclass(frozen=True)
class ProviderSessionState:
    """Login state for a single provider."""
    is_logged_in: bool = False
    is_authenticating: bool = False
    last_error_message: Optional[str] = None
    user_email: Optional[str] = None
    team_name: Optional[str] = None
    team_fetch_failed: bool = False

    def __post_init__(self):
        if self.is_logged_in and self.is_authenticating:
            raise ValueError("a provider cannot be logged in while still authenticating")


@dataclass(frozen=True)
class UserSession:
    """Immutable snapshot of login state across providers."""
    providers: Mapping[ProviderId, ProviderSessionState] = field(default_factory=dict)

    def state_for(self, provider: ProviderId) -> ProviderSessionState:
        """State for a provider, defaulting to logged out when never referenced."""
        return self.providers.get(provider) or ProviderSessionState()

    @property
    def logged_in_providers(self) -> list[ProviderId]:
        return [p for p in ProviderId if self.state_for(p).is_logged_in]

    @property
    def is_logged_in_to_any_provider(self) -> bool:
        return bool(self.logged_in_providers)

    @property
    def primary_provider(self) -> Optional[ProviderId]:
        """First logged-in provider, in declaration order."""
        logged_in = self.logged_in_providers
        return logged_in[0] if logged_in else None

    @property
    def first_error_message(self) -> Optional[str]:
        for provider in ProviderId:
            message = self.state_for(provider).last_error_message
            if message:
                return message
        return None


@dataclass(frozen=True)
class InvoiceItem:
    """A single invoice line. Negative cents are credits or refunds."""
    description: str
    cents: int
    category: Optional[str] = None


@dataclass(frozen=True)
class SpendingRecord:
    """Spending fetched for one provider, replaced wholesale on every refresh."""
    total_cents: int
    fetched_at: datetime
    items: tuple[InvoiceItem, ...] = ()
    pricing_id: Optional[str] = None

    def __post_init__(self):
        if self.total_cents < 0:
            raise ValueError(f"total_cents must be >= 0, got {self.total_cents}")
        # Accept any sequence but store a tuple so the record stays hashable
        object.__setattr__(self, "items", tuple(self.items))

    @property
    def total_usd(self) -> float:
        return self.total_cents / 100

    @property
    def has_itemized_invoice(self) -> bool:
        return len(self.items) > 0


@dataclass(frozen=True)
class RefreshStatus:
    """Per-provider refresh-in-progress flags."""
    in_flight: Mapping[ProviderId, bool] = field(default_factory=dict)

    @property
    def any_refreshing(self) -> bool:
        return any(self.in_flight.values())

    def is_refreshing(self, provider: ProviderId) -> bool:
        return bool(self.in_flight.get(provider, False))
