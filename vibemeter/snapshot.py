"""
Snapshot documents - the JSON form of the core's inputs.

Used by the CLI and the REST API to validate input and turn it into the
immutable domain types.
"""

import json
import math
from datetime import datetime
from pathlib import Path
from typing import Optional, Union

from pydantic import BaseModel, Field, field_validator, model_validator

from vibemeter.config.settings import Settings
from vibemeter.currency.rates import ExchangeRateTable
from vibemeter.display.state import DisplayInputs
from vibemeter.providers.base import (
    InvoiceItem,
    ProviderId,
    ProviderSessionState,
    RefreshStatus,
    SpendingRecord,
    UserSession,
)


class SessionModel(BaseModel):
    """Login state for one provider."""
    is_logged_in: bool = False
    is_authenticating: bool = False
    last_error_message: Optional[str] = None
    user_email: Optional[str] = None
    team_name: Optional[str] = None
    team_fetch_failed: bool = False

    @model_validator(mode="after")
    def check_auth_flags(self):
        if self.is_logged_in and self.is_authenticating:
            raise ValueError("is_logged_in and is_authenticating cannot both be true")
        return self


class InvoiceItemModel(BaseModel):
    description: str
    cents: int
    category: Optional[str] = None


class SpendingModel(BaseModel):
    """Spending fetched for one provider."""
    total_cents: int = Field(..., ge=0, description="Total spend in US cents")
    items: list[InvoiceItemModel] = Field(default_factory=list)
    fetched_at: datetime = Field(default_factory=datetime.now)
    pricing_id: Optional[str] = None


class RatesModel(BaseModel):
    base_currency: str = "USD"
    rates: dict[str, float] = Field(default_factory=dict)
    as_of: Optional[datetime] = None

    @field_validator("base_currency")
    @classmethod
    def check_base(cls, value: str) -> str:
        if value.upper() != "USD":
            raise ValueError("only USD-based rate tables are supported")
        return value.upper()

    @field_validator("rates")
    @classmethod
    def check_positive(cls, value: dict[str, float]) -> dict[str, float]:
        for code, rate in value.items():
            if not math.isfinite(rate) or rate <= 0:
                raise ValueError(f"rate for {code} must be a positive finite number")
        return value

    def to_table(self) -> ExchangeRateTable:
        return ExchangeRateTable(rates=self.rates, as_of=self.as_of)


class SettingsModel(BaseModel):
    upper_limit_usd: Optional[float] = None
    warning_limit_usd: Optional[float] = None
    selected_currency_code: Optional[str] = None
    launch_at_login_enabled: Optional[bool] = None

    @field_validator("selected_currency_code")
    @classmethod
    def normalize_currency(cls, value: Optional[str]) -> Optional[str]:
        return value.strip().upper() if value else value


class Snapshot(BaseModel):
    """Complete input document."""
    providers: dict[ProviderId, SessionModel] = Field(default_factory=dict)
    refreshing: dict[ProviderId, bool] = Field(default_factory=dict)
    spending: dict[ProviderId, SpendingModel] = Field(default_factory=dict)
    rates: RatesModel = Field(default_factory=RatesModel)
    settings: SettingsModel = Field(default_factory=SettingsModel)

    def to_session(self) -> UserSession:
        return UserSession(providers={
            provider: ProviderSessionState(**state.model_dump())
            for provider, state in self.providers.items()
        })

    def to_spending(self) -> dict[ProviderId, SpendingRecord]:
        return {
            provider: SpendingRecord(
                total_cents=record.total_cents,
                fetched_at=record.fetched_at,
                items=tuple(InvoiceItem(**item.model_dump()) for item in record.items),
                pricing_id=record.pricing_id,
            )
            for provider, record in self.spending.items()
        }

    def to_rates(self) -> ExchangeRateTable:
        return self.rates.to_table()

    def to_settings(self, base: Optional[Settings] = None) -> Settings:
        base = base or Settings()
        return base.with_overrides(**self.settings.model_dump())

    def to_inputs(self, base_settings: Optional[Settings] = None) -> DisplayInputs:
        return DisplayInputs(
            session=self.to_session(),
            spending=self.to_spending(),
            settings=self.to_settings(base_settings),
            refresh=RefreshStatus(in_flight=dict(self.refreshing)),
            rates=self.to_rates(),
        )


def load_snapshot(source: Union[str, Path, dict]) -> Snapshot:
    """Load a snapshot from a JSON file path or an already-parsed dict."""
    if isinstance(source, dict):
        return Snapshot.model_validate(source)
    data = json.loads(Path(source).read_text(encoding="utf-8"))
    return Snapshot.model_validate(data)
