"""
Shared fixtures for Vibemeter tests.
"""

import copy
from datetime import datetime

import pytest

from vibemeter.config.settings import Settings
from vibemeter.currency import ExchangeRateTable
from vibemeter.log import setup_logging
from vibemeter.providers import (
    InvoiceItem,
    ProviderId,
    ProviderSessionState,
    SpendingRecord,
    UserSession,
)

# Configure before any module-level logger is first used
setup_logging("WARNING")

FETCHED_AT = datetime(2025, 6, 15, 12, 0, 0)


def build_record(total_cents: int, items=(), pricing_id=None) -> SpendingRecord:
    return SpendingRecord(
        total_cents=total_cents,
        fetched_at=FETCHED_AT,
        items=items,
        pricing_id=pricing_id,
    )


def build_items(count: int, prefix: str = "Usage") -> list[InvoiceItem]:
    return [InvoiceItem(f"{prefix} {i}", 100 + i) for i in range(count)]


SNAPSHOT = {
    "providers": {
        "cursor": {"is_logged_in": True, "user_email": "dev@example.com", "team_name": "Vibe Coders"},
    },
    "refreshing": {"cursor": False},
    "spending": {
        "cursor": {
            "total_cents": 4164,
            "items": [
                {"description": "Mid-month usage paid for May", "cents": -2000},
                {"description": "512 premium requests", "cents": 2048},
            ],
            "pricing_id": "price_1PzXyAbCdEf",
        },
    },
    "rates": {"rates": {"EUR": 0.5}},
    "settings": {"upper_limit_usd": 100.0, "selected_currency_code": "EUR"},
}


@pytest.fixture
def make_record():
    return build_record


@pytest.fixture
def make_items():
    return build_items


@pytest.fixture
def snapshot_data():
    """A logged-in Cursor snapshot with two invoice items and EUR rates."""
    return copy.deepcopy(SNAPSHOT)


@pytest.fixture
def settings():
    return Settings(upper_limit_usd=100.0, warning_limit_usd=50.0, selected_currency_code="USD")


@pytest.fixture
def eur_rates():
    return ExchangeRateTable(rates={"EUR": 0.5, "GBP": 0.8})


@pytest.fixture
def logged_in_session():
    return UserSession(providers={
        ProviderId.CURSOR: ProviderSessionState(
            is_logged_in=True,
            user_email="dev@example.com",
            team_name="Vibe Coders",
        ),
    })


@pytest.fixture
def logged_out_session():
    return UserSession()
