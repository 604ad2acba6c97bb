"""
Providers Module - Session and Spending Data Model

Snapshots of login state, refresh flags and spending records delivered by
each cost-tracking provider.
"""

from vibemeter.providers.base import (
    InvoiceItem,
    ProviderId,
    ProviderSessionState,
    RefreshStatus,
    SpendingRecord,
    UserSession,
)

__all__ = [
    "InvoiceItem",
    "ProviderId",
    "ProviderSessionState",
    "RefreshStatus",
    "SpendingRecord",
    "UserSession",
]
