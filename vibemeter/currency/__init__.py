"""
Currency Module - USD Conversion

Convert USD spending into the user's selected currency using a rates
snapshot that may be stale or missing.
"""

from vibemeter.currency.converter import (
    convert,
    format_amount,
    format_cents,
    format_usd_fallback,
    rates_available,
)
from vibemeter.currency.rates import ExchangeRateTable

__all__ = [
    "ExchangeRateTable",
    "convert",
    "format_amount",
    "format_cents",
    "format_usd_fallback",
    "rates_available",
]
