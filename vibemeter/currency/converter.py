"""
Currency conversion from USD amounts.
"""

from typing import Optional

from vibemeter.config.currencies import get_symbol
from vibemeter.currency.rates import ExchangeRateTable


def rates_available(target_currency: str, rates: ExchangeRateTable) -> bool:
    """True when ``convert`` can produce a value for this currency."""
    if target_currency.upper() == rates.base_currency:
        return True
    return rates.covers(target_currency)


def convert(
    amount_usd: float,
    target_currency: str,
    rates: ExchangeRateTable,
) -> Optional[float]:
    """
    Convert a USD amount into ``target_currency``.

    Returns None when the table has no rate for the target. No rounding is
    applied; callers format for display.
    """
    if target_currency.upper() == rates.base_currency:
        return amount_usd
    rate = rates.rate_for(target_currency)
    if rate is None:
        return None
    return amount_usd * rate


def format_usd_fallback(amount_usd: float) -> str:
    return f"${amount_usd:.2f} (USD)"


def format_amount(
    amount_usd: float,
    target_currency: str,
    rates: ExchangeRateTable,
) -> str:
    """Format in the target currency, or as an explicit USD literal when unconvertible."""
    converted = convert(amount_usd, target_currency, rates)
    if converted is None:
        return format_usd_fallback(amount_usd)
    return f"{get_symbol(target_currency)}{converted:.2f}"


def format_cents(cents: int, target_currency: str, rates: ExchangeRateTable) -> str:
    return format_amount(cents / 100, target_currency, rates)
