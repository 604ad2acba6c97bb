"""
Configuration module for Vibemeter.
"""

from vibemeter.config.currencies import BASE_CURRENCY, CURRENCY_SYMBOLS, get_symbol
from vibemeter.config.settings import Settings

__all__ = ["BASE_CURRENCY", "CURRENCY_SYMBOLS", "Settings", "get_symbol"]
