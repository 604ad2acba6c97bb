"""
Vibemeter - AI Spending Meter

Aggregate AI-service spending across providers and derive what the status
icon and its menu should show.
"""

__version__ = "0.1.0"
__author__ = "Yoshi Kondo"

from vibemeter.currency import ExchangeRateTable, convert
from vibemeter.display import DisplayInputs, DisplayState, DisplayStateEngine
from vibemeter.invoice import InvoiceSummarizer
from vibemeter.monitor import SpendingMonitor
from vibemeter.spending import SpendingAggregator
from vibemeter.summary import StatusSummary, StatusSummaryBuilder

__all__ = [
    "DisplayInputs",
    "DisplayState",
    "DisplayStateEngine",
    "ExchangeRateTable",
    "InvoiceSummarizer",
    "SpendingAggregator",
    "SpendingMonitor",
    "StatusSummary",
    "StatusSummaryBuilder",
    "convert",
]
