"""
Spending Module - Unified Spend Aggregation

Aggregate AI-service spend across all logged-in providers into a single total.
"""

from vibemeter.spending.aggregator import SpendingAggregator, aggregate
from vibemeter.spending.models import AggregateResult

__all__ = [
    "AggregateResult",
    "SpendingAggregator",
    "aggregate",
]
