"""
Summary Module - Status Menu Text
"""

from vibemeter.summary.builder import StatusSummaryBuilder
from vibemeter.summary.models import SEPARATOR, MenuAction, StatusSummary

__all__ = [
    "SEPARATOR",
    "MenuAction",
    "StatusSummary",
    "StatusSummaryBuilder",
]
