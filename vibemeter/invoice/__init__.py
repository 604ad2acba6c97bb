"""
Invoice Module - Itemized Invoice Summaries
"""

from vibemeter.invoice.summarizer import InvoiceSummarizer, LineKind, SummaryLine, summarize

__all__ = [
    "InvoiceSummarizer",
    "LineKind",
    "SummaryLine",
    "summarize",
]
