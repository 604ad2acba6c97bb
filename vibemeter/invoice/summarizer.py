"""
Invoice Summarizer - Bounded, prioritized invoice lines for a narrow menu.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Sequence

from vibemeter.currency.converter import format_cents
from vibemeter.currency.rates import ExchangeRateTable
from vibemeter.providers.base import InvoiceItem

# Adjustment entries that are shown ahead of ordinary usage
PRIORITY_MARKER = "Mid-month usage paid"

PRIORITY_GLYPH = "💰"
ITEM_GLYPH = "•"

DEFAULT_MAX_OTHER_ITEMS = 8
# Slots given up to priority lines so the menu keeps roughly the same height
PRIORITY_RESERVED_SLOTS = 2

MAX_DESCRIPTION_LENGTH = 50
TRUNCATED_LENGTH = 47
ELLIPSIS = "..."

EMPTY_INVOICE_TEXT = "No usage items this period"


class LineKind(str, Enum):
    """Kinds of summary lines."""
    PRIORITY = "priority"
    ITEM = "item"
    OVERFLOW = "overflow"
    EMPTY = "empty"


@dataclass(frozen=True)
class SummaryLine:
    """A single rendered invoice line."""
    text: str
    kind: LineKind
    cents: Optional[int] = None

    def to_dict(self) -> dict:
        return {"text": self.text, "kind": self.kind.value, "cents": self.cents}


def is_priority(item: InvoiceItem) -> bool:
    return PRIORITY_MARKER in item.description


def truncate_description(description: str) -> str:
    if len(description) > MAX_DESCRIPTION_LENGTH:
        return description[:TRUNCATED_LENGTH] + ELLIPSIS
    return description


class InvoiceSummarizer:
    """Turns an itemized invoice into a short list of display lines."""

    def __init__(self, max_other_items: int = DEFAULT_MAX_OTHER_ITEMS):
        self.max_other_items = max_other_items

    def other_items_cap(self, has_priority: bool) -> int:
        if has_priority:
            return max(self.max_other_items - PRIORITY_RESERVED_SLOTS, 0)
        return max(self.max_other_items, 0)

    def summarize(
        self,
        items: Sequence[InvoiceItem],
        rates: ExchangeRateTable,
        target_currency: str,
    ) -> list[SummaryLine]:
        """
        Priority items first, then a capped run of the rest, then an overflow
        count for anything left out.
        """
        if not items:
            return [SummaryLine(text=EMPTY_INVOICE_TEXT, kind=LineKind.EMPTY)]

        priority = [i for i in items if is_priority(i)]
        other = [i for i in items if not is_priority(i)]

        lines = [
            self._format_item(item, PRIORITY_GLYPH, LineKind.PRIORITY, rates, target_currency)
            for item in priority
        ]

        shown_other = other[:self.other_items_cap(bool(priority))]
        lines.extend(
            self._format_item(item, ITEM_GLYPH, LineKind.ITEM, rates, target_currency)
            for item in shown_other
        )

        remaining = len(items) - len(priority) - len(shown_other)
        if remaining > 0:
            lines.append(SummaryLine(
                text=f"... and {remaining} more items",
                kind=LineKind.OVERFLOW,
            ))

        return lines

    def _format_item(
        self,
        item: InvoiceItem,
        glyph: str,
        kind: LineKind,
        rates: ExchangeRateTable,
        target_currency: str,
    ) -> SummaryLine:
        amount = format_cents(item.cents, target_currency, rates)
        return SummaryLine(
            text=f"{glyph} {truncate_description(item.description)}: {amount}",
            kind=kind,
            cents=item.cents,
        )


def summarize(
    items: Sequence[InvoiceItem],
    rates: ExchangeRateTable,
    target_currency: str,
    max_other_items: int = DEFAULT_MAX_OTHER_ITEMS,
) -> list[SummaryLine]:
    return InvoiceSummarizer(max_other_items).summarize(items, rates, target_currency)
