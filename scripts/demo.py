#!/usr/bin/env python3
"""
Demo script for Vibemeter - AI Spending Meter.

Walks the status display through a login, a first fetch and a few refreshes.
"""

from datetime import datetime

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from vibemeter.config.settings import Settings
from vibemeter.currency import ExchangeRateTable
from vibemeter.display import DisplayInputs, DisplayState
from vibemeter.monitor import SpendingMonitor
from vibemeter.providers import (
    InvoiceItem,
    ProviderId,
    ProviderSessionState,
    RefreshStatus,
    SpendingRecord,
    UserSession,
)
from vibemeter.summary import SEPARATOR, StatusSummary


console = Console()

LOGGED_IN = UserSession(providers={
    ProviderId.CURSOR: ProviderSessionState(
        is_logged_in=True,
        user_email="dev@example.com",
        team_name="Vibe Coders",
    ),
})

DEMO_ITEMS = [
    InvoiceItem("Mid-month usage paid for May", -2000),
    InvoiceItem("512 premium requests (claude-4-sonnet)", 2048),
    InvoiceItem("210 fast requests (gpt-4.1)", 840),
    InvoiceItem("Extra usage: long-context agent sessions billed per token over quota", 1275),
]


def record(total_cents: int) -> SpendingRecord:
    return SpendingRecord(
        total_cents=total_cents,
        fetched_at=datetime.now(),
        items=DEMO_ITEMS,
        pricing_id="price_1PzXyAbCdEf",
    )


def main():
    console.print(Panel.fit(
        "[bold blue]Vibemeter[/bold blue]\n"
        "AI Spending Meter\n"
        "[dim]Demo Mode - Using simulated data[/dim]",
        border_style="blue",
    ))
    console.print()

    settings = Settings(upper_limit_usd=100.0, warning_limit_usd=50.0, selected_currency_code="EUR")
    rates = ExchangeRateTable(rates={"EUR": 0.92, "GBP": 0.79})

    transitions: list[DisplayState] = []
    summaries: list[StatusSummary] = []
    monitor = SpendingMonitor(
        on_display_state_changed=transitions.append,
        on_summary_changed=summaries.append,
    )

    steps = [
        ("Logged out", UserSession(), {}, {}),
        ("Logged in, first fetch running", LOGGED_IN, {}, {ProviderId.CURSOR: True}),
        ("First data", LOGGED_IN, {ProviderId.CURSOR: record(4163)}, {}),
        ("Sub-threshold change", LOGGED_IN, {ProviderId.CURSOR: record(4200)}, {}),
        ("Background refresh", LOGGED_IN, {ProviderId.CURSOR: record(4200)}, {ProviderId.CURSOR: True}),
        ("New spend", LOGGED_IN, {ProviderId.CURSOR: record(7350)}, {}),
    ]

    table = Table(title="Display State Transitions")
    table.add_column("Step", style="cyan")
    table.add_column("State")
    table.add_column("Notified", justify="center")

    for name, session, spending, refreshing in steps:
        before = len(transitions)
        state, _ = monitor.publish(DisplayInputs(
            session=session,
            spending=spending,
            settings=settings,
            refresh=RefreshStatus(in_flight=refreshing),
            rates=rates,
        ))
        notified = "[green]yes[/]" if len(transitions) > before else "[dim]no[/]"
        table.add_row(name, str(state), notified)

    console.print(table)
    console.print()

    console.print("[bold]Status menu after the last step:[/bold]")
    for line in summaries[-1].lines:
        console.print(f"   {'─' * 30}" if line == SEPARATOR else f"   {line}", markup=False)


if __name__ == "__main__":
    main()
