"""
Vibemeter CLI - Inspect spending snapshots from the command line.
"""

import json
from dataclasses import replace
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.rule import Rule
from rich.table import Table

from vibemeter.config.settings import Settings
from vibemeter.currency import ExchangeRateTable, convert, format_amount
from vibemeter.display import DisplayKind
from vibemeter.invoice import InvoiceSummarizer, LineKind
from vibemeter.log import setup_logging
from vibemeter.monitor import SpendingMonitor
from vibemeter.providers import ProviderId
from vibemeter.snapshot import RatesModel, Snapshot, load_snapshot
from vibemeter.spending import SpendingAggregator
from vibemeter.summary import SEPARATOR

app = typer.Typer(
    name="vibemeter",
    help="AI spending meter - aggregate provider spend and preview the status menu",
    add_completion=False,
)
console = Console()


def load_settings(
    doc: Snapshot,
    currency: Optional[str] = None,
    upper_limit: Optional[float] = None,
    warning_limit: Optional[float] = None,
) -> Settings:
    """Environment, then the snapshot's own settings, then command-line options."""
    settings = doc.to_settings(Settings.from_env()).with_overrides(
        selected_currency_code=currency.upper() if currency else None,
        upper_limit_usd=upper_limit,
        warning_limit_usd=warning_limit,
    )
    setup_logging(settings.log_level)
    return settings


def read_snapshot(path: Path) -> Snapshot:
    try:
        return load_snapshot(path)
    except (OSError, ValueError) as e:
        console.print(f"[red]Could not read snapshot {path}:[/] {escape(str(e))}")
        raise typer.Exit(code=1)


def print_json(data) -> None:
    console.print(
        json.dumps(data, indent=2, ensure_ascii=False),
        markup=False,
        highlight=False,
        soft_wrap=True,
    )


def gauge_bar(value: float, width: int = 20) -> str:
    filled = round(value * width)
    color = "green" if value < 0.5 else "yellow" if value < 0.8 else "red"
    return f"[{color}]{'█' * filled}[/]{'░' * (width - filled)} {value * 100:.0f}%"


@app.command()
def status(
    snapshot: Path = typer.Argument(..., help="Path to a JSON snapshot document"),
    currency: Optional[str] = typer.Option(None, "--currency", "-c", help="Display currency code"),
    upper_limit: Optional[float] = typer.Option(None, "--max", help="Upper spending limit in USD"),
    warning_limit: Optional[float] = typer.Option(None, "--warn", help="Warning limit in USD"),
    json_output: bool = typer.Option(False, "--json", "-j", help="Output as JSON"),
):
    """Show the display state and status menu for a snapshot."""
    doc = read_snapshot(snapshot)
    settings = load_settings(doc, currency, upper_limit, warning_limit)
    inputs = replace(doc.to_inputs(), settings=settings)

    monitor = SpendingMonitor()
    state, summary = monitor.publish(inputs)
    totals = SpendingAggregator().aggregate(inputs.spending)

    if json_output:
        output = {
            "display_state": state.to_dict(),
            "summary": summary.to_dict(),
            "spending": totals.to_dict(),
        }
        print_json(output)
        return

    if state.kind == DisplayKind.DATA:
        state_text = gauge_bar(state.gauge_value)
    elif state.kind == DisplayKind.LOADING:
        state_text = "[yellow]Loading...[/]"
    else:
        state_text = "[red]Not logged in[/]"

    console.print(Panel(
        f"[bold]Display State:[/] {state_text}\n"
        f"[bold]Currency:[/] {settings.selected_currency_code}\n"
        f"[bold]Invoice Details:[/] {'yes' if summary.has_debug_section else 'no'}",
        title="Vibemeter",
    ))

    for line in summary.lines:
        if line == SEPARATOR:
            console.print(Rule(style="dim"))
        else:
            console.print(line, markup=False)

    console.print()
    console.print(f"[dim]Actions: {', '.join(a.value for a in summary.actions)}[/]")


@app.command()
def spend(
    snapshot: Path = typer.Argument(..., help="Path to a JSON snapshot document"),
    currency: Optional[str] = typer.Option(None, "--currency", "-c"),
    json_output: bool = typer.Option(False, "--json", "-j"),
):
    """Show spending per provider."""
    doc = read_snapshot(snapshot)
    settings = load_settings(doc, currency)
    rates = doc.to_rates()
    result = SpendingAggregator().aggregate(doc.to_spending())

    if json_output:
        print_json(result.to_dict())
        return

    if not result.has_data:
        console.print("[yellow]No provider has delivered spending yet.[/]")
        return

    target = settings.selected_currency_code
    table = Table(title="Spending by Provider")
    table.add_column("Provider", style="magenta")
    table.add_column("USD", justify="right")
    table.add_column(target, justify="right")

    for provider, cents in result.per_provider.items():
        table.add_row(
            provider.display_name,
            f"${cents / 100:,.2f}",
            format_amount(cents / 100, target, rates),
        )
    table.add_row(
        "[bold]Total[/]",
        f"[bold]${result.total_usd:,.2f}[/]",
        f"[bold]{format_amount(result.total_usd, target, rates)}[/]",
    )
    console.print(table)


@app.command()
def invoice(
    snapshot: Path = typer.Argument(..., help="Path to a JSON snapshot document"),
    provider: ProviderId = typer.Option(ProviderId.CURSOR, "--provider", "-p"),
    currency: Optional[str] = typer.Option(None, "--currency", "-c"),
    max_items: int = typer.Option(8, "--max-items", "-m", help="Usage lines to show"),
    json_output: bool = typer.Option(False, "--json", "-j"),
):
    """Summarize a provider's itemized invoice."""
    doc = read_snapshot(snapshot)
    settings = load_settings(doc, currency)
    record = doc.to_spending().get(provider)

    if record is None:
        console.print(f"[yellow]No spending record for {provider.display_name}.[/]")
        raise typer.Exit(code=1)

    lines = InvoiceSummarizer(max_items).summarize(
        record.items,
        doc.to_rates(),
        settings.selected_currency_code,
    )

    if json_output:
        print_json([line.to_dict() for line in lines])
        return

    styles = {
        LineKind.PRIORITY: "green",
        LineKind.ITEM: "white",
        LineKind.OVERFLOW: "dim",
        LineKind.EMPTY: "yellow",
    }
    console.print(Panel(
        "\n".join(f"[{styles[line.kind]}]{line.text}[/]" for line in lines),
        title=f"{provider.display_name} Invoice ({len(record.items)} items)",
    ))


@app.command("convert")
def convert_amount(
    amount: float = typer.Argument(..., help="Amount in USD"),
    currency: str = typer.Argument(..., help="Target currency code"),
    rates_file: Optional[Path] = typer.Option(
        None,
        "--rates", "-r",
        help="JSON file mapping currency codes to USD multipliers",
    ),
):
    """Convert a USD amount using a rates table."""
    rates = ExchangeRateTable.empty()
    if rates_file is not None:
        try:
            data = json.loads(rates_file.read_text(encoding="utf-8"))
            rates = RatesModel(rates=data).to_table()
        except (OSError, ValueError) as e:
            console.print(f"[red]Could not read rates {rates_file}:[/] {escape(str(e))}")
            raise typer.Exit(code=1)

    converted = convert(amount, currency, rates)
    if converted is None:
        console.print(f"[yellow]No rate for {currency.upper()}.[/] {format_amount(amount, currency, rates)}")
        raise typer.Exit(code=2)

    console.print(format_amount(amount, currency, rates))


@app.command()
def version():
    """Show version information."""
    from vibemeter import __version__
    console.print(f"Vibemeter v{__version__}")
    console.print("AI spending meter")


def main():
    """Entry point."""
    app()


if __name__ == "__main__":
    main()
