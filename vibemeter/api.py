"""
Vibemeter REST API - FastAPI application serving the display state and menu text.
"""

from datetime import datetime
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from vibemeter import __version__
from vibemeter.config.settings import Settings
from vibemeter.currency import convert, format_amount
from vibemeter.invoice import InvoiceSummarizer
from vibemeter.monitor import SpendingMonitor
from vibemeter.providers import InvoiceItem
from vibemeter.snapshot import InvoiceItemModel, RatesModel, Snapshot
from vibemeter.spending import SpendingAggregator


# FastAPI app
app = FastAPI(
    title="Vibemeter API",
    description="AI spending meter - aggregate provider spend and derive the status display",
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# One monitor per process so hysteresis carries across requests
monitor = SpendingMonitor()


# Request models
class ConvertRequest(BaseModel):
    """Currency conversion request."""
    amount_usd: float = Field(..., description="Amount in USD")
    currency: str = Field(..., description="Target currency code")
    rates: RatesModel = Field(default_factory=RatesModel)


class InvoiceSummaryRequest(BaseModel):
    """Invoice summary request."""
    items: list[InvoiceItemModel] = Field(default_factory=list)
    currency: str = Field("USD", description="Display currency code")
    rates: RatesModel = Field(default_factory=RatesModel)
    max_other_items: int = Field(8, ge=0, description="Usage lines to show without credits")


# Routes
@app.get("/")
async def root():
    """API root - health check and info."""
    return {
        "name": "Vibemeter API",
        "version": __version__,
        "description": "AI spending meter",
        "endpoints": {
            "status": "/status",
            "display-state": "/display-state",
            "convert": "/convert",
            "invoice/summary": "/invoice/summary",
        },
    }


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "healthy", "timestamp": datetime.now().isoformat()}


@app.post("/status")
async def post_status(snapshot: Snapshot):
    """Evaluate a snapshot and return the display state and menu text."""
    inputs = snapshot.to_inputs(Settings.from_env())
    state, summary = monitor.publish(inputs)
    totals = SpendingAggregator().aggregate(inputs.spending)

    return {
        "display_state": state.to_dict(),
        "summary": summary.to_dict(),
        "spending": totals.to_dict(),
    }


@app.get("/display-state")
async def get_display_state():
    """Most recent display state."""
    return monitor.display_state.to_dict()


@app.post("/convert")
async def post_convert(request: ConvertRequest):
    """Convert a USD amount; ``converted`` is null when no rate is available."""
    rates = request.rates.to_table()
    converted: Optional[float] = convert(request.amount_usd, request.currency, rates)

    return {
        "amount_usd": request.amount_usd,
        "currency": request.currency.upper(),
        "converted": converted,
        "formatted": format_amount(request.amount_usd, request.currency, rates),
    }


@app.post("/invoice/summary")
async def post_invoice_summary(request: InvoiceSummaryRequest):
    """Prioritized, truncated invoice lines."""
    items = [InvoiceItem(**item.model_dump()) for item in request.items]
    lines = InvoiceSummarizer(request.max_other_items).summarize(
        items,
        request.rates.to_table(),
        request.currency,
    )

    return {
        "item_count": len(items),
        "lines": [line.to_dict() for line in lines],
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
