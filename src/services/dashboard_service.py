"""Dashboard data loading and the sales overview series."""
import asyncio
import logging
import math
from dataclasses import dataclass, field

from config import RECENT_INVOICE_DAYS
from src.models.dashboard import AlertRow, InvoiceRow, Kpi, PaymentSummaryRow, SalesBars

logger = logging.getLogger(__name__)

RANGES = ("today", "week", "month")

_RANGE_LABELS = {
    "today": [str(i) for i in range(1, 13)],
    "week": ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun", "W2", "W3", "W4", "W5", "W6"],
    "month": [f"W{i}" for i in range(1, 13)],
}
_GRANULARITY = {"today": "Hourly", "week": "Daily", "month": "Weekly"}
_SLOT_NAMES = {"today": "Slot", "week": "Day", "month": "Week"}


@dataclass
class DashboardData:
    kpis: list[Kpi] = field(default_factory=list)
    invoices: list[InvoiceRow] = field(default_factory=list)
    payment_summary: list[PaymentSummaryRow] = field(default_factory=list)
    alerts: list[AlertRow] = field(default_factory=list)
    sales_bars: SalesBars = field(default_factory=SalesBars)


def _records(raw, factory) -> list:
    if not isinstance(raw, list):
        return []
    return [factory(item) for item in raw if isinstance(item, dict)]


def normalize_invoices(raw) -> list[InvoiceRow]:
    """Accept either a bare list or an ``{"items": [...]}`` envelope."""
    if isinstance(raw, dict):
        raw = raw.get("items")
    return _records(raw, InvoiceRow.from_dict)


def normalize_sales_bars(raw) -> SalesBars:
    if not isinstance(raw, dict):
        return SalesBars()
    return SalesBars(**{
        key: raw.get(key) if isinstance(raw.get(key), list) else []
        for key in RANGES
    })


async def load_dashboard(client) -> DashboardData:
    """Fetch every dashboard section in parallel.

    Each section falls back to its empty value on its own, so one broken
    endpoint never blanks the whole page.
    """
    loop = asyncio.get_event_loop()
    sections = [
        ("kpis", None),
        ("recent-invoices", {"days": RECENT_INVOICE_DAYS}),
        ("payment-summary", None),
        ("alerts", None),
        ("sales-bars", None),
    ]
    kpis, invoices, payments, alerts, bars = await asyncio.gather(*[
        loop.run_in_executor(None, client.get_dashboard_section, name, params)
        for name, params in sections
    ])
    data = DashboardData(
        kpis=_records(kpis, Kpi.from_dict),
        invoices=normalize_invoices(invoices),
        payment_summary=_records(payments, PaymentSummaryRow.from_dict),
        alerts=_records(alerts, AlertRow.from_dict),
        sales_bars=normalize_sales_bars(bars),
    )
    logger.debug(
        "Dashboard loaded: %d kpis, %d invoices, %d alerts",
        len(data.kpis), len(data.invoices), len(data.alerts),
    )
    return data


def _finite(value) -> float:
    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0
    if not math.isfinite(number):
        return 0
    return int(number) if number.is_integer() else number


@dataclass
class SalesOverview:
    range_key: str
    labels: list[str]
    values: list[float]

    @classmethod
    def build(cls, bars: SalesBars, range_key: str) -> "SalesOverview":
        if range_key not in RANGES:
            range_key = "today"
        labels = _RANGE_LABELS[range_key]
        values = [_finite(v) for v in bars.for_range(range_key)][: len(labels)]
        values += [0] * (len(labels) - len(values))
        return cls(range_key=range_key, labels=list(labels), values=values)

    @property
    def granularity(self) -> str:
        return _GRANULARITY[self.range_key]

    @property
    def slot_name(self) -> str:
        return _SLOT_NAMES[self.range_key]

    @property
    def peak(self) -> float:
        return max(self.values) if self.values else 0

    @property
    def average(self) -> int:
        if not self.values:
            return 0
        return round(sum(self.values) / len(self.values))

    @property
    def peak_index(self) -> int:
        return self.values.index(self.peak) if self.values else 0

    def bar_percent(self, value: float) -> int:
        peak = self.peak
        if peak <= 0:
            return 0
        return round(value / peak * 100)
