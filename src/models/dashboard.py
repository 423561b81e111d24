"""Dashboard records returned by the collaborator API."""
from __future__ import annotations

from dataclasses import dataclass, field

INVOICE_STATUSES = ("Paid", "Partial", "Unpaid")
ALERT_TAGS = ("CRITICAL", "LOW", "INFO", "SYSTEM")


def _text(data: dict, key: str, default: str = "") -> str:
    value = data.get(key)
    return default if value is None else str(value)


def _optional_text(data: dict, key: str) -> str | None:
    value = data.get(key)
    return str(value) if value else None


@dataclass
class Kpi:
    icon_name: str
    value: str
    label: str
    icon_bg_class: str = ""
    badge_text: str | None = None
    badge_icon_name: str | None = None
    badge_class: str | None = None

    @classmethod
    def from_dict(cls, data: dict) -> Kpi:
        return cls(
            icon_name=_text(data, "iconName", "insights"),
            value=_text(data, "value"),
            label=_text(data, "label"),
            icon_bg_class=_text(data, "iconBgClass"),
            badge_text=_optional_text(data, "badgeText"),
            badge_icon_name=_optional_text(data, "badgeIconName"),
            badge_class=_optional_text(data, "badgeClass"),
        )


@dataclass
class InvoiceRow:
    invoice_no: str
    customer: str
    cashier: str
    date: str
    total: str
    status: str = "Unpaid"

    @classmethod
    def from_dict(cls, data: dict) -> InvoiceRow:
        status = _text(data, "status", "Unpaid")
        return cls(
            invoice_no=_text(data, "invoiceNo"),
            customer=_text(data, "customer"),
            cashier=_text(data, "cashier"),
            date=_text(data, "date"),
            total=_text(data, "total"),
            status=status if status in INVOICE_STATUSES else "Unpaid",
        )


@dataclass
class PaymentSummaryRow:
    label: str
    value: str
    icon: str = "payments"
    icon_bg: str = ""

    @classmethod
    def from_dict(cls, data: dict) -> PaymentSummaryRow:
        return cls(
            label=_text(data, "label"),
            value=_text(data, "value"),
            icon=_text(data, "icon", "payments"),
            icon_bg=_text(data, "iconBg"),
        )


@dataclass
class AlertRow:
    title: str
    time: str
    icon: str = "notifications"
    tag: str = "INFO"

    @classmethod
    def from_dict(cls, data: dict) -> AlertRow:
        tag = _text(data, "tag", "INFO").upper()
        return cls(
            title=_text(data, "title"),
            time=_text(data, "time"),
            icon=_text(data, "icon", "notifications"),
            tag=tag if tag in ALERT_TAGS else "INFO",
        )


@dataclass
class SalesBars:
    today: list = field(default_factory=list)
    week: list = field(default_factory=list)
    month: list = field(default_factory=list)

    def for_range(self, range_key: str) -> list:
        if range_key == "week":
            return self.week
        if range_key == "month":
            return self.month
        return self.today
