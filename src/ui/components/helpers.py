"""Shared UI helper functions and design tokens."""

from nicegui import ui

from config import CURRENCY_PREFIX


# ─── Design Tokens ────────────────────────────────────────────────────────────

HOVER_BG = "hover:bg-orange-50"

# Nav active-state tokens (used by the layout JS)
NAV_ACTIVE_BG = "#FFF1E6"
NAV_ACTIVE_BORDER = "#EA580C"
NAV_ACTIVE_TEXT = "#0F172A"

# Notification kinds -> ui.notify types
NOTIFY_TYPES = {
    "info": "info",
    "success": "positive",
    "danger": "negative",
}


def page_header(title: str, subtitle: str | None = None, icon: str | None = None):
    """Render a consistent page title with optional icon + subtitle."""
    with ui.row().classes("items-center gap-3"):
        if icon:
            ui.icon(icon, size="sm").classes("text-accent")
        ui.label(title).classes("text-h5 font-bold")
    if subtitle:
        ui.label(subtitle).classes("text-body2 text-secondary")


def section_header(title: str, icon: str | None = None, subtitle: str | None = None):
    """Render a consistent card section header with accent-colored icon."""
    with ui.row().classes("items-center gap-2 mb-2"):
        if icon:
            ui.icon(icon).classes("text-accent")
        ui.label(title).classes("text-subtitle1 font-bold")
    if subtitle:
        ui.label(subtitle).classes("text-caption text-secondary")


# ─── Status Badges ────────────────────────────────────────────────────────────

PRODUCT_STATUS_COLORS = {
    "Active": "positive",
    "Inactive": "grey-6",
}

STOCK_FLAG_COLORS = {
    "In Stock": "positive",
    "Low Stock": "warning",
    "Out of Stock": "negative",
}

INVOICE_STATUS_COLORS = {
    "Paid": "positive",
    "Partial": "warning",
    "Unpaid": "negative",
}

ALERT_TAG_COLORS = {
    "CRITICAL": "negative",
    "LOW": "orange",
    "INFO": "light-blue",
    "SYSTEM": "grey-7",
}


# Predefined palette for letter-avatar backgrounds
AVATAR_COLORS = [
    "#E57373", "#F06292", "#BA68C8", "#9575CD", "#7986CB",
    "#64B5F6", "#4FC3F7", "#4DD0E1", "#4DB6AC", "#81C784",
    "#AED581", "#DCE775", "#FFD54F", "#FFB74D", "#FF8A65",
    "#A1887F", "#90A4AE",
]


def avatar_color(name: str) -> str:
    """Return a deterministic color based on the first letter of *name*."""
    idx = ord(name[0].upper()) % len(AVATAR_COLORS) if name else 0
    return AVATAR_COLORS[idx]


def product_thumbnail(product, size: int = 40) -> None:
    """Render the product image, falling back to a letter avatar."""
    if product.image_url:
        ui.image(product.image_url).classes("rounded object-cover").style(
            f"width: {size}px; height: {size}px; flex-shrink: 0"
        )
        return
    name = product.name or "?"
    ui.avatar(
        name[0].upper(), color=avatar_color(name), text_color="white",
        size=f"{size}px", font_size=f"{size // 3}px",
    ).classes("rounded")


def format_money(amount, na_text: str = "-") -> str:
    """Format an amount in the shop currency, e.g. ``Rs 120.00``."""
    if amount is None:
        return na_text
    return f"{CURRENCY_PREFIX} {float(amount):.2f}"
