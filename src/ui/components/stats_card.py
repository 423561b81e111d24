"""Reusable statistics card component."""
from nicegui import ui

_DEFAULT_BADGE_CLASSES = "bg-slate-50 text-slate-600 border-slate-100"


def stats_card(
    title: str,
    value: str,
    icon: str = "info",
    color: str = "primary",
    badge: str | None = None,
    badge_icon: str | None = None,
    icon_classes: str | None = None,
    badge_classes: str | None = None,
):
    """Render a small KPI / stats card.

    ``icon_classes`` styles the icon tile (e.g. ``"bg-orange-50 text-orange-600"``);
    without it the icon is tinted with the Quasar ``color``.
    """
    with ui.card().classes("min-w-[180px] flex-1 p-5"):
        with ui.row().classes("items-center gap-3 w-full"):
            if icon_classes:
                with ui.element("div").classes(
                    f"w-10 h-10 rounded-xl flex items-center justify-center {icon_classes}"
                ):
                    ui.icon(icon).classes("text-xl")
            else:
                ui.icon(icon).classes(f"text-{color} text-3xl")
            with ui.column().classes("gap-0 flex-1"):
                ui.label(value).classes("text-h5 font-bold")
                ui.label(title).classes("text-caption text-secondary")
            if badge:
                with ui.row().classes(
                    "items-center gap-1 rounded-full px-2 py-1 text-xs font-bold border "
                    f"{badge_classes or _DEFAULT_BADGE_CLASSES}"
                ):
                    if badge_icon:
                        ui.icon(badge_icon, size="xs")
                    ui.label(badge)
