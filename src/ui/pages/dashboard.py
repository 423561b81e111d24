"""Dashboard page -- business KPIs, invoices and sales overview."""
from nicegui import ui

from src.services.api_client import KhataSathiClient
from src.services.dashboard_service import RANGES, DashboardData, SalesOverview, load_dashboard
from src.ui.components.helpers import ALERT_TAG_COLORS, INVOICE_STATUS_COLORS, section_header
from src.ui.components.stats_card import stats_card
from src.ui.layout import build_layout

_INVOICE_COLUMNS = [
    {"name": "invoice_no", "label": "Invoice", "field": "invoice_no", "align": "left"},
    {"name": "customer", "label": "Customer", "field": "customer", "align": "left"},
    {"name": "cashier", "label": "Cashier", "field": "cashier", "align": "left"},
    {"name": "date", "label": "Date", "field": "date", "align": "left"},
    {"name": "total", "label": "Total", "field": "total", "align": "right"},
    {"name": "status", "label": "Status", "field": "status", "align": "center"},
]


def dashboard_page():
    """Render the main dashboard."""
    content = build_layout()
    state = {"data": DashboardData(), "range": "today", "loaded": False}

    with content:
        ui.label("Dashboard").classes("text-h5 font-bold")
        ui.label("Today's sales, payments and stock alerts.").classes("text-body2 text-secondary")

        @ui.refreshable
        def kpi_row():
            data = state["data"]
            if not state["loaded"]:
                with ui.row().classes("items-center gap-2"):
                    ui.spinner(size="sm")
                    ui.label("Loading dashboard...").classes("text-body2 text-secondary")
                return
            if not data.kpis:
                with ui.card().classes("w-full p-5"):
                    with ui.row().classes("items-center gap-2"):
                        ui.icon("insights").classes("text-grey-5")
                        ui.label("No KPIs available yet.").classes("text-body2 text-secondary")
                return
            with ui.row().classes("w-full gap-4 flex-wrap"):
                for kpi in data.kpis:
                    stats_card(
                        kpi.label, kpi.value, icon=kpi.icon_name,
                        badge=kpi.badge_text, badge_icon=kpi.badge_icon_name,
                        icon_classes=kpi.icon_bg_class or None,
                        badge_classes=kpi.badge_class,
                    )

        kpi_row()

        with ui.row().classes("w-full gap-4 items-start no-wrap"):
            with ui.column().classes("flex-[2] gap-4"):

                @ui.refreshable
                def invoices_card():
                    invoices = state["data"].invoices
                    with ui.card().classes("w-full p-5"):
                        section_header("Recent Invoices", icon="receipt_long", subtitle="Last 7 days")
                        if not invoices:
                            ui.label("No invoices yet.").classes("text-body2 text-secondary")
                            return
                        rows = [
                            {**vars(row), "_color": INVOICE_STATUS_COLORS.get(row.status, "grey-5")}
                            for row in invoices
                        ]
                        table = ui.table(
                            columns=_INVOICE_COLUMNS,
                            rows=rows,
                            row_key="invoice_no",
                        ).classes("w-full").props("flat dense")
                        table.add_slot("body-cell-status", """
                            <q-td :props="props">
                                <q-badge :color="props.row._color" :label="props.value" />
                            </q-td>
                        """)

                invoices_card()

                @ui.refreshable
                def sales_card():
                    overview = SalesOverview.build(state["data"].sales_bars, state["range"])
                    with ui.card().classes("w-full p-5"):
                        with ui.row().classes("w-full items-center justify-between"):
                            with ui.row().classes("items-center gap-2"):
                                section_header("Sales Overview", icon="bar_chart")
                                ui.label(overview.granularity.upper()).classes(
                                    "text-caption text-grey-6"
                                )
                            ui.toggle(
                                {r: r.capitalize() for r in RANGES},
                                value=overview.range_key,
                                on_change=lambda e: _set_range(e.value),
                            ).props("dense no-caps toggle-color=primary")
                        ui.label(
                            f"Avg: {overview.average}  •  Peak: {overview.peak} "
                            f"({overview.slot_name} {overview.peak_index + 1})"
                        ).classes("text-caption text-secondary")
                        ui.echart({
                            "tooltip": {"trigger": "item"},
                            "grid": {"left": 40, "right": 10, "top": 20, "bottom": 30},
                            "xAxis": {"type": "category", "data": overview.labels},
                            "yAxis": {"type": "value"},
                            "series": [{
                                "type": "bar",
                                "data": [
                                    {
                                        "value": v,
                                        "itemStyle": {"color": "#F97316" if i % 3 == 1 else "#FED7AA"},
                                        "tooltip": {
                                            "formatter": f"{label}: {v} ({overview.bar_percent(v)}%)",
                                        },
                                    }
                                    for i, (label, v) in enumerate(zip(overview.labels, overview.values))
                                ],
                            }],
                        }).classes("w-full").style("height: 260px")

                def _set_range(range_key: str):
                    state["range"] = range_key
                    sales_card.refresh()

                sales_card()

            with ui.column().classes("flex-1 gap-4"):

                @ui.refreshable
                def side_cards():
                    data = state["data"]
                    with ui.card().classes("w-full p-5"):
                        section_header("Payment Summary", icon="account_balance_wallet")
                        if not data.payment_summary:
                            ui.label("No payments recorded.").classes("text-body2 text-secondary")
                        for row in data.payment_summary:
                            with ui.row().classes("w-full items-center gap-3"):
                                ui.icon(row.icon).classes("text-accent")
                                ui.label(row.label).classes("text-body2 flex-1")
                                ui.label(row.value).classes("text-body2 font-bold")

                    with ui.card().classes("w-full p-5"):
                        section_header("Alerts", icon="notifications_active")
                        if not data.alerts:
                            ui.label("No alerts.").classes("text-body2 text-secondary")
                        for alert in data.alerts:
                            with ui.row().classes("w-full items-start gap-3"):
                                ui.icon(alert.icon).classes("text-secondary")
                                with ui.column().classes("gap-0 flex-1"):
                                    ui.label(alert.title).classes("text-body2 font-medium")
                                    ui.label(alert.time).classes("text-caption text-secondary")
                                ui.badge(
                                    alert.tag, color=ALERT_TAG_COLORS.get(alert.tag, "grey-5"),
                                ).props("outline")

                    with ui.card().classes("w-full p-5"):
                        section_header("Quick Actions", icon="bolt")
                        ui.button(
                            "Add Product", icon="add",
                            on_click=lambda: ui.navigate.to("/products"),
                        ).props("color=primary").classes("w-full")
                        ui.button(
                            "View Low Stock", icon="inventory",
                            on_click=lambda: ui.navigate.to("/products"),
                        ).props("outline color=secondary").classes("w-full")

                side_cards()

    async def _load():
        state["data"] = await load_dashboard(KhataSathiClient())
        state["loaded"] = True
        try:
            kpi_row.refresh()
            invoices_card.refresh()
            sales_card.refresh()
            side_cards.refresh()
        except RuntimeError:
            pass  # User navigated away during load

    ui.timer(0.1, _load, once=True)
