"""Shared layout: header, sidebar navigation, and content area."""
import asyncio
from urllib.parse import quote

from nicegui import ui

from config import APP_TITLE
from src.services.api_client import KhataSathiClient
from src.ui.components.helpers import HOVER_BG, NAV_ACTIVE_BG, NAV_ACTIVE_BORDER, NAV_ACTIVE_TEXT


# JavaScript to highlight the current sidebar nav link on page load.
_ACTIVE_NAV_JS = f"""
(function() {{
    var path = window.location.pathname;
    var links = document.querySelectorAll('.q-drawer a[href]');
    links.forEach(function(a) {{
        var href = a.getAttribute('href');
        var isActive = (href === '/') ? (path === '/') : path.startsWith(href);
        if (isActive) {{
            var row = a.querySelector('.row, .q-item');
            if (row) {{
                row.style.background = '{NAV_ACTIVE_BG}';
                row.style.borderLeft = '3px solid {NAV_ACTIVE_BORDER}';
            }}
            a.querySelectorAll('.text-secondary').forEach(function(child) {{
                child.style.color = '{NAV_ACTIVE_TEXT}';
                child.style.fontWeight = '600';
            }});
        }}
    }});
}})();
"""


def build_layout(title: str = APP_TITLE):
    """Create the shared page layout with sidebar navigation."""
    ui.colors(
        primary="#EA580C",
        secondary="#64748B",
        accent="#F97316",
        positive="#059669",
        negative="#E11D48",
    )

    with ui.header().classes("items-center justify-between px-4 bg-white text-dark").props("bordered"):
        with ui.row().classes("items-center gap-3"):
            ui.icon("dataset").classes("text-primary text-3xl")
            ui.label(APP_TITLE).classes("text-subtitle1 font-bold text-grey-9")

        # Global product search
        _search = ui.input(placeholder="Search products, SKU...").classes("w-72").props(
            "dense outlined rounded"
        )
        _search.props('prepend-inner-icon="search"')

        def _do_global_search(e=None):
            q = _search.value
            if q and q.strip():
                ui.navigate.to(f"/products?search={quote(q.strip())}")

        _search.on("keydown.enter", _do_global_search)

        ui.space()
        with ui.link(target="/login").classes("no-underline"):
            ui.button(icon="person").props("flat round color=primary").tooltip("Account")

    with ui.left_drawer(value=True).classes("bg-grey-1") as drawer:
        drawer.props("width=240 bordered")
        ui.element("div").classes("h-3")
        ui.label("MAIN MENU").classes("text-caption text-grey-6 px-4 mb-1")

        _nav_link("Dashboard", "dashboard", "/")
        _nav_link("Products", "inventory_2", "/products")

        ui.separator().classes("my-2")
        _render_api_status()

    ui.timer(0.1, lambda: ui.run_javascript(_ACTIVE_NAV_JS), once=True)

    content = ui.column().classes("w-full p-6 max-w-7xl mx-auto gap-4")
    return content


def _render_api_status():
    """Render the collaborator API liveness indicator at the bottom of the sidebar."""
    state = {"online": None}

    with ui.column().classes("w-full px-4 gap-1"):

        @ui.refreshable
        def _status_display():
            if state["online"] is None:
                with ui.row().classes("items-center gap-1"):
                    ui.spinner(size="xs")
                    ui.label("Checking API...").classes("text-caption text-grey-6")
            elif state["online"]:
                with ui.row().classes("items-center gap-1"):
                    ui.icon("check_circle", size="xs").classes("text-positive")
                    ui.label("API online").classes("text-caption text-positive")
            else:
                with ui.row().classes("items-center gap-1"):
                    ui.icon("error", size="xs").classes("text-negative")
                    ui.label("API unreachable").classes("text-caption text-negative")

        _status_display()

    async def _check():
        client = KhataSathiClient()
        state["online"] = await asyncio.get_event_loop().run_in_executor(
            None, client.check_health,
        )
        _status_display.refresh()

    ui.timer(0.2, _check, once=True)


def _nav_link(label: str, icon: str, path: str):
    """Render a main sidebar nav item."""
    with ui.link(target=path).classes("no-underline w-full"):
        with ui.row().classes(
            "items-center gap-3 px-4 py-2 rounded-lg w-full "
            f"{HOVER_BG} cursor-pointer"
        ):
            ui.icon(icon).classes("text-secondary")
            ui.label(label).classes("text-body1 text-secondary")
