"""KhataSathi admin dashboard - main entry point."""
import logging

from nicegui import app, ui

from config import APP_HOST, APP_PORT, APP_TITLE, LOG_LEVEL
from src.services.health import health_payload
from src.ui.pages.dashboard import dashboard_page
from src.ui.pages.login import login_page
from src.ui.pages.products import products_page

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)


@ui.page("/")
def index():
    dashboard_page()


@ui.page("/dashboard")
def dashboard_redirect():
    ui.navigate.to("/")


@ui.page("/products")
def products_view(search: str | None = None):
    products_page(search=search)


@ui.page("/login")
def login_view():
    login_page()


@app.get("/api/health")
async def health_check():
    return health_payload()


ui.run(
    title=APP_TITLE,
    host=APP_HOST,
    port=APP_PORT,
    reload=False,
    dark=False,
)
