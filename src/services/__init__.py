"""Services package."""
from src.services.api_client import KhataSathiClient, RequestError
from src.services.auth_form import LoginForm
from src.services.dashboard_service import DashboardData, SalesOverview, load_dashboard
from src.services.health import health_payload
from src.services.product_query import FilterCriteria, ProductQuery, total_pages
from src.services.products_view_model import (
    DialogState,
    Notification,
    NotificationKind,
    ProductsViewModel,
)
from src.services.selection import SelectionTracker
from src.services.stock_classifier import classify

__all__ = [
    "KhataSathiClient",
    "RequestError",
    "LoginForm",
    "DashboardData",
    "SalesOverview",
    "load_dashboard",
    "health_payload",
    "FilterCriteria",
    "ProductQuery",
    "total_pages",
    "DialogState",
    "Notification",
    "NotificationKind",
    "ProductsViewModel",
    "SelectionTracker",
    "classify",
]
