"""Domain models package."""
from src.models.product import Product, ProductDraft, ProductStatus, StockFlag, ValidationError
from src.models.dashboard import AlertRow, InvoiceRow, Kpi, PaymentSummaryRow, SalesBars

__all__ = [
    "Product",
    "ProductDraft",
    "ProductStatus",
    "StockFlag",
    "ValidationError",
    "Kpi",
    "InvoiceRow",
    "PaymentSummaryRow",
    "AlertRow",
    "SalesBars",
]
