"""Product model and the editable product draft."""
from __future__ import annotations

from dataclasses import dataclass, fields, replace
from enum import Enum

from config import (
    DEFAULT_BRAND,
    DEFAULT_CATEGORY,
    DEFAULT_LOW_STOCK_THRESHOLD,
    DEFAULT_THRESHOLD_QTY,
)


class ValidationError(Exception):
    """Raised when a product draft is missing required fields."""


class ProductStatus(str, Enum):
    ACTIVE = "Active"
    INACTIVE = "Inactive"


class StockFlag(str, Enum):
    IN_STOCK = "In Stock"
    LOW_STOCK = "Low Stock"
    OUT_OF_STOCK = "Out of Stock"


# Python attribute -> JSON key used by the collaborator API
_WIRE_NAMES = {
    "name": "name",
    "sku": "sku",
    "barcode": "barcode",
    "image_url": "imageUrl",
    "brand": "brand",
    "category": "category",
    "retail_price": "retailPrice",
    "wholesale_price": "wholesalePrice",
    "threshold_qty": "thresholdQty",
    "stock": "stock",
    "low_stock_threshold": "lowStockThreshold",
    "status": "status",
}


def _as_int(value, default: int = 0) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


def _as_float(value, default: float = 0.0) -> float:
    try:
        return float(value)
    except (TypeError, ValueError):
        return default


def _as_optional_str(value) -> str | None:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _as_status(value) -> ProductStatus:
    try:
        return ProductStatus(value)
    except ValueError:
        return ProductStatus.ACTIVE


def _fields_from_wire(data: dict) -> dict:
    """Map a camelCase API record onto snake_case draft fields."""
    return {
        "name": str(data.get("name") or ""),
        "sku": str(data.get("sku") or ""),
        "barcode": _as_optional_str(data.get("barcode")),
        "image_url": _as_optional_str(data.get("imageUrl")),
        "brand": str(data.get("brand") or ""),
        "category": str(data.get("category") or ""),
        "retail_price": _as_float(data.get("retailPrice")),
        "wholesale_price": _as_float(data.get("wholesalePrice")),
        "threshold_qty": _as_int(data.get("thresholdQty")),
        "stock": _as_int(data.get("stock")),
        "low_stock_threshold": _as_int(data.get("lowStockThreshold")),
        "status": _as_status(data.get("status")),
    }


@dataclass
class ProductDraft:
    """Editable product fields (a Product without its id)."""

    name: str = ""
    sku: str = ""
    barcode: str | None = None
    image_url: str | None = None
    brand: str = DEFAULT_BRAND
    category: str = DEFAULT_CATEGORY
    retail_price: float = 0.0
    wholesale_price: float = 0.0
    threshold_qty: int = DEFAULT_THRESHOLD_QTY
    stock: int = 0
    low_stock_threshold: int = DEFAULT_LOW_STOCK_THRESHOLD
    status: ProductStatus = ProductStatus.ACTIVE

    @classmethod
    def empty(cls, brands: list[str] | None = None, categories: list[str] | None = None) -> ProductDraft:
        """Return a blank draft preselecting the first known brand and category."""
        return cls(
            brand=brands[0] if brands else DEFAULT_BRAND,
            category=categories[0] if categories else DEFAULT_CATEGORY,
        )

    @classmethod
    def from_product(cls, product: Product) -> ProductDraft:
        return cls(**{f.name: getattr(product, f.name) for f in fields(cls)})

    def updated(self, **changes) -> ProductDraft:
        return replace(self, **changes)

    def validate(self) -> None:
        """Raise ValidationError unless the draft can be sent to the API."""
        if not (self.name or "").strip() or not (self.sku or "").strip():
            raise ValidationError("Name and SKU are required.")
        for attr, label in (
            ("retail_price", "Retail price"),
            ("wholesale_price", "Wholesale price"),
            ("threshold_qty", "Threshold quantity"),
            ("stock", "Stock"),
            ("low_stock_threshold", "Low-stock threshold"),
        ):
            if getattr(self, attr) < 0:
                raise ValidationError(f"{label} cannot be negative.")

    def to_payload(self) -> dict:
        """Serialize to the API's "Product minus id" JSON shape."""
        payload = {}
        for attr, key in _WIRE_NAMES.items():
            value = getattr(self, attr)
            if attr in ("name", "sku"):
                value = (value or "").strip()
            elif attr == "status":
                value = ProductStatus(value).value
            elif attr in ("barcode", "image_url"):
                value = _as_optional_str(value)
                if value is None:
                    continue
            payload[key] = value
        return payload


@dataclass
class Product:
    id: str
    name: str
    sku: str
    brand: str
    category: str
    retail_price: float = 0.0
    wholesale_price: float = 0.0
    threshold_qty: int = 0
    stock: int = 0
    low_stock_threshold: int = 0
    status: ProductStatus = ProductStatus.ACTIVE
    barcode: str | None = None
    image_url: str | None = None

    @classmethod
    def from_dict(cls, data: dict) -> Product:
        return cls(id=str(data.get("id", "")), **_fields_from_wire(data))

    @property
    def stock_flag(self) -> StockFlag:
        from src.services.stock_classifier import classify
        return classify(self.stock, self.low_stock_threshold)

    @property
    def is_active(self) -> bool:
        return self.status == ProductStatus.ACTIVE

    def __repr__(self) -> str:
        return f"<Product id={self.id!r} sku={self.sku!r} name={self.name!r}>"
