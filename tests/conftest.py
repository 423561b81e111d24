"""
Shared fixtures: an in-memory stand-in for the collaborator API.
"""

import pytest

from src.services.api_client import RequestError


def product_dict(pid, **overrides):
    data = {
        "id": str(pid),
        "name": f"Product {pid}",
        "sku": f"SKU-{pid}",
        "brand": "CG Foods",
        "category": "Groceries",
        "retailPrice": 100.0,
        "wholesalePrice": 80.0,
        "thresholdQty": 10,
        "stock": 20,
        "lowStockThreshold": 5,
        "status": "Active",
    }
    data.update(overrides)
    return data


class FakeClient:
    """Records every call and serves products from a list, paginated."""

    def __init__(self, products=None, brands=None, categories=None):
        self.products = [dict(p) for p in (products or [])]
        self.brands = brands if brands is not None else ["CG Foods", "Wai Wai"]
        self.categories = categories if categories is not None else ["Groceries", "Snacks"]
        self.calls = []
        self.failures = {}
        self._next_id = 1000

    def _record(self, name, *args):
        self.calls.append((name, *args))
        if name in self.failures:
            raise self.failures[name]

    def calls_to(self, name):
        return [c for c in self.calls if c[0] == name]

    def list_products(self, params):
        self._record("list_products", dict(params))
        rows = self.products
        if "q" in params:
            rows = [p for p in rows if params["q"].lower() in p["name"].lower()]
        if "brand" in params:
            rows = [p for p in rows if p["brand"] == params["brand"]]
        page, size = params["page"], params["pageSize"]
        start = (page - 1) * size
        return {"items": rows[start:start + size], "total": len(rows)}

    def get_products_meta(self):
        self._record("get_products_meta")
        return {"brands": list(self.brands), "categories": list(self.categories)}

    def create_product(self, payload):
        self._record("create_product", payload)
        self._next_id += 1
        created = dict(payload, id=str(self._next_id))
        self.products.insert(0, created)
        return created

    def update_product(self, product_id, payload):
        self._record("update_product", product_id, payload)
        for p in self.products:
            if p["id"] == product_id:
                p.update(payload)
                return p
        raise RequestError("Product not found", 404)

    def set_product_status(self, product_id, status):
        self._record("set_product_status", product_id, status)
        for p in self.products:
            if p["id"] == product_id:
                p["status"] = status
        return {"ok": True}

    def bulk_set_status(self, ids, status):
        self._record("bulk_set_status", list(ids), status)
        for p in self.products:
            if p["id"] in ids:
                p["status"] = status
        return {"ok": True}


@pytest.fixture
def make_product():
    return product_dict


@pytest.fixture
def fake_client():
    return FakeClient(products=[product_dict(i) for i in range(1, 24)])
