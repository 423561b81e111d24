"""HTTP client for the KhataSathi collaborator API."""
import logging
from urllib.parse import quote

import requests

from config import API_BASE_URL, REQUEST_TIMEOUT

logger = logging.getLogger(__name__)


class RequestError(Exception):
    """Raised when a collaborator API call fails or returns a non-2xx status."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class KhataSathiClient:
    """Thin ``requests`` wrapper around the products and dashboard endpoints."""

    _HEADERS = {
        "Content-Type": "application/json",
        "Accept": "application/json",
    }

    def __init__(
        self,
        base_url: str = API_BASE_URL,
        timeout: float = REQUEST_TIMEOUT,
        session: requests.Session | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update(self._HEADERS)

    # ------------------------------------------------------------------
    # Products
    # ------------------------------------------------------------------

    def list_products(self, params: dict) -> dict:
        """GET /api/products with already-normalized query params."""
        return self._request("GET", "/api/products", params=params)

    def get_products_meta(self) -> dict:
        return self._request("GET", "/api/products/meta")

    def create_product(self, payload: dict) -> dict:
        return self._request("POST", "/api/products", json=payload)

    def update_product(self, product_id: str, payload: dict) -> dict:
        return self._request("PUT", f"/api/products/{_quote_id(product_id)}", json=payload)

    def set_product_status(self, product_id: str, status: str) -> dict:
        return self._request(
            "PATCH",
            f"/api/products/{_quote_id(product_id)}/status",
            json={"status": status},
        )

    def bulk_set_status(self, ids: list[str], status: str) -> dict:
        return self._request(
            "POST", "/api/products/bulk-status", json={"ids": list(ids), "status": status},
        )

    # ------------------------------------------------------------------
    # Dashboard / health
    # ------------------------------------------------------------------

    def get_dashboard_section(self, section: str, params: dict | None = None):
        """Fetch one dashboard section, returning None on any failure."""
        try:
            return self._request("GET", f"/api/dashboard/{section}", params=params)
        except RequestError as exc:
            logger.warning("Dashboard section %s unavailable: %s", section, exc)
            return None

    def check_health(self) -> bool:
        """Return True when the collaborator answers its liveness probe."""
        try:
            self._request("GET", "/api/health")
            return True
        except RequestError:
            return False

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _request(self, method: str, path: str, params: dict | None = None, json=None):
        url = f"{self.base_url}{path}"
        try:
            resp = self.session.request(
                method, url, params=params, json=json, timeout=self.timeout,
            )
        except requests.RequestException as exc:
            logger.warning("%s %s failed: %s", method, path, exc)
            raise RequestError(str(exc) or "Request failed.") from exc

        if not resp.ok:
            text = (resp.text or "").strip()
            logger.warning("%s %s returned %d", method, path, resp.status_code)
            raise RequestError(text or f"Request failed ({resp.status_code})", resp.status_code)

        try:
            return resp.json()
        except ValueError as exc:
            raise RequestError("Invalid response from server.", resp.status_code) from exc


def _quote_id(product_id: str) -> str:
    return quote(str(product_id), safe="")
