"""Filter criteria and paginated product listing."""
import asyncio
import logging
import math
from dataclasses import dataclass, replace

from config import ALL_BRANDS, ALL_CATEGORIES, DEFAULT_PAGE_SIZE, PAGE_SIZE_OPTIONS
from src.models.product import Product
from src.services.api_client import RequestError

logger = logging.getLogger(__name__)

STOCK_STATUS_OPTIONS = {"all": "All Stock", "in": "In Stock", "low": "Low Stock", "out": "Out of Stock"}
STATUS_OPTIONS = {"all": "All Status", "active": "Active", "inactive": "Inactive"}


@dataclass(frozen=True)
class FilterCriteria:
    q: str = ""
    brand: str = ALL_BRANDS
    category: str = ALL_CATEGORIES
    stock_status: str = "all"
    status: str = "all"
    low_only: bool = False

    def to_params(self) -> dict:
        """Return the query params, leaving out every dimension at its no-op value."""
        params = {}
        q = (self.q or "").strip()
        if q:
            params["q"] = q
        if self.brand and self.brand != ALL_BRANDS:
            params["brand"] = self.brand
        if self.category and self.category != ALL_CATEGORIES:
            params["category"] = self.category
        if self.stock_status and self.stock_status != "all":
            params["stockStatus"] = self.stock_status
        if self.status and self.status != "all":
            params["status"] = self.status
        if self.low_only:
            params["lowOnly"] = "true"
        return params


def total_pages(total: int, page_size: int) -> int:
    """Number of pages for *total* rows; never less than one."""
    if total <= 0 or page_size <= 0:
        return 1
    return max(1, math.ceil(total / page_size))


class ProductQuery:
    """Current filter criteria, page position and the last loaded page.

    Loads are tagged with a sequence number; a response that arrives after a
    newer load was issued is dropped so the list always reflects the most
    recent criteria.
    """

    def __init__(self, client, page_size: int = DEFAULT_PAGE_SIZE):
        if page_size not in PAGE_SIZE_OPTIONS:
            raise ValueError(f"Unsupported page size: {page_size}")
        self.client = client
        self.criteria = FilterCriteria()
        self.page = 1
        self.page_size = page_size
        self.items: list[Product] = []
        self.total = 0
        self.brands: list[str] = [ALL_BRANDS]
        self.categories: list[str] = [ALL_CATEGORIES]
        self._seq = 0

    # ------------------------------------------------------------------
    # Derived values
    # ------------------------------------------------------------------

    @property
    def total_pages(self) -> int:
        return total_pages(self.total, self.page_size)

    @property
    def current_page(self) -> int:
        """The page to display, clamped into the available range."""
        return max(1, min(self.page, self.total_pages))

    @property
    def range_start(self) -> int:
        return 0 if self.total == 0 else (self.current_page - 1) * self.page_size

    @property
    def range_end(self) -> int:
        return min(self.total, self.range_start + len(self.items))

    @property
    def known_brands(self) -> list[str]:
        return self.brands[1:]

    @property
    def known_categories(self) -> list[str]:
        return self.categories[1:]

    # ------------------------------------------------------------------
    # Criteria changes (the caller reloads page 1 afterwards)
    # ------------------------------------------------------------------

    def set_filter(self, **changes) -> bool:
        """Apply filter changes. Returns False if nothing actually changed."""
        updated = replace(self.criteria, **changes)
        if updated == self.criteria:
            return False
        self.criteria = updated
        return True

    def clear_filters(self) -> bool:
        if self.criteria == FilterCriteria():
            return False
        self.criteria = FilterCriteria()
        return True

    def adjacent_page(self, direction: int) -> int:
        """Page number one step forward (+1) or back (-1), clamped to [1, total_pages]."""
        step = 1 if direction > 0 else -1
        return max(1, min(self.total_pages, self.current_page + step))

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    def request_params(self, page: int, page_size: int) -> dict:
        params = self.criteria.to_params()
        params["page"] = page
        params["pageSize"] = page_size
        return params

    async def load(self, page: int | None = None, page_size: int | None = None) -> bool:
        """Fetch a page from the API and store it.

        Page and page size only change once the response is applied.
        Returns True when it was applied, False when a newer load superseded
        it. Raises RequestError on failure, leaving the previously loaded
        page untouched.
        """
        target_page = page if page is not None else self.current_page
        target_size = page_size if page_size is not None else self.page_size
        if target_size not in PAGE_SIZE_OPTIONS:
            raise ValueError(f"Unsupported page size: {target_size}")

        self._seq += 1
        seq = self._seq
        params = self.request_params(max(1, target_page), target_size)

        loop = asyncio.get_event_loop()
        try:
            data = await loop.run_in_executor(None, self.client.list_products, params)
        except RequestError as exc:
            if seq != self._seq:
                logger.debug("Ignoring failure of stale products request (seq %d): %s", seq, exc)
                return False
            raise

        if seq != self._seq:
            logger.debug("Discarding stale products response (seq %d, latest %d)", seq, self._seq)
            return False

        self.items, self.total = _normalize_listing(data)
        self.page_size = target_size
        self.page = max(1, min(target_page, self.total_pages))
        return True

    async def load_meta(self) -> None:
        loop = asyncio.get_event_loop()
        data = await loop.run_in_executor(None, self.client.get_products_meta)
        data = data if isinstance(data, dict) else {}
        self.brands = [ALL_BRANDS] + [str(b) for b in data.get("brands") or []]
        self.categories = [ALL_CATEGORIES] + [str(c) for c in data.get("categories") or []]


def _normalize_listing(data) -> tuple[list[Product], int]:
    if not isinstance(data, dict):
        return [], 0
    raw_items = data.get("items")
    if not isinstance(raw_items, list):
        raw_items = []
    items = [Product.from_dict(item) for item in raw_items if isinstance(item, dict)]
    try:
        total = max(0, int(data.get("total") or 0))
    except (TypeError, ValueError):
        total = len(items)
    return items, total
