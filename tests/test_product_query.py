"""Tests for filter criteria, pagination math and the product listing loader."""
import asyncio
import threading

import pytest

from src.services.api_client import RequestError
from src.services.product_query import FilterCriteria, ProductQuery, _normalize_listing, total_pages


class TestFilterCriteria:

    def test_defaults_send_no_filters(self):
        assert FilterCriteria().to_params() == {}

    def test_search_is_trimmed(self):
        assert FilterCriteria(q="  noodles ").to_params() == {"q": "noodles"}

    def test_blank_search_is_omitted(self):
        assert "q" not in FilterCriteria(q="   ").to_params()

    def test_all_dimensions(self):
        params = FilterCriteria(
            q="rice", brand="Wai Wai", category="Snacks",
            stock_status="low", status="inactive", low_only=True,
        ).to_params()
        assert params == {
            "q": "rice",
            "brand": "Wai Wai",
            "category": "Snacks",
            "stockStatus": "low",
            "status": "inactive",
            "lowOnly": "true",
        }


@pytest.mark.parametrize(
    "total, size, expected",
    [(23, 6, 4), (24, 6, 4), (25, 6, 5), (0, 6, 1), (1, 50, 1)],
)
def test_total_pages(total, size, expected):
    assert total_pages(total, size) == expected


def test_normalize_listing_tolerates_garbage():
    assert _normalize_listing(None) == ([], 0)
    assert _normalize_listing({"items": "nope", "total": "x"}) == ([], 0)
    items, total = _normalize_listing({"items": [{"id": 1}, "bad"], "total": 9})
    assert [p.id for p in items] == ["1"]
    assert total == 9


def test_rejects_unsupported_page_size(fake_client):
    with pytest.raises(ValueError):
        ProductQuery(fake_client, page_size=7)


class TestProductQueryLoad:

    @pytest.mark.asyncio
    async def test_loads_first_page(self, fake_client):
        query = ProductQuery(fake_client)
        assert await query.load(page=1) is True
        assert len(query.items) == 6
        assert query.total == 23
        assert query.total_pages == 4
        assert (query.range_start, query.range_end) == (0, 6)
        assert fake_client.calls_to("list_products")[0][1] == {"page": 1, "pageSize": 6}

    @pytest.mark.asyncio
    async def test_last_page_range(self, fake_client):
        query = ProductQuery(fake_client)
        await query.load(page=4)
        assert query.current_page == 4
        assert (query.range_start, query.range_end) == (18, 23)

    @pytest.mark.asyncio
    async def test_page_beyond_end_is_clamped(self, fake_client):
        query = ProductQuery(fake_client)
        await query.load(page=4)
        await query.load(page=1, page_size=50)
        assert query.total_pages == 1
        assert query.adjacent_page(+1) == 1
        assert query.adjacent_page(-1) == 1

    @pytest.mark.asyncio
    async def test_empty_result(self, fake_client):
        fake_client.products = []
        query = ProductQuery(fake_client)
        await query.load(page=1)
        assert query.total_pages == 1
        assert (query.range_start, query.range_end) == (0, 0)

    @pytest.mark.asyncio
    async def test_failure_leaves_state_untouched(self, fake_client):
        query = ProductQuery(fake_client)
        await query.load(page=2)
        before = [p.id for p in query.items]
        fake_client.failures["list_products"] = RequestError("boom", 500)
        with pytest.raises(RequestError):
            await query.load(page=3, page_size=10)
        assert [p.id for p in query.items] == before
        assert query.page == 2
        assert query.page_size == 6

    @pytest.mark.asyncio
    async def test_stale_response_is_discarded(self, fake_client, make_product):
        gate = threading.Event()
        serve = fake_client.list_products

        def slow_list(params):
            if params.get("q") == "old":
                gate.wait(timeout=5)
                return {"items": [make_product("stale")], "total": 1}
            return serve(params)

        fake_client.list_products = slow_list
        query = ProductQuery(fake_client)
        query.set_filter(q="old")
        first = asyncio.ensure_future(query.load(page=1))
        await asyncio.sleep(0.05)

        query.set_filter(q="")
        assert await query.load(page=1) is True
        gate.set()
        assert await first is False
        assert query.total == 23
        assert "stale" not in [p.id for p in query.items]

    @pytest.mark.asyncio
    async def test_stale_failure_is_discarded(self, fake_client):
        gate = threading.Event()
        serve = fake_client.list_products

        def list_or_fail(params):
            if params.get("q") == "old":
                gate.wait(timeout=5)
                raise RequestError("old request timed out", 504)
            return serve(params)

        fake_client.list_products = list_or_fail
        query = ProductQuery(fake_client)
        query.set_filter(q="old")
        first = asyncio.ensure_future(query.load(page=1))
        await asyncio.sleep(0.05)

        query.set_filter(q="")
        assert await query.load(page=1) is True
        gate.set()
        assert await first is False
        assert query.total == 23

    @pytest.mark.asyncio
    async def test_load_meta_prepends_sentinels(self, fake_client):
        query = ProductQuery(fake_client)
        await query.load_meta()
        assert query.brands == ["All Brands", "CG Foods", "Wai Wai"]
        assert query.categories == ["All Categories", "Groceries", "Snacks"]
        assert query.known_brands == ["CG Foods", "Wai Wai"]


def test_set_filter_reports_changes(fake_client):
    query = ProductQuery(fake_client)
    assert query.set_filter(brand="Wai Wai") is True
    assert query.set_filter(brand="Wai Wai") is False
    assert query.clear_filters() is True
    assert query.clear_filters() is False
