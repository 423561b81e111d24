"""Tests for KhataSathiClient against a scripted requests session."""
import json

import pytest
import requests

from src.services.api_client import KhataSathiClient, RequestError


def _response(status=200, body=None, text=None):
    resp = requests.Response()
    resp.status_code = status
    resp.encoding = "utf-8"
    if text is None:
        text = json.dumps(body if body is not None else {})
    resp._content = text.encode("utf-8")
    return resp


class FakeSession:
    def __init__(self, *responses):
        self.headers = {}
        self.responses = list(responses)
        self.requests = []

    def request(self, method, url, params=None, json=None, timeout=None):
        self.requests.append({
            "method": method, "url": url, "params": params, "json": json, "timeout": timeout,
        })
        result = self.responses.pop(0)
        if isinstance(result, Exception):
            raise result
        return result


def _client(*responses):
    session = FakeSession(*responses)
    return KhataSathiClient(base_url="http://api.test/", timeout=3, session=session), session


def test_sets_json_headers():
    _, session = _client()
    assert session.headers["Content-Type"] == "application/json"
    assert session.headers["Accept"] == "application/json"


def test_list_products_passes_params():
    client, session = _client(_response(body={"items": [], "total": 0}))
    assert client.list_products({"page": 1, "pageSize": 6}) == {"items": [], "total": 0}
    sent = session.requests[0]
    assert sent["method"] == "GET"
    assert sent["url"] == "http://api.test/api/products"
    assert sent["params"] == {"page": 1, "pageSize": 6}
    assert sent["timeout"] == 3


def test_update_quotes_id():
    client, session = _client(_response(body={"id": "a/b"}))
    client.update_product("a/b", {"name": "x"})
    assert session.requests[0]["url"] == "http://api.test/api/products/a%2Fb"
    assert session.requests[0]["method"] == "PUT"


def test_status_endpoints():
    client, session = _client(_response(body={"ok": True}), _response(body={"ok": True}))
    client.set_product_status("7", "Inactive")
    client.bulk_set_status(["1", "2"], "Active")
    single, bulk = session.requests
    assert single["method"] == "PATCH"
    assert single["url"].endswith("/api/products/7/status")
    assert single["json"] == {"status": "Inactive"}
    assert bulk["url"].endswith("/api/products/bulk-status")
    assert bulk["json"] == {"ids": ["1", "2"], "status": "Active"}


def test_error_body_becomes_message():
    client, _ = _client(_response(status=400, text="SKU already exists"))
    with pytest.raises(RequestError) as exc_info:
        client.create_product({"name": "x"})
    assert exc_info.value.message == "SKU already exists"
    assert exc_info.value.status_code == 400


def test_empty_error_body_uses_status():
    client, _ = _client(_response(status=500, text="  "))
    with pytest.raises(RequestError, match=r"Request failed \(500\)"):
        client.get_products_meta()


def test_transport_error_is_wrapped():
    client, _ = _client(requests.ConnectionError("connection refused"))
    with pytest.raises(RequestError, match="connection refused"):
        client.list_products({})


def test_invalid_json():
    client, _ = _client(_response(text="<html>"))
    with pytest.raises(RequestError, match="Invalid response from server."):
        client.list_products({})


def test_dashboard_section_swallows_failures():
    client, session = _client(_response(status=502, text="bad gateway"))
    assert client.get_dashboard_section("recent-invoices", {"days": 7}) is None
    assert session.requests[0]["url"].endswith("/api/dashboard/recent-invoices")
    assert session.requests[0]["params"] == {"days": 7}


def test_check_health():
    client, _ = _client(_response(body={"status": "OK"}), requests.Timeout("slow"))
    assert client.check_health() is True
    assert client.check_health() is False
