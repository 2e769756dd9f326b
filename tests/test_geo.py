import httpx
import pytest

from app.infrastructure.ipinfo_api import IpInfoClient
from app.interfaces.deps import get_ipinfo_client

LITE_PAYLOAD = {
    "ip": "8.8.8.8",
    "asn": "AS15169",
    "as_name": "Google LLC",
    "as_domain": "google.com",
    "country_code": "US",
    "country": "United States",
    "continent_code": "NA",
    "continent": "North America",
}


@pytest.fixture
def upstream(app):
    """Route ipinfo calls to a handler the test controls."""
    calls = []
    state = {"response": httpx.Response(200, json=LITE_PAYLOAD)}

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        return state["response"]

    client = IpInfoClient(
        base_url="https://ipinfo.test/lite",
        token="tkn",
        timeout=1,
        retry_after=3600,
        transport=httpx.MockTransport(handler),
    )
    app.dependency_overrides[get_ipinfo_client] = lambda: client
    yield state, calls
    app.dependency_overrides.clear()


def test_geo_lookup(client, upstream):
    state, calls = upstream
    res = client.post("/api/geo", json={"ip": "8.8.8.8"})
    assert res.status_code == 200
    body = res.json()
    assert body["success"] is True
    data = body["data"]
    assert data["ip"] == "8.8.8.8"
    assert data["country_name"] == "United States"
    assert data["country_code"] == "US"
    assert data["org"] == "Google LLC"
    assert data["asn"] == "AS15169"
    assert data["continent_code"] == "NA"
    assert data["version"] == "IPv4"
    assert data["currency"] is None
    assert data["in_eu"] is None

    assert len(calls) == 1
    assert calls[0].url.path == "/lite/8.8.8.8"
    assert calls[0].url.params["token"] == "tkn"


def test_geo_lookup_ipv6(client, upstream):
    state, _ = upstream
    state["response"] = httpx.Response(200, json={"ip": "2001:4860:4860::8888", "country": "United States"})
    res = client.post("/api/geo", json={"ip": "2001:4860:4860::8888"})
    assert res.status_code == 200
    assert res.json()["data"]["version"] == "IPv6"


def test_geo_missing_ip(client, upstream):
    _, calls = upstream
    res = client.post("/api/geo", json={})
    assert res.status_code == 400
    assert res.json()["error"] == "missing_ip"
    assert calls == []


def test_geo_malformed_ip(client, upstream):
    _, calls = upstream
    res = client.post("/api/geo", json={"ip": "8.8.8.8/../admin"})
    assert res.status_code == 400
    assert calls == []


def test_geo_rate_limited(client, upstream):
    state, _ = upstream
    state["response"] = httpx.Response(429, json={"error": "rate limit"})
    res = client.post("/api/geo", json={"ip": "8.8.8.8"})
    assert res.status_code == 429
    body = res.json()
    assert body["error"] == "rate_limit_exceeded"
    assert body["retry_after"] == 3600
    assert res.headers["Retry-After"] == "3600"


def test_geo_upstream_failure(client, upstream):
    state, _ = upstream
    state["response"] = httpx.Response(503, text="unavailable")
    res = client.post("/api/geo", json={"ip": "8.8.8.8"})
    assert res.status_code == 502
    body = res.json()
    assert body["success"] is False
    assert body["error"] == "lookup_failed"
    assert "503" in body["message"]
