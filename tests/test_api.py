import pytest
from fastapi.testclient import TestClient

from currency_converter.core.config import Settings
from currency_converter.main import create_app


def test_health_reports_seeded_edges(client):
    resp = client.get("/health")

    assert resp.status_code == 200
    assert resp.json() == {"status": "ok", "edges": 4}


def test_list_rates(client):
    rates = client.get("/rates").json()

    assert {"from_currency": "USD", "to_currency": "CAD", "rate": 1.34} in rates
    assert len(rates) == 4


def test_convert_along_default_chain(client):
    resp = client.post(
        "/convert", json={"from_currency": "USD", "to_currency": "EUR", "amount": 100}
    )

    assert resp.status_code == 200
    body = resp.json()
    assert body["converted_amount"] == pytest.approx(100 * 1.34 * 0.58 * 0.43)
    assert body["path"] == ["USD", "CAD", "GBP", "EUR"]


def test_convert_identity_lowercase(client):
    resp = client.post(
        "/convert", json={"from_currency": "usd", "to_currency": "USD", "amount": 12.5}
    )

    assert resp.status_code == 200
    assert resp.json()["converted_amount"] == 12.5


def test_convert_without_path_is_404(client):
    resp = client.post(
        "/convert", json={"from_currency": "USD", "to_currency": "JPY", "amount": 1}
    )

    assert resp.status_code == 404
    assert resp.json()["error"] == "no_conversion_path"


@pytest.mark.parametrize(
    "payload",
    [
        {"from_currency": "US", "to_currency": "EUR", "amount": 1},
        {"from_currency": "USD1", "to_currency": "EUR", "amount": 1},
        {"from_currency": "USD\n", "to_currency": "EUR", "amount": 1},
        {"from_currency": "USD", "to_currency": "EUR", "amount": 0},
        {"from_currency": "USD", "amount": 1},
    ],
)
def test_convert_validation(client, payload):
    resp = client.post("/convert", json=payload)

    assert resp.status_code == 422
    assert resp.json()["error"] == "validation_error"


def test_update_then_convert(client):
    resp = client.put(
        "/rates", json={"rates": [{"from_currency": "usd", "to_currency": "cad", "rate": 2.0}]}
    )

    assert resp.status_code == 200
    assert resp.json() == {"status": "ok", "updated": 1}
    converted = client.post(
        "/convert", json={"from_currency": "USD", "to_currency": "CAD", "amount": 10}
    ).json()
    assert converted["converted_amount"] == pytest.approx(20.0)


def test_update_rejects_non_positive_rate(client):
    resp = client.put(
        "/rates", json={"rates": [{"from_currency": "USD", "to_currency": "CAD", "rate": -1}]}
    )

    assert resp.status_code == 422


def test_clear_and_reset(client):
    assert client.delete("/rates").json() == {"status": "cleared"}
    assert client.get("/rates").json() == []

    resp = client.post(
        "/convert", json={"from_currency": "USD", "to_currency": "CAD", "amount": 1}
    )
    assert resp.status_code == 404

    assert client.post("/rates/defaults").json() == {"status": "ok", "updated": 4}
    assert len(client.get("/rates").json()) == 4


def test_updates_disabled():
    app = create_app(
        settings_override=Settings(seed_default_rates=False, enable_rate_updates=False)
    )
    client = TestClient(app)

    assert client.delete("/rates").status_code == 403
    resp = client.put(
        "/rates", json={"rates": [{"from_currency": "USD", "to_currency": "CAD", "rate": 1}]}
    )
    assert resp.status_code == 403
    assert resp.json()["error"] == "forbidden"
    assert client.get("/rates").json() == []


def test_apps_do_not_share_rate_graphs(client):
    client.delete("/rates")
    other = TestClient(create_app(settings_override=Settings(seed_default_rates=True)))

    assert len(other.get("/rates").json()) == 4


def test_unknown_route(client):
    resp = client.get("/nope")

    assert resp.status_code == 404
    assert resp.json()["detail"] == "No route for GET /nope"


def test_update_rejects_code_with_trailing_newline(client):
    resp = client.put(
        "/rates", json={"rates": [{"from_currency": "JPY\n", "to_currency": "USD", "rate": 0.007}]}
    )

    assert resp.status_code == 422
    assert "JPY" not in [r["from_currency"] for r in client.get("/rates").json()]


def test_reset_endpoint_replaces_custom_rates(client):
    client.put(
        "/rates", json={"rates": [{"from_currency": "JPY", "to_currency": "USD", "rate": 0.007}]}
    )

    assert client.post("/rates/defaults").json() == {"status": "ok", "updated": 4}
    rates = client.get("/rates").json()
    assert len(rates) == 4
    assert all(r["from_currency"] != "JPY" for r in rates)
