from __future__ import annotations

from math import isclose

import pytest
from flask.testing import FlaskClient

NBSP = "\u00a0"


def schedule_payload(**overrides) -> dict:
    payload = {
        "principal": "1.000,00",
        "rate": "1",
        "periods": "2",
        "system": "sac",
    }
    payload.update(overrides)
    return payload


def test_sac_schedule_endpoint(client: FlaskClient):
    resp = client.post("/api/calc/schedule", json=schedule_payload())

    assert resp.status_code == 200
    body = resp.get_json()
    assert body["system"] == "sac"
    assert [row["period"] for row in body["rows"]] == [1, 2]
    assert body["rows"][0]["amortization"] == 500
    assert body["rows"][-1]["closing_balance"] == 0
    assert isclose(body["total_payment"], 1015)
    assert isclose(body["total_interest"], 15)
    assert body["final_balance"] == 0
    assert body["base_value"] == 500


def test_price_schedule_endpoint_accepts_numbers(client: FlaskClient):
    resp = client.post(
        "/api/calc/schedule",
        json=schedule_payload(principal=1000, rate=1.0, periods=2, system="price"),
    )

    assert resp.status_code == 200
    body = resp.get_json()
    payments = {row["payment"] for row in body["rows"]}
    assert len(payments) == 1
    assert isclose(body["base_value"], 507.5124, abs_tol=1e-4)
    assert body["formatted"]["summary"]["system"] == "Price"
    assert body["formatted"]["summary"]["base_value"] == f"R${NBSP}507,51 (prestação)"
    assert body["formatted"]["subtitle"] == (
        f"Sistema Price · PV R${NBSP}1.000,00 · i 1,0000% · n 2"
    )


def test_invalid_principal_returns_400(client: FlaskClient):
    resp = client.post("/api/calc/schedule", json=schedule_payload(principal="-5"))

    assert resp.status_code == 400
    assert resp.get_json() == {
        "error": {
            "kind": "InvalidPrincipal",
            "field": "principal",
            "message": "Informe um valor financiado válido.",
        }
    }


def test_first_invalid_field_is_reported(client: FlaskClient):
    resp = client.post(
        "/api/calc/schedule",
        json=schedule_payload(rate="-2", periods="0"),
    )

    assert resp.status_code == 400
    assert resp.get_json()["error"]["kind"] == "InvalidRate"


def test_non_integer_periods_returns_400(client: FlaskClient):
    resp = client.post("/api/calc/schedule", json=schedule_payload(periods="2,5"))

    assert resp.status_code == 400
    assert resp.get_json()["error"]["field"] == "periods"


def test_unknown_system_returns_422(client: FlaskClient):
    resp = client.post("/api/calc/schedule", json=schedule_payload(system="german"))

    assert resp.status_code == 422
    body = resp.get_json()
    assert "detail" in body
    assert body["detail"][0]["loc"] == ["system"]


def test_unexpected_field_returns_422(client: FlaskClient):
    resp = client.post("/api/calc/schedule", json=schedule_payload(extra="x"))

    assert resp.status_code == 422


def test_missing_body_is_a_principal_error(client: FlaskClient):
    resp = client.post("/api/calc/schedule", data="", content_type="application/json")

    assert resp.status_code == 400
    assert resp.get_json()["error"]["kind"] == "InvalidPrincipal"


def test_cors_headers_for_configured_origin(client: FlaskClient):
    resp = client.get("/api/ping", headers={"Origin": "http://localhost:5173"})

    assert resp.headers["Access-Control-Allow-Origin"] == "http://localhost:5173"


@pytest.mark.parametrize("field", ["principal", "rate", "periods"])
@pytest.mark.parametrize("flag", [True, False])
def test_boolean_fields_are_rejected(client: FlaskClient, field, flag):
    resp = client.post("/api/calc/schedule", json=schedule_payload(**{field: flag}))

    assert resp.status_code == 422
    assert resp.get_json()["detail"][0]["loc"][0] == field


@pytest.mark.parametrize("system,expected", [("SAC", "sac"), ("Price", "price"), (" PRICE ", "price")])
def test_system_is_case_insensitive(client: FlaskClient, system, expected):
    resp = client.post("/api/calc/schedule", json=schedule_payload(system=system))

    assert resp.status_code == 200
    assert resp.get_json()["system"] == expected
