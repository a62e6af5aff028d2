from __future__ import annotations

from math import isclose

import pytest
from flask.testing import FlaskClient

from sip_backend.app import create_app


def projection_payload() -> dict:
    return {
        "sipAmount": 5000,
        "annualReturn": 12,
        "years": 10,
        "lumpSum": 100000,
        "stepUp": 10,
        "inflationRate": 6,
    }


def test_projection_endpoint_returns_results_and_charts(client: FlaskClient):
    resp = client.post("/api/sip/projection", json=projection_payload())

    assert resp.status_code == 200
    body = resp.get_json()
    result = body["result"]

    assert body["inputs"] == {
        "sipAmount": 5000.0,
        "annualReturn": 12.0,
        "years": 10,
        "lumpSum": 100000.0,
        "stepUp": 10.0,
        "inflationRate": 6.0,
    }
    assert body["series"] == "divided"
    assert isclose(result["lumpSumFuture"], 100000 * 1.12 ** 10, rel_tol=1e-9)
    assert isclose(
        result["totalInterest"],
        result["futureValue"] + result["lumpSumFuture"] - result["totalInvested"] - 100000,
        rel_tol=1e-9,
    )
    assert body["display"]["futureValue"] == f"₹{result['futureValue']:.2f}"

    growth = body["charts"]["growth"]
    assert growth["labels"] == list(range(1, 11))
    assert isclose(growth["datasets"][0]["data"][1], result["futureValue"] / 2, rel_tol=1e-12)

    breakdown = body["charts"]["breakdown"]
    assert breakdown["datasets"][0]["data"] == [result["totalInvested"], result["totalInterest"]]


def test_missing_fields_take_defaults(client: FlaskClient):
    resp = client.post("/api/sip/projection", json={})

    assert resp.status_code == 200
    result = resp.get_json()["result"]
    assert isclose(result["futureValue"], 1_161_695.38, abs_tol=0.01)
    assert isclose(result["totalInvested"], 600_000.0, abs_tol=1e-6)


def test_numeric_strings_are_coerced(client: FlaskClient):
    resp = client.post("/api/sip/projection", json={"sipAmount": "1000", "years": "2", "annualReturn": "0"})

    assert resp.status_code == 200
    assert isclose(resp.get_json()["result"]["totalInvested"], 24_000.0, abs_tol=1e-6)


def test_trajectory_series_can_be_requested(client: FlaskClient):
    payload = projection_payload() | {"series": "trajectory"}
    resp = client.post("/api/sip/projection", json=payload)

    assert resp.status_code == 200
    body = resp.get_json()
    data = body["charts"]["growth"]["datasets"][0]["data"]
    assert body["series"] == "trajectory"
    assert data == sorted(data)
    assert isclose(data[-1], body["result"]["futureValue"], rel_tol=1e-12)


def test_configured_series_is_used_by_default():
    app = create_app({"TESTING": True, "SIP_GROWTH_SERIES": "trajectory", "SIP_CURRENCY_SYMBOL": "$"})
    with app.test_client() as client:
        resp = client.post("/api/sip/projection", json={"years": 3})

    assert resp.status_code == 200
    body = resp.get_json()
    assert body["series"] == "trajectory"
    assert body["display"]["totalInvested"] == "$180000.00"


def test_invalid_payload_returns_422(client: FlaskClient):
    resp = client.post("/api/sip/projection", json={"sipAmount": "lots", "bonus": 1})

    assert resp.status_code == 422
    body = resp.get_json()
    locations = {tuple(error["loc"]) for error in body["detail"]}
    assert ("sipAmount",) in locations
    assert ("bonus",) in locations


def test_fractional_years_are_rejected(client: FlaskClient):
    resp = client.post("/api/sip/projection", json={"years": 2.5})

    assert resp.status_code == 422


def test_non_finite_input_returns_400(client: FlaskClient):
    resp = client.post(
        "/api/sip/projection",
        data='{"annualReturn": NaN}',
        content_type="application/json",
    )

    assert resp.status_code == 400
    assert resp.get_json() == {"error": ["annualReturn must be a finite number"]}


def test_horizon_above_limit_returns_400(app):
    app.config["SIP_MAX_YEARS"] = 40
    with app.test_client() as client:
        resp = client.post("/api/sip/projection", json={"years": 41})

    assert resp.status_code == 400
    assert resp.get_json() == {"error": ["years must be between -40 and 40"]}


def test_defaults_endpoint(client: FlaskClient):
    resp = client.get("/api/sip/defaults")

    assert resp.status_code == 200
    assert resp.get_json() == {
        "sipAmount": 5000.0,
        "annualReturn": 12.0,
        "years": 10,
        "lumpSum": 0.0,
        "stepUp": 0.0,
        "inflationRate": 0.0,
    }


def test_formula_endpoint(client: FlaskClient):
    resp = client.get("/api/sip/formula")

    assert resp.status_code == 200
    body = resp.get_json()
    assert body[0]["expression"] == "FV = P × [((1 + r)^n - 1) / r] × (1 + r)"
    assert len(body) == 3


def test_cors_allows_dev_frontend(client: FlaskClient):
    resp = client.get("/api/ping", headers={"Origin": "http://localhost:5173"})

    assert resp.headers["Access-Control-Allow-Origin"] == "http://localhost:5173"


def test_horizon_below_negative_limit_returns_400(client: FlaskClient):
    resp = client.post(
        "/api/sip/projection",
        data='{"years": -' + "1" * 400 + "}",
        content_type="application/json",
    )

    assert resp.status_code == 400
    assert resp.get_json() == {"error": ["years must be between -100 and 100"]}


@pytest.mark.parametrize("body", ["[]", "0", "false", '""'])
def test_non_object_bodies_return_422(client: FlaskClient, body: str):
    resp = client.post("/api/sip/projection", data=body, content_type="application/json")

    assert resp.status_code == 422


def test_null_body_takes_defaults(client: FlaskClient):
    resp = client.post("/api/sip/projection", data="null", content_type="application/json")

    assert resp.status_code == 200
    assert resp.get_json()["inputs"]["years"] == 10


def test_unknown_configured_series_fails_at_startup():
    with pytest.raises(ValueError):
        create_app({"TESTING": True, "SIP_GROWTH_SERIES": "sideways"})
