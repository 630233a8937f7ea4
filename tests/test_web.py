"""Tests for the Flask JSON API."""

import pytest

from overpay_calc_web.app import app


@pytest.fixture
def client():
    app.config["TESTING"] = True
    with app.test_client() as client:
        yield client


class TestJourneyEndpoint:

    def test_json_body(self, client):
        response = client.post("/api/journey", json={
            "outstanding_balance": 12000,
            "remaining_term_months": 24,
            "apr_percent": 0,
            "monthly_overpayment": 0,
        })
        assert response.status_code == 200
        body = response.get_json()
        assert body["baseline"]["months"] == 24
        assert body["baseline"]["total_interest"] == 0
        assert body["invest"] is None

    def test_form_body(self, client):
        response = client.post("/api/journey", data={
            "outstanding_balance": "120000",
            "remaining_term_months": "240",
            "apr_percent": "3.5",
            "monthly_overpayment": "300",
            "expected_annual_return_percent": "0",
        })
        assert response.status_code == 200
        body = response.get_json()
        months = body["baseline"]["months"]
        assert body["invest"]["fv_invest"] == pytest.approx(300 * months, abs=0.02)

    def test_blank_expected_return_is_omitted(self, client):
        response = client.post("/api/journey", data={
            "outstanding_balance": "12000",
            "remaining_term_months": "24",
            "apr_percent": "0",
            "monthly_overpayment": "0",
            "expected_annual_return_percent": "",
        })
        assert response.status_code == 200
        assert response.get_json()["invest"] is None

    def test_schedule_truncated(self, client):
        payload = {
            "outstanding_balance": 12000,
            "remaining_term_months": 240,
            "apr_percent": 0,
            "monthly_overpayment": 0,
        }
        body = client.post("/api/journey", json=payload).get_json()
        assert len(body["baseline"]["schedule"]) == 120
        assert body["baseline"]["truncated"] == 120

        payload["show_full_schedule"] = True
        body = client.post("/api/journey", json=payload).get_json()
        assert len(body["baseline"]["schedule"]) == 240
        assert "truncated" not in body["baseline"]

    def test_invalid_input(self, client):
        response = client.post("/api/journey", json={
            "outstanding_balance": -1,
            "remaining_term_months": 24,
            "apr_percent": 4,
            "monthly_overpayment": 0,
        })
        assert response.status_code == 400
        assert "outstanding balance" in response.get_json()["error"]

    def test_term_too_long(self, client):
        response = client.post("/api/journey", json={
            "outstanding_balance": 12000,
            "remaining_term_months": 10 ** 8,
            "apr_percent": 4,
            "monthly_overpayment": 0,
        })
        assert response.status_code == 400
        assert "remaining term" in response.get_json()["error"]


class TestCompareEndpoint:

    def test_fair_block(self, client):
        response = client.post("/api/compare", json={
            "outstanding_balance": 250000,
            "remaining_term_months": 300,
            "apr_percent": 4.25,
            "monthly_overpayment": 200,
            "expected_annual_return_percent": 5,
        })
        assert response.status_code == 200
        body = response.get_json()
        fair = body["fair"]
        n = body["baseline"]["months"]
        assert len(fair["invest_path"]["schedule"]) == n
        assert len(fair["delta_wealth_by_month"]) == n
        assert 3.5 < fair["break_even_annual_return_percent"] < 5
        assert fair["recommendation"] in ("overpay", "invest", "close")
        assert len(body["baseline"]["schedule"]) == 120

    def test_infeasible_payment(self, client):
        response = client.post("/api/compare", json={
            "outstanding_balance": 100000,
            "remaining_term_months": 300,
            "apr_percent": 12,
            "monthly_overpayment": 0,
            "expected_annual_return_percent": 5,
            "current_monthly_payment": 500,
        })
        assert response.status_code == 400
        assert "interest" in response.get_json()["error"]
