"""Input validation tests for the BaZi endpoints."""
import pytest


class TestBirthHourValidation:
    @pytest.mark.parametrize("hour", [-1, 24, 99])
    def test_out_of_range_hour_rejected(self, client, hour):
        resp = client.post("/v1/bazi/chart", json={"birth_date": "1990-01-01", "birth_hour": hour})
        assert resp.status_code == 422

    @pytest.mark.parametrize("hour", [0, 23])
    def test_edge_hours_accepted(self, client, hour):
        resp = client.post("/v1/bazi/chart", json={"birth_date": "1990-01-01", "birth_hour": hour})
        assert resp.status_code == 200
        assert resp.json()["hour_pillar"]["branch"] == "zi"

    def test_non_integer_hour_rejected(self, client):
        resp = client.post("/v1/bazi/chart", json={"birth_date": "1990-01-01", "birth_hour": "noon"})
        assert resp.status_code == 422

    @pytest.mark.parametrize("hour", [True, "5", 5.0])
    def test_non_int_json_hour_rejected(self, client, hour):
        resp = client.post("/v1/bazi/chart", json={"birth_date": "1990-01-01", "birth_hour": hour})
        assert resp.status_code == 422


class TestBirthDateValidation:
    def test_invalid_calendar_date_rejected(self, client):
        resp = client.post("/v1/bazi/chart", json={"birth_date": "1990-02-30"})
        assert resp.status_code == 422

    def test_missing_birth_date_rejected(self, client):
        resp = client.post("/v1/bazi/chart", json={"birth_hour": 5})
        assert resp.status_code == 422

    def test_birth_date_year_below_range_rejected(self, client):
        resp = client.post("/v1/bazi/chart", json={"birth_date": "1799-12-31"})
        assert resp.status_code == 422

    def test_birth_date_year_above_range_rejected(self, client):
        resp = client.post("/v1/bazi/analysis", json={"birth_date": "2101-01-01"})
        assert resp.status_code == 422

    def test_compat_validates_both_people(self, client):
        resp = client.post(
            "/v1/bazi/compat",
            json={
                "person_1": {"birth_date": "1990-01-01"},
                "person_2": {"birth_date": "1990-01-01", "birth_hour": 30},
            },
        )
        assert resp.status_code == 422
