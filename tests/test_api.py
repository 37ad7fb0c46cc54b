"""
Tests for the REST API.
"""

import pytest
from fastapi.testclient import TestClient

from networkdays.api import app


@pytest.fixture
def client():
    """Create a test client for the API."""
    return TestClient(app)


class TestNetworkDaysEndpoint:
    """Tests for POST /networkdays."""

    def test_week(self, client):
        response = client.post("/networkdays", json={"start": 44928, "end": 44934})

        assert response.status_code == 200
        data = response.json()
        assert data["working_days"] == 5
        assert data["calendar_days"] == 7
        assert data["weekend_days"] == 2
        assert data["start_date"] == "2023-01-02"

    def test_holidays_and_reversed(self, client):
        response = client.post(
            "/networkdays", json={"start": 44934, "end": 44928, "holidays": [44929, 44933]}
        )

        assert response.status_code == 200
        assert response.json()["working_days"] == -4

    def test_holiday_calendar(self, client):
        """Epiphany (Friday 2023-01-06) is a public holiday in Bayern."""
        response = client.post(
            "/networkdays",
            json={
                "start": 44927,
                "end": 44941,
                "holiday_calendar": {"country": "DE", "subdivision": "BY"},
            },
        )

        assert response.status_code == 200
        assert response.json()["working_days"] == 9

    def test_invalid_serial(self, client):
        response = client.post("/networkdays", json={"start": -5, "end": 44934})

        assert response.status_code == 400

    def test_missing_field(self, client):
        response = client.post("/networkdays", json={"start": 44928})

        assert response.status_code == 422


class TestWorkdayEndpoint:
    """Tests for POST /workday."""

    def test_five_workdays(self, client):
        response = client.post("/workday", json={"start": 44928, "workdays": 5})

        assert response.status_code == 200
        data = response.json()
        assert data["result"] == 44935.0
        assert data["result_date"] == "2023-01-09"

    def test_with_holiday(self, client):
        response = client.post(
            "/workday", json={"start": 44928, "workdays": 1, "holidays": [44929]}
        )

        assert response.status_code == 200
        assert response.json()["result"] == 44930.0

    def test_holiday_calendar_over_years(self, client):
        """A long walk in Bayern must still skip Christmas 2023 near its end."""
        response = client.post(
            "/workday",
            json={
                "start": 43838,
                "workdays": 1000,
                "holiday_calendar": {"country": "DE", "subdivision": "BY"},
            },
        )

        assert response.status_code == 200
        data = response.json()
        assert data["result"] == 45287.0
        assert data["result_date"] == "2023-12-27"

    def test_unknown_holiday_calendar(self, client):
        response = client.post(
            "/workday",
            json={"start": 44928, "workdays": 5, "holiday_calendar": {"country": "XX"}},
        )

        assert response.status_code == 400

    def test_zero_workdays(self, client):
        response = client.post("/workday", json={"start": 44928.6, "workdays": 0})

        assert response.status_code == 200
        assert response.json()["result"] == 44928.0


class TestInfoEndpoints:
    """Tests for the informational endpoints."""

    def test_root(self, client):
        response = client.get("/")

        assert response.status_code == 200
        assert "POST /networkdays" in response.json()["endpoints"]

    def test_weekends(self, client):
        response = client.get("/weekends")

        assert response.status_code == 200
        data = response.json()
        assert len(data) == 14
        assert data[0] == {"code": 1, "days": "Saturday, Sunday"}

    def test_convert_serial(self, client):
        response = client.get("/convert/44928")

        assert response.status_code == 200
        data = response.json()
        assert data["calendar_date"] == "2023-01-02"
        assert data["weekday"] == "Monday"

    def test_convert_date(self, client):
        response = client.get("/convert/2023-01-02")

        assert response.status_code == 200
        assert response.json()["serial"] == 44928.0

    def test_convert_invalid(self, client):
        response = client.get("/convert/someday")

        assert response.status_code == 400

    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
