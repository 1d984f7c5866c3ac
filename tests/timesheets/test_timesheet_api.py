from __future__ import annotations

import pytest

from src.timesheet_engine.timesheet_engine.main import create_app
from src.timesheet_engine.timesheet_engine.policy.loader import policy_from_mapping


@pytest.fixture
def client(monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")
    app = create_app()
    return app.test_client()


def day(start="08:00", end="17:00", lunch_start="12:00", lunch_end="12:30", day_type="REGULAR"):
    return {
        "dayType": day_type,
        "startTime": start,
        "endTime": end,
        "lunchStartTime": lunch_start,
        "lunchEndTime": lunch_end,
    }


def week(**overrides):
    data = {name: day() for name in ("monday", "tuesday", "wednesday", "thursday", "friday")}
    data.update(overrides)
    return data


def test_compute_clean_period(client):
    resp = client.post("/api/timesheets/compute", json={"startDate": "2024-01-15", "weeks": [week(), week()]})

    assert resp.status_code == 200
    body = resp.get_json()
    assert body["success"] is True
    assert body["payPeriod"]["endDate"] == "2024-01-28"
    assert body["payPeriod"]["totalHours"] == 85.0
    assert body["payPeriod"]["weeks"][0]["overtimeHours"] == 2.5
    assert body["payPeriod"]["weeks"][0]["monday"]["totalHours"] == 8.5
    assert body["payPeriod"]["weeks"][1]["friday"]["date"] == "2024-01-26"


def test_twelve_hour_clock_times_accepted(client):
    am_pm = day(start="8:00 AM", end="5:00 PM", lunch_start="12:00 PM", lunch_end="12:30 PM")
    resp = client.post(
        "/api/timesheets/compute",
        json={"startDate": "2024-01-15", "weeks": [week(monday=am_pm), week()]},
    )

    assert resp.status_code == 200
    assert resp.get_json()["payPeriod"]["weeks"][0]["monday"]["totalHours"] == 8.5


def test_entry_errors_return_400_with_partial_weeks(client):
    bad = day(start="17:00", end="08:00", lunch_start=None, lunch_end=None)
    vacation = day(start=None, end=None, lunch_start=None, lunch_end=None, day_type="VACATION")
    resp = client.post(
        "/api/timesheets/compute",
        json={"startDate": "2024-01-15", "weeks": [week(tuesday=bad), week(friday=vacation)]},
    )

    assert resp.status_code == 400
    body = resp.get_json()
    assert body["success"] is False
    assert body["errors"][0]["code"] == "OrderingError"
    assert body["errors"][0]["week"] == 1
    assert body["errors"][0]["day"] == "tuesday"
    assert body["errors"][0]["date"] == "2024-01-16"
    assert "5:00 PM" in body["errors"][0]["message"]
    assert body["weeks"][0]["totalHours"] is None
    assert body["weeks"][1]["totalHours"] == 42.0
    assert body["weeks"][1]["vacationHours"] == 8.0


def test_unknown_day_type_is_rejected(client):
    resp = client.post(
        "/api/timesheets/compute",
        json={"startDate": "2024-01-15", "weeks": [week(monday=day(day_type="OVERTIME")), week()]},
    )

    assert resp.status_code == 400
    assert resp.get_json()["errors"][0]["code"] == "ConfigurationError"


def test_misaligned_period_is_rejected(client):
    resp = client.post("/api/timesheets/compute", json={"startDate": "2024-01-08", "weeks": [week(), week()]})

    assert resp.status_code == 400
    assert resp.get_json()["errors"][0]["code"] == "MisalignedPeriodError"


@pytest.mark.parametrize(
    "payload",
    [
        None,
        {"weeks": []},
        {"startDate": "2024-01-15"},
        {"startDate": "2024-01-15", "weeks": [{"monday": day()}, week()]},
        {"startDate": "15/01/2024", "weeks": [week(), week()]},
    ],
)
def test_malformed_payloads(client, payload):
    resp = client.post("/api/timesheets/compute", json=payload)

    assert resp.status_code == 400
    assert resp.get_json()["success"] is False


def test_current_pay_period(client):
    resp = client.get("/api/pay-periods/current?date=2024-01-20")

    assert resp.status_code == 200
    assert resp.get_json()["payPeriod"] == {
        "startDate": "2024-01-15",
        "endDate": "2024-01-28",
        "weekStarts": ["2024-01-15", "2024-01-22"],
    }


def test_policy_endpoint_uses_testing_settings(client):
    body = client.get("/api/policy").get_json()

    assert body["policy"]["companyName"] == "Test Co"
    assert len(body["policy"]["holidays"]) == 2


def test_explicit_policy_overrides_settings(monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")
    app = create_app(policy=policy_from_mapping({"payPeriodLength": 7, "companyName": "Weekly Inc"}))

    body = app.test_client().get("/api/pay-periods/current?date=2024-01-20").get_json()

    assert body["payPeriod"]["startDate"] == "2024-01-15"
    assert body["payPeriod"]["endDate"] == "2024-01-21"
