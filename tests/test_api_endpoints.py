from __future__ import annotations

import pytest

from src.worked_hours.worked_hours.main import create_app


@pytest.fixture()
def client():
    app = create_app("testing")
    return app.test_client()


def test_worked_metrics_endpoint_with_embedded_plan(client):
    res = client.post(
        "/api/worked-metrics",
        json={
            "record": {
                "fecha": "2026-02-02",
                "horaIngreso": "07:30",
                "horaSalida": "19:00",
                "planInicio": "08:00",
                "planFin": "17:00",
                "tarifaHora": 10,
            }
        },
    )

    assert res.status_code == 200
    body = res.get_json()
    assert body["success"] is True
    assert body["metrics"] == {
        "normal_hours": 9.0,
        "overtime_hours": 2.0,
        "nocturnal_hours": 0.0,
        "total_hours": 11.0,
        "late_arrival_minutes": 0,
        "cost": 120.0,
    }


def test_worked_metrics_endpoint_with_explicit_plan_and_rates(client):
    res = client.post(
        "/api/worked-metrics",
        json={
            "record": {"date": "2026-02-02", "entry_time": "22:00", "exit_time": "06:00"},
            "plan": None,
            "rates": {"baseRate": 10, "noctRate": 20},
        },
    )

    assert res.status_code == 200
    assert res.get_json()["metrics"]["nocturnal_hours"] == 8.0
    assert res.get_json()["metrics"]["cost"] == 160.0


def test_worked_metrics_endpoint_rejects_open_record(client):
    res = client.post("/api/worked-metrics", json={"record": {"date": "2026-02-02", "entry_time": "08:00"}})

    assert res.status_code == 400
    assert res.get_json()["success"] is False


def test_worked_metrics_endpoint_rejects_missing_record(client):
    res = client.post("/api/worked-metrics", json={})
    assert res.status_code == 400


def test_report_endpoint(client):
    res = client.post(
        "/api/worked-hours/report",
        json={
            "rows": [
                {"record": {"fecha": "2026-02-02", "horaIngreso": "08:00", "horaSalida": "17:00", "empleadoId": "e1"}},
                {"record": {"fecha": "2026-02-03", "horaIngreso": "08:00", "empleadoId": "e1", "_id": "open"}},
            ],
            "rates": {"base_rate": 10},
        },
    )

    body = res.get_json()
    assert res.status_code == 200
    assert len(body["rows"]) == 1
    assert body["summary"][0]["cost"] == 90.0
    assert body["skipped"][0]["record_id"] == "open"


def test_report_endpoint_requires_rows(client):
    res = client.post("/api/worked-hours/report", json={"rows": "nope"})
    assert res.status_code == 400


def test_weekly_overview_endpoint(client):
    res = client.post(
        "/api/weekly-overview",
        json={
            "week_start": "2026-02-02",
            "employee_id": 7,
            "shifts": {"2026-02-02": [16, 17, 18, 19]},
            "overtimeHours": {"2026-02-02": 1},
        },
    )

    body = res.get_json()
    assert res.status_code == 200
    assert body["employee_id"] == "7"
    assert body["weekly_base"] == 2.0
    assert body["weekly_extra"] == 1.0
    assert body["weekly_total"] == 3.0
    assert body["per_day"][0]["blocks"][0] == {"start": "08:00", "end": "10:00", "hours": 2.0, "kind": "base"}
    assert len(body["per_day"]) == 7


def test_weekly_overview_endpoint_rejects_bad_week_start(client):
    res = client.post("/api/weekly-overview", json={"week_start": "02/02/2026"})
    assert res.status_code == 400


def test_worked_metrics_endpoint_rejects_nan_rate(client):
    res = client.post(
        "/api/worked-metrics",
        json={"record": {"date": "2026-02-02", "entry_time": "08:00", "exit_time": "17:00", "embedded_rate": "nan"}},
    )
    assert res.status_code == 400
    assert res.get_json()["success"] is False


def test_weekly_overview_endpoint_rejects_infinite_overtime(client):
    res = client.post(
        "/api/weekly-overview",
        json={"week_start": "2026-02-02", "shifts": {"2026-02-02": [16]}, "overtimeHours": {"2026-02-02": "inf"}},
    )
    assert res.status_code == 400


@pytest.mark.parametrize(
    "body",
    [
        {"week_start": "2026-02-02", "dias": ["x"]},
        {"week_start": "2026-02-02", "shifts": [16]},
        ["2026-02-02"],
    ],
)
def test_weekly_overview_endpoint_rejects_malformed_payload(client, body):
    res = client.post("/api/weekly-overview", json=body)
    assert res.status_code == 400


def test_report_endpoint_rejects_non_object_body(client):
    res = client.post("/api/worked-hours/report", json=[{"record": {}}])
    assert res.status_code == 400
