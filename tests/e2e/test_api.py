from __future__ import annotations

from fastapi.testclient import TestClient

from app.main import create_app

client = TestClient(create_app())


def test_healthz():
    assert client.get("/healthz").json() == {"status": "ok"}


def test_resolve_year_month_to_first_day():
    response = client.post("/resolve", json={"value": {"year": 2005, "month": 1}})
    assert response.status_code == 200
    body = response.json()
    assert body["local"] == "2005-01-01T00:00:00"
    assert body["instant"].startswith("2005-01-01T00:00:00")
    assert body["granularity"] == "year_month"


def test_resolve_applies_offset_unless_ignored():
    value = {"year": 2005, "month": 1, "day": 1, "hour": 1, "minute": 0, "offset_minutes": 120}
    shifted = client.post("/resolve", json={"value": value}).json()
    assert shifted["local"] == "2004-12-31T23:00:00"
    naive = client.post("/resolve", json={"value": value, "ignore_offset": True}).json()
    assert naive["local"] == "2005-01-01T01:00:00"


def test_resolve_missing_value():
    body = client.post("/resolve", json={}).json()
    assert body == {"local": None, "instant": None, "granularity": None}


def test_best_resolution_picks_finer_value():
    response = client.post(
        "/best-resolution",
        json={"first": {"year": 2005, "month": 1}, "second": {"year": 2005, "month": 1, "day": 1}},
    )
    body = response.json()
    assert body["outcome"] == "RESOLVED"
    assert body["value"]["day"] == 1


def test_best_resolution_reports_conflict():
    response = client.post(
        "/best-resolution",
        json={"first": {"year": 2005, "month": 1, "day": 1}, "second": {"year": 2005, "month": 2, "day": 1}},
    )
    body = response.json()
    assert body["outcome"] == "CONFLICT"
    assert body["value"] is None
    assert body["conflicting_field"] == "month"


def test_best_resolution_of_nothing():
    assert client.post("/best-resolution", json={}).json()["outcome"] == "ABSENT"


def test_same_or_contained():
    response = client.post(
        "/same-or-contained",
        json={"first": {"year": 2005, "month": 1}, "second": {"year": 2005, "month": 1, "day": 15}},
    )
    assert response.json() == {"result": True}
    response = client.post("/same-or-contained", json={"first": {"year": 2005}})
    assert response.json() == {"result": False}


def test_invalid_value_is_rejected():
    response = client.post("/same-or-contained", json={"first": {"year": 2005, "day": 3}, "second": {"year": 2005}})
    assert response.status_code == 422
    assert response.json()["detail"]["code"] == "INVALID_PARTIAL_TEMPORAL"


def test_missing_year_fails_validation():
    response = client.post("/resolve", json={"value": {"month": 3}})
    assert response.status_code == 422


def test_unknown_field_is_rejected():
    response = client.post(
        "/best-resolution",
        json={"first": {"year": 2005, "mnth": 3}, "second": {"year": 2005, "month": 4}},
    )
    assert response.status_code == 422


def test_non_integer_fields_are_rejected():
    assert client.post("/resolve", json={"value": {"year": True}}).status_code == 422
    assert client.post("/resolve", json={"value": {"year": "2005"}}).status_code == 422
    assert client.post("/resolve", json={"value": {"year": 2005, "month": 1.0}}).status_code == 422


def test_best_resolution_value_lists_only_given_fields():
    response = client.post(
        "/best-resolution",
        json={"first": {"year": 2005}, "second": {"year": 2005, "month": 1, "day": 1}},
    )
    assert response.json()["value"] == {"year": 2005, "month": 1, "day": 1}
