"""Event API and service tests."""

from datetime import date

import pytest

from src.exceptions import NotFound, ValidationError
from src.services.event_service import EventService, month_bounds


def create_event(client, headers, **overrides):
    payload = {"title": "Dentist", "event_date": "2024-03-05", "event_time": "09:30"}
    payload.update(overrides)
    response = client.post("/events", headers=headers, json=payload)
    assert response.status_code == 201
    return response.json()


def test_create_event(client, auth_headers):
    """Test creating an event."""
    event = create_event(client, auth_headers, description="Checkup")
    assert event["title"] == "Dentist"
    assert event["description"] == "Checkup"
    assert event["event_date"] == "2024-03-05"
    assert event["event_time"] == "09:30"


def test_create_event_without_time(client, auth_headers):
    event = create_event(client, auth_headers, event_time=None)
    assert event["event_time"] is None


def test_create_event_validation(client, auth_headers):
    """Test that title and date are required and parsed."""
    cases = [
        {"event_date": "2024-03-05"},
        {"title": "Dentist"},
        {"title": "Dentist", "event_date": "2024-03-32"},
        {"title": "Dentist", "event_date": "2024-03-05", "event_time": "25:00"},
        {"title": "Dentist", "event_date": "20240305"},
        {"title": "Dentist", "event_date": "2024-03-05", "event_time": "0930"},
        {"title": "Dentist", "event_date": "2024-03-05", "event_time": "09:30+02:00"},
    ]
    for payload in cases:
        response = client.post("/events", headers=auth_headers, json=payload)
        assert response.status_code == 400, payload


def test_month_filter(client, auth_headers):
    """Test listing events for one month."""
    dentist = create_event(client, auth_headers)
    create_event(client, auth_headers, title="Trip", event_date="2024-04-01", event_time=None)

    march = client.get("/events", headers=auth_headers, params={"month": 3, "year": 2024})
    april = client.get("/events", headers=auth_headers, params={"month": 4, "year": 2024})

    assert march.status_code == 200
    assert [e["id"] for e in march.json()] == [dentist["id"]]
    assert dentist["id"] not in [e["id"] for e in april.json()]


def test_partial_filter_is_ignored(client, auth_headers):
    """Test that month without year (or vice versa) returns everything."""
    create_event(client, auth_headers)
    create_event(client, auth_headers, event_date="2025-07-01")

    assert len(client.get("/events", headers=auth_headers, params={"month": 3}).json()) == 2
    assert len(client.get("/events", headers=auth_headers, params={"year": 2024}).json()) == 2


def test_last_representable_month(client, auth_headers):
    """Test filtering on December of the largest supported year."""
    event = create_event(client, auth_headers, event_date="9999-12-31")
    create_event(client, auth_headers, event_date="9999-11-30")

    response = client.get("/events", headers=auth_headers, params={"month": 12, "year": 9999})
    assert response.status_code == 200
    assert [e["id"] for e in response.json()] == [event["id"]]


def test_month_out_of_range(client, auth_headers):
    response = client.get("/events", headers=auth_headers, params={"month": 13, "year": 2024})
    assert response.status_code == 400


def test_events_ordered_by_date_then_time(client, auth_headers):
    """Test event ordering."""
    late = create_event(client, auth_headers, title="Late", event_time="18:00")
    early = create_event(client, auth_headers, title="Early", event_time="07:15")
    all_day = create_event(client, auth_headers, title="All day", event_time=None)
    before = create_event(client, auth_headers, title="Before", event_date="2024-03-01")

    response = client.get("/events", headers=auth_headers)
    assert [e["id"] for e in response.json()] == [
        before["id"],
        all_day["id"],
        early["id"],
        late["id"],
    ]


def test_update_event(client, auth_headers):
    """Test that update replaces every field."""
    event = create_event(client, auth_headers, description="Checkup")

    response = client.put(
        f"/events/{event['id']}",
        headers=auth_headers,
        json={"title": "Dentist (moved)", "event_date": "2024-03-06"},
    )
    assert response.status_code == 200
    data = response.json()
    assert "message" in data
    assert data["event"]["title"] == "Dentist (moved)"
    assert data["event"]["event_date"] == "2024-03-06"
    assert data["event"]["event_time"] is None
    assert data["event"]["description"] is None


def test_delete_event(client, auth_headers):
    event = create_event(client, auth_headers)

    response = client.delete(f"/events/{event['id']}", headers=auth_headers)
    assert response.status_code == 200
    assert client.get("/events", headers=auth_headers).json() == []
    assert client.delete(f"/events/{event['id']}", headers=auth_headers).status_code == 404


def test_other_users_event_looks_missing(client, auth_headers, other_auth_headers):
    """Test that another user's event is indistinguishable from a missing one."""
    event = create_event(client, auth_headers)
    body = {"title": "Hijack", "event_date": "2024-03-05"}

    foreign_put = client.put(f"/events/{event['id']}", headers=other_auth_headers, json=body)
    missing_put = client.put("/events/9999", headers=other_auth_headers, json=body)
    foreign_delete = client.delete(f"/events/{event['id']}", headers=other_auth_headers)
    missing_delete = client.delete("/events/9999", headers=other_auth_headers)

    assert foreign_put.status_code == foreign_delete.status_code == 404
    assert foreign_put.json() == missing_put.json()
    assert foreign_delete.json() == missing_delete.json()

    assert client.get("/events", headers=other_auth_headers).json() == []
    assert client.get("/events", headers=auth_headers).json()[0]["title"] == "Dentist"


class TestMonthBounds:
    """Tests for month_bounds."""

    def test_mid_year(self):
        assert month_bounds(3, 2024) == (date(2024, 3, 1), date(2024, 4, 1))

    def test_december_rolls_over(self):
        assert month_bounds(12, 2024) == (date(2024, 12, 1), date(2025, 1, 1))

    def test_last_month_is_open_ended(self):
        assert month_bounds(12, 9999) == (date(9999, 12, 1), None)


class TestEventService:
    """Service-level tests."""

    def test_month_boundaries_inclusive(self, db, user):
        service = EventService(db)
        for day in ["2024-02-29", "2024-03-01", "2024-03-31", "2024-04-01"]:
            service.create_event(user.id, title=day, event_date=day)

        titles = [e.title for e in service.list_events(user.id, month=3, year=2024)]
        assert titles == ["2024-03-01", "2024-03-31"]

    def test_seconds_dropped(self, db, user):
        event = EventService(db).create_event(
            user.id, title="Call", event_date="2024-03-05", event_time="09:30:45"
        )
        assert event.event_time.second == 0

    def test_update_requires_title(self, db, user):
        service = EventService(db)
        event = service.create_event(user.id, title="Call", event_date="2024-03-05")
        with pytest.raises(ValidationError):
            service.update_event(user.id, event.id, title="", event_date="2024-03-05")

    def test_foreign_event_not_found(self, db, user, other_user):
        service = EventService(db)
        event = service.create_event(user.id, title="Call", event_date="2024-03-05")
        with pytest.raises(NotFound):
            service.delete_event(other_user.id, event.id)
