"""Maintenance tickets."""
from datetime import date

from core.constants import MaintenanceStatus
from maintenance.models import Maintenance
from properties.models import Property


def test_create_ticket_defaults(api, rooms, sakura):
    resp = api.post("/api/maintenance/", {
        "property": sakura.id,
        "room": rooms["101"].id,
        "title": "Leaking tap",
    }, format="json")
    assert resp.status_code == 201
    data = resp.json()
    assert data["status"] == "pending"
    assert data["priority"] == "medium"
    assert data["reported_date"] is not None
    assert data["completed_date"] is None


def test_completing_sets_completed_date(api, sakura):
    ticket = Maintenance.objects.create(property=sakura, title="Broken lock")
    resp = api.patch(f"/api/maintenance/{ticket.id}/", {"status": "completed"}, format="json")
    assert resp.status_code == 200
    assert resp.json()["completed_date"] is not None


def test_given_completed_date_is_kept(api, sakura):
    ticket = Maintenance.objects.create(property=sakura, title="Repaint")
    resp = api.patch(f"/api/maintenance/{ticket.id}/", {
        "status": "completed", "completed_date": "2024-05-20",
    }, format="json")
    assert resp.json()["completed_date"] == "2024-05-20"


def test_room_must_belong_to_property(api, rooms):
    other = Property.objects.create(name="Other", address="Elsewhere")
    resp = api.post("/api/maintenance/", {
        "property": other.id, "room": rooms["101"].id, "title": "Wrong room",
    }, format="json")
    assert resp.status_code == 400


def test_filters_and_open_tickets(api, sakura):
    Maintenance.objects.create(property=sakura, title="A", status=MaintenanceStatus.PENDING, priority="urgent")
    Maintenance.objects.create(property=sakura, title="B", status=MaintenanceStatus.IN_PROGRESS, priority="low")
    Maintenance.objects.create(property=sakura, title="C", status=MaintenanceStatus.COMPLETED,
                               completed_date=date(2024, 1, 1))
    Maintenance.objects.create(property=sakura, title="D", status=MaintenanceStatus.CANCELLED)

    assert api.get("/api/maintenance/?status=pending").json()["count"] == 1
    assert api.get("/api/maintenance/?priority=urgent").json()["count"] == 1

    open_titles = sorted(t["title"] for t in api.get("/api/maintenance/open/").json())
    assert open_titles == ["A", "B"]
