"""Public vacancy listing and visitor inquiries (no sign-in)."""
from decimal import Decimal

from core.constants import InquirerType, InquiryStatus, RoomStatus
from inquiries.models import Inquiry
from properties.models import Property, Room


def test_listing_shows_only_properties_with_vacancies(anon_client, rooms, sakura):
    full = Property.objects.create(name="Full House", address="Somewhere")
    Room.objects.create(property=full, room_number="1", rent=Decimal("40000"), status=RoomStatus.OCCUPIED)

    resp = anon_client.get("/api/public/properties/")
    assert resp.status_code == 200
    data = resp.json()
    assert [p["name"] for p in data] == ["Sakura Heights"]
    assert data[0]["vacant_room_count"] == 2
    # 201 is reserved and cheaper, but only vacant rooms count
    assert data[0]["min_rent"] == 50000


def test_listing_updates_after_move_in(anon_client, tenant, rooms):
    data = anon_client.get("/api/public/properties/").json()
    assert data[0]["vacant_room_count"] == 1
    assert data[0]["min_rent"] == 62000


def test_detail_lists_only_vacant_rooms(anon_client, tenant, sakura):
    resp = anon_client.get(f"/api/public/properties/{sakura.id}/")
    assert resp.status_code == 200
    data = resp.json()
    assert [r["room_number"] for r in data["vacant_rooms"]] == ["102"]
    assert data["vacant_rooms"][0]["monthly_cost"] == 67000


def test_detail_of_missing_property_is_404(anon_client, db):
    assert anon_client.get("/api/public/properties/424242/").status_code == 404


def test_visitor_inquiry_with_default_subject(anon_client, rooms, sakura):
    resp = anon_client.post(f"/api/public/properties/{sakura.id}/inquiries/", {
        "name": "Visitor",
        "email": "visitor@example.com",
        "message": "Is 102 still available?",
        "room": rooms["102"].id,
    }, format="json")
    assert resp.status_code == 201
    assert resp.json()["subject"] == "Sakura Heights room 102"

    inquiry = Inquiry.objects.get()
    assert inquiry.inquirer_type == InquirerType.VISITOR
    assert inquiry.status == InquiryStatus.NEW
    assert inquiry.property_id == sakura.id
    assert inquiry.room_id == rooms["102"].id


def test_visitor_inquiry_about_property_only(anon_client, sakura):
    resp = anon_client.post(f"/api/public/properties/{sakura.id}/inquiries/", {
        "name": "Visitor",
        "email": "visitor@example.com",
        "subject": "",
        "message": "Pets allowed?",
    }, format="json")
    assert resp.status_code == 201
    assert resp.json()["subject"] == "Sakura Heights"


def test_visitor_inquiry_rejects_room_of_other_property(anon_client, rooms, sakura):
    other = Property.objects.create(name="Other", address="Elsewhere")
    resp = anon_client.post(f"/api/public/properties/{other.id}/inquiries/", {
        "name": "Visitor",
        "email": "visitor@example.com",
        "message": "Hello",
        "room": rooms["102"].id,
    }, format="json")
    assert resp.status_code == 400
    assert Inquiry.objects.count() == 0


def test_visitor_inquiry_requires_email_and_message(anon_client, sakura):
    resp = anon_client.post(f"/api/public/properties/{sakura.id}/inquiries/", {"name": "Visitor"}, format="json")
    assert resp.status_code == 400
