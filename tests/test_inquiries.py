"""Admin-side inquiry handling."""
from core.constants import InquirerType, InquiryStatus
from inquiries.models import Inquiry


def make_inquiry(**overrides):
    fields = dict(name="Visitor", email="v@example.com", subject="Question", message="Hello")
    fields.update(overrides)
    return Inquiry.objects.create(**fields)


def test_respond_sets_response_and_timestamp(api, db):
    inquiry = make_inquiry()
    resp = api.post(f"/api/inquiries/{inquiry.id}/respond/", {
        "status": "resolved",
        "response": "Yes, the room is available.",
    }, format="json")
    assert resp.status_code == 200
    data = resp.json()
    assert data["status"] == "resolved"
    assert data["response"] == "Yes, the room is available."
    assert data["responded_at"] is not None


def test_status_change_without_response_clears_timestamp(api, db):
    inquiry = make_inquiry(response="old", status=InquiryStatus.RESOLVED)
    resp = api.post(f"/api/inquiries/{inquiry.id}/respond/", {"status": "in_progress", "response": ""},
                    format="json")
    assert resp.status_code == 200
    inquiry.refresh_from_db()
    assert inquiry.status == InquiryStatus.IN_PROGRESS
    assert inquiry.response is None
    assert inquiry.responded_at is None


def test_respond_rejects_unknown_status(api, db):
    inquiry = make_inquiry()
    resp = api.post(f"/api/inquiries/{inquiry.id}/respond/", {"status": "archived"}, format="json")
    assert resp.status_code == 400


def test_respond_to_missing_inquiry_is_404(api, db):
    resp = api.post("/api/inquiries/999999/respond/", {"status": "closed"}, format="json")
    assert resp.status_code == 404


def test_filters(api, tenant):
    make_inquiry(inquirer_type=InquirerType.TENANT, tenant=tenant, status=InquiryStatus.NEW)
    make_inquiry(inquirer_type=InquirerType.VISITOR, status=InquiryStatus.NEW)
    make_inquiry(inquirer_type=InquirerType.VISITOR, status=InquiryStatus.CLOSED)

    assert api.get("/api/inquiries/").json()["count"] == 3
    assert api.get("/api/inquiries/?inquirer_type=visitor").json()["count"] == 2
    assert api.get("/api/inquiries/?inquirer_type=visitor&status=new").json()["count"] == 1


def test_pending_queryset(db):
    make_inquiry(status=InquiryStatus.NEW)
    make_inquiry(status=InquiryStatus.IN_PROGRESS)
    make_inquiry(status=InquiryStatus.RESOLVED)
    make_inquiry(status=InquiryStatus.CLOSED)
    assert Inquiry.objects.pending().count() == 2
