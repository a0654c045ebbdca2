"""Move-in, move-out and tenant deletion keep room status and move history in step."""
from datetime import date
from unittest.mock import patch

import pytest
from django.core.management import call_command
from django.db import DatabaseError

from core.constants import RoomStatus, MoveType, TenancyDefaults
from core.dto import MoveInDTO
from core.exceptions import BusinessLogicError
from occupancy.models import MoveHistory
from occupancy.repositories import MoveHistoryRepository
from occupancy.services import OccupancyService
from properties.models import Room
from tenants.models import Tenant


def active_count(room):
    return Tenant.objects.filter(room=room, move_out_date__isnull=True).count()


def test_move_in_through_room_occupies_it(api, rooms):
    """POST /rooms/{id}/move-in/ creates the tenant, occupies the room and logs the move."""
    room = rooms["102"]
    resp = api.post(f"/api/rooms/{room.id}/move-in/", {
        "name": "Suzuki Hanako",
        "move_in_date": "2024-05-01",
        "move_notes": "Keys handed over",
    }, format="json")
    assert resp.status_code == 201
    data = resp.json()
    assert data["room"] == room.id
    assert data["is_active"] is True
    assert data["contract_start_date"] == "2024-05-01"
    assert data["contract_end_date"] == TenancyDefaults.OPEN_CONTRACT_END_DATE

    room.refresh_from_db()
    assert room.status == RoomStatus.OCCUPIED
    assert active_count(room) == 1

    history = MoveHistory.objects.get(room=room)
    assert history.move_type == MoveType.MOVE_IN
    assert history.move_date == date(2024, 5, 1)
    assert history.notes == "Keys handed over"
    assert history.tenant_id == data["id"]


def test_move_in_through_tenants_endpoint(api, rooms):
    room = rooms["101"]
    resp = api.post("/api/tenants/", {
        "name": "Tanaka Ichiro",
        "move_in_date": "2024-06-01",
        "room_id": room.id,
        "contract_end_date": "2026-05-31",
    }, format="json")
    assert resp.status_code == 201
    assert resp.json()["contract_end_date"] == "2026-05-31"
    room.refresh_from_db()
    assert room.status == RoomStatus.OCCUPIED


def test_register_tenant_without_room(api, rooms):
    """No room: the tenant is stored unassigned and nothing else is written."""
    resp = api.post("/api/tenants/", {"name": "Sato Ken", "move_in_date": "2024-06-01"}, format="json")
    assert resp.status_code == 201
    assert resp.json()["room"] is None
    assert MoveHistory.objects.count() == 0
    assert Room.objects.filter(status=RoomStatus.OCCUPIED).count() == 0


def test_move_in_requires_name_and_date(api, rooms):
    resp = api.post(f"/api/rooms/{rooms['102'].id}/move-in/", {"name": ""}, format="json")
    assert resp.status_code == 400
    assert Tenant.objects.count() == 0


def test_move_in_rejects_occupied_room(api, tenant, rooms):
    room = rooms["101"]
    resp = api.post(f"/api/rooms/{room.id}/move-in/", {
        "name": "Second Person",
        "move_in_date": "2024-05-01",
    }, format="json")
    assert resp.status_code == 409
    assert resp.json()["code"] == "ROOM_NOT_VACANT"
    assert active_count(room) == 1
    assert Tenant.objects.count() == 1


def test_move_in_rejects_reserved_room(api, rooms):
    resp = api.post(f"/api/rooms/{rooms['201'].id}/move-in/", {
        "name": "Walk In",
        "move_in_date": "2024-05-01",
    }, format="json")
    assert resp.status_code == 409
    assert Tenant.objects.count() == 0


def test_move_in_rejects_contract_ending_before_start(api, rooms):
    resp = api.post(f"/api/rooms/{rooms['102'].id}/move-in/", {
        "name": "Backwards Contract",
        "move_in_date": "2024-05-01",
        "contract_end_date": "2024-04-01",
    }, format="json")
    assert resp.status_code == 400
    assert resp.json()["code"] == "INVALID_CONTRACT_DATES"
    rooms["102"].refresh_from_db()
    assert rooms["102"].status == RoomStatus.VACANT


def test_move_in_unknown_room_is_404(api, rooms):
    resp = api.post("/api/rooms/999999/move-in/", {"name": "Ghost", "move_in_date": "2024-05-01"}, format="json")
    assert resp.status_code == 404


def test_non_numeric_ids_are_404(api, tenant):
    assert api.post("/api/tenants/abc/move-out/", {}, format="json").status_code == 404
    assert api.delete("/api/tenants/abc/").status_code == 404
    assert api.post("/api/rooms/abc/move-in/", {"name": "Ghost", "move_in_date": "2024-05-01"},
                    format="json").status_code == 404
    assert api.post("/api/inquiries/abc/respond/", {"status": "closed"}, format="json").status_code == 404
    assert tenant.is_active


def test_vacant_room_list_excludes_occupied_and_reserved(api, tenant, rooms):
    """101 is occupied, 201 reserved, 102 the only vacant room"""
    resp = api.get("/api/rooms/vacant/")
    assert resp.status_code == 200
    assert [r["room_number"] for r in resp.json()] == ["102"]


def test_move_out_frees_room_and_keeps_tenant_record(api, tenant, rooms):
    room = rooms["101"]
    resp = api.post(f"/api/tenants/{tenant.id}/move-out/", {
        "move_out_date": "2025-03-31",
        "notes": "Deposit returned",
    }, format="json")
    assert resp.status_code == 200
    assert resp.json()["is_active"] is False

    room.refresh_from_db()
    tenant.refresh_from_db()
    assert room.status == RoomStatus.VACANT
    assert tenant.move_out_date == date(2025, 3, 31)
    assert tenant.room_id == room.id

    out = MoveHistory.objects.get(room=room, move_type=MoveType.MOVE_OUT)
    assert out.move_date == date(2025, 3, 31)
    assert out.notes == "Deposit returned"

    listed = api.get("/api/tenants/").json()
    assert tenant.id not in [t["id"] for t in listed["results"]]
    everyone = api.get("/api/tenants/?include_inactive=true").json()
    assert tenant.id in [t["id"] for t in everyone["results"]]


def test_move_out_defaults_to_today(api, tenant):
    resp = api.post(f"/api/tenants/{tenant.id}/move-out/", {}, format="json")
    assert resp.status_code == 200
    tenant.refresh_from_db()
    assert tenant.move_out_date is not None


def test_move_out_twice_is_a_conflict(api, tenant):
    api.post(f"/api/tenants/{tenant.id}/move-out/", {"move_out_date": "2025-01-31"}, format="json")
    resp = api.post(f"/api/tenants/{tenant.id}/move-out/", {"move_out_date": "2025-02-28"}, format="json")
    assert resp.status_code == 409
    assert resp.json()["code"] == "TENANT_NOT_ACTIVE"
    assert MoveHistory.objects.filter(move_type=MoveType.MOVE_OUT).count() == 1


def test_move_out_before_move_in_is_rejected(api, tenant, rooms):
    resp = api.post(f"/api/tenants/{tenant.id}/move-out/", {"move_out_date": "2024-03-01"}, format="json")
    assert resp.status_code == 400
    rooms["101"].refresh_from_db()
    assert rooms["101"].status == RoomStatus.OCCUPIED


def test_move_out_through_room(api, tenant, rooms):
    resp = api.post(f"/api/rooms/{rooms['101'].id}/move-out/", {"move_out_date": "2025-01-15"}, format="json")
    assert resp.status_code == 200
    assert resp.json()["id"] == tenant.id
    rooms["101"].refresh_from_db()
    assert rooms["101"].status == RoomStatus.VACANT


def test_move_out_of_empty_room_is_a_conflict(api, rooms):
    resp = api.post(f"/api/rooms/{rooms['102'].id}/move-out/", {}, format="json")
    assert resp.status_code == 409
    assert resp.json()["code"] == "ROOM_HAS_NO_ACTIVE_TENANT"


def test_room_can_be_relet_after_move_out(api, tenant, rooms):
    room = rooms["101"]
    api.post(f"/api/tenants/{tenant.id}/move-out/", {"move_out_date": "2025-01-31"}, format="json")
    resp = api.post(f"/api/rooms/{room.id}/move-in/", {"name": "Next Tenant", "move_in_date": "2025-02-15"},
                    format="json")
    assert resp.status_code == 201
    room.refresh_from_db()
    assert room.status == RoomStatus.OCCUPIED
    assert active_count(room) == 1
    assert room.tenants.count() == 2


def test_deleting_active_tenant_frees_room(api, tenant, rooms):
    room = rooms["101"]
    resp = api.delete(f"/api/tenants/{tenant.id}/")
    assert resp.status_code == 204
    room.refresh_from_db()
    assert room.status == RoomStatus.VACANT
    assert not Tenant.objects.filter(id=tenant.id).exists()

    # history survives with the tenant reference cleared
    history = MoveHistory.objects.get(room=room)
    assert history.tenant_id is None


def test_deleting_former_tenant_leaves_room_alone(api, tenant, rooms, office_admin):
    room = rooms["101"]
    api.post(f"/api/tenants/{tenant.id}/move-out/", {"move_out_date": "2025-01-31"}, format="json")
    OccupancyService().move_in(office_admin, _dto("Current Tenant", room.id))

    resp = api.delete(f"/api/tenants/{tenant.id}/")
    assert resp.status_code == 204
    room.refresh_from_db()
    assert room.status == RoomStatus.OCCUPIED


def test_store_failure_rolls_back_move_in(api, rooms):
    """A failing history write undoes the tenant insert and the status change."""
    room = rooms["102"]
    with patch.object(MoveHistoryRepository, "record", side_effect=DatabaseError("disk full")):
        resp = api.post(f"/api/rooms/{room.id}/move-in/", {"name": "Unlucky", "move_in_date": "2024-05-01"},
                        format="json")
    assert resp.status_code == 503
    assert resp.json()["code"] == "STORE_ERROR"
    room.refresh_from_db()
    assert room.status == RoomStatus.VACANT
    assert Tenant.objects.count() == 0


def test_store_failure_rolls_back_move_out(api, tenant, rooms):
    with patch.object(MoveHistoryRepository, "record", side_effect=DatabaseError("disk full")):
        resp = api.post(f"/api/tenants/{tenant.id}/move-out/", {"move_out_date": "2025-01-31"}, format="json")
    assert resp.status_code == 503
    tenant.refresh_from_db()
    rooms["101"].refresh_from_db()
    assert tenant.move_out_date is None
    assert rooms["101"].status == RoomStatus.OCCUPIED


def test_manual_status_edits(api, tenant, rooms):
    vacant, occupied = rooms["102"], rooms["101"]

    resp = api.patch(f"/api/rooms/{vacant.id}/", {"status": "occupied"}, format="json")
    assert resp.status_code == 400
    assert resp.json()["code"] == "OCCUPIED_WITHOUT_TENANT"

    resp = api.patch(f"/api/rooms/{vacant.id}/", {"status": "reserved"}, format="json")
    assert resp.status_code == 200
    assert resp.json()["status"] == "reserved"

    resp = api.patch(f"/api/rooms/{occupied.id}/", {"status": "vacant"}, format="json")
    assert resp.status_code == 400
    assert resp.json()["code"] == "ROOM_HAS_ACTIVE_TENANT"

    resp = api.patch(f"/api/rooms/{occupied.id}/", {"rent": "52000.00"}, format="json")
    assert resp.status_code == 200
    assert resp.json()["current_tenant"]["id"] == tenant.id


def test_new_room_cannot_start_occupied(api, sakura):
    resp = api.post("/api/rooms/", {"property": sakura.id, "room_number": "301", "status": "occupied"},
                    format="json")
    assert resp.status_code == 400


def test_room_and_property_with_tenant_cannot_be_deleted(api, tenant, rooms, sakura):
    resp = api.delete(f"/api/rooms/{rooms['101'].id}/")
    assert resp.status_code == 409
    resp = api.delete(f"/api/properties/{sakura.id}/")
    assert resp.status_code == 409
    assert Room.objects.filter(id=rooms["101"].id).exists()

    resp = api.delete(f"/api/rooms/{rooms['102'].id}/")
    assert resp.status_code == 204


def test_property_rooms_show_current_tenant(api, tenant, sakura):
    resp = api.get(f"/api/properties/{sakura.id}/rooms/")
    assert resp.status_code == 200
    by_number = {r["room_number"]: r for r in resp.json()}
    assert by_number["101"]["current_tenant"]["name"] == "Yamada Taro"
    assert by_number["102"]["current_tenant"] is None


def test_move_history_is_read_only_and_filterable(api, tenant, rooms):
    api.post(f"/api/tenants/{tenant.id}/move-out/", {"move_out_date": "2025-01-31"}, format="json")

    resp = api.get(f"/api/move-histories/?tenant={tenant.id}&move_type=out")
    assert resp.status_code == 200
    results = resp.json()["results"]
    assert len(results) == 1
    assert results[0]["property_name"] == "Sakura Heights"

    history = api.get(f"/api/tenants/{tenant.id}/history/").json()
    assert [h["move_type"] for h in history] == ["out", "in"]

    resp = api.delete(f"/api/move-histories/{results[0]['id']}/")
    assert resp.status_code == 405


def test_move_history_rows_cannot_be_changed(tenant):
    history = MoveHistory.objects.get(tenant=tenant)
    history.notes = "rewritten"
    with pytest.raises(BusinessLogicError):
        history.save()
    with pytest.raises(BusinessLogicError):
        history.delete()


def test_reconcile_rooms_repairs_drifted_statuses(tenant, rooms):
    Room.objects.filter(id=rooms["101"].id).update(status=RoomStatus.VACANT)
    Room.objects.filter(id=rooms["102"].id).update(status=RoomStatus.OCCUPIED)

    call_command("reconcile_rooms")

    statuses = dict(Room.objects.values_list("room_number", "status"))
    assert statuses == {"101": "occupied", "102": "vacant", "201": "reserved"}


def _dto(name, room_id):
    return MoveInDTO(name=name, move_in_date=date(2025, 2, 1), room_id=room_id)
