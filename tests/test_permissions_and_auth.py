"""Sign-in, admin roles and the browser redirect."""
from datetime import date

import pytest
from django.contrib.admin.sites import site
from django.core.exceptions import ValidationError as DjangoValidationError
from django.test import RequestFactory

from core.constants import RoomStatus
from properties.admin import RoomInline
from properties.models import Property, Room
from tenants.admin import TenantAdmin
from tenants.models import Tenant
from users.models import Admin

from .conftest import TEST_PASSWORD


def test_anonymous_api_request_is_rejected(anon_client, db):
    resp = anon_client.get("/api/properties/")
    assert resp.status_code == 401


def test_anonymous_browser_is_sent_to_sign_in(anon_client, db):
    resp = anon_client.get("/api/properties/", HTTP_ACCEPT="text/html")
    assert resp.status_code == 302
    assert resp["Location"] == "/api-auth/login/?next=%2Fapi%2Fproperties%2F"


def test_public_listing_is_not_redirected(anon_client, db):
    resp = anon_client.get("/api/public/properties/", HTTP_ACCEPT="text/html")
    assert resp.status_code == 200


def test_jwt_login(anon_client, office_admin):
    resp = anon_client.post("/api/auth/login/", {"email": office_admin.email, "password": TEST_PASSWORD},
                            format="json")
    assert resp.status_code == 200
    token = resp.json()["access"]

    anon_client.credentials(HTTP_AUTHORIZATION=f"Bearer {token}")
    assert anon_client.get("/api/properties/").status_code == 200


def test_jwt_login_with_wrong_password(anon_client, office_admin):
    resp = anon_client.post("/api/auth/login/", {"email": office_admin.email, "password": "nope"},
                            format="json")
    assert resp.status_code == 401


def test_session_login_me_and_logout(anon_client, office_admin):
    resp = anon_client.post("/api/auth/session/", {"email": office_admin.email, "password": TEST_PASSWORD},
                            format="json")
    assert resp.status_code == 200
    assert resp.json()["role"] == "admin"
    assert "password" not in resp.json()

    me = anon_client.get("/api/auth/me/")
    assert me.status_code == 200
    assert me.json()["email"] == office_admin.email

    assert anon_client.post("/api/auth/logout/").status_code == 204
    assert anon_client.get("/api/auth/me/").status_code in (401, 403)


def test_session_login_with_wrong_password(anon_client, office_admin):
    resp = anon_client.post("/api/auth/session/", {"email": office_admin.email, "password": "nope"},
                            format="json")
    assert resp.status_code == 401


def test_admin_can_list_but_not_create_admins(api):
    assert api.get("/api/admins/").status_code == 200
    resp = api.post("/api/admins/", {
        "email": "new@example.com", "name": "New", "password": TEST_PASSWORD,
    }, format="json")
    assert resp.status_code == 403


def test_super_admin_creates_admin(super_api):
    resp = super_api.post("/api/admins/", {
        "email": "new@example.com", "name": "New Staff", "password": TEST_PASSWORD,
    }, format="json")
    assert resp.status_code == 201
    assert "password" not in resp.json()

    created = Admin.objects.get(email="new@example.com")
    assert created.role == "admin"
    assert created.check_password(TEST_PASSWORD)


def test_new_admin_needs_a_password(super_api):
    resp = super_api.post("/api/admins/", {"email": "new@example.com", "name": "New"}, format="json")
    assert resp.status_code == 400


def test_super_admin_cannot_delete_self(super_api, super_admin):
    resp = super_api.delete(f"/api/admins/{super_admin.id}/")
    assert resp.status_code == 409
    assert resp.json()["code"] == "CANNOT_DELETE_SELF"


def test_super_admin_deletes_other_admin(super_api, office_admin):
    resp = super_api.delete(f"/api/admins/{office_admin.id}/")
    assert resp.status_code == 204
    assert not Admin.objects.filter(id=office_admin.id).exists()


def test_admin_site_bulk_delete_frees_room(tenant, super_admin):
    request = RequestFactory().post("/admin/tenants/tenant/")
    request.user = super_admin

    TenantAdmin(Tenant, site).delete_queryset(request, Tenant.objects.filter(id=tenant.id))

    assert not Tenant.objects.filter(id=tenant.id).exists()
    tenant.room.refresh_from_db()
    assert tenant.room.status == RoomStatus.VACANT


def test_property_form_offers_no_room_deletion(super_admin, sakura):
    request = RequestFactory().get(f"/admin/properties/property/{sakura.id}/change/")
    request.user = super_admin

    formset = RoomInline(Property, site).get_formset(request, sakura)

    assert not formset.can_delete


def test_admin_site_refuses_deleting_occupied_room(client, super_admin, tenant, rooms):
    client.force_login(super_admin)
    occupied, vacant = rooms["101"], rooms["102"]

    resp = client.post(f"/admin/properties/room/{occupied.id}/delete/", {"post": "yes"})
    assert resp.status_code == 403
    assert Room.objects.filter(id=occupied.id).exists()

    resp = client.post(f"/admin/properties/room/{vacant.id}/delete/", {"post": "yes"})
    assert resp.status_code == 302
    assert not Room.objects.filter(id=vacant.id).exists()


def test_admin_site_bulk_delete_with_occupied_room_is_refused(client, super_admin, tenant, rooms):
    client.force_login(super_admin)
    ids = [rooms["101"].id, rooms["102"].id]

    resp = client.post("/admin/properties/room/", {
        "action": "delete_selected", "_selected_action": ids, "post": "yes",
    })

    assert resp.status_code == 403
    assert Room.objects.filter(id__in=ids).count() == 2
    tenant.refresh_from_db()
    assert tenant.room_id == rooms["101"].id


def test_admin_site_refuses_deleting_property_with_tenant(client, super_admin, tenant, sakura):
    client.force_login(super_admin)
    resp = client.post(f"/admin/properties/property/{sakura.id}/delete/", {"post": "yes"})
    assert resp.status_code == 403
    assert Property.objects.filter(id=sakura.id).exists()


def test_tenant_contract_dates_checked_on_clean(tenant):
    tenant.contract_end_date = date(2024, 3, 31)
    with pytest.raises(DjangoValidationError) as excinfo:
        tenant.full_clean()
    assert "contract_end_date" in excinfo.value.message_dict
