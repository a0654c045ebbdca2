"""
Shared fixtures: admins, API clients and a small property with rooms.
"""
from datetime import date
from decimal import Decimal

import pytest
from rest_framework.test import APIClient

from core.constants import RoomStatus
from core.dto import MoveInDTO
from occupancy.services import OccupancyService
from properties.models import Property, Room
from users.models import Admin

TEST_PASSWORD = "Rental-Office-2024!"


@pytest.fixture
def office_admin(db):
    return Admin.objects.create_user(email="staff@example.com", password=TEST_PASSWORD, name="Office Staff")


@pytest.fixture
def super_admin(db):
    return Admin.objects.create_superuser(email="owner@example.com", password=TEST_PASSWORD, name="Owner")


@pytest.fixture
def anon_client():
    return APIClient()


@pytest.fixture
def api(office_admin):
    """Client signed in as a regular admin"""
    client = APIClient()
    client.force_authenticate(user=office_admin)
    return client


@pytest.fixture
def super_api(super_admin):
    client = APIClient()
    client.force_authenticate(user=super_admin)
    return client


@pytest.fixture
def sakura(db):
    return Property.objects.create(name="Sakura Heights", address="1-2-3 Jingumae, Shibuya")


@pytest.fixture
def rooms(sakura):
    """101 and 102 vacant, 201 reserved"""
    return {
        "101": Room.objects.create(property=sakura, room_number="101", floor=1,
                                   rent=Decimal("50000"), management_fee=Decimal("5000")),
        "102": Room.objects.create(property=sakura, room_number="102", floor=1,
                                   rent=Decimal("62000"), management_fee=Decimal("5000")),
        "201": Room.objects.create(property=sakura, room_number="201", floor=2,
                                   rent=Decimal("48000"), status=RoomStatus.RESERVED),
    }


@pytest.fixture
def tenant(rooms, office_admin):
    """Active tenant living in room 101"""
    return OccupancyService().move_in(
        office_admin,
        MoveInDTO(name="Yamada Taro", move_in_date=date(2024, 4, 1), room_id=rooms["101"].id),
    )
